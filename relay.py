"""Socket.IO file-sharing relay.

Two clients rendezvous on an identifier agreed out of band. The sender joins
the room named after its own ``uid``; the receiver joins its room and announces
itself to the sender's room with ``init``. File metadata and raw chunks are then
forwarded to the target room as they arrive. Nothing is buffered or stored, and
nothing is reported back to the emitting client.

Room membership is held by the Socket.IO client manager, which drops a
connection from its rooms when it disconnects. With ``RELAY_BACKEND=redis`` the
manager is an ``AsyncRedisManager`` and room emits reach every instance.
"""

from typing import Any, List, Optional

import socketio

from constants import CORS_ORIGINS, RELAY_BACKEND, REDIS_URL
from logging_config import get_logger

logger = get_logger(__name__)

NAMESPACE = "/"

# inbound event -> handler method
RELAY_EVENTS = {
    "sender-join": "sender_join",
    "receiver-join": "receiver_join",
    "file-meta": "file_meta",
    "fs-start": "fs_start",
    "file-raw": "file_raw",
}


def _uid(data: Any, key: str = "uid") -> Optional[str]:
    if not isinstance(data, dict):
        return None
    value = data.get(key)
    if value is None or value == "":
        return None
    return str(value)


def room_members(server: socketio.AsyncServer, uid: str) -> List[str]:
    """Connections joined to room ``uid`` on this instance."""
    try:
        return [sid for sid, _ in server.manager.get_participants(NAMESPACE, uid)]
    except KeyError:
        # older managers raise for rooms that were never created
        return []


class FileRelay:
    def __init__(self, server: socketio.AsyncServer):
        self.server = server

    def register(self) -> None:
        for event, method in RELAY_EVENTS.items():
            self.server.on(event, handler=getattr(self, method))
        self.server.on("disconnect", handler=self.disconnect)

    async def join(self, sid: str, uid: str) -> None:
        # entering a room twice is a no-op in the manager
        await self.server.enter_room(sid, uid)

    async def forward(self, sid: str, uid: str, event: str, payload: Any) -> None:
        """Emit ``event`` to every member of room ``uid`` except ``sid``."""
        await self.server.emit(event, payload, room=uid, skip_sid=sid)
        logger.debug(f"Forwarded {event} from {sid} to room {uid}")

    async def sender_join(self, sid: str, data: Any) -> None:
        uid = _uid(data)
        if uid is None:
            logger.warning(f"Ignoring sender-join without uid from {sid}")
            return
        await self.join(sid, uid)
        logger.info(f"Sender {sid} joined room {uid}")

    async def receiver_join(self, sid: str, data: Any) -> None:
        uid = _uid(data)
        sender_uid = _uid(data, "sender_uid")
        if uid is None or sender_uid is None:
            logger.warning(f"Ignoring receiver-join without uid/sender_uid from {sid}")
            return
        await self.join(sid, uid)
        logger.info(f"Receiver {sid} joined room {uid}, announcing to room {sender_uid}")
        await self.forward(sid, sender_uid, "init", data["uid"])

    async def file_meta(self, sid: str, data: Any) -> None:
        uid = _uid(data)
        if uid is None:
            logger.warning(f"Ignoring file-meta without uid from {sid}")
            return
        await self.forward(sid, uid, "fs-meta", data.get("metadata"))

    async def fs_start(self, sid: str, data: Any) -> None:
        uid = _uid(data)
        if uid is None:
            logger.warning(f"Ignoring fs-start without uid from {sid}")
            return
        await self.forward(sid, uid, "fs-share", {})

    async def file_raw(self, sid: str, data: Any) -> None:
        uid = _uid(data)
        if uid is None:
            logger.warning(f"Ignoring file-raw without uid from {sid}")
            return
        await self.forward(sid, uid, "fs-share", data.get("buffer"))

    async def disconnect(self, sid: str, *args) -> None:
        """Release every relay room the connection joined."""
        rooms = sorted(room for room in self.server.rooms(sid, NAMESPACE) if room != sid)
        for room in rooms:
            await self.server.leave_room(sid, room)
        if rooms:
            logger.info(f"Connection {sid} disconnected, leaving rooms: {rooms}")


def create_client_manager(backend: str = RELAY_BACKEND) -> Optional[socketio.AsyncManager]:
    if backend == "redis":
        logger.info(f"Using Redis client manager at {REDIS_URL.rsplit('@', 1)[-1]}")
        return socketio.AsyncRedisManager(REDIS_URL)
    if backend != "memory":
        raise ValueError(f"Unknown relay backend: {backend}")
    logger.info("Using in-memory client manager")
    return None


def create_socket_server(backend: str = RELAY_BACKEND) -> socketio.AsyncServer:
    sio = socketio.AsyncServer(
        async_mode="asgi",
        cors_allowed_origins=CORS_ORIGINS if CORS_ORIGINS != ["*"] else "*",
        client_manager=create_client_manager(backend),
        # chunks from one connection are relayed in the order they arrive
        async_handlers=False,
        logger=False,
        engineio_logger=False,
    )
    FileRelay(sio).register()
    return sio
