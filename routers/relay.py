from fastapi import APIRouter, Request
from routers.crud import REST_PREFIX
from relay import room_members
from schemas.relay import RelayRoomResponse
from logging_config import get_logger

logger = get_logger(__name__)

relay_router = APIRouter(prefix=f"{REST_PREFIX}/relay", tags=["relay"])


@relay_router.get("/rooms/{uid}", response_model=RelayRoomResponse)
async def relay_room(uid: str, request: Request):
    """Number of Socket.IO connections this instance holds in room ``uid``."""
    connections = len(room_members(request.app.state.sio, uid))
    logger.debug(f"Relay room {uid} has {connections} connection(s)")
    return RelayRoomResponse(uid=uid, connections=connections)
