import logging

import pytest

from relay import RELAY_EVENTS, FileRelay, create_socket_server, room_members


class FakeServer:
    """Records the calls FileRelay makes on socketio.AsyncServer."""

    def __init__(self):
        self.handlers = {}
        self.joined = []
        self.left = []
        self.emitted = []

    def on(self, event, handler=None, namespace=None):
        self.handlers[event] = handler

    async def enter_room(self, sid, room, namespace=None):
        self.joined.append((sid, room))

    async def leave_room(self, sid, room, namespace=None):
        self.left.append((sid, room))

    async def emit(self, event, data=None, to=None, room=None, skip_sid=None, **kwargs):
        self.emitted.append((event, data, room, skip_sid))

    def rooms(self, sid, namespace=None):
        return [sid] + [room for joined_sid, room in self.joined if joined_sid == sid]

    async def trigger(self, event, sid, *args):
        await self.handlers[event](sid, *args)


@pytest.fixture
def server():
    fake = FakeServer()
    FileRelay(fake).register()
    return fake


def test_register_binds_every_event(server):
    assert set(server.handlers) == set(RELAY_EVENTS) | {"disconnect"}


def test_socket_server_registers_relay_handlers():
    sio = create_socket_server(backend="memory")

    assert set(RELAY_EVENTS) | {"disconnect"} <= set(sio.handlers["/"])
    assert sio.async_handlers is False


def test_unknown_backend_is_rejected():
    with pytest.raises(ValueError):
        create_socket_server(backend="carrier-pigeon")


def test_room_members_of_unknown_room():
    assert room_members(create_socket_server(backend="memory"), "nobody") == []


@pytest.mark.asyncio
async def test_joins_enter_rooms(server):
    await server.trigger("sender-join", "sender", {"uid": "A"})
    await server.trigger("receiver-join", "receiver", {"uid": "B", "sender_uid": "A"})

    assert server.joined == [("sender", "A"), ("receiver", "B")]


@pytest.mark.asyncio
async def test_receiver_join_announces_to_sender_room(server):
    await server.trigger("receiver-join", "receiver", {"uid": "B", "sender_uid": "A"})

    assert server.emitted == [("init", "B", "A", "receiver")]


@pytest.mark.asyncio
async def test_transfer_frames_target_room_and_skip_emitter(server):
    meta = {"filename": "photo.jpg", "total_buffer_size": 6, "buffer_size": 3}
    await server.trigger("file-meta", "sender", {"uid": "B", "metadata": meta})
    await server.trigger("fs-start", "sender", {"uid": "B"})
    await server.trigger("file-raw", "sender", {"uid": "B", "buffer": b"abc"})

    assert server.emitted == [
        ("fs-meta", meta, "B", "sender"),
        ("fs-share", {}, "B", "sender"),
        ("fs-share", b"abc", "B", "sender"),
    ]


@pytest.mark.asyncio
async def test_malformed_frames_are_ignored(server):
    await server.trigger("sender-join", "sender", "not-a-dict")
    await server.trigger("receiver-join", "receiver", {"uid": "B"})
    await server.trigger("file-raw", "sender", {"buffer": b"x"})
    await server.trigger("file-meta", "sender", {"uid": ""})
    await server.trigger("fs-start", "sender", None)

    assert server.joined == []
    assert server.emitted == []


@pytest.mark.asyncio
async def test_disconnect_with_and_without_reason(server, caplog):
    caplog.set_level(logging.INFO)
    await server.trigger("sender-join", "sender", {"uid": "A"})

    await server.trigger("disconnect", "sender", "client disconnect")
    await server.trigger("disconnect", "other")

    assert server.left == [("sender", "A")]
    assert "leaving rooms: ['A']" in caplog.text


@pytest.mark.asyncio
async def test_numeric_uid_is_forwarded_verbatim(server):
    await server.trigger("receiver-join", "receiver", {"uid": 7, "sender_uid": 42})

    assert server.emitted == [("init", 7, "42", "receiver")]
