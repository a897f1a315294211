from pydantic import BaseModel


class RelayRoomResponse(BaseModel):
    uid: str
    connections: int
