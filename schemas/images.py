from pydantic import BaseModel


class Image(BaseModel):
    id: int
    title: str
    url: str
    width: int
    height: int
    author: str
