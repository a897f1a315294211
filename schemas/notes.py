from pydantic import BaseModel, Field
from typing import Optional


class NoteCreate(BaseModel):
    title: str = Field(min_length=1)
    content: str = ""

class NoteUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = None

class Note(NoteCreate):
    id: int
    created_at: str
