from pydantic import BaseModel, Field
from typing import Optional


class MovieCreate(BaseModel):
    title: str = Field(min_length=1)
    year: int = Field(ge=1870, le=2100)
    genre: str
    director: str
    rating: Optional[float] = Field(None, ge=0, le=10)
    runtime: Optional[int] = Field(None, ge=1, description="Runtime in minutes")

class MovieUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1)
    year: Optional[int] = Field(None, ge=1870, le=2100)
    genre: Optional[str] = None
    director: Optional[str] = None
    rating: Optional[float] = Field(None, ge=0, le=10)
    runtime: Optional[int] = Field(None, ge=1)

class Movie(MovieCreate):
    id: int
