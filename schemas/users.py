from pydantic import BaseModel, Field
from typing import Optional


class UserCreate(BaseModel):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    gender: Optional[str] = None
    age: Optional[int] = Field(None, ge=0, le=150)
    phone: Optional[str] = None
    city: Optional[str] = None

class UserUpdate(BaseModel):
    first_name: Optional[str] = Field(None, min_length=1)
    last_name: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = Field(None, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    gender: Optional[str] = None
    age: Optional[int] = Field(None, ge=0, le=150)
    phone: Optional[str] = None
    city: Optional[str] = None

class User(UserCreate):
    id: int
