from pydantic import BaseModel, Field


class SignupRequest(BaseModel):
    username: str = Field(min_length=3, max_length=32)
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    password: str = Field(min_length=6)

class LoginRequest(BaseModel):
    username: str = Field(description="Username or email")
    password: str

class Account(BaseModel):
    id: int
    username: str
    email: str
    created_at: str

class TokenResponse(BaseModel):
    token: str
    user: Account

class MessageResponse(BaseModel):
    message: str
