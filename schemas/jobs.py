from pydantic import BaseModel, Field
from typing import Optional


class JobCreate(BaseModel):
    title: str = Field(min_length=1)
    company: str
    location: str
    job_type: str = "full-time"
    salary: Optional[int] = Field(None, ge=0)
    remote: bool = False
    posted_at: Optional[str] = Field(None, description="ISO date the job was posted")

class JobUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1)
    company: Optional[str] = None
    location: Optional[str] = None
    job_type: Optional[str] = None
    salary: Optional[int] = Field(None, ge=0)
    remote: Optional[bool] = None
    posted_at: Optional[str] = None

class Job(JobCreate):
    id: int
