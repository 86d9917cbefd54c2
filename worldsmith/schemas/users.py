from typing import Optional
from pydantic import BaseModel, Field
from datetime import datetime


class UserBase(BaseModel):
    """Base user properties"""
    username: str = Field(..., min_length=3, max_length=100)


class UserCreate(UserBase):
    """Properties required to register a user"""
    password: str = Field(..., min_length=6, max_length=128)


class UserResponse(UserBase):
    """Response model; the password hash never leaves the server"""
    id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
