from typing import Optional
from pydantic import BaseModel, Field
from datetime import datetime


class WorldBase(BaseModel):
    """Base world properties"""
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    image_url: Optional[str] = None


class WorldCreate(WorldBase):
    """Properties required to create a world"""
    user_id: int


class WorldUpdate(BaseModel):
    """Properties that can be updated"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    image_url: Optional[str] = None


class WorldResponse(WorldBase):
    """Response model with all world properties"""
    id: int
    user_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
