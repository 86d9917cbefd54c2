from typing import Optional
from pydantic import BaseModel, Field
from datetime import datetime


class LoreEntryBase(BaseModel):
    """Base lore entry properties"""
    title: str = Field(..., min_length=1, max_length=200)
    content: Optional[str] = None
    category: Optional[str] = Field(None, max_length=100)
    image_url: Optional[str] = None


class LoreEntryCreate(LoreEntryBase):
    """Properties required to create a lore entry"""
    world_id: int


class LoreEntryUpdate(BaseModel):
    """Properties that can be updated"""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    content: Optional[str] = None
    category: Optional[str] = Field(None, max_length=100)
    image_url: Optional[str] = None


class LoreEntryResponse(LoreEntryBase):
    """Response model with all lore entry properties"""
    id: int
    world_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
