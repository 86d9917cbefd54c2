from typing import Optional
from pydantic import BaseModel, Field
from datetime import datetime


class RegionBase(BaseModel):
    """Base region properties"""
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    image_url: Optional[str] = None
    type: Optional[str] = Field(None, max_length=50)


class RegionCreate(RegionBase):
    """Properties required to create a region"""
    world_id: int


class RegionUpdate(BaseModel):
    """Properties that can be updated; a region never changes world"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    image_url: Optional[str] = None
    type: Optional[str] = Field(None, max_length=50)


class RegionResponse(RegionBase):
    """Response model with all region properties"""
    id: int
    world_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
