from typing import Optional
from pydantic import BaseModel, Field, field_validator
from datetime import datetime

from worldsmith.models.enums import MarkerType
from worldsmith.schemas.base import blank_to_none


class LocationBase(BaseModel):
    """Base location properties; x and y place the marker on the world map"""
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    image_url: Optional[str] = None
    location_type: Optional[str] = Field(None, max_length=50)
    x: Optional[int] = None
    y: Optional[int] = None
    marker_type: MarkerType = MarkerType.STANDARD

    @field_validator("x", "y", mode="before")
    @classmethod
    def _blank_coordinates(cls, value):
        return blank_to_none(value)


class LocationCreate(LocationBase):
    """Properties required to create a location"""
    region_id: int


class LocationUpdate(LocationBase):
    """Properties that can be updated; region_id may move it within the same world"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    marker_type: Optional[MarkerType] = None
    region_id: Optional[int] = None


class LocationResponse(LocationBase):
    """Response model with all location properties"""
    id: int
    region_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
