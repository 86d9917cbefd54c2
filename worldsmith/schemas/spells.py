from typing import Optional
from pydantic import BaseModel, Field, field_validator
from datetime import datetime

from worldsmith.schemas.base import blank_to_none


class SpellBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    level: Optional[int] = Field(None, ge=0, le=9)
    school: Optional[str] = Field(None, max_length=50)
    casting_time: Optional[str] = Field(None, max_length=50)
    range: Optional[str] = Field(None, max_length=50)
    components: Optional[str] = Field(None, max_length=200)
    duration: Optional[str] = Field(None, max_length=50)
    description: Optional[str] = None
    image_url: Optional[str] = None
    creator_character_id: Optional[int] = None

    @field_validator("level", "creator_character_id", mode="before")
    @classmethod
    def _blank_numbers(cls, value):
        return blank_to_none(value)


class SpellCreate(SpellBase):
    world_id: int


class SpellUpdate(SpellBase):
    name: Optional[str] = Field(None, min_length=1, max_length=100)


class SpellResponse(SpellBase):
    id: int
    world_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
