from typing import List, Optional
from pydantic import BaseModel, Field, field_validator
from datetime import datetime

from worldsmith.models.enums import CharacterType
from worldsmith.schemas.base import blank_to_none, split_comma_list


class CharacterBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    appearance: Optional[str] = None
    personality: Optional[str] = None
    abilities: Optional[List[str]] = None
    image_url: Optional[str] = None
    race: Optional[str] = Field(None, max_length=50)
    character_type: CharacterType = CharacterType.NPC
    region_id: Optional[int] = None
    location_id: Optional[int] = None

    @field_validator("abilities", mode="before")
    @classmethod
    def _split_abilities(cls, value):
        return split_comma_list(value)

    @field_validator("character_type", mode="before")
    @classmethod
    def _lower_character_type(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("region_id", "location_id", mode="before")
    @classmethod
    def _blank_references(cls, value):
        return blank_to_none(value)


class CharacterCreate(CharacterBase):
    """
    Fields required to create a character.
    Region and location are optional but must belong to the same world.
    """
    world_id: int


class CharacterUpdate(CharacterBase):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    character_type: Optional[CharacterType] = None


class CharacterResponse(CharacterBase):
    id: int
    world_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
