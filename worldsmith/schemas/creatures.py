from typing import Dict, List, Optional
from pydantic import BaseModel, Field, field_validator
from datetime import datetime

from worldsmith.schemas.base import (
    blank_to_none, number_to_str, parse_ability_scores, split_comma_list
)


class CreatureBase(BaseModel):
    """Base creature properties; abilities map score names such as STR to values"""
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    image_url: Optional[str] = None
    creature_type: Optional[str] = Field(None, max_length=50)
    rarity: Optional[str] = Field("common", max_length=30)
    challenge_rating: Optional[str] = Field(None, max_length=10)
    armor_class: Optional[int] = None
    hit_points: Optional[str] = Field(None, max_length=50)
    speed: Optional[str] = Field(None, max_length=100)
    abilities: Optional[Dict[str, int]] = None
    special_attacks: Optional[List[str]] = None
    element_type: Optional[str] = Field(None, max_length=30)
    region_id: Optional[int] = None

    @field_validator("challenge_rating", "hit_points", mode="before")
    @classmethod
    def _numbers_as_text(cls, value):
        return number_to_str(value)

    @field_validator("abilities", mode="before")
    @classmethod
    def _parse_abilities(cls, value):
        return parse_ability_scores(value)

    @field_validator("special_attacks", mode="before")
    @classmethod
    def _split_attacks(cls, value):
        return split_comma_list(value)

    @field_validator("armor_class", "region_id", mode="before")
    @classmethod
    def _blank_numbers(cls, value):
        return blank_to_none(value)


class CreatureCreate(CreatureBase):
    """Properties required to create a creature"""
    world_id: int


class CreatureUpdate(CreatureBase):
    """Properties that can be updated"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    rarity: Optional[str] = Field(None, max_length=30)


class CreatureResponse(CreatureBase):
    """Response model with all creature properties"""
    id: int
    world_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
