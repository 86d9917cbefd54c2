#!/usr/bin/env python
# Form schemas: the server's create and update schemas plus the rules the UI enforces
from typing import Any, Dict, List, Optional, Tuple, Type
from pydantic import BaseModel, Field, ValidationError

from worldsmith.schemas import (
    WorldCreate, RegionCreate, LocationCreate, CharacterCreate,
    CreatureCreate, SpellCreate, LoreEntryCreate,
    WorldUpdate, RegionUpdate, LocationUpdate, CharacterUpdate,
    CreatureUpdate, SpellUpdate, LoreEntryUpdate
)
from worldsmith_client.utils.config import config
from worldsmith_client.utils.helpers import ABILITY_NAMES

DEFAULT_LORE_CATEGORY = "Historical Events"

LORE_CATEGORIES = [
    "Historical Events",
    "Factions & Organizations",
    "Religions & Deities",
    "Legends & Myths",
    "Cultures & Peoples",
    "Artifacts & Relics",
]


def default_abilities() -> Dict[str, int]:
    return {name: 10 for name in ABILITY_NAMES}


class WorldForm(WorldCreate):
    name: str = Field(..., min_length=2, max_length=100)
    description: str = Field(..., min_length=10)
    user_id: int = Field(default_factory=lambda: config.default_user_id)


class RegionForm(RegionCreate):
    name: str = Field(..., min_length=2, max_length=100)
    description: str = Field(..., min_length=10)


class LocationForm(LocationCreate):
    name: str = Field(..., min_length=2, max_length=100)
    description: str = Field(..., min_length=10)
    x: Optional[int] = 250
    y: Optional[int] = 250


class CharacterForm(CharacterCreate):
    name: str = Field(..., min_length=2, max_length=100)


class CreatureForm(CreatureCreate):
    name: str = Field(..., min_length=2, max_length=100)
    challenge_rating: Optional[str] = Field("1", max_length=10)
    armor_class: Optional[int] = 10
    abilities: Optional[Dict[str, int]] = Field(default_factory=default_abilities)


class SpellForm(SpellCreate):
    name: str = Field(..., min_length=2, max_length=100)


class LoreForm(LoreEntryCreate):
    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1)
    category: str = Field(DEFAULT_LORE_CATEGORY, min_length=1, max_length=100)


# Edit forms carry no defaults: only the fields the user typed are sent,
# so anything left blank keeps its stored value.

class WorldEditForm(WorldUpdate):
    name: Optional[str] = Field(None, min_length=2, max_length=100)
    description: Optional[str] = Field(None, min_length=10)


class RegionEditForm(RegionUpdate):
    name: Optional[str] = Field(None, min_length=2, max_length=100)
    description: Optional[str] = Field(None, min_length=10)


class LocationEditForm(LocationUpdate):
    name: Optional[str] = Field(None, min_length=2, max_length=100)
    description: Optional[str] = Field(None, min_length=10)


class CharacterEditForm(CharacterUpdate):
    name: Optional[str] = Field(None, min_length=2, max_length=100)


class CreatureEditForm(CreatureUpdate):
    name: Optional[str] = Field(None, min_length=2, max_length=100)


class SpellEditForm(SpellUpdate):
    name: Optional[str] = Field(None, min_length=2, max_length=100)


class LoreEditForm(LoreEntryUpdate):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    content: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = Field(None, min_length=1, max_length=100)


def validate_form(form_class: Type[BaseModel], data: Dict[str, Any]) -> Tuple[Optional[BaseModel], List[str]]:
    """
    Validate raw form input.

    Returns the parsed form and no errors, or None and one message per
    invalid field.
    """
    try:
        return form_class(**data), []
    except ValidationError as e:
        errors = []
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"]) or "form"
            errors.append(f"{field}: {error['msg']}")
        return None, errors
