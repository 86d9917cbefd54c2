"""
Tests for request schema coercion and client form rules.
"""

import pytest
from pydantic import ValidationError

from worldsmith.schemas import CreatureCreate, CharacterCreate, LocationCreate, SpellCreate
from worldsmith.schemas.base import parse_ability_scores, split_comma_list
from worldsmith_client.forms import (
    WorldForm, LocationForm, CreatureForm, LoreForm, validate_form
)


class TestServerSchemas:
    def test_location_numeric_strings(self):
        location = LocationCreate(name="Thornwick", region_id="3", x="250", y="")
        assert (location.region_id, location.x, location.y) == (3, 250, None)

    def test_character_blank_references(self):
        character = CharacterCreate(name="Elara", world_id=1, region_id="", location_id="")
        assert character.region_id is None
        assert character.location_id is None

    def test_creature_abilities_json(self):
        creature = CreatureCreate(name="Goblin", world_id=1, abilities='{"STR": 8, "DEX": 14}')
        assert creature.abilities == {"STR": 8, "DEX": 14}

    def test_spell_blank_level(self):
        assert SpellCreate(name="Mystery", world_id=1, level="").level is None

    def test_name_required(self):
        with pytest.raises(ValidationError):
            CharacterCreate(name="", world_id=1)

    @pytest.mark.parametrize("value,expected", [
        ("STR: 10, DEX: 12", {"STR": 10, "DEX": 12}),
        ("STR 10, DEX: x", {}),
        ("", {}),
        (None, None),
    ])
    def test_parse_ability_scores(self, value, expected):
        assert parse_ability_scores(value) == expected

    def test_split_comma_list(self):
        assert split_comma_list(" Fire Breath , ,Bite") == ["Fire Breath", "Bite"]
        assert split_comma_list(["Bite"]) == ["Bite"]


class TestForms:
    def test_world_form_defaults_user(self):
        form = WorldForm(name="Eldoria", description="Ancient forests.")
        assert form.user_id == 1

    def test_world_form_rules(self):
        form, errors = validate_form(WorldForm, {"name": "E", "description": "Too short"})
        assert form is None
        assert len(errors) == 2
        assert any(error.startswith("name:") for error in errors)
        assert any(error.startswith("description:") for error in errors)

    def test_location_defaults(self):
        form = LocationForm(name="Thornwick", description="A sleepy hamlet.", region_id=1)
        assert (form.x, form.y) == (250, 250)
        assert form.marker_type.value == "standard"

    def test_creature_defaults(self):
        form = CreatureForm(name="Goblin", world_id=1)
        assert form.rarity == "common"
        assert form.challenge_rating == "1"
        assert form.armor_class == 10
        assert set(form.abilities.values()) == {10}
        assert len(form.abilities) == 6

    def test_lore_defaults_and_rules(self):
        assert LoreForm(title="A", content="B", world_id=1).category == "Historical Events"
        form, errors = validate_form(LoreForm, {"title": "A", "content": "B", "category": "", "world_id": 1})
        assert form is None
        assert errors[0].startswith("category:")
