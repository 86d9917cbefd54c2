"""
Tests for presentation helpers, client-side filtering, flip cards,
the world summary and the ASCII map.
"""

import pytest
from rich.console import Console

from worldsmith_client.ui.cards import character_card, creature_card, spell_card
from worldsmith_client.ui.map_view import MapRenderer
from worldsmith_client.ui.world_summary import world_summary
from worldsmith_client.utils.filters import filter_records, category_options
from worldsmith_client.utils.helpers import ability_scores, calculate_xp, format_coordinates


def render_text(renderable) -> str:
    console = Console(record=True, width=120, color_system=None)
    console.print(renderable)
    return console.export_text()


@pytest.fixture
def creatures():
    return [
        {"id": 1, "name": "Young Red Dragon", "description": "Greedy and vain.", "rarity": "legendary"},
        {"id": 2, "name": "Goblin", "description": "Small raiders.", "rarity": "common"},
    ]


class TestChallengeRating:
    @pytest.mark.parametrize("cr,xp", [
        ("5", "1,800"),
        ("1/4", "50"),
        ("0", "10"),
        ("30", "155,000"),
        ("100", "Unknown"),
        ("7", "Unknown"),
        (None, "Unknown"),
        ("", "Unknown"),
    ])
    def test_xp(self, cr, xp):
        assert calculate_xp(cr) == xp


class TestHelpers:
    def test_ability_template(self):
        scores = ability_scores({"STR": 23, "CHA": 19, "LUCK": 3})
        assert scores == [("STR", "23"), ("DEX", "-"), ("CON", "-"), ("INT", "-"), ("WIS", "-"), ("CHA", "19")]

    def test_ability_template_without_data(self):
        assert [score for _, score in ability_scores(None)] == ["-"] * 6

    def test_coordinates(self):
        assert format_coordinates(None, 12) == "X: Not set, Y: 12"


class TestFilters:
    def test_search_is_case_insensitive(self, creatures):
        assert [c["name"] for c in filter_records(creatures, "creatures", "dragon")] == ["Young Red Dragon"]

    def test_search_matches_description(self, creatures):
        assert [c["name"] for c in filter_records(creatures, "creatures", "RAIDERS")] == ["Goblin"]

    def test_category(self, creatures):
        assert [c["name"] for c in filter_records(creatures, "creatures", "", "common")] == ["Goblin"]
        assert len(filter_records(creatures, "creatures", "", "all")) == 2

    def test_search_and_category_combine(self, creatures):
        assert filter_records(creatures, "creatures", "dragon", "common") == []

    def test_lore_searches_title_and_content(self):
        entries = [
            {"id": 1, "title": "The Sundering", "content": "The sky tore open.", "category": "Historical Events"},
            {"id": 2, "title": "Silver Flame", "content": "Dragon hunters.", "category": "Factions & Organizations"},
        ]
        assert [e["id"] for e in filter_records(entries, "lore", "sky")] == [1]
        assert [e["id"] for e in filter_records(entries, "lore", "", "Factions & Organizations")] == [2]

    def test_category_options(self, creatures):
        assert category_options(creatures, "creatures") == ["all", "common", "legendary"]

    def test_location_search_covers_type(self):
        locations = [
            {"id": 1, "name": "The Prancing Stag", "description": None, "location_type": "Tavern", "region_id": 1},
            {"id": 2, "name": "Dragon's Maw", "description": "A smoking cave.", "location_type": "Lair", "region_id": 2},
        ]
        assert [l["id"] for l in filter_records(locations, "locations", "tavern")] == [1]
        assert [l["id"] for l in filter_records(locations, "locations", "smoking")] == [2]

    def test_locations_filter_by_region(self):
        locations = [
            {"id": 1, "name": "Thornwick", "region_id": 1, "marker_type": "quest"},
            {"id": 2, "name": "Dragon's Maw", "region_id": 2, "marker_type": "danger"},
            {"id": 3, "name": "Old Mill", "region_id": 1, "marker_type": "standard"},
        ]
        # The prompt hands the region id back as text
        assert [l["id"] for l in filter_records(locations, "locations", "", "1")] == [1, 3]
        assert [l["id"] for l in filter_records(locations, "locations", "", 2)] == [2]
        assert filter_records(locations, "locations", "", "danger") == []
        assert category_options(locations, "locations") == ["all", "1", "2"]


class TestCards:
    def test_character_fallbacks(self):
        text = render_text(character_card({"id": 1, "name": "Stranger", "region_id": None}))
        assert "NPC" in text
        assert "Unknown" in text
        assert "Region: Unknown" in text

    def test_character_region_and_back(self):
        character = {
            "id": 1, "name": "Elara", "race": "Elf", "character_type": "ally",
            "region_id": 5, "appearance": "Silver hair", "abilities": ["Herbalism"]
        }
        regions = [{"id": 5, "name": "Whispering Woods"}]

        front = render_text(character_card(character, regions))
        assert "ALLY" in front
        assert "Region: Whispering Woods" in front

        back = render_text(character_card(character, regions, flipped=True))
        assert "Silver hair" in back
        assert "- Herbalism" in back

    def test_creature_fallbacks(self):
        text = render_text(creature_card({"id": 2, "name": "Goblin", "rarity": None, "region_id": 42}, []))
        assert "Common" in text
        assert "Region: Various" in text

    def test_creature_back(self):
        creature = {
            "id": 1, "name": "Young Red Dragon", "challenge_rating": "10", "armor_class": 18,
            "abilities": {"STR": 23}, "special_attacks": ["Fire Breath"]
        }
        text = render_text(creature_card(creature, flipped=True))
        assert "5,900 XP" in text
        assert "18 (Natural Armor)" in text
        assert "Fire Breath" in text
        assert "23" in text

    def test_spell_fallbacks(self):
        spell = {"id": 1, "name": "Mystery", "school": None, "level": None, "creator_character_id": 9}
        front = render_text(spell_card(spell, []))
        assert "Unknown" in front
        assert "Level ?" in front

        back = render_text(spell_card(spell, [], flipped=True))
        assert "Unknown wizard" in back

    def test_spell_creator(self):
        spell = {"id": 1, "name": "Thornwall", "school": "Conjuration", "level": 2, "creator_character_id": 3}
        back = render_text(spell_card(spell, [{"id": 3, "name": "Elara"}], flipped=True))
        assert "Elara" in back

    def test_spell_without_creator_has_no_creator_section(self):
        spell = {"id": 1, "name": "Fireball", "school": "Evocation", "level": 3, "creator_character_id": None}
        assert "Creator" not in render_text(spell_card(spell, [], flipped=True))


class TestWorldSummary:
    def test_limits_regions_and_factions(self):
        world = {"id": 1, "name": "Eldoria", "description": "Ancient forests."}
        regions = [{"id": i, "name": f"Region {i}", "description": ""} for i in range(1, 6)]
        lore = [
            {"id": 1, "title": "The Sundering", "category": "Historical Events"},
            {"id": 2, "title": "Silver Flame", "category": "Factions & Organizations"},
            {"id": 3, "title": "Ash Cult", "category": "Factions & Organizations"},
            {"id": 4, "title": "Merchant League", "category": "Factions & Organizations"},
            {"id": 5, "title": "Night Court", "category": "Factions & Organizations"},
        ]
        text = render_text(world_summary(world, regions, lore))

        assert "Ancient forests." in text
        assert "Region 3" in text
        assert "Region 4" not in text
        assert "Merchant League" in text
        assert "Night Court" not in text
        assert "The Sundering" not in text

    def test_loading(self):
        assert "Loading world information..." in render_text(world_summary(None, None, None))


class TestMap:
    def test_markers_and_legend(self):
        locations = [
            {"id": 1, "name": "Thornwick", "x": 0, "y": 0, "marker_type": "quest", "region_id": 1},
            {"id": 2, "name": "Dragon's Maw", "x": 499, "y": 499, "marker_type": "danger", "region_id": 99},
        ]
        rendered = MapRenderer.render(locations, [{"id": 1, "name": "Whispering Woods"}], zoom=1)
        lines = rendered.splitlines()

        assert "Q1" in lines[1]
        assert "D1" in lines[6]
        assert "Q1  Thornwick (Whispering Woods) at 0, 0" in rendered
        assert "Dragon's Maw (Unknown)" in rendered
        assert "Danger Zone" in rendered

    def test_missing_coordinates_default_to_fifty(self):
        rendered = MapRenderer.render([{"id": 1, "name": "Hidden", "x": None, "y": None}], [])
        assert "at 50, 50" in rendered
        assert "L1" in rendered.splitlines()[1]

    def test_zoom_changes_grid(self):
        assert MapRenderer.grid_size(1) == (10, 6)
        assert MapRenderer.grid_size(2) == (20, 12)
        small = MapRenderer.render([], [], zoom=1).splitlines()
        large = MapRenderer.render([], [], zoom=2).splitlines()
        assert len(large) > len(small)

    def test_shared_cell(self):
        locations = [
            {"id": 1, "name": "A", "x": 10, "y": 10},
            {"id": 2, "name": "B", "x": 12, "y": 12},
        ]
        assert "**" in MapRenderer.render(locations, [], zoom=1).splitlines()[1]

    def test_empty_map(self):
        assert "No locations have been placed" in MapRenderer.render([], [])

    def test_two_digit_labels_stay_apart(self):
        # Eleven standard markers side by side along the top row
        locations = [
            {"id": n, "name": f"Camp {n}", "x": (n - 1) * 25, "y": 0}
            for n in range(1, 12)
        ]
        lines = MapRenderer.render(locations, [], zoom=2).splitlines()

        assert lines[1].split()[1:12] == [f"L{n}" for n in range(1, 12)]
        assert len(lines[0]) == len(lines[1])
        assert " L10 L11 " in lines[1]
