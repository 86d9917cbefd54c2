"""
Tests for page views: world selection, loading/empty/populated rendering
and the app state they read.
"""

from unittest.mock import patch

from rich.console import Console

from worldsmith_client.api.base_service import APIError
from worldsmith_client.game.state import AppState, MAX_ZOOM, MIN_ZOOM
from worldsmith_client.main import prompt_form
from worldsmith_client.ui.pages import (
    BestiaryPage, HomePage, LorePage, MapPage, CharactersPage, RegionsPage, LocationsPage
)


def render_text(renderable) -> str:
    console = Console(record=True, width=160, color_system=None)
    console.print(renderable)
    return console.export_text()


class TestAppState:
    def test_select_first_world_by_default(self):
        state = AppState()
        world = state.select_world([{"id": 4, "name": "First"}, {"id": 9, "name": "Second"}])
        assert world["id"] == 4
        assert state.current_world_name == "First"

    def test_keeps_current_world(self):
        state = AppState(current_world_id=9)
        assert state.select_world([{"id": 4, "name": "First"}, {"id": 9, "name": "Second"}])["id"] == 9

    def test_falls_back_when_current_world_is_gone(self):
        state = AppState(current_world_id=7)
        assert state.select_world([{"id": 4, "name": "First"}])["id"] == 4

    def test_no_worlds(self):
        state = AppState(current_world_id=7)
        assert state.select_world([]) is None
        assert state.current_world_id is None

    def test_flip_toggles(self):
        state = AppState()
        assert state.toggle_card("creatures", 1) is True
        assert state.is_flipped("creatures", 1)
        assert not state.is_flipped("spells", 1)
        assert state.toggle_card("creatures", 1) is False

    def test_zoom_is_bounded(self):
        state = AppState()
        for _ in range(MAX_ZOOM + 2):
            state.zoom_in()
        assert state.map_zoom == MAX_ZOOM
        for _ in range(MAX_ZOOM + 2):
            state.zoom_out()
        assert state.map_zoom == MIN_ZOOM


class TestPages:
    def test_no_worlds(self, api, state):
        assert "No worlds found" in render_text(BestiaryPage(api, state).view())

    def test_empty_collection(self, api, state, world):
        text = render_text(BestiaryPage(api, state).view())
        assert "No creatures found" in text
        assert state.current_world_id == world["id"]

    def test_populated_and_filtered(self, api, state, world, region):
        api.creatures.create(world["id"], {"name": "Young Red Dragon", "rarity": "legendary", "region_id": region["id"]})
        api.creatures.create(world["id"], {"name": "Goblin"})
        page = BestiaryPage(api, state)

        text = render_text(page.view())
        assert "Young Red Dragon" in text
        assert "Goblin" in text
        assert "Whispering Woods" in text

        state.search_term = "dragon"
        text = render_text(page.view())
        assert "Young Red Dragon" in text
        assert "Goblin" not in text

        state.search_term = "beholder"
        assert "No creatures match your search." in render_text(page.view())

    def test_flipped_card_shows_back(self, api, state, world):
        character = api.characters.create(world["id"], {"name": "Elara", "personality": "Patient and wry"})
        page = CharactersPage(api, state)

        assert "Patient and wry" not in render_text(page.view())
        state.toggle_card("characters", character["id"])
        assert "Patient and wry" in render_text(page.view())

    def test_read_failure_renders_loading(self, api, state, world):
        with patch.object(api.lore, "get", side_effect=APIError(500, "down")):
            assert "Loading lore entries..." in render_text(LorePage(api, state).view())

        assert "No lore entries found" in render_text(LorePage(api, state).view())

    def test_home_summary(self, api, state, world, region):
        api.lore.create(world["id"], {
            "title": "Order of the Silver Flame", "content": "Dragon hunters.",
            "category": "Factions & Organizations"
        })
        text = render_text(HomePage(api, state).view())
        assert "Eldoria" in text
        assert "Whispering Woods" in text
        assert "Order of the Silver Flame" in text

    def test_map(self, api, state, world, region):
        location = api.locations.create(world["id"], {
            "name": "Thornwick Village",
            "description": "A sleepy hamlet at the edge of the woods.",
            "region_id": region["id"], "marker_type": "quest"
        })
        page = MapPage(api, state)
        text = render_text(page.view())
        assert "Q1" in text
        assert "Thornwick Village (Whispering Woods)" in text

        state.selected_location_id = location["id"]
        assert "A sleepy hamlet" in render_text(page.view())

    def test_regions_count_their_locations(self, api, state, world, region):
        api.locations.create(world["id"], {
            "name": "Thornwick Village",
            "description": "A sleepy hamlet at the edge of the woods.",
            "region_id": region["id"]
        })
        page = RegionsPage(api, state)

        text = render_text(page.view())
        assert "Locations" in text
        assert "Whispering Woods" in text
        assert page.location_count(region["id"]) == "1"

    def test_lore_categories_come_from_server(self, api, state, world):
        for title, category in [("The Sundering", "Historical Events"), ("Silver Flame", "Factions & Organizations")]:
            api.lore.create(world["id"], {"title": title, "content": "Told by bards.", "category": category})
        page = LorePage(api, state)

        assert page.categories(world["id"]) == ["all", "Factions & Organizations", "Historical Events"]

    def test_locations_filter_by_region(self, api, state, world, region, client):
        second = client.post("/api/regions", json={"name": "Ashen Peaks", "world_id": world["id"]}).json()
        for name, region_id in [("Thornwick Village", region["id"]), ("Dragon's Maw", second["id"])]:
            api.locations.create(world["id"], {
                "name": name, "description": "Marked on the old maps.", "region_id": region_id
            })
        page = LocationsPage(api, state)

        assert page.categories(world["id"]) == ["all", str(region["id"]), str(second["id"])]
        assert "Ashen Peaks" in page.category_hint(world["id"])

        state.category_filter = str(second["id"])
        text = render_text(page.view())
        assert "Dragon's Maw" in text
        assert "Thornwick Village" not in text


class TestEditPrompts:
    @staticmethod
    def answers(changes):
        """Accept every suggested default except the fields in changes"""
        def answer(label, description=None, default="", choices=None, multiline=False):
            return changes.get(label, default)
        return answer

    def test_untouched_fields_are_not_sent(self, api, state):
        record = {
            "id": 3, "name": "Shade", "rarity": "common", "challenge_rating": None,
            "armor_class": None, "abilities": None, "special_attacks": ["Chill Touch"]
        }
        with patch("worldsmith_client.main.prompt_input", side_effect=self.answers({})):
            assert prompt_form(BestiaryPage(api, state), record) == {}

    def test_only_changed_answers_are_returned(self, api, state):
        record = {"id": 3, "name": "Shade", "armor_class": None, "abilities": {"STR": 6}}
        changes = {"Armor class": "12", "Abilities (STR: 10, DEX: 10, ...)": "STR: 8"}
        with patch("worldsmith_client.main.prompt_input", side_effect=self.answers(changes)):
            data = prompt_form(BestiaryPage(api, state), record)
        assert data == {"armor_class": "12", "abilities": "STR: 8"}

    def test_new_record_uses_form_defaults(self, api, state):
        with patch("worldsmith_client.main.prompt_input", side_effect=self.answers({"Name": "Goblin"})):
            data = prompt_form(BestiaryPage(api, state))
        assert data["name"] == "Goblin"
        assert data["challenge_rating"] == "1"
        assert data["armor_class"] == "10"
