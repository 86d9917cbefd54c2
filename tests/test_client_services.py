"""
Tests for the client services driven through the real app:
create, invalidate and refetch for every entity, and client-side form rules.
"""

from unittest.mock import patch

import pytest

from worldsmith_client.api.query_cache import collection_key, region_locations_key, WORLDS_KEY


class TestCreateInvalidateRefetch:
    def test_world(self, api, user):
        assert api.worlds.list_worlds().is_empty

        created = api.worlds.create_world({
            "name": "Eldoria",
            "description": "A realm of ancient forests.",
            "user_id": user.id
        })
        assert created["name"] == "Eldoria"
        assert api.cache.is_stale(WORLDS_KEY) is True

        worlds = api.worlds.list_worlds()
        assert [w["name"] for w in worlds.items] == ["Eldoria"]

    def test_region(self, api, world):
        key = collection_key(world["id"], "regions")
        assert api.regions.list_for_world(world["id"]).is_empty

        api.regions.create(world["id"], {
            "name": "Ashen Peaks",
            "description": "Volcanic mountains full of bones.",
            "type": "Mountains"
        })

        assert api.cache.is_stale(key) is True
        assert [r["name"] for r in api.regions.list_for_world(world["id"]).items] == ["Ashen Peaks"]

    def test_location(self, api, world, region):
        assert api.locations.list_for_world(world["id"]).is_empty

        created = api.locations.create(world["id"], {
            "name": "Thornwick Village",
            "description": "A sleepy hamlet at the edge of the woods.",
            "region_id": region["id"]
        })
        assert (created["x"], created["y"]) == (250, 250)
        assert created["marker_type"] == "standard"

        locations = api.locations.list_for_world(world["id"])
        assert [l["name"] for l in locations.items] == ["Thornwick Village"]

    def test_character(self, api, world):
        api.characters.list_for_world(world["id"])
        api.characters.create(world["id"], {"name": "Elara Moonwhisper", "abilities": "Herbalism, Beast Speech"})

        characters = api.characters.list_for_world(world["id"]).items
        assert [c["name"] for c in characters] == ["Elara Moonwhisper"]
        assert characters[0]["abilities"] == ["Herbalism", "Beast Speech"]

    def test_creature(self, api, world):
        api.creatures.list_for_world(world["id"])
        created = api.creatures.create(world["id"], {"name": "Goblin"})

        assert created["rarity"] == "common"
        assert created["challenge_rating"] == "1"
        assert created["armor_class"] == 10
        assert created["abilities"] == {"STR": 10, "DEX": 10, "CON": 10, "INT": 10, "WIS": 10, "CHA": 10}
        assert [c["name"] for c in api.creatures.list_for_world(world["id"]).items] == ["Goblin"]

    def test_spell(self, api, world):
        api.spells.list_for_world(world["id"])
        api.spells.create(world["id"], {"name": "Fireball", "level": "3", "school": "Evocation"})

        spells = api.spells.list_for_world(world["id"]).items
        assert [(s["name"], s["level"]) for s in spells] == [("Fireball", 3)]

    def test_lore(self, api, world):
        api.lore.list_for_world(world["id"])
        created = api.lore.create(world["id"], {"title": "The Sundering", "content": "The sky tore open."})

        assert created["category"] == "Historical Events"
        assert [e["title"] for e in api.lore.list_for_world(world["id"]).items] == ["The Sundering"]


class TestLoreEditing:
    def test_update_and_delete(self, api, world):
        entry = api.lore.create(world["id"], {
            "title": "Order of the Silver Flame",
            "content": "Dragon hunters.",
            "category": "Factions & Organizations"
        })
        assert api.lore.list_for_world(world["id"]).items[0]["content"] == "Dragon hunters."

        api.lore.update(world["id"], entry["id"], {
            "title": entry["title"], "content": "Dragon hunters, few in number.",
            "category": entry["category"]
        })
        assert api.lore.list_for_world(world["id"]).items[0]["content"] == "Dragon hunters, few in number."

        assert api.lore.delete(world["id"], entry["id"]) is True
        assert api.lore.list_for_world(world["id"]).is_empty

    def test_delete_missing_reports_failure(self, api, world):
        api.lore.list_for_world(world["id"])
        key = collection_key(world["id"], "lore")

        assert api.lore.delete(world["id"], 999) is False
        assert api.cache.is_stale(key) is False


class TestFormValidation:
    def test_short_world_name_sends_nothing(self, api, user):
        with patch.object(api.session, "request", wraps=api.session.request) as request:
            result = api.worlds.create_world({
                "name": "E", "description": "A realm of ancient forests.", "user_id": user.id
            })
        assert result is None
        request.assert_not_called()

    @pytest.mark.parametrize("service,data", [
        ("regions", {"name": "W", "description": "An old-growth forest."}),
        ("regions", {"name": "Woods", "description": "Short"}),
        ("characters", {"name": "E"}),
        ("creatures", {"name": "G"}),
        ("spells", {"name": "F"}),
        ("lore", {"title": "Untitled", "content": ""}),
    ])
    def test_invalid_forms_send_nothing(self, api, world, service, data):
        with patch.object(api.session, "request", wraps=api.session.request) as request:
            result = getattr(api, service).create(world["id"], data)
        assert result is None
        request.assert_not_called()

    def test_server_rejection_invalidates_nothing(self, api, world):
        api.characters.list_for_world(world["id"])
        key = collection_key(world["id"], "characters")

        result = api.characters.create(world["id"], {"name": "Stranger", "region_id": 999})

        assert result is None
        assert api.cache.is_stale(key) is False


class TestCascadeInvalidation:
    def test_region_delete_refreshes_dependents(self, api, world, region):
        api.characters.create(world["id"], {"name": "Elara", "region_id": region["id"]})
        assert api.characters.list_for_world(world["id"]).items[0]["region_id"] == region["id"]

        assert api.regions.delete(world["id"], region["id"]) is True

        assert api.characters.list_for_world(world["id"]).items[0]["region_id"] is None
        assert api.regions.list_for_world(world["id"]).is_empty

    def test_location_delete_refreshes_region_list(self, api, world, region):
        location = api.locations.create(world["id"], {
            "name": "Thornwick Village",
            "description": "A sleepy hamlet at the edge of the woods.",
            "region_id": region["id"]
        })
        key = region_locations_key(region["id"])
        assert [l["id"] for l in api.regions.locations_in_region(region["id"]).items] == [location["id"]]

        assert api.locations.delete(world["id"], location["id"]) is True

        assert api.cache.is_stale(key) is True
        assert api.regions.locations_in_region(region["id"]).is_empty

    def test_location_move_refreshes_both_regions(self, api, world, region, client):
        second = client.post("/api/regions", json={"name": "Ashen Peaks", "world_id": world["id"]}).json()
        location = api.locations.create(world["id"], {
            "name": "Thornwick Village",
            "description": "A sleepy hamlet at the edge of the woods.",
            "region_id": region["id"]
        })
        api.characters.create(world["id"], {
            "name": "Elara", "region_id": region["id"], "location_id": location["id"]
        })
        assert len(api.regions.locations_in_region(region["id"]).items) == 1
        assert api.regions.locations_in_region(second["id"]).is_empty
        api.characters.list_for_world(world["id"])

        assert api.locations.update(world["id"], location["id"], {"region_id": second["id"]}) is not None

        assert api.regions.locations_in_region(region["id"]).is_empty
        assert [l["id"] for l in api.regions.locations_in_region(second["id"]).items] == [location["id"]]
        assert api.characters.list_for_world(world["id"]).items[0]["region_id"] == second["id"]


class TestPartialEdits:
    def test_creature_rename_keeps_unset_stats(self, api, world, client):
        creature = client.post("/api/creatures", json={"name": "Shade", "world_id": world["id"]}).json()
        assert creature["abilities"] is None

        updated = api.creatures.update(world["id"], creature["id"], {
            "name": "Shade", "description": "renamed only"
        })

        assert updated["description"] == "renamed only"
        assert updated["abilities"] is None
        assert updated["armor_class"] is None
        assert updated["challenge_rating"] is None
        assert updated["rarity"] == "common"

    def test_location_edit_keeps_unset_coordinates(self, api, world, region, client):
        location = client.post("/api/locations", json={"name": "Hidden Grove", "region_id": region["id"]}).json()

        with patch.object(api.session, "request", wraps=api.session.request) as request:
            updated = api.locations.update(world["id"], location["id"], {"location_type": "Shrine"})

        put = [c for c in request.call_args_list if c.args[0] == "PUT"]
        assert put[0].kwargs["json"] == {"location_type": "Shrine"}
        assert updated["location_type"] == "Shrine"
        assert (updated["x"], updated["y"]) == (None, None)
        assert updated["marker_type"] == "standard"

    def test_world_edit_sends_only_changes(self, api, world):
        updated = api.worlds.update_world(world["id"], {"name": "Eldoria Reborn"})

        assert updated["name"] == "Eldoria Reborn"
        assert updated["description"] == world["description"]

    def test_edit_rules_still_apply(self, api, world, region, client):
        location = client.post("/api/locations", json={"name": "Hidden Grove", "region_id": region["id"]}).json()

        with patch.object(api.session, "request", wraps=api.session.request) as request:
            result = api.locations.update(world["id"], location["id"], {"description": "Short"})

        assert result is None
        request.assert_not_called()
