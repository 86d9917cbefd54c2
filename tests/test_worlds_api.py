"""
Tests for the world endpoints, health check and user registration.
"""

import pytest


class TestHealth:
    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "online"

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] in ("ok", "degraded")


class TestUsers:
    def test_register_hides_password(self, client):
        response = client.post("/api/users", json={"username": "storyteller", "password": "s3cret!"})
        assert response.status_code == 201
        body = response.json()
        assert body["username"] == "storyteller"
        assert "password" not in body
        assert "password_hash" not in body

    def test_duplicate_username(self, client, user):
        response = client.post("/api/users", json={"username": user.username, "password": "another1"})
        assert response.status_code == 409

    def test_short_password_rejected(self, client):
        response = client.post("/api/users", json={"username": "storyteller", "password": "abc"})
        assert response.status_code == 422

    def test_get_user(self, client, user):
        response = client.get(f"/api/users/{user.id}")
        assert response.status_code == 200
        assert response.json()["id"] == user.id

    def test_password_is_hashed(self, user):
        assert user.password_hash != "changeme"
        assert user.check_password("changeme")
        assert not user.check_password("wrong")


class TestWorlds:
    def test_create_and_list(self, client, world):
        response = client.get("/api/worlds")
        assert response.status_code == 200
        worlds = response.json()
        assert [w["id"] for w in worlds] == [world["id"]]
        assert worlds[0]["name"] == "Eldoria"

    def test_list_is_ordered_by_id(self, client, user, world):
        client.post("/api/worlds", json={"name": "Second", "user_id": user.id})
        names = [w["name"] for w in client.get("/api/worlds").json()]
        assert names == ["Eldoria", "Second"]

    def test_missing_owner(self, client):
        response = client.post("/api/worlds", json={"name": "Nowhere", "user_id": 999})
        assert response.status_code == 400

    def test_empty_name_rejected(self, client, user):
        response = client.post("/api/worlds", json={"name": "", "user_id": user.id})
        assert response.status_code == 422

    def test_get_missing_world(self, client):
        assert client.get("/api/worlds/999").status_code == 404
        assert client.get("/api/worlds/999/creatures").status_code == 404

    def test_update(self, client, world):
        response = client.put(f"/api/worlds/{world['id']}", json={"description": "Rewritten."})
        assert response.status_code == 200
        assert response.json()["description"] == "Rewritten."
        assert response.json()["name"] == "Eldoria"

    def test_empty_collections(self, client, world):
        for collection in ("regions", "locations", "characters", "creatures", "spells", "lore"):
            response = client.get(f"/api/worlds/{world['id']}/{collection}")
            assert response.status_code == 200
            assert response.json() == []

    def test_delete_removes_everything(self, client, world, region):
        location = client.post("/api/locations", json={"name": "Thornwick", "region_id": region["id"]}).json()
        character = client.post("/api/characters", json={"name": "Elara", "world_id": world["id"]}).json()
        lore = client.post("/api/lore", json={"title": "The Sundering", "world_id": world["id"]}).json()

        response = client.delete(f"/api/worlds/{world['id']}")
        assert response.status_code == 204

        assert client.get(f"/api/worlds/{world['id']}").status_code == 404
        assert client.get(f"/api/regions/{region['id']}").status_code == 404
        assert client.get(f"/api/locations/{location['id']}").status_code == 404
        assert client.get(f"/api/characters/{character['id']}").status_code == 404
        assert client.get(f"/api/lore/{lore['id']}").status_code == 404

    @pytest.mark.parametrize("search,expected", [("eld", ["Eldoria"]), ("zzz", [])])
    def test_search(self, client, world, search, expected):
        names = [w["name"] for w in client.get("/api/worlds", params={"search": search}).json()]
        assert names == expected
