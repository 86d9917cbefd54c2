#!/usr/bin/env python
# One object holding every API service over a shared session and cache
import requests
from typing import Optional

from worldsmith_client.api.query_cache import QueryCache, query_cache
from worldsmith_client.api.world_service import WorldService
from worldsmith_client.api.region_service import RegionService
from worldsmith_client.api.location_service import LocationService
from worldsmith_client.api.character_service import CharacterService
from worldsmith_client.api.creature_service import CreatureService
from worldsmith_client.api.spell_service import SpellService
from worldsmith_client.api.lore_service import LoreService


class WorldsmithClient:
    """
    Entry point for pages.

    Tests pass a FastAPI TestClient as the session and an empty server_url so
    requests go straight to the app.
    """

    def __init__(self, session=None, cache: Optional[QueryCache] = None, server_url: Optional[str] = None):
        self.session = session or requests.Session()
        self.cache = cache if cache is not None else query_cache

        kwargs = {"session": self.session, "cache": self.cache, "server_url": server_url}
        self.worlds = WorldService(**kwargs)
        self.regions = RegionService(**kwargs)
        self.locations = LocationService(**kwargs)
        self.characters = CharacterService(**kwargs)
        self.creatures = CreatureService(**kwargs)
        self.spells = SpellService(**kwargs)
        self.lore = LoreService(**kwargs)
