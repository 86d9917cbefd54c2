#!/usr/bin/env python
# World service for managing worlds
import logging
from typing import Dict, Any, Optional

from worldsmith_client.api.base_service import BaseService
from worldsmith_client.api.query_cache import QueryResult, WORLDS_KEY, world_key, collection_key
from worldsmith_client.forms import WorldForm, WorldEditForm, validate_form
from worldsmith_client.ui.console import show_error

logger = logging.getLogger(__name__)

WORLD_COLLECTIONS = ("regions", "locations", "characters", "creatures", "spells", "lore")


class WorldService(BaseService):
    """Service for world-related API operations"""

    def list_worlds(self) -> QueryResult:
        """All worlds, oldest first"""
        return self.query(WORLDS_KEY)

    def get_world(self, world_id: int) -> QueryResult:
        return self.query(world_key(world_id))

    def create_world(self, form_data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Validate and create a world; returns the created world or None"""
        form, errors = validate_form(WorldForm, form_data)
        if form is None:
            for error in errors:
                show_error(error)
            return None

        return self.mutate(
            "POST", "/api/worlds", form.model_dump(mode="json"),
            invalidate=[WORLDS_KEY],
            success_message="Your new world has been created."
        )

    def update_world(self, world_id: int, form_data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Send only the fields that were filled in"""
        form, errors = validate_form(WorldEditForm, form_data)
        if form is None:
            for error in errors:
                show_error(error)
            return None

        payload = form.model_dump(mode="json", exclude_unset=True)
        return self.mutate(
            "PUT", f"/api/worlds/{world_id}", payload,
            invalidate=[WORLDS_KEY, world_key(world_id)],
            success_message="World updated."
        )

    def delete_world(self, world_id: int) -> bool:
        """Delete a world and everything in it"""
        keys = [WORLDS_KEY, world_key(world_id)]
        keys.extend(collection_key(world_id, name) for name in WORLD_COLLECTIONS)
        result = self.mutate(
            "DELETE", f"/api/worlds/{world_id}",
            invalidate=keys,
            success_message="World deleted."
        )
        return result is not None
