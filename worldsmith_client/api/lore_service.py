#!/usr/bin/env python
# Lore service
from worldsmith_client.api.entity_service import WorldScopedService
from worldsmith_client.api.query_cache import QueryResult, collection_key
from worldsmith_client.forms import LoreForm, LoreEditForm


class LoreService(WorldScopedService):
    """Service for lore entry API operations"""

    resource = "lore"
    form_class = LoreForm
    edit_form_class = LoreEditForm
    created_message = "Lore entry created successfully."
    updated_message = "Lore entry updated successfully."
    deleted_message = "Lore entry deleted successfully."

    def categories(self, world_id: int) -> QueryResult:
        return self.query(f"{collection_key(world_id, self.resource)}/categories")

    def affected_keys(self, world_id, payload=None):
        key = collection_key(world_id, self.resource)
        return [key, f"{key}/categories"]
