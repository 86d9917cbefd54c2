#!/usr/bin/env python
# Region service
from worldsmith_client.api.entity_service import WorldScopedService
from worldsmith_client.api.query_cache import QueryResult, collection_key, region_locations_key
from worldsmith_client.forms import RegionForm, RegionEditForm


class RegionService(WorldScopedService):
    """Service for region-related API operations"""

    resource = "regions"
    form_class = RegionForm
    edit_form_class = RegionEditForm
    created_message = "Your new region has been added to the world."
    updated_message = "Region updated."
    deleted_message = "Region deleted."

    def locations_in_region(self, region_id: int) -> QueryResult:
        return self.query(region_locations_key(region_id))

    def affected_keys(self, world_id, payload=None):
        keys = [collection_key(world_id, self.resource)]
        if payload is None:
            # Deleting a region removes its locations and unlinks characters and creatures
            keys.extend(collection_key(world_id, name) for name in ("locations", "characters", "creatures"))
        return keys

    def delete_keys(self, world_id, item_id):
        return self.affected_keys(world_id) + [region_locations_key(item_id)]
