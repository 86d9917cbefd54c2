#!/usr/bin/env python
# Location service
from worldsmith_client.api.entity_service import WorldScopedService
from worldsmith_client.api.query_cache import collection_key, region_locations_key
from worldsmith_client.forms import LocationForm, LocationEditForm


class LocationService(WorldScopedService):
    """Service for location-related API operations"""

    resource = "locations"
    form_class = LocationForm
    edit_form_class = LocationEditForm
    created_message = "Your new location has been placed on the map."
    updated_message = "Location updated."
    deleted_message = "Location deleted."

    def form_input(self, world_id, form_data):
        # Locations belong to a world through their region
        return dict(form_data)

    def affected_keys(self, world_id, payload=None):
        keys = [collection_key(world_id, self.resource)]
        if payload is None:
            keys.append(collection_key(world_id, "characters"))
        elif payload.get("region_id") is not None:
            keys.append(region_locations_key(payload["region_id"]))
        return keys

    def _previous_region_keys(self, item_id):
        previous = self.get_item(item_id)
        if previous is None or previous.get("region_id") is None:
            return []
        return [region_locations_key(previous["region_id"])]

    def update_keys(self, world_id, item_id, payload):
        keys = self.affected_keys(world_id, payload) + self._previous_region_keys(item_id)
        if payload.get("region_id") is not None:
            # Characters placed here move region with the location
            keys.append(collection_key(world_id, "characters"))
        return keys

    def delete_keys(self, world_id, item_id):
        return self.affected_keys(world_id) + self._previous_region_keys(item_id)
