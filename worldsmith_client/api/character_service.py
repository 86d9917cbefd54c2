#!/usr/bin/env python
# Character service
from worldsmith_client.api.entity_service import WorldScopedService
from worldsmith_client.api.query_cache import collection_key
from worldsmith_client.forms import CharacterForm, CharacterEditForm


class CharacterService(WorldScopedService):
    """Service for character-related API operations"""

    resource = "characters"
    form_class = CharacterForm
    edit_form_class = CharacterEditForm
    created_message = "Your new character has been added to the world."
    updated_message = "Character updated."
    deleted_message = "Character deleted."

    def affected_keys(self, world_id, payload=None):
        keys = [collection_key(world_id, self.resource)]
        if payload is None:
            # Spells credited to a deleted character lose their creator
            keys.append(collection_key(world_id, "spells"))
        return keys
