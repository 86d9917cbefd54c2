#!/usr/bin/env python
# Creature service
from worldsmith_client.api.entity_service import WorldScopedService
from worldsmith_client.forms import CreatureForm, CreatureEditForm


class CreatureService(WorldScopedService):
    """Service for bestiary API operations"""

    resource = "creatures"
    form_class = CreatureForm
    edit_form_class = CreatureEditForm
    created_message = "Your new creature has been added to the bestiary."
    updated_message = "Creature updated."
    deleted_message = "Creature removed from the bestiary."
