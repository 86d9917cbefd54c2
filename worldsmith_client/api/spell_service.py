#!/usr/bin/env python
# Spell service
from worldsmith_client.api.entity_service import WorldScopedService
from worldsmith_client.forms import SpellForm, SpellEditForm


class SpellService(WorldScopedService):
    """Service for spellbook API operations"""

    resource = "spells"
    form_class = SpellForm
    edit_form_class = SpellEditForm
    created_message = "Your new spell has been added to the spellbook."
    updated_message = "Spell updated."
    deleted_message = "Spell removed from the spellbook."
