#!/usr/bin/env python
# Shared create/update/delete flow for records that live inside a world
import logging
from typing import Dict, Any, Optional, List, Type
from pydantic import BaseModel

from worldsmith_client.api.base_service import BaseService, APIError
from worldsmith_client.api.query_cache import QueryResult, collection_key
from worldsmith_client.forms import validate_form
from worldsmith_client.ui.console import show_error

logger = logging.getLogger(__name__)


class WorldScopedService(BaseService):
    """
    Base for region, location, character, creature, spell and lore services.

    Subclasses set the resource name (the path segment used both for
    /api/<resource> and for the world's collection key), the create and
    edit form classes and the user-facing messages.
    """

    resource: str = ""
    form_class: Type[BaseModel] = BaseModel
    edit_form_class: Type[BaseModel] = BaseModel
    created_message: str = "Created."
    updated_message: str = "Updated."
    deleted_message: str = "Deleted."

    def list_for_world(self, world_id: int) -> QueryResult:
        return self.query(collection_key(world_id, self.resource))

    def get_item(self, item_id: int) -> Optional[Dict[str, Any]]:
        """Fetch one record directly, bypassing the cache"""
        try:
            return self.get(f"/api/{self.resource}/{item_id}")
        except APIError as e:
            logger.warning(f"Failed to get {self.resource} {item_id}: {e.detail}")
            return None

    def affected_keys(self, world_id: int, payload: Optional[Dict[str, Any]] = None) -> List[str]:
        """Cache keys a successful write to this resource makes stale"""
        return [collection_key(world_id, self.resource)]

    def form_input(self, world_id: int, form_data: Dict[str, Any]) -> Dict[str, Any]:
        return {**form_data, "world_id": world_id}

    def _validated_payload(self, form_class: Type[BaseModel], data: Dict[str, Any],
                           exclude_unset: bool = False) -> Optional[Dict[str, Any]]:
        form, errors = validate_form(form_class, data)
        if form is None:
            for error in errors:
                show_error(error)
            return None
        return form.model_dump(mode="json", exclude_unset=exclude_unset)

    def create(self, world_id: int, form_data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Validate the form and create the record; nothing is sent if it is invalid"""
        payload = self._validated_payload(self.form_class, self.form_input(world_id, form_data))
        if payload is None:
            return None

        return self.mutate(
            "POST", f"/api/{self.resource}", payload,
            invalidate=self.affected_keys(world_id, payload),
            success_message=self.created_message
        )

    def update(self, world_id: int, item_id: int, form_data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Validate the edited fields and send only those; the rest keep their stored values"""
        payload = self._validated_payload(self.edit_form_class, form_data, exclude_unset=True)
        if payload is None:
            return None

        return self.mutate(
            "PUT", f"/api/{self.resource}/{item_id}", payload,
            invalidate=self.update_keys(world_id, item_id, payload),
            success_message=self.updated_message
        )

    def update_keys(self, world_id: int, item_id: int, payload: Dict[str, Any]) -> List[str]:
        return self.affected_keys(world_id, payload)

    def delete(self, world_id: int, item_id: int) -> bool:
        result = self.mutate(
            "DELETE", f"/api/{self.resource}/{item_id}",
            invalidate=self.delete_keys(world_id, item_id),
            success_message=self.deleted_message
        )
        return result is not None

    def delete_keys(self, world_id: int, item_id: int) -> List[str]:
        return self.affected_keys(world_id)
