#!/usr/bin/env python
# Application state for the Worldsmith client
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List, Set

from worldsmith_client.utils.filters import ALL

MIN_ZOOM = 1
MAX_ZOOM = 4


@dataclass
class AppState:
    """Central state for the Worldsmith client: selection, filters and view toggles"""

    # World selection
    current_world_id: Optional[int] = None
    current_world_name: Optional[str] = None

    # Page filters
    search_term: str = ""
    category_filter: str = ALL

    # Cards whose back is showing, keyed by "<collection>:<id>"
    flipped_cards: Set[str] = field(default_factory=set)

    # Map view
    map_zoom: int = MIN_ZOOM
    selected_location_id: Optional[int] = None

    # Application control
    shutdown_requested: bool = False

    def select_world(self, worlds: Optional[List[Dict[str, Any]]]) -> Optional[Dict[str, Any]]:
        """
        Keep the current world if it is still listed, otherwise fall back to
        the first world. Returns the selected world or None if there are none.
        """
        if not worlds:
            self.clear_world()
            return None

        world = next((w for w in worlds if w.get("id") == self.current_world_id), worlds[0])
        if world.get("id") != self.current_world_id:
            self.flipped_cards.clear()
            self.selected_location_id = None
        self.current_world_id = world.get("id")
        self.current_world_name = world.get("name")
        return world

    def clear_world(self):
        """Clear world selection"""
        self.current_world_id = None
        self.current_world_name = None
        self.selected_location_id = None
        self.flipped_cards.clear()

    def clear_filters(self):
        self.search_term = ""
        self.category_filter = ALL

    def toggle_card(self, collection: str, item_id: int) -> bool:
        """Flip a card; returns True when its back is now showing"""
        card = f"{collection}:{item_id}"
        if card in self.flipped_cards:
            self.flipped_cards.discard(card)
            return False
        self.flipped_cards.add(card)
        return True

    def is_flipped(self, collection: str, item_id: int) -> bool:
        return f"{collection}:{item_id}" in self.flipped_cards

    def zoom_in(self) -> int:
        self.map_zoom = min(MAX_ZOOM, self.map_zoom + 1)
        return self.map_zoom

    def zoom_out(self) -> int:
        self.map_zoom = max(MIN_ZOOM, self.map_zoom - 1)
        return self.map_zoom


# Global state instance
app_state = AppState()
