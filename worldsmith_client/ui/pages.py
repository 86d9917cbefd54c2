#!/usr/bin/env python
# Page views: each one selects a world, reads its collections and renders them
from typing import Any, Dict, List, Optional, Tuple

from rich.columns import Columns
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from worldsmith_client.api.client import WorldsmithClient
from worldsmith_client.api.entity_service import WorldScopedService
from worldsmith_client.api.query_cache import QueryResult
from worldsmith_client.game.state import AppState, app_state
from worldsmith_client.forms import DEFAULT_LORE_CATEGORY
from worldsmith_client.ui.cards import character_card, creature_card, spell_card
from worldsmith_client.ui.map_view import MapRenderer, marker_position
from worldsmith_client.ui.world_summary import world_summary
from worldsmith_client.utils.filters import ALL, filter_records, category_options
from worldsmith_client.utils.helpers import (
    find_by_id, format_coordinates, format_date, marker_label, region_name, truncate_text
)

# (field, prompt, default) triples used when prompting for a new record
FormField = Tuple[str, str, str]


class Page:
    """Base page: world selection plus loading/empty rendering"""

    title = ""

    def __init__(self, client: WorldsmithClient, state: Optional[AppState] = None):
        self.client = client
        self.state = state if state is not None else app_state

    def worlds(self) -> QueryResult:
        return self.client.worlds.list_worlds()

    def current_world(self) -> Optional[Dict[str, Any]]:
        """The selected world, falling back to the first one listed"""
        result = self.worlds()
        if result.is_loading:
            return None
        return self.state.select_world(result.items)

    def no_world_view(self) -> RenderableType:
        if self.worlds().is_loading:
            return Text("Loading worlds...")
        return Text("No worlds found. Create a world to begin.", style="yellow")

    def view(self) -> RenderableType:
        world = self.current_world()
        if world is None:
            return self.no_world_view()
        return self.world_view(world)

    def world_view(self, world: Dict[str, Any]) -> RenderableType:
        raise NotImplementedError


class CollectionPage(Page):
    """A page listing one world-scoped collection, filtered client-side"""

    collection = ""
    noun = ""
    empty_message = ""
    form_fields: List[FormField] = []

    @property
    def service(self) -> WorldScopedService:
        return getattr(self.client, self.collection)

    def records(self, world_id: int) -> QueryResult:
        return self.service.list_for_world(world_id)

    def visible(self, records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return filter_records(records, self.collection, self.state.search_term, self.state.category_filter)

    category_label = "Category"

    def categories(self, world_id: int) -> List[str]:
        return category_options(self.records(world_id).items, self.collection)

    def category_hint(self, world_id: int) -> Optional[str]:
        """Extra text shown before the category prompt"""
        return None

    def world_view(self, world: Dict[str, Any]) -> RenderableType:
        result = self.records(world["id"])
        if result.is_loading:
            return Text(f"Loading {self.noun}...")

        records = self.visible(result.items)
        if not records:
            if result.items:
                return Text(f"No {self.noun} match your search.", style="yellow")
            return Text(self.empty_message, style="yellow")
        return self.render_records(world, records)

    def render_records(self, world: Dict[str, Any], records: List[Dict[str, Any]]) -> RenderableType:
        raise NotImplementedError


class CharactersPage(CollectionPage):
    title = "Characters"
    collection = "characters"
    noun = "characters"
    empty_message = "No characters found. Add a character to populate this world."
    form_fields = [
        ("name", "Name", ""),
        ("race", "Race", ""),
        ("character_type", "Type (npc, ally, villain)", "npc"),
        ("description", "Description", ""),
        ("appearance", "Appearance", ""),
        ("personality", "Personality", ""),
        ("abilities", "Abilities (comma separated)", ""),
        ("region_id", "Region id (blank for none)", ""),
        ("location_id", "Location id (blank for none)", ""),
        ("image_url", "Image URL", ""),
    ]

    def render_records(self, world, records):
        regions = self.client.regions.list_for_world(world["id"]).items
        return Columns([
            character_card(record, regions, self.state.is_flipped(self.collection, record["id"]))
            for record in records
        ])


class BestiaryPage(CollectionPage):
    title = "Bestiary"
    collection = "creatures"
    noun = "creatures"
    empty_message = "No creatures found. Add a creature to populate the bestiary."
    form_fields = [
        ("name", "Name", ""),
        ("creature_type", "Creature type", ""),
        ("rarity", "Rarity (common, rare, legendary)", "common"),
        ("challenge_rating", "Challenge rating", "1"),
        ("armor_class", "Armor class", "10"),
        ("hit_points", "Hit points", ""),
        ("speed", "Speed", ""),
        ("abilities", "Abilities (STR: 10, DEX: 10, ...)",
         "STR: 10, DEX: 10, CON: 10, INT: 10, WIS: 10, CHA: 10"),
        ("special_attacks", "Special attacks (comma separated)", ""),
        ("element_type", "Element", ""),
        ("description", "Description", ""),
        ("region_id", "Region id (blank for none)", ""),
        ("image_url", "Image URL", ""),
    ]

    def render_records(self, world, records):
        regions = self.client.regions.list_for_world(world["id"]).items
        return Columns([
            creature_card(record, regions, self.state.is_flipped(self.collection, record["id"]))
            for record in records
        ])


class SpellbookPage(CollectionPage):
    title = "Spellbook"
    collection = "spells"
    noun = "spells"
    empty_message = "No spells found. Add a spell to fill the spellbook."
    form_fields = [
        ("name", "Name", ""),
        ("level", "Level (0-9)", ""),
        ("school", "School", ""),
        ("casting_time", "Casting time", "1 action"),
        ("range", "Range", ""),
        ("components", "Components", "V, S"),
        ("duration", "Duration", "Instantaneous"),
        ("description", "Description", ""),
        ("creator_character_id", "Creator character id (blank for none)", ""),
        ("image_url", "Image URL", ""),
    ]

    def render_records(self, world, records):
        characters = self.client.characters.list_for_world(world["id"]).items
        return Columns([
            spell_card(record, characters, self.state.is_flipped(self.collection, record["id"]))
            for record in records
        ])


class RegionsPage(CollectionPage):
    title = "Regions"
    collection = "regions"
    noun = "regions"
    empty_message = "No regions found. Add a region to shape this world."
    form_fields = [
        ("name", "Name", ""),
        ("type", "Type (Forest, Mountains, ...)", ""),
        ("description", "Description", ""),
        ("image_url", "Image URL", ""),
    ]

    def location_count(self, region_id: int) -> str:
        result = self.client.regions.locations_in_region(region_id)
        return "..." if result.is_loading else str(len(result.items))

    def render_records(self, world, records):
        table = Table(title=f"Regions of {world['name']}")
        table.add_column("ID", style="dim")
        table.add_column("Name", style="green")
        table.add_column("Type", style="blue")
        table.add_column("Locations", justify="right")
        table.add_column("Description", style="cyan")
        for region in records:
            table.add_row(
                str(region["id"]), region["name"], region.get("type") or "",
                self.location_count(region["id"]),
                truncate_text(region.get("description") or "")
            )
        return table


class LocationsPage(CollectionPage):
    title = "Locations"
    collection = "locations"
    noun = "locations"
    empty_message = "No locations found. Add a location to a region."
    form_fields = [
        ("name", "Name", ""),
        ("location_type", "Location type", ""),
        ("marker_type", "Marker (standard, quest, danger)", "standard"),
        ("x", "X coordinate (0-500)", "250"),
        ("y", "Y coordinate (0-500)", "250"),
        ("description", "Description", ""),
        ("region_id", "Region id", ""),
        ("image_url", "Image URL", ""),
    ]
    category_label = "Region id"

    def categories(self, world_id):
        regions = self.client.regions.list_for_world(world_id).items
        return [ALL] + [str(region["id"]) for region in regions]

    def category_hint(self, world_id):
        regions = self.client.regions.list_for_world(world_id).items
        if not regions:
            return None
        return "Regions: " + ", ".join(f"{region['id']} {region['name']}" for region in regions)

    def render_records(self, world, records):
        regions = self.client.regions.list_for_world(world["id"]).items
        table = Table(title=f"Locations of {world['name']}")
        table.add_column("ID", style="dim")
        table.add_column("Name", style="green")
        table.add_column("Marker", style="yellow")
        table.add_column("Region", style="blue")
        table.add_column("Coordinates")
        for location in records:
            table.add_row(
                str(location["id"]), location["name"], marker_label(location.get("marker_type")),
                region_name(location.get("region_id"), regions),
                format_coordinates(location.get("x"), location.get("y"))
            )
        return table


class LorePage(CollectionPage):
    title = "Lore"
    collection = "lore"
    noun = "lore entries"
    empty_message = "No lore entries found. Record your world's history and legends."
    form_fields = [
        ("title", "Title", ""),
        ("category", "Category", DEFAULT_LORE_CATEGORY),
        ("content", "Content", ""),
        ("image_url", "Image URL", ""),
    ]

    def categories(self, world_id):
        # The server lists every category in use, sorted
        result = self.client.lore.categories(world_id)
        return [ALL] + list(result.items)

    def render_records(self, world, records):
        panels = []
        for entry in records:
            body = Group(
                Text(entry.get("category") or "", style="bold yellow"),
                Text(entry.get("content") or ""),
                Text(f"Updated {format_date(entry.get('updated_at') or entry.get('created_at'))}", style="dim"),
            )
            panels.append(Panel(body, title=f"[{entry['id']}] {entry['title']}", border_style="magenta"))
        return Group(*panels)


class MapPage(Page):
    title = "World Map"

    def world_view(self, world):
        locations = self.client.locations.list_for_world(world["id"])
        if locations.is_loading:
            return Text("Loading map...")
        regions = self.client.regions.list_for_world(world["id"]).items

        rendered = MapRenderer.render(locations.items, regions, self.state.map_zoom)
        parts = [
            Text(f"Zoom {self.state.map_zoom}", style="dim"),
            MapRenderer.styled(rendered),
        ]

        selected = find_by_id(locations.items, self.state.selected_location_id)
        if selected:
            parts.append(self.location_details(selected, regions))
        return Group(*parts)

    @staticmethod
    def location_details(location: Dict[str, Any], regions: List[Dict[str, Any]]) -> Panel:
        x, y = marker_position(location)
        details = Table.grid(padding=(0, 2))
        details.add_column(style="bold")
        details.add_column()
        details.add_row("Type", location.get("location_type") or "")
        details.add_row("Region", region_name(location.get("region_id"), regions))
        details.add_row("Marker", marker_label(location.get("marker_type")))
        details.add_row("Coordinates", format_coordinates(location.get("x"), location.get("y")))
        details.add_row("Map position", f"{x}, {y}")
        return Panel(
            Group(Text(location.get("description") or ""), details),
            title=location["name"], border_style="yellow"
        )


class HomePage(Page):
    title = "Worldsmith"

    def world_view(self, world):
        detail = self.client.worlds.get_world(world["id"])
        regions = self.client.regions.list_for_world(world["id"])
        lore = self.client.lore.list_for_world(world["id"])
        return world_summary(
            None if detail.is_loading else detail.data,
            None if regions.is_loading else regions.items,
            None if lore.is_loading else lore.items,
        )
