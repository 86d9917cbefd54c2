#!/usr/bin/env python
# Main entry point for the Worldsmith client
import logging
import sys
from typing import Any, Dict, List, Optional

from worldsmith_client.utils.config import config
from worldsmith_client.game.state import app_state
from worldsmith_client.api.client import WorldsmithClient
from worldsmith_client.forms import LORE_CATEGORIES
from worldsmith_client.ui.console import (
    console, show_title, show_warning, show_info, create_menu, prompt_input,
    prompt_select_item, confirm_action
)
from worldsmith_client.ui.pages import (
    Page, CollectionPage, HomePage, CharactersPage, BestiaryPage, SpellbookPage,
    RegionsPage, LocationsPage, LorePage, MapPage
)
from worldsmith_client.utils.filters import ALL

logger = logging.getLogger(__name__)

PAGES = {
    "characters": CharactersPage,
    "creatures": BestiaryPage,
    "spells": SpellbookPage,
    "regions": RegionsPage,
    "locations": LocationsPage,
    "map": MapPage,
    "lore": LorePage,
}

# Pages whose records render as flip cards
CARD_PAGES = ("characters", "creatures", "spells")


def field_text(value: Any) -> str:
    """A stored value as it is typed into a form"""
    if value is None:
        return ""
    if isinstance(value, list):
        return ", ".join(str(item) for item in value)
    if isinstance(value, dict):
        return ", ".join(f"{key}: {value}" for key, value in value.items())
    return str(value)


def prompt_form(page: CollectionPage, initial: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Ask for every field of the page's form; blank answers are left out.

    When editing, each prompt starts from the stored value and only changed
    answers are returned, so untouched fields keep what the record has.
    """
    data = {}
    for field, label, default in page.form_fields:
        current = None
        if initial is not None:
            current = field_text(initial.get(field))
            default = current
        if field == "category" and page.collection == "lore":
            show_info("Suggested categories: " + ", ".join(LORE_CATEGORIES))
        value = prompt_input(label, default=default)
        if value != "" and value != current:
            data[field] = value
    return data


def choose_world(client: WorldsmithClient):
    """Let the user switch the selected world or create one"""
    worlds = client.worlds.list_worlds()
    options = [("select", "Select a world"), ("create", "Create a new world")]
    choice = create_menu("World Selection", options, subtitle=f"Current world: {app_state.current_world_name or 'none'}")

    if choice == "select":
        world_id = prompt_select_item(worlds.items, "Select world")
        if world_id is not None:
            app_state.current_world_id = world_id
            app_state.select_world(worlds.items)
    elif choice == "create":
        data = {
            "name": prompt_input("Name"),
            "description": prompt_input("Description", multiline=True),
            "image_url": prompt_input("Image URL") or None,
        }
        world = client.worlds.create_world(data)
        if world:
            app_state.current_world_id = world["id"]


def edit_filters(page: CollectionPage, world_id: int):
    app_state.search_term = prompt_input("Search", default=app_state.search_term)
    categories = page.categories(world_id)
    if len(categories) > 1:
        hint = page.category_hint(world_id)
        if hint:
            show_info(hint)
        current = app_state.category_filter if app_state.category_filter in categories else ALL
        app_state.category_filter = prompt_input(page.category_label, choices=categories, default=current)


def pick_record(page: CollectionPage, world_id: int, prompt_text: str) -> Optional[Dict[str, Any]]:
    records: List[Dict[str, Any]] = page.visible(page.records(world_id).items)
    name_key = "title" if page.collection == "lore" else "name"
    record_id = prompt_select_item(records, prompt_text, name_key=name_key)
    return next((record for record in records if record["id"] == record_id), None)


def run_collection_page(page: CollectionPage):
    """Render a collection page and handle its actions until the user goes back"""
    while not app_state.shutdown_requested:
        show_title(page.title, f"World: {app_state.current_world_name or '-'}")
        console.print(page.view())

        world_id = app_state.current_world_id
        if world_id is None:
            choose_world(page.client)
            if app_state.current_world_id is None:
                return
            continue

        options = [("search", "Search and filter"), ("add", f"Add to {page.title.lower()}")]
        if page.collection in CARD_PAGES:
            options.append(("flip", "Flip a card"))
        options.extend([("edit", "Edit an entry"), ("delete", "Delete an entry"), ("world", "Change world")])

        choice = create_menu("Actions", options)
        if choice is None:
            return
        elif choice == "search":
            edit_filters(page, world_id)
        elif choice == "add":
            page.service.create(world_id, prompt_form(page))
        elif choice == "flip":
            record = pick_record(page, world_id, "Flip which card")
            if record:
                app_state.toggle_card(page.collection, record["id"])
        elif choice == "edit":
            record = pick_record(page, world_id, "Edit which entry")
            if record:
                page.service.update(world_id, record["id"], prompt_form(page, record))
        elif choice == "delete":
            record = pick_record(page, world_id, "Delete which entry")
            if record and confirm_action("Delete this entry?"):
                page.service.delete(world_id, record["id"])
        elif choice == "world":
            choose_world(page.client)
            app_state.clear_filters()


def run_map_page(page: MapPage):
    while not app_state.shutdown_requested:
        show_title(page.title, f"World: {app_state.current_world_name or '-'}")
        console.print(page.view())

        world_id = app_state.current_world_id
        if world_id is None:
            show_warning("Select or create a world first.")
            return

        choice = create_menu("Actions", [
            ("zoom_in", "Zoom in"),
            ("zoom_out", "Zoom out"),
            ("select", "Show location details"),
        ])
        if choice is None:
            return
        elif choice == "zoom_in":
            app_state.zoom_in()
        elif choice == "zoom_out":
            app_state.zoom_out()
        elif choice == "select":
            locations = page.client.locations.list_for_world(world_id).items
            app_state.selected_location_id = prompt_select_item(locations, "Select location")


def run_page(page: Page):
    if isinstance(page, CollectionPage):
        run_collection_page(page)
    elif isinstance(page, MapPage):
        run_map_page(page)


def main_loop(client: WorldsmithClient):
    """Main application loop"""
    home = HomePage(client)
    options = [
        ("characters", "Characters"),
        ("creatures", "Bestiary"),
        ("spells", "Spellbook"),
        ("regions", "Regions"),
        ("locations", "Locations"),
        ("map", "World Map"),
        ("lore", "Lore"),
        ("world", "Change world"),
    ]

    while not app_state.shutdown_requested:
        show_title("WORLDSMITH", f"Server: {config.server_url}")
        console.print(home.view())

        choice = create_menu("Main Menu", options, exit_label="Exit")
        if choice is None:
            app_state.shutdown_requested = True
        elif choice == "world":
            choose_world(client)
        else:
            app_state.clear_filters()
            run_page(PAGES[choice](client))


def main(argv=None):
    args = config.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    client = WorldsmithClient()
    try:
        main_loop(client)
    except KeyboardInterrupt:
        console.print("\n[yellow]Shutting down...[/yellow]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
