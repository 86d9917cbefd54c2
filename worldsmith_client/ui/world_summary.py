#!/usr/bin/env python
# Realm summary panel for the home page
from typing import Any, Dict, List, Optional

from rich.console import Group
from rich.panel import Panel
from rich.text import Text

FACTIONS_CATEGORY = "Factions & Organizations"
SUMMARY_LIMIT = 3


def key_factions(lore_entries: Optional[List[Dict[str, Any]]]) -> List[Dict[str, Any]]:
    factions = [entry for entry in lore_entries or [] if entry.get("category") == FACTIONS_CATEGORY]
    return factions[:SUMMARY_LIMIT]


def world_summary(world: Optional[Dict[str, Any]],
                  regions: Optional[List[Dict[str, Any]]],
                  lore_entries: Optional[List[Dict[str, Any]]]) -> Panel:
    """The world description, its first three regions and first three factions"""
    if world is None:
        return Panel(Text("Loading world information..."), title="Realm Summary")

    parts = [Text(world.get("description") or ""), Text("")]

    parts.append(Text("Key Regions", style="bold"))
    if regions is None:
        parts.append(Text("Loading regions..."))
    for region in (regions or [])[:SUMMARY_LIMIT]:
        line = Text("  * ")
        line.append(f"{region['name']}:", style="bold")
        line.append(f" {region.get('description') or ''}")
        parts.append(line)

    parts.append(Text(""))
    parts.append(Text("Important Factions", style="bold"))
    if lore_entries is None:
        parts.append(Text("Loading factions..."))
    for faction in key_factions(lore_entries):
        parts.append(Text(f"  o {faction['title']}"))

    return Panel(Group(*parts), title=f"Realm Summary: {world.get('name', '')}", border_style="magenta")
