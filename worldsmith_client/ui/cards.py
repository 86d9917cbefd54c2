#!/usr/bin/env python
# Flip cards for characters, creatures and spells
from typing import Any, Dict, List, Optional

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from worldsmith_client.utils.helpers import (
    ability_scores, calculate_xp, character_type_label, creator_name,
    rarity_label, region_name, spell_level_label, truncate_text
)

CHARACTER_TYPE_STYLES = {
    "npc": "bold blue",
    "villain": "bold red",
    "ally": "bold green",
}

RARITY_STYLES = {
    "common": "blue",
    "rare": "yellow",
    "legendary": "red",
}

CARD_WIDTH = 44


def _section(title: str, body: Optional[str]) -> Text:
    text = Text(f"{title}\n", style="bold")
    text.append(body or "")
    return text


def character_card(character: Dict[str, Any],
                   regions: Optional[List[Dict[str, Any]]] = None,
                   flipped: bool = False) -> Panel:
    """Front: type, race, description and region. Back: appearance, personality, abilities."""
    name = character.get("name", "")
    if flipped:
        abilities = character.get("abilities") or []
        body = Group(
            _section("Appearance", character.get("appearance")),
            _section("Personality", character.get("personality")),
            _section("Abilities", "\n".join(f"- {ability}" for ability in abilities)),
        )
        return Panel(body, title=name, subtitle="Back", width=CARD_WIDTH, border_style="magenta")

    character_type = character.get("character_type")
    header = Text()
    header.append(character_type_label(character_type),
                  style=CHARACTER_TYPE_STYLES.get((character_type or "npc").lower(), "bold blue"))
    header.append("  ")
    header.append(character.get("race") or "Unknown", style="italic")

    body = Group(
        header,
        Text(character.get("description") or ""),
        Text(f"Region: {region_name(character.get('region_id'), regions, 'Unknown')}", style="dim"),
    )
    return Panel(body, title=name, subtitle="Details", width=CARD_WIDTH, border_style="cyan")


def creature_card(creature: Dict[str, Any],
                  regions: Optional[List[Dict[str, Any]]] = None,
                  flipped: bool = False) -> Panel:
    """Front: rarity, CR, type, element and region. Back: the stat block."""
    name = creature.get("name", "")
    challenge_rating = creature.get("challenge_rating")

    if flipped:
        stats = Table.grid(padding=(0, 2))
        stats.add_column(style="bold")
        stats.add_column()
        armor_class = creature.get("armor_class")
        stats.add_row("Armor Class", f"{armor_class} (Natural Armor)" if armor_class is not None else "")
        stats.add_row("Hit Points", creature.get("hit_points") or "")
        stats.add_row("Speed", creature.get("speed") or "")
        stats.add_row("Challenge", f"{challenge_rating or ''} ({calculate_xp(challenge_rating)} XP)")

        scores = ability_scores(creature.get("abilities"))
        abilities = Table(box=None, padding=(0, 1), show_edge=False)
        for ability, _ in scores:
            abilities.add_column(ability, justify="center")
        abilities.add_row(*[score for _, score in scores])

        parts = [stats, Text("Abilities", style="bold"), abilities]
        attacks = creature.get("special_attacks") or []
        if attacks:
            parts.append(_section("Special Attacks", "\n".join(attacks)))
        return Panel(Group(*parts), title=name, subtitle="Back", width=CARD_WIDTH, border_style="magenta")

    rarity = creature.get("rarity")
    header = Text()
    header.append(rarity_label(rarity), style=RARITY_STYLES.get((rarity or "common").lower(), "blue"))
    header.append(f"  CR {challenge_rating or '-'}")
    if creature.get("creature_type"):
        header.append(f"  {creature['creature_type']}", style="italic")
    if creature.get("element_type"):
        header.append(f"  {creature['element_type']}", style="bold")

    body = Group(
        header,
        Text(creature.get("description") or ""),
        Text(f"Region: {region_name(creature.get('region_id'), regions, 'Various')}", style="dim"),
    )
    return Panel(body, title=name, subtitle="Stats", width=CARD_WIDTH, border_style="cyan")


def spell_card(spell: Dict[str, Any],
               characters: Optional[List[Dict[str, Any]]] = None,
               flipped: bool = False) -> Panel:
    """Front: school, level, casting details and a short description. Back: everything plus the creator."""
    name = spell.get("name", "")
    school = spell.get("school") or "Unknown"
    level = spell_level_label(spell.get("level"))

    details = Table.grid(padding=(0, 2))
    details.add_column(style="bold")
    details.add_column()
    details.add_row("Casting Time", spell.get("casting_time") or "")
    details.add_row("Range", spell.get("range") or "")
    details.add_row("Components", spell.get("components") or "")
    details.add_row("Duration", spell.get("duration") or "")

    if flipped:
        parts = [
            Text(f"{school} {level}", style="bold yellow"),
            details,
            _section("Description", spell.get("description")),
        ]
        creator = creator_name(spell, characters)
        if creator is not None:
            parts.append(_section("Creator", creator))
        return Panel(Group(*parts), title=name, subtitle="Back", width=CARD_WIDTH, border_style="magenta")

    header = Text()
    header.append(school, style="bold yellow")
    header.append(f"  Level {level}")
    body = Group(
        header,
        details,
        Text(truncate_text(spell.get("description") or "", 100)),
    )
    return Panel(body, title=name, subtitle="Full Details", width=CARD_WIDTH, border_style="cyan")
