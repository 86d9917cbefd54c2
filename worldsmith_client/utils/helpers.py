#!/usr/bin/env python
# Helper utility functions for rendering campaign records
from datetime import datetime, date
from typing import Dict, Any, List, Optional, Union, Tuple

# Experience awarded per challenge rating
CR_XP_VALUES = {
    "0": 10,
    "1/8": 25,
    "1/4": 50,
    "1/2": 100,
    "1": 200,
    "2": 450,
    "3": 700,
    "4": 1100,
    "5": 1800,
    "6": 2300,
    "8": 3900,
    "9": 5000,
    "10": 5900,
    "12": 8400,
    "15": 13000,
    "20": 25000,
    "24": 62000,
    "30": 155000,
}

ABILITY_NAMES = ("STR", "DEX", "CON", "INT", "WIS", "CHA")

MARKER_LABELS = {
    "standard": "Standard Location",
    "quest": "Quest Location",
    "danger": "Danger Zone",
}


def calculate_xp(challenge_rating: Optional[str]) -> str:
    """Experience for a challenge rating, e.g. "5" -> "1,800"; unlisted -> "Unknown" """
    if not challenge_rating:
        return "Unknown"
    xp = CR_XP_VALUES.get(str(challenge_rating).strip())
    if xp is None:
        return "Unknown"
    return f"{xp:,}"


def find_by_id(items: Optional[List[Dict[str, Any]]], item_id: Optional[int]) -> Optional[Dict[str, Any]]:
    if item_id is None or not items:
        return None
    return next((item for item in items if item.get("id") == item_id), None)


def region_name(region_id: Optional[int], regions: Optional[List[Dict[str, Any]]],
                fallback: str = "Unknown") -> str:
    """Name of the referenced region, or the fallback label"""
    region = find_by_id(regions, region_id)
    return region["name"] if region else fallback


def creator_name(spell: Dict[str, Any], characters: Optional[List[Dict[str, Any]]]) -> Optional[str]:
    """Name of the character who created a spell; None when no creator is set"""
    creator_id = spell.get("creator_character_id")
    if creator_id is None:
        return None
    creator = find_by_id(characters, creator_id)
    return creator["name"] if creator else "Unknown wizard"


def ability_scores(abilities: Optional[Dict[str, Any]]) -> List[Tuple[str, str]]:
    """Pair each standard ability with its score, "-" where it is missing"""
    abilities = abilities if isinstance(abilities, dict) else {}
    scores = []
    for name in ABILITY_NAMES:
        score = abilities.get(name)
        scores.append((name, "-" if score is None else str(score)))
    return scores


def rarity_label(rarity: Optional[str]) -> str:
    if not rarity:
        return "Common"
    return rarity[0].upper() + rarity[1:]


def character_type_label(character_type: Optional[str]) -> str:
    return character_type.upper() if character_type else "NPC"


def spell_level_label(level: Optional[int]) -> str:
    return "?" if level is None else str(level)


def marker_label(marker_type: Optional[str]) -> str:
    return MARKER_LABELS.get(marker_type or "standard", MARKER_LABELS["standard"])


def format_coordinates(x: Optional[int], y: Optional[int]) -> str:
    x_text = "Not set" if x is None else str(x)
    y_text = "Not set" if y is None else str(y)
    return f"X: {x_text}, Y: {y_text}"


def format_date(date_obj: Union[datetime, date, str, None]) -> str:
    """Format a date or datetime object as a readable string"""
    if date_obj is None:
        return "N/A"

    if isinstance(date_obj, str):
        try:
            date_obj = datetime.fromisoformat(date_obj.replace('Z', '+00:00'))
        except ValueError:
            return date_obj

    if isinstance(date_obj, datetime):
        return date_obj.strftime("%Y-%m-%d %H:%M")
    return date_obj.strftime("%Y-%m-%d")


def truncate_text(text: str, max_length: int = 50, ellipsis: str = "...") -> str:
    """Truncate text to a maximum length and add ellipsis if needed"""
    if not text:
        return ""

    if len(text) <= max_length:
        return text

    return text[:max_length - len(ellipsis)] + ellipsis
