#!/usr/bin/env python
# Client-side search and category filtering for page lists
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

ALL = "all"


@dataclass(frozen=True)
class PageFilter:
    """Which fields a page searches and which one it filters by category"""
    category_field: Optional[str]
    text_fields: Sequence[str] = ("name", "description")


PAGE_FILTERS = {
    "characters": PageFilter("character_type"),
    "creatures": PageFilter("rarity"),
    "spells": PageFilter("school"),
    "regions": PageFilter("type"),
    "locations": PageFilter("region_id", ("name", "description", "location_type")),
    "lore": PageFilter("category", ("title", "content")),
}


def matches_search(record: Dict[str, Any], search: str, text_fields: Sequence[str]) -> bool:
    """Case-insensitive substring match on any of the text fields"""
    term = (search or "").lower()
    if not term:
        return True
    return any(term in (record.get(name) or "").lower() for name in text_fields)


def matches_category(record: Dict[str, Any], category_field: Optional[str], category: Any) -> bool:
    """Exact match; ids and text compare alike, so region 3 matches "3" from a prompt"""
    if not category_field or category is None or category == "" or category == ALL:
        return True
    value = record.get(category_field)
    return value is not None and str(value) == str(category)


def filter_records(records: Optional[List[Dict[str, Any]]],
                   collection: str,
                   search: str = "",
                   category: Optional[str] = ALL) -> List[Dict[str, Any]]:
    """
    Narrow a fetched collection the way its page does.

    Args:
        records: The list as returned by the API
        collection: Key into PAGE_FILTERS, e.g. "creatures"
        search: Free-text term; empty matches everything
        category: Exact value for the page's category field; "all" disables it
    """
    page_filter = PAGE_FILTERS[collection]
    return [
        record for record in records or []
        if matches_search(record, search, page_filter.text_fields)
        and matches_category(record, page_filter.category_field, category)
    ]


def category_options(records: Optional[List[Dict[str, Any]]], collection: str) -> List[str]:
    """Distinct category values present in a list, with "all" first"""
    field = PAGE_FILTERS[collection].category_field
    values = []
    for record in records or []:
        value = record.get(field)
        if value is None or value == "":
            continue
        if str(value) not in values:
            values.append(str(value))
    return [ALL] + sorted(values)
