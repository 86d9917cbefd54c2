"""
ASCII world map for the Worldsmith client.

Locations carry x/y coordinates in map space (0 to MAP_EXTENT on both axes,
origin top-left). The renderer buckets them into a grid whose resolution grows
with the zoom level, labels each marker by kind (L1 standard, Q1 quest, D1
danger) and prints a legend underneath.
"""
from typing import Any, Dict, List, Optional, Tuple

from rich.text import Text

from worldsmith_client.utils.helpers import region_name, marker_label

MAP_EXTENT = 500
DEFAULT_COORDINATE = 50

BASE_COLUMNS = 10
BASE_ROWS = 6

MARKER_PREFIXES = {
    "standard": "L",
    "quest": "Q",
    "danger": "D",
}

MARKER_STYLES = {
    "standard": "bold cyan",
    "quest": "bold yellow",
    "danger": "bold red",
}

EMPTY_CELL = "."
SHARED_CELL = "**"


def marker_position(location: Dict[str, Any]) -> Tuple[int, int]:
    """Map coordinates of a location; unset axes sit at 50"""
    x = location.get("x")
    y = location.get("y")
    return (DEFAULT_COORDINATE if x is None else x, DEFAULT_COORDINATE if y is None else y)


def _col_label(index: int) -> str:
    """A, B, ... Z, AA, AB, ..."""
    label = ""
    index += 1
    while index:
        index, remainder = divmod(index - 1, 26)
        label = chr(ord("A") + remainder) + label
    return label


class MapRenderer:
    """Renders locations onto a zoomable character grid"""

    MIN_COL_WIDTH = 3

    @staticmethod
    def grid_size(zoom: int) -> Tuple[int, int]:
        zoom = max(1, zoom)
        return BASE_COLUMNS * zoom, BASE_ROWS * zoom

    @staticmethod
    def cell_for(location: Dict[str, Any], columns: int, rows: int) -> Tuple[int, int]:
        x, y = marker_position(location)
        col = int(min(max(x, 0), MAP_EXTENT - 1) * columns / MAP_EXTENT)
        row = int(min(max(y, 0), MAP_EXTENT - 1) * rows / MAP_EXTENT)
        return col, row

    @staticmethod
    def assign_labels(locations: List[Dict[str, Any]]) -> Dict[int, str]:
        """Label markers per kind in list order, e.g. L1, L2, Q1, D1"""
        counters: Dict[str, int] = {}
        labels = {}
        for location in locations:
            kind = location.get("marker_type") or "standard"
            prefix = MARKER_PREFIXES.get(kind, MARKER_PREFIXES["standard"])
            counters[prefix] = counters.get(prefix, 0) + 1
            labels[location["id"]] = f"{prefix}{counters[prefix]}"
        return labels

    @classmethod
    def render(cls,
               locations: Optional[List[Dict[str, Any]]],
               regions: Optional[List[Dict[str, Any]]] = None,
               zoom: int = 1) -> str:
        """
        Render the map and its legend.

        Args:
            locations: Locations of the selected world
            regions: Regions of the world, used for legend names
            zoom: 1 is the coarsest grid; each step adds resolution

        Returns:
            A single string with embedded newlines for monospaced display.
        """
        locations = locations or []
        columns, rows = cls.grid_size(zoom)
        labels = cls.assign_labels(locations)
        # Wide enough that neighbouring labels such as L10 and L11 stay apart
        col_width = max([cls.MIN_COL_WIDTH] + [len(label) + 1 for label in labels.values()])

        cells: Dict[Tuple[int, int], List[str]] = {}
        for location in locations:
            cells.setdefault(cls.cell_for(location, columns, rows), []).append(labels[location["id"]])

        row_num_width = max(2, len(str(rows)))
        lines = []

        header = [" " * row_num_width]
        for col in range(columns):
            header.append(_col_label(col).center(col_width))
        lines.append("".join(header))

        for row in range(rows):
            parts = [str(row + 1).rjust(row_num_width)]
            for col in range(columns):
                occupants = cells.get((col, row))
                if not occupants:
                    display = EMPTY_CELL
                elif len(occupants) == 1:
                    display = occupants[0]
                else:
                    display = SHARED_CELL
                parts.append(display.center(col_width))
            lines.append("".join(parts))

        lines.append("")
        lines.extend(cls.legend(locations, regions, labels))
        return "\n".join(lines)

    @staticmethod
    def legend(locations: List[Dict[str, Any]],
               regions: Optional[List[Dict[str, Any]]],
               labels: Dict[int, str]) -> List[str]:
        lines = ["Legend: " + "  ".join(
            f"{prefix}# {marker_label(kind)}" for kind, prefix in MARKER_PREFIXES.items()
        ) + f"  {SHARED_CELL} Several locations"]

        if not locations:
            lines.append("No locations have been placed on this map yet.")
            return lines

        label_width = max(4, max(len(label) for label in labels.values()))
        for location in locations:
            x, y = marker_position(location)
            lines.append(
                f"{labels[location['id']]:>{label_width}}  {location.get('name')} "
                f"({region_name(location.get('region_id'), regions)}) at {x}, {y}"
            )
        return lines

    @classmethod
    def styled(cls, rendered: str) -> Text:
        """Colour marker labels by kind for the console"""
        text = Text(rendered)
        for kind, prefix in MARKER_PREFIXES.items():
            text.highlight_regex(rf"\b{prefix}\d+\b", MARKER_STYLES[kind])
        text.highlight_regex(r"\*\*", "bold magenta")
        return text
