"""
Static type table for the catalogue.

``TYPE_COLORS`` maps an elemental type name to the color used for the
dots on a card and for the indicators in the filter sidebar.
``FILTER_CATEGORIES`` is the fixed checklist shown in the sidebar; it
does not depend on what the catalogue actually contains.
"""

from __future__ import annotations

from typing import Dict, List, Tuple


DEFAULT_TYPE_COLOR = "#AAA"

TYPE_COLORS: Dict[str, str] = {
    "normal": "#A8A77A",
    "fighting": "#C22E28",
    "flying": "#A98FF3",
    "poison": "#A33EA1",
    "ground": "#E2BF65",
    "rock": "#B6A136",
    "bug": "#A6B91A",
    "ghost": "#735797",
    "steel": "#B7B7CE",
    "fire": "#EE8130",
    "water": "#6390F0",
    "grass": "#7AC74C",
    "electric": "#F7D02C",
    "psychic": "#F95587",
    "ice": "#96D9D6",
    "dragon": "#6F35FC",
    "dark": "#705746",
    "fairy": "#D685AD",
    "stellar": "#4E8DD3",
    "unknown": "#A9A9A9",
}

# (value, label) pairs in sidebar order
FILTER_CATEGORIES: Tuple[Tuple[str, str], ...] = (
    ("normal", "Normal"),
    ("fire", "Fire"),
    ("water", "Water"),
    ("electric", "Electric"),
    ("grass", "Grass"),
    ("ice", "Ice"),
    ("fighting", "Fighting"),
    ("poison", "Poison"),
    ("ground", "Ground"),
    ("flying", "Flying"),
    ("psychic", "Psychic"),
    ("bug", "Bug"),
    ("rock", "Rock"),
    ("ghost", "Ghost"),
    ("dragon", "Dragon"),
    ("dark", "Dark"),
    ("steel", "Steel"),
    ("fairy", "Fairy"),
)

FILTER_VALUES = frozenset(value for value, _ in FILTER_CATEGORIES)


def type_color(name: str) -> str:
    """Return the display color for a type name, gray when unknown."""
    return TYPE_COLORS.get(name, DEFAULT_TYPE_COLOR)


def is_filter_category(name: str) -> bool:
    return name in FILTER_VALUES


def filter_table() -> List[Dict[str, str]]:
    """The sidebar checklist as plain dicts (value, label, color)."""
    return [
        {"value": value, "label": label, "color": type_color(value)}
        for value, label in FILTER_CATEGORIES
    ]
