"""
Utility helpers for formatting numeric values, weights, and type labels.
"""

from __future__ import annotations

from typing import Iterable, Optional


def format_number(value: Optional[float], decimals: int = 0) -> str:
    if value is None:
        return "–"
    try:
        return f"{value:,.{decimals}f}"
    except (TypeError, ValueError):
        return "–"


def format_weight_kg(weight: Optional[float], decimals: int = 1) -> str:
    """Render an API weight (tenths of a kilogram) in kilograms, e.g. 69 -> "6.9 kg"."""
    if weight is None:
        return "–"
    try:
        return f"{float(weight) / 10:.{decimals}f} kg"
    except (TypeError, ValueError):
        return "–"


def format_type_label(type_name: str) -> str:
    return type_name[:1].upper() + type_name[1:]


def format_types(types: Iterable[str]) -> str:
    return ", ".join(types)


def format_pokedex_id(pokemon_id: int) -> str:
    return f"#{pokemon_id}"
