"""
Filter utilities that apply the dashboard filter criteria to the pokemon dataset.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

import pandas as pd

from pokedash.config import ALL_TYPES


@dataclass(frozen=True)
class FilterCriteria:
    search: str = ""
    type: str = ALL_TYPES
    min_weight: int = 0  # tenths of a kilogram


DEFAULT_CRITERIA = FilterCriteria()


def apply_filters(df: pd.DataFrame, criteria: FilterCriteria) -> pd.DataFrame:
    """
    Keep the rows that satisfy every criterion, in their original order.

    Name matching is a case-insensitive substring test; type matching is an
    exact, case-sensitive membership test against each row's `types`.
    """
    if df.empty:
        return df

    mask = pd.Series(True, index=df.index)

    search = criteria.search.lower()
    if search:
        mask &= df["name"].astype(str).str.lower().str.contains(search, regex=False)

    if criteria.type != ALL_TYPES:
        mask &= df["types"].apply(lambda types: criteria.type in types)

    if criteria.min_weight > 0:
        mask &= pd.to_numeric(df["weight"]) >= criteria.min_weight

    filtered = df[mask]
    filtered.attrs["applied_filters"] = serialize_criteria(criteria)
    return filtered


def available_types(df: pd.DataFrame) -> List[str]:
    """Distinct types across all rows, sorted lexicographically."""
    if df.empty:
        return []
    return sorted({t for types in df["types"] for t in types})


def serialize_criteria(criteria: FilterCriteria) -> Dict[str, Any]:
    """
    Convert FilterCriteria to a JSON-serialisable dictionary to be stored in
    session_state or used for logging/debugging.
    """
    return {
        "search": criteria.search,
        "type": criteria.type,
        "min_weight": criteria.min_weight,
    }
