"""
Record model for a single Pokemon and the mapper that builds it from a raw
PokeAPI `/pokemon/{id}` response.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

import pandas as pd

from pokedash.errors import MissingStatError, RecordMappingError

STAT_NAMES: Tuple[str, ...] = ("hp", "attack", "defense", "speed")

FRAME_COLUMNS: List[str] = [
    "id",
    "name",
    "types",
    "height",
    "weight",
    "hp",
    "attack",
    "defense",
    "speed",
    "sprite",
]


@dataclass(frozen=True)
class Pokemon:
    id: int
    name: str
    types: Tuple[str, ...]
    height: int
    weight: int  # tenths of a kilogram
    hp: int
    attack: int
    defense: int
    speed: int
    sprite: Optional[str] = None

    def __post_init__(self) -> None:
        if self.id < 1:
            raise RecordMappingError(f"Pokemon id must be positive, got {self.id}")
        if not self.name:
            raise RecordMappingError(f"Pokemon id={self.id} has an empty name")
        if not self.types:
            raise RecordMappingError(f"Pokemon id={self.id} has no types")
        for field_name in ("height", "weight", *STAT_NAMES):
            if getattr(self, field_name) < 0:
                raise RecordMappingError(
                    f"Pokemon id={self.id} has negative {field_name}: {getattr(self, field_name)}"
                )


def _require(raw: Mapping[str, Any], key: str) -> Any:
    try:
        return raw[key]
    except (KeyError, TypeError):
        raise RecordMappingError(f"Raw pokemon object is missing '{key}'") from None


def _as_int(value: Any, label: str) -> int:
    # bool is an int subclass; floats would be truncated by int()
    if isinstance(value, bool) or not isinstance(value, int):
        raise RecordMappingError(f"Field '{label}' is not an integer: {value!r}")
    return value


def _as_name(value: Any, label: str) -> str:
    if not isinstance(value, str) or not value:
        raise RecordMappingError(f"Field '{label}' is not a non-empty string: {value!r}")
    return value


def _require_int(raw: Mapping[str, Any], key: str) -> int:
    return _as_int(_require(raw, key), key)


def _extract_types(raw: Mapping[str, Any]) -> Tuple[str, ...]:
    entries = _require(raw, "types")
    try:
        # Slot order when present; sorted() is stable for entries without one
        ordered = sorted(entries, key=lambda e: e.get("slot", 0))
        names = [entry["type"]["name"] for entry in ordered]
    except (KeyError, TypeError, AttributeError) as exc:
        raise RecordMappingError(f"Malformed 'types' for pokemon id={raw.get('id')}: {exc}") from exc
    return tuple(_as_name(name, "types.type.name") for name in names)


def _extract_stats(raw: Mapping[str, Any]) -> Dict[str, int]:
    entries = _require(raw, "stats")
    by_name: Dict[str, int] = {}
    try:
        for entry in entries:
            name = entry["stat"]["name"]
            # First occurrence wins
            by_name.setdefault(name, _as_int(entry["base_stat"], f"stats.{name}.base_stat"))
    except (KeyError, TypeError, ValueError) as exc:
        raise RecordMappingError(f"Malformed 'stats' for pokemon id={raw.get('id')}: {exc}") from exc

    stats: Dict[str, int] = {}
    for stat_name in STAT_NAMES:
        if stat_name not in by_name:
            raise MissingStatError(stat_name, raw.get("id"))
        stats[stat_name] = by_name[stat_name]
    return stats


def map_pokemon(raw: Mapping[str, Any]) -> Pokemon:
    """Convert one raw API object into a flat `Pokemon` record.

    A missing named stat is a hard failure (`MissingStatError`); no value is
    defaulted.
    """
    stats = _extract_stats(raw)
    sprites = raw.get("sprites") or {}
    return Pokemon(
        id=_require_int(raw, "id"),
        name=_as_name(_require(raw, "name"), "name"),
        types=_extract_types(raw),
        height=_require_int(raw, "height"),
        weight=_require_int(raw, "weight"),
        hp=stats["hp"],
        attack=stats["attack"],
        defense=stats["defense"],
        speed=stats["speed"],
        sprite=sprites.get("front_default"),
    )


class PokemonSet(Mapping[int, Pokemon]):
    """Read-only collection of records keyed by id, iterated in id order."""

    def __init__(self, records: Iterable[Pokemon] = ()):
        by_id: Dict[int, Pokemon] = {}
        for record in records:
            if record.id in by_id:
                raise ValueError(f"Duplicate pokemon id {record.id}")
            by_id[record.id] = record
        self._by_id = dict(sorted(by_id.items()))

    def __getitem__(self, pokemon_id: int) -> Pokemon:
        return self._by_id[pokemon_id]

    def __iter__(self) -> Iterator[int]:
        return iter(self._by_id)

    def __len__(self) -> int:
        return len(self._by_id)

    def to_frame(self) -> pd.DataFrame:
        return records_to_frame(self._by_id.values())


def records_to_frame(records: Iterable[Pokemon]) -> pd.DataFrame:
    """Build the DataFrame view consumed by the aggregator, filters, and UI."""
    rows = [asdict(record) for record in records]
    if not rows:
        return pd.DataFrame(columns=FRAME_COLUMNS)
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)
