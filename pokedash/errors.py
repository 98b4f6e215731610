"""Exception types raised by the data layer of the dashboard."""

from __future__ import annotations


class PokedashError(Exception):
    """Base class for all dashboard errors."""


class RecordMappingError(PokedashError, ValueError):
    """A raw API object does not have the shape the record mapper expects."""


class MissingStatError(RecordMappingError, LookupError):
    """A named base stat is absent from the raw API object."""

    def __init__(self, stat_name: str, pokemon_id: object = None):
        self.stat_name = stat_name
        self.pokemon_id = pokemon_id
        super().__init__(f"Stat '{stat_name}' missing for pokemon id={pokemon_id}")


class BatchFetchError(PokedashError):
    """One request of the batch failed, so the whole batch failed."""

    def __init__(self, message: str, pokemon_id: int | None = None):
        self.pokemon_id = pokemon_id
        super().__init__(message)
