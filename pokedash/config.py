"""
Application-wide configuration constants and helper utilities.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List

import streamlit as st


@dataclass(frozen=True)
class TabConfig:
    key: str
    label: str


# Ordered tab definitions for the dashboard
TABS: List[TabConfig] = [
    TabConfig("pokedex", "Pokedex"),
    TabConfig("type_breakdown", "Type Breakdown"),
]

SPEEDY_THRESHOLD = 100

# Weight slider works in API units (tenths of a kilogram)
WEIGHT_SLIDER_MAX = 2000
WEIGHT_SLIDER_STEP = 50

ALL_TYPES = "all"


@dataclass(frozen=True)
class DashboardSettings:
    base_url: str = "https://pokeapi.co/api/v2"
    first_id: int = 1
    last_id: int = 150
    fetch_concurrency: int = 20
    http_timeout_seconds: float = 30.0
    log_level: str = "INFO"
    log_json: bool = False

    @property
    def pokemon_ids(self) -> range:
        return range(self.first_id, self.last_id + 1)


def _get_secret(name: str, default: str | None = None) -> str | None:
    """Try env first, then st.secrets (if available)."""
    val = os.getenv(name)
    if val:
        return val
    try:
        sec = getattr(st, "secrets", None)
        if sec:
            v = sec.get(name)  # type: ignore[index]
            return str(v) if v is not None else default
    except Exception:
        # st.secrets raises when no secrets.toml exists
        pass
    return default


def _get_int(name: str, default: int) -> int:
    raw = _get_secret(name)
    if raw is None:
        return default
    try:
        return int(str(raw).strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _get_float(name: str, default: float) -> float:
    raw = _get_secret(name)
    if raw is None:
        return default
    try:
        return float(str(raw).strip())
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def _get_bool(name: str, default: bool) -> bool:
    raw = _get_secret(name)
    if raw is None:
        return default
    return str(raw).strip().lower() in {"1", "true", "yes", "on"}


def get_settings() -> DashboardSettings:
    """Resolve dashboard settings from env vars, st.secrets, then defaults."""
    defaults = DashboardSettings()
    settings = DashboardSettings(
        base_url=(_get_secret("POKEAPI_BASE_URL") or defaults.base_url).rstrip("/"),
        first_id=_get_int("POKEDEX_FIRST_ID", defaults.first_id),
        last_id=_get_int("POKEDEX_LAST_ID", defaults.last_id),
        fetch_concurrency=_get_int("FETCH_CONCURRENCY", defaults.fetch_concurrency),
        http_timeout_seconds=_get_float("HTTP_TIMEOUT_SECONDS", defaults.http_timeout_seconds),
        log_level=(_get_secret("LOG_LEVEL") or defaults.log_level).upper(),
        log_json=_get_bool("LOG_JSON", defaults.log_json),
    )

    if settings.first_id < 1:
        raise ValueError(f"POKEDEX_FIRST_ID must be positive, got {settings.first_id}")
    if settings.last_id < settings.first_id:
        raise ValueError(
            f"POKEDEX_LAST_ID ({settings.last_id}) must be >= POKEDEX_FIRST_ID ({settings.first_id})"
        )
    if settings.fetch_concurrency < 1:
        raise ValueError(f"FETCH_CONCURRENCY must be >= 1, got {settings.fetch_concurrency}")
    return settings
