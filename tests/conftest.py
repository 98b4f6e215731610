"""
Shared fixtures: raw PokeAPI payloads and mapped records.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

import pytest

from pokedash.data.models import Pokemon, records_to_frame


def make_raw(
    pokemon_id: int,
    name: Optional[str] = None,
    types: Optional[List[str]] = None,
    weight: int = 100,
    height: int = 7,
    hp: int = 50,
    attack: int = 50,
    defense: int = 50,
    speed: int = 50,
    sprite: Optional[str] = "default",
) -> Dict[str, Any]:
    """Build a trimmed-down `/pokemon/{id}` response body."""
    stats = {
        "hp": hp,
        "attack": attack,
        "defense": defense,
        "special-attack": 65,
        "special-defense": 65,
        "speed": speed,
    }
    return {
        "id": pokemon_id,
        "name": name or f"pokemon-{pokemon_id}",
        "height": height,
        "weight": weight,
        "types": [
            {"slot": slot, "type": {"name": t, "url": f"https://pokeapi.co/api/v2/type/{t}/"}}
            for slot, t in enumerate(types or ["normal"], start=1)
        ],
        "stats": [
            {"base_stat": value, "effort": 0, "stat": {"name": stat_name}}
            for stat_name, value in stats.items()
        ],
        "sprites": {
            "front_default": (
                f"https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon/{pokemon_id}.png"
                if sprite == "default"
                else sprite
            ),
        },
    }


@pytest.fixture
def raw_factory() -> Callable[..., Dict[str, Any]]:
    return make_raw


@pytest.fixture
def pikachu() -> Pokemon:
    return Pokemon(
        id=25, name="pikachu", types=("electric",), height=4, weight=60,
        hp=35, attack=55, defense=40, speed=90, sprite=None,
    )


@pytest.fixture
def bulbasaur() -> Pokemon:
    return Pokemon(
        id=1, name="bulbasaur", types=("grass", "poison"), height=7, weight=69,
        hp=45, attack=49, defense=49, speed=45, sprite=None,
    )


@pytest.fixture
def sample_df(pikachu, bulbasaur):
    # Input order is pikachu first so order-preservation is observable
    return records_to_frame([pikachu, bulbasaur])
