"""Quick validation script for the record mapper, aggregator, and filters.

Run with `python scripts/validate_mapping.py` to check that a sample API
payload maps to the expected records and statistics without touching the
network.
"""

from __future__ import annotations

from pokedash.data.filters import FilterCriteria, apply_filters, available_types
from pokedash.data.models import PokemonSet, map_pokemon
from pokedash.data.stats import compute_stats


def _raw(pokemon_id: int, name: str, types: list[str], weight: int, stats: dict[str, int]) -> dict:
    return {
        "id": pokemon_id,
        "name": name,
        "height": 4,
        "weight": weight,
        "types": [{"slot": i + 1, "type": {"name": t}} for i, t in enumerate(types)],
        "stats": [{"base_stat": v, "stat": {"name": k}} for k, v in stats.items()],
        "sprites": {"front_default": f"https://example.invalid/{pokemon_id}.png"},
    }


def main() -> None:
    sample = [
        _raw(25, "pikachu", ["electric"], 60, {"hp": 35, "attack": 55, "defense": 40, "speed": 90}),
        _raw(1, "bulbasaur", ["grass", "poison"], 69, {"hp": 45, "attack": 49, "defense": 49, "speed": 45}),
    ]

    pokemon = PokemonSet(map_pokemon(raw) for raw in sample)
    df = pokemon.to_frame()
    stats = compute_stats(df)

    if list(pokemon) != [1, 25]:
        raise SystemExit(f"Records should be keyed in id order, got {list(pokemon)}")
    if available_types(df) != ["electric", "grass", "poison"]:
        raise SystemExit(f"Unexpected type list: {available_types(df)}")

    assert stats.total == 2, "Both records should be counted"
    assert stats.avg_attack == 52, "Average attack should round half up"
    assert stats.max_hp == 45
    assert apply_filters(df, FilterCriteria(search="PIKA"))["name"].tolist() == ["pikachu"]
    assert apply_filters(df, FilterCriteria(type="poison"))["name"].tolist() == ["bulbasaur"]
    assert apply_filters(df, FilterCriteria(min_weight=700)).empty

    print("Mapping validation passed. Stats:", stats.as_dict())


if __name__ == "__main__":
    main()
