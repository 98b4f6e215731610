import pytest

from pokedash.data.models import Pokemon, records_to_frame
from pokedash.data.stats import DashboardStats, compute_stats, round_half_up


def _pokemon(pokemon_id: int, **overrides) -> Pokemon:
    values = dict(
        id=pokemon_id, name=f"p{pokemon_id}", types=("normal",), height=1, weight=100,
        hp=50, attack=50, defense=50, speed=50,
    )
    values.update(overrides)
    return Pokemon(**values)


def test_empty_set_is_all_zero():
    assert compute_stats(records_to_frame([])) == DashboardStats(0, 0, 0, 0, 0)


def test_stats_over_sample(sample_df):
    stats = compute_stats(sample_df)
    assert stats.total == 2
    assert stats.avg_attack == round((55 + 49) / 2)
    assert stats.max_hp == 45
    assert stats.speedy_count == 0
    # (60 + 69) / 2 / 10 = 6.45
    assert stats.avg_weight == 6


def test_speedy_threshold_is_inclusive():
    df = records_to_frame([_pokemon(1, speed=100), _pokemon(2, speed=99), _pokemon(3, speed=130)])
    assert compute_stats(df).speedy_count == 2


def test_average_rounds_half_up_once():
    df = records_to_frame([_pokemon(1, attack=50), _pokemon(2, attack=51)])
    assert compute_stats(df).avg_attack == 51


def test_average_weight_converts_to_kilograms():
    df = records_to_frame([_pokemon(1, weight=905), _pokemon(2, weight=1000)])
    # 1905 / 2 / 10 = 95.25
    assert compute_stats(df).avg_weight == 95


@pytest.mark.parametrize(
    "value, expected",
    [(0.5, 1), (1.5, 2), (2.5, 3), (2.49, 2), (0.0, 0)],
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected
