from pokedash.data.filters import (
    DEFAULT_CRITERIA,
    FilterCriteria,
    apply_filters,
    available_types,
    serialize_criteria,
)
from pokedash.data.models import records_to_frame


def _names(df):
    return df["name"].tolist()


def test_default_criteria_keeps_everything_in_order(sample_df):
    assert _names(apply_filters(sample_df, DEFAULT_CRITERIA)) == ["pikachu", "bulbasaur"]


def test_search_is_case_insensitive_substring(sample_df):
    assert _names(apply_filters(sample_df, FilterCriteria(search="pika"))) == ["pikachu"]
    assert _names(apply_filters(sample_df, FilterCriteria(search="SAUR"))) == ["bulbasaur"]


def test_search_is_not_a_regex(sample_df):
    assert apply_filters(sample_df, FilterCriteria(search="p.ka")).empty


def test_type_filter_matches_any_of_the_record_types(sample_df):
    assert _names(apply_filters(sample_df, FilterCriteria(type="poison"))) == ["bulbasaur"]


def test_type_filter_is_case_sensitive(sample_df):
    assert apply_filters(sample_df, FilterCriteria(type="Poison")).empty


def test_min_weight_excludes_lighter_records(sample_df):
    assert apply_filters(sample_df, FilterCriteria(min_weight=700)).empty
    assert _names(apply_filters(sample_df, FilterCriteria(min_weight=69))) == ["bulbasaur"]


def test_criteria_combine_conjunctively(sample_df):
    criteria = FilterCriteria(search="pika", type="poison")
    assert apply_filters(sample_df, criteria).empty


def test_filters_on_empty_frame():
    df = records_to_frame([])
    assert apply_filters(df, FilterCriteria(search="x", type="fire", min_weight=10)).empty


def test_available_types_deduplicated_and_sorted(sample_df):
    assert available_types(sample_df) == ["electric", "grass", "poison"]


def test_available_types_empty():
    assert available_types(records_to_frame([])) == []


def test_serialize_criteria():
    assert serialize_criteria(FilterCriteria(search="bul", type="grass", min_weight=50)) == {
        "search": "bul",
        "type": "grass",
        "min_weight": 50,
    }
