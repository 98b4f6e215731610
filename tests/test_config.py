import pytest

from pokedash.config import DashboardSettings, get_settings

ENV_VARS = [
    "POKEAPI_BASE_URL",
    "POKEDEX_FIRST_ID",
    "POKEDEX_LAST_ID",
    "FETCH_CONCURRENCY",
    "HTTP_TIMEOUT_SECONDS",
    "LOG_LEVEL",
    "LOG_JSON",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_cover_first_150():
    settings = get_settings()
    assert settings == DashboardSettings()
    assert settings.pokemon_ids == range(1, 151)
    assert settings.base_url == "https://pokeapi.co/api/v2"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("POKEAPI_BASE_URL", "http://localhost:8000/api/v2/")
    monkeypatch.setenv("POKEDEX_LAST_ID", "10")
    monkeypatch.setenv("FETCH_CONCURRENCY", "4")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_JSON", "true")
    settings = get_settings()
    assert settings.base_url == "http://localhost:8000/api/v2"
    assert settings.pokemon_ids == range(1, 11)
    assert settings.fetch_concurrency == 4
    assert settings.log_level == "DEBUG"
    assert settings.log_json is True


@pytest.mark.parametrize(
    "name, value",
    [
        ("POKEDEX_LAST_ID", "abc"),
        ("POKEDEX_FIRST_ID", "0"),
        ("FETCH_CONCURRENCY", "0"),
        ("HTTP_TIMEOUT_SECONDS", "soon"),
    ],
)
def test_invalid_values_raise(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError):
        get_settings()


def test_last_id_before_first_id(monkeypatch):
    monkeypatch.setenv("POKEDEX_FIRST_ID", "10")
    monkeypatch.setenv("POKEDEX_LAST_ID", "5")
    with pytest.raises(ValueError):
        get_settings()
