import json
import logging

from pokedash.utils.logging import JsonFormatter, configure_logging, get_logger


def test_json_formatter_renders_payload():
    record = logging.LogRecord("pokedash.data.loader", logging.INFO, __file__, 1, "Loaded %d pokemon", (150,), None)
    payload = json.loads(JsonFormatter().format(record))
    assert payload == {"level": "INFO", "logger": "pokedash.data.loader", "message": "Loaded 150 pokemon"}


def test_configure_logging_sets_root_level():
    configure_logging(level="DEBUG")
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING
    assert get_logger("pokedash").name == "pokedash"
    configure_logging(level="INFO")
