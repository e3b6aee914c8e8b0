import json
import logging

from recharge.config import ObservabilityConfig
from recharge.logging_config import JSONFormatter, configure_logging


def test_json_formatter_includes_extra_fields():
    logger = logging.getLogger("recharge.test")
    record = logger.makeRecord(
        "recharge.test",
        logging.INFO,
        __file__,
        1,
        "Pushed hosting branch",
        None,
        None,
        extra={"branch": "gh-pages"},
    )

    payload = json.loads(JSONFormatter().format(record))

    assert payload["message"] == "Pushed hosting branch"
    assert payload["level"] == "INFO"
    assert payload["branch"] == "gh-pages"
    assert "msg" not in payload


def test_configure_logging_sets_level_and_formatter():
    configure_logging(ObservabilityConfig(level="debug", structured=True))

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert isinstance(root.handlers[0].formatter, JSONFormatter)

    configure_logging(ObservabilityConfig(level="WARNING"))
    assert root.level == logging.WARNING
    assert not isinstance(root.handlers[0].formatter, JSONFormatter)
