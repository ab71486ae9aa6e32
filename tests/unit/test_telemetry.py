"""Tests for the structlog setup and processors."""

import logging

from catchdisc.telemetry import setup_logging
from catchdisc.telemetry.logger.processors import add_emoji_processor, remove_extra_keys_processor


def test_emoji_from_level() -> None:
    event = add_emoji_processor(None, "warning", {"event": "careful", "level": "warning"})

    assert event["event"] == "⚠️ careful"


def test_emoji_from_key_and_key_removed() -> None:
    event = add_emoji_processor(None, "info", {"event": "done", "level": "info", "emoji_key": "timeout"})
    event = remove_extra_keys_processor(None, "info", event)

    assert event["event"] == "⏱️ done"
    assert "emoji_key" not in event


def test_setup_logging_installs_handlers(tmp_path) -> None:
    log_file = tmp_path / "catchdisc.log"

    setup_logging(level=logging.DEBUG, json_logs=True, log_file=str(log_file))

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(h, logging.FileHandler) for h in root.handlers)
    for handler in list(root.handlers):
        handler.close()
        root.removeHandler(handler)
