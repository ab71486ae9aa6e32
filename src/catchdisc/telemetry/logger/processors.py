# src/catchdisc/telemetry/logger/processors.py

import logging
from typing import Any

from structlog.typing import EventDict

LOG_EMOJIS = {
    logging.DEBUG: "🐛",
    logging.INFO: "ℹ️",
    logging.WARNING: "⚠️",
    logging.ERROR: "❌",
    logging.CRITICAL: "💥",
    "source": "📦",
    "process": "⚙️",
    "parse": "🔎",
    "timeout": "⏱️",
    "general": "➡️",
}

# Keys used only to choose an emoji; never rendered.
_INTERNAL_KEYS = ("emoji_key",)


def add_emoji_processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Prefixes the event with an emoji picked from `emoji_key` or the level."""
    key = event_dict.get("emoji_key")
    emoji = LOG_EMOJIS.get(key) if key else None
    if emoji is None:
        level = logging.getLevelName(str(event_dict.get("level", "info")).upper())
        emoji = LOG_EMOJIS.get(level, LOG_EMOJIS["general"])
    event = event_dict.get("event")
    if isinstance(event, str):
        event_dict["event"] = f"{emoji} {event}"
    return event_dict


def remove_extra_keys_processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    for key in _INTERNAL_KEYS:
        event_dict.pop(key, None)
    return event_dict

# 🔼⚙️
