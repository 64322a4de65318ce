"""Configuration management for Agenda."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from .core.events import CATEGORY_ORDER, Category
from .core.window import ViewMode

logger = logging.getLogger(__name__)

AGENDA_HOME = Path(os.environ.get("AGENDA_HOME", Path.home() / "agenda"))
CONFIG_FILE = AGENDA_HOME / "config" / "agenda.conf"
DATA_DIR = AGENDA_HOME / "data"


@dataclass
class Config:
    """Agenda configuration."""

    events_source: str = str(DATA_DIR / "events.json")
    default_view: ViewMode = ViewMode.MONTH
    enabled_categories: list[Category] = field(default_factory=lambda: list(CATEGORY_ORDER))
    upcoming_limit: int = 3
    http_timeout: int = 10


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from unquoted values."""
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def _parse_positive_int(key: str, value: str, default: int) -> int:
    try:
        number = int(value)
    except ValueError:
        logger.warning(f"Invalid {key.upper()} {value!r}, using {default}")
        return default
    if number <= 0:
        logger.warning(f"{key.upper()} must be positive, using {default}")
        return default
    return number


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from agenda.conf file."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if not config_file.exists():
        return config

    for line in config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "events_source":
                config.events_source = os.path.expanduser(value)
            case "default_view":
                try:
                    config.default_view = ViewMode(value.lower())
                except ValueError:
                    logger.warning(f"Invalid DEFAULT_VIEW {value!r}, using {config.default_view.value}")
            case "enabled_categories":
                categories = []
                for name in value.split(","):
                    name = name.strip().lower()
                    if not name:
                        continue
                    try:
                        categories.append(Category(name))
                    except ValueError:
                        logger.warning(f"Ignoring unknown category in ENABLED_CATEGORIES: {name!r}")
                config.enabled_categories = categories
            case "upcoming_limit":
                config.upcoming_limit = _parse_positive_int(key, value, config.upcoming_limit)
            case "http_timeout":
                config.http_timeout = _parse_positive_int(key, value, config.http_timeout)

    return config
