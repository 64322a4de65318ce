"""JSON file event source adapter."""

import json
import logging
from pathlib import Path

from .errors import EventSourceError, ensure_record_list

logger = logging.getLogger(__name__)


class JsonFileEventSource:
    """
    Reads the event collection from a local JSON document.

    Implements EventSource protocol. The file holds an array of event objects.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def load(self) -> list[dict]:
        """Load event records from the file."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise EventSourceError(f"Events file not found: {self.path}") from None
        except OSError as e:
            raise EventSourceError(f"Cannot read {self.path}: {e}") from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise EventSourceError(f"Failed to parse {self.path}: {e}") from e

        records = ensure_record_list(data, str(self.path))
        logger.debug(f"Loaded {len(records)} event records from {self.path}")
        return records
