"""HTTP event source adapter."""

import logging
from pathlib import Path

import requests

from agenda.ports import EventSource

from .errors import EventSourceError, ensure_record_list
from .json_file import JsonFileEventSource

logger = logging.getLogger(__name__)


class HttpEventSource:
    """
    Fetches the event collection from a URL serving a JSON array.

    Implements EventSource protocol. No business logic - just I/O.
    """

    def __init__(self, url: str, timeout: int = 10, session: requests.Session | None = None):
        self.url = url
        self.timeout = timeout
        self._session = session or requests.Session()

    def load(self) -> list[dict]:
        """Fetch event records from the URL."""
        try:
            resp = self._session.get(
                self.url,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
            resp.raise_for_status()
        except requests.Timeout:
            raise EventSourceError(f"Timed out after {self.timeout}s fetching {self.url}") from None
        except requests.RequestException as e:
            raise EventSourceError(f"Failed to fetch {self.url}: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            raise EventSourceError(f"{self.url} did not return JSON: {e}") from e

        records = ensure_record_list(data, self.url)
        logger.debug(f"Fetched {len(records)} event records from {self.url}")
        return records


def source_for(location: str, timeout: int = 10) -> EventSource:
    """Pick an adapter by location: http(s) URLs are fetched, anything else is a file."""
    if location.startswith(("http://", "https://")):
        return HttpEventSource(location, timeout=timeout)
    return JsonFileEventSource(Path(location))
