"""Adapters - I/O implementations of ports."""

from .errors import EventSourceError
from .json_file import JsonFileEventSource
from .http_source import HttpEventSource, source_for

__all__ = [
    "EventSourceError",
    "JsonFileEventSource",
    "HttpEventSource",
    "source_for",
]
