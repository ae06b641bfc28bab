"""Pipeline data types and the seams that adapters implement."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """Broad categories of pipeline failure."""

    INVALID = "invalid"
    NOT_FOUND = "not_found"
    IO = "io"
    OTHER = "other"


class DomainError(Exception):
    """A pipeline failure tagged with its kind."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    @classmethod
    def from_exception(cls, exc: BaseException) -> DomainError:
        """Wrap any exception as an ``OTHER`` error carrying its text."""
        return cls(ErrorKind.OTHER, str(exc))


@dataclass
class EntryMeta:
    """Metadata about an entry; timestamps are RFC 3339 UTC strings."""

    url: str
    title: str | None = None
    published_rfc3339: str | None = None
    source_label: str | None = None

    def __str__(self) -> str:
        return self.title if self.title is not None else "<untitled>"


@dataclass
class Item:
    """A fetched item with its readable text and fingerprint."""

    url: str
    readable_text: str | None
    fingerprint: str
    meta: EntryMeta


class Repository(ABC):
    """Stores items keyed by fingerprint."""

    @abstractmethod
    def save_item(self, item: Item) -> None:
        """Persist ``item``; raise ``DomainError`` on failure."""

    @abstractmethod
    def exists(self, fingerprint: str) -> bool:
        """Return whether an item with ``fingerprint`` is stored."""


class Fetcher(ABC):
    """Retrieves raw bytes for a URL."""

    @abstractmethod
    def fetch(self, url: str) -> bytes:
        """Return the body at ``url``; raise ``DomainError`` on failure."""


class Parser(ABC):
    """Extracts readable text from HTML."""

    @abstractmethod
    def parse_readable(self, html_bytes: bytes) -> str:
        """Return the readable text of ``html_bytes``."""


class Scheduler(ABC):
    """Chooses how long to wait before the next poll."""

    @abstractmethod
    def next_interval_secs(self, last_http_status: int | None, saw_new: bool) -> int:
        """Return the number of seconds until the next fetch."""