"""Repository contracts for feeds, entries and scheduling state."""

from __future__ import annotations

from abc import ABC, abstractmethod

from rssify.ids import EntryId, FeedId
from rssify.model import Entry, Feed


class Tx(ABC):
    """Transaction or context handle exposed by a backend."""

    @abstractmethod
    def is_active(self) -> bool:
        """Return whether this handle represents an active transactional scope."""


class FeedRepo(ABC):
    """Storage for feeds. Failures raise ``RepoError``."""

    @abstractmethod
    def get_feed(self, feed_id: FeedId, tx: Tx | None = None) -> Feed:
        """Return the feed with ``feed_id``."""

    @abstractmethod
    def put_feed(self, feed: Feed, tx: Tx | None = None) -> None:
        """Store ``feed``, replacing any earlier version."""

    @abstractmethod
    def list_feeds(self, tx: Tx | None = None) -> list[Feed]:
        """Return every stored feed."""


class EntryRepo(ABC):
    """Storage for entries. Failures raise ``RepoError``."""

    @abstractmethod
    def get_entry(self, entry_id: EntryId, tx: Tx | None = None) -> Entry:
        """Return the entry with ``entry_id``."""

    @abstractmethod
    def upsert_entry(self, entry: Entry, tx: Tx | None = None) -> None:
        """Insert ``entry`` or replace the stored one with the same id."""

    @abstractmethod
    def list_entries_by_feed(self, feed_id: FeedId, tx: Tx | None = None) -> list[Entry]:
        """Return the entries that belong to ``feed_id``."""


class ScheduleRepo(ABC):
    """Persistence of fetch times used for scheduling."""

    @abstractmethod
    def last_ok_fetch_ts(self, feed_id: FeedId, tx: Tx | None = None) -> int | None:
        """Return the last successful fetch time in unix seconds, if any."""

    @abstractmethod
    def record_fetch_ts(self, feed_id: FeedId, ts: int, tx: Tx | None = None) -> None:
        """Record a fetch time in unix seconds."""