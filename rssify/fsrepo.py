"""Filesystem repository storing feeds, entries and schedule state as files."""

from __future__ import annotations

import json
import os
import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, TypeVar

from rssify.errors import BackendError
from rssify.ids import EntryId, FeedId
from rssify.model import Entry, Feed
from rssify.repo import EntryRepo, FeedRepo, ScheduleRepo, Tx

_T = TypeVar("_T")
_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1
_INT_RE = re.compile(r"[+-]?[0-9]+")


def escape_id(id_text: str) -> str:
    """Escape an identifier into a filesystem-safe path component.

    ASCII letters, digits, ``-`` and ``_`` pass through; every other byte of
    the UTF-8 encoding becomes ``_xx`` in lower-case hex.
    """
    parts = []
    for byte in id_text.encode("utf-8"):
        char = chr(byte)
        if (char.isascii() and char.isalnum()) or char in "-_":
            parts.append(char)
        else:
            parts.append(f"_{byte:02x}")
    return "".join(parts)


def write_atomic_json(path: str | os.PathLike[str], value: Any) -> None:
    """Write ``value`` as pretty JSON via a temporary file and an atomic rename."""
    target = Path(path)
    tmp = Path(f"{os.fspath(target)}.tmp")
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        text = json.dumps(value, indent=2, ensure_ascii=False)
        with open(tmp, "w", encoding="utf-8") as handle:
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp, target)
    except (OSError, TypeError, ValueError) as exc:
        raise BackendError(str(exc)) from exc


def read_json(path: str | os.PathLike[str]) -> Any:
    """Read and parse the JSON document at ``path``."""
    try:
        text = Path(path).read_text(encoding="utf-8")
        return json.loads(text)
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        raise BackendError(str(exc)) from exc


def _read_record(path: Path, build: Callable[[Mapping[str, Any]], _T]) -> _T:
    data = read_json(path)
    if not isinstance(data, Mapping):
        raise BackendError(f"expected a JSON object in {path}")
    try:
        return build(data)
    except (ValueError, TypeError) as exc:
        raise BackendError(str(exc)) from exc


def _opt_key(value: int | None) -> tuple[bool, int]:
    return (value is not None, 0 if value is None else value)


@dataclass
class FsTx(Tx):
    """Trivial transaction handle; the filesystem backend has no real transactions."""

    active: bool = True

    def is_active(self) -> bool:
        return self.active


class FsRepo(FeedRepo, EntryRepo, ScheduleRepo):
    """Repository rooted at a directory; subdirectories are created lazily on write."""

    def __init__(self, root: str | os.PathLike[str]) -> None:
        self.root = Path(root)

    def __repr__(self) -> str:
        return f"FsRepo(root={os.fspath(self.root)!r})"

    @classmethod
    def open(cls, root: str | os.PathLike[str]) -> FsRepo:
        """Create a repository rooted at ``root``."""
        return cls(root)

    def begin_tx(self) -> FsTx:
        """Begin a no-op transactional scope."""
        return FsTx(active=True)

    # ----- paths -----

    @property
    def _feeds_dir(self) -> Path:
        return self.root / "feeds"

    @property
    def _entries_by_id_dir(self) -> Path:
        return self.root / "entries" / "by_id"

    def _entries_by_feed_dir(self, feed_id: FeedId) -> Path:
        return self.root / "entries" / "by_feed" / escape_id(feed_id.value)

    def _feed_path(self, feed_id: FeedId) -> Path:
        return self._feeds_dir / escape_id(feed_id.value) / "feed.json"

    def _entry_by_id_path(self, entry_id: EntryId) -> Path:
        return self._entries_by_id_dir / f"{escape_id(entry_id.value)}.json"

    def _entry_by_feed_path(self, feed_id: FeedId, entry_id: EntryId) -> Path:
        return self._entries_by_feed_dir(feed_id) / f"{escape_id(entry_id.value)}.json"

    def _schedule_last_ok_path(self, feed_id: FeedId) -> Path:
        return self.root / "schedule" / escape_id(feed_id.value) / "last_ok.txt"

    # ----- feeds -----

    def get_feed(self, feed_id: FeedId, tx: Tx | None = None) -> Feed:
        return _read_record(self._feed_path(feed_id), Feed.from_dict)

    def put_feed(self, feed: Feed, tx: Tx | None = None) -> None:
        write_atomic_json(self._feed_path(feed.id), feed.to_dict())

    def list_feeds(self, tx: Tx | None = None) -> list[Feed]:
        try:
            children = sorted(self._feeds_dir.iterdir())
        except OSError:
            return []
        feeds = []
        for child in children:
            candidate = child / "feed.json"
            if not candidate.is_file():
                continue
            try:
                feeds.append(_read_record(candidate, Feed.from_dict))
            except BackendError:
                continue
        return feeds

    # ----- entries -----

    def get_entry(self, entry_id: EntryId, tx: Tx | None = None) -> Entry:
        return _read_record(self._entry_by_id_path(entry_id), Entry.from_dict)

    def upsert_entry(self, entry: Entry, tx: Tx | None = None) -> None:
        data = entry.to_dict()
        write_atomic_json(self._entry_by_id_path(entry.id), data)
        write_atomic_json(self._entry_by_feed_path(entry.feed, entry.id), data)

    def list_entries_by_feed(self, feed_id: FeedId, tx: Tx | None = None) -> list[Entry]:
        try:
            children = list(self._entries_by_feed_dir(feed_id).iterdir())
        except OSError:
            return []
        entries = []
        for child in children:
            if child.suffix != ".json" or not child.is_file():
                continue
            try:
                entries.append(_read_record(child, Entry.from_dict))
            except BackendError:
                continue
        entries.sort(
            key=lambda e: (_opt_key(e.published_ts), _opt_key(e.updated_ts), e.id.value)
        )
        return entries

    # ----- schedule -----

    def last_ok_fetch_ts(self, feed_id: FeedId, tx: Tx | None = None) -> int | None:
        path = self._schedule_last_ok_path(feed_id)
        if not path.exists():
            return None
        try:
            text = path.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as exc:
            raise BackendError(str(exc)) from exc
        if not text:
            return None
        if not _INT_RE.fullmatch(text):
            raise BackendError("invalid digit found in string")
        value = int(text)
        if not _I64_MIN <= value <= _I64_MAX:
            raise BackendError("number too large to fit in target type")
        return value

    def record_fetch_ts(self, feed_id: FeedId, ts: int, tx: Tx | None = None) -> None:
        path = self._schedule_last_ok_path(feed_id)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as handle:
                handle.write(f"{ts}\n")
                handle.flush()
                os.fsync(handle.fileno())
        except OSError as exc:
            raise BackendError(str(exc)) from exc