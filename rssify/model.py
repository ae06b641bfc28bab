"""Domain records for feeds, entries and fetch results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Union

from rssify.ids import EntryId, FeedId


def _require(data: Mapping[str, Any], key: str) -> Any:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    return data[key]


def _opt_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"field `{key}` must be a string or null")
    return value


def _opt_int(data: Mapping[str, Any], key: str) -> int | None:
    value = data.get(key)
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise ValueError(f"field `{key}` must be an integer or null")
    return value


def _req_str(data: Mapping[str, Any], key: str) -> str:
    value = _require(data, key)
    if not isinstance(value, str):
        raise ValueError(f"field `{key}` must be a string")
    return value


class ContentKind(Enum):
    """Kinds of raw content captured from a source."""

    XML = "Xml"
    JSON = "Json"
    HTML = "Html"
    TEXT = "Text"
    BINARY = "Binary"


@dataclass(frozen=True)
class ContentBlob:
    """Raw content kept as bytes; the encoding may vary."""

    kind: ContentKind
    bytes: bytes

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "bytes": list(self.bytes)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ContentBlob:
        try:
            kind = ContentKind(_require(data, "kind"))
        except ValueError as exc:
            raise ValueError(f"unknown content kind: {data.get('kind')!r}") from exc
        raw = _require(data, "bytes")
        if not isinstance(raw, list):
            raise ValueError("field `bytes` must be a list of integers")
        try:
            payload = bytes(raw)
        except (TypeError, ValueError) as exc:
            raise ValueError("field `bytes` must hold integers in 0..255") from exc
        return cls(kind=kind, bytes=payload)


@dataclass
class Feed:
    """Canonical feed metadata known to the system."""

    id: FeedId
    url: str
    title: str | None = None
    site_url: str | None = None
    etag: str | None = None
    last_modified: str | None = None
    active: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id.value,
            "url": self.url,
            "title": self.title,
            "site_url": self.site_url,
            "etag": self.etag,
            "last_modified": self.last_modified,
            "active": self.active,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Feed:
        active = _require(data, "active")
        if not isinstance(active, bool):
            raise ValueError("field `active` must be a boolean")
        return cls(
            id=FeedId(_req_str(data, "id")),
            url=_req_str(data, "url"),
            title=_opt_str(data, "title"),
            site_url=_opt_str(data, "site_url"),
            etag=_opt_str(data, "etag"),
            last_modified=_opt_str(data, "last_modified"),
            active=active,
        )


@dataclass
class Entry:
    """Canonical entry after parsing and normalisation; timestamps are unix seconds."""

    id: EntryId
    feed: FeedId
    url: str | None = None
    title: str | None = None
    published_ts: int | None = None
    updated_ts: int | None = None
    summary: str | None = None
    content: ContentBlob | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id.value,
            "feed": self.feed.value,
            "url": self.url,
            "title": self.title,
            "published_ts": self.published_ts,
            "updated_ts": self.updated_ts,
            "summary": self.summary,
            "content": None if self.content is None else self.content.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Entry:
        content = data.get("content")
        if content is not None and not isinstance(content, Mapping):
            raise ValueError("field `content` must be an object or null")
        return cls(
            id=EntryId(_req_str(data, "id")),
            feed=FeedId(_req_str(data, "feed")),
            url=_opt_str(data, "url"),
            title=_opt_str(data, "title"),
            published_ts=_opt_int(data, "published_ts"),
            updated_ts=_opt_int(data, "updated_ts"),
            summary=_opt_str(data, "summary"),
            content=None if content is None else ContentBlob.from_dict(content),
        )


@dataclass(frozen=True)
class NotModified:
    """The source reported no change since the last fetch."""


@dataclass(frozen=True)
class NewContent:
    """The source returned new content."""

    blob: ContentBlob
    elapsed_ms: int


@dataclass(frozen=True)
class TransientFailure:
    """A failure worth retrying later."""

    hint: str | None = None


@dataclass(frozen=True)
class PermanentFailure:
    """A failure that retrying will not fix."""

    hint: str | None = None


FetchOutcome = Union[NotModified, NewContent, TransientFailure, PermanentFailure]