"""Opaque identifiers for feeds and entries, stable across backends."""

from __future__ import annotations

import struct
from dataclasses import dataclass

_MASK = (1 << 64) - 1


def _rotl(x: int, bits: int) -> int:
    return ((x << bits) | (x >> (64 - bits))) & _MASK


def _sip_round(v0: int, v1: int, v2: int, v3: int) -> tuple[int, int, int, int]:
    v0 = (v0 + v1) & _MASK
    v1 = _rotl(v1, 13) ^ v0
    v0 = _rotl(v0, 32)
    v2 = (v2 + v3) & _MASK
    v3 = _rotl(v3, 16) ^ v2
    v0 = (v0 + v3) & _MASK
    v3 = _rotl(v3, 21) ^ v0
    v2 = (v2 + v1) & _MASK
    v1 = _rotl(v1, 17) ^ v2
    v2 = _rotl(v2, 32)
    return v0, v1, v2, v3


def _siphash13(data: bytes, k0: int = 0, k1: int = 0) -> int:
    """SipHash-1-3 of ``data`` with the given 64-bit keys."""
    v0 = k0 ^ 0x736F6D6570736575
    v1 = k1 ^ 0x646F72616E646F6D
    v2 = k0 ^ 0x6C7967656E657261
    v3 = k1 ^ 0x7465646279746573

    tail_len = len(data) % 8
    body_end = len(data) - tail_len
    for (m,) in struct.iter_unpack("<Q", data[:body_end]):
        v3 ^= m
        v0, v1, v2, v3 = _sip_round(v0, v1, v2, v3)
        v0 ^= m

    b = ((len(data) & 0xFF) << 56) | int.from_bytes(data[body_end:], "little")
    v3 ^= b
    v0, v1, v2, v3 = _sip_round(v0, v1, v2, v3)
    v0 ^= b

    v2 ^= 0xFF
    for _ in range(3):
        v0, v1, v2, v3 = _sip_round(v0, v1, v2, v3)
    return v0 ^ v1 ^ v2 ^ v3


def _hash_str(text: str) -> bytes:
    return text.encode("utf-8") + b"\xff"


def _hash_i64(value: int) -> bytes:
    return value.to_bytes(8, "little", signed=True)


def _non_blank(value: str | None) -> str | None:
    if value is None:
        return None
    trimmed = value.strip()
    return trimmed or None


@dataclass(frozen=True, order=True)
class FeedId:
    """Opaque identifier for a feed."""

    value: str

    @classmethod
    def from_url(cls, url: str) -> FeedId:
        """Canonical identifier for a source URL: ``url:<trimmed url>``."""
        return cls(f"url:{url.strip()}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class EntryId:
    """Opaque identifier for a feed entry."""

    value: str

    @classmethod
    def from_parts(
        cls,
        feed: FeedId,
        guid: str | None = None,
        link: str | None = None,
        title: str | None = None,
        published_ts: int | None = None,
    ) -> EntryId:
        """Build an identifier, preferring the GUID, then the link, then a hash."""
        chosen_guid = _non_blank(guid)
        if chosen_guid is not None:
            return cls(f"guid:{chosen_guid}")
        chosen_link = _non_blank(link)
        if chosen_link is not None:
            return cls(f"link:{chosen_link}")
        payload = _hash_str(feed.value)
        if title is not None:
            payload += _hash_str(title)
        if published_ts is not None:
            payload += _hash_i64(published_ts)
        return cls(f"hash:{_siphash13(payload):016x}")

    def __str__(self) -> str:
        return self.value