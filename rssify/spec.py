"""Parsing of repository selection strings such as ``fs:/path``."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RepoSpecError(ValueError):
    """A repository specification could not be parsed."""


class RepoKind(Enum):
    """Supported repository backends."""

    FS = "fs"
    SQLITE = "sqlite"

    @classmethod
    def from_prefix(cls, prefix: str) -> RepoKind | None:
        """Return the kind named by ``prefix`` (ASCII case-insensitive), or None."""
        if not prefix.isascii():
            return None
        try:
            return cls(prefix.lower())
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RepoSpec:
    """A parsed repository specification: a kind and a target."""

    kind: RepoKind
    target: str

    @classmethod
    def parse(cls, text: str) -> RepoSpec:
        """Parse ``<kind>:<target>``; raise ``RepoSpecError`` if malformed."""
        prefix, sep, rest = text.strip().partition(":")
        if not sep:
            raise RepoSpecError("missing ':' separator")
        kind = RepoKind.from_prefix(prefix)
        if kind is None:
            raise RepoSpecError("unknown repo kind")
        if not rest:
            raise RepoSpecError("empty repo target")
        return cls(kind=kind, target=rest)

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.target}"