"""Typed errors raised by core logic and repository backends."""

from __future__ import annotations


class CoreError(Exception):
    """Base class for errors raised by pure core logic (no I/O)."""


class InvalidArgumentError(CoreError):
    """An argument failed validation."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"invalid argument: {detail}")
        self.detail = detail


class InvariantError(CoreError):
    """An internal invariant was violated."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"invariant violation: {detail}")
        self.detail = detail


class CoreNotFoundError(CoreError):
    """A requested value does not exist."""

    def __init__(self) -> None:
        super().__init__("not found")


class RepoError(Exception):
    """Base class for errors raised at repository boundaries."""


class ConflictError(RepoError):
    """A write conflicted with existing state."""

    def __init__(self) -> None:
        super().__init__("conflict")


class NotFoundError(RepoError):
    """The requested record does not exist in the repository."""

    def __init__(self) -> None:
        super().__init__("not found")


class SerializationError(RepoError):
    """A record could not be serialized or deserialized."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"serialization failure: {detail}")
        self.detail = detail


class BackendError(RepoError):
    """The storage backend failed."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"backend failure: {detail}")
        self.detail = detail