"""Filesystem layout helpers that only build path strings."""

from __future__ import annotations

import os

from rssify.ids import EntryId, FeedId

_SAFE = frozenset(
    b"0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ-_."
)


def _urlsafe_component(text: str) -> str:
    return "".join(
        chr(byte) if byte in _SAFE else f"%{byte:02X}" for byte in text.encode("utf-8")
    )


class FsPaths:
    """Builds paths of the layout ``<root>/feeds/<feed>/...``."""

    @staticmethod
    def feed_dir(root: str, feed: FeedId) -> str:
        """``<root>/feeds/<feed>``"""
        return os.path.join(root, "feeds", _urlsafe_component(feed.value))

    @staticmethod
    def feed_json(root: str, feed: FeedId) -> str:
        """``<root>/feeds/<feed>/feed.json``"""
        return os.path.join(FsPaths.feed_dir(root, feed), "feed.json")

    @staticmethod
    def entry_id_file(root: str, entry: EntryId) -> str:
        """Legacy flat layout: ``<root>/entries/by_id/<entry>.json``"""
        return os.path.join(
            root, "entries", "by_id", f"{_urlsafe_component(entry.value)}.json"
        )

    @staticmethod
    def entry_by_feed_dir(root: str, feed: FeedId) -> str:
        """``<root>/feeds/<feed>/entries``"""
        return os.path.join(FsPaths.feed_dir(root, feed), "entries")

    @staticmethod
    def entry_by_feed_file(root: str, feed: FeedId, entry: EntryId) -> str:
        """``<root>/feeds/<feed>/entries/<entry>.json``"""
        return os.path.join(
            FsPaths.entry_by_feed_dir(root, feed), f"{_urlsafe_component(entry.value)}.json"
        )

    @staticmethod
    def last_blob(root: str, feed: FeedId) -> str:
        """``<root>/feeds/<feed>/last_blob.bin``"""
        return os.path.join(FsPaths.feed_dir(root, feed), "last_blob.bin")

    @staticmethod
    def entry_json(root: str, feed: FeedId, entry: EntryId) -> str:
        """Alias of :meth:`entry_by_feed_file`."""
        return FsPaths.entry_by_feed_file(root, feed, entry)