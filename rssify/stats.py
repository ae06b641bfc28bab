"""Read-only counts of feeds and entries in a filesystem repository."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class StatsSummary:
    """Number of feeds and entries found."""

    feeds: int
    entries: int


def _subdirs(directory: Path) -> list[Path]:
    with os.scandir(directory) as it:
        return [Path(ent.path) for ent in it if ent.is_dir(follow_symlinks=False)]


def _count_json_files(directory: Path) -> int:
    if not directory.exists():
        return 0
    with os.scandir(directory) as it:
        return sum(
            1
            for ent in it
            if ent.is_file(follow_symlinks=False)
            and Path(ent.name).suffix[1:].lower() == "json"
        )


def stats_fs(root: str | os.PathLike[str]) -> StatsSummary:
    """Count feeds and entries under ``root``.

    A feed counts when ``feeds/<feed>/feed.json`` exists. Entries are the
    ``.json`` files in ``feeds/<feed>/entries`` plus those in the legacy
    ``entries/by_id`` directory. Filesystem errors propagate as ``OSError``.
    """
    base = Path(root)
    feeds_root = base / "feeds"
    legacy_root = base / "entries" / "by_id"

    feeds = 0
    entries = 0
    if feeds_root.exists():
        for feed_dir in _subdirs(feeds_root):
            if (feed_dir / "feed.json").exists():
                feeds += 1
            entries += _count_json_files(feed_dir / "entries")

    if legacy_root.exists():
        entries += _count_json_files(legacy_root)

    return StatsSummary(feeds=feeds, entries=entries)