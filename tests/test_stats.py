from rssify.stats import StatsSummary, stats_fs


def test_counts_per_feed_entries_and_feeds(tmp_path):
    root = tmp_path

    a = root / "feeds" / "url%3Ahttps%3A%2F%2Fsite%2Fa"
    (a / "entries").mkdir(parents=True)
    (a / "feed.json").write_text("{}")
    (a / "entries" / "e1.json").write_text("{}")
    (a / "entries" / "e2.json").write_text("{}")

    b = root / "feeds" / "guid%3AFEED%2002"
    (b / "entries").mkdir(parents=True)
    (b / "feed.json").write_text("{}")
    (b / "entries" / "x.json").write_text("{}")

    legacy = root / "entries" / "by_id"
    legacy.mkdir(parents=True)
    (legacy / "legacy.json").write_text("{}")

    s = stats_fs(str(root))
    assert s.feeds == 2
    assert s.entries == 4


def test_empty_root(tmp_path):
    assert stats_fs(tmp_path) == StatsSummary(feeds=0, entries=0)


def test_missing_root(tmp_path):
    assert stats_fs(tmp_path / "nope") == StatsSummary(feeds=0, entries=0)


def test_feed_dir_without_feed_json_still_counts_entries(tmp_path):
    d = tmp_path / "feeds" / "f"
    (d / "entries").mkdir(parents=True)
    (d / "entries" / "e.json").write_text("{}")
    assert stats_fs(tmp_path) == StatsSummary(feeds=0, entries=1)


def test_only_json_files_counted(tmp_path):
    d = tmp_path / "feeds" / "f"
    (d / "entries").mkdir(parents=True)
    (d / "feed.json").write_text("{}")
    (d / "entries" / "a.JSON").write_text("{}")
    (d / "entries" / "b.txt").write_text("x")
    (d / "entries" / ".json").write_text("{}")
    (d / "entries" / "sub.json").mkdir()
    assert stats_fs(tmp_path) == StatsSummary(feeds=1, entries=1)


def test_plain_files_in_feeds_dir_ignored(tmp_path):
    feeds = tmp_path / "feeds"
    feeds.mkdir()
    (feeds / "stray.json").write_text("{}")
    assert stats_fs(tmp_path) == StatsSummary(feeds=0, entries=0)