from rssify.ids import EntryId, FeedId


def test_feed_id_from_url_is_prefixed_and_trimmed():
    f = FeedId.from_url("  https://example.com/feed  ")
    assert str(f) == "url:https://example.com/feed"


def test_entry_id_prefers_guid():
    feed = FeedId.from_url("https://ex.com/feed")
    e = EntryId.from_parts(feed, "G-123", "https://ex.com/p", "t", 1)
    assert str(e) == "guid:G-123"


def test_entry_id_falls_back_to_link():
    feed = FeedId.from_url("https://ex.com/feed")
    e = EntryId.from_parts(feed, None, "https://ex.com/p", "t", 1)
    assert str(e) == "link:https://ex.com/p"


def test_entry_id_hash_is_deterministic_without_guid_or_link():
    feed = FeedId.from_url("https://ex.com/feed")
    e1 = EntryId.from_parts(feed, None, None, "Title", 1_700_000_000)
    e2 = EntryId.from_parts(feed, None, None, "Title", 1_700_000_000)
    assert e1 == e2


def test_entry_id_hash_changes_when_inputs_change():
    feed = FeedId.from_url("https://ex.com/feed")
    a = EntryId.from_parts(feed, None, None, "Title A", 1)
    b = EntryId.from_parts(feed, None, None, "Title B", 1)
    assert a != b
    assert a.value.startswith("hash:")


def test_hash_form_is_sixteen_hex_digits():
    feed = FeedId.from_url("https://ex.com/feed")
    value = str(EntryId.from_parts(feed, None, None, None, None))
    assert value[:5] == "hash:"
    assert len(value) == 21
    assert set(value[5:]) <= set("0123456789abcdef")


def test_blank_guid_and_link_are_ignored():
    feed = FeedId.from_url("https://ex.com/feed")
    e = EntryId.from_parts(feed, "   ", "  https://ex.com/q  ", "t", 1)
    assert str(e) == "link:https://ex.com/q"
    h = EntryId.from_parts(feed, "", " ", "t", 1)
    assert h == EntryId.from_parts(feed, None, None, "t", 1)


def test_guid_is_trimmed():
    feed = FeedId.from_url("https://ex.com/feed")
    assert str(EntryId.from_parts(feed, "  G-9 ", None)) == "guid:G-9"


def test_hash_depends_on_feed_and_timestamp():
    f1 = FeedId.from_url("https://ex.com/a")
    f2 = FeedId.from_url("https://ex.com/b")
    assert EntryId.from_parts(f1, title="T", published_ts=5) != EntryId.from_parts(
        f2, title="T", published_ts=5
    )
    assert EntryId.from_parts(f1, title="T", published_ts=5) != EntryId.from_parts(
        f1, title="T", published_ts=-5
    )


def test_ids_order_by_string():
    assert sorted([FeedId("b"), FeedId("a")]) == [FeedId("a"), FeedId("b")]