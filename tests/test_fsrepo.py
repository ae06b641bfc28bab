import json

import pytest

from rssify.errors import BackendError, RepoError
from rssify.fsrepo import FsRepo, FsTx, escape_id, read_json, write_atomic_json
from rssify.ids import EntryId, FeedId
from rssify.model import ContentBlob, ContentKind, Entry, Feed


@pytest.fixture
def repo(tmp_path):
    return FsRepo(tmp_path)


def _feed(url, **kwargs):
    return Feed(id=FeedId.from_url(url), url=url, **kwargs)


def test_feed_roundtrip_and_list(repo):
    f1 = _feed("https://example.com/feed", title="Example", site_url="https://example.com")
    f2 = _feed("https://blog.test/rss", etag="W/123")
    tx = repo.begin_tx()
    repo.put_feed(f1, tx)
    repo.put_feed(f2, tx)

    got = repo.get_feed(f1.id)
    assert got.url == f1.url
    assert got == f1

    listed = repo.list_feeds()
    assert len(listed) == 2
    assert {f.id for f in listed} == {f1.id, f2.id}


def test_entry_roundtrip_and_scan(repo):
    feed = _feed("https://ex.com/rss")
    repo.put_feed(feed)

    e1 = Entry(
        id=EntryId.from_parts(feed.id, "guid-1", None, "A", 10),
        feed=feed.id,
        url="https://ex.com/a",
        title="A",
        published_ts=10,
        content=ContentBlob(kind=ContentKind.XML, bytes=b"<xml/>"),
    )
    e2 = Entry(
        id=EntryId.from_parts(feed.id, None, "https://ex.com/b", "B", 20),
        feed=feed.id,
        url="https://ex.com/b",
        title="B",
        published_ts=20,
    )

    repo.upsert_entry(e1)
    repo.upsert_entry(e1)
    repo.upsert_entry(e2)

    got = repo.get_entry(e1.id)
    assert got.title == "A"
    assert got.content == ContentBlob(kind=ContentKind.XML, bytes=b"<xml/>")

    listed = repo.list_entries_by_feed(feed.id)
    assert len(listed) == 2
    assert listed[0].id == e1.id
    assert listed[1].id == e2.id


def test_schedule_record_and_read(repo):
    feed = FeedId.from_url("https://ex.com/rss")
    assert repo.last_ok_fetch_ts(feed) is None
    repo.record_fetch_ts(feed, 12345)
    assert repo.last_ok_fetch_ts(feed) == 12345


def test_schedule_file_layout(repo, tmp_path):
    feed = FeedId("abc")
    repo.record_fetch_ts(feed, -7)
    path = tmp_path / "schedule" / "abc" / "last_ok.txt"
    assert path.read_text() == "-7\n"
    assert repo.last_ok_fetch_ts(feed) == -7


def test_schedule_empty_file_is_none(repo, tmp_path):
    path = tmp_path / "schedule" / "abc" / "last_ok.txt"
    path.parent.mkdir(parents=True)
    path.write_text("  \n")
    assert repo.last_ok_fetch_ts(FeedId("abc")) is None


def test_schedule_garbage_raises_backend_error(repo, tmp_path):
    path = tmp_path / "schedule" / "abc" / "last_ok.txt"
    path.parent.mkdir(parents=True)
    path.write_text("soon\n")
    with pytest.raises(BackendError):
        repo.last_ok_fetch_ts(FeedId("abc"))


def test_entry_ordering_puts_missing_timestamps_first(repo):
    feed = FeedId("f")
    late = Entry(id=EntryId("b"), feed=feed, published_ts=5)
    none = Entry(id=EntryId("c"), feed=feed)
    tie = Entry(id=EntryId("a"), feed=feed, published_ts=5)
    for entry in (late, none, tie):
        repo.upsert_entry(entry)
    assert [e.id.value for e in repo.list_entries_by_feed(feed)] == ["c", "a", "b"]


def test_entry_written_under_both_layouts(repo, tmp_path):
    entry = Entry(id=EntryId("guid:x"), feed=FeedId("url:a"))
    repo.upsert_entry(entry)
    by_id_dir = tmp_path / "entries" / "by_id"
    by_feed_dir = tmp_path / "entries" / "by_feed" / "url_3aa"
    assert sorted(p.name for p in by_id_dir.iterdir()) == ["guid_3ax.json"]
    assert sorted(p.name for p in by_feed_dir.iterdir()) == ["guid_3ax.json"]
    assert Entry.from_dict(read_json(by_id_dir / "guid_3ax.json")) == entry
    assert Entry.from_dict(read_json(by_feed_dir / "guid_3ax.json")) == entry


def test_feed_file_layout(repo, tmp_path):
    feed = _feed("https://a")
    repo.put_feed(feed)
    path = tmp_path / "feeds" / "url_3ahttps_3a_2f_2fa" / "feed.json"
    data = json.loads(path.read_text())
    assert data["url"] == "https://a"
    assert Feed.from_dict(data) == feed
    assert sorted(p.name for p in path.parent.iterdir()) == ["feed.json"]


def test_lists_are_empty_without_directories(repo):
    assert repo.list_feeds() == []
    assert repo.list_entries_by_feed(FeedId("missing")) == []


def test_missing_feed_raises_repo_error(repo):
    with pytest.raises(RepoError):
        repo.get_feed(FeedId("missing"))


def test_list_feeds_skips_unreadable(repo, tmp_path):
    repo.put_feed(_feed("https://ok"))
    broken = tmp_path / "feeds" / "broken"
    broken.mkdir(parents=True)
    (broken / "feed.json").write_text("not json")
    assert [f.url for f in repo.list_feeds()] == ["https://ok"]


def test_open_and_tx(tmp_path):
    repo = FsRepo.open(tmp_path)
    assert repo.root == tmp_path
    assert repo.begin_tx().is_active() is True
    assert FsTx(active=False).is_active() is False


@pytest.mark.parametrize(
    ("raw", "escaped"),
    [
        ("abc-DEF_09", "abc-DEF_09"),
        ("a.b c", "a_2eb_20c"),
        ("url:https://a", "url_3ahttps_3a_2f_2fa"),
        ("\u00e9", "_c3_a9"),
    ],
)
def test_escape_id(raw, escaped):
    assert escape_id(raw) == escaped


def test_json_helpers_roundtrip(tmp_path):
    path = tmp_path / "nested" / "doc.json"
    write_atomic_json(path, {"k": [1, 2], "s": "\u00e9"})
    assert read_json(path) == {"k": [1, 2], "s": "\u00e9"}
    assert path.read_text(encoding="utf-8").startswith("{\n  ")


def test_read_json_errors(tmp_path):
    with pytest.raises(BackendError):
        read_json(tmp_path / "absent.json")
    bad = tmp_path / "bad.json"
    bad.write_text("{")
    with pytest.raises(BackendError):
        read_json(bad)