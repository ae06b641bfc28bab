# rssify

A small RSS toolkit library. It provides canonical identifiers for feeds and
entries, plain domain records, a repository stored on the filesystem, parsing
of repository selection strings, repository statistics and a `key=value`
logger.

## Installation

```
pip install .
```

## Modules

- `rssify.ids`: `FeedId` and `EntryId`. `FeedId.from_url(url)` gives
  `url:<trimmed url>`. `EntryId.from_parts(feed, guid, link, title, published_ts)`
  gives `guid:<guid>` if a non-blank GUID is given, else `link:<link>`, else
  `hash:<16 hex digits>` computed deterministically from the feed id, title and
  timestamp.
- `rssify.model`: `Feed`, `Entry`, `ContentBlob`, `ContentKind`, each record
  with `to_dict()` / `from_dict()`, and the fetch outcomes `NotModified`,
  `NewContent`, `TransientFailure`, `PermanentFailure`.
- `rssify.repo`: abstract contracts `Tx`, `FeedRepo`, `EntryRepo`, `ScheduleRepo`.
- `rssify.fsrepo`: `FsRepo`, a filesystem implementation of all three
  repository contracts, plus `FsTx`, `escape_id`, `write_atomic_json` and
  `read_json`. Files are written through a temporary file and renamed into
  place. Entries from `list_entries_by_feed` are ordered by published time,
  then updated time, then id.
- `rssify.errors`: `CoreError` and `RepoError` with their subclasses
  (`NotFoundError`, `ConflictError`, `SerializationError`, `BackendError`, ...).
  `FsRepo` raises `BackendError` on read, write and parse failures.
- `rssify.spec`: `RepoSpec.parse("fs:./data")` gives a `RepoSpec` with a
  `RepoKind` (`FS` or `SQLITE`, prefix matched case-insensitively) and a target;
  malformed strings raise `RepoSpecError`.
- `rssify.store`: `resolve_store_spec(flag)` picks the flag if given, otherwise
  the `RSSIFY_REPO` environment variable if non-blank, otherwise `fs:.`.
- `rssify.stats`: `stats_fs(root)` counts feeds (`feeds/<feed>/feed.json`) and
  entry `.json` files in `feeds/<feed>/entries` and `entries/by_id`.
- `rssify.paths`: `FsPaths` builds percent-encoded path strings for the layout
  `<root>/feeds/<feed>/...` without touching the filesystem.
- `rssify.logfmt`: `Logger` writes `ts=... level=... component=... op=...` lines
  to stderr, filtered by `LogLevel`.
- `rssify.domain` and `rssify.sched`: item metadata types, the `Repository`,
  `Fetcher`, `Parser` and `Scheduler` interfaces, and scheduling inputs,
  decisions and reasons.

## Example

```python
from rssify.ids import FeedId, EntryId
from rssify.model import Feed
from rssify.fsrepo import FsRepo

repo = FsRepo.open("./data")
feed_id = FeedId.from_url("https://example.com/feed")
repo.put_feed(Feed(id=feed_id, url="https://example.com/feed"))
print(repo.get_feed(feed_id).url)

entry_id = EntryId.from_parts(feed_id, None, "https://example.com/p", "Title", 1)
print(entry_id)  # link:https://example.com/p

repo.record_fetch_ts(feed_id, 12345)
print(repo.last_ok_fetch_ts(feed_id))  # 12345
```

## What it does not do

- There is no command-line program; everything is used from Python.
- It does not read lists of feed seeds from files.
- It does no network fetching or feed parsing. `Fetcher`, `Parser` and the
  schedulers are interfaces only, with no implementation here.
- Only the filesystem repository exists; a `sqlite:` spec parses but has no backend.

## Development

```
pip install -e ".[test]"
pytest
```