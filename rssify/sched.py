"""Scheduler decisions, reasons and inputs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Union

from rssify.ids import FeedId


class SchedState(Enum):
    """Coarse recency state of a feed."""

    UNKNOWN = "unknown"
    QUIET = "quiet"
    NORMAL = "normal"
    HOT = "hot"


@dataclass(frozen=True)
class NoHistory:
    """No fetch has been recorded for the feed."""


@dataclass(frozen=True)
class RecentSuccess:
    """The feed was fetched successfully ``seconds_ago`` seconds ago."""

    seconds_ago: int


@dataclass(frozen=True)
class BackoffAfterError:
    """The last error happened ``seconds_ago`` seconds ago."""

    seconds_ago: int


@dataclass(frozen=True)
class HotFeedHeuristic:
    """The feed updates often."""


@dataclass(frozen=True)
class QuietFeedHeuristic:
    """The feed rarely updates."""


SchedReason = Union[
    NoHistory, RecentSuccess, BackoffAfterError, HotFeedHeuristic, QuietFeedHeuristic
]


@dataclass(frozen=True)
class FetchNow:
    """Fetch the feed immediately."""


@dataclass(frozen=True)
class WaitFor:
    """Wait ``seconds`` before the next fetch attempt."""

    seconds: int


SchedDecision = Union[FetchNow, WaitFor]


@dataclass(frozen=True)
class SchedInput:
    """Telemetry that drives a scheduling decision; times are unix seconds."""

    feed: FeedId
    now_unix: int
    last_ok_fetch_ts: int | None = None
    last_error_ts: int | None = None
    observed_interval_sec: int | None = None
    state: SchedState = SchedState.UNKNOWN


class Scheduler(ABC):
    """Maps telemetry to a decision; implementations must be deterministic."""

    @abstractmethod
    def decide(self, sched_input: SchedInput) -> tuple[SchedDecision, SchedReason]:
        """Return the decision for ``sched_input`` and the reason for it."""