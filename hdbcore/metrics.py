"""Driver statistics: counters, gauges and time histograms."""

from __future__ import annotations

import json
import threading
from bisect import bisect_left
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence, Union

COUNTER_BYTES_READ = 0
COUNTER_BYTES_WRITTEN = 1
NUM_COUNTER = 2

GAUGE_CONN = 0
GAUGE_TX = 1
GAUGE_STMT = 2
NUM_GAUGE = 3

TIME_READ = 0
TIME_WRITE = 1
TIME_AUTH = 2
NUM_TIME = 3

SQL_TIME_QUERY = 0
SQL_TIME_PREPARE = 1
SQL_TIME_EXEC = 2
SQL_TIME_CALL = 3
SQL_TIME_FETCH = 4
SQL_TIME_FETCH_LOB = 5
SQL_TIME_ROLLBACK = 6
SQL_TIME_COMMIT = 7
NUM_SQL_TIME = 8


@dataclass
class StatsHistogram:
    """Histogram statistics; a bucket counts the measurements less or equal its key."""

    count: int = 0
    sum: float = 0.0
    buckets: dict[float, int] = field(default_factory=dict)


@dataclass
class Stats:
    """Driver statistics. Time sums and bucket bounds are in milliseconds."""

    open_connections: int = 0
    open_transactions: int = 0
    open_statements: int = 0
    read_bytes: int = 0
    written_bytes: int = 0
    read_time: StatsHistogram = field(default_factory=StatsHistogram)
    write_time: StatsHistogram = field(default_factory=StatsHistogram)
    auth_time: StatsHistogram = field(default_factory=StatsHistogram)
    sql_times: dict[str, StatsHistogram] = field(default_factory=dict)


@dataclass(frozen=True)
class StatsConfig:
    """Statistics configuration: sql time labels and sorted time bucket bounds."""

    sql_time_texts: tuple[str, ...]
    time_upper_bounds: tuple[float, ...]


def _is_number(v: object) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def load_stats_config(raw: Union[str, bytes]) -> StatsConfig:
    """Parse a JSON statistics configuration, sorting and deduplicating the bounds."""
    try:
        doc = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValueError(f"invalid statscfg.json file: {e}") from e
    if not isinstance(doc, dict):
        raise ValueError("invalid statscfg.json file: object expected")

    texts = doc.get("sqlTimeTexts") or []
    bounds = doc.get("timeUpperBounds") or []
    if not isinstance(texts, list) or not all(isinstance(t, str) for t in texts):
        raise ValueError("invalid statscfg.json file: sqlTimeTexts must be a list of strings")
    if not isinstance(bounds, list) or not all(_is_number(b) for b in bounds):
        raise ValueError("invalid statscfg.json file: timeUpperBounds must be a list of numbers")

    if len(texts) != NUM_SQL_TIME:
        raise ValueError(
            f"invalid number of statscfg.json sqlTimeTexts {len(texts)} - expected {NUM_SQL_TIME}"
        )
    if not bounds:
        raise ValueError("number of statscfg.json timeUpperBounds needs to be greater than 0")

    return StatsConfig(
        sql_time_texts=tuple(texts),
        time_upper_bounds=tuple(sorted({float(b) for b in bounds})),
    )


class Histogram:
    """Cumulative histogram over fixed upper bounds."""

    def __init__(self, upper_bounds: Iterable[float]) -> None:
        self.upper_bounds: tuple[float, ...] = tuple(sorted({float(b) for b in upper_bounds}))
        self.bound_counts: list[int] = [0] * len(self.upper_bounds)
        self.count = 0
        self.sum = 0.0
        self.underflow_count = 0

    def add(self, v: float) -> None:
        """Add a measurement; negative values count as zero and as underflow."""
        self.count += 1
        if v < 0:
            self.underflow_count += 1
            v = 0.0
        self.sum += v
        for i in range(bisect_left(self.upper_bounds, v), len(self.upper_bounds)):
            self.bound_counts[i] += 1

    def stats(self) -> StatsHistogram:
        """Return a snapshot of the histogram."""
        return StatsHistogram(
            count=self.count,
            sum=self.sum,
            buckets=dict(zip(self.upper_bounds, self.bound_counts)),
        )


class Metrics:
    """Thread safe statistics collector; measurements are forwarded to a parent."""

    def __init__(
        self,
        parent: Optional["Metrics"] = None,
        time_upper_bounds: Iterable[float] = (),
        sql_time_texts: Sequence[str] = (),
    ) -> None:
        texts = tuple(sql_time_texts)
        if len(texts) != NUM_SQL_TIME:
            raise ValueError(f"invalid number of sql time texts {len(texts)} - expected {NUM_SQL_TIME}")
        bounds = tuple(time_upper_bounds)
        self._parent = parent
        self._sql_time_texts = texts
        self._counters = [0] * NUM_COUNTER
        self._gauges = [0] * NUM_GAUGE
        self._times = [Histogram(bounds) for _ in range(NUM_TIME)]
        self._sql_times = [Histogram(bounds) for _ in range(NUM_SQL_TIME)]
        self._lock = threading.Lock()
        self._closed = False

    def __enter__(self) -> "Metrics":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _check_open(self) -> None:
        if self._closed:
            raise RuntimeError("metrics closed")

    def add_counter(self, idx: int, v: int) -> None:
        """Increase counter idx by v."""
        if v < 0:
            raise ValueError(f"invalid counter increment {v}")
        if self._parent is not None:
            self._parent.add_counter(idx, v)
        with self._lock:
            self._check_open()
            self._counters[idx] += v

    def add_gauge(self, idx: int, v: int) -> None:
        """Change gauge idx by v."""
        if self._parent is not None:
            self._parent.add_gauge(idx, v)
        with self._lock:
            self._check_open()
            self._gauges[idx] += v

    def add_time(self, idx: int, seconds: float) -> None:
        """Record a duration given in seconds in time histogram idx."""
        if self._parent is not None:
            self._parent.add_time(idx, seconds)
        with self._lock:
            self._check_open()
            self._times[idx].add(seconds * 1000.0)

    def add_sql_time(self, idx: int, seconds: float) -> None:
        """Record a duration given in seconds in sql time histogram idx."""
        if self._parent is not None:
            self._parent.add_sql_time(idx, seconds)
        with self._lock:
            self._check_open()
            self._sql_times[idx].add(seconds * 1000.0)

    def stats(self) -> Stats:
        """Return a snapshot of the collected statistics."""
        with self._lock:
            return Stats(
                open_connections=self._gauges[GAUGE_CONN],
                open_transactions=self._gauges[GAUGE_TX],
                open_statements=self._gauges[GAUGE_STMT],
                read_bytes=self._counters[COUNTER_BYTES_READ],
                written_bytes=self._counters[COUNTER_BYTES_WRITTEN],
                read_time=self._times[TIME_READ].stats(),
                write_time=self._times[TIME_WRITE].stats(),
                auth_time=self._times[TIME_AUTH].stats(),
                sql_times={
                    text: h.stats() for text, h in zip(self._sql_time_texts, self._sql_times)
                },
            )

    def close(self) -> None:
        """Stop accepting measurements; statistics stay readable."""
        with self._lock:
            self._closed = True