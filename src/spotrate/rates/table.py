"""In-memory rate table with swap-on-write snapshots.

The table holds one immutable snapshot: a read-only mapping from weekday
name to a tuple of ``WeekdayRule``. ``ingest`` builds a complete new snapshot
outside the lock and only swaps the reference while holding it, so
``query`` never locks and always scans either the old or the new snapshot
in full.

Usage::

    table = RateTable.from_seed_file("config/seed_rates.json")
    price = table.query(start, end)
"""

import logging
import threading
from collections.abc import Mapping
from datetime import UTC, datetime
from pathlib import Path
from types import MappingProxyType
from typing import Self

from spotrate.rates.errors import (
    CrossDayRequestError,
    NoRatesForDayError,
    RateUnavailableError,
)
from spotrate.rates.models import IncomingRates, WeekdayRule
from spotrate.rates.normalize import Clock, army_time, normalize_rate, utc_now, weekday_name
from spotrate.rates.seed import load_seed_rates

logger = logging.getLogger(__name__)

RateIndex = Mapping[str, tuple[WeekdayRule, ...]]

_EMPTY_INDEX: RateIndex = MappingProxyType({})


def build_index(batch: IncomingRates, now: datetime) -> RateIndex:
    """Normalize a batch into a new read-only index.

    Rules are bucketed under the weekday they were requested for (local
    time), in the order they appear in the batch.

    Raises:
        IngestError: If any rate in the batch is invalid
    """
    buckets: dict[str, list[WeekdayRule]] = {}
    for detail in batch.rates:
        for weekday, rule in normalize_rate(detail, now):
            buckets.setdefault(weekday, []).append(rule)
    return MappingProxyType({day: tuple(rules) for day, rules in buckets.items()})


class RateTable:
    """Thread-safe parking rate table.

    Args:
        clock: Returns the current instant; used to anchor weekdays when
            rates are ingested. Defaults to ``datetime.now(UTC)``.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or utc_now
        self._lock = threading.Lock()
        self._snapshot: RateIndex = _EMPTY_INDEX

    @classmethod
    def from_seed_file(cls, path: Path | str, clock: Clock | None = None) -> Self:
        """Create a table seeded from a rates JSON file.

        Raises:
            FileNotFoundError: If the seed file does not exist
            pydantic.ValidationError: If the seed file is not valid rates JSON
            IngestError: If a seed rate cannot be normalized
        """
        table = cls(clock=clock)
        table.ingest(load_seed_rates(path))
        return table

    def snapshot(self) -> RateIndex:
        """Get the current read-only index."""
        return self._snapshot

    def ingest(self, batch: IncomingRates) -> None:
        """Replace every rate in the table with ``batch``.

        All-or-nothing: if any rate fails to normalize the current rates
        stay in place and the error propagates.

        Raises:
            UnknownDayCodeError, MalformedTimeRangeError, UnknownTimezoneError
        """
        index = build_index(batch, self._clock())
        with self._lock:
            self._snapshot = index
        logger.info(
            "Ingested %d rates into %d weekday buckets",
            len(batch.rates),
            len(index),
        )

    def query(self, start: datetime, end: datetime) -> int:
        """Get the price for parking from ``start`` to ``end``.

        Both instants must be timezone-aware. The first rate (in ingestion
        order) whose window fully contains the parking window wins.

        Raises:
            CrossDayRequestError: If start and end are on different UTC days
            NoRatesForDayError: If no rates exist for the start weekday
            RateUnavailableError: If no rate window contains the request
        """
        utc_start = start.astimezone(UTC)
        utc_end = end.astimezone(UTC)
        if utc_start.date() != utc_end.date():
            raise CrossDayRequestError()

        start_clock = army_time(utc_start)
        end_clock = army_time(utc_end)

        weekday = weekday_name(utc_start)
        rules = self._snapshot.get(weekday)
        if not rules:
            raise NoRatesForDayError(weekday)

        for rule in rules:
            if rule.contains(start_clock, end_clock):
                return rule.price

        logger.debug(
            "No rate on %s covers %.2f-%.2f (%d candidates)",
            weekday,
            start_clock,
            end_clock,
            len(rules),
        )
        raise RateUnavailableError()
