"""
Aggregate statistics over a sequence of flight records.

``compute_statistics`` is a pure function; it returns ``None`` for an
empty input instead of dividing by zero.  Values are returned unformatted
(percentages as floats in 0-100) and rendering is left to the caller.

Grouped rankings are ordered by count descending.  Ties keep the order in
which each key was first seen in the input.
"""
from __future__ import annotations

from collections import Counter
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Hashable, Iterable, Optional, Sequence

from pydantic import BaseModel

from src.generators.models import FlightRecord, FlightStatus

TOP_N = 5


class RankedCount(BaseModel):
    name: str
    count: int


class StatusShare(BaseModel):
    status: FlightStatus
    count: int
    percentage: float


class FlightStatistics(BaseModel):
    """Summary of a non-empty set of flights."""

    total_flights: int
    delayed_count: int
    delayed_percentage: float
    on_time_count: int
    on_time_percentage: float
    # None when no flight in the set is delayed
    average_delay_minutes: Optional[float] = None
    total_passengers: int
    average_passengers: float
    top_airlines: list[RankedCount]
    top_destinations: list[RankedCount]
    status_distribution: list[StatusShare]

    @property
    def average_passengers_rounded(self) -> int:
        return int(Decimal(str(self.average_passengers)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _ranked(
    records: Iterable[FlightRecord],
    key: Callable[[FlightRecord], Hashable],
) -> list[tuple[Hashable, int]]:
    # Counter keeps first-seen order and sorted() is stable
    counts = Counter(key(rec) for rec in records)
    return sorted(counts.items(), key=lambda item: item[1], reverse=True)


def _percent(part: int, whole: int) -> float:
    return part * 100.0 / whole


def compute_statistics(
    records: Sequence[FlightRecord],
    top_n: int = TOP_N,
) -> Optional[FlightStatistics]:
    """Summarise *records*, or return ``None`` when there is no data."""
    total = len(records)
    if total == 0:
        return None

    delayed = [rec for rec in records if rec.is_delayed]
    delayed_count = len(delayed)
    on_time_count = total - delayed_count

    average_delay = None
    if delayed:
        average_delay = sum(rec.delay_minutes for rec in delayed) / delayed_count

    total_passengers = sum(rec.passenger_count for rec in records)

    return FlightStatistics(
        total_flights=total,
        delayed_count=delayed_count,
        delayed_percentage=_percent(delayed_count, total),
        on_time_count=on_time_count,
        on_time_percentage=_percent(on_time_count, total),
        average_delay_minutes=average_delay,
        total_passengers=total_passengers,
        average_passengers=total_passengers / total,
        top_airlines=[
            RankedCount(name=name, count=count)
            for name, count in _ranked(records, lambda r: r.airline)[:top_n]
        ],
        top_destinations=[
            RankedCount(name=name, count=count)
            for name, count in _ranked(records, lambda r: r.destination)[:top_n]
        ],
        status_distribution=[
            StatusShare(status=status, count=count, percentage=_percent(count, total))
            for status, count in _ranked(records, lambda r: r.status)
        ],
    )
