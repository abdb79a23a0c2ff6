"""
In-memory flight store.

Owns the accepted records, gates insertion through a validator and
answers the filtered queries.  All queries are linear scans returning new
lists in insertion order.
"""
from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.generators.models import FlightRecord

from .validator import VIOLATION_SEPARATOR, Validator, validate

logger = logging.getLogger(__name__)


class AddResult(BaseModel):
    """Outcome of ``FlightStore.add``: accepted, or rejected with reasons."""

    model_config = ConfigDict(frozen=True)

    accepted: bool
    violations: list[str] = Field(default_factory=list)

    @property
    def message(self) -> str:
        return VIOLATION_SEPARATOR.join(self.violations)


def _calendar_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


class FlightStore:
    """
    Parameters
    ----------
    validator : callable
        ``record -> list[str]`` returning violation messages.  Defaults to
        the built-in business rules.
    """

    def __init__(self, validator: Validator = validate):
        self._flights: list[FlightRecord] = []
        self._validator = validator

    def __len__(self) -> int:
        return len(self._flights)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, record: FlightRecord) -> AddResult:
        violations = self._validator(record)
        if violations:
            logger.warning(
                "Invalid flight data for %r: %s",
                record.flight_number,
                VIOLATION_SEPARATOR.join(violations),
            )
            return AddResult(accepted=False, violations=violations)

        self._flights.append(record)
        logger.debug("Added: %s - %s", record.flight_number, record.airline)
        return AddResult(accepted=True)

    def load(self, records: Iterable[FlightRecord]) -> list[AddResult]:
        """Add a batch of records through the same gate as ``add``."""
        results = [self.add(rec) for rec in records]
        accepted = sum(1 for r in results if r.accepted)
        logger.info("Loaded %d of %d flights", accepted, len(results))
        return results

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def by_airline(self, airline: str) -> list[FlightRecord]:
        """Case-insensitive substring match on airline name."""
        needle = airline.lower()
        return [f for f in self._flights if needle in f.airline.lower()]

    def by_destination(self, destination: str) -> list[FlightRecord]:
        """Case-insensitive substring match on destination code."""
        needle = destination.lower()
        return [f for f in self._flights if needle in f.destination.lower()]

    def delayed(self) -> list[FlightRecord]:
        return [f for f in self._flights if f.is_delayed]

    def on_date(self, day: date | datetime) -> list[FlightRecord]:
        """Flights whose scheduled departure falls on *day* (time ignored)."""
        target = _calendar_date(day)
        return [f for f in self._flights if f.scheduled_departure.date() == target]

    def search(
        self,
        airline: Optional[str] = None,
        destination: Optional[str] = None,
        delayed: Optional[bool] = None,
        on: Optional[date | datetime] = None,
    ) -> list[FlightRecord]:
        """
        Combine the single-criterion filters with AND semantics.

        A criterion left as ``None`` is not applied.
        """
        airline_needle = airline.lower() if airline is not None else None
        destination_needle = destination.lower() if destination is not None else None
        target = _calendar_date(on) if on is not None else None

        matches: list[FlightRecord] = []
        for f in self._flights:
            if airline_needle is not None and airline_needle not in f.airline.lower():
                continue
            if destination_needle is not None and destination_needle not in f.destination.lower():
                continue
            if delayed is not None and f.is_delayed != delayed:
                continue
            if target is not None and f.scheduled_departure.date() != target:
                continue
            matches.append(f)
        return matches

    def all(self) -> list[FlightRecord]:
        """Snapshot of every accepted record; safe for the caller to mutate."""
        return list(self._flights)
