"""
Synthetic flight data generator.

Produces realistic-looking ``FlightRecord`` batches for demos and tests:

  1. Schedule every departure inside a 72-hour window that starts two
     days before ``now``.
  2. Draw a 1-8 hour block time, a departure delay in [-5, 180) minutes
     and an arrival delay that may recover or lose up to an hour in the
     air.
  3. Derive the status from the actual departure time relative to
     ``now`` (with a flat 5% cancellation rate).

All randomness comes from one ``random.Random``.  The Faker instance used
for the categorical picks is bound to that same source, so a seed (or an
injected rng) fully determines the output given a fixed ``now``.

Records are *not* validated here; they go through ``FlightStore.add``
like any manually entered flight.
"""
from __future__ import annotations

import logging
import random
from datetime import datetime, time, timedelta
from typing import Iterator

from faker import Faker

from .models import DELAY_THRESHOLD, FlightRecord, FlightStatus

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Reference data pools
# ---------------------------------------------------------------------------

AIRLINES: list[str] = [
    "American Airlines",
    "Delta Air Lines",
    "United Airlines",
    "Southwest Airlines",
    "JetBlue Airways",
    "Alaska Airlines",
    "Spirit Airlines",
]

# Drawn independently of AIRLINES: a flight number's carrier code is not
# guaranteed to belong to the record's airline.
CARRIER_CODES: list[str] = ["AA", "DL", "UA", "WN", "B6", "AS", "NK"]

AIRPORTS: list[str] = [
    "JFK", "LAX", "ORD", "DFW", "DEN", "ATL", "PHX", "SEA",
    "MIA", "BOS", "LAS", "SFO", "MSP", "CLT", "EWR",
]

AIRCRAFT_TYPES: list[str] = [
    "Boeing 737",
    "Airbus A320",
    "Boeing 777",
    "Airbus A330",
    "Boeing 787",
    "Embraer E175",
    "CRJ-900",
]

SCHEDULE_WINDOW_HOURS = 72
CANCELLATION_PERCENT = 5
MIN_PASSENGERS = 50
MAX_PASSENGERS = 300  # exclusive


def window_start(now: datetime) -> datetime:
    """Midnight two days before *now*, keeping *now*'s tzinfo."""
    return datetime.combine(now.date(), time(), tzinfo=now.tzinfo) - timedelta(days=2)


class FlightDataGenerator:
    """
    Constrained synthetic flight data generator.

    Parameters
    ----------
    seed : int | None
        Seed for a private ``random.Random``.  Ignored when *rng* is given.
    rng : random.Random | None
        Explicit random source.
    now : datetime | None
        Fixed reference "current time" for the schedule window and the
        status rules.  When omitted the clock is read on every
        ``generate`` / ``stream`` call.  Naive and timezone-aware values
        are both accepted; records carry the same tzinfo.
    """

    def __init__(
        self,
        seed: int | None = None,
        rng: random.Random | None = None,
        now: datetime | None = None,
    ):
        self.seed = seed
        self.rng = rng if rng is not None else random.Random(seed)
        self.faker = Faker()
        self.faker.random = self.rng
        self._now = now

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def generate(self, n: int) -> list[FlightRecord]:
        """Generate *n* flight records as a list."""
        records = list(self.stream(n))
        logger.info("Generated %d sample flights", len(records))
        return records

    def stream(self, n: int) -> Iterator[FlightRecord]:
        """Yield *n* flight records one at a time."""
        if n < 0:
            raise ValueError(f"Sample size must be non-negative, got {n}")
        now = self._now or datetime.now()
        base_time = window_start(now)
        for _ in range(n):
            yield self._make_record(now, base_time)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _make_record(self, now: datetime, base_time: datetime) -> FlightRecord:
        rng = self.rng

        scheduled_departure = base_time + timedelta(
            hours=rng.randrange(0, SCHEDULE_WINDOW_HOURS),
            minutes=rng.randrange(0, 60),
        )
        duration = timedelta(hours=rng.randrange(1, 8), minutes=rng.randrange(0, 60))
        scheduled_arrival = scheduled_departure + duration

        departure_delay = timedelta(minutes=rng.randrange(-5, 180))
        # Some time can be made up (or lost) in the air
        arrival_delay = departure_delay + timedelta(minutes=rng.randrange(-30, 60))

        actual_departure = scheduled_departure + departure_delay
        actual_arrival = scheduled_arrival + arrival_delay

        origin = self.faker.random_element(AIRPORTS)
        destination = self.faker.random_element([a for a in AIRPORTS if a != origin])

        carrier_code = self.faker.random_element(CARRIER_CODES)
        flight_number = f"{carrier_code}{rng.randint(1000, 9999)}"

        return FlightRecord(
            flight_number=flight_number,
            airline=self.faker.random_element(AIRLINES),
            origin=origin,
            destination=destination,
            scheduled_departure=scheduled_departure,
            actual_departure=actual_departure,
            scheduled_arrival=scheduled_arrival,
            actual_arrival=actual_arrival,
            status=self._status_for(now, scheduled_departure, actual_departure),
            passenger_count=rng.randrange(MIN_PASSENGERS, MAX_PASSENGERS),
            aircraft=self.faker.random_element(AIRCRAFT_TYPES),
        )

    def _status_for(self, now: datetime, scheduled: datetime, actual: datetime) -> FlightStatus:
        if self.rng.randrange(100) < CANCELLATION_PERCENT:
            return FlightStatus.CANCELLED

        if actual < now - timedelta(hours=2):
            return FlightStatus.ARRIVED
        if actual < now:
            return FlightStatus.DEPARTED
        if actual - scheduled > DELAY_THRESHOLD:
            return FlightStatus.DELAYED
        return FlightStatus.ON_TIME


def generate_sample(
    count: int,
    rng: random.Random,
    now: datetime | None = None,
) -> list[FlightRecord]:
    """Generate *count* records from an explicit random source."""
    return FlightDataGenerator(rng=rng, now=now).generate(count)
