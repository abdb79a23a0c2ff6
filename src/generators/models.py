"""
Pydantic models for flight records.

A ``FlightRecord`` holds only the raw fields (route, schedule, actual
times, passenger load).  Delays, duration and the delayed flag are
computed on every read from the timestamps and are never stored.

The model enforces *types* only.  Business rules (non-empty fields,
origin != destination, passenger limits, ...) live in
``src.processing.validator`` so that an invalid record can still be built
and then rejected by the store with a full list of violations.
"""
from __future__ import annotations

import enum
from datetime import datetime, timedelta

from pydantic import BaseModel, ConfigDict, Field, field_validator

DELAY_THRESHOLD = timedelta(minutes=15)


class FlightStatus(str, enum.Enum):
    SCHEDULED = "Scheduled"
    ON_TIME = "OnTime"
    DELAYED = "Delayed"
    DEPARTED = "Departed"
    ARRIVED = "Arrived"
    CANCELLED = "Cancelled"
    DIVERTED = "Diverted"


class FlightRecord(BaseModel):
    """Single flight with scheduled and actual timings."""

    model_config = ConfigDict(frozen=True)

    flight_number: str = Field(..., description="Carrier code + number, e.g. 'DL1234'")
    airline: str = Field(..., description="Airline name")
    origin: str = Field(..., description="IATA origin airport code")
    destination: str = Field(..., description="IATA destination airport code")
    scheduled_departure: datetime
    actual_departure: datetime
    scheduled_arrival: datetime
    actual_arrival: datetime
    status: FlightStatus = Field(default=FlightStatus.SCHEDULED)
    passenger_count: int = Field(default=0, description="Passengers on board")
    aircraft: str = Field(default="", description="Aircraft type, e.g. 'Boeing 737'")

    @field_validator("origin", "destination")
    @classmethod
    def uppercase_airport(cls, v: str) -> str:
        return v.upper()

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def departure_delay(self) -> timedelta:
        return self.actual_departure - self.scheduled_departure

    @property
    def arrival_delay(self) -> timedelta:
        return self.actual_arrival - self.scheduled_arrival

    @property
    def is_delayed(self) -> bool:
        """True when either delay exceeds 15 minutes (exactly 15 is on time)."""
        return self.departure_delay > DELAY_THRESHOLD or self.arrival_delay > DELAY_THRESHOLD

    @property
    def flight_duration(self) -> timedelta:
        return self.actual_arrival - self.actual_departure

    @property
    def delay_minutes(self) -> float:
        """The larger of the two delays, in minutes."""
        return max(self.departure_delay, self.arrival_delay).total_seconds() / 60

    def summary(self) -> str:
        delay = f"{self.delay_minutes:.0f}min" if self.is_delayed else "On-time"
        return (
            f"{self.flight_number} | {self.airline} | {self.origin} → {self.destination} | "
            f"{self.scheduled_departure:%m/%d %H:%M} | {self.status.value} | Delay: {delay}"
        )
