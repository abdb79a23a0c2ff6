"""
Business-rule validation for flight records.

Every rule is checked independently so a rejected record reports all of
its problems at once.  Messages are part of the public contract; callers
and tests match on them literally.
"""
from __future__ import annotations

from typing import Callable

from src.generators.models import FlightRecord

MAX_PASSENGERS = 800
VIOLATION_SEPARATOR = "; "

Validator = Callable[[FlightRecord], list[str]]


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate(record: FlightRecord) -> list[str]:
    """Return the list of rule violations for *record* (empty when valid)."""
    errors: list[str] = []

    if _blank(record.flight_number):
        errors.append("Flight number is required")
    if _blank(record.airline):
        errors.append("Airline is required")
    if _blank(record.origin):
        errors.append("Origin is required")
    if _blank(record.destination):
        errors.append("Destination is required")

    if record.origin.upper() == record.destination.upper():
        errors.append("Origin and destination cannot be the same")

    if record.scheduled_departure >= record.scheduled_arrival:
        errors.append("Scheduled departure must be before scheduled arrival")

    if record.passenger_count < 0:
        errors.append("Passenger count cannot be negative")
    if record.passenger_count > MAX_PASSENGERS:
        errors.append(f"Passenger count seems unrealistic (>{MAX_PASSENGERS})")

    return errors


def is_valid(record: FlightRecord) -> bool:
    return not validate(record)


def validation_errors(record: FlightRecord) -> str:
    """Violations joined into a single human-readable string."""
    return VIOLATION_SEPARATOR.join(validate(record))


class FlightDataValidator:
    """
    Callable validation strategy for ``FlightStore``.

    Extra rules can be appended; each takes a record and returns a list of
    messages.  They run after the built-in rules.
    """

    def __init__(self, extra_rules: list[Validator] | None = None):
        self.extra_rules = list(extra_rules or [])

    def __call__(self, record: FlightRecord) -> list[str]:
        errors = validate(record)
        for rule in self.extra_rules:
            errors.extend(rule(record))
        return errors
