"""
Text boundary for manually entered flights.

Drivers that collect raw strings (prompts, form fields) convert them here.
Anything unparsable raises ``InputError`` so the driver can report it and
carry on; the store itself only ever sees typed ``FlightRecord`` values.

Formats are fixed and culture-invariant:

  timestamp  MM/dd/yyyy HH:mm   (24-hour)
  date       MM/dd/yyyy
"""
from __future__ import annotations

import re
from datetime import date, datetime

from src.generators.models import FlightRecord, FlightStatus

TIMESTAMP_FORMAT = "%m/%d/%Y %H:%M"
DATE_FORMAT = "%m/%d/%Y"

# strptime accepts single-digit fields; entry requires the padded form
_TIMESTAMP_RE = re.compile(r"\d{2}/\d{2}/\d{4} \d{2}:\d{2}")
_DATE_RE = re.compile(r"\d{2}/\d{2}/\d{4}")
_INTEGER_RE = re.compile(r"[+-]?\d+", re.ASCII)


class InputError(ValueError):
    """Raised when a raw text field cannot be converted."""

    def __init__(self, field: str, text: object, expected: str):
        self.field = field
        self.text = text
        self.expected = expected
        super().__init__(f"Invalid {field} {text!r}: expected {expected}")


def parse_timestamp(text: str, field: str = "timestamp") -> datetime:
    value = (text or "").strip()
    if not _TIMESTAMP_RE.fullmatch(value):
        raise InputError(field, text, "MM/dd/yyyy HH:mm")
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError as exc:
        raise InputError(field, text, "MM/dd/yyyy HH:mm") from exc


def parse_date(text: str, field: str = "date") -> date:
    value = (text or "").strip()
    if not _DATE_RE.fullmatch(value):
        raise InputError(field, text, "MM/dd/yyyy")
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as exc:
        raise InputError(field, text, "MM/dd/yyyy") from exc


def parse_passenger_count(text: str) -> int:
    value = (text or "").strip()
    if not _INTEGER_RE.fullmatch(value):
        raise InputError("passenger count", text, "a whole number")
    return int(value)


def record_from_entry(
    flight_number: str,
    airline: str,
    origin: str,
    destination: str,
    scheduled_departure: str,
    actual_departure: str,
    scheduled_arrival: str,
    actual_arrival: str,
    passenger_count: str,
    aircraft: str = "",
) -> FlightRecord:
    """
    Build a record from raw entry strings.

    Manually entered flights are recorded as already arrived.  The result
    is not validated; pass it to ``FlightStore.add``.
    """
    return FlightRecord(
        flight_number=flight_number or "",
        airline=airline or "",
        origin=(origin or "").upper(),
        destination=(destination or "").upper(),
        scheduled_departure=parse_timestamp(scheduled_departure, "scheduled departure"),
        actual_departure=parse_timestamp(actual_departure, "actual departure"),
        scheduled_arrival=parse_timestamp(scheduled_arrival, "scheduled arrival"),
        actual_arrival=parse_timestamp(actual_arrival, "actual arrival"),
        status=FlightStatus.ARRIVED,
        passenger_count=parse_passenger_count(passenger_count),
        aircraft=aircraft or "",
    )
