"""
Shared pytest fixtures used across all feature test packs.
"""
from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from src.generators.flight_generator import FlightDataGenerator
from src.generators.models import FlightRecord, FlightStatus
from src.processing.store import FlightStore

NOW = datetime(2026, 6, 15, 12, 0)


# ---------------------------------------------------------------------------
# Deterministic generator
# ---------------------------------------------------------------------------

@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def generator(now) -> FlightDataGenerator:
    """Seeded generator with a fixed clock for reproducible tests."""
    return FlightDataGenerator(seed=42, now=now)


@pytest.fixture
def sample_records(generator):
    """50 deterministic flight records."""
    return generator.generate(50)


# ---------------------------------------------------------------------------
# Hand-built records
# ---------------------------------------------------------------------------

@pytest.fixture
def make_flight():
    """
    Factory for a valid on-time flight; override any field by keyword.

    ``dep_delay`` / ``arr_delay`` (minutes) shift the actual times.
    """
    def _make(dep_delay: int = 0, arr_delay: int = 0, **overrides) -> FlightRecord:
        scheduled_departure = overrides.pop("scheduled_departure", datetime(2026, 6, 14, 9, 30))
        scheduled_arrival = overrides.pop(
            "scheduled_arrival", scheduled_departure + timedelta(hours=3)
        )
        fields = {
            "flight_number": "DL1234",
            "airline": "Delta Air Lines",
            "origin": "JFK",
            "destination": "LAX",
            "scheduled_departure": scheduled_departure,
            "actual_departure": scheduled_departure + timedelta(minutes=dep_delay),
            "scheduled_arrival": scheduled_arrival,
            "actual_arrival": scheduled_arrival + timedelta(minutes=arr_delay),
            "status": FlightStatus.ARRIVED,
            "passenger_count": 150,
            "aircraft": "Boeing 737",
        }
        fields.update(overrides)
        return FlightRecord(**fields)

    return _make


@pytest.fixture
def store() -> FlightStore:
    """Empty store with the default validator."""
    return FlightStore()
