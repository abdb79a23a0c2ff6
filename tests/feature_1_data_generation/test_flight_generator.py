"""
Feature 1 — Data Generation Regression Tests
=============================================

Tests that the synthetic flight data generator produces deterministic,
constrained records that pass the store's validation gate.

Test matrix:
  1.1  Schema — every record is a FlightRecord with the expected pools
  1.2  Determinism — same seed / rng + same clock gives identical output
  1.3  Batch generation — generate(n) returns exactly n records
  1.4  Streaming generation — stream(n) yields exactly n records
  1.5  Field constraints — passengers, flight number, schedule window
  1.6  Timing constraints — block time, departure/arrival delays
  1.7  Status rules — derived from actual departure vs. now
  1.8  Airport pair uniqueness — origin != destination
  1.9  Validation — generated records are always accepted
  1.10 Edge cases — generate(0), negative counts
  1.11 Clock — read at generation time, tzinfo carried through
"""
from __future__ import annotations

import random
import re
from datetime import datetime, timedelta, timezone

import pytest

from src.generators.flight_generator import (
    AIRCRAFT_TYPES,
    AIRLINES,
    AIRPORTS,
    CARRIER_CODES,
    FlightDataGenerator,
    generate_sample,
    window_start,
)
from src.generators.models import FlightRecord, FlightStatus
from src.processing.validator import is_valid


pytestmark = pytest.mark.feature_1


# -----------------------------------------------------------------------
# 1.1 Schema
# -----------------------------------------------------------------------
class TestSchema:
    def test_all_records_are_flight_records(self, sample_records):
        for rec in sample_records:
            assert isinstance(rec, FlightRecord)

    def test_categorical_fields_come_from_pools(self, sample_records):
        for rec in sample_records:
            assert rec.airline in AIRLINES
            assert rec.aircraft in AIRCRAFT_TYPES
            assert rec.origin in AIRPORTS
            assert rec.destination in AIRPORTS

    def test_status_is_valid_enum(self, sample_records):
        for rec in sample_records:
            assert rec.status in FlightStatus


# -----------------------------------------------------------------------
# 1.2 Determinism
# -----------------------------------------------------------------------
class TestDeterminism:
    def test_same_seed_same_output(self, now):
        records_a = FlightDataGenerator(seed=99, now=now).generate(20)
        records_b = FlightDataGenerator(seed=99, now=now).generate(20)
        assert [a.model_dump() for a in records_a] == [b.model_dump() for b in records_b]

    def test_injected_rng_matches_seed(self, now):
        from_seed = FlightDataGenerator(seed=7, now=now).generate(10)
        from_rng = generate_sample(10, random.Random(7), now=now)
        assert from_seed == from_rng

    def test_different_seed_different_output(self, now):
        records_a = FlightDataGenerator(seed=1, now=now).generate(10)
        records_b = FlightDataGenerator(seed=2, now=now).generate(10)
        diffs = sum(1 for a, b in zip(records_a, records_b) if a != b)
        assert diffs > 0


# -----------------------------------------------------------------------
# 1.3 Batch generation count
# -----------------------------------------------------------------------
class TestBatchGeneration:
    @pytest.mark.parametrize("n", [0, 1, 5, 50, 100])
    def test_generate_returns_exact_count(self, n, now):
        gen = FlightDataGenerator(seed=42, now=now)
        assert len(gen.generate(n)) == n


# -----------------------------------------------------------------------
# 1.4 Streaming generation count
# -----------------------------------------------------------------------
class TestStreamingGeneration:
    def test_stream_yields_exact_count(self, generator):
        assert len(list(generator.stream(30))) == 30

    def test_stream_yields_records(self, generator):
        for rec in generator.stream(10):
            assert isinstance(rec, FlightRecord)


# -----------------------------------------------------------------------
# 1.5 Field constraints
# -----------------------------------------------------------------------
class TestFieldConstraints:
    def test_passenger_count_range(self):
        records = generate_sample(100, random.Random(3))
        for rec in records:
            assert 50 <= rec.passenger_count < 300

    def test_flight_number_format(self, sample_records):
        pattern = re.compile(r"([A-Z0-9]{2})(\d{4})")
        for rec in sample_records:
            match = pattern.fullmatch(rec.flight_number)
            assert match, rec.flight_number
            assert match.group(1) in CARRIER_CODES
            assert 1000 <= int(match.group(2)) <= 9999

    def test_scheduled_departure_in_window(self, sample_records, now):
        start = datetime(now.year, now.month, now.day) - timedelta(days=2)
        end = start + timedelta(hours=71, minutes=59)
        for rec in sample_records:
            assert start <= rec.scheduled_departure <= end

    def test_window_anchor_is_midnight_two_days_back(self, now):
        assert window_start(now) == datetime(2026, 6, 13, 0, 0)


# -----------------------------------------------------------------------
# 1.6 Timing constraints
# -----------------------------------------------------------------------
class TestTimingConstraints:
    def test_scheduled_block_time(self, sample_records):
        for rec in sample_records:
            block = rec.scheduled_arrival - rec.scheduled_departure
            assert timedelta(hours=1) <= block <= timedelta(hours=7, minutes=59)

    def test_departure_delay_range(self, sample_records):
        for rec in sample_records:
            assert timedelta(minutes=-5) <= rec.departure_delay < timedelta(minutes=180)

    def test_arrival_delay_relative_to_departure_delay(self, sample_records):
        for rec in sample_records:
            recovery = rec.arrival_delay - rec.departure_delay
            assert timedelta(minutes=-30) <= recovery < timedelta(minutes=60)


# -----------------------------------------------------------------------
# 1.7 Status rules
# -----------------------------------------------------------------------
class TestStatusRules:
    def test_status_matches_actual_departure(self, now):
        records = FlightDataGenerator(seed=5, now=now).generate(300)
        for rec in records:
            if rec.status == FlightStatus.CANCELLED:
                continue
            if rec.actual_departure < now - timedelta(hours=2):
                expected = FlightStatus.ARRIVED
            elif rec.actual_departure < now:
                expected = FlightStatus.DEPARTED
            elif rec.departure_delay > timedelta(minutes=15):
                expected = FlightStatus.DELAYED
            else:
                expected = FlightStatus.ON_TIME
            assert rec.status == expected

    def test_some_flights_cancelled(self, now):
        records = FlightDataGenerator(seed=42, now=now).generate(1000)
        cancelled = sum(1 for r in records if r.status == FlightStatus.CANCELLED)
        assert 0 < cancelled < 150

    def test_never_scheduled_or_diverted(self, now):
        records = FlightDataGenerator(seed=42, now=now).generate(500)
        for rec in records:
            assert rec.status not in (FlightStatus.SCHEDULED, FlightStatus.DIVERTED)


# -----------------------------------------------------------------------
# 1.8 Airport pair uniqueness
# -----------------------------------------------------------------------
class TestAirportPairs:
    def test_origin_differs_from_destination(self):
        for rec in generate_sample(100, random.Random(11)):
            assert rec.origin != rec.destination


# -----------------------------------------------------------------------
# 1.9 Validation
# -----------------------------------------------------------------------
class TestValidation:
    def test_generated_records_are_valid(self, now):
        for rec in FlightDataGenerator(seed=8, now=now).generate(200):
            assert is_valid(rec)


# -----------------------------------------------------------------------
# 1.10 Edge cases
# -----------------------------------------------------------------------
class TestEdgeCases:
    def test_generate_zero(self, generator):
        assert generator.generate(0) == []

    def test_generate_sample_zero(self):
        assert generate_sample(0, random.Random(1)) == []

    def test_negative_count_rejected(self, generator):
        with pytest.raises(ValueError):
            generator.generate(-1)


# -----------------------------------------------------------------------
# 1.11 Clock
# -----------------------------------------------------------------------
class _Clock(datetime):
    """datetime whose now() returns a settable instant."""

    current = datetime(2026, 6, 15, 12, 0)

    @classmethod
    def now(cls, tz=None):
        return cls.current


class TestClock:
    @pytest.fixture
    def clock(self, monkeypatch):
        monkeypatch.setattr("src.generators.flight_generator.datetime", _Clock)
        monkeypatch.setattr(_Clock, "current", datetime(2026, 6, 15, 12, 0))
        return _Clock

    def test_clock_read_when_generating(self, clock):
        gen = FlightDataGenerator(seed=1)
        clock.current = datetime(2026, 6, 20, 12, 0)
        records = gen.generate(200)
        for rec in records:
            assert rec.scheduled_departure >= datetime(2026, 6, 18)
            assert rec.scheduled_departure < datetime(2026, 6, 21)

    def test_status_uses_clock_at_generation(self, clock):
        gen = FlightDataGenerator(seed=4)
        clock.current = datetime(2026, 7, 1, 12, 0)
        records = gen.generate(200)
        for rec in records:
            if rec.status == FlightStatus.CANCELLED:
                continue
            if rec.actual_departure < clock.current - timedelta(hours=2):
                assert rec.status == FlightStatus.ARRIVED
            elif rec.actual_departure < clock.current:
                assert rec.status == FlightStatus.DEPARTED
            else:
                assert rec.status in (FlightStatus.DELAYED, FlightStatus.ON_TIME)

    def test_long_lived_generator_follows_clock(self, clock):
        gen = FlightDataGenerator(seed=2)
        first = gen.generate(50)
        clock.current = clock.current + timedelta(days=10)
        second = gen.generate(50)
        assert max(r.scheduled_departure for r in first) < min(r.scheduled_departure for r in second)

    def test_timezone_aware_now(self):
        now = datetime(2026, 6, 15, 12, 0, tzinfo=timezone.utc)
        records = FlightDataGenerator(seed=42, now=now).generate(100)
        assert window_start(now) == datetime(2026, 6, 13, tzinfo=timezone.utc)
        for rec in records:
            assert rec.scheduled_departure.tzinfo is not None
            assert is_valid(rec)
