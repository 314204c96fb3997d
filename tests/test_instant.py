"""Tests for the Instant class.

Local-time expectations assume the CET/CEST zone installed by conftest.
"""

from __future__ import annotations

import datetime
import pickle

import pytest

from horae import Instant
from horae.errors import RangeError, ValidationError


class TestInstantConstruction:
    """Tests for Instant constructors."""

    def test_from_epoch_ms(self) -> None:
        assert Instant.from_epoch_ms(0).to_iso_string() == "1970-01-01T00:00:00.000Z"
        assert Instant(1_500).to_epoch_ms() == 1_500

    def test_rejects_non_integer(self) -> None:
        """Epoch milliseconds must be a real int, not a bool or float."""
        with pytest.raises(ValidationError):
            Instant(1.5)  # type: ignore[arg-type]
        with pytest.raises(ValidationError):
            Instant(True)

    def test_out_of_range_epoch(self) -> None:
        with pytest.raises(RangeError):
            Instant(10**16)

    def test_from_local_winter(self) -> None:
        """Local December time is UTC+1."""
        i = Instant.from_local(2025, 12, 4, 14, 30)
        assert i.to_iso_string() == "2025-12-04T13:30:00.000Z"
        assert i.utc_offset_minutes == 60
        assert i.tz_name == "CET"

    def test_from_local_summer(self) -> None:
        """Local July time is UTC+2."""
        i = Instant.from_local(2025, 7, 1, 12)
        assert i.to_iso_string() == "2025-07-01T10:00:00.000Z"
        assert i.utc_offset_minutes == 120
        assert i.tz_name == "CEST"

    def test_from_local_spring_gap_moves_forward(self) -> None:
        """02:30 does not exist on 2025-03-30; it reads back as 03:30 CEST."""
        i = Instant.from_local(2025, 3, 30, 2, 30)
        assert (i.hour, i.minute) == (3, 30)
        assert i.tz_name == "CEST"
        assert i == Instant.from_utc(2025, 3, 30, 1, 30)

    def test_from_local_around_spring_gap(self) -> None:
        assert Instant.from_local(2025, 3, 30, 1, 59) == Instant.from_utc(2025, 3, 30, 0, 59)
        assert Instant.from_local(2025, 3, 30, 3) == Instant.from_utc(2025, 3, 30, 1)

    def test_from_local_autumn_overlap(self) -> None:
        """02:30 on 2025-10-26 happens twice; either reading keeps the wall time."""
        i = Instant.from_local(2025, 10, 26, 2, 30)
        assert (i.day, i.hour, i.minute) == (26, 2, 30)

    def test_from_local_overflows_day(self) -> None:
        """Days past the end of the month roll into the next month."""
        assert Instant.from_local(2024, 2, 31).to_iso_date() == "2024-03-02"
        assert Instant.from_local(2025, 2, 29).to_iso_date() == "2025-03-01"

    def test_from_local_underflows_day(self) -> None:
        assert Instant.from_local(2025, 3, 0).to_iso_date() == "2025-02-28"

    def test_from_local_overflows_month(self) -> None:
        assert Instant.from_local(2025, 13, 1).to_iso_date() == "2026-01-01"
        assert Instant.from_local(2025, 0, 15).to_iso_date() == "2024-12-15"

    def test_from_local_negative_hour(self) -> None:
        i = Instant.from_local(2025, 1, 1, -1)
        assert (i.year, i.month, i.day, i.hour) == (2024, 12, 31, 23)

    def test_from_local_out_of_range(self) -> None:
        with pytest.raises(RangeError):
            Instant.from_local(10000, 1, 1)
        with pytest.raises(RangeError):
            Instant.from_local(1, 1, 0)

    def test_from_utc_with_offset(self) -> None:
        i = Instant.from_utc(2025, 12, 4, 15, 30, offset_minutes=60)
        assert i.to_iso_string() == "2025-12-04T14:30:00.000Z"

    def test_from_utc_is_strict(self) -> None:
        with pytest.raises(ValidationError):
            Instant.from_utc(2025, 2, 30)
        with pytest.raises(ValidationError):
            Instant.from_utc(2025, 1, 1, 24)

    def test_from_naive_datetime_is_local(self) -> None:
        value = datetime.datetime(2025, 12, 4, 14, 30, 0, 123_456)
        i = Instant.from_datetime(value)
        assert i == Instant.from_local(2025, 12, 4, 14, 30, 0, 123)

    def test_from_aware_datetime(self) -> None:
        value = datetime.datetime(2025, 12, 4, 13, 30, tzinfo=datetime.timezone.utc)
        assert Instant.from_datetime(value) == Instant.from_utc(2025, 12, 4, 13, 30)

    def test_from_date_is_local_midnight(self) -> None:
        i = Instant.from_date(datetime.date(2025, 12, 4))
        assert i.to_iso_string() == "2025-12-03T23:00:00.000Z"
        assert i.to_iso_date() == "2025-12-04"


class TestInstantFields:
    """Tests for local calendar accessors."""

    def test_fields(self) -> None:
        i = Instant.from_local(2025, 12, 4, 14, 30, 15, 250)
        assert (i.year, i.month, i.day) == (2025, 12, 4)
        assert (i.hour, i.minute, i.second, i.millisecond) == (14, 30, 15, 250)

    def test_day_of_week(self) -> None:
        """0 is Sunday, 4 is Thursday."""
        assert Instant.from_local(2025, 12, 7).day_of_week == 0
        assert Instant.from_local(2025, 12, 4).day_of_week == 4
        assert Instant.from_local(2025, 12, 6).day_of_week == 6

    def test_ordinal(self) -> None:
        i = Instant.from_local(2025, 12, 4, 23, 59)
        assert i.ordinal == datetime.date(2025, 12, 4).toordinal()

    def test_with_fields_overflows(self) -> None:
        i = Instant.from_local(2024, 1, 31, 10, 0)
        moved = i.with_fields(month=2)
        assert moved.to_iso_date() == "2024-03-02"
        assert moved.hour == 10

    def test_with_fields_keeps_unspecified(self) -> None:
        i = Instant.from_local(2025, 12, 4, 14, 30)
        assert i.with_fields(hour=9) == Instant.from_local(2025, 12, 4, 9, 30)


class TestInstantConversion:
    """Tests for conversion helpers."""

    def test_to_iso_string_has_milliseconds(self) -> None:
        i = Instant.from_utc(2025, 12, 4, 14, 30, 5, 7)
        assert i.to_iso_string() == "2025-12-04T14:30:05.007Z"
        assert str(i) == "2025-12-04T14:30:05.007Z"

    def test_to_iso_date_is_local(self) -> None:
        """23:30Z on Dec 3 is already Dec 4 in CET."""
        assert Instant.from_utc(2025, 12, 3, 23, 30).to_iso_date() == "2025-12-04"

    def test_to_utc_datetime(self) -> None:
        i = Instant.from_utc(2025, 12, 4, 14, 30)
        assert i.to_utc_datetime() == datetime.datetime(
            2025, 12, 4, 14, 30, tzinfo=datetime.timezone.utc
        )

    def test_to_datetime_is_aware(self) -> None:
        local = Instant.from_local(2025, 12, 4, 14, 30).to_datetime()
        assert local.utcoffset() == datetime.timedelta(hours=1)
        assert (local.hour, local.minute) == (14, 30)


class TestInstantComparison:
    """Tests for equality, ordering and hashing."""

    def test_ordering(self) -> None:
        a = Instant(1_000)
        b = Instant(2_000)
        assert a < b
        assert a <= b
        assert b > a
        assert b >= a
        assert a != b

    def test_equality_and_hash(self) -> None:
        a = Instant.from_utc(2025, 12, 4)
        b = Instant.from_utc(2025, 12, 4, offset_minutes=0)
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_not_equal_to_other_types(self) -> None:
        assert Instant(0) != 0
        assert Instant(0) != "1970-01-01T00:00:00.000Z"

    def test_repr(self) -> None:
        assert repr(Instant.from_utc(2025, 12, 4, 14, 30)) == (
            "Instant('2025-12-04T14:30:00.000Z')"
        )

    def test_pickle(self) -> None:
        i = Instant.from_local(2025, 12, 4, 14, 30)
        assert pickle.loads(pickle.dumps(i)) == i
