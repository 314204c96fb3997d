"""Tests for unit and preset enumerations."""

from __future__ import annotations

import pytest

from horae import DurationUnit, Granularity, Inclusivity, RangePreset
from horae.errors import ValidationError
from horae.units.presets import parse_enum


class TestGranularity:
    """Tests for Granularity.parse."""

    def test_parse_string(self) -> None:
        assert Granularity.parse("week") is Granularity.WEEK

    def test_parse_member(self) -> None:
        assert Granularity.parse(Granularity.DAY) is Granularity.DAY

    def test_parse_unknown(self) -> None:
        with pytest.raises(ValidationError, match="unknown granularity: 'days'"):
            Granularity.parse("days")


class TestDurationUnit:
    """Tests for DurationUnit."""

    @pytest.mark.parametrize("name", ["hours", "hour"])
    def test_parse_plural_and_singular(self, name: str) -> None:
        assert DurationUnit.parse(name) is DurationUnit.HOURS

    def test_parse_unknown(self) -> None:
        with pytest.raises(ValidationError, match="unknown duration unit"):
            DurationUnit.parse("fortnight")
        with pytest.raises(ValidationError):
            DurationUnit.parse(3)  # type: ignore[arg-type]

    def test_lengths(self) -> None:
        assert DurationUnit.MILLISECONDS.to_milliseconds() == 1
        assert DurationUnit.WEEKS.to_milliseconds() == 604_800_000
        assert DurationUnit.MONTHS.to_milliseconds() == pytest.approx(30.44 * 86_400_000)
        assert DurationUnit.YEARS.to_milliseconds() == pytest.approx(365.25 * 86_400_000)


class TestInclusivity:
    """Tests for bracket notation."""

    @pytest.mark.parametrize(
        ("bounds", "start", "end"),
        [
            (Inclusivity.INCLUSIVE, True, True),
            (Inclusivity.EXCLUSIVE, False, False),
            (Inclusivity.START_INCLUSIVE, True, False),
            (Inclusivity.END_INCLUSIVE, False, True),
        ],
    )
    def test_ends(self, bounds: Inclusivity, start: bool, end: bool) -> None:
        assert bounds.includes_start is start
        assert bounds.includes_end is end

    def test_parse_from_brackets(self) -> None:
        assert parse_enum(Inclusivity, "[)", "inclusivity") is Inclusivity.START_INCLUSIVE


class TestRangePreset:
    """Tests for RangePreset values."""

    def test_camel_case_values(self) -> None:
        assert RangePreset("thisWeek") is RangePreset.THIS_WEEK
        assert [p.value for p in RangePreset] == [
            "today",
            "yesterday",
            "thisWeek",
            "lastWeek",
            "thisMonth",
            "lastMonth",
            "thisYear",
            "lastYear",
        ]

    def test_unknown_preset(self) -> None:
        with pytest.raises(ValidationError, match="unknown range preset"):
            parse_enum(RangePreset, "nextWeek", "range preset")
