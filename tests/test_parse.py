"""Tests for date input normalization and text format detection."""

from __future__ import annotations

import datetime

import pytest

from horae import Instant, ParseResult, is_valid_date, parse_date, to_date
from horae.errors import ParseError
from horae.parse import INVALID_DATE_FORMAT, parse_text
from horae.parse._formats import extract_components
from horae.parse._patterns import detect_format


class TestToDateNonText:
    """Tests for to_date with non-string inputs."""

    def test_instant_passes_through(self) -> None:
        i = Instant(123)
        assert to_date(i) is i

    def test_epoch_milliseconds(self) -> None:
        assert to_date(0) == Instant(0)
        assert to_date(1_733_322_600_000) == Instant(1_733_322_600_000)

    def test_float_truncates(self) -> None:
        assert to_date(1_500.9) == Instant(1_500)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_float(self, value: float) -> None:
        assert to_date(value) is None

    def test_bool_is_not_a_date(self) -> None:
        assert to_date(True) is None
        assert to_date(False) is None

    def test_none(self) -> None:
        assert to_date(None) is None

    def test_unsupported_type(self) -> None:
        assert to_date([2025, 12, 4]) is None  # type: ignore[arg-type]

    def test_datetime(self) -> None:
        assert to_date(datetime.datetime(2025, 12, 4, 14, 30)) == Instant.from_local(
            2025, 12, 4, 14, 30
        )

    def test_date(self) -> None:
        assert to_date(datetime.date(2025, 12, 4)) == Instant.from_local(2025, 12, 4)

    def test_out_of_range_epoch(self) -> None:
        assert to_date(10**16) is None


class TestIsoText:
    """Tests for ISO 8601 strings."""

    def test_date_only_is_local_midnight(self) -> None:
        assert to_date("2025-12-04") == Instant.from_local(2025, 12, 4)

    def test_year_month(self) -> None:
        assert to_date("2025-12") == Instant.from_local(2025, 12, 1)

    def test_year(self) -> None:
        assert to_date("2025") == Instant.from_local(2025, 1, 1)

    def test_local_datetime(self) -> None:
        assert to_date("2025-12-04T14:30") == Instant.from_local(2025, 12, 4, 14, 30)
        assert to_date("2025-12-04 14:30:15") == Instant.from_local(
            2025, 12, 4, 14, 30, 15
        )

    def test_fraction_truncates_to_milliseconds(self) -> None:
        i = to_date("2025-12-04T14:30:15.123456")
        assert i is not None
        assert i.millisecond == 123
        assert to_date("2025-12-04T14:30:15.5").millisecond == 500

    def test_utc(self) -> None:
        assert to_date("2025-12-04T14:30:00Z") == Instant.from_utc(2025, 12, 4, 14, 30)
        assert to_date("2025-12-04T14:30:00.000Z").to_iso_string() == (
            "2025-12-04T14:30:00.000Z"
        )

    @pytest.mark.parametrize("zone", ["+01:00", "+0100", "+01"])
    def test_offsets(self, zone: str) -> None:
        assert to_date(f"2025-12-04T15:30:00{zone}") == Instant.from_utc(
            2025, 12, 4, 14, 30
        )

    def test_negative_offset(self) -> None:
        assert to_date("2025-12-04T09:30:00-05:00") == Instant.from_utc(
            2025, 12, 4, 14, 30
        )

    def test_surrounding_whitespace(self) -> None:
        assert to_date("  2025-12-04  ") == Instant.from_local(2025, 12, 4)

    @pytest.mark.parametrize(
        "text",
        ["2025-02-30", "2025-13-01", "2025-12-04T25:00", "2025-12-04T14:60", "2025-00"],
    )
    def test_impossible_values(self, text: str) -> None:
        assert to_date(text) is None


class TestOtherText:
    """Tests for slash, named-month and RFC 2822 strings."""

    def test_slash_year_first(self) -> None:
        assert to_date("2025/12/04") == Instant.from_local(2025, 12, 4)

    def test_slash_month_first(self) -> None:
        assert to_date("12/04/2025") == Instant.from_local(2025, 12, 4)

    def test_slash_with_12_hour_time(self) -> None:
        assert to_date("12/04/2025 2:30 PM") == Instant.from_local(2025, 12, 4, 14, 30)
        assert to_date("12/04/2025 12:15 am") == Instant.from_local(2025, 12, 4, 0, 15)

    def test_english_named_month(self) -> None:
        expected = Instant.from_local(2025, 12, 4)
        assert to_date("Dec 4, 2025") == expected
        assert to_date("December 4 2025") == expected
        assert to_date("December 4th, 2025") == expected

    def test_english_with_weekday_and_time(self) -> None:
        assert to_date("Thursday, December 4, 2025 2:30 PM") == Instant.from_local(
            2025, 12, 4, 14, 30
        )

    def test_day_first_named_month(self) -> None:
        expected = Instant.from_local(2025, 12, 4)
        assert to_date("4 Dec 2025") == expected
        assert to_date("4 dic 2025") == expected
        assert to_date("4 de diciembre de 2025") == expected

    def test_spanish_with_time(self) -> None:
        assert to_date("jueves, 4 de diciembre de 2025, 14:30") == Instant.from_local(
            2025, 12, 4, 14, 30
        )

    def test_rfc2822(self) -> None:
        assert to_date("Thu, 04 Dec 2025 14:30:00 GMT") == Instant.from_utc(
            2025, 12, 4, 14, 30
        )
        assert to_date("04 Dec 2025 15:30:00 +0100") == Instant.from_utc(
            2025, 12, 4, 14, 30
        )

    @pytest.mark.parametrize(
        "text",
        ["", "   ", "not a date", "Foo 4, 2025", "Blursday, Dec 4, 2025", "13:00 PM"],
    )
    def test_garbage(self, text: str) -> None:
        assert to_date(text) is None

    def test_out_of_range_hour_on_12_hour_clock(self) -> None:
        assert to_date("12/04/2025 13:30 PM") is None


class TestDetectFormat:
    """Tests for template selection."""

    @pytest.mark.parametrize(
        ("text", "name"),
        [
            ("2025-12-04T14:30:00Z", "iso_datetime"),
            ("2025-12-04", "iso_date"),
            ("2025-12", "iso_year_month"),
            ("2025", "iso_year"),
            ("Thu, 04 Dec 2025 14:30:00 GMT", "rfc2822"),
            ("2025/12/04", "slash_ymd"),
            ("12/04/2025", "slash_mdy"),
            ("Dec 4, 2025", "named_month_mdy"),
            ("4 de diciembre de 2025", "named_month_dmy"),
        ],
    )
    def test_template_names(self, text: str, name: str) -> None:
        match = detect_format(text)
        assert match is not None
        assert match.template.name == name

    def test_components_local_has_no_offset(self) -> None:
        match = detect_format("2025-12-04T14:30")
        assert match is not None
        assert match.components["offset_minutes"] is None

    def test_extract_components_rejects_unknown_month(self) -> None:
        match = detect_format("Dec 4, 2025")
        assert match is not None
        pattern = match.template.pattern
        with pytest.raises(ValueError, match="unknown month name"):
            extract_components(pattern.match("Foo 4, 2025"))


class TestParseText:
    """Tests for parse_text, the raising parser."""

    def test_success(self) -> None:
        assert parse_text("2025-12-04") == Instant.from_local(2025, 12, 4)

    def test_unknown_format(self) -> None:
        with pytest.raises(ParseError, match="cannot determine format"):
            parse_text("garbage")


class TestParseDate:
    """Tests for parse_date and is_valid_date."""

    def test_valid(self) -> None:
        result = parse_date("2025-12-04T14:30:00Z")
        assert result == ParseResult(
            instant=Instant.from_utc(2025, 12, 4, 14, 30), valid=True, error=None
        )

    def test_invalid(self) -> None:
        result = parse_date("2025-02-30")
        assert result.instant is None
        assert result.valid is False
        assert result.error == INVALID_DATE_FORMAT == "Invalid date format"

    def test_result_is_frozen(self) -> None:
        result = parse_date("2025-12-04")
        with pytest.raises(AttributeError):
            result.valid = False  # type: ignore[misc]

    def test_is_valid_date(self) -> None:
        assert is_valid_date("2025-12-04")
        assert is_valid_date(0)
        assert not is_valid_date("2025-02-30")
        assert not is_valid_date(None)
        assert not is_valid_date(float("nan"))
