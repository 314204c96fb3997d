"""Tests for the Duration class."""

from __future__ import annotations

import pytest

from horae import Duration
from horae.core.duration import DURATION_FIELDS
from horae.errors import ValidationError


class TestDurationConstruction:
    """Tests for Duration construction and validation."""

    def test_defaults_are_zero(self) -> None:
        d = Duration()
        assert d.as_dict() == {name: 0 for name in DURATION_FIELDS}
        assert d.is_zero
        assert not d

    def test_rejects_float(self) -> None:
        with pytest.raises(ValidationError, match="days must be an int"):
            Duration(days=1.5)  # type: ignore[arg-type]

    def test_rejects_bool(self) -> None:
        with pytest.raises(ValidationError):
            Duration(hours=True)

    def test_is_frozen(self) -> None:
        d = Duration(days=1)
        with pytest.raises(AttributeError):
            d.days = 2  # type: ignore[misc]


class TestDurationCoerce:
    """Tests for Duration.coerce."""

    def test_from_mapping(self) -> None:
        assert Duration.coerce({"days": 7}) == Duration(days=7)

    def test_from_keywords(self) -> None:
        assert Duration.coerce(hours=-2, minutes=30) == Duration(hours=-2, minutes=30)

    def test_duration_passes_through(self) -> None:
        d = Duration(months=1)
        assert Duration.coerce(d) is d

    def test_keywords_override_mapping(self) -> None:
        assert Duration.coerce({"days": 1, "hours": 2}, days=3) == Duration(days=3, hours=2)

    def test_keywords_merge_with_duration(self) -> None:
        assert Duration.coerce(Duration(months=1), days=2) == Duration(months=1, days=2)

    def test_unknown_field(self) -> None:
        with pytest.raises(ValidationError, match="unknown duration fields: fortnights"):
            Duration.coerce({"fortnights": 1})

    def test_wrong_type(self) -> None:
        with pytest.raises(ValidationError, match="expected Duration or mapping"):
            Duration.coerce(5)  # type: ignore[arg-type]


class TestDurationOperations:
    """Tests for items, negation and truthiness."""

    def test_items_in_application_order(self) -> None:
        d = Duration(milliseconds=5, days=1, years=2)
        assert d.items() == [("years", 2), ("days", 1), ("milliseconds", 5)]

    def test_negation(self) -> None:
        assert -Duration(months=1, days=-2) == Duration(months=-1, days=2)

    def test_truthiness(self) -> None:
        assert Duration(seconds=1)
        assert not Duration()
