"""Instant class: an immutable point in time.

This module provides the Instant class, the canonical value every Horae
operation accepts and returns. An Instant is stored as integer
milliseconds since the Unix epoch; its calendar fields are read in the
host's local time zone.
"""

from __future__ import annotations

import datetime as _datetime
from typing import TYPE_CHECKING

from horae._internal.calendar import (
    day_of_week,
    normalize_month,
    ordinal_to_ymd,
    validate_date,
    validate_time,
    ymd_to_ordinal,
)
from horae._internal.constants import (
    MAX_YEAR,
    MIN_YEAR,
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
    UNIX_EPOCH_ORDINAL,
)
from horae.errors import RangeError, ValidationError

if TYPE_CHECKING:
    from horae.core.clock import Clock

_UNIX_EPOCH = _datetime.datetime(1970, 1, 1, tzinfo=_datetime.timezone.utc)
_ONE_MS = _datetime.timedelta(milliseconds=1)
_MIN_ORDINAL = ymd_to_ordinal(MIN_YEAR, 1, 1)
_MAX_ORDINAL = ymd_to_ordinal(MAX_YEAR, 12, 31)


class Instant:
    """An immutable point in time with millisecond resolution.

    The internal representation is a single integer: milliseconds since
    1970-01-01T00:00:00Z. Calendar accessors (year, month, day, ...)
    report the wall-clock reading in the host's local time zone.

    Attributes:
        year: The local year.
        month: The local month (1-12).
        day: The local day of the month (1-31).
        hour: The local hour (0-23).
        minute: The local minute (0-59).
        second: The local second (0-59).
        millisecond: The millisecond (0-999).
        day_of_week: The local day of the week (0=Sunday, 6=Saturday).

    Examples:
        >>> i = Instant.from_utc(2025, 12, 4, 14, 30)
        >>> i.to_iso_string()
        '2025-12-04T14:30:00.000Z'

        >>> Instant.from_epoch_ms(0) == Instant.from_utc(1970, 1, 1)
        True
    """

    __slots__ = ("_ms", "_local")

    def __init__(self, epoch_ms: int) -> None:
        """Create an Instant from epoch milliseconds.

        Args:
            epoch_ms: Milliseconds since 1970-01-01T00:00:00Z.

        Raises:
            ValidationError: If epoch_ms is not an integer.
            RangeError: If the instant has no local calendar reading
                within years 1-9999.
        """
        if isinstance(epoch_ms, bool) or not isinstance(epoch_ms, int):
            raise ValidationError(
                f"epoch_ms must be an int, got {type(epoch_ms).__name__}"
            )
        self._ms: int = epoch_ms
        self._local: _datetime.datetime = _to_local_datetime(epoch_ms)

    # Construction

    @classmethod
    def from_epoch_ms(cls, epoch_ms: int) -> Instant:
        """Create an Instant from milliseconds since the Unix epoch."""
        return cls(epoch_ms)

    @classmethod
    def from_local(
        cls,
        year: int,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> Instant:
        """Create an Instant from local wall-clock fields.

        Out-of-range fields overflow into the next larger unit instead of
        raising: month 13 is January of the following year, day 0 is the
        last day of the previous month, minute -1 is the last minute of
        the previous hour. A wall time skipped by a spring-forward
        transition resolves forward by the size of the gap, so 02:30 on the
        March change day becomes 03:30 summer time.

        Raises:
            RangeError: If the normalized date falls outside years 1-9999.

        Examples:
            >>> Instant.from_local(2024, 2, 31).to_iso_date()
            '2024-03-02'
            >>> Instant.from_local(2025, 3, 0).to_iso_date()
            '2025-02-28'
        """
        ordinal, ms_of_day = _normalize_fields(
            year, month, day, hour, minute, second, millisecond
        )
        y, m, d = ordinal_to_ymd(ordinal)
        naive = _datetime.datetime(y, m, d) + _datetime.timedelta(milliseconds=ms_of_day)
        try:
            aware = naive.astimezone()
        except (OverflowError, OSError, ValueError) as e:
            raise RangeError(f"cannot resolve local time {naive.isoformat()}: {e}") from e
        wall = aware.replace(tzinfo=None)
        if wall < naive:
            # Wall time skipped by a forward transition: move past the gap.
            aware += naive - wall
        return cls((aware - _UNIX_EPOCH) // _ONE_MS)

    @classmethod
    def from_utc(
        cls,
        year: int,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        *,
        offset_minutes: int = 0,
    ) -> Instant:
        """Create an Instant from fields read at a fixed UTC offset.

        Unlike from_local, the fields are validated strictly.

        Args:
            offset_minutes: Offset of the fields from UTC, e.g. 60 for +01:00.

        Raises:
            ValidationError: If any field is out of range.

        Examples:
            >>> Instant.from_utc(2025, 12, 4, 15, 30, offset_minutes=60).to_iso_string()
            '2025-12-04T14:30:00.000Z'
        """
        validate_date(year, month, day)
        validate_time(hour, minute, second, millisecond)
        days = ymd_to_ordinal(year, month, day) - UNIX_EPOCH_ORDINAL
        ms = (
            days * MS_PER_DAY
            + hour * MS_PER_HOUR
            + minute * MS_PER_MINUTE
            + second * MS_PER_SECOND
            + millisecond
        )
        return cls(ms - offset_minutes * MS_PER_MINUTE)

    @classmethod
    def from_datetime(cls, value: _datetime.datetime) -> Instant:
        """Create an Instant from a datetime.

        Naive datetimes are read as local wall-clock time; aware
        datetimes identify an exact instant. Sub-millisecond precision
        is truncated.
        """
        if value.tzinfo is None or value.utcoffset() is None:
            return cls.from_local(
                value.year,
                value.month,
                value.day,
                value.hour,
                value.minute,
                value.second,
                value.microsecond // 1000,
            )
        return cls((value - _UNIX_EPOCH) // _ONE_MS)

    @classmethod
    def from_date(cls, value: _datetime.date) -> Instant:
        """Create an Instant at local midnight of a calendar date."""
        return cls.from_local(value.year, value.month, value.day)

    @classmethod
    def now(cls, clock: Clock | None = None) -> Instant:
        """Return the current instant.

        Args:
            clock: Clock to read. Defaults to the process default clock.
        """
        from horae.core.clock import get_default_clock

        return (clock or get_default_clock()).now()

    # Local calendar fields

    @property
    def year(self) -> int:
        """The local year."""
        return self._local.year

    @property
    def month(self) -> int:
        """The local month (1-12)."""
        return self._local.month

    @property
    def day(self) -> int:
        """The local day of the month."""
        return self._local.day

    @property
    def hour(self) -> int:
        """The local hour (0-23)."""
        return self._local.hour

    @property
    def minute(self) -> int:
        """The local minute (0-59)."""
        return self._local.minute

    @property
    def second(self) -> int:
        """The local second (0-59)."""
        return self._local.second

    @property
    def millisecond(self) -> int:
        """The millisecond within the second (0-999)."""
        return self._local.microsecond // 1000

    @property
    def day_of_week(self) -> int:
        """The local day of the week (0=Sunday, 6=Saturday)."""
        return day_of_week(self.ordinal)

    @property
    def ordinal(self) -> int:
        """The proleptic Gregorian ordinal of the local calendar date."""
        return self._local.toordinal()

    @property
    def tz_name(self) -> str:
        """The host time zone abbreviation in effect at this instant."""
        return self._local.tzname() or ""

    @property
    def utc_offset_minutes(self) -> int:
        """The host time zone offset from UTC at this instant, in minutes."""
        offset = self._local.utcoffset()
        return int(offset.total_seconds() // 60) if offset is not None else 0

    # Derivation

    def with_fields(
        self,
        *,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        millisecond: int | None = None,
    ) -> Instant:
        """Return a new Instant with local fields replaced.

        Any field not specified keeps its current local value. Replaced
        values may overflow; see from_local.

        Examples:
            >>> i = Instant.from_local(2024, 1, 31, 10, 0)
            >>> i.with_fields(month=2).to_iso_date()
            '2024-03-02'
        """
        return Instant.from_local(
            self.year if year is None else year,
            self.month if month is None else month,
            self.day if day is None else day,
            self.hour if hour is None else hour,
            self.minute if minute is None else minute,
            self.second if second is None else second,
            self.millisecond if millisecond is None else millisecond,
        )

    # Conversion

    def to_epoch_ms(self) -> int:
        """Return milliseconds since the Unix epoch."""
        return self._ms

    def to_datetime(self) -> _datetime.datetime:
        """Return an aware datetime in the host's local time zone."""
        return self._local

    def to_utc_datetime(self) -> _datetime.datetime:
        """Return an aware datetime in UTC."""
        return _UNIX_EPOCH + _datetime.timedelta(milliseconds=self._ms)

    def to_iso_string(self) -> str:
        """Return the instant as a UTC ISO 8601 string with milliseconds.

        Examples:
            >>> Instant.from_utc(2025, 12, 4, 14, 30).to_iso_string()
            '2025-12-04T14:30:00.000Z'
        """
        utc = self.to_utc_datetime()
        return (
            f"{utc.year:04d}-{utc.month:02d}-{utc.day:02d}"
            f"T{utc.hour:02d}:{utc.minute:02d}:{utc.second:02d}"
            f".{utc.microsecond // 1000:03d}Z"
        )

    def to_iso_date(self) -> str:
        """Return the local calendar date as YYYY-MM-DD."""
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    # Comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._ms == other._ms

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._ms != other._ms

    def __lt__(self, other: Instant) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._ms < other._ms

    def __le__(self, other: Instant) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._ms <= other._ms

    def __gt__(self, other: Instant) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._ms > other._ms

    def __ge__(self, other: Instant) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._ms >= other._ms

    def __hash__(self) -> int:
        return hash(self._ms)

    def __repr__(self) -> str:
        return f"Instant({self.to_iso_string()!r})"

    def __str__(self) -> str:
        return self.to_iso_string()

    def __reduce__(self) -> tuple:
        return (Instant, (self._ms,))


def _to_local_datetime(epoch_ms: int) -> _datetime.datetime:
    """Read epoch milliseconds as an aware datetime in the local zone."""
    try:
        local = (_UNIX_EPOCH + _datetime.timedelta(milliseconds=epoch_ms)).astimezone()
    except (OverflowError, OSError, ValueError) as e:
        raise RangeError(f"epoch_ms {epoch_ms} is outside the supported range") from e
    if local.year < MIN_YEAR or local.year > MAX_YEAR:
        raise RangeError(f"epoch_ms {epoch_ms} is outside the supported range")
    return local


def _normalize_fields(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    millisecond: int,
) -> tuple[int, int]:
    """Fold overflowing wall-clock fields into (ordinal, ms_of_day)."""
    year, month = normalize_month(year, month)
    if year < MIN_YEAR - 1 or year > MAX_YEAR + 1:
        raise RangeError(f"year {year} is outside the supported range")

    ordinal = ymd_to_ordinal(year, month, 1) + day - 1
    time_ms = (
        hour * MS_PER_HOUR
        + minute * MS_PER_MINUTE
        + second * MS_PER_SECOND
        + millisecond
    )
    extra_days, ms_of_day = divmod(time_ms, MS_PER_DAY)
    ordinal += extra_days

    if ordinal < _MIN_ORDINAL or ordinal > _MAX_ORDINAL:
        raise RangeError("date is outside the supported range (years 1-9999)")
    return ordinal, ms_of_day


__all__ = ["Instant"]
