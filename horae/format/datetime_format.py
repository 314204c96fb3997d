"""Locale-aware absolute date/time formatter.

A DateTimeFormatter turns FormatOptions into an LDML pattern once, at
construction, and renders Instants against it. Pattern compilation:

    1. The requested date fields form a skeleton (E, y, M/MMM/MMMM, d)
       that is looked up in the locale's skeleton table.
    2. Field letters in the found pattern are widened to the requested
       widths (d -> dd for "2-digit", MMM -> MMMMM for "narrow", ...).
    3. Time fields are joined with ":" and given a day period (a) on a
       12-hour clock and a zone name (z) when requested.
    4. Date and time are glued with the locale's connector.

Supported pattern letters:
    y, yy          - year (2025, 25)
    M, MM          - month number (4, 04)
    MMM, MMMM      - month name (dic, diciembre)
    MMMMM          - narrow month name (D)
    d, dd          - day of month (4, 04)
    E, EEEE, EEEEE - weekday name (jue, jueves, J)
    H, HH, h, hh   - hour, 24-hour and 12-hour clock
    m, mm, s, ss   - minute, second
    S, SS, SSS     - fraction of the second
    a              - day period (AM/PM, a. m./p. m.)
    z              - time zone abbreviation (CET)
    '...'          - literal text

Examples:
    >>> f = DateTimeFormatter("es", FormatOptions(day="numeric", month="short", year="numeric"))
    >>> f.pattern
    'd MMM y'
    >>> f.format(Instant.from_local(2025, 12, 4))
    '4 dic 2025'
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from horae.errors import ValidationError
from horae.format.options import FormatOptions
from horae.locale import get_locale_data, resolve_locale

if TYPE_CHECKING:
    from horae.core.instant import Instant
    from horae.locale import CalendarNames, DateTimePatterns, Locale

# A quoted literal ('' is an escaped quote) or a run of one pattern letter
_TOKEN_PATTERN = re.compile(r"'((?:[^']|'')*)'|([A-Za-z])\2*")

_MONTH_SKELETON = {
    "numeric": "M",
    "2-digit": "M",
    "short": "MMM",
    "narrow": "MMM",
    "long": "MMMM",
}
_MONTH_TOKEN = {
    "numeric": "M",
    "2-digit": "MM",
    "short": "MMM",
    "narrow": "MMMMM",
    "long": "MMMM",
}
_WEEKDAY_TOKEN = {"short": "E", "long": "EEEE", "narrow": "EEEEE"}


@dataclass(frozen=True)
class _Part:
    """One compiled piece of a pattern: a literal or a field renderer."""

    text: str
    render: Callable[[Instant, CalendarNames], str] | None = None


def _hour12(instant: Instant) -> int:
    return instant.hour % 12 or 12


def _zone_long(instant: Instant, names: CalendarNames) -> str:
    long_name = names.zone_names_long.get(instant.tz_name)
    if long_name:
        return long_name
    offset = instant.utc_offset_minutes
    if offset == 0:
        return names.gmt_format.format("")
    sign = "-" if offset < 0 else "+"
    hours, minutes = divmod(abs(offset), 60)
    return names.gmt_format.format(f"{sign}{hours:02d}:{minutes:02d}")


_FIELD_RENDERERS: dict[str, Callable[[Instant, CalendarNames], str]] = {
    "y": lambda i, n: str(i.year),
    "yy": lambda i, n: f"{i.year % 100:02d}",
    "M": lambda i, n: str(i.month),
    "MM": lambda i, n: f"{i.month:02d}",
    "MMM": lambda i, n: n.months_abbreviated[i.month - 1],
    "MMMM": lambda i, n: n.months_wide[i.month - 1],
    "MMMMM": lambda i, n: n.months_narrow[i.month - 1],
    "d": lambda i, n: str(i.day),
    "dd": lambda i, n: f"{i.day:02d}",
    "E": lambda i, n: n.days_abbreviated[i.day_of_week],
    "EEEE": lambda i, n: n.days_wide[i.day_of_week],
    "EEEEE": lambda i, n: n.days_narrow[i.day_of_week],
    "H": lambda i, n: str(i.hour),
    "HH": lambda i, n: f"{i.hour:02d}",
    "h": lambda i, n: str(_hour12(i)),
    "hh": lambda i, n: f"{_hour12(i):02d}",
    "m": lambda i, n: str(i.minute),
    "mm": lambda i, n: f"{i.minute:02d}",
    "s": lambda i, n: str(i.second),
    "ss": lambda i, n: f"{i.second:02d}",
    "S": lambda i, n: f"{i.millisecond:03d}"[:1],
    "SS": lambda i, n: f"{i.millisecond:03d}"[:2],
    "SSS": lambda i, n: f"{i.millisecond:03d}",
    "a": lambda i, n: n.am if i.hour < 12 else n.pm,
    "z": lambda i, n: i.tz_name,
    "zzzz": _zone_long,
}


def tokenize(pattern: str) -> list[_Part]:
    """Split an LDML pattern into literal and field parts.

    Raises:
        ValidationError: If the pattern uses an unsupported field.

    Examples:
        >>> [p.text for p in tokenize("d 'de' MMMM")]
        ['d', ' ', 'de', ' ', 'MMMM']
    """
    parts: list[_Part] = []
    pos = 0
    for match in _TOKEN_PATTERN.finditer(pattern):
        if match.start() > pos:
            parts.append(_Part(pattern[pos : match.start()]))
        if match.group(2) is None:
            parts.append(_Part(match.group(1).replace("''", "'") or "'"))
        else:
            token = match.group(0)
            render = _FIELD_RENDERERS.get(token)
            if render is None:
                raise ValidationError(f"unsupported pattern field: {token!r}")
            parts.append(_Part(token, render))
        pos = match.end()
    if pos < len(pattern):
        parts.append(_Part(pattern[pos:]))
    return parts


def _date_pattern(options: FormatOptions, patterns: DateTimePatterns) -> str:
    """Pick the locale pattern for the requested date fields and widen it."""
    widths = {
        "E": _WEEKDAY_TOKEN.get(options.weekday or ""),
        "y": {"numeric": "y", "2-digit": "yy"}.get(options.year or ""),
        "M": _MONTH_TOKEN.get(options.month or ""),
        "d": {"numeric": "d", "2-digit": "dd"}.get(options.day or ""),
    }
    skeleton = "".join(
        [
            "E" if widths["E"] else "",
            "y" if widths["y"] else "",
            _MONTH_SKELETON.get(options.month or "", ""),
            "d" if widths["d"] else "",
        ]
    )
    if not skeleton:
        return ""

    base = patterns.date_skeletons.get(skeleton)
    if base is None:
        # No locale pattern for this combination: weekday, day, month, year
        order = (widths["E"], widths["d"], widths["M"], widths["y"])
        return " ".join(token for token in order if token)

    out = []
    pos = 0
    for match in _TOKEN_PATTERN.finditer(base):
        out.append(base[pos : match.start()])
        if match.group(2) is None:
            out.append(match.group(0))
        else:
            out.append(widths.get(match.group(2)) or match.group(0))
        pos = match.end()
    out.append(base[pos:])
    return "".join(out)


def _time_pattern(options: FormatOptions, patterns: DateTimePatterns) -> str:
    """Build the time pattern for the requested time fields."""
    use_12h = options.hour12 if options.hour12 is not None else patterns.hour12
    pieces: list[str] = []
    if options.hour:
        symbol = "h" if use_12h else "H"
        pieces.append(symbol * (2 if options.hour == "2-digit" else 1))
    if options.minute:
        pieces.append("mm" if pieces or options.minute == "2-digit" else "m")
    if options.second:
        pieces.append("ss" if pieces or options.second == "2-digit" else "s")

    pattern = ":".join(pieces)
    if options.fractional_second_digits:
        fraction = "S" * options.fractional_second_digits
        pattern = f"{pattern}.{fraction}" if pattern else fraction
    if options.hour and use_12h:
        pattern += " a"
    if options.time_zone_name:
        zone = "zzzz" if options.time_zone_name == "long" else "z"
        pattern = f"{pattern} {zone}" if pattern else zone
    return pattern


def compile_pattern(options: FormatOptions, patterns: DateTimePatterns) -> str:
    """Compile FormatOptions into an LDML pattern for a locale.

    Examples:
        >>> from horae.locale import get_locale_data
        >>> en = get_locale_data("en").patterns
        >>> compile_pattern(FormatOptions(month="long", day="numeric", year="numeric",
        ...                               hour="2-digit", minute="2-digit"), en)
        "MMMM d, y 'at' hh:mm a"
    """
    options = options.with_defaults()
    date = _date_pattern(options, patterns)
    time = _time_pattern(options, patterns)
    if date and time:
        glue = (
            patterns.datetime_glue_wide
            if options.month == "long"
            else patterns.datetime_glue
        )
        return glue.format(date, time)
    return date or time


class DateTimeFormatter:
    """Formats Instants for one locale and one set of FormatOptions.

    Formatters are immutable after construction and safe to share
    between threads; obtain them through get_formatter() to reuse
    compiled patterns.

    Attributes:
        locale: The resolved Locale.
        options: The field selections.
        pattern: The compiled LDML pattern.
    """

    def __init__(
        self,
        locale: Locale | str | None = None,
        options: FormatOptions | None = None,
    ) -> None:
        self.locale = resolve_locale(locale)
        self.options = options if options is not None else FormatOptions()
        data = get_locale_data(self.locale)
        self._names = data.calendar
        self.pattern = compile_pattern(self.options, data.patterns)
        self._parts = tokenize(self.pattern)

    def format(self, instant: Instant) -> str:
        """Render instant in the host's local time zone."""
        names = self._names
        return "".join(
            part.render(instant, names) if part.render is not None else part.text
            for part in self._parts
        )

    def __repr__(self) -> str:
        return f"DateTimeFormatter({self.locale.value!r}, pattern={self.pattern!r})"


__all__ = [
    "DateTimeFormatter",
    "compile_pattern",
    "tokenize",
]
