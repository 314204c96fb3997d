"""Known format templates for parsing date/time text.

Each template pairs a regex with an extractor that turns the match into
calendar components. Patterns use named groups (year, month, month_name,
day, hour, minute, second, fraction, meridiem, zone, weekday) so most
templates share the same extractor.

Internal module - use to_date() from horae.parse instead.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Pattern

Components = dict[str, "int | None"]


class FormatKind(Enum):
    """Classification of format type."""

    DATE = "date"
    DATETIME = "datetime"


# Month name mappings, English and Spanish, full and abbreviated
MONTH_NAMES = {
    "january": 1,
    "february": 2,
    "march": 3,
    "april": 4,
    "may": 5,
    "june": 6,
    "july": 7,
    "august": 8,
    "september": 9,
    "october": 10,
    "november": 11,
    "december": 12,
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "sept": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
    "enero": 1,
    "febrero": 2,
    "marzo": 3,
    "abril": 4,
    "mayo": 5,
    "junio": 6,
    "julio": 7,
    "agosto": 8,
    "septiembre": 9,
    "setiembre": 9,
    "octubre": 10,
    "noviembre": 11,
    "diciembre": 12,
    "ene": 1,
    "abr": 4,
    "ago": 8,
    "set": 9,
    "dic": 12,
}

WEEKDAY_NAMES = frozenset(
    {
        "sunday",
        "monday",
        "tuesday",
        "wednesday",
        "thursday",
        "friday",
        "saturday",
        "sun",
        "mon",
        "tue",
        "tues",
        "wed",
        "thu",
        "thur",
        "thurs",
        "fri",
        "sat",
        "domingo",
        "lunes",
        "martes",
        "miércoles",
        "miercoles",
        "jueves",
        "viernes",
        "sábado",
        "sabado",
        "dom",
        "lun",
        "mié",
        "mie",
        "jue",
        "vie",
        "sáb",
    }
)


@dataclass(frozen=True)
class FormatTemplate:
    """A format template for matching date/time strings.

    Attributes:
        name: Human-readable name for the format.
        kind: Whether this is a date or datetime format.
        pattern: Compiled regex pattern for matching.
        extractor: Function to extract components from a regex match.
    """

    name: str
    kind: FormatKind
    pattern: Pattern[str]
    extractor: Callable[[re.Match[str]], Components]


def _month_to_int(month_str: str) -> int | None:
    """Convert month name to integer (1-12)."""
    return MONTH_NAMES.get(month_str.lower().rstrip("."))


def _zone_to_offset(zone: str) -> int:
    """Convert Z, GMT, +01:00, +0100 or +01 to minutes east of UTC."""
    if zone.upper() in ("Z", "GMT", "UT", "UTC"):
        return 0
    sign = -1 if zone[0] == "-" else 1
    digits = zone[1:].replace(":", "")
    hours = int(digits[:2])
    minutes = int(digits[2:4]) if len(digits) > 2 else 0
    if hours > 23 or minutes > 59:
        raise ValueError(f"invalid UTC offset: {zone}")
    return sign * (hours * 60 + minutes)


def extract_components(match: re.Match[str]) -> Components:
    """Extract calendar components from a match with named groups.

    Missing date groups default to 1, missing time groups to 0. The
    returned offset_minutes is None when the text carried no zone, which
    means the fields are local wall-clock time.

    Raises:
        ValueError: If a month or weekday name is unknown, or a 12-hour
            clock reading is out of range.
    """
    groups = match.groupdict()

    weekday = groups.get("weekday")
    if weekday and weekday.lower().rstrip(".") not in WEEKDAY_NAMES:
        raise ValueError(f"unknown weekday name: {weekday}")

    if groups.get("month_name"):
        month = _month_to_int(groups["month_name"])
        if month is None:
            raise ValueError(f"unknown month name: {groups['month_name']}")
    else:
        month = int(groups["month"]) if groups.get("month") else 1

    hour = int(groups["hour"]) if groups.get("hour") else 0
    meridiem = groups.get("meridiem")
    if meridiem:
        if not 1 <= hour <= 12:
            raise ValueError(f"hour {hour} is not valid on a 12-hour clock")
        # Convert to 24-hour
        if meridiem.upper() == "A":
            if hour == 12:
                hour = 0
        else:  # PM
            if hour != 12:
                hour += 12

    fraction = groups.get("fraction")
    zone = groups.get("zone")

    return {
        "year": int(groups["year"]),
        "month": month,
        "day": int(groups["day"]) if groups.get("day") else 1,
        "hour": hour,
        "minute": int(groups["minute"]) if groups.get("minute") else 0,
        "second": int(groups["second"]) if groups.get("second") else 0,
        "millisecond": int(fraction.ljust(3, "0")[:3]) if fraction else 0,
        "offset_minutes": _zone_to_offset(zone) if zone else None,
    }


# Shared fragments
_TIME = (
    r"(?P<hour>\d{1,2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:[.,](?P<fraction>\d{1,9}))?)?"
    r"(?:\s*(?P<meridiem>[AaPp])\.?\s?[Mm]\.?)?"
)
_ZONE = r"(?:\s*(?P<zone>[Zz]|GMT|UTC|UT|[+-]\d{2}(?::?\d{2})?))?"
_WORD = r"[^\W\d_]+\.?"
_WEEKDAY = rf"(?:(?P<weekday>{_WORD}),?\s+)?"

# ISO 8601 DateTime: YYYY-MM-DDTHH:MM[:SS[.fff]] with optional zone
_ISO_DATETIME_PATTERN = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})[Tt ]"
    r"(?P<hour>\d{2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:[.,](?P<fraction>\d{1,9}))?)?"
    r"(?P<zone>[Zz]|[+-]\d{2}(?::?\d{2})?)?$",
    re.ASCII,
)

# ISO 8601 Date: YYYY-MM-DD, YYYY-MM, YYYY
_ISO_DATE_PATTERN = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})$",
    re.ASCII,
)
_ISO_YEAR_MONTH_PATTERN = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{2})$",
    re.ASCII,
)
_ISO_YEAR_PATTERN = re.compile(
    r"^(?P<year>\d{4})$",
    re.ASCII,
)

# RFC 2822: Thu, 04 Dec 2025 14:30:00 GMT
_RFC2822_PATTERN = re.compile(
    r"^(?:(?P<weekday>[A-Za-z]{3}),\s*)?"
    r"(?P<day>\d{1,2})\s+(?P<month_name>[A-Za-z]{3})\s+(?P<year>\d{4})\s+"
    r"(?P<hour>\d{2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?"
    r"\s+(?P<zone>GMT|UTC|UT|Z|[+-]\d{4})$",
)

# Slash-separated date with year first: YYYY/MM/DD [time]
_SLASH_YMD_PATTERN = re.compile(
    r"^(?P<year>\d{4})/(?P<month>\d{1,2})/(?P<day>\d{1,2})"
    rf"(?:[Tt\s]+{_TIME}{_ZONE})?$",
)

# Slash-separated date with year last: MM/DD/YYYY [time]
_SLASH_MDY_PATTERN = re.compile(
    r"^(?P<month>\d{1,2})/(?P<day>\d{1,2})/(?P<year>\d{4})"
    rf"(?:,?\s+{_TIME}{_ZONE})?$",
)

# Named month: Dec 4, 2025 or Thursday, December 4, 2025 2:30 PM
_NAMED_MONTH_MDY_PATTERN = re.compile(
    rf"^{_WEEKDAY}(?P<month_name>{_WORD})\s+(?P<day>\d{{1,2}})(?:st|nd|rd|th)?"
    rf",?\s+(?P<year>\d{{4}})(?:,?\s+(?:at\s+)?{_TIME}{_ZONE})?$",
    re.IGNORECASE,
)

# Named month: 4 Dec 2025, 4 dic 2025 or 4 de diciembre de 2025, 14:30
_NAMED_MONTH_DMY_PATTERN = re.compile(
    rf"^{_WEEKDAY}(?P<day>\d{{1,2}})\s+(?:de\s+)?(?P<month_name>{_WORD}),?"
    rf"\s+(?:de\s+|del\s+)?(?P<year>\d{{4}})"
    rf"(?:,?\s+(?:a\s+las\s+)?{_TIME}{_ZONE})?$",
    re.IGNORECASE,
)


# Templates list - ordered by specificity (most specific first)
TEMPLATES = [
    FormatTemplate(
        name="iso_datetime",
        kind=FormatKind.DATETIME,
        pattern=_ISO_DATETIME_PATTERN,
        extractor=extract_components,
    ),
    FormatTemplate(
        name="iso_date",
        kind=FormatKind.DATE,
        pattern=_ISO_DATE_PATTERN,
        extractor=extract_components,
    ),
    FormatTemplate(
        name="iso_year_month",
        kind=FormatKind.DATE,
        pattern=_ISO_YEAR_MONTH_PATTERN,
        extractor=extract_components,
    ),
    FormatTemplate(
        name="iso_year",
        kind=FormatKind.DATE,
        pattern=_ISO_YEAR_PATTERN,
        extractor=extract_components,
    ),
    FormatTemplate(
        name="rfc2822",
        kind=FormatKind.DATETIME,
        pattern=_RFC2822_PATTERN,
        extractor=extract_components,
    ),
    FormatTemplate(
        name="slash_ymd",
        kind=FormatKind.DATE,
        pattern=_SLASH_YMD_PATTERN,
        extractor=extract_components,
    ),
    FormatTemplate(
        name="slash_mdy",
        kind=FormatKind.DATE,
        pattern=_SLASH_MDY_PATTERN,
        extractor=extract_components,
    ),
    FormatTemplate(
        name="named_month_mdy",
        kind=FormatKind.DATE,
        pattern=_NAMED_MONTH_MDY_PATTERN,
        extractor=extract_components,
    ),
    FormatTemplate(
        name="named_month_dmy",
        kind=FormatKind.DATE,
        pattern=_NAMED_MONTH_DMY_PATTERN,
        extractor=extract_components,
    ),
]


__all__ = [
    "Components",
    "FormatKind",
    "FormatTemplate",
    "TEMPLATES",
    "MONTH_NAMES",
    "WEEKDAY_NAMES",
    "extract_components",
]
