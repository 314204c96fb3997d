"""Locale data tables for formatting.

CLDR-derived calendar names, date skeleton patterns, number symbols and
relative-time phrases for each supported locale. Patterns use the LDML
field letters (y, M, d, E, H, h, m, s, S, a, z); text inside single
quotes is literal.

Internal module - use get_locale_data() from horae.locale instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from horae.units.relative import RelativeTimeStyle, RelativeTimeUnit

# ==============================================================================
# Calendar names
# ==============================================================================


@dataclass(frozen=True)
class CalendarNames:
    """Month, weekday and day-period names.

    Weekday lists are indexed with 0=Sunday.
    Zones without a long name render in gmt_format, e.g. "GMT+03:00".
    """

    months_wide: tuple[str, ...]
    months_abbreviated: tuple[str, ...]
    months_narrow: tuple[str, ...]
    days_wide: tuple[str, ...]
    days_abbreviated: tuple[str, ...]
    days_narrow: tuple[str, ...]
    am: str
    pm: str
    zone_names_long: Mapping[str, str]
    gmt_format: str = "GMT{0}"


# ==============================================================================
# Date/time patterns
# ==============================================================================


@dataclass(frozen=True)
class DateTimePatterns:
    """Skeleton-to-pattern tables for one locale.

    A skeleton lists the requested date fields in canonical order: E
    (weekday), y (year), M/MMM/MMMM (numeric, abbreviated or wide month),
    d (day). Field widths are applied after lookup, so "yMd" serves both
    4/12/2025 and 04/12/2025.

    Attributes:
        date_skeletons: Skeleton -> pattern.
        hour12: Whether the locale uses a 12-hour clock by default.
        datetime_glue: Joins date and time, as "{0}" (date) and "{1}" (time).
        datetime_glue_wide: Glue used when the month is spelled out in full.
    """

    date_skeletons: Mapping[str, str]
    hour12: bool
    datetime_glue: str = "{0}, {1}"
    datetime_glue_wide: str = "{0}, {1}"


# ==============================================================================
# Numbers
# ==============================================================================


@dataclass(frozen=True)
class NumberSymbols:
    """Digit grouping for rendered quantities.

    Attributes:
        group: Thousands separator.
        min_grouping_digits: Grouping starts at 3 + this many digits.
    """

    group: str = ","
    min_grouping_digits: int = 1


# ==============================================================================
# Relative time
# ==============================================================================


@dataclass(frozen=True)
class UnitNames:
    """Plural forms of a quantity such as "{0} day" / "{0} days"."""

    one: str
    other: str

    def select(self, count: int) -> str:
        return self.one if abs(count) == 1 else self.other


@dataclass(frozen=True)
class RelativeTimeData:
    """Relative-time phrases for one locale.

    A relative phrase is built from a quantity ("3 days", from units)
    wrapped in a connector ("in {0}" or "{0} ago").

    Attributes:
        units: Style -> unit -> quantity forms.
        future: Connector for positive offsets.
        past: Connector for negative offsets.
        phrases: Style -> (unit, offset) -> fixed phrase, used when
            numeric is "auto" ("yesterday", "next week").
    """

    units: Mapping[RelativeTimeStyle, Mapping[RelativeTimeUnit, UnitNames]]
    future: str
    past: str
    phrases: Mapping[RelativeTimeStyle, Mapping[tuple[RelativeTimeUnit, int], str]]


# ==============================================================================
# Display words
# ==============================================================================


@dataclass(frozen=True)
class DisplayMessages:
    """Words used by the display helpers."""

    today: str
    yesterday: str
    ended: str
    coming_soon: str
    less_than_a_second: str


@dataclass(frozen=True)
class LocaleData:
    """Everything the formatters need for one locale."""

    code: str
    calendar: CalendarNames
    patterns: DateTimePatterns
    numbers: NumberSymbols
    relative: RelativeTimeData
    messages: DisplayMessages


_Y = RelativeTimeUnit.YEAR
_MO = RelativeTimeUnit.MONTH
_W = RelativeTimeUnit.WEEK
_D = RelativeTimeUnit.DAY
_H = RelativeTimeUnit.HOUR
_MI = RelativeTimeUnit.MINUTE
_S = RelativeTimeUnit.SECOND

_LONG = RelativeTimeStyle.LONG
_SHORT = RelativeTimeStyle.SHORT
_NARROW = RelativeTimeStyle.NARROW


# ==============================================================================
# English
# ==============================================================================

_EN_SHORT_UNITS = {
    _Y: UnitNames("{0} yr.", "{0} yr."),
    _MO: UnitNames("{0} mo.", "{0} mo."),
    _W: UnitNames("{0} wk.", "{0} wk."),
    _D: UnitNames("{0} day", "{0} days"),
    _H: UnitNames("{0} hr.", "{0} hr."),
    _MI: UnitNames("{0} min.", "{0} min."),
    _S: UnitNames("{0} sec.", "{0} sec."),
}

_EN_SHORT_PHRASES = {
    (_Y, -1): "last yr.",
    (_Y, 0): "this yr.",
    (_Y, 1): "next yr.",
    (_MO, -1): "last mo.",
    (_MO, 0): "this mo.",
    (_MO, 1): "next mo.",
    (_W, -1): "last wk.",
    (_W, 0): "this wk.",
    (_W, 1): "next wk.",
    (_D, -1): "yesterday",
    (_D, 0): "today",
    (_D, 1): "tomorrow",
    (_H, 0): "this hour",
    (_MI, 0): "this minute",
    (_S, 0): "now",
}

EN = LocaleData(
    code="en",
    calendar=CalendarNames(
        months_wide=(
            "January", "February", "March", "April", "May", "June",
            "July", "August", "September", "October", "November", "December",
        ),
        months_abbreviated=(
            "Jan", "Feb", "Mar", "Apr", "May", "Jun",
            "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
        ),
        months_narrow=("J", "F", "M", "A", "M", "J", "J", "A", "S", "O", "N", "D"),
        days_wide=(
            "Sunday", "Monday", "Tuesday", "Wednesday",
            "Thursday", "Friday", "Saturday",
        ),
        days_abbreviated=("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"),
        days_narrow=("S", "M", "T", "W", "T", "F", "S"),
        am="AM",
        pm="PM",
        zone_names_long={
            "CET": "Central European Standard Time",
            "CEST": "Central European Summer Time",
            "WET": "Western European Standard Time",
            "WEST": "Western European Summer Time",
            "EET": "Eastern European Standard Time",
            "EEST": "Eastern European Summer Time",
            "GMT": "Greenwich Mean Time",
            "UTC": "Coordinated Universal Time",
        },
    ),
    patterns=DateTimePatterns(
        date_skeletons={
            "y": "y",
            "M": "M",
            "d": "d",
            "E": "E",
            "yM": "M/y",
            "Md": "M/d",
            "yMd": "M/d/y",
            "yMMM": "MMM y",
            "yMMMM": "MMMM y",
            "MMM": "MMM",
            "MMMM": "MMMM",
            "MMMd": "MMM d",
            "MMMMd": "MMMM d",
            "yMMMd": "MMM d, y",
            "yMMMMd": "MMMM d, y",
            "Ed": "d E",
            "EMd": "E, M/d",
            "EyMd": "E, M/d/y",
            "EyM": "E, M/y",
            "EMMM": "E, MMM",
            "EMMMM": "E, MMMM",
            "EyMMM": "E, MMM y",
            "EyMMMM": "E, MMMM y",
            "EMMMd": "E, MMM d",
            "EMMMMd": "E, MMMM d",
            "EyMMMd": "E, MMM d, y",
            "EyMMMMd": "E, MMMM d, y",
        },
        hour12=True,
        datetime_glue="{0}, {1}",
        datetime_glue_wide="{0} 'at' {1}",
    ),
    numbers=NumberSymbols(group=",", min_grouping_digits=1),
    relative=RelativeTimeData(
        units={
            _LONG: {
                _Y: UnitNames("{0} year", "{0} years"),
                _MO: UnitNames("{0} month", "{0} months"),
                _W: UnitNames("{0} week", "{0} weeks"),
                _D: UnitNames("{0} day", "{0} days"),
                _H: UnitNames("{0} hour", "{0} hours"),
                _MI: UnitNames("{0} minute", "{0} minutes"),
                _S: UnitNames("{0} second", "{0} seconds"),
            },
            _SHORT: _EN_SHORT_UNITS,
            _NARROW: {
                _Y: UnitNames("{0}y", "{0}y"),
                _MO: UnitNames("{0}mo", "{0}mo"),
                _W: UnitNames("{0}w", "{0}w"),
                _D: UnitNames("{0}d", "{0}d"),
                _H: UnitNames("{0}h", "{0}h"),
                _MI: UnitNames("{0}m", "{0}m"),
                _S: UnitNames("{0}s", "{0}s"),
            },
        },
        future="in {0}",
        past="{0} ago",
        phrases={
            _LONG: {
                (_Y, -1): "last year",
                (_Y, 0): "this year",
                (_Y, 1): "next year",
                (_MO, -1): "last month",
                (_MO, 0): "this month",
                (_MO, 1): "next month",
                (_W, -1): "last week",
                (_W, 0): "this week",
                (_W, 1): "next week",
                (_D, -1): "yesterday",
                (_D, 0): "today",
                (_D, 1): "tomorrow",
                (_H, 0): "this hour",
                (_MI, 0): "this minute",
                (_S, 0): "now",
            },
            _SHORT: _EN_SHORT_PHRASES,
            _NARROW: _EN_SHORT_PHRASES,
        },
    ),
    messages=DisplayMessages(
        today="Today",
        yesterday="Yesterday",
        ended="Ended",
        coming_soon="Coming soon",
        less_than_a_second="less than a second",
    ),
)


# ==============================================================================
# Spanish
# ==============================================================================

_ES_SHORT_UNITS = {
    _Y: UnitNames("{0} a", "{0} a"),
    _MO: UnitNames("{0} m.", "{0} m."),
    _W: UnitNames("{0} sem.", "{0} sem."),
    _D: UnitNames("{0} d", "{0} d"),
    _H: UnitNames("{0} h", "{0} h"),
    _MI: UnitNames("{0} min", "{0} min"),
    _S: UnitNames("{0} s", "{0} s"),
}

_ES_SHORT_PHRASES = {
    (_Y, -1): "el a. pasado",
    (_Y, 0): "este a.",
    (_Y, 1): "el próximo a.",
    (_MO, -1): "el m. pasado",
    (_MO, 0): "este m.",
    (_MO, 1): "el próximo m.",
    (_W, -1): "la sem. pasada",
    (_W, 0): "esta sem.",
    (_W, 1): "la próxima sem.",
    (_D, -2): "anteayer",
    (_D, -1): "ayer",
    (_D, 0): "hoy",
    (_D, 1): "mañana",
    (_D, 2): "pasado mañana",
    (_H, 0): "esta hora",
    (_MI, 0): "este minuto",
    (_S, 0): "ahora",
}

ES = LocaleData(
    code="es",
    calendar=CalendarNames(
        months_wide=(
            "enero", "febrero", "marzo", "abril", "mayo", "junio",
            "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
        ),
        months_abbreviated=(
            "ene", "feb", "mar", "abr", "may", "jun",
            "jul", "ago", "sept", "oct", "nov", "dic",
        ),
        months_narrow=("E", "F", "M", "A", "M", "J", "J", "A", "S", "O", "N", "D"),
        days_wide=(
            "domingo", "lunes", "martes", "miércoles",
            "jueves", "viernes", "sábado",
        ),
        days_abbreviated=("dom", "lun", "mar", "mié", "jue", "vie", "sáb"),
        days_narrow=("D", "L", "M", "X", "J", "V", "S"),
        am="a. m.",
        pm="p. m.",
        zone_names_long={
            "CET": "hora estándar de Europa central",
            "CEST": "hora de verano de Europa central",
            "WET": "hora estándar de Europa occidental",
            "WEST": "hora de verano de Europa occidental",
            "EET": "hora estándar de Europa oriental",
            "EEST": "hora de verano de Europa oriental",
            "GMT": "hora del meridiano de Greenwich",
            "UTC": "tiempo universal coordinado",
        },
    ),
    patterns=DateTimePatterns(
        date_skeletons={
            "y": "y",
            "M": "M",
            "d": "d",
            "E": "E",
            "yM": "M/y",
            "Md": "d/M",
            "yMd": "d/M/y",
            "yMMM": "MMM y",
            "yMMMM": "MMMM 'de' y",
            "MMM": "MMM",
            "MMMM": "MMMM",
            "MMMd": "d MMM",
            "MMMMd": "d 'de' MMMM",
            "yMMMd": "d MMM y",
            "yMMMMd": "d 'de' MMMM 'de' y",
            "Ed": "E d",
            "EMd": "E, d/M",
            "EyMd": "E, d/M/y",
            "EyM": "E, M/y",
            "EMMM": "E, MMM",
            "EMMMM": "E, MMMM",
            "EyMMM": "E, MMM y",
            "EyMMMM": "E, MMMM 'de' y",
            "EMMMd": "E, d MMM",
            "EMMMMd": "E, d 'de' MMMM",
            "EyMMMd": "E, d MMM y",
            "EyMMMMd": "E, d 'de' MMMM 'de' y",
        },
        hour12=False,
    ),
    numbers=NumberSymbols(group=".", min_grouping_digits=2),
    relative=RelativeTimeData(
        units={
            _LONG: {
                _Y: UnitNames("{0} año", "{0} años"),
                _MO: UnitNames("{0} mes", "{0} meses"),
                _W: UnitNames("{0} semana", "{0} semanas"),
                _D: UnitNames("{0} día", "{0} días"),
                _H: UnitNames("{0} hora", "{0} horas"),
                _MI: UnitNames("{0} minuto", "{0} minutos"),
                _S: UnitNames("{0} segundo", "{0} segundos"),
            },
            _SHORT: _ES_SHORT_UNITS,
            _NARROW: _ES_SHORT_UNITS,
        },
        future="dentro de {0}",
        past="hace {0}",
        phrases={
            _LONG: {
                (_Y, -1): "el año pasado",
                (_Y, 0): "este año",
                (_Y, 1): "el próximo año",
                (_MO, -1): "el mes pasado",
                (_MO, 0): "este mes",
                (_MO, 1): "el próximo mes",
                (_W, -1): "la semana pasada",
                (_W, 0): "esta semana",
                (_W, 1): "la próxima semana",
                (_D, -2): "anteayer",
                (_D, -1): "ayer",
                (_D, 0): "hoy",
                (_D, 1): "mañana",
                (_D, 2): "pasado mañana",
                (_H, 0): "esta hora",
                (_MI, 0): "este minuto",
                (_S, 0): "ahora",
            },
            _SHORT: _ES_SHORT_PHRASES,
            _NARROW: _ES_SHORT_PHRASES,
        },
    ),
    messages=DisplayMessages(
        today="Hoy",
        yesterday="Ayer",
        ended="Finalizado",
        coming_soon="Próximamente",
        less_than_a_second="menos de un segundo",
    ),
)


LOCALE_DATA: dict[str, LocaleData] = {
    "es": ES,
    "en": EN,
}


__all__ = [
    "CalendarNames",
    "DateTimePatterns",
    "NumberSymbols",
    "UnitNames",
    "RelativeTimeData",
    "DisplayMessages",
    "LocaleData",
    "LOCALE_DATA",
]
