"""Preset-driven formatting of date inputs.

Functions:
    format_date: Date part with a DateFormatPreset (short .. full, iso).
    format_time: Time part with a TimeFormatPreset (short .. long).
    format_datetime: Both parts with a DateTimeFormatPreset (short .. full, iso).
    format_custom: Arbitrary FormatOptions.
    format_for_display: "Hoy", "Ayer", "28 nov" or "4 dic 2024".
    format_event_time: format_for_display plus the short time.
    format_range: Compact "4 - 10 dic 2025" style ranges.

Every function returns "" when its input is not a date, and raises
ValidationError for an unknown preset or option value.

Reference renderings of 2025-12-04 14:30 (CET):

    preset  es                                 en
    short   04/12/2025                         12/04/2025
    medium  4 dic 2025                         Dec 4, 2025
    long    4 de diciembre de 2025             December 4, 2025
    full    jueves, 4 de diciembre de 2025     Thursday, December 4, 2025
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from horae._internal.cache import get_formatter_cache
from horae.core.clock import resolve_clock
from horae.format.datetime_format import DateTimeFormatter
from horae.format.options import FormatOptions
from horae.locale import get_locale_data, resolve_locale
from horae.parse import to_date
from horae.units.presets import (
    DateFormatPreset,
    DateTimeFormatPreset,
    TimeFormatPreset,
    parse_enum,
)

if TYPE_CHECKING:
    from horae.core.clock import Clock
    from horae.locale import Locale
    from horae.parse import DateInput


DATE_PRESETS: dict[DateFormatPreset, FormatOptions] = {
    DateFormatPreset.SHORT: FormatOptions(day="2-digit", month="2-digit", year="numeric"),
    DateFormatPreset.MEDIUM: FormatOptions(day="numeric", month="short", year="numeric"),
    DateFormatPreset.LONG: FormatOptions(day="numeric", month="long", year="numeric"),
    DateFormatPreset.FULL: FormatOptions(
        weekday="long", day="numeric", month="long", year="numeric"
    ),
}

TIME_PRESETS: dict[TimeFormatPreset, FormatOptions] = {
    TimeFormatPreset.SHORT: FormatOptions(hour="2-digit", minute="2-digit"),
    TimeFormatPreset.MEDIUM: FormatOptions(hour="2-digit", minute="2-digit", second="2-digit"),
    TimeFormatPreset.LONG: FormatOptions(
        hour="2-digit", minute="2-digit", second="2-digit", time_zone_name="short"
    ),
}

DATETIME_PRESETS: dict[DateTimeFormatPreset, FormatOptions] = {
    DateTimeFormatPreset.SHORT: DATE_PRESETS[DateFormatPreset.SHORT].merged(
        TIME_PRESETS[TimeFormatPreset.SHORT]
    ),
    DateTimeFormatPreset.MEDIUM: DATE_PRESETS[DateFormatPreset.MEDIUM].merged(
        TIME_PRESETS[TimeFormatPreset.SHORT]
    ),
    DateTimeFormatPreset.LONG: DATE_PRESETS[DateFormatPreset.LONG].merged(
        TIME_PRESETS[TimeFormatPreset.MEDIUM]
    ),
    DateTimeFormatPreset.FULL: DATE_PRESETS[DateFormatPreset.FULL].merged(
        TIME_PRESETS[TimeFormatPreset.LONG]
    ),
}

_DAY_MONTH = FormatOptions(day="numeric", month="short")


def get_formatter(
    locale: Locale | str | None = None,
    options: FormatOptions | None = None,
) -> DateTimeFormatter:
    """Return a shared DateTimeFormatter for locale and options.

    Formatters are cached process-wide under "<locale>-<options>", so
    repeated calls with equal arguments return the same instance.
    """
    resolved = resolve_locale(locale)
    options = options if options is not None else FormatOptions()
    key = f"{resolved.value}-{options.cache_key()}"
    return get_formatter_cache().get_or_create(
        key, lambda: DateTimeFormatter(resolved, options)
    )


def format_date(
    value: DateInput | None,
    preset: DateFormatPreset | str = DateFormatPreset.MEDIUM,
    locale: Locale | str | None = None,
) -> str:
    """Format the date part of value.

    The "iso" preset renders the local calendar date as YYYY-MM-DD.

    Examples:
        >>> format_date("2025-12-04")
        '4 dic 2025'
        >>> format_date("2025-12-04", "short", "en")
        '12/04/2025'
        >>> format_date("2025-12-04", "iso")
        '2025-12-04'
    """
    preset = parse_enum(DateFormatPreset, preset, "date format preset")
    instant = to_date(value)
    if instant is None:
        return ""
    if preset is DateFormatPreset.ISO:
        return instant.to_iso_date()
    return get_formatter(locale, DATE_PRESETS[preset]).format(instant)


def format_time(
    value: DateInput | None,
    preset: TimeFormatPreset | str = TimeFormatPreset.SHORT,
    locale: Locale | str | None = None,
) -> str:
    """Format the time part of value.

    Examples:
        >>> format_time("2025-12-04T14:30:00")
        '14:30'
        >>> format_time("2025-12-04T14:30:00", "medium", "en")
        '02:30:00 PM'
    """
    preset = parse_enum(TimeFormatPreset, preset, "time format preset")
    instant = to_date(value)
    if instant is None:
        return ""
    return get_formatter(locale, TIME_PRESETS[preset]).format(instant)


def format_datetime(
    value: DateInput | None,
    preset: DateTimeFormatPreset | str = DateTimeFormatPreset.MEDIUM,
    locale: Locale | str | None = None,
) -> str:
    """Format the date and time of value.

    The "iso" preset renders the UTC instant as YYYY-MM-DDTHH:MM:SS.sssZ.

    Examples:
        >>> format_datetime("2025-12-04T14:30:00")
        '4 dic 2025, 14:30'
        >>> format_datetime("2025-12-04T14:30:00Z", "iso")
        '2025-12-04T14:30:00.000Z'
    """
    preset = parse_enum(DateTimeFormatPreset, preset, "datetime format preset")
    instant = to_date(value)
    if instant is None:
        return ""
    if preset is DateTimeFormatPreset.ISO:
        return instant.to_iso_string()
    return get_formatter(locale, DATETIME_PRESETS[preset]).format(instant)


def format_custom(
    value: DateInput | None,
    options: FormatOptions | Mapping[str, Any] | None = None,
    /,
    *,
    locale: Locale | str | None = None,
    **fields: Any,
) -> str:
    """Format value with arbitrary field selections.

    Args:
        value: The date to format.
        options: FormatOptions, or a mapping of option names to values
            (a "locale" key in the mapping is honored).
        locale: Locale tag; overrides a locale given in options.
        **fields: Option fields laid over options.

    With no field selected at all, the numeric date is rendered.

    Raises:
        ValidationError: If an option name or value is invalid.

    Examples:
        >>> format_custom("2025-12-04", weekday="short", month="short", day="numeric")
        'jue, 4 dic'
        >>> format_custom("2025-12-04", {"locale": "en", "month": "long", "year": "numeric"})
        'December 2025'
    """
    if isinstance(options, Mapping):
        selections = dict(options)
        option_locale = selections.pop("locale", None)
        base = FormatOptions.from_fields(**selections)
    else:
        option_locale = None
        base = options if options is not None else FormatOptions()
    merged = base.merged(**fields)

    instant = to_date(value)
    if instant is None:
        return ""
    return get_formatter(locale or option_locale, merged).format(instant)


def format_for_display(
    value: DateInput | None,
    locale: Locale | str | None = None,
    *,
    clock: Clock | None = None,
) -> str:
    """Format value compactly for lists and cards.

    Returns "Hoy"/"Today" for the current local day, "Ayer"/"Yesterday"
    for the previous one, day and abbreviated month for other dates in
    the current year, and the medium date otherwise. Days are counted on
    the local calendar, so DST changes do not shift the boundaries.

    Examples:
        >>> clock = FixedClock(Instant.from_local(2025, 12, 4, 12))
        >>> format_for_display("2025-12-03T20:00", clock=clock)
        'Ayer'
        >>> format_for_display("2025-11-28", "en", clock=clock)
        'Nov 28'
        >>> format_for_display("2024-12-04", clock=clock)
        '4 dic 2024'
    """
    instant = to_date(value)
    if instant is None:
        return ""

    now = resolve_clock(clock).now()
    messages = get_locale_data(locale).messages
    days_ago = now.ordinal - instant.ordinal
    if days_ago == 0:
        return messages.today
    if days_ago == 1:
        return messages.yesterday
    if instant.year == now.year:
        return get_formatter(locale, _DAY_MONTH).format(instant)
    return format_date(instant, DateFormatPreset.MEDIUM, locale)


def format_event_time(
    value: DateInput | None,
    locale: Locale | str | None = None,
    *,
    clock: Clock | None = None,
) -> str:
    """Format value as its display date and short time.

    Examples:
        >>> clock = FixedClock(Instant.from_local(2025, 12, 4, 12))
        >>> format_event_time("2025-12-04T18:00", clock=clock)
        'Hoy, 18:00'
    """
    instant = to_date(value)
    if instant is None:
        return ""
    display = format_for_display(instant, locale, clock=clock)
    time = format_time(instant, TimeFormatPreset.SHORT, locale)
    return f"{display}, {time}"


def format_range(
    start: DateInput | None,
    end: DateInput | None,
    locale: Locale | str | None = None,
) -> str:
    """Format a date range, sharing the month and year where possible.

    Examples:
        >>> format_range("2025-12-04", "2025-12-10")
        '4 - 10 dic 2025'
        >>> format_range("2025-11-28", "2025-12-03")
        '28 nov - 3 dic 2025'
        >>> format_range("2025-12-28", "2026-01-03")
        '28 dic 2025 - 3 ene 2026'
    """
    a = to_date(start)
    b = to_date(end)
    if a is None or b is None:
        return ""

    end_text = format_date(b, DateFormatPreset.MEDIUM, locale)
    if a.year == b.year and a.month == b.month:
        return f"{a.day} - {end_text}"
    if a.year == b.year:
        start_text = get_formatter(locale, _DAY_MONTH).format(a)
        return f"{start_text} - {end_text}"
    return f"{format_date(a, DateFormatPreset.MEDIUM, locale)} - {end_text}"


__all__ = [
    "DATE_PRESETS",
    "TIME_PRESETS",
    "DATETIME_PRESETS",
    "get_formatter",
    "format_date",
    "format_time",
    "format_datetime",
    "format_custom",
    "format_for_display",
    "format_event_time",
    "format_range",
]
