"""Relative-time functions over date inputs.

Every function returns "" when a date input is not a date; options are
validated first and raise ValidationError when invalid. The reference
time comes from the clock argument, or the default clock when omitted.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any, Mapping

from horae._internal.constants import MS_PER_SECOND, MS_PER_WEEK
from horae.core.clock import resolve_clock
from horae.format.options import FormatOptions
from horae.format.presets import get_formatter
from horae.locale import get_locale_data
from horae.parse import to_date
from horae.relative.formatter import (
    RelativeTimeOptions,
    get_quantity_formatter,
    get_relative_formatter,
)
from horae.relative.units import select_unit
from horae.units.relative import NumericMode

if TYPE_CHECKING:
    from horae.core.clock import Clock
    from horae.core.instant import Instant
    from horae.parse import DateInput

logger = logging.getLogger(__name__)

_DAY_MONTH = FormatOptions(day="numeric", month="short")
_DAY_MONTH_YEAR = FormatOptions(day="numeric", month="short", year="numeric")


def _now(clock: Clock | None) -> Instant:
    return resolve_clock(clock).now()


def time_ago(
    value: DateInput | None,
    options: RelativeTimeOptions | Mapping[str, Any] | None = None,
    *,
    clock: Clock | None = None,
    **overrides: Any,
) -> str:
    """Describe value relative to now.

    Numeric defaults to "auto", so offsets of one unit read as
    "ayer", "la próxima semana" and so on.

    Args:
        value: The date to describe.
        options: RelativeTimeOptions or a mapping with locale, style
            and numeric keys.
        clock: Source of "now".
        **overrides: locale, style or numeric laid over options.

    Examples:
        >>> clock = FixedClock(Instant.from_local(2025, 12, 4, 12))
        >>> time_ago("2025-12-04T10:00", clock=clock)
        'hace 2 horas'
        >>> time_ago("2025-12-03T12:00", clock=clock)
        'ayer'
        >>> time_ago("2025-12-03T12:00", locale="en", numeric="always", clock=clock)
        '1 day ago'
    """
    opts = RelativeTimeOptions.coerce(options, **overrides)
    instant = to_date(value)
    if instant is None:
        return ""

    delta = instant.to_epoch_ms() - _now(clock).to_epoch_ms()
    unit, amount = select_unit(delta)
    return get_relative_formatter(opts.locale, opts.style, opts.numeric).format(amount, unit)


def time_from(
    value: DateInput | None,
    base: DateInput | None,
    options: RelativeTimeOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> str:
    """Describe value relative to base instead of now.

    Always numeric: "hace 1 día", never "ayer".

    Examples:
        >>> time_from("2025-12-01", "2025-12-04")
        'hace 3 días'
        >>> time_from("2025-12-05", "2025-12-04", locale="en")
        'in 1 day'
    """
    opts = RelativeTimeOptions.coerce(options, **overrides)
    instant = to_date(value)
    reference = to_date(base)
    if instant is None or reference is None:
        return ""

    unit, amount = select_unit(instant.to_epoch_ms() - reference.to_epoch_ms())
    return get_relative_formatter(opts.locale, opts.style, NumericMode.ALWAYS).format(
        amount, unit
    )


def time_until(
    value: DateInput | None,
    options: RelativeTimeOptions | Mapping[str, Any] | None = None,
    *,
    clock: Clock | None = None,
    **overrides: Any,
) -> str:
    """Return the time left until value as a bare quantity.

    Once value has passed the locale's "ended" word is returned.

    Examples:
        >>> clock = FixedClock(Instant.from_local(2025, 12, 4, 12))
        >>> time_until("2025-12-07T12:00", clock=clock)
        '3 días'
        >>> time_until("2025-12-01", locale="en", clock=clock)
        'Ended'
    """
    opts = RelativeTimeOptions.coerce(options, **overrides)
    instant = to_date(value)
    if instant is None:
        return ""

    delta = instant.to_epoch_ms() - _now(clock).to_epoch_ms()
    if delta < 0:
        return get_locale_data(opts.locale).messages.ended
    unit, amount = select_unit(delta)
    return get_quantity_formatter(opts.locale, opts.style).format(amount, unit)


def time_since(
    value: DateInput | None,
    options: RelativeTimeOptions | Mapping[str, Any] | None = None,
    *,
    clock: Clock | None = None,
    **overrides: Any,
) -> str:
    """Return the time elapsed since value as a bare quantity.

    A value still in the future gives the locale's "coming soon" word.

    Examples:
        >>> clock = FixedClock(Instant.from_local(2025, 12, 4, 12))
        >>> time_since("2025-12-04T11:15", clock=clock)
        '45 minutos'
        >>> time_since("2025-12-24", locale="en", clock=clock)
        'Coming soon'
    """
    opts = RelativeTimeOptions.coerce(options, **overrides)
    instant = to_date(value)
    if instant is None:
        return ""

    delta = _now(clock).to_epoch_ms() - instant.to_epoch_ms()
    if delta < 0:
        return get_locale_data(opts.locale).messages.coming_soon
    unit, amount = select_unit(delta)
    return get_quantity_formatter(opts.locale, opts.style).format(amount, unit)


def smart_time_ago(
    value: DateInput | None,
    options: RelativeTimeOptions | Mapping[str, Any] | None = None,
    *,
    clock: Clock | None = None,
    **overrides: Any,
) -> str:
    """Relative phrase within a week of now, short absolute date beyond.

    The absolute form carries the year only when it differs from the
    current one.

    Examples:
        >>> clock = FixedClock(Instant.from_local(2025, 12, 4, 12))
        >>> smart_time_ago("2025-12-02T12:00", clock=clock)
        'anteayer'
        >>> smart_time_ago("2025-11-15", clock=clock)
        '15 nov'
        >>> smart_time_ago("2024-11-15", locale="en", clock=clock)
        'Nov 15, 2024'
    """
    opts = RelativeTimeOptions.coerce(options, **overrides)
    instant = to_date(value)
    if instant is None:
        return ""

    now = _now(clock)
    if abs(instant.to_epoch_ms() - now.to_epoch_ms()) < MS_PER_WEEK:
        return time_ago(instant, opts, clock=clock)
    absolute = _DAY_MONTH if instant.year == now.year else _DAY_MONTH_YEAR
    return get_formatter(opts.locale, absolute).format(instant)


def format_duration(
    milliseconds: float,
    options: RelativeTimeOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> str:
    """Render a length of time in its largest fitting unit.

    Lengths under one second (negative ones included) give the locale's
    "less than a second" phrase.

    Examples:
        >>> format_duration(90_000)
        '2 minutos'
        >>> format_duration(3 * 86_400_000, locale="en", style="short")
        '3 days'
        >>> format_duration(500, locale="en")
        'less than a second'
    """
    opts = RelativeTimeOptions.coerce(options, **overrides)
    if not math.isfinite(milliseconds):
        logger.debug("Cannot format non-finite duration %r", milliseconds)
        return ""
    if milliseconds < MS_PER_SECOND:
        return get_locale_data(opts.locale).messages.less_than_a_second
    unit, amount = select_unit(milliseconds)
    return get_quantity_formatter(opts.locale, opts.style).format(amount, unit)


__all__ = [
    "time_ago",
    "time_from",
    "time_until",
    "time_since",
    "smart_time_ago",
    "format_duration",
]
