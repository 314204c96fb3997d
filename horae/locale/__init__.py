"""Supported locales and their formatting data.

This module provides:
    - Locale: the supported locale codes (es, en)
    - DEFAULT_LOCALE: the locale used when none is given (es)
    - resolve_locale: normalize a locale tag, falling back to the default
    - get_locale_data: calendar names, patterns and phrases for a locale

Examples:
    >>> resolve_locale("en-US")
    <Locale.EN: 'en'>
    >>> resolve_locale("fr")
    <Locale.ES: 'es'>
    >>> get_locale_data("es").calendar.months_abbreviated[11]
    'dic'
"""

from __future__ import annotations

import logging
import re
from enum import Enum

from horae.locale._data import (
    LOCALE_DATA,
    CalendarNames,
    DateTimePatterns,
    DisplayMessages,
    LocaleData,
    NumberSymbols,
    RelativeTimeData,
    UnitNames,
)

logger = logging.getLogger(__name__)


class Locale(Enum):
    """Locales with formatting data."""

    ES = "es"
    EN = "en"


DEFAULT_LOCALE = Locale.ES

_TAG_SEPARATOR = re.compile(r"[-_]")


def resolve_locale(tag: Locale | str | None = None) -> Locale:
    """Normalize a locale tag to a supported Locale.

    Tags are matched case-insensitively on their language subtag, so
    "en-US", "EN" and "en_GB" all resolve to Locale.EN. None and unknown
    tags resolve to DEFAULT_LOCALE.
    """
    if isinstance(tag, Locale):
        return tag
    if tag is None or not isinstance(tag, str) or not tag.strip():
        return DEFAULT_LOCALE

    language = _TAG_SEPARATOR.split(tag.strip(), maxsplit=1)[0].lower()
    try:
        return Locale(language)
    except ValueError:
        logger.debug(
            "unsupported locale %r, falling back to %s", tag, DEFAULT_LOCALE.value
        )
        return DEFAULT_LOCALE


def get_locale_data(tag: Locale | str | None = None) -> LocaleData:
    """Return the formatting data for a locale tag."""
    return LOCALE_DATA[resolve_locale(tag).value]


__all__ = [
    "Locale",
    "DEFAULT_LOCALE",
    "resolve_locale",
    "get_locale_data",
    "LocaleData",
    "CalendarNames",
    "DateTimePatterns",
    "NumberSymbols",
    "UnitNames",
    "RelativeTimeData",
    "DisplayMessages",
]
