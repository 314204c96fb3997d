"""Relative-time and quantity formatters.

RelativeTimeFormatter renders "in 3 days" / "hace 3 días" phrases;
QuantityFormatter renders the bare "3 days" / "3 días" quantity from the
same unit tables. Both are immutable and obtained through the relative
formatter cache by get_relative_formatter() / get_quantity_formatter().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from horae._internal.cache import get_relative_formatter_cache
from horae._internal.numbers import group_digits
from horae.errors import ValidationError
from horae.locale import Locale, get_locale_data, resolve_locale
from horae.units.presets import parse_enum
from horae.units.relative import NumericMode, RelativeTimeStyle, RelativeTimeUnit


@dataclass(frozen=True)
class RelativeTimeOptions:
    """Options shared by the relative-time functions.

    Attributes:
        locale: Locale tag (None = default locale).
        style: "long", "short" or "narrow".
        numeric: "always" for "1 day ago", "auto" for "yesterday".
    """

    locale: Locale | str | None = None
    style: RelativeTimeStyle = RelativeTimeStyle.LONG
    numeric: NumericMode = NumericMode.AUTO

    def __post_init__(self) -> None:
        object.__setattr__(self, "locale", resolve_locale(self.locale))
        object.__setattr__(
            self, "style", parse_enum(RelativeTimeStyle, self.style, "relative time style")
        )
        object.__setattr__(
            self, "numeric", parse_enum(NumericMode, self.numeric, "numeric mode")
        )

    @classmethod
    def coerce(
        cls,
        options: RelativeTimeOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> RelativeTimeOptions:
        """Build options from an instance or mapping plus keyword overrides.

        Overrides that are None are ignored.

        Raises:
            ValidationError: If a name or value is invalid.
        """
        if isinstance(options, RelativeTimeOptions):
            merged: dict[str, Any] = {
                "locale": options.locale,
                "style": options.style,
                "numeric": options.numeric,
            }
        else:
            merged = dict(options or {})
        merged.update({k: v for k, v in overrides.items() if v is not None})

        unknown = sorted(set(merged) - {"locale", "style", "numeric"})
        if unknown:
            raise ValidationError(f"unknown relative time option(s): {', '.join(unknown)}")
        return cls(**merged)


class QuantityFormatter:
    """Renders "N unit" quantities for one locale and style.

    Examples:
        >>> QuantityFormatter("es").format(2, "minute")
        '2 minutos'
        >>> QuantityFormatter("en", "narrow").format(3, "hour")
        '3h'
    """

    def __init__(
        self,
        locale: Locale | str | None = None,
        style: RelativeTimeStyle | str = RelativeTimeStyle.LONG,
    ) -> None:
        self.locale = resolve_locale(locale)
        self.style = parse_enum(RelativeTimeStyle, style, "relative time style")
        data = get_locale_data(self.locale)
        self._units = data.relative.units[self.style]
        self._numbers = data.numbers

    def format(self, value: int, unit: RelativeTimeUnit | str) -> str:
        """Render the magnitude of value in unit; the sign is dropped."""
        unit = parse_enum(RelativeTimeUnit, unit, "relative time unit")
        number = group_digits(
            abs(value), self._numbers.group, self._numbers.min_grouping_digits
        )
        return self._units[unit].select(value).format(number)

    def __repr__(self) -> str:
        return f"QuantityFormatter({self.locale.value!r}, {self.style.value!r})"


class RelativeTimeFormatter:
    """Renders signed relative-time phrases for one locale, style and mode.

    Negative values are in the past ("3 days ago"), zero and positive
    values in the future ("in 0 seconds", "in 3 days"). With numeric
    "auto", offsets that have a fixed phrase use it instead ("yesterday",
    "la próxima semana", "ahora").

    Examples:
        >>> RelativeTimeFormatter("es").format(-2, "hour")
        'hace 2 horas'
        >>> RelativeTimeFormatter("es").format(-1, "day")
        'ayer'
        >>> RelativeTimeFormatter("en", numeric="always").format(-1, "day")
        '1 day ago'
    """

    def __init__(
        self,
        locale: Locale | str | None = None,
        style: RelativeTimeStyle | str = RelativeTimeStyle.LONG,
        numeric: NumericMode | str = NumericMode.AUTO,
    ) -> None:
        self.locale = resolve_locale(locale)
        self.style = parse_enum(RelativeTimeStyle, style, "relative time style")
        self.numeric = parse_enum(NumericMode, numeric, "numeric mode")
        data = get_locale_data(self.locale).relative
        self._quantity = QuantityFormatter(self.locale, self.style)
        self._future = data.future
        self._past = data.past
        self._phrases = (
            data.phrases[self.style] if self.numeric is NumericMode.AUTO else {}
        )

    def format(self, value: int, unit: RelativeTimeUnit | str) -> str:
        """Render value units relative to now."""
        unit = parse_enum(RelativeTimeUnit, unit, "relative time unit")
        phrase = self._phrases.get((unit, value))
        if phrase is not None:
            return phrase
        connector = self._past if value < 0 else self._future
        return connector.format(self._quantity.format(value, unit))

    def __repr__(self) -> str:
        return (
            f"RelativeTimeFormatter({self.locale.value!r}, "
            f"{self.style.value!r}, {self.numeric.value!r})"
        )


def get_relative_formatter(
    locale: Locale | str | None = None,
    style: RelativeTimeStyle | str = RelativeTimeStyle.LONG,
    numeric: NumericMode | str = NumericMode.AUTO,
) -> RelativeTimeFormatter:
    """Return a shared RelativeTimeFormatter, cached by locale-style-numeric."""
    resolved = resolve_locale(locale)
    style = parse_enum(RelativeTimeStyle, style, "relative time style")
    numeric = parse_enum(NumericMode, numeric, "numeric mode")
    key = f"{resolved.value}-{style.value}-{numeric.value}"
    return get_relative_formatter_cache().get_or_create(
        key, lambda: RelativeTimeFormatter(resolved, style, numeric)
    )


def get_quantity_formatter(
    locale: Locale | str | None = None,
    style: RelativeTimeStyle | str = RelativeTimeStyle.LONG,
) -> QuantityFormatter:
    """Return a shared QuantityFormatter, cached by locale-style."""
    resolved = resolve_locale(locale)
    style = parse_enum(RelativeTimeStyle, style, "relative time style")
    key = f"{resolved.value}-{style.value}-quantity"
    return get_relative_formatter_cache().get_or_create(
        key, lambda: QuantityFormatter(resolved, style)
    )


__all__ = [
    "RelativeTimeOptions",
    "QuantityFormatter",
    "RelativeTimeFormatter",
    "get_relative_formatter",
    "get_quantity_formatter",
]
