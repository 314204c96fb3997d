"""Format pattern detection for date/time text.

This module examines input strings, finds the first format template that
matches, and checks the extracted components against the calendar.

Internal module - use to_date() from horae.parse instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from horae._internal.calendar import validate_date, validate_time
from horae.errors import ValidationError
from horae.parse._formats import TEMPLATES, Components, FormatTemplate

if TYPE_CHECKING:
    import re

logger = logging.getLogger(__name__)


@dataclass
class PatternMatch:
    """Result of a pattern match attempt.

    Attributes:
        template: The format template that matched.
        match: The regex match object.
        components: Extracted and validated date/time components.
    """

    template: FormatTemplate
    match: re.Match[str]
    components: Components


def detect_format(text: str) -> PatternMatch | None:
    """Find the first template that matches text with valid components.

    Templates are tried in order of specificity. A template whose regex
    matches but whose components do not name a real calendar date or
    clock time (2025-02-30, 25:00) is skipped.

    Args:
        text: The string to analyze.

    Returns:
        The first valid PatternMatch, or None if nothing matched.

    Examples:
        >>> detect_format("2025-12-04").template.name
        'iso_date'
        >>> detect_format("4 de diciembre de 2025").components["month"]
        12
        >>> detect_format("2025-02-30") is None
        True
    """
    text = text.strip()
    if not text:
        return None

    for template in TEMPLATES:
        match = template.pattern.match(text)
        if not match:
            continue
        try:
            components = template.extractor(match)
            _validate_components(components)
        except (ValueError, TypeError, ValidationError) as e:
            logger.debug("template %s rejected %r: %s", template.name, text, e)
            continue
        return PatternMatch(template=template, match=match, components=components)

    return None


def _validate_components(components: Components) -> None:
    """Check extracted components against the calendar.

    Raises:
        ValidationError: If the date or time does not exist.
    """
    validate_date(components["year"], components["month"], components["day"])
    validate_time(
        components["hour"],
        components["minute"],
        components["second"],
        components["millisecond"],
    )


__all__ = [
    "PatternMatch",
    "detect_format",
]
