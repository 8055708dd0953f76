"""Unit conversion helpers shared by the renderers."""

from __future__ import annotations

import math

from gdoc2html.constants import DEFAULT_POINTS_TO_PIXELS


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (JavaScript ``Math.round``)."""
    return math.floor(value + 0.5)


def points_to_pixels(points: float, ratio: float = DEFAULT_POINTS_TO_PIXELS) -> int:
    """Convert a size in points to whole CSS pixels."""
    return round_half_up(points * ratio)


def unit_to_byte(value: float) -> int:
    """Scale a 0-1 color channel to 0-255."""
    return round_half_up(value * 255)
