"""Input validation errors for shape specifications.

Both errors subclass :class:`ValueError`, so callers can catch either
the specific class or ``ValueError``.  Invalid shape parameters are
always rejected; they are never clamped or replaced with defaults.
"""

from __future__ import annotations

import math
import numbers

from shapescene._constants import MAX_SIDES, MIN_SIDES


class InvalidDimension(ValueError):
    """A length (cuboid edge, polygon radius, display scale) is not a
    finite positive number."""


class InvalidSideCount(ValueError):
    """A polygon side count is not an integer in ``[3, 12]``."""


def check_dimension(name: str, value: object) -> None:
    """Raise :class:`InvalidDimension` unless *value* is finite and > 0."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidDimension(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidDimension(f"{name} must be finite, got {value}")
    if value <= 0:
        raise InvalidDimension(f"{name} must be positive, got {value}")


def check_sides(sides: object) -> None:
    """Raise :class:`InvalidSideCount` unless *sides* is in ``[3, 12]``."""
    if isinstance(sides, bool) or not isinstance(sides, numbers.Integral):
        raise InvalidSideCount(f"sides must be an integer, got {sides!r}")
    if not MIN_SIDES <= sides <= MAX_SIDES:
        raise InvalidSideCount(
            f"sides must be between {MIN_SIDES} and {MAX_SIDES}, got {sides}"
        )
