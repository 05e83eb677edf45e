"""Numeric helpers shared by scoring and report models."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (28.5 -> 29).

    ``round()`` rounds halves to even (``round(28.5) == 28``).  ``value``
    must be finite.
    """
    return math.floor(value + 0.5)
