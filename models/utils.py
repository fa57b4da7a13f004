"""Utility functions for Key Light control.

This module contains helper functions used across the application:
- clamp: Saturate an integer into a closed range
- kelvin_to_device / device_to_kelvin: Convert between Kelvin and the
  light's temperature units
- similarity_score: Canonical fuzzy string matching algorithm
- find_similar_strings: Find similar strings using fuzzy matching
"""

from core.config import (
    MIN_TEMPERATURE_KELVIN,
    MAX_TEMPERATURE_KELVIN,
    MIN_TEMPERATURE_DEVICE,
    MAX_TEMPERATURE_DEVICE,
)


def clamp(value: int, lower: int, upper: int) -> int:
    """Return value limited to the closed range [lower, upper]."""
    return max(lower, min(upper, value))


def kelvin_to_device(kelvin: int) -> int:
    """Convert a colour temperature in Kelvin to the light's units.

    The light takes the reciprocal megakelvin (mired) value in the range
    143-344, which is roughly 7000K-2900K. Temperatures outside the
    supported range are saturated rather than rejected.

    Args:
        kelvin: Colour temperature in Kelvin (any non-negative integer)

    Returns:
        Device temperature value in 143-344
    """
    kelvin = clamp(kelvin, MIN_TEMPERATURE_KELVIN, MAX_TEMPERATURE_KELVIN)
    return clamp(round(1_000_000 / kelvin), MIN_TEMPERATURE_DEVICE, MAX_TEMPERATURE_DEVICE)


def device_to_kelvin(value: int) -> int:
    """Convert the light's temperature units back to Kelvin."""
    value = clamp(value, MIN_TEMPERATURE_DEVICE, MAX_TEMPERATURE_DEVICE)
    return round(1_000_000 / value)


def similarity_score(s1: str, s2: str) -> int:
    """Score how alike two command names are, from 0 to 100.

    Exact matches score 100, prefixes 80 and substrings 60. Otherwise the
    score is the share of s1's characters found in order in s2, scaled to
    50, and anything up to 20 counts as no match.
    """
    a, b = s1.lower(), s2.lower()
    if a == b:
        return 100
    if a.startswith(b) or b.startswith(a):
        return 80
    if a in b or b in a:
        return 60

    remaining = iter(b)
    in_order = sum(1 for char in a if char in remaining)
    score = in_order * 50 // max(len(a), len(b))
    return score if score > 20 else 0


def find_similar_strings(target: str, candidates: list[str], limit: int = 3) -> list[str]:
    """Return up to limit candidates resembling target, best first."""
    if not target:
        return []

    scored = sorted(
        ((similarity_score(target, candidate), candidate) for candidate in candidates),
        key=lambda pair: pair[0],
        reverse=True
    )
    return [candidate for score, candidate in scored[:limit] if score > 0]
