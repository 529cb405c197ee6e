from __future__ import annotations

"""
Pattern geometry: base hue -> target hue angles.

Exports:
  calculate_triadic(h)
  calculate_split_complementary(h)
  calculate_analogous(h)
  calculate_similar(h)
  calculate_contrast(h)
  target_hues(pattern, h)

Every returned hue is normalised into [0, 360).
monochromatic and clash have no hue targets; see selector.py and harmony.py.
"""

from typing import Callable, Dict, Tuple

from .constants import (
    ANALOGOUS_SPREAD,
    COMPLEMENT_OFFSET,
    CONTRAST_OFFSETS,
    SIMILAR_SPREAD,
    SPLIT_COMPLEMENT_SPREAD,
    TRIADIC_OFFSETS,
)
from .core_types import normalize_hue

HuePair = Tuple[float, float]


def calculate_triadic(base_hue: float) -> HuePair:
    """Hues 120 and 240 degrees away."""
    return (
        normalize_hue(base_hue + TRIADIC_OFFSETS[0]),
        normalize_hue(base_hue + TRIADIC_OFFSETS[1]),
    )


def calculate_split_complementary(base_hue: float) -> HuePair:
    """Both neighbours of the complement."""
    complement = base_hue + COMPLEMENT_OFFSET
    return (
        normalize_hue(complement - SPLIT_COMPLEMENT_SPREAD),
        normalize_hue(complement + SPLIT_COMPLEMENT_SPREAD),
    )


def calculate_analogous(base_hue: float) -> HuePair:
    return (
        normalize_hue(base_hue - ANALOGOUS_SPREAD),
        normalize_hue(base_hue + ANALOGOUS_SPREAD),
    )


def calculate_similar(base_hue: float) -> HuePair:
    return (
        normalize_hue(base_hue - SIMILAR_SPREAD),
        normalize_hue(base_hue + SIMILAR_SPREAD),
    )


def calculate_contrast(base_hue: float) -> HuePair:
    """Complement first, then the quarter turn."""
    return (
        normalize_hue(base_hue + CONTRAST_OFFSETS[0]),
        normalize_hue(base_hue + CONTRAST_OFFSETS[1]),
    )


_HUE_RULES: Dict[str, Callable[[float], HuePair]] = {
    "triadic": calculate_triadic,
    "split-complementary": calculate_split_complementary,
    "analogous": calculate_analogous,
    "similar": calculate_similar,
    "contrast": calculate_contrast,
}

ANGLE_PATTERNS: Tuple[str, ...] = tuple(_HUE_RULES)


def target_hues(pattern: str, base_hue: float) -> HuePair:
    """
    Dispatch to the hue rule for an angle-based pattern.
    Raises ValueError for patterns that do not work from hue targets.
    """
    rule = _HUE_RULES.get(pattern)
    if rule is None:
        raise ValueError(f"pattern {pattern!r} has no hue targets")
    return rule(base_hue)


__all__ = [
    "ANGLE_PATTERNS",
    "calculate_triadic",
    "calculate_split_complementary",
    "calculate_analogous",
    "calculate_similar",
    "calculate_contrast",
    "target_hues",
]
