from __future__ import annotations

"""
Harmony pattern names and display metadata.

Exports:
- HARMONY_PATTERNS, FREEFORM_PATTERNS, DEFAULT_PATTERN
- PATTERN_LABELS, PATTERN_DESCRIPTIONS
- pattern_label(pattern) -> str
- pattern_description(pattern) -> str
- resolve_pattern(name) -> HarmonyPattern
- is_freeform_pattern(pattern) -> bool

Notes:
- resolve_pattern accepts any case and '_' or ' ' in place of '-', so
  "Split_Complementary" resolves to "split-complementary".
"""

from typing import Dict, Tuple

from .core_types import HarmonyPattern

HARMONY_PATTERNS: Tuple[HarmonyPattern, ...] = (
    "triadic",
    "split-complementary",
    "analogous",
    "monochromatic",
    "similar",
    "contrast",
    "clash",
    "vivid",
    "muted",
    "random",
)

# patterns that return generated hex colours instead of catalog entries
FREEFORM_PATTERNS: Tuple[HarmonyPattern, ...] = ("vivid", "muted")

DEFAULT_PATTERN: HarmonyPattern = "triadic"

PATTERN_LABELS: Dict[HarmonyPattern, str] = {
    "triadic": "Balanced",
    "split-complementary": "Accent",
    "analogous": "Gradient",
    "monochromatic": "Same family",
    "similar": "Natural",
    "contrast": "Contrast",
    "clash": "Clash",
    "vivid": "Vivid",
    "muted": "Muted",
    "random": "Random",
}

PATTERN_DESCRIPTIONS: Dict[HarmonyPattern, str] = {
    "triadic": "Three vivid colours spaced evenly around the wheel",
    "split-complementary": "Two accents flanking the complement of the main colour",
    "analogous": "Neighbouring hues that flow into each other",
    "monochromatic": "One hue family at different lightness levels",
    "similar": "Close hues that sit together quietly",
    "contrast": "Complement plus a quarter-turn for a clear contrast",
    "clash": "Deliberately off-balance opposite with a bridging colour",
    "vivid": "Generated bold companions outside the catalog",
    "muted": "Generated soft companions outside the catalog",
    "random": "Two unexpected picks from the catalog",
}


def pattern_label(pattern: str) -> str:
    """Display label; unknown names are returned unchanged."""
    return PATTERN_LABELS.get(pattern, pattern)  # type: ignore[call-overload]


def pattern_description(pattern: str) -> str:
    return PATTERN_DESCRIPTIONS.get(pattern, "")  # type: ignore[call-overload]


def resolve_pattern(name: str) -> HarmonyPattern:
    """
    Resolve a user-supplied pattern name.
    Raises ValueError for names that match no pattern.
    """
    key = str(name).strip().lower().replace("_", "-").replace(" ", "-")
    if key in HARMONY_PATTERNS:
        return key  # type: ignore[return-value]
    raise ValueError(
        f"unknown harmony pattern {name!r}; expected one of {', '.join(HARMONY_PATTERNS)}"
    )


def is_freeform_pattern(pattern: str) -> bool:
    return pattern in FREEFORM_PATTERNS


__all__ = [
    "HARMONY_PATTERNS",
    "FREEFORM_PATTERNS",
    "DEFAULT_PATTERN",
    "PATTERN_LABELS",
    "PATTERN_DESCRIPTIONS",
    "pattern_label",
    "pattern_description",
    "resolve_pattern",
    "is_freeform_pattern",
]
