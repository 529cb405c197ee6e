from __future__ import annotations

"""
Core type aliases, small value objects, errors, and lightweight helpers.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime
from functools import cached_property
from typing import Literal, NamedTuple, Optional, Tuple, Union

# Errors


class InvalidFormat(ValueError):
    """Raised when a colour string is not a strict 6-digit hex value."""


class InsufficientCandidates(ValueError):
    """Raised when the candidate pool cannot supply two distinct suggestions."""


# Colour tuples


class RGBColor(NamedTuple):
    """8-bit sRGB channels. Out-of-range values only appear before clipping."""

    r: int
    g: int
    b: int


class HSVColor(NamedTuple):
    h: int  # [0, 360)
    s: int  # [0, 100]
    v: int  # [0, 100]


class OklabColor(NamedTuple):
    L: float  # [0, 1]
    a: float
    b: float


class OklchColor(NamedTuple):
    L: float  # [0, 1]
    C: float  # >= 0
    h: float  # [0, 360)


HexStr = str
EntrySource = Literal["catalog", "custom"]

HarmonyPattern = Literal[
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
]

# Hex helpers

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


def clamp_value(value: float, lo: float, hi: float) -> float:
    """Clamp value to [lo, hi]."""
    return lo if value < lo else hi if value > hi else value


def normalize_hue(hue_deg: float) -> float:
    """Wrap any angle into [0, 360)."""
    h = float(hue_deg) % 360.0
    return 0.0 if h >= 360.0 else h


def hue_difference_degrees(hue_a: float, hue_b: float) -> float:
    """Minimal absolute difference between two hues in degrees [0, 180]."""
    d = abs(float(hue_a) - float(hue_b)) % 360.0
    return 360.0 - d if d > 180.0 else d


def rgb_to_hex(rgb: Tuple[int, int, int]) -> HexStr:
    """RGB tuple to uppercase hex string '#RRGGBB'."""
    return f"#{int(rgb[0]):02X}{int(rgb[1]):02X}{int(rgb[2]):02X}"


def hex_to_rgb(hex_str: str) -> RGBColor:
    """
    Parse '#rrggbb' or 'rrggbb' (case-insensitive) into an RGBColor.
    Raises InvalidFormat for anything else, including 3-digit shorthand.
    """
    m = _HEX_RE.match(hex_str.strip()) if isinstance(hex_str, str) else None
    if m is None:
        raise InvalidFormat(f"invalid hex colour: {hex_str!r}")
    return RGBColor(int(m.group(1), 16), int(m.group(2), 16), int(m.group(3), 16))


def normalize_hex(hex_str: str) -> HexStr:
    """Validate and return the canonical '#RRGGBB' spelling."""
    return rgb_to_hex(hex_to_rgb(hex_str))


# Value objects


class _DerivedColours:
    """
    Read-only colour views derived from ``rgb``.

    Values are computed on first access and cached on the instance; they are
    never part of the constructor, so they cannot drift from ``rgb``.
    """

    rgb: RGBColor

    @cached_property
    def hsv(self) -> HSVColor:
        from .colour_convert import rgb_to_hsv

        return rgb_to_hsv(self.rgb)

    @cached_property
    def hex(self) -> HexStr:
        return rgb_to_hex(self.rgb)

    @cached_property
    def oklab(self) -> OklabColor:
        from .colour_convert import rgb_to_oklab

        return rgb_to_oklab(self.rgb)

    @cached_property
    def oklch(self) -> OklchColor:
        from .colour_convert import oklab_to_oklch

        return oklab_to_oklch(self.oklab)


@dataclass(frozen=True)
class Dye(_DerivedColours):
    """Immutable catalog entry."""

    id: str
    name: str
    category: str
    rgb: RGBColor
    tags: Tuple[str, ...] = ()
    lodestone: Optional[str] = None
    source: EntrySource = field(default="catalog", init=False)


@dataclass(frozen=True)
class UserDefinedColor(_DerivedColours):
    """A colour entered by the user; usable anywhere a Dye is accepted."""

    id: str
    name: str
    rgb: RGBColor
    created_at: datetime
    updated_at: datetime
    category: str = "white"
    tags: Tuple[str, ...] = ("custom",)
    lodestone: Optional[str] = None
    source: EntrySource = field(default="custom", init=False)


ColorEntry = Union[Dye, UserDefinedColor]


@dataclass(frozen=True)
class DyeCandidate:
    """Matched catalog entry and its Oklab distance to the target."""

    dye: ColorEntry
    delta: float


@dataclass(frozen=True)
class PaletteSelection:
    """
    Result of one harmony computation.

    Catalog patterns fill ``suggested`` with two entries; vivid/muted fill
    ``freeform`` with two '#RRGGBB' strings. ``seed`` is the value that
    reproduces this result when passed back in.
    """

    primary: ColorEntry
    pattern: HarmonyPattern
    suggested: Tuple[ColorEntry, ...] = ()
    freeform: Tuple[HexStr, ...] = ()
    seed: Optional[int] = None

    @property
    def is_freeform(self) -> bool:
        return bool(self.freeform)

    def suggestion_hexes(self) -> Tuple[HexStr, ...]:
        """The two suggested colours as hex, whichever branch produced them."""
        if self.freeform:
            return self.freeform
        return tuple(entry.hex for entry in self.suggested)


__all__ = [
    # errors
    "InvalidFormat",
    "InsufficientCandidates",
    # aliases / types
    "RGBColor",
    "HSVColor",
    "OklabColor",
    "OklchColor",
    "HexStr",
    "EntrySource",
    "HarmonyPattern",
    # value objects
    "Dye",
    "UserDefinedColor",
    "ColorEntry",
    "DyeCandidate",
    "PaletteSelection",
    # helpers
    "clamp_value",
    "normalize_hue",
    "hue_difference_degrees",
    "rgb_to_hex",
    "hex_to_rgb",
    "normalize_hex",
]
