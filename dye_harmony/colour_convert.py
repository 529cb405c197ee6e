from __future__ import annotations

"""
Colour conversions and metrics (sRGB, HSV, Oklab, Oklch).

Exports:
  rgb_to_hsv(rgb) / hsv_to_rgb(hsv)
  rgb_to_linear(c) / linear_to_srgb(c)
  rgb_to_oklab(rgb) / oklab_to_rgb(lab)
  oklab_to_oklch(lab) / oklch_to_oklab(lch)
  rgb_to_oklch(rgb) / oklch_to_rgb(lch)
  clip_oklab(lab)
  delta_e_oklab(lab1, lab2)
  hue_diff(h1, h2)
  relative_luminance(rgb) / contrast_ratio(hex1, hex2)
  rgb_to_oklab_array(rgb) / oklab_to_oklch_array(lab)

Hex parsing lives in core_types and is re-exported here.
"""

import math
from typing import Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from .core_types import (
    HSVColor,
    OklabColor,
    OklchColor,
    RGBColor,
    hex_to_rgb,
    hue_difference_degrees,
    rgb_to_hex,
)

RGBLike = Union[RGBColor, Tuple[int, int, int]]


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _cbrt(x: float) -> float:
    return math.copysign(abs(x) ** (1.0 / 3.0), x)


# RGB <-> HSV


def rgb_to_hsv(rgb: RGBLike) -> HSVColor:
    """
    RGB (0..255) to HSV with integer hue degrees and integer percentages.
    Hue is taken from the max channel and wrapped into [0, 360).
    """
    r = rgb[0] / 255.0
    g = rgb[1] / 255.0
    b = rgb[2] / 255.0

    c_max = max(r, g, b)
    c_min = min(r, g, b)
    delta = c_max - c_min

    h = 0.0
    if delta != 0:
        if c_max == r:
            h = ((g - b) / delta) % 6.0
        elif c_max == g:
            h = (b - r) / delta + 2.0
        else:
            h = (r - g) / delta + 4.0
    hue = _round_half_up(h * 60.0) % 360

    s = 0 if c_max == 0 else _round_half_up(delta / c_max * 100.0)
    v = _round_half_up(c_max * 100.0)
    return HSVColor(hue, s, v)


def hsv_to_rgb(hsv: Tuple[float, float, float]) -> RGBColor:
    """HSV (h degrees, s/v percent) to 8-bit RGB."""
    h = (float(hsv[0]) % 360.0) / 60.0
    s = float(hsv[1]) / 100.0
    v = float(hsv[2]) / 100.0

    c = v * s
    x = c * (1.0 - abs((h % 2.0) - 1.0))
    m = v - c

    sector = int(h) % 6
    r, g, b = (
        (c, x, 0.0),
        (x, c, 0.0),
        (0.0, c, x),
        (0.0, x, c),
        (x, 0.0, c),
        (c, 0.0, x),
    )[sector]
    return RGBColor(
        _round_half_up((r + m) * 255.0),
        _round_half_up((g + m) * 255.0),
        _round_half_up((b + m) * 255.0),
    )


# sRGB gamma


def rgb_to_linear(c: float) -> float:
    """sRGB channel (0..1) to linear light. Negative input stays on the linear segment."""
    return c / 12.92 if c <= 0.04045 else ((c + 0.055) / 1.055) ** 2.4


def linear_to_srgb(c: float) -> float:
    """Linear light to sRGB channel (0..1), unclamped."""
    return c * 12.92 if c < 0.0031308 else 1.055 * c ** (1.0 / 2.4) - 0.055


# RGB <-> Oklab


def rgb_to_oklab(rgb: RGBLike) -> OklabColor:
    """8-bit sRGB to Oklab."""
    r = rgb_to_linear(rgb[0] / 255.0)
    g = rgb_to_linear(rgb[1] / 255.0)
    b = rgb_to_linear(rgb[2] / 255.0)

    l = 0.4122214708 * r + 0.5363325363 * g + 0.0514459929 * b
    m = 0.2119034982 * r + 0.6806995451 * g + 0.1073969566 * b
    s = 0.0883024619 * r + 0.2817188376 * g + 0.6299787005 * b

    l_ = _cbrt(l)
    m_ = _cbrt(m)
    s_ = _cbrt(s)

    return OklabColor(
        0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_,
        1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_,
        0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_,
    )


def oklab_to_rgb(lab: Tuple[float, float, float]) -> RGBColor:
    """
    Oklab to 8-bit sRGB, rounded but NOT clamped.
    Out-of-gamut input yields channels outside 0..255; use clip_oklab first
    when a displayable colour is required.
    """
    L, a, b = float(lab[0]), float(lab[1]), float(lab[2])
    l_ = L + 0.3963377774 * a + 0.2158037573 * b
    m_ = L - 0.1055613458 * a - 0.0638541728 * b
    s_ = L - 0.0894841775 * a - 1.2914855480 * b

    l = l_ * l_ * l_
    m = m_ * m_ * m_
    s = s_ * s_ * s_

    r = 4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s
    g = -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s
    bl = -0.0041960863 * l - 0.7034186147 * m + 1.7076147010 * s

    return RGBColor(
        _round_half_up(linear_to_srgb(r) * 255.0),
        _round_half_up(linear_to_srgb(g) * 255.0),
        _round_half_up(linear_to_srgb(bl) * 255.0),
    )


# Oklab <-> Oklch


def oklab_to_oklch(lab: Tuple[float, float, float]) -> OklchColor:
    """Oklab to polar Oklch, hue in degrees [0, 360)."""
    L, a, b = float(lab[0]), float(lab[1]), float(lab[2])
    C = math.hypot(a, b)
    h = math.degrees(math.atan2(b, a))
    if h < 0.0:
        h += 360.0
    return OklchColor(L, C, h % 360.0)


def oklch_to_oklab(lch: Tuple[float, float, float]) -> OklabColor:
    """Oklch to Oklab."""
    L, C, h = float(lch[0]), float(lch[1]), float(lch[2])
    rad = math.radians(h)
    return OklabColor(L, C * math.cos(rad), C * math.sin(rad))


def rgb_to_oklch(rgb: RGBLike) -> OklchColor:
    return oklab_to_oklch(rgb_to_oklab(rgb))


def oklch_to_rgb(lch: Tuple[float, float, float]) -> RGBColor:
    return oklab_to_rgb(oklch_to_oklab(lch))


# Gamut / metrics


def clip_oklab(lab: Tuple[float, float, float]) -> OklabColor:
    """
    Force an Oklab colour into sRGB: convert, clamp each channel to 0..255,
    convert back. Idempotent for in-gamut colours.
    """
    rgb = oklab_to_rgb(lab)
    clipped = RGBColor(
        min(255, max(0, rgb.r)),
        min(255, max(0, rgb.g)),
        min(255, max(0, rgb.b)),
    )
    return rgb_to_oklab(clipped)


def delta_e_oklab(
    lab1: Sequence[float] | NDArray[np.floating],
    lab2: Sequence[float] | NDArray[np.floating],
) -> float:
    """Euclidean distance in Oklab (perceptual dE)."""
    dL = float(lab1[0]) - float(lab2[0])
    da = float(lab1[1]) - float(lab2[1])
    db = float(lab1[2]) - float(lab2[2])
    return math.sqrt(dL * dL + da * da + db * db)


def hue_diff(h1: float, h2: float) -> float:
    """Angular hue difference in [0, 180]."""
    return hue_difference_degrees(h1, h2)


# WCAG contrast


def relative_luminance(rgb: RGBLike) -> float:
    """WCAG 2.x relative luminance of an 8-bit sRGB colour."""

    def lin(c: int) -> float:
        cs = c / 255.0
        return cs / 12.92 if cs <= 0.03928 else ((cs + 0.055) / 1.055) ** 2.4

    return 0.2126 * lin(rgb[0]) + 0.7152 * lin(rgb[1]) + 0.0722 * lin(rgb[2])


def contrast_ratio(hex1: str, hex2: str) -> float:
    """WCAG contrast ratio between two hex colours, in [1, 21]."""
    lum1 = relative_luminance(hex_to_rgb(hex1))
    lum2 = relative_luminance(hex_to_rgb(hex2))
    brighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (brighter + 0.05) / (darker + 0.05)


# Vectorised helpers


def rgb_to_oklab_array(rgb: np.ndarray) -> NDArray[np.float64]:
    """
    sRGB [...,3] (0..255) to Oklab [...,3]. Vectorised, float64, shape preserved.
    """
    srgb = np.asarray(rgb, dtype=np.float64) / 255.0
    with np.errstate(invalid="ignore"):
        linear = np.where(
            srgb <= 0.04045, srgb / 12.92, ((srgb + 0.055) / 1.055) ** 2.4
        )
    r = linear[..., 0]
    g = linear[..., 1]
    b = linear[..., 2]

    l_ = np.cbrt(0.4122214708 * r + 0.5363325363 * g + 0.0514459929 * b)
    m_ = np.cbrt(0.2119034982 * r + 0.6806995451 * g + 0.1073969566 * b)
    s_ = np.cbrt(0.0883024619 * r + 0.2817188376 * g + 0.6299787005 * b)

    out = np.empty(linear.shape, dtype=np.float64)
    out[..., 0] = 0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_
    out[..., 1] = 1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_
    out[..., 2] = 0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_
    return out


def oklab_to_oklch_array(lab: np.ndarray) -> NDArray[np.float64]:
    """
    Oklab[...,3] to Oklch[...,3] (degrees in [0,360)). Shape preserved.
    """
    orig_shape = np.shape(lab)
    flat = np.asarray(lab, dtype=np.float64).reshape(-1, 3)
    L = flat[:, 0]
    C = np.hypot(flat[:, 1], flat[:, 2])
    h = (np.degrees(np.arctan2(flat[:, 2], flat[:, 1])) + 360.0) % 360.0
    return np.stack([L, C, h], axis=1).reshape(orig_shape)


__all__ = [
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "rgb_to_linear",
    "linear_to_srgb",
    "rgb_to_oklab",
    "oklab_to_rgb",
    "oklab_to_oklch",
    "oklch_to_oklab",
    "rgb_to_oklch",
    "oklch_to_rgb",
    "clip_oklab",
    "delta_e_oklab",
    "hue_diff",
    "relative_luminance",
    "contrast_ratio",
    "rgb_to_oklab_array",
    "oklab_to_oklch_array",
]
