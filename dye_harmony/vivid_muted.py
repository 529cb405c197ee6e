from __future__ import annotations

"""
Vivid / muted freeform palette generator.

From one base colour this builds two colours that need not exist in any
catalog: an "adventure" colour (biased hue jump plus adaptive chroma and
lightness shift) and a "bridge" colour linking it to the base. Both are
gamut-clipped and nudged toward a minimum WCAG contrast on a background.

Exports:
  generate_vivid_harmony(base_hex, seed=None, options=None, params=DEFAULT_PARAMS)
  generate_muted_harmony(base_hex, seed=None, options=None, params=DEFAULT_PARAMS)
    -> [base_hex, bridge_hex, adventure_hex]

  make_random(seed)                      seeded LCG or unseeded numpy draws
  sample_hue_offset(random, vivid, ...)  biased hue offset in degrees
  enforce_hue_range(offset, range, ...)
  adaptive_adjustment(base, vivid, ...)  -> Delta(chroma, lightness)
  make_adventure / make_bridge / find_max_min_distance_color
  nudge_for_contrast(hex, bg_hex, min_contrast, ...)

All maths runs in Oklab. With a seed the output is fully reproducible.
"""

import math
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

import numpy as np

from .colour_convert import (
    clip_oklab,
    contrast_ratio,
    delta_e_oklab,
    oklab_to_rgb,
    relative_luminance,
    rgb_to_oklab,
)
from .constants import DEFAULT_BACKGROUND_HEX, FULL_HUE_RANGE
from .core_types import (
    OklabColor,
    clamp_value,
    hex_to_rgb,
    normalize_hex,
    normalize_hue,
    rgb_to_hex,
)
from .params import DEFAULT_PARAMS, Delta, VividMutedParams
from .utils import debug_log, key_value_pairs_to_string

RandomFn = Callable[[], float]

# seeded LCG: s = (s * A + C) % M, value s / M
_LCG_A = 9301
_LCG_C = 49297
_LCG_M = 233280


@dataclass(frozen=True)
class VividMutedOptions:
    """Per-call options. ``hue_offset_range=None`` means the params default."""

    background_hex: str = DEFAULT_BACKGROUND_HEX
    hue_offset_range: Optional[Tuple[float, float]] = None
    min_contrast: Optional[float] = None


# Randomness


def seeded_random(seed: int) -> RandomFn:
    """Linear congruential generator returning floats in [0, 1)."""
    state = int(seed)

    def _next() -> float:
        nonlocal state
        state = (state * _LCG_A + _LCG_C) % _LCG_M
        return state / _LCG_M

    return _next


def make_random(seed: Optional[int]) -> RandomFn:
    """Seeded LCG when seed is given, else ambient numpy randomness."""
    if seed is not None:
        return seeded_random(seed)
    rng = np.random.default_rng()
    return lambda: float(rng.random())


# Hue offsets


def sample_hue_offset(
    random: RandomFn, vivid: bool, params: VividMutedParams = DEFAULT_PARAMS
) -> float:
    """
    Draw a hue offset in degrees.

    vivid: complementary band (p=0.3), one of the triadic bands (p=0.2),
           otherwise uniform over the circle.
    muted: within +-30 (p=0.25), one of the medium bands (p=0.25),
           otherwise uniform over the circle.
    """
    p = params.probability
    hue = params.hue
    r = random()

    if vivid:
        if r < p.complementary:
            return hue.complementary.lo + random() * hue.complementary.width
        if r < p.complementary + p.triadic:
            band = hue.triadic_first if random() < 0.5 else hue.triadic_second
            return band.lo + random() * band.width
        return random() * 360.0

    if r < p.analogous:
        return -hue.analogous_range / 2.0 + random() * hue.analogous_range
    if r < p.analogous + p.medium_distance:
        band = hue.medium if random() < 0.5 else hue.opposite
        return band.lo + random() * band.width
    return random() * 360.0


def enforce_hue_range(
    offset: float,
    hue_range: Tuple[float, float],
    random: RandomFn,
    params: VividMutedParams = DEFAULT_PARAMS,
) -> float:
    """
    Keep a normalised offset inside [lo, hi]: accept it, else redraw
    uniformly up to max_retries times, else clamp to the nearer bound side.
    """
    normalized = normalize_hue(offset)
    lo, hi = hue_range
    if lo <= normalized <= hi:
        return normalized

    for _ in range(params.adjustment.max_retries):
        candidate = normalize_hue(random() * 360.0)
        if lo <= candidate <= hi:
            return candidate

    if normalized < lo:
        return lo
    if normalized > hi:
        return hi
    return normalized


# Oklab helpers


def rotate_hue(lab: OklabColor, angle_deg: float) -> OklabColor:
    rad = math.radians(angle_deg)
    cos = math.cos(rad)
    sin = math.sin(rad)
    return OklabColor(lab.L, lab.a * cos - lab.b * sin, lab.a * sin + lab.b * cos)


def scale_chroma(lab: OklabColor, factor: float) -> OklabColor:
    return OklabColor(lab.L, lab.a * factor, lab.b * factor)


def chroma_of(lab: OklabColor) -> float:
    return math.hypot(lab.a, lab.b)


# Adaptive deltas


def adaptive_adjustment(
    base: OklabColor, vivid: bool, params: VividMutedParams = DEFAULT_PARAMS
) -> Delta:
    """
    Chroma / lightness deltas chosen from the base's bucket.

    vivid pushes lightness toward the opposite extreme and raises chroma;
    saturated bases are toned down instead. muted moves gently toward the
    mid range and strongly cuts very saturated bases.
    """
    lt = params.lightness
    C = chroma_of(base)
    L = base.L

    if vivid:
        d = params.vivid
        if L > lt.high:
            return Delta(d.extreme.chroma, -d.extreme.lightness)
        if L < lt.very_low:
            return Delta(d.extreme.chroma, d.extreme.lightness)
        if L > lt.mid_light:
            return Delta(d.high.chroma, -d.high.lightness)
        if L < lt.mid_dark:
            return Delta(d.high.chroma, d.high.lightness)
        if C < params.low_chroma:
            dl = -d.standard.lightness if L > lt.middle else d.standard.lightness
            return Delta(d.high.chroma, dl)
        if C > params.high_chroma:
            return Delta(
                d.saturated_base - (C - params.high_chroma) * d.saturated_factor, 0.0
            )
        dl = -d.standard.lightness if L > lt.middle else d.standard.lightness
        return Delta(d.standard.chroma, dl)

    m = params.muted
    if L > lt.high:
        return Delta(m.standard.chroma, -m.standard.lightness)
    if L < lt.very_low:
        return Delta(m.standard.chroma, m.standard.lightness)
    if C < params.low_chroma:
        dl = -m.low.lightness if L > lt.mid_light else m.low.lightness
        return Delta(m.low.chroma, dl)
    if C > params.high_chroma:
        return Delta(
            m.high_chroma_base - (C - params.high_chroma) * m.high_chroma_factor,
            m.high_chroma_lift,
        )
    dl = m.balance.lightness if L > lt.mid_light else -m.balance.lightness
    return Delta(m.balance.chroma, dl)


# Adventure / bridge


def make_adventure(
    base: OklabColor,
    vivid: bool,
    hue_offset: float,
    params: VividMutedParams = DEFAULT_PARAMS,
) -> OklabColor:
    """
    Rotate the base by hue_offset, rescale chroma, shift lightness.

    Near-neutral bases (tiny chroma at either lightness extreme) place a/b
    directly from the target chroma and the raw offset angle.
    """
    delta = adaptive_adjustment(base, vivid, params)
    max_chroma = params.chroma.vivid_max if vivid else params.chroma.muted_max
    base_chroma = chroma_of(base)
    lt = params.lightness

    if base_chroma < params.chroma.low and (base.L < lt.low or base.L > lt.high):
        target_L = clamp_value(base.L + delta.lightness, 0.0, 1.0)
        target_C = clamp_value(base_chroma + delta.chroma, 0.0, max_chroma)
        rad = math.radians(hue_offset)
        return OklabColor(target_L, target_C * math.cos(rad), target_C * math.sin(rad))

    rotated = rotate_hue(base, hue_offset)
    current = chroma_of(rotated)
    target_C = clamp_value(current + delta.chroma, 0.0, max_chroma)
    factor = target_C / current if current > 0 else 1.0
    adjusted = scale_chroma(rotated, factor)
    return OklabColor(
        clamp_value(adjusted.L + delta.lightness, 0.0, 1.0), adjusted.a, adjusted.b
    )


def make_bridge(
    base: OklabColor,
    adventure: OklabColor,
    params: VividMutedParams = DEFAULT_PARAMS,
) -> OklabColor:
    """
    Vivid bridge: polar interpolation toward the adventure colour at the
    golden-ratio point (hue along the shortest arc), chroma damped.
    """
    adj = params.adjustment
    t = adj.bridge_position

    L = base.L + (adventure.L - base.L) * t
    Ca = math.hypot(base.a, base.b)
    Cb = math.hypot(adventure.a, adventure.b)
    Ha = math.atan2(base.b, base.a)
    Hb = math.atan2(adventure.b, adventure.a)

    dH = Hb - Ha
    if dH > math.pi:
        dH -= 2.0 * math.pi
    if dH < -math.pi:
        dH += 2.0 * math.pi
    H = Ha + dH * t

    C = (Ca * (1.0 - t) + Cb * t) * adj.chroma_reduction
    return OklabColor(L, C * math.cos(H), C * math.sin(H))


def _bridge_candidates(random: RandomFn, params: VividMutedParams) -> List[OklabColor]:
    search = params.bridge_search
    lt = params.lightness
    target = params.chroma.muted_target
    out: List[OklabColor] = []

    steps = int(round(360.0 / search.hue_step))
    for k in range(steps):
        rad = math.radians(k * search.hue_step)
        for lf in search.lightness_factors:
            L = lt.muted_min + lf * (lt.muted_max - lt.muted_min)
            for cf in search.chroma_factors:
                c = target * cf
                out.append(OklabColor(L, c * math.cos(rad), c * math.sin(rad)))

    for _ in range(search.random_samples):
        rad = random() * 2.0 * math.pi
        c = target * (search.random_chroma_lo + random() * search.random_chroma_span)
        L = search.random_l_lo + random() * search.random_l_span
        out.append(OklabColor(L, c * math.cos(rad), c * math.sin(rad)))
    return out


def find_max_min_distance_color(
    base: OklabColor,
    adventure: OklabColor,
    random: RandomFn,
    params: VividMutedParams = DEFAULT_PARAMS,
) -> OklabColor:
    """
    Muted bridge: the candidate maximising min(dE(x, base), dE(x, adventure))
    over a low-chroma, mid-lightness grid plus random samples, then damped.
    """
    candidates = _bridge_candidates(random, params)
    best = candidates[0]
    best_score = 0.0
    for cand in candidates:
        score = min(delta_e_oklab(cand, base), delta_e_oklab(cand, adventure))
        if score > best_score:
            best_score = score
            best = cand
    return scale_chroma(best, params.adjustment.final_chroma_factor)


# Contrast


def nudge_for_contrast(
    hex_str: str,
    bg_hex: str,
    min_contrast: float,
    params: VividMutedParams = DEFAULT_PARAMS,
) -> str:
    """
    Step lightness away from the background until the WCAG ratio reaches
    min_contrast or max_tries steps are spent. Best effort; never raises
    for valid hex input.
    """
    adj = params.adjustment
    bg_rgb = hex_to_rgb(bg_hex)
    darken = relative_luminance(bg_rgb) > params.lightness.middle
    current = normalize_hex(hex_str)

    tries = 0
    while contrast_ratio(current, bg_hex) < min_contrast and tries < adj.max_tries:
        lab = rgb_to_oklab(hex_to_rgb(current))
        step = -adj.contrast_step if darken else adj.contrast_step
        moved = OklabColor(clamp_value(lab.L + step, 0.0, 1.0), lab.a, lab.b)
        current = rgb_to_hex(oklab_to_rgb(clip_oklab(moved)))
        tries += 1
    return current


# Entry points


def _generate(
    base_hex: str,
    seed: Optional[int],
    options: Optional[VividMutedOptions],
    params: VividMutedParams,
    vivid: bool,
    debug: bool,
) -> List[str]:
    opts = options or VividMutedOptions()
    random = make_random(seed)
    hue_range = opts.hue_offset_range or params.hue_offset_range
    min_contrast = (
        opts.min_contrast if opts.min_contrast is not None else params.min_contrast_on_bg
    )

    base_norm = normalize_hex(base_hex)
    base = rgb_to_oklab(hex_to_rgb(base_norm))

    hue_offset = sample_hue_offset(random, vivid, params)
    if tuple(hue_range) != FULL_HUE_RANGE:
        hue_offset = enforce_hue_range(hue_offset, hue_range, random, params)

    adventure = make_adventure(base, vivid, hue_offset, params)
    if vivid:
        bridge = make_bridge(base, adventure, params)
    else:
        bridge = find_max_min_distance_color(base, adventure, random, params)

    adventure = clip_oklab(adventure)
    bridge = clip_oklab(bridge)

    bridge_hex = nudge_for_contrast(
        rgb_to_hex(oklab_to_rgb(bridge)), opts.background_hex, min_contrast, params
    )
    adventure_hex = nudge_for_contrast(
        rgb_to_hex(oklab_to_rgb(adventure)), opts.background_hex, min_contrast, params
    )

    if debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Mode", "vivid" if vivid else "muted"),
                    ("Seed", seed if seed is not None else "none"),
                    ("Hue offset", float(hue_offset)),
                    ("Bridge", bridge_hex),
                    ("Adventure", adventure_hex),
                ]
            )
        )
    return [base_norm, bridge_hex, adventure_hex]


def generate_vivid_harmony(
    base_hex: str,
    seed: Optional[int] = None,
    options: Optional[VividMutedOptions] = None,
    params: VividMutedParams = DEFAULT_PARAMS,
    debug: bool = False,
) -> List[str]:
    """
    Vivid triple: [base, bridge, adventure] as '#RRGGBB'.
    The base comes back as the same colour in uppercase '#RRGGBB' form.
    Raises InvalidFormat for a malformed base_hex or background.
    """
    return _generate(base_hex, seed, options, params, True, debug)


def generate_muted_harmony(
    base_hex: str,
    seed: Optional[int] = None,
    options: Optional[VividMutedOptions] = None,
    params: VividMutedParams = DEFAULT_PARAMS,
    debug: bool = False,
) -> List[str]:
    """
    Muted triple: [base, bridge, adventure] as '#RRGGBB'.
    The base comes back as the same colour in uppercase '#RRGGBB' form.
    Raises InvalidFormat for a malformed base_hex or background.
    """
    return _generate(base_hex, seed, options, params, False, debug)


__all__ = [
    "VividMutedOptions",
    "RandomFn",
    "seeded_random",
    "make_random",
    "sample_hue_offset",
    "enforce_hue_range",
    "rotate_hue",
    "scale_chroma",
    "chroma_of",
    "adaptive_adjustment",
    "make_adventure",
    "make_bridge",
    "find_max_min_distance_color",
    "nudge_for_contrast",
    "generate_vivid_harmony",
    "generate_muted_harmony",
]
