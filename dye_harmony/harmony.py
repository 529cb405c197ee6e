from __future__ import annotations

"""
Harmony orchestrator.

Exports:
  suggest_palette(primary, pattern, candidates, seed=None, options=None, debug=False)
    -> PaletteSelection
  generate_suggested_dyes(primary, pattern, candidates, seed=None, debug=False)
    -> (ColorEntry, ColorEntry)
  compute_clash_target(oklch) -> OklchColor
  draw_seed() -> int

Dispatch:
  triadic / split-complementary / analogous / similar / contrast
      hue targets at the primary's saturation and value -> Oklab matcher
  monochromatic
      same-family selector with lightness diversification
  clash
      off-balance opposite plus a bridge nearest the Oklab midpoint
  vivid / muted
      procedural generator, freeform hex output
  random
      two distinct random entries

Catalog branches always return two distinct entries, neither equal to the
primary. Gaps are filled by random draws without replacement, so every
branch terminates. All randomness flows from ``seed``.
"""

from typing import List, Optional, Sequence, Tuple

import numpy as np

from .colour_convert import oklch_to_rgb
from .colour_select import eligible_pool
from .constants import (
    CLASH_C_PIVOT,
    CLASH_C_WHEN_DULL,
    CLASH_C_WHEN_VIVID,
    CLASH_HUE_OFFSET,
    CLASH_L_PIVOT,
    CLASH_L_WHEN_DARK,
    CLASH_L_WHEN_LIGHT,
    SUGGESTION_COUNT,
)
from .core_types import (
    ColorEntry,
    HarmonyPattern,
    InsufficientCandidates,
    OklabColor,
    OklchColor,
    PaletteSelection,
    normalize_hue,
)
from .geometry import ANGLE_PATTERNS, target_hues
from .matcher import find_nearest_dyes_in_oklab, targets_from_hues
from .patterns import is_freeform_pattern, resolve_pattern
from .selector import select_analogous_dyes
from .utils import debug_log, print_config_line
from .vivid_muted import (
    VividMutedOptions,
    generate_muted_harmony,
    generate_vivid_harmony,
)

SEED_UPPER = 2**31 - 1


def draw_seed() -> int:
    """Fresh seed for callers that did not supply one."""
    return int(np.random.default_rng().integers(0, SEED_UPPER))


def compute_clash_target(oklch: OklchColor) -> OklchColor:
    """
    Opposite hue with inverted lightness and chroma emphasis:
    light bases get a dark target and vice versa; vivid bases get a dull
    target and vice versa.
    """
    L = CLASH_L_WHEN_LIGHT if oklch.L > CLASH_L_PIVOT else CLASH_L_WHEN_DARK
    C = CLASH_C_WHEN_VIVID if oklch.C > CLASH_C_PIVOT else CLASH_C_WHEN_DULL
    return OklchColor(L, C, normalize_hue(oklch.h + CLASH_HUE_OFFSET))


def _unique_by_id(entries: Sequence[ColorEntry]) -> List[ColorEntry]:
    seen = set()
    out: List[ColorEntry] = []
    for e in entries:
        if e.id not in seen:
            seen.add(e.id)
            out.append(e)
    return out


def _fill_randomly(
    picked: List[ColorEntry],
    eligible: Sequence[ColorEntry],
    rng: np.random.Generator,
    debug: bool = False,
) -> List[ColorEntry]:
    """Top picked up to SUGGESTION_COUNT with distinct random eligible entries."""
    need = SUGGESTION_COUNT - len(picked)
    if need <= 0:
        return picked[:SUGGESTION_COUNT]
    have = {e.id for e in picked}
    remaining = [e for e in eligible if e.id not in have]
    if len(remaining) < need:
        raise InsufficientCandidates(
            f"need {need} more candidate(s), only {len(remaining)} left"
        )
    idx = rng.choice(len(remaining), size=need, replace=False)
    extra = [remaining[int(i)] for i in idx]
    if debug:
        debug_log(f"random fill: {','.join(e.id for e in extra)}")
    return picked + extra


def _angle_pattern(
    primary: ColorEntry,
    pattern: str,
    eligible: Sequence[ColorEntry],
    debug: bool,
) -> List[ColorEntry]:
    hsv = primary.hsv
    hues = target_hues(pattern, hsv.h)
    targets = targets_from_hues(hues, hsv.s, hsv.v)
    if debug:
        debug_log(f"{pattern}: base hue {hsv.h} -> targets {hues[0]:.1f}, {hues[1]:.1f}")
    return [c.dye for c in find_nearest_dyes_in_oklab(targets, eligible, debug=debug)]


def _monochromatic(
    primary: ColorEntry, eligible: Sequence[ColorEntry], debug: bool
) -> List[ColorEntry]:
    picked = [
        c.dye
        for c in select_analogous_dyes(
            primary, eligible, diversify_by_lightness=True, debug=debug
        )
    ]
    if len(picked) < SUGGESTION_COUNT:
        have = {e.id for e in picked}
        for c in select_analogous_dyes(primary, eligible, debug=debug):
            if len(picked) >= SUGGESTION_COUNT:
                break
            if c.dye.id not in have:
                picked.append(c.dye)
                have.add(c.dye.id)
    return picked


def _clash(
    primary: ColorEntry,
    eligible: Sequence[ColorEntry],
    rng: np.random.Generator,
    debug: bool,
) -> List[ColorEntry]:
    target = compute_clash_target(primary.oklch)
    matches = find_nearest_dyes_in_oklab([oklch_to_rgb(target)], eligible, debug=debug)
    # unreachable with two or more candidates; kept as the pool-order fallback
    if not matches:
        if debug:
            debug_log("clash: no third colour, using first two candidates")
        return list(eligible[:SUGGESTION_COUNT])

    third = matches[0].dye
    p = primary.oklab
    t = third.oklab
    midpoint = OklabColor((p.L + t.L) / 2.0, (p.a + t.a) / 2.0, (p.b + t.b) / 2.0)
    bridge_pool = [e for e in eligible if e.id != third.id]
    bridges = find_nearest_dyes_in_oklab([midpoint], bridge_pool, debug=debug)
    if bridges:
        bridge = bridges[0].dye
    else:
        bridge = _fill_randomly([third], eligible, rng, debug)[1]

    if debug:
        debug_log(
            f"clash: target L={target.L:.2f} C={target.C:.2f} h={target.h:.1f}"
            f" -> third {third.id}, bridge {bridge.id}"
        )
    return [bridge, third]


def generate_suggested_dyes(
    primary: ColorEntry,
    pattern: HarmonyPattern,
    candidates: Sequence[ColorEntry],
    seed: Optional[int] = None,
    debug: bool = False,
) -> Tuple[ColorEntry, ColorEntry]:
    """
    Two catalog suggestions for a catalog pattern.

    Raises:
      InsufficientCandidates: fewer than two entries besides the primary
      ValueError: unknown pattern, or vivid/muted (use suggest_palette)
    """
    pattern = resolve_pattern(pattern)
    if is_freeform_pattern(pattern):
        raise ValueError(f"pattern {pattern!r} produces freeform colours")

    eligible = _unique_by_id(eligible_pool(primary, candidates))
    if len(eligible) < SUGGESTION_COUNT:
        raise InsufficientCandidates(
            f"pattern {pattern!r} needs {SUGGESTION_COUNT} candidates besides "
            f"{primary.id!r}, got {len(eligible)}"
        )

    rng = np.random.default_rng(seed)
    if pattern in ANGLE_PATTERNS:
        picked = _angle_pattern(primary, pattern, eligible, debug)
    elif pattern == "monochromatic":
        picked = _monochromatic(primary, eligible, debug)
    elif pattern == "clash":
        picked = _clash(primary, eligible, rng, debug)
    else:  # random
        picked = []

    picked = _fill_randomly(picked, eligible, rng, debug)
    return picked[0], picked[1]


def suggest_palette(
    primary: ColorEntry,
    pattern: HarmonyPattern,
    candidates: Sequence[ColorEntry],
    seed: Optional[int] = None,
    options: Optional[VividMutedOptions] = None,
    debug: bool = False,
) -> PaletteSelection:
    """
    Compute a full selection for ``primary`` under ``pattern``.

    A seed is drawn when none is given and is stored on the result, so
    passing it back reproduces the same selection.
    """
    pattern = resolve_pattern(pattern)
    if seed is None:
        seed = draw_seed()

    if debug:
        print_config_line(
            "harmony",
            [
                ("Primary", primary.id),
                ("Pattern", pattern),
                ("Seed", seed),
                ("Candidates", len(candidates)),
            ],
            debug,
        )

    if is_freeform_pattern(pattern):
        generate = generate_vivid_harmony if pattern == "vivid" else generate_muted_harmony
        triple = generate(primary.hex, seed=seed, options=options, debug=debug)
        return PaletteSelection(
            primary=primary, pattern=pattern, freeform=tuple(triple[1:]), seed=seed
        )

    first, second = generate_suggested_dyes(primary, pattern, candidates, seed, debug)
    return PaletteSelection(
        primary=primary, pattern=pattern, suggested=(first, second), seed=seed
    )


__all__ = [
    "SEED_UPPER",
    "draw_seed",
    "compute_clash_target",
    "generate_suggested_dyes",
    "suggest_palette",
]
