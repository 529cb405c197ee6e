from __future__ import annotations

"""
Same-family selector for monochromatic / analogous picks.

Scores every non-base entry in Oklch:

  score = wh * (dh / theta)^2 + wc * dC / (C_base + eps) + wl * dL

then keeps entries inside a hue window (topped up by raw hue closeness when
too few survive), optionally spreads the picks over lightness bins, and
returns them ordered by score, hue distance, chroma distance.
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .colour_convert import hue_diff
from .constants import (
    SELECT_CHROMA_EPS,
    SELECT_HUE_WINDOW_DEG,
    SELECT_LIGHTNESS_BINS,
    SELECT_NUM_RESULTS,
    SELECT_THETA_DEG,
    SELECT_W_CHROMA,
    SELECT_W_HUE,
    SELECT_W_LIGHTNESS,
)
from .core_types import ColorEntry, OklchColor
from .palette_data import lch_matrix
from .utils import debug_log, key_value_pairs_to_string


@dataclass(frozen=True)
class SelectorWeights:
    wh: float = SELECT_W_HUE
    wc: float = SELECT_W_CHROMA
    wl: float = SELECT_W_LIGHTNESS


@dataclass(frozen=True)
class ScoredCandidate:
    """Entry with its Oklch and the distances that produced its score."""

    dye: ColorEntry
    oklch: OklchColor
    score: float
    dh: float
    dC: float
    dL: float


def hue_penalty(dh: float, theta: float) -> float:
    """Quadratic in dh/theta; grows fast once dh exceeds theta."""
    x = dh / theta
    return x * x


def score_candidates(
    base: ColorEntry,
    palette: Sequence[ColorEntry],
    theta_deg: float = SELECT_THETA_DEG,
    weights: SelectorWeights = SelectorWeights(),
) -> List[ScoredCandidate]:
    """Score every palette entry except the base, in palette order."""
    b = base.oklch
    others = [dye for dye in palette if dye.id != base.id]
    out: List[ScoredCandidate] = []
    for dye, row in zip(others, lch_matrix(others)):
        c = OklchColor(float(row[0]), float(row[1]), float(row[2]))
        dh = hue_diff(b.h, c.h)
        dC = abs(c.C - b.C)
        dL = abs(c.L - b.L)
        s = (
            weights.wh * hue_penalty(dh, theta_deg)
            + weights.wc * (dC / (b.C + SELECT_CHROMA_EPS))
            + weights.wl * dL
        )
        out.append(ScoredCandidate(dye=dye, oklch=c, score=s, dh=dh, dC=dC, dL=dL))
    return out


def _final_key(c: ScoredCandidate) -> Tuple[float, float, float]:
    return (c.score, c.dh, c.dC)


def _diversify_by_lightness(
    ranked: List[ScoredCandidate], base_L: float, num_results: int
) -> List[ScoredCandidate]:
    """
    Split candidates into equal-width lightness bins over the span of
    candidate and base L, drop the bin holding the base, then take bins in
    order (dark to light), each capped at ceil(num_results / bins).
    """
    n_bins = SELECT_LIGHTNESS_BINS
    Ls = [c.oklch.L for c in ranked] + [base_L]
    L_min = min(Ls)
    L_max = max(Ls)
    step = (L_max - L_min) / n_bins or 1.0
    cap = math.ceil(num_results / n_bins)

    bins: List[List[ScoredCandidate]] = [[] for _ in range(n_bins)]
    for c in ranked:
        idx = min(n_bins - 1, int(math.floor((c.oklch.L - L_min) / step)))
        if len(bins[idx]) < cap:
            bins[idx].append(c)

    banned = min(n_bins - 1, int(math.floor((base_L - L_min) / step)))
    picked: List[ScoredCandidate] = []
    for i, members in enumerate(bins):
        if i != banned:
            picked.extend(members)
    return picked[:num_results]


def select_analogous_dyes(
    base: ColorEntry,
    palette: Sequence[ColorEntry],
    hue_window_deg: float = SELECT_HUE_WINDOW_DEG,
    theta_deg: float = SELECT_THETA_DEG,
    weights: Optional[SelectorWeights] = None,
    num_results: int = SELECT_NUM_RESULTS,
    diversify_by_lightness: bool = False,
    debug: bool = False,
) -> List[ScoredCandidate]:
    """
    Pick same-family entries for ``base``.

    Args:
      base: primary colour (excluded from results by id)
      palette: candidate pool
      hue_window_deg: hue filter half-width around the base hue
      theta_deg: hue deviation at which the hue penalty reaches 1
      weights: hue / chroma / lightness weights
      num_results: how many picks to return at most
      diversify_by_lightness: spread picks over lightness bins
    Returns:
      up to num_results ScoredCandidate, ordered by (score, dh, dC).
      Diversified selection can return fewer when bins are empty.
    """
    scored = score_candidates(base, palette, theta_deg, weights or SelectorWeights())

    filtered = [c for c in scored if c.dh <= hue_window_deg]
    if len(filtered) < num_results:
        have = {c.dye.id for c in filtered}
        by_hue = sorted(scored, key=lambda c: c.dh)
        for c in by_hue:
            if len(filtered) >= num_results:
                break
            if c.dye.id not in have:
                filtered.append(c)
                have.add(c.dye.id)

    ranked = sorted(filtered, key=lambda c: c.score)
    if diversify_by_lightness:
        picked = _diversify_by_lightness(ranked, base.oklch.L, num_results)
    else:
        picked = ranked[:num_results]

    picked.sort(key=_final_key)

    if debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Selector", base.id),
                    ("Scored", len(scored)),
                    ("In window", sum(1 for c in scored if c.dh <= hue_window_deg)),
                    ("Diversify", diversify_by_lightness),
                    ("Picked", ",".join(c.dye.id for c in picked) or "-"),
                ]
            )
        )
    return picked


__all__ = [
    "SelectorWeights",
    "ScoredCandidate",
    "hue_penalty",
    "score_candidates",
    "select_analogous_dyes",
]
