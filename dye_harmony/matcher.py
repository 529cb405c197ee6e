from __future__ import annotations

"""
Catalog matcher: snap target colours to distinct catalog entries.

Exports:
  find_nearest_dyes_in_oklab(targets, palette, debug=False) -> list[DyeCandidate]
  targets_from_hues(hues, saturation, value) -> list[RGBColor]

Greedy assignment without replacement: targets are processed in order and
each takes its nearest (Oklab dE) entry not already claimed. Not globally
optimal; the first target has first pick.
"""

from typing import List, Sequence, Union

from .colour_convert import hsv_to_rgb, rgb_to_oklab
from .core_types import ColorEntry, DyeCandidate, HSVColor, OklabColor, RGBColor
from .palette_data import lab_matrix
from .utils import debug_log, ranked_indices_by_lab_distance

Target = Union[RGBColor, OklabColor]


def _target_lab(target: Target) -> OklabColor:
    if isinstance(target, OklabColor):
        return target
    return rgb_to_oklab(target)


def targets_from_hues(
    hues: Sequence[float], saturation: float, value: float
) -> List[RGBColor]:
    """RGB targets at the given hues, keeping the primary's saturation and value."""
    return [hsv_to_rgb(HSVColor(h, saturation, value)) for h in hues]  # type: ignore[arg-type]


def find_nearest_dyes_in_oklab(
    targets: Sequence[Target],
    palette: Sequence[ColorEntry],
    debug: bool = False,
) -> List[DyeCandidate]:
    """
    Match each target to its nearest unclaimed palette entry.

    Args:
      targets: RGBColor or OklabColor values, processed in order
      palette: candidate pool; order breaks distance ties
    Returns:
      one DyeCandidate per target that found an unclaimed entry, in target
      order. Targets with nothing left to claim are skipped.
    """
    pal_lab = lab_matrix(palette)
    results: List[DyeCandidate] = []
    used = set()

    for t_idx, target in enumerate(targets):
        order, dist = ranked_indices_by_lab_distance(_target_lab(target), pal_lab)
        for j in order.tolist():
            entry = palette[j]
            if entry.id in used:
                continue
            used.add(entry.id)
            results.append(DyeCandidate(dye=entry, delta=float(dist[j])))
            if debug:
                debug_log(f"match target#{t_idx} -> {entry.id}  dE={dist[j]:.4f}")
            break
        else:
            if debug:
                debug_log(f"match target#{t_idx} -> none (pool exhausted)")

    return results


__all__ = ["find_nearest_dyes_in_oklab", "targets_from_hues"]
