from __future__ import annotations

"""
Candidate pool helpers.

Exports:
  filter_candidates(entries, category=None, hue_range=(0,360), saturation_range=(0,100),
                    value_range=(0,100), exclude_tags=(), debug=False) -> list[ColorEntry]
  eligible_pool(primary, entries) -> list[ColorEntry]

Ranges are inclusive on both ends and compare against the entry's integer HSV.
Input order is preserved.
"""

from typing import Iterable, List, Optional, Sequence, Tuple

from .core_types import ColorEntry
from .utils import debug_log, key_value_pairs_to_string

Range = Tuple[float, float]


def _in_range(value: float, bounds: Range) -> bool:
    return bounds[0] <= value <= bounds[1]


def filter_candidates(
    entries: Sequence[ColorEntry],
    category: Optional[str] = None,
    hue_range: Range = (0.0, 360.0),
    saturation_range: Range = (0.0, 100.0),
    value_range: Range = (0.0, 100.0),
    exclude_tags: Iterable[str] = (),
    debug: bool = False,
) -> List[ColorEntry]:
    """
    Keep entries matching the category (None = any), the HSV ranges, and
    carrying none of exclude_tags.
    """
    banned = {t.lower() for t in exclude_tags}
    out: List[ColorEntry] = []
    for e in entries:
        if category is not None and e.category != category:
            continue
        h, s, v = e.hsv
        if not (
            _in_range(h, hue_range)
            and _in_range(s, saturation_range)
            and _in_range(v, value_range)
        ):
            continue
        if banned and any(t.lower() in banned for t in e.tags):
            continue
        out.append(e)

    if debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Filter in", len(entries)),
                    ("Category", category or "any"),
                    ("Excluded tags", ",".join(sorted(banned)) or "-"),
                    ("Kept", len(out)),
                ]
            )
        )
    return out


def eligible_pool(primary: ColorEntry, entries: Sequence[ColorEntry]) -> List[ColorEntry]:
    """Entries other than the primary (by id), in input order."""
    return [e for e in entries if e.id != primary.id]


__all__ = ["filter_candidates", "eligible_pool"]
