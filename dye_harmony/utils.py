from __future__ import annotations

"""
Shared utilities for dye_harmony.

Includes Oklab distance ranking over catalog matrices, small formatting
helpers, and tidy logging.
"""

from typing import Any, Iterable, List, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray


# Distance ranking


def lab_distances(target_lab: Sequence[float], pal_lab: NDArray[np.floating]) -> np.ndarray:
    """Euclidean distance from one Oklab row to every palette row."""
    if pal_lab.shape[0] == 0:
        return np.zeros((0,), dtype=np.float64)
    diff = pal_lab - np.asarray(target_lab, dtype=np.float64)[None, :]
    return np.sqrt(np.sum(diff * diff, axis=1))


def ranked_indices_by_lab_distance(
    target_lab: Sequence[float], pal_lab: NDArray[np.floating]
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Palette indices sorted by ascending distance to target_lab.
    Ties keep palette order (stable sort).

    Returns:
      order: int array [P]
      dist:  float64 array [P], distances in palette order
    """
    dist = lab_distances(target_lab, pal_lab)
    order = np.argsort(dist, kind="stable")
    return order, dist


# Pretty formatting


def format_bool_on_off(value: Any) -> str:
    """Pretty boolean: 'on'/'off' for bools; str(value) otherwise."""
    if isinstance(value, bool):
        return "on" if value else "off"
    return str(value)


def format_number_compact(value: Any) -> str:
    """Pretty number: 1,234 style for ints; compact for floats; passthrough otherwise."""
    if isinstance(value, bool):
        return format_bool_on_off(value)
    if isinstance(value, int):
        return f"{value:,}"
    if isinstance(value, float):
        text = f"{value:.3f}".rstrip("0").rstrip(".")
        return text
    return str(value)


def key_value_pairs_to_string(
    pairs: Iterable[Tuple[str, Any]], sep: str = "  ", eq: str = ": "
) -> str:
    """
    Format (name, value) pairs as 'Name: value' blocks separated by sep.
    Uses format_bool_on_off / format_number_compact for readability.
    """
    out: List[str] = []
    for name, value in pairs:
        display = (
            format_bool_on_off(value)
            if isinstance(value, bool)
            else format_number_compact(value)
        )
        out.append(f"{name}{eq}{display}")
    return sep.join(out)


# Pretty logging


def print_config_line(
    section: str, pairs: Iterable[Tuple[str, Any]], debug: bool
) -> None:
    """
    Emit a single human-readable config line, e.g.:
      [harmony] Pattern: triadic  Seed: 42  Candidates: 85
    Routes to debug_log() when debug=True, else to log().
    """
    line = f"[{section}] {key_value_pairs_to_string(pairs)}"
    (debug_log if debug else log)(line)


def print_banner(title: str) -> None:
    """Section banner."""
    print(f"\n=== {title} ===", flush=True)


def log(message: str) -> None:
    """Plain log line."""
    print(message, flush=True)


def debug_log(message: str) -> None:
    """Debug log line."""
    print(f"[debug] {message}", flush=True)


def warn(message: str) -> None:
    """Warning log line."""
    print(f"[warn] {message}", flush=True)


def error(message: str) -> None:
    """Error log line to stderr."""
    import sys

    print(f"[error] {message}", file=sys.stderr, flush=True)


__all__ = [
    # distance ranking
    "lab_distances",
    "ranked_indices_by_lab_distance",
    # formatting
    "format_bool_on_off",
    "format_number_compact",
    "key_value_pairs_to_string",
    # logging
    "print_config_line",
    "print_banner",
    "log",
    "debug_log",
    "warn",
    "error",
]
