"""
Global tunables used across the project.

- Pattern geometry offsets (hue degrees)
- Clash targets (Oklch lightness / chroma)
- Same-family selector defaults
- Contrast defaults for freeform colours
"""
from __future__ import annotations

from typing import Tuple

# =================
# Pattern geometry
# =================
TRIADIC_OFFSETS: Tuple[float, float] = (120.0, 240.0)
COMPLEMENT_OFFSET: float = 180.0
SPLIT_COMPLEMENT_SPREAD: float = 30.0
ANALOGOUS_SPREAD: float = 30.0
SIMILAR_SPREAD: float = 15.0
CONTRAST_OFFSETS: Tuple[float, float] = (180.0, 90.0)

# =====
# Clash
# =====
CLASH_HUE_OFFSET: float = 180.0
CLASH_L_PIVOT: float = 0.5
CLASH_L_WHEN_LIGHT: float = 0.3
CLASH_L_WHEN_DARK: float = 0.75
CLASH_C_PIVOT: float = 0.1
CLASH_C_WHEN_VIVID: float = 0.05
CLASH_C_WHEN_DULL: float = 0.15

# ===============================
# Monochromatic / analogous picks
# ===============================
SELECT_HUE_WINDOW_DEG: float = 35.0
SELECT_THETA_DEG: float = 30.0
SELECT_W_HUE: float = 1.0
SELECT_W_CHROMA: float = 0.3
SELECT_W_LIGHTNESS: float = 0.2
SELECT_NUM_RESULTS: int = 2
SELECT_CHROMA_EPS: float = 1e-6
SELECT_LIGHTNESS_BINS: int = 3

# ===================
# Freeform / contrast
# ===================
DEFAULT_BACKGROUND_HEX: str = "#FFFFFF"
MIN_CONTRAST_ON_BG: float = 1.8
FULL_HUE_RANGE: Tuple[float, float] = (0.0, 360.0)

SUGGESTION_COUNT: int = 2

__all__ = [
    "TRIADIC_OFFSETS",
    "COMPLEMENT_OFFSET",
    "SPLIT_COMPLEMENT_SPREAD",
    "ANALOGOUS_SPREAD",
    "SIMILAR_SPREAD",
    "CONTRAST_OFFSETS",
    "CLASH_HUE_OFFSET",
    "CLASH_L_PIVOT",
    "CLASH_L_WHEN_LIGHT",
    "CLASH_L_WHEN_DARK",
    "CLASH_C_PIVOT",
    "CLASH_C_WHEN_VIVID",
    "CLASH_C_WHEN_DULL",
    "SELECT_HUE_WINDOW_DEG",
    "SELECT_THETA_DEG",
    "SELECT_W_HUE",
    "SELECT_W_CHROMA",
    "SELECT_W_LIGHTNESS",
    "SELECT_NUM_RESULTS",
    "SELECT_CHROMA_EPS",
    "SELECT_LIGHTNESS_BINS",
    "DEFAULT_BACKGROUND_HEX",
    "MIN_CONTRAST_ON_BG",
    "FULL_HUE_RANGE",
    "SUGGESTION_COUNT",
]
