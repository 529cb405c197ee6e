from __future__ import annotations

"""
Immutable parameter set for the vivid / muted generator.

DEFAULT_PARAMS holds the documented defaults. Build a variant with
dataclasses.replace() instead of mutating; every class here is frozen.
"""

from dataclasses import dataclass, field
from typing import Tuple

from .constants import FULL_HUE_RANGE, MIN_CONTRAST_ON_BG


@dataclass(frozen=True)
class HueBand:
    """Offset band [lo, lo + width) in degrees."""

    lo: float
    width: float

    @property
    def hi(self) -> float:
        return self.lo + self.width


@dataclass(frozen=True)
class ChromaLimits:
    vivid_max: float = 0.37
    muted_max: float = 0.125
    low: float = 0.05  # at or below: black / white / grey family
    muted_target: float = 0.15


@dataclass(frozen=True)
class LightnessLimits:
    low: float = 0.2
    high: float = 0.8
    very_low: float = 0.35
    middle: float = 0.5
    mid_light: float = 0.6
    mid_dark: float = 0.4
    muted_min: float = 0.3
    muted_max: float = 0.7


@dataclass(frozen=True)
class HueBias:
    complementary: HueBand = HueBand(150.0, 60.0)
    triadic_first: HueBand = HueBand(100.0, 40.0)
    triadic_second: HueBand = HueBand(220.0, 40.0)
    analogous_range: float = 60.0  # centred on 0: [-30, 30)
    medium: HueBand = HueBand(60.0, 60.0)
    opposite: HueBand = HueBand(-120.0, 60.0)


@dataclass(frozen=True)
class Probabilities:
    complementary: float = 0.3
    triadic: float = 0.2
    analogous: float = 0.25
    medium_distance: float = 0.25


@dataclass(frozen=True)
class Adjustment:
    contrast_step: float = 0.06
    chroma_reduction: float = 0.85
    bridge_position: float = 0.382
    max_tries: int = 6
    max_retries: int = 8
    final_chroma_factor: float = 0.85


@dataclass(frozen=True)
class Delta:
    chroma: float
    lightness: float


@dataclass(frozen=True)
class VividDeltas:
    extreme: Delta = Delta(0.25, 0.5)
    high: Delta = Delta(0.22, 0.35)
    standard: Delta = Delta(0.15, 0.25)
    # saturated bases: dC = base - (C - high_chroma) * factor, dL = 0
    saturated_base: float = -0.05
    saturated_factor: float = 0.3


@dataclass(frozen=True)
class MutedDeltas:
    standard: Delta = Delta(0.12, 0.25)
    low: Delta = Delta(0.1, 0.15)
    balance: Delta = Delta(-0.08, 0.04)
    high_chroma_base: float = -0.15
    high_chroma_factor: float = 0.4
    high_chroma_lift: float = 0.03


@dataclass(frozen=True)
class BridgeSearch:
    """Discrete grid and random samples for the muted bridge search."""

    hue_step: float = 30.0
    lightness_factors: Tuple[float, ...] = (0.4, 0.6, 0.8)
    chroma_factors: Tuple[float, ...] = (0.3, 0.5, 0.7)
    random_samples: int = 20
    random_chroma_lo: float = 0.2
    random_chroma_span: float = 0.5
    random_l_lo: float = 0.35
    random_l_span: float = 0.35


@dataclass(frozen=True)
class VividMutedParams:
    hue_offset_range: Tuple[float, float] = FULL_HUE_RANGE
    min_contrast_on_bg: float = MIN_CONTRAST_ON_BG
    low_chroma: float = 0.08
    high_chroma: float = 0.25
    chroma: ChromaLimits = field(default_factory=ChromaLimits)
    lightness: LightnessLimits = field(default_factory=LightnessLimits)
    hue: HueBias = field(default_factory=HueBias)
    probability: Probabilities = field(default_factory=Probabilities)
    adjustment: Adjustment = field(default_factory=Adjustment)
    vivid: VividDeltas = field(default_factory=VividDeltas)
    muted: MutedDeltas = field(default_factory=MutedDeltas)
    bridge_search: BridgeSearch = field(default_factory=BridgeSearch)


DEFAULT_PARAMS = VividMutedParams()

__all__ = [
    "HueBand",
    "ChromaLimits",
    "LightnessLimits",
    "HueBias",
    "Probabilities",
    "Adjustment",
    "Delta",
    "VividDeltas",
    "MutedDeltas",
    "BridgeSearch",
    "VividMutedParams",
    "DEFAULT_PARAMS",
]
