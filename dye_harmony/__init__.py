"""
dye_harmony package.

Purpose:
  Colour harmony engine for dye palettes: pick two companions for a primary
  colour from a fixed catalog, or generate them. See suggest_palette.py for CLI.

Public API:
  suggest_palette        : full selection for a primary + pattern (PaletteSelection).
  generate_suggested_dyes: two catalog suggestions for a catalog pattern.
  generate_vivid_harmony : freeform vivid triple [base, bridge, adventure].
  generate_muted_harmony : freeform muted triple [base, bridge, adventure].
  colour_convert         : RGB / HSV / hex / Oklab / Oklch transforms, contrast.
  core_types             : value objects (Dye, UserDefinedColor, PaletteSelection) and errors.
  palette_data           : built-in catalog, record building, user colours.
  colour_select          : candidate pool filtering.
  patterns               : pattern names, labels, resolution.
  utils                  : distance ranking, formatting, logging.

Quick start:
  from dye_harmony import build_catalog, find_entry, suggest_palette
  dyes = build_catalog()
  sel = suggest_palette(find_entry(dyes, "Dalamud Red"), "triadic", dyes, seed=7)
"""

__version__ = "0.1.0"

# Re-export namespaces for convenience.
from . import colour_convert
from . import core_types
from . import palette_data
from . import colour_select
from . import patterns
from . import utils

from .core_types import (  # noqa: E402,F401
    Dye,
    InsufficientCandidates,
    InvalidFormat,
    PaletteSelection,
    UserDefinedColor,
)
from .palette_data import build_catalog, find_entry  # noqa: E402,F401
from .harmony import generate_suggested_dyes, suggest_palette  # noqa: E402,F401
from .vivid_muted import (  # noqa: E402,F401
    VividMutedOptions,
    generate_muted_harmony,
    generate_vivid_harmony,
)

__all__ = [
    "__version__",
    "colour_convert",
    "core_types",
    "palette_data",
    "colour_select",
    "patterns",
    "utils",
    "Dye",
    "UserDefinedColor",
    "PaletteSelection",
    "InvalidFormat",
    "InsufficientCandidates",
    "build_catalog",
    "find_entry",
    "suggest_palette",
    "generate_suggested_dyes",
    "generate_vivid_harmony",
    "generate_muted_harmony",
    "VividMutedOptions",
]
