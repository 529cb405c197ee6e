#!/usr/bin/env python3
"""
suggest_palette.py
Suggest two companion colours for a primary dye under a harmony pattern.

Usage:
  python suggest_palette.py PRIMARY --pattern [triadic|split-complementary|analogous|monochromatic|
                                               similar|contrast|clash|vivid|muted|random]
                            --catalog FILE --seed N --exclude-tag TAG --category C
                            --background HEX --hue-range LO HI --min-contrast R --debug
  python suggest_palette.py --list-patterns

Primary:
  A catalog id ("snow-white"), a catalog name ("Snow White", any case) or a
  hex colour ("#aa3322"). A hex colour is used as a custom colour.

Patterns:
  Catalog patterns pick two entries from the (filtered) catalog.
  vivid / muted generate two new colours; --background, --hue-range and
  --min-contrast only apply to them.

Output:
  The primary and both suggestions as '#RRGGBB  name', plus the seed that
  reproduces the result. Exit status 2 on invalid input.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from dye_harmony.colour_select import filter_candidates
from dye_harmony.core_types import (
    ColorEntry,
    InsufficientCandidates,
    InvalidFormat,
    hex_to_rgb,
    normalize_hex,
)
from dye_harmony.palette_data import (
    build_catalog,
    find_entry,
    load_catalog_json,
    make_user_color,
)
from dye_harmony.patterns import (
    DEFAULT_PATTERN,
    HARMONY_PATTERNS,
    is_freeform_pattern,
    pattern_description,
    pattern_label,
    resolve_pattern,
)
from dye_harmony.harmony import suggest_palette
from dye_harmony.vivid_muted import VividMutedOptions
from dye_harmony.constants import DEFAULT_BACKGROUND_HEX
from dye_harmony.utils import (
    debug_log,
    error,
    key_value_pairs_to_string,
    log,
    print_banner,
    print_config_line,
    warn,
)

# CLI args & small helpers


def parse_cli_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments for palette suggestion.

    Returns:
      argparse.Namespace with:
        primary: catalog id, name or hex (None only with --list-patterns)
        pattern: harmony pattern name
        catalog: optional Path to a JSON catalog
        seed: optional int
        exclude_tag: list of tags to drop from the candidate pool
        category: optional category filter
        background / hue_range / min_contrast: vivid and muted options
        debug: bool for verbose details
    """
    parser = argparse.ArgumentParser(
        prog="suggest_palette",
        description="Suggest harmonious dye colours for a primary colour.",
    )
    parser.add_argument(
        "primary", nargs="?", default=None, help="Catalog id, catalog name or #RRGGBB"
    )
    parser.add_argument(
        "--pattern", default=DEFAULT_PATTERN, help="Harmony pattern (see --list-patterns)"
    )
    parser.add_argument(
        "--catalog", type=Path, default=None, help="JSON catalog file (optional)"
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible output")
    parser.add_argument(
        "--exclude-tag",
        action="append",
        default=[],
        metavar="TAG",
        help="Drop catalog entries carrying TAG (repeatable)",
    )
    parser.add_argument("--category", default=None, help="Only suggest from this category")
    parser.add_argument(
        "--background",
        default=DEFAULT_BACKGROUND_HEX,
        help="Background colour for the vivid/muted contrast check",
    )
    parser.add_argument(
        "--hue-range",
        nargs=2,
        type=float,
        default=None,
        metavar=("LO", "HI"),
        help="Allowed vivid/muted hue offset range in degrees",
    )
    parser.add_argument(
        "--min-contrast",
        type=float,
        default=None,
        help="Minimum WCAG contrast against the background for vivid/muted",
    )
    parser.add_argument(
        "--list-patterns", action="store_true", help="List patterns and exit"
    )
    parser.add_argument("--debug", action="store_true", help="Verbose details")
    return parser.parse_args(argv)


def _load_catalog(path: Optional[Path]) -> List[ColorEntry]:
    if path is None:
        return list(build_catalog())
    return list(load_catalog_json(path))


def resolve_primary(catalog: Sequence[ColorEntry], key: str) -> ColorEntry:
    """
    Catalog id or name first, then a hex colour as a custom entry.
    Raises InvalidFormat when key is neither.
    """
    entry = find_entry(catalog, key)
    if entry is not None:
        return entry
    try:
        hex_str = normalize_hex(key)
    except InvalidFormat:
        raise InvalidFormat(
            f"unknown primary {key!r}: not a catalog id, name or hex"
        ) from None
    return make_user_color(hex_str, hex_to_rgb(hex_str), color_id=hex_str[1:].lower())


def _list_patterns() -> None:
    print_banner("Patterns")
    for p in HARMONY_PATTERNS:
        log(f"  {p:<20} {pattern_label(p):<12} {pattern_description(p)}")


# Entry point


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    CLI entry point. Returns the process exit status.
    """
    args = parse_cli_args(argv)

    if args.list_patterns:
        _list_patterns()
        return 0
    if args.primary is None:
        error("missing PRIMARY (catalog id, name or #RRGGBB)")
        return 2

    try:
        pattern = resolve_pattern(args.pattern)
        catalog = _load_catalog(args.catalog)
        primary = resolve_primary(catalog, args.primary)
        pool = filter_candidates(
            catalog,
            category=args.category,
            exclude_tags=args.exclude_tag,
            debug=args.debug,
        )
        options = None
        freeform_flags = (
            args.hue_range is not None
            or args.min_contrast is not None
            or normalize_hex(args.background) != DEFAULT_BACKGROUND_HEX
        )
        if freeform_flags and not is_freeform_pattern(pattern):
            warn(f"--background/--hue-range/--min-contrast ignored for {pattern}")
        if is_freeform_pattern(pattern):
            options = VividMutedOptions(
                background_hex=normalize_hex(args.background),
                hue_offset_range=tuple(args.hue_range) if args.hue_range else None,
                min_contrast=args.min_contrast,
            )
        selection = suggest_palette(
            primary, pattern, pool, seed=args.seed, options=options, debug=args.debug
        )
    except (InvalidFormat, InsufficientCandidates, ValueError) as e:
        error(str(e))
        return 2
    except OSError as e:
        error(f"cannot read catalog: {e}")
        return 2

    print_banner(f"{primary.name} / {pattern_label(pattern)}")
    print_config_line(
        "run",
        [
            ("Pattern", pattern),
            ("Seed", selection.seed),
            ("Catalog", len(catalog)),
            ("Pool", len(pool)),
        ],
        debug=False,
    )
    if args.debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Primary hex", primary.hex),
                    ("Primary source", primary.source),
                    ("Freeform", selection.is_freeform),
                ]
            )
        )

    log(f"  {primary.hex}  {primary.name}  (primary)")
    if selection.is_freeform:
        for hex_code in selection.freeform:
            log(f"  {hex_code}  (generated)")
    else:
        for entry in selection.suggested:
            log(f"  {entry.hex}  {entry.name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
