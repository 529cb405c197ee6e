from __future__ import annotations

"""
Dye catalog definitions and builders.

Exports:
  DEFAULT_CATALOG: list[tuple[str, str, str, str]]  # [(id, name, category, hex), ...]
  CATEGORIES: tuple[str, ...]
  dye_from_record(record) -> Dye
  build_catalog(records=DEFAULT_CATALOG) -> list[Dye]
  load_catalog_json(path) -> list[Dye]
  lab_matrix(entries) -> float64 [N,3]
  lch_matrix(entries) -> float64 [N,3]
  find_entry(entries, key) -> ColorEntry | None
  make_user_color(name, rgb, ...) -> UserDefinedColor
  validate_rgb_input / validate_custom_color_name / parse_rgb_string / format_rgb_display
  is_custom_entry(entry)
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from .colour_convert import oklab_to_oklch_array, rgb_to_oklab_array
from .core_types import (
    ColorEntry,
    Dye,
    RGBColor,
    UserDefinedColor,
    hex_to_rgb,
)

CATEGORIES: Tuple[str, ...] = (
    "white",
    "red",
    "brown",
    "yellow",
    "green",
    "blue",
    "purple",
    "rare",
)

MAX_CUSTOM_NAME_LENGTH = 50

DEFAULT_CATALOG: List[Tuple[str, str, str, str]] = [
    ("snow-white", "Snow White", "white", "#E4DFD0"),
    ("ash-grey", "Ash Grey", "white", "#ACA8A2"),
    ("goobbue-grey", "Goobbue Grey", "white", "#898784"),
    ("slate-grey", "Slate Grey", "white", "#656565"),
    ("charcoal-grey", "Charcoal Grey", "white", "#484742"),
    ("soot-black", "Soot Black", "white", "#2B2923"),
    ("rose-pink", "Rose Pink", "red", "#E69F96"),
    ("lilac-purple", "Lilac Purple", "red", "#836969"),
    ("rolanberry-red", "Rolanberry Red", "red", "#5B1729"),
    ("dalamud-red", "Dalamud Red", "red", "#781A1A"),
    ("rust-red", "Rust Red", "red", "#622207"),
    ("wine-red", "Wine Red", "red", "#451511"),
    ("coral-pink", "Coral Pink", "red", "#CC6C5E"),
    ("blood-red", "Blood Red", "red", "#913B27"),
    ("salmon-pink", "Salmon Pink", "red", "#E4AA8A"),
    ("sunset-orange", "Sunset Orange", "brown", "#B75C2D"),
    ("mesa-red", "Mesa Red", "brown", "#7D3906"),
    ("bark-brown", "Bark Brown", "brown", "#6A4B37"),
    ("chocolate-brown", "Chocolate Brown", "brown", "#6E3D24"),
    ("russet-brown", "Russet Brown", "brown", "#4F2D1F"),
    ("kobold-brown", "Kobold Brown", "brown", "#30211B"),
    ("cork-brown", "Cork Brown", "brown", "#C9A07D"),
    ("qiqirn-brown", "Qiqirn Brown", "brown", "#996E3F"),
    ("opo-opo-brown", "Opo-opo Brown", "brown", "#7B5C2D"),
    ("aldgoat-brown", "Aldgoat Brown", "brown", "#A2875C"),
    ("pumpkin-orange", "Pumpkin Orange", "brown", "#C5743B"),
    ("acorn-brown", "Acorn Brown", "brown", "#8E581B"),
    ("orchard-brown", "Orchard Brown", "brown", "#644216"),
    ("chestnut-brown", "Chestnut Brown", "brown", "#3D290D"),
    ("gobbiebag-brown", "Gobbiebag Brown", "brown", "#B99E78"),
    ("shale-brown", "Shale Brown", "brown", "#92816C"),
    ("mole-brown", "Mole Brown", "brown", "#615245"),
    ("loam-brown", "Loam Brown", "brown", "#3F3329"),
    ("bone-white", "Bone White", "yellow", "#EBD3A0"),
    ("ul-brown", "Ul Brown", "yellow", "#B7A370"),
    ("desert-yellow", "Desert Yellow", "yellow", "#DBB457"),
    ("honey-yellow", "Honey Yellow", "yellow", "#FAC62B"),
    ("millioncorn-yellow", "Millioncorn Yellow", "yellow", "#E49E34"),
    ("coeurl-yellow", "Coeurl Yellow", "yellow", "#BC8804"),
    ("cream-yellow", "Cream Yellow", "yellow", "#F2D770"),
    ("halatali-yellow", "Halatali Yellow", "yellow", "#A58430"),
    ("raisin-brown", "Raisin Brown", "yellow", "#403311"),
    ("mud-green", "Mud Green", "green", "#585230"),
    ("sylph-green", "Sylph Green", "green", "#BBBB8A"),
    ("lime-green", "Lime Green", "green", "#ABB054"),
    ("moss-green", "Moss Green", "green", "#707326"),
    ("meadow-green", "Meadow Green", "green", "#8B9C63"),
    ("olive-green", "Olive Green", "green", "#4B5232"),
    ("marsh-green", "Marsh Green", "green", "#323621"),
    ("apple-green", "Apple Green", "green", "#9BB363"),
    ("cactuar-green", "Cactuar Green", "green", "#658241"),
    ("hunter-green", "Hunter Green", "green", "#284B2C"),
    ("ochu-green", "Ochu Green", "green", "#406339"),
    ("adamantoise-green", "Adamantoise Green", "green", "#5F7558"),
    ("nophica-green", "Nophica Green", "green", "#3B4D3C"),
    ("deepwood-green", "Deepwood Green", "green", "#1E2A21"),
    ("celeste-green", "Celeste Green", "green", "#96BDB9"),
    ("turquoise-green", "Turquoise Green", "green", "#437272"),
    ("morbol-green", "Morbol Green", "green", "#1F4646"),
    ("ice-blue", "Ice Blue", "blue", "#B2C4CE"),
    ("sky-blue", "Sky Blue", "blue", "#83B0D2"),
    ("seafog-blue", "Seafog Blue", "blue", "#648184"),
    ("peacock-blue", "Peacock Blue", "blue", "#3B6886"),
    ("rhotano-blue", "Rhotano Blue", "blue", "#1C3D54"),
    ("corpse-blue", "Corpse Blue", "blue", "#8E9BAC"),
    ("ceruleum-blue", "Ceruleum Blue", "blue", "#4F5766"),
    ("woad-blue", "Woad Blue", "blue", "#2F3851"),
    ("ink-blue", "Ink Blue", "blue", "#1A1F27"),
    ("raptor-blue", "Raptor Blue", "blue", "#5B7FC0"),
    ("othard-blue", "Othard Blue", "blue", "#2F5889"),
    ("storm-blue", "Storm Blue", "blue", "#234172"),
    ("void-blue", "Void Blue", "blue", "#112944"),
    ("royal-blue", "Royal Blue", "blue", "#273067"),
    ("midnight-blue", "Midnight Blue", "blue", "#181937"),
    ("shadow-blue", "Shadow Blue", "blue", "#373747"),
    ("abyssal-blue", "Abyssal Blue", "blue", "#312D57"),
    ("lavender-purple", "Lavender Purple", "purple", "#87627C"),
    ("gloom-purple", "Gloom Purple", "purple", "#514560"),
    ("currant-purple", "Currant Purple", "purple", "#322C3B"),
    ("iris-purple", "Iris Purple", "purple", "#B8A4CD"),
    ("grape-purple", "Grape Purple", "purple", "#3B2A3D"),
    ("lotus-pink", "Lotus Pink", "purple", "#FECEF5"),
    ("colibri-pink", "Colibri Pink", "purple", "#DC9BCA"),
    ("plum-purple", "Plum Purple", "purple", "#79526C"),
    ("regal-purple", "Regal Purple", "purple", "#66304E"),
    ("pure-white", "Pure White", "rare", "#F9F8F4"),
    ("jet-black", "Jet Black", "rare", "#1E1E1E"),
    ("pastel-pink", "Pastel Pink", "rare", "#FDC8C6"),
    ("dark-red", "Dark Red", "rare", "#321919"),
    ("dark-brown", "Dark Brown", "rare", "#28211C"),
    ("pastel-green", "Pastel Green", "rare", "#B9D9B9"),
    ("dark-green", "Dark Green", "rare", "#152C2C"),
    ("pastel-blue", "Pastel Blue", "rare", "#96A4D9"),
    ("dark-blue", "Dark Blue", "rare", "#121F2D"),
    ("pastel-purple", "Pastel Purple", "rare", "#BBB5DA"),
    ("dark-purple", "Dark Purple", "rare", "#232026"),
    ("metallic-silver", "Metallic Silver", "rare", "#A1A3A4"),
    ("metallic-gold", "Metallic Gold", "rare", "#DBB457"),
]


# Record building


def _coerce_rgb(value: Any) -> RGBColor:
    """Accept {'r','g','b'} mappings, 3-sequences, or hex strings."""
    if isinstance(value, str):
        return hex_to_rgb(value)
    if isinstance(value, Mapping):
        try:
            rgb = RGBColor(int(value["r"]), int(value["g"]), int(value["b"]))
        except KeyError as exc:
            raise ValueError(f"rgb mapping missing channel {exc.args[0]!r}") from exc
    else:
        if len(value) < 3:
            raise ValueError("sequence too small for RGB")
        rgb = RGBColor(int(value[0]), int(value[1]), int(value[2]))
    if not validate_rgb_input(rgb):
        raise ValueError(f"rgb channels out of range: {tuple(rgb)}")
    return rgb


def _builtin_tags(dye_id: str, category: str) -> Tuple[str, ...]:
    """Tags for tuple records: 'rare' by category, 'metallic' by id prefix."""
    tags: List[str] = []
    if category == "rare":
        tags.append("rare")
    if dye_id.startswith("metallic-"):
        tags.append("metallic")
    return tuple(tags)


def dye_from_record(record: Union[Mapping[str, Any], Sequence[Any]]) -> Dye:
    """
    Build a Dye from a catalog record.

    Accepts either a mapping with id/name/category/rgb (tags and lodestone
    optional; pre-derived hsv/hex/oklab keys are ignored) or an
    (id, name, category, hex) tuple as in DEFAULT_CATALOG.
    """
    if not isinstance(record, Mapping):
        dye_id, name, category, hex_str = record
        return Dye(
            id=str(dye_id),
            name=str(name),
            category=str(category),
            rgb=hex_to_rgb(hex_str),
            tags=_builtin_tags(str(dye_id), str(category)),
        )

    for key in ("id", "name", "category"):
        if key not in record:
            raise ValueError(f"catalog record missing {key!r}")
    if "rgb" in record:
        rgb = _coerce_rgb(record["rgb"])
    elif "hex" in record:
        rgb = hex_to_rgb(record["hex"])
    else:
        raise ValueError(f"catalog record {record['id']!r} missing 'rgb'")

    tags = record.get("tags") or ()
    return Dye(
        id=str(record["id"]),
        name=str(record["name"]),
        category=str(record["category"]),
        rgb=rgb,
        tags=tuple(str(t) for t in tags),
        lodestone=record.get("lodestone"),
    )


def build_catalog(
    records: Sequence[Union[Mapping[str, Any], Sequence[Any]]] = DEFAULT_CATALOG,
) -> List[Dye]:
    """Convert catalog records into Dye entries, rejecting duplicate ids."""
    dyes: List[Dye] = []
    seen = set()
    for record in records:
        dye = dye_from_record(record)
        if dye.id in seen:
            raise ValueError(f"duplicate dye id {dye.id!r}")
        seen.add(dye.id)
        dyes.append(dye)
    return dyes


def load_catalog_json(path: Path) -> List[Dye]:
    """Load a catalog file: {"dyes": [...]} or a bare list of records."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    records = data.get("dyes", []) if isinstance(data, dict) else data
    return build_catalog(records)


def lab_matrix(entries: Sequence[ColorEntry]) -> NDArray[np.float64]:
    """Oklab rows for entries, float64 [N,3]."""
    if not entries:
        return np.zeros((0, 3), dtype=np.float64)
    rgbs = np.array([e.rgb for e in entries], dtype=np.float64)
    return rgb_to_oklab_array(rgbs)


def lch_matrix(entries: Sequence[ColorEntry]) -> NDArray[np.float64]:
    """Oklch rows for entries, float64 [N,3], hue in degrees."""
    return oklab_to_oklch_array(lab_matrix(entries))


def find_entry(entries: Sequence[ColorEntry], key: str) -> Optional[ColorEntry]:
    """Look up by exact id first, then by case-insensitive name."""
    for e in entries:
        if e.id == key:
            return e
    folded = key.strip().casefold()
    for e in entries:
        if e.name.casefold() == folded:
            return e
    return None


# User-defined colours


def validate_rgb_input(rgb: Sequence[Any]) -> bool:
    """True when all three channels are ints in 0..255."""
    if len(rgb) != 3:
        return False
    return all(
        isinstance(c, (int, np.integer)) and not isinstance(c, bool) and 0 <= c <= 255
        for c in rgb
    )


def validate_custom_color_name(name: str) -> Tuple[bool, Optional[str]]:
    """Return (valid, error message)."""
    trimmed = name.strip()
    if not trimmed:
        return False, "name must not be empty"
    if len(trimmed) > MAX_CUSTOM_NAME_LENGTH:
        return False, f"name must be at most {MAX_CUSTOM_NAME_LENGTH} characters"
    return True, None


def parse_rgb_string(text: str) -> Optional[RGBColor]:
    """Parse '120,85,45' or '120, 85, 45'. Returns None when invalid."""
    parts = [p.strip() for p in text.split(",")]
    if len(parts) != 3:
        return None
    try:
        rgb = RGBColor(int(parts[0]), int(parts[1]), int(parts[2]))
    except ValueError:
        return None
    return rgb if validate_rgb_input(rgb) else None


def format_rgb_display(rgb: Sequence[int]) -> str:
    return f"{rgb[0]}, {rgb[1]}, {rgb[2]}"


def make_user_color(
    name: str,
    rgb: Sequence[int],
    color_id: Optional[str] = None,
    created_at: Optional[datetime] = None,
) -> UserDefinedColor:
    """
    Build a user-defined colour entry. The id is prefixed with 'custom-'.
    Raises ValueError for invalid names or channels.
    """
    ok, message = validate_custom_color_name(name)
    if not ok:
        raise ValueError(message)
    if not validate_rgb_input(tuple(rgb)):
        raise ValueError(f"rgb channels out of range: {tuple(rgb)}")
    now = created_at or datetime.now(timezone.utc)
    if color_id is None:
        color_id = format(int(now.timestamp() * 1000), "x")
    if not color_id.startswith("custom-"):
        color_id = f"custom-{color_id}"
    return UserDefinedColor(
        id=color_id,
        name=name.strip(),
        rgb=RGBColor(int(rgb[0]), int(rgb[1]), int(rgb[2])),
        created_at=now,
        updated_at=now,
    )


def is_custom_entry(entry: ColorEntry) -> bool:
    return entry.source == "custom"


__all__ = [
    "CATEGORIES",
    "DEFAULT_CATALOG",
    "MAX_CUSTOM_NAME_LENGTH",
    "dye_from_record",
    "build_catalog",
    "load_catalog_json",
    "lab_matrix",
    "lch_matrix",
    "find_entry",
    "validate_rgb_input",
    "validate_custom_color_name",
    "parse_rgb_string",
    "format_rgb_display",
    "make_user_color",
    "is_custom_entry",
]
