"""
Unit tests for pattern metadata and candidate pool filtering.
Run from project root: python -m pytest tests/ -v
"""
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dye_harmony.colour_select import eligible_pool, filter_candidates  # noqa: E402
from dye_harmony.palette_data import build_catalog, find_entry  # noqa: E402
from dye_harmony.patterns import (  # noqa: E402
    HARMONY_PATTERNS,
    PATTERN_DESCRIPTIONS,
    PATTERN_LABELS,
    is_freeform_pattern,
    pattern_description,
    pattern_label,
    resolve_pattern,
)


class TestPatterns(unittest.TestCase):
    def test_every_pattern_has_metadata(self):
        self.assertEqual(len(HARMONY_PATTERNS), 10)
        for p in HARMONY_PATTERNS:
            self.assertIn(p, PATTERN_LABELS)
            self.assertIn(p, PATTERN_DESCRIPTIONS)

    def test_resolve_tolerates_case_and_separators(self):
        self.assertEqual(resolve_pattern("Split_Complementary"), "split-complementary")
        self.assertEqual(resolve_pattern(" VIVID "), "vivid")
        self.assertEqual(resolve_pattern("split complementary"), "split-complementary")

    def test_resolve_unknown(self):
        with self.assertRaises(ValueError):
            resolve_pattern("tetradic")

    def test_label_fallbacks(self):
        self.assertEqual(pattern_label("triadic"), "Balanced")
        self.assertEqual(pattern_label("nope"), "nope")
        self.assertEqual(pattern_description("nope"), "")

    def test_freeform(self):
        self.assertTrue(is_freeform_pattern("vivid"))
        self.assertTrue(is_freeform_pattern("muted"))
        self.assertFalse(is_freeform_pattern("clash"))


class TestFilterCandidates(unittest.TestCase):
    def setUp(self):
        self.dyes = build_catalog()

    def test_no_filters_keeps_everything(self):
        self.assertEqual(filter_candidates(self.dyes), self.dyes)

    def test_category(self):
        out = filter_candidates(self.dyes, category="rare")
        self.assertTrue(out)
        self.assertTrue(all(d.category == "rare" for d in out))

    def test_exclude_tags_case_insensitive(self):
        out = filter_candidates(self.dyes, exclude_tags=["Metallic"])
        ids = {d.id for d in out}
        self.assertNotIn("metallic-gold", ids)
        self.assertNotIn("metallic-silver", ids)
        self.assertEqual(len(out), len(self.dyes) - 2)

    def test_hsv_ranges_inclusive(self):
        out = filter_candidates(self.dyes, value_range=(0, 20))
        self.assertTrue(all(d.hsv.v <= 20 for d in out))
        out = filter_candidates(self.dyes, hue_range=(90, 180), saturation_range=(10, 100))
        for d in out:
            self.assertTrue(90 <= d.hsv.h <= 180)
            self.assertGreaterEqual(d.hsv.s, 10)

    def test_order_preserved(self):
        out = filter_candidates(self.dyes, category="red")
        positions = [self.dyes.index(d) for d in out]
        self.assertEqual(positions, sorted(positions))

    def test_eligible_pool_drops_primary(self):
        primary = find_entry(self.dyes, "snow-white")
        pool = eligible_pool(primary, self.dyes)
        self.assertEqual(len(pool), len(self.dyes) - 1)
        self.assertNotIn("snow-white", [d.id for d in pool])


if __name__ == "__main__":
    unittest.main()
