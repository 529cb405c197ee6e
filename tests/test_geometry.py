"""
Unit tests for pattern geometry (hue targets).
Run from project root: python -m pytest tests/ -v
"""
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dye_harmony.geometry import (  # noqa: E402
    ANGLE_PATTERNS,
    calculate_analogous,
    calculate_contrast,
    calculate_similar,
    calculate_split_complementary,
    calculate_triadic,
    target_hues,
)


class TestHueRules(unittest.TestCase):
    def test_triadic(self):
        self.assertEqual(calculate_triadic(0), (120.0, 240.0))
        self.assertEqual(calculate_triadic(300), (60.0, 180.0))

    def test_split_complementary(self):
        self.assertEqual(calculate_split_complementary(10), (160.0, 220.0))
        self.assertEqual(calculate_split_complementary(200), (350.0, 50.0))

    def test_analogous_and_similar_wrap_below_zero(self):
        self.assertEqual(calculate_analogous(10), (340.0, 40.0))
        self.assertEqual(calculate_similar(5), (350.0, 20.0))

    def test_contrast_order(self):
        self.assertEqual(calculate_contrast(300), (120.0, 30.0))

    def test_all_results_in_range(self):
        for pattern in ANGLE_PATTERNS:
            for base in (0, 1, 59.5, 179, 180, 300, 359):
                for h in target_hues(pattern, base):
                    self.assertGreaterEqual(h, 0.0)
                    self.assertLess(h, 360.0)

    def test_patterns_without_hue_targets(self):
        for pattern in ("monochromatic", "clash", "vivid", "muted", "random"):
            with self.assertRaises(ValueError):
                target_hues(pattern, 0)


if __name__ == "__main__":
    unittest.main()
