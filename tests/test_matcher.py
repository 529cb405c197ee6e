"""
Unit tests for the Oklab catalog matcher.
Run from project root: python -m pytest tests/ -v
"""
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dye_harmony.colour_convert import rgb_to_oklab  # noqa: E402
from dye_harmony.core_types import Dye, RGBColor, hex_to_rgb  # noqa: E402
from dye_harmony.matcher import (  # noqa: E402
    find_nearest_dyes_in_oklab,
    targets_from_hues,
)


def _dye(dye_id, hex_str, category="red"):
    return Dye(id=dye_id, name=dye_id.title(), category=category, rgb=hex_to_rgb(hex_str))


class TestFindNearest(unittest.TestCase):
    def setUp(self):
        self.palette = [
            _dye("red", "#FF0000"),
            _dye("green", "#00FF00", "green"),
            _dye("blue", "#0000FF", "blue"),
            _dye("grey", "#808080", "white"),
        ]

    def test_exact_match_has_zero_delta(self):
        out = find_nearest_dyes_in_oklab([RGBColor(0, 255, 0)], self.palette)
        self.assertEqual(len(out), 1)
        self.assertEqual(out[0].dye.id, "green")
        self.assertAlmostEqual(out[0].delta, 0.0, places=9)

    def test_accepts_oklab_targets(self):
        out = find_nearest_dyes_in_oklab([rgb_to_oklab((0, 0, 250))], self.palette)
        self.assertEqual(out[0].dye.id, "blue")

    def test_greedy_without_replacement(self):
        targets = [RGBColor(255, 0, 0), RGBColor(255, 0, 0)]
        out = find_nearest_dyes_in_oklab(targets, self.palette)
        self.assertEqual(len(out), 2)
        self.assertEqual(out[0].dye.id, "red")
        self.assertNotEqual(out[1].dye.id, "red")

    def test_ties_follow_pool_order(self):
        palette = [_dye("first", "#123456"), _dye("second", "#123456")]
        out = find_nearest_dyes_in_oklab([RGBColor(0x12, 0x34, 0x56)], palette)
        self.assertEqual(out[0].dye.id, "first")

    def test_exhausted_pool_skips_targets(self):
        targets = [RGBColor(255, 0, 0)] * 3
        out = find_nearest_dyes_in_oklab(targets, self.palette[:2])
        self.assertEqual([c.dye.id for c in out], ["red", "green"])

    def test_empty_pool(self):
        self.assertEqual(find_nearest_dyes_in_oklab([RGBColor(1, 2, 3)], []), [])

    def test_does_not_mutate_inputs(self):
        targets = [RGBColor(255, 0, 0)]
        palette = list(self.palette)
        find_nearest_dyes_in_oklab(targets, palette)
        self.assertEqual(targets, [RGBColor(255, 0, 0)])
        self.assertEqual([d.id for d in palette], [d.id for d in self.palette])


class TestTargetsFromHues(unittest.TestCase):
    def test_keeps_saturation_and_value(self):
        out = targets_from_hues([120.0, 240.0], 100, 100)
        self.assertEqual(out, [(0, 255, 0), (0, 0, 255)])


if __name__ == "__main__":
    unittest.main()
