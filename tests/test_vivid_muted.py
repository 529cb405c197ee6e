"""
Unit tests for the vivid / muted procedural generator.
Run from project root: python -m pytest tests/ -v
"""
import math
import re
import sys
import unittest
from dataclasses import FrozenInstanceError, replace
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dye_harmony.colour_convert import contrast_ratio  # noqa: E402
from dye_harmony.core_types import InvalidFormat, OklabColor, hex_to_rgb  # noqa: E402
from dye_harmony.params import DEFAULT_PARAMS, Delta  # noqa: E402
from dye_harmony.vivid_muted import (  # noqa: E402
    VividMutedOptions,
    adaptive_adjustment,
    enforce_hue_range,
    find_max_min_distance_color,
    generate_muted_harmony,
    generate_vivid_harmony,
    make_adventure,
    make_bridge,
    make_random,
    nudge_for_contrast,
    sample_hue_offset,
    seeded_random,
)

HEX_RE = re.compile(r"^#[0-9A-F]{6}$")


def _constant(value):
    return lambda: value


class TestRandom(unittest.TestCase):
    def test_lcg_first_value(self):
        rnd = seeded_random(42)
        self.assertAlmostEqual(rnd(), 206659 / 233280)

    def test_lcg_reproducible(self):
        a = seeded_random(7)
        b = seeded_random(7)
        self.assertEqual([a() for _ in range(10)], [b() for _ in range(10)])

    def test_unseeded_in_unit_interval(self):
        rnd = make_random(None)
        for _ in range(50):
            v = rnd()
            self.assertGreaterEqual(v, 0.0)
            self.assertLess(v, 1.0)


class TestHueOffsets(unittest.TestCase):
    def test_vivid_bias_toward_complement(self):
        hits = 0
        for seed in range(1000):
            offset = sample_hue_offset(seeded_random(seed), True)
            if 150.0 <= offset <= 210.0:
                hits += 1
        self.assertGreaterEqual(hits, 200)

    def test_vivid_branches(self):
        # r < 0.3 -> complementary band
        self.assertAlmostEqual(sample_hue_offset(_constant(0.1), True), 156.0)
        # 0.3 <= r < 0.5 and coin < 0.5 -> first triadic band
        self.assertAlmostEqual(sample_hue_offset(_constant(0.4), True), 116.0)
        # otherwise uniform
        self.assertAlmostEqual(sample_hue_offset(_constant(0.9), True), 324.0)

    def test_muted_branches(self):
        self.assertAlmostEqual(sample_hue_offset(_constant(0.1), False), -24.0)
        self.assertAlmostEqual(sample_hue_offset(_constant(0.3), False), 78.0)
        self.assertAlmostEqual(sample_hue_offset(_constant(0.9), False), 324.0)

    def test_enforce_keeps_inside(self):
        self.assertEqual(enforce_hue_range(370.0, (0.0, 20.0), _constant(0.5)), 10.0)

    def test_enforce_redraws(self):
        # 0.01 * 360 = 3.6, inside [0, 20]
        out = enforce_hue_range(200.0, (0.0, 20.0), _constant(0.01))
        self.assertAlmostEqual(out, 3.6)

    def test_enforce_clamps_after_retries(self):
        self.assertEqual(enforce_hue_range(200.0, (0.0, 20.0), _constant(0.99)), 20.0)
        self.assertEqual(enforce_hue_range(10.0, (40.0, 60.0), _constant(0.99)), 40.0)


class TestAdjustments(unittest.TestCase):
    def test_vivid_light_base(self):
        d = adaptive_adjustment(OklabColor(0.9, 0.0, 0.0), True)
        self.assertEqual(d, Delta(0.25, -0.5))

    def test_vivid_saturated_mid_base(self):
        d = adaptive_adjustment(OklabColor(0.5, 0.3, 0.0), True)
        self.assertAlmostEqual(d.chroma, -0.05 - 0.05 * 0.3)
        self.assertEqual(d.lightness, 0.0)

    def test_muted_dark_base(self):
        d = adaptive_adjustment(OklabColor(0.2, 0.0, 0.0), False)
        self.assertEqual(d, Delta(0.12, 0.25))

    def test_muted_balanced_base(self):
        d = adaptive_adjustment(OklabColor(0.5, 0.15, 0.0), False)
        self.assertEqual(d, Delta(-0.08, -0.04))

    def test_near_neutral_adventure_uses_offset_angle(self):
        adv = make_adventure(OklabColor(0.9, 0.0, 0.0), True, 90.0)
        self.assertAlmostEqual(adv.L, 0.4)
        self.assertAlmostEqual(adv.a, 0.0, places=9)
        self.assertAlmostEqual(adv.b, 0.25)

    def test_adventure_respects_chroma_cap(self):
        adv = make_adventure(OklabColor(0.5, 0.12, 0.0), False, 45.0)
        self.assertLessEqual(math.hypot(adv.a, adv.b), 0.125 + 1e-12)

    def test_bridge_of_identical_colours(self):
        c = OklabColor(0.6, 0.1, 0.05)
        bridge = make_bridge(c, c)
        self.assertAlmostEqual(bridge.L, 0.6)
        self.assertAlmostEqual(math.hypot(bridge.a, bridge.b), math.hypot(0.1, 0.05) * 0.85)

    def test_muted_bridge_is_soft(self):
        bridge = find_max_min_distance_color(
            OklabColor(0.5, 0.1, 0.0), OklabColor(0.6, -0.1, 0.0), seeded_random(3)
        )
        self.assertLessEqual(math.hypot(bridge.a, bridge.b), 0.15 * 0.7 * 0.85 + 1e-9)
        self.assertGreaterEqual(bridge.L, 0.3)
        self.assertLessEqual(bridge.L, 0.7)


class TestContrast(unittest.TestCase):
    def test_already_sufficient_is_unchanged(self):
        self.assertEqual(nudge_for_contrast("#abcdef", "#FFFFFF", 1.0), "#ABCDEF")

    def test_darkens_on_light_background(self):
        before = contrast_ratio("#FFFF00", "#FFFFFF")
        out = nudge_for_contrast("#FFFF00", "#FFFFFF", 1.8)
        self.assertGreater(contrast_ratio(out, "#FFFFFF"), before)

    def test_lightens_on_dark_background(self):
        out = nudge_for_contrast("#000000", "#000000", 30.0)
        self.assertGreater(contrast_ratio(out, "#000000"), 1.0)

    def test_impossible_threshold_terminates(self):
        out = nudge_for_contrast("#FFFFFF", "#FFFFFF", 30.0)
        self.assertRegex(out, HEX_RE)
        self.assertLess(contrast_ratio(out, "#FFFFFF"), 30.0)


class TestGenerators(unittest.TestCase):
    def test_seeded_reproducible(self):
        self.assertEqual(
            generate_muted_harmony("#808080", 42), generate_muted_harmony("#808080", 42)
        )
        self.assertEqual(
            generate_vivid_harmony("#808080", 42), generate_vivid_harmony("#808080", 42)
        )

    def test_base_is_echoed(self):
        out = generate_vivid_harmony("#aa3322", 5)
        self.assertEqual(len(out), 3)
        self.assertEqual(out[0], "#AA3322")

    def test_base_echo_is_canonical_for_both_generators(self):
        for generate in (generate_vivid_harmony, generate_muted_harmony):
            self.assertEqual(generate("aa3322", 5)[0], "#AA3322")
            self.assertEqual(generate("#1e90ff", 9)[0], "#1E90FF")

    def test_outputs_are_valid_hex(self):
        for base in ("#000000", "#FFFFFF", "#808080", "#FF0000", "#1E90FF", "#F5F5DC"):
            for seed in range(20):
                for generate in (generate_vivid_harmony, generate_muted_harmony):
                    for hex_code in generate(base, seed):
                        self.assertRegex(hex_code, HEX_RE)
                        hex_to_rgb(hex_code)

    def test_unseeded_runs(self):
        out = generate_vivid_harmony("#336699")
        self.assertEqual(len(out), 3)

    def test_invalid_base(self):
        with self.assertRaises(InvalidFormat):
            generate_vivid_harmony("#12345", 1)

    def test_options_and_params_accepted(self):
        opts = VividMutedOptions(background_hex="#000000", hue_offset_range=(0.0, 30.0))
        params = replace(DEFAULT_PARAMS, min_contrast_on_bg=1.0)
        out = generate_muted_harmony("#336699", 8, options=opts, params=params)
        self.assertEqual(len(out), 3)

    def test_params_immutable(self):
        with self.assertRaises(FrozenInstanceError):
            DEFAULT_PARAMS.min_contrast_on_bg = 2.0  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
