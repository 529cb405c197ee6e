"""
Unit tests for the same-family (monochromatic / analogous) selector.
Run from project root: python -m pytest tests/ -v
"""
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dye_harmony.core_types import Dye, hex_to_rgb  # noqa: E402
from dye_harmony.selector import (  # noqa: E402
    SelectorWeights,
    hue_penalty,
    score_candidates,
    select_analogous_dyes,
)


def _dye(dye_id, hex_str):
    return Dye(id=dye_id, name=dye_id, category="red", rgb=hex_to_rgb(hex_str))


class TestScoring(unittest.TestCase):
    def test_hue_penalty_quadratic(self):
        self.assertEqual(hue_penalty(0, 30), 0.0)
        self.assertEqual(hue_penalty(30, 30), 1.0)
        self.assertEqual(hue_penalty(60, 30), 4.0)

    def test_identical_colour_scores_zero(self):
        base = _dye("base", "#C02020")
        twin = _dye("twin", "#C02020")
        scored = score_candidates(base, [base, twin])
        self.assertEqual(len(scored), 1)
        self.assertAlmostEqual(scored[0].score, 0.0, places=9)

    def test_weights_apply(self):
        base = _dye("base", "#C02020")
        other = _dye("other", "#400000")
        light = score_candidates(base, [other], weights=SelectorWeights(0.0, 0.0, 1.0))
        self.assertAlmostEqual(light[0].score, light[0].dL, places=12)


class TestSelectAnalogous(unittest.TestCase):
    def setUp(self):
        self.base = _dye("base", "#C02020")
        self.palette = [
            self.base,
            _dye("dark", "#400000"),
            _dye("mid", "#B82828"),
            _dye("light", "#FFC0C0"),
            _dye("blue", "#2020C0"),
        ]

    def test_excludes_base_and_far_hues(self):
        picks = select_analogous_dyes(self.base, self.palette)
        ids = [c.dye.id for c in picks]
        self.assertEqual(len(ids), 2)
        self.assertNotIn("base", ids)
        self.assertNotIn("blue", ids)

    def test_results_ordered_by_score(self):
        picks = select_analogous_dyes(self.base, self.palette, num_results=4)
        scores = [c.score for c in picks]
        self.assertEqual(scores, sorted(scores))

    def test_nearest_lightness_wins_without_diversification(self):
        picks = select_analogous_dyes(self.base, self.palette)
        self.assertEqual(picks[0].dye.id, "mid")

    def test_diversify_skips_base_lightness_bin(self):
        picks = select_analogous_dyes(
            self.base, self.palette, diversify_by_lightness=True
        )
        self.assertEqual({c.dye.id for c in picks}, {"dark", "light"})

    def test_top_up_by_hue_when_window_is_sparse(self):
        palette = [self.base, _dye("blue", "#2020C0"), _dye("green", "#20C020")]
        picks = select_analogous_dyes(self.base, palette)
        self.assertEqual({c.dye.id for c in picks}, {"blue", "green"})

    def test_no_duplicates_after_top_up(self):
        palette = [self.base, _dye("mid", "#B82828"), _dye("blue", "#2020C0")]
        picks = select_analogous_dyes(self.base, palette, num_results=2)
        ids = [c.dye.id for c in picks]
        self.assertEqual(len(ids), len(set(ids)))
        self.assertEqual(set(ids), {"mid", "blue"})

    def test_base_at_top_lightness_excludes_top_bin(self):
        # base L is the range maximum, so its bin index clamps to the last bin
        base = _dye("base", "#FFC0C0")
        palette = [
            base,
            _dye("twin", "#FFC0C0"),
            _dye("dark", "#400000"),
            _dye("mid", "#C02020"),
        ]
        picks = select_analogous_dyes(
            base, palette, diversify_by_lightness=True, num_results=3
        )
        self.assertEqual({c.dye.id for c in picks}, {"dark", "mid"})


if __name__ == "__main__":
    unittest.main()
