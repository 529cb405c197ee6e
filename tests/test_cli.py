"""
Smoke tests for the suggest_palette command line.
Run from project root: python -m pytest tests/ -v
"""
import io
import sys
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import suggest_palette as cli  # noqa: E402
from dye_harmony.core_types import InvalidFormat  # noqa: E402
from dye_harmony.palette_data import build_catalog  # noqa: E402


def _run(argv):
    out = io.StringIO()
    err = io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        code = cli.main(argv)
    return code, out.getvalue(), err.getvalue()


class TestCli(unittest.TestCase):
    def test_catalog_pattern(self):
        code, out, _ = _run(["dalamud-red", "--pattern", "triadic", "--seed", "3"])
        self.assertEqual(code, 0)
        self.assertIn("Dalamud Red", out)
        self.assertIn("Seed: 3", out)

    def test_name_lookup_and_freeform(self):
        code, out, _ = _run(["Snow White", "--pattern", "vivid", "--seed", "42"])
        self.assertEqual(code, 0)
        self.assertEqual(out.count("(generated)"), 2)

    def test_hex_primary(self):
        code, out, _ = _run(["#aa3322", "--pattern", "muted", "--hue-range", "0", "90"])
        self.assertEqual(code, 0)
        self.assertIn("#AA3322", out)

    def test_exclude_tag_and_category(self):
        code, _, _ = _run(
            ["snow-white", "--pattern", "random", "--category", "rare", "--exclude-tag", "metallic"]
        )
        self.assertEqual(code, 0)

    def test_freeform_flags_warn_on_catalog_pattern(self):
        code, out, _ = _run(["dalamud-red", "--pattern", "contrast", "--hue-range", "0", "10"])
        self.assertEqual(code, 0)
        self.assertIn("[warn]", out)

    def test_list_patterns(self):
        code, out, _ = _run(["--list-patterns"])
        self.assertEqual(code, 0)
        self.assertIn("split-complementary", out)

    def test_errors_exit_2(self):
        for argv in (
            [],
            ["not-a-dye-or-hex"],
            ["dalamud-red", "--pattern", "tetradic"],
            ["dalamud-red", "--pattern", "random", "--category", "nonexistent"],
            ["dalamud-red", "--pattern", "vivid", "--background", "#12"],
        ):
            code, _, err = _run(argv)
            self.assertEqual(code, 2, msg=argv)
            self.assertIn("[error]", err)

    def test_resolve_primary(self):
        catalog = build_catalog()
        self.assertEqual(cli.resolve_primary(catalog, "jet-black").id, "jet-black")
        custom = cli.resolve_primary(catalog, "#00ff00")
        self.assertEqual(custom.id, "custom-00ff00")
        self.assertEqual(custom.source, "custom")
        with self.assertRaises(InvalidFormat):
            cli.resolve_primary(catalog, "zzz")


if __name__ == "__main__":
    unittest.main()
