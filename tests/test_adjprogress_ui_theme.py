import tempfile
import unittest
from pathlib import Path

from adjprogress_ui.style.theme import DEFAULT_TOKENS, load_theme_file, validate_theme_tokens


class ThemeTokensTests(unittest.TestCase):
    def test_validate_theme_defaults(self) -> None:
        tokens = validate_theme_tokens()
        self.assertEqual(tokens, DEFAULT_TOKENS)

    def test_validate_theme_accepts_partial_override(self) -> None:
        tokens = validate_theme_tokens({"progress_fill": "#112233", "progress_tip_width_dp": 5})
        self.assertEqual(tokens.progress_fill, "#112233")
        self.assertEqual(tokens.progress_tip_width_dp, 5.0)
        self.assertEqual(tokens.progress_track, DEFAULT_TOKENS.progress_track)

    def test_validate_theme_rejects_unknown_token(self) -> None:
        with self.assertRaisesRegex(ValueError, "Unknown theme token"):
            validate_theme_tokens({"unknown": "#112233"})

    def test_validate_theme_rejects_invalid_hex_color(self) -> None:
        with self.assertRaisesRegex(ValueError, "hex color"):
            validate_theme_tokens({"progress_tip": "white"})

    def test_validate_theme_rejects_negative_lengths(self) -> None:
        with self.assertRaisesRegex(ValueError, "non-negative"):
            validate_theme_tokens({"progress_corner_radius_dp": -1})

    def test_validate_theme_rejects_non_positive_density(self) -> None:
        with self.assertRaisesRegex(ValueError, "positive number"):
            validate_theme_tokens({"density": 0})

    def test_load_theme_file_reads_theme_table(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "theme.toml"
            path.write_text('[theme]\nprogress_fill = "#00FF00"\ndensity = 2.0\n', encoding="utf-8")
            tokens = load_theme_file(path)
        self.assertEqual(tokens.progress_fill, "#00FF00")
        self.assertEqual(tokens.density, 2.0)

    def test_load_theme_file_reads_top_level_tokens(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "theme.toml"
            path.write_text("progress_tip_width_dp = 1.5\n", encoding="utf-8")
            tokens = load_theme_file(path)
        self.assertEqual(tokens.progress_tip_width_dp, 1.5)

    def test_load_theme_file_missing(self) -> None:
        with self.assertRaises(FileNotFoundError):
            load_theme_file("/nonexistent/theme.toml")


if __name__ == "__main__":
    unittest.main()
