import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest.mock import patch

import main


class ParseWordsFileTests(unittest.TestCase):
    def test_skips_blank_lines_and_comments(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "words.txt"
            path.write_text("# animals\nPANDA\n\n  KOALA  \n#IGLOO\n", encoding="utf-8")
            self.assertEqual(main.parse_words_file(path), ["PANDA", "KOALA"])


class BuildAlignmentTests(unittest.TestCase):
    def test_defaults_to_horizontal_and_vertical(self) -> None:
        args = main.build_parser().parse_args(["--width", "5", "--height", "5"])
        alignment = main.build_alignment(args)
        self.assertTrue(alignment.lines.horizontal)
        self.assertTrue(alignment.lines.vertical)
        self.assertFalse(alignment.lines.diagonal)
        self.assertEqual(alignment.direction.value, "forward")

    def test_explicit_flags_replace_defaults(self) -> None:
        args = main.build_parser().parse_args(
            ["--width", "5", "--height", "5", "--bends-diagonal", "--block", "--direction", "scatter"]
        )
        alignment = main.build_alignment(args)
        self.assertFalse(alignment.lines.horizontal)
        self.assertTrue(alignment.lines.bends_diagonal)
        self.assertTrue(alignment.lines.block)
        self.assertEqual(alignment.direction.value, "scatter")


class MainTests(unittest.TestCase):
    def setUp(self) -> None:
        patcher = patch.object(main, "configure_logging")
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_prints_board_and_writes_json(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            output = Path(tmpdir) / "board.json"
            stdout = io.StringIO()
            with redirect_stdout(stdout):
                main.main(
                    [
                        "--width", "5", "--height", "1",
                        "--words", "CAT",
                        "--horizontal",
                        "--seed", "4",
                        "--output", str(output),
                    ]
                )
            payload = json.loads(output.read_text(encoding="utf-8"))

        self.assertIn("C A T", stdout.getvalue())
        self.assertEqual(payload["seed"], 4)
        self.assertEqual(payload["placed"][0]["word"], "CAT")
        self.assertEqual(payload["alignment"]["direction"], "forward")
        self.assertTrue(payload["alignment"]["lines"]["horizontal"])
        self.assertFalse(payload["alignment"]["lines"]["bendsStraight"])

    def test_reports_skipped_words(self) -> None:
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            main.main(["--width", "3", "--height", "1", "--words", "CAT", "ELEPHANT", "--horizontal"])
        self.assertIn("Skipped: ELEPHANT", stdout.getvalue())

    def test_missing_words_is_a_usage_error(self) -> None:
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit):
            main.main(["--width", "5", "--height", "5"])

    def test_configuration_error_is_a_usage_error(self) -> None:
        stderr = io.StringIO()
        with redirect_stderr(stderr), self.assertRaises(SystemExit):
            main.main(["--width", "10", "--height", "10", "--words", "ROBOT", "--block"])
        self.assertIn("invalid length 5", stderr.getvalue())

    def test_non_positive_size_is_a_usage_error(self) -> None:
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit):
            main.main(["--width", "0", "--height", "5", "--words", "CAT"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
