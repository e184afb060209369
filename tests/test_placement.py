import random
import unittest
from unittest.mock import patch

from wordsearch.core.constants import DirectionMode, PlacementType
from wordsearch.core.exceptions import PlacementError
from wordsearch.core.models import AlignmentConfig, BoardSize, ShapeFlags
from wordsearch.engine.board import Board
from wordsearch.engine.placement import MAX_ATTEMPTS_EXCEEDED, NO_PLACEMENTS, PlacementEngine
from wordsearch.engine.shapes import generate_placements


HORIZONTAL = AlignmentConfig(lines=ShapeFlags(horizontal=True), direction=DirectionMode.FORWARD)


class PlacementEngineTests(unittest.TestCase):
    def test_places_word_on_single_row(self) -> None:
        board = Board.create(BoardSize(width=5, height=1))
        result = PlacementEngine(random.Random(1)).place(board, "CAT", HORIZONTAL)
        self.assertTrue(result.success)
        self.assertIn(
            board.rows()[0],
            [
                ["C", "A", "T", "", ""],
                ["", "C", "A", "T", ""],
                ["", "", "C", "A", "T"],
            ],
        )
        self.assertEqual(result.letters, "CAT")
        self.assertEqual(result.placement.type, PlacementType.HORIZONTAL)

    def test_no_candidates_fails_without_retry(self) -> None:
        board = Board.create(BoardSize(width=2, height=2))
        rng = random.Random(0)
        with patch.object(rng, "choice") as choice:
            result = PlacementEngine(rng).place(board, "LONG", HORIZONTAL)
        choice.assert_not_called()
        self.assertFalse(result.success)
        self.assertEqual(result.reason, NO_PLACEMENTS)
        self.assertEqual(board.filled_count, 0)

    def test_collision_exhausts_attempt_budget(self) -> None:
        board = Board.create(BoardSize(width=3, height=1))
        for col, letter in enumerate("XYZ"):
            board.write((0, col), letter)
        result = PlacementEngine(random.Random(5), max_attempts=10).place(board, "ABC", HORIZONTAL)
        self.assertFalse(result.success)
        self.assertEqual(result.reason, MAX_ATTEMPTS_EXCEEDED)
        self.assertEqual(result.attempts, 10)
        self.assertEqual(board.rows(), [["X", "Y", "Z"]])
        with self.assertRaises(PlacementError):
            result.raise_for_failure("ABC")

    def test_word_may_cross_matching_letter(self) -> None:
        board = Board.create(BoardSize(width=3, height=1))
        board.write((0, 1), "A")
        result = PlacementEngine(random.Random(2)).place(board, "CAT", HORIZONTAL)
        self.assertTrue(result.success)
        self.assertEqual(board.rows(), [["C", "A", "T"]])

    def test_rejected_attempt_writes_nothing(self) -> None:
        board = Board.create(BoardSize(width=3, height=1))
        board.write((0, 2), "Q")
        result = PlacementEngine(random.Random(4), max_attempts=5).place(board, "CAT", HORIZONTAL)
        self.assertFalse(result.success)
        self.assertEqual(board.rows(), [["", "", "Q"]])

    def test_candidate_pool_is_reused(self) -> None:
        engine = PlacementEngine(random.Random(9))
        size = BoardSize(width=6, height=6)
        with patch(
            "wordsearch.engine.placement.generate_placements",
            wraps=generate_placements,
        ) as enumerate_mock:
            engine.place(Board.create(size), "ROBOT", HORIZONTAL)
            engine.place(Board.create(size), "PANDA", HORIZONTAL)
        self.assertEqual(enumerate_mock.call_count, 1)

    def test_backward_writes_reversed_word(self) -> None:
        board = Board.create(BoardSize(width=4, height=1))
        alignment = AlignmentConfig(lines=ShapeFlags(horizontal=True), direction=DirectionMode.BACKWARD)
        result = PlacementEngine(random.Random(0)).place(board, "LAMP", alignment)
        self.assertTrue(result.success)
        self.assertEqual(board.rows(), [["P", "M", "A", "L"]])

    def test_scatter_writes_consistent_permutation(self) -> None:
        alignment = AlignmentConfig(lines=ShapeFlags(vertical=True), direction=DirectionMode.SCATTER)
        for seed in range(10):
            board = Board.create(BoardSize(width=1, height=6))
            result = PlacementEngine(random.Random(seed)).place(board, "PORTAL", alignment)
            self.assertTrue(result.success)
            written = "".join(row[0] for row in board.rows())
            self.assertEqual(written, result.letters)
            self.assertEqual(sorted(written), sorted("PORTAL"))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
