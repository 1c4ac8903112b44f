import unittest

from ludo_chat.engine.board import DEFAULT_BOARD, Board
from ludo_chat.engine.types import Color, StretchCell
from ludo_chat.exceptions import InvalidBoardVariantError


def entries(safe=(0, 8, 13, 21, 26, 34, 39, 47)):
    return [{"position": i, "type": "normal", "safe": i in safe} for i in range(52)]


class TestDefaultBoard(unittest.TestCase):
    def test_safe_cells(self):
        self.assertEqual(DEFAULT_BOARD.safe_cells(), [0, 8, 13, 21, 26, 34, 39, 47])
        self.assertTrue(DEFAULT_BOARD.is_safe(13))
        self.assertFalse(DEFAULT_BOARD.is_safe(14))

    def test_start_offsets_and_entry_cells(self):
        starts = [DEFAULT_BOARD.start_offset(c) for c in Color]
        self.assertEqual(starts, [0, 13, 26, 39])
        entries_ = [DEFAULT_BOARD.entry_cell(c) for c in Color]
        self.assertEqual(entries_, [51, 12, 25, 38])

    def test_relative_wraps_around_ring(self):
        self.assertEqual(DEFAULT_BOARD.relative(Color.GREEN, 13), 0)
        self.assertEqual(DEFAULT_BOARD.relative(Color.GREEN, 12), 51)
        self.assertEqual(DEFAULT_BOARD.absolute(Color.BLUE, 20), 7)

    def test_home_stretches_are_disjoint(self):
        seen = set()
        for color in Color:
            stretch = DEFAULT_BOARD.home_stretch(color)
            self.assertEqual(len(stretch), 5)
            self.assertEqual(stretch[0], StretchCell(color, 0))
            self.assertTrue(seen.isdisjoint(stretch))
            seen.update(stretch)

    def test_is_safe_rejects_cells_off_the_ring(self):
        for cell in (-1, 52):
            with self.assertRaises(ValueError):
                DEFAULT_BOARD.is_safe(cell)

    def test_safe_mask_matches_cells(self):
        mask = DEFAULT_BOARD.safe_mask()
        self.assertEqual(mask.shape, (52,))
        self.assertEqual(int(mask.sum()), 8)
        self.assertTrue(mask[47])


class TestCustomBoard(unittest.TestCase):
    def test_valid_entries_in_any_order(self):
        raw = list(reversed(entries(safe=(5,))))
        board = Board.from_entries(raw, name="reversed")
        self.assertEqual(board.name, "reversed")
        self.assertEqual(board.safe_cells(), [5])
        self.assertEqual([c.position for c in board.cells], list(range(52)))

    def test_round_trip_entries(self):
        board = Board.from_entries(entries())
        self.assertEqual(board.to_entries(), entries())

    def test_wrong_cell_count(self):
        with self.assertRaises(InvalidBoardVariantError):
            Board.from_entries(entries()[:51])

    def test_duplicate_position(self):
        raw = entries()
        raw[10] = {"position": 11, "type": "normal", "safe": False}
        with self.assertRaises(InvalidBoardVariantError):
            Board.from_entries(raw)

    def test_position_out_of_range(self):
        raw = entries()
        raw[51] = {"position": 52, "type": "normal", "safe": False}
        with self.assertRaises(InvalidBoardVariantError):
            Board.from_entries(raw)

    def test_missing_safe_flag(self):
        raw = entries()
        del raw[3]["safe"]
        with self.assertRaises(InvalidBoardVariantError):
            Board.from_entries(raw)

    def test_non_boolean_safe_flag(self):
        raw = entries()
        raw[3]["safe"] = "yes"
        with self.assertRaises(InvalidBoardVariantError):
            Board.from_entries(raw)

    def test_not_a_list(self):
        with self.assertRaises(InvalidBoardVariantError):
            Board.from_entries({"cells": entries()})


if __name__ == "__main__":
    unittest.main()
