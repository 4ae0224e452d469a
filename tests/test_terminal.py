"""
Tests for win and lose detection.
"""

from unittest import TestCase, main

import numpy as np

from tile2048.core.board import Board
from tile2048.core.terminal import is_lose, is_win

LOCKED = np.array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])


class TestIsLose(TestCase):
    """Test lose detection."""

    def test_locked_board(self):
        """A full board with no equal neighbours is lost."""
        self.assertTrue(is_lose(Board(LOCKED)))

    def test_one_horizontal_pair(self):
        """Changing one cell to match a row neighbour makes the board playable."""
        values = LOCKED.copy()
        values[0, 0] = 4
        self.assertFalse(is_lose(Board(values)))

    def test_one_vertical_pair(self):
        """Changing one cell to match a column neighbour makes the board playable."""
        values = LOCKED.copy()
        values[3, 3] = 4
        self.assertFalse(is_lose(Board(values)))

    def test_empty_cell(self):
        """A board with an empty cell is never lost."""
        values = LOCKED.copy()
        values[1, 2] = 0
        self.assertFalse(is_lose(Board(values)))

    def test_idempotent(self):
        """Calling twice gives the same answer."""
        board = Board(LOCKED)
        self.assertEqual(is_lose(board), is_lose(board))


class TestIsWin(TestCase):
    """Test win detection."""

    def test_win_tile(self):
        """Any 2048 tile wins, wherever it is."""
        board = Board.empty(5).with_tile(4, 3, Board([[2048]])[0, 0])
        self.assertTrue(is_win(board))

    def test_no_win_tile(self):
        """A board without the threshold value does not win."""
        self.assertFalse(is_win(Board(LOCKED)))

    def test_custom_threshold(self):
        """The threshold is configurable."""
        board = Board([[64, 0, 0], [0, 0, 0], [0, 0, 0]])
        self.assertTrue(is_win(board, threshold=64))
        self.assertFalse(is_win(board, threshold=128))

    def test_lost_board_can_be_won(self):
        """Win and lose are independent checks."""
        values = LOCKED.copy()
        values[0, 0] = 2048
        board = Board(values)
        self.assertTrue(is_win(board))
        self.assertTrue(is_lose(board))


if __name__ == '__main__':
    main()
