"""
Tests for game modes and state records.
"""

from unittest import TestCase, main

from tile2048.addons.config import CLASSIC, EXTREME, MINI, MODES, WIN_THRESHOLD, GameMode, get_mode
from tile2048.addons.types import GameState, Phase
from tile2048.core.board import Board


class TestGameMode(TestCase):
    """Test mode configuration and resolution."""

    def test_builtin_modes(self):
        """Built-in modes cover sizes 3 to 6 with the same threshold and no starting bonus."""
        self.assertEqual(sorted(mode.size for mode in MODES.values()), [3, 4, 5, 6])
        for mode in MODES.values():
            self.assertEqual(mode.win_threshold, WIN_THRESHOLD)
            self.assertEqual(mode.starting_score, 0)

    def test_get_mode(self):
        """Modes resolve from names, sizes or themselves."""
        self.assertIs(get_mode("Classic"), CLASSIC)
        self.assertIs(get_mode(3), MINI)
        self.assertIs(get_mode(EXTREME), EXTREME)

    def test_unknown_mode(self):
        """Unknown names and sizes are rejected."""
        with self.assertRaises(ValueError):
            get_mode("huge")
        with self.assertRaises(ValueError):
            get_mode(8)

    def test_invalid_mode(self):
        """Sizes outside 3..6 and bad thresholds are rejected."""
        with self.assertRaises(ValueError):
            GameMode(size=2, label="Tiny")
        with self.assertRaises(ValueError):
            GameMode(size=7, label="Huge")
        with self.assertRaises(ValueError):
            GameMode(size=4, label="Odd", win_threshold=1000)


class TestGameState(TestCase):
    """Test the derived phase of a snapshot."""

    def setUp(self):
        self.board = Board.empty(4)

    def test_phase(self):
        """Phase follows the win and lose flags, lose first."""
        self.assertEqual(GameState(self.board, 0, 1).phase, Phase.PLAYING)
        self.assertEqual(GameState(self.board, 0, 1, is_win=True).phase, Phase.WON)
        self.assertEqual(GameState(self.board, 0, 1, is_lose=True).phase, Phase.LOST)
        self.assertEqual(GameState(self.board, 0, 1, is_win=True, is_lose=True).phase, Phase.LOST)


if __name__ == '__main__':
    main()
