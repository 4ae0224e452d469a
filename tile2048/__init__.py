"""
Deterministic engine for the 2048 sliding-tile game, on 3x3 to 6x6 boards.
"""

from .addons import CLASSIC, EXTREME, LARGE, MINI, MODES, GameMode, GameState, HistoryEntry, Phase, get_mode
from .core import Board, Direction, MergedTile, MoveResult, Tile, is_lose, is_win, move, spawn
from .envs import GameSession

__version__ = "0.1.0"
