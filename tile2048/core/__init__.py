# -*- coding: utf-8 -*-
"""
This module provides the pure game engine for a 2048-like game.

It includes the immutable tile and board types, the four directional moves with merge tracking,
random tile spawning, and win/lose detection.
"""

from .board import Board
from .gameboard import MoveResult, merge_line, move, slide_and_merge
from .gamemove import Direction, can_move, illegal_actions, legal_actions, legal_actions_mask
from .spawn import TILE_SPAWN_PROBS, draw_value, fill_cells, spawn
from .terminal import WIN_THRESHOLD, is_lose, is_win
from .tile import EMPTY_TILE, MergedTile, Tile

__all__ = [
    "Board",
    "Tile",
    "EMPTY_TILE",
    "MergedTile",
    "Direction",
    "MoveResult",
    "merge_line",
    "slide_and_merge",
    "move",
    "can_move",
    "legal_actions",
    "illegal_actions",
    "legal_actions_mask",
    "TILE_SPAWN_PROBS",
    "draw_value",
    "spawn",
    "fill_cells",
    "WIN_THRESHOLD",
    "is_win",
    "is_lose",
]
