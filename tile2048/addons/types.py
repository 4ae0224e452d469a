# -*- coding: utf-8 -*-
"""
Set of types for this project.
"""
from dataclasses import dataclass, field
from enum import Enum

from tile2048.core.board import Board
from tile2048.core.tile import MergedTile


class Phase(Enum):
    """Turn-level state of a session."""

    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class HistoryEntry:
    """
    Snapshot taken before a successful move.
    """

    board: Board
    score: int
    next_id: int


@dataclass(frozen=True)
class GameState:
    """
    Session snapshot handed to the presentation layer.
    """

    board: Board
    score: int
    next_id: int
    is_win: bool = False
    is_lose: bool = False
    board_size: int = 4
    last_merged_tiles: tuple[MergedTile, ...] = ()
    move_history: tuple[HistoryEntry, ...] = field(default=())

    @property
    def phase(self) -> Phase:
        """LOST takes precedence over WON: a won board with no moves left is over."""
        if self.is_lose:
            return Phase.LOST
        if self.is_win:
            return Phase.WON
        return Phase.PLAYING
