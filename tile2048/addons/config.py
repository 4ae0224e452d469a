# -*- coding: utf-8 -*-
"""
Set of config for game modes.
"""
from dataclasses import dataclass

from tile2048.core.terminal import WIN_THRESHOLD

HISTORY_SIZE = 5
REWIND_STEPS = 5
MIN_BOARD_SIZE = 3
MAX_BOARD_SIZE = 6


@dataclass(frozen=True)
class GameMode:
    """
    Configuration of one game mode.

    The win threshold does not scale with the board size. Starting score is per mode.
    """

    size: int
    label: str
    win_threshold: int = WIN_THRESHOLD
    starting_score: int = 0

    def __post_init__(self):
        if not MIN_BOARD_SIZE <= self.size <= MAX_BOARD_SIZE:
            raise ValueError(f"Board size must be between {MIN_BOARD_SIZE} and {MAX_BOARD_SIZE}, got {self.size}")
        if self.win_threshold < 2 or self.win_threshold & (self.win_threshold - 1):
            raise ValueError(f"Win threshold must be a power of two, got {self.win_threshold}")
        if self.starting_score < 0:
            raise ValueError(f"Starting score must be non-negative, got {self.starting_score}")


CLASSIC = GameMode(size=4, label="Classic 4x4")
MINI = GameMode(size=3, label="Mini 3x3")
LARGE = GameMode(size=5, label="Large 5x5")
EXTREME = GameMode(size=6, label="Extreme 6x6")

MODES = {"classic": CLASSIC, "mini": MINI, "large": LARGE, "extreme": EXTREME}


def get_mode(mode: "GameMode | str | int") -> GameMode:
    """
    Resolve a game mode from a mode, a mode name or a board size.

    Parameters
    ----------
    mode : GameMode | str | int
        A ``GameMode`` is returned as is. A name is looked up in ``MODES`` (case-insensitive). A size
        returns the built-in mode of that size.

    Returns
    -------
    GameMode
        The resolved mode.

    Raises
    ------
    ValueError
        If no mode matches.
    """
    if isinstance(mode, GameMode):
        return mode
    if isinstance(mode, str):
        try:
            return MODES[mode.strip().lower()]
        except KeyError:
            raise ValueError(f"Unknown game mode: {mode!r}") from None
    for candidate in MODES.values():
        if candidate.size == mode:
            return candidate
    raise ValueError(f"No game mode with board size {mode!r}")
