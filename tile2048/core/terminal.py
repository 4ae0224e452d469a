"""
Win and lose detection.
"""

from numpy import any as np_any

from tile2048.core.board import Board

WIN_THRESHOLD = 2048


def is_lose(board: Board) -> bool:
    """
    Check if the game is lost.

    Parameters
    ----------
    board : Board
        The board to check.

    Returns
    -------
    bool
        True if no cell is empty and no two adjacent cells share a value, False otherwise.
    """
    values = board.values
    if not values.all():
        return False
    return not (np_any(values[:, :-1] == values[:, 1:]) or np_any(values[:-1] == values[1:]))


def is_win(board: Board, threshold: int = WIN_THRESHOLD) -> bool:
    """
    Check if any tile has reached the win threshold.

    Parameters
    ----------
    board : Board
        The board to check.
    threshold : int, optional
        The winning tile value (default is 2048).

    Returns
    -------
    bool
        True if a cell holds exactly ``threshold``.
    """
    return bool(np_any(board.values == threshold))
