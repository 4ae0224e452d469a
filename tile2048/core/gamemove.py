"""
Move directions for the 2048 game, and helpers for determining legal and illegal moves.
"""

from enum import IntEnum

from numpy import ndarray

from tile2048.core.board import Board


class Direction(IntEnum):
    """
    The four moves.

    The integer codes double as the number of counter-clockwise quarter turns that bring the direction
    back to a left slide.
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @classmethod
    def from_keypad(cls, code: int) -> "Direction | None":
        """
        Map a numeric-keypad code (4 left, 6 right, 8 up, 2 down) to a direction.

        Returns
        -------
        Direction or None
            The matching direction, or None for any other code.
        """
        return _KEYPAD.get(code)

    @classmethod
    def from_name(cls, name: str) -> "Direction | None":
        """Case-insensitive lookup by name ('left', 'UP', ...). Unknown names give None."""
        return cls.__members__.get(name.strip().upper())


_KEYPAD = {4: Direction.LEFT, 6: Direction.RIGHT, 8: Direction.UP, 2: Direction.DOWN}


def _can_move_direction(values: ndarray, direction: Direction) -> bool:
    if direction in (Direction.LEFT, Direction.RIGHT):
        near, far = values[:, :-1], values[:, 1:]
    else:
        near, far = values[:-1, :], values[1:, :]

    # ##>: For right/down, the cell that receives the slide is the far one.
    if direction in (Direction.RIGHT, Direction.DOWN):
        near, far = far, near

    can_slide = (near == 0) & (far != 0)
    can_merge = (near != 0) & (near == far)
    return bool(can_slide.any() or can_merge.any())


def can_move(board: Board, direction: int) -> bool:
    """
    Check if a move in ``direction`` would change the board.

    Parameters
    ----------
    board : Board
        The game board to check.
    direction : int
        Direction code (0: left, 1: up, 2: right, 3: down).

    Returns
    -------
    bool
        True if the move is possible, False otherwise.

    Raises
    ------
    ValueError
        If ``direction`` is not one of the four codes.
    """
    return _can_move_direction(board.values, Direction(direction))


def legal_actions_mask(board: Board) -> tuple[bool, bool, bool, bool]:
    """
    Get a boolean mask for all four directions in a single pass.

    Parameters
    ----------
    board : Board
        The game board to check.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask for (left, up, right, down) where True means the move changes the board.
    """
    values = board.values

    # ##>: Compute horizontal and vertical adjacency once.
    left_cols, right_cols = values[:, :-1], values[:, 1:]
    h_can_merge = (left_cols != 0) & (left_cols == right_cols)
    top_rows, bottom_rows = values[:-1, :], values[1:, :]
    v_can_merge = (top_rows != 0) & (top_rows == bottom_rows)

    # ##>: Slide conditions per direction.
    left = (left_cols == 0) & (right_cols != 0)
    right = (right_cols == 0) & (left_cols != 0)
    up = (top_rows == 0) & (bottom_rows != 0)
    down = (bottom_rows == 0) & (top_rows != 0)

    return (
        bool(left.any() or h_can_merge.any()),
        bool(up.any() or v_can_merge.any()),
        bool(right.any() or h_can_merge.any()),
        bool(down.any() or v_can_merge.any()),
    )


def legal_actions(board: Board) -> list[Direction]:
    """
    Directions that would change the board.

    Parameters
    ----------
    board : Board
        The game board to check.

    Returns
    -------
    list[Direction]
        Legal directions, in code order.
    """
    mask = legal_actions_mask(board)
    return [direction for direction in Direction if mask[direction]]


def illegal_actions(board: Board) -> list[Direction]:
    """Directions that would leave the board unchanged."""
    mask = legal_actions_mask(board)
    return [direction for direction in Direction if not mask[direction]]
