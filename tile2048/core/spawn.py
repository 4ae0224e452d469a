"""
Random tile spawning after a successful move.
"""

from numpy.random import PCG64DXSM, Generator, default_rng

from tile2048.core.board import Board
from tile2048.core.tile import Tile

# ##>: Tile spawn probabilities for 2048 game (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: One draw over ten outcomes; as many outcomes as TILE_SPAWN_PROBS[4] allows give a 4.
_SPAWN_OUTCOMES = 10
_FOUR_OUTCOMES = round(TILE_SPAWN_PROBS[4] * _SPAWN_OUTCOMES)

# ##>: Module-level generator for performance (avoids repeated initialization).
_GENERATOR = default_rng(PCG64DXSM())


def _resolve(rng: Generator | None, seed: int | None) -> Generator:
    if rng is not None:
        return rng
    return default_rng(seed) if seed is not None else _GENERATOR


def draw_value(rng: Generator | None = None) -> int:
    """
    Draw the value of a new tile: 2 with probability 0.9, 4 with probability 0.1.

    Parameters
    ----------
    rng : Generator, optional
        Random source. Defaults to the module-level generator.

    Returns
    -------
    int
        2 or 4.
    """
    rng = _resolve(rng, None)
    return 4 if rng.integers(_SPAWN_OUTCOMES) < _FOUR_OUTCOMES else 2


def spawn(board: Board, tile_id: int, rng: Generator | None = None) -> tuple[int, int, Tile]:
    """
    Pick an empty cell and a value for a new tile.

    Parameters
    ----------
    board : Board
        The board after the move. It is not modified.
    tile_id : int
        Id stamped on the new tile.
    rng : Generator, optional
        Random source. Defaults to the module-level generator.

    Returns
    -------
    tuple[int, int, Tile]
        Row, column and the new tile.

    Raises
    ------
    ValueError
        If the board has no empty cell.

    Notes
    -----
    The cell is drawn uniformly among all empty cells.
    """
    empty_cells = board.empty_cells()
    if not empty_cells:
        raise ValueError("Cannot spawn a tile on a full board")

    rng = _resolve(rng, None)
    row, col = empty_cells[int(rng.integers(len(empty_cells)))]
    return row, col, Tile(tile_id, draw_value(rng))


def fill_cells(
    board: Board, number_tile: int, first_id: int, rng: Generator | None = None, seed: int | None = None
) -> tuple[Board, int]:
    """
    Fill empty cells with new tiles (2 or 4), each at a distinct cell.

    Parameters
    ----------
    board : Board
        The current board. It is not modified.
    number_tile : int
        Number of new tiles to add.
    first_id : int
        Id of the first new tile; following tiles get consecutive ids.
    rng : Generator, optional
        Random source. Takes precedence over ``seed``.
    seed : int, optional
        Random number generator seed for reproducibility.

    Returns
    -------
    board : Board
        A new board holding the added tiles.
    next_id : int
        The first id not used.

    Notes
    -----
    If there are fewer empty cells than requested, it fills all available cells.
    """
    rng = _resolve(rng, seed)
    next_id = first_id
    for _ in range(min(number_tile, board.count_empty())):
        row, col, tile = spawn(board, next_id, rng)
        board = board.with_tile(row, col, tile)
        next_id += 1
    return board, next_id
