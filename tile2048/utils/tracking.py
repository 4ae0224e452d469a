"""
Id-based tile lookup between two boards, for renderers that animate moves.
"""

from tile2048.core.board import Board


def tile_positions(board: Board) -> dict[int, tuple[int, int]]:
    """
    Map every tile id on the board to its position.

    Parameters
    ----------
    board : Board
        The board to index.

    Returns
    -------
    dict[int, tuple[int, int]]
        ``{id: (row, col)}`` for every non-empty cell.
    """
    return {
        tile.id: (row, col)
        for row, line in enumerate(board.rows())
        for col, tile in enumerate(line)
        if not tile.is_empty
    }


def tile_movements(before: Board, after: Board) -> dict[int, tuple[tuple[int, int], tuple[int, int]]]:
    """
    Pair the positions of tiles present on both boards.

    Parameters
    ----------
    before : Board
        The board before the move.
    after : Board
        The board after the move.

    Returns
    -------
    dict[int, tuple[tuple[int, int], tuple[int, int]]]
        ``{id: (old position, new position)}`` for each id found on both boards, whether it moved or not.

    Notes
    -----
    Ids consumed by a merge are absent from ``after`` and spawned ids are absent from ``before``; neither
    appears in the result. Use the move's merge events for the former.
    """
    old_positions = tile_positions(before)
    new_positions = tile_positions(after)
    return {
        tile_id: (old_positions[tile_id], position)
        for tile_id, position in new_positions.items()
        if tile_id in old_positions
    }
