"""
Move engine for the 2048 game: sliding, merging and scoring over a ``Board``.
"""

from dataclasses import dataclass

from numpy import arange, ndarray, rot90, zeros_like

from tile2048.core.board import Board
from tile2048.core.gamemove import Direction
from tile2048.core.tile import MergedTile

# ##>: One merge as (line index, destination index, source id, target id, new value).
LineMerge = tuple[int, int, int, int, int]


@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of one move, before any tile spawns.

    Attributes
    ----------
    board : Board
        The board after sliding and merging.
    score : int
        The running score, including every merge of this move.
    merged_tiles : tuple[MergedTile, ...]
        Merge events of this move, in board scan order.
    """

    board: Board
    score: int
    merged_tiles: tuple[MergedTile, ...] = ()


def merge_line(values: ndarray, ids: ndarray) -> tuple[int, list[int], list[int], list[tuple[int, int, int, int]]]:
    """
    Merge adjacent equal values in one line and compute the score.

    Parameters
    ----------
    values : ndarray
        A 1D array of tile values along the line, in slide order.
    ids : ndarray
        The ids of those tiles.

    Returns
    -------
    score : int
        The total score obtained from merging.
    merged_values : list[int]
        Values of the resulting tiles, packed from the start of the line.
    merged_ids : list[int]
        Ids of the resulting tiles.
    merges : list[tuple[int, int, int, int]]
        One ``(destination index, source id, target id, new value)`` per merge.

    Notes
    -----
    - Zeros (empty cells) are ignored and removed before merging.
    - Merging occurs from the start of the line towards the end.
    - Each tile can only be merged once per call, so ``2 2 2`` gives ``4 2``.
    - The surviving id is the one met first; the other id disappears.
    """
    occupied = values != 0
    line_values = [int(value) for value in values[occupied]]
    line_ids = [int(tile_id) for tile_id in ids[occupied]]

    merged_values, merged_ids, merges = [], [], []
    score = 0

    # ##: Single pass, skipping both tiles on a merge.
    i = 0
    while i < len(line_values):
        if i + 1 < len(line_values) and line_values[i] == line_values[i + 1]:
            new_value = line_values[i] * 2
            merges.append((len(merged_values), line_ids[i + 1], line_ids[i], new_value))
            merged_values.append(new_value)
            merged_ids.append(line_ids[i])
            score += new_value
            i += 2
        else:
            merged_values.append(line_values[i])
            merged_ids.append(line_ids[i])
            i += 1

    return score, merged_values, merged_ids, merges


def slide_and_merge(values: ndarray, ids: ndarray) -> tuple[int, ndarray, ndarray, list[LineMerge]]:
    """
    Slide the grid to the left, merge adjacent cells, and compute the score.

    Parameters
    ----------
    values : ndarray
        The grid of tile values.
    ids : ndarray
        The grid of tile ids.

    Returns
    -------
    score : int
        The total score obtained from all merges.
    new_values : ndarray
        The values after sliding and merging.
    new_ids : ndarray
        The ids after sliding and merging (0 on empty cells).
    merges : list[LineMerge]
        Every merge as ``(row, destination index, source id, target id, new value)``.

    Notes
    -----
    - The function operates on rows, effectively sliding left.
    - For other directions, rotate the grid before calling this function.
    - Empty cells are added to the right side of each row after merging.
    """
    new_values = zeros_like(values)
    new_ids = zeros_like(ids)
    merges: list[LineMerge] = []
    score = 0

    for row in range(values.shape[0]):
        row_score, merged_values, merged_ids, row_merges = merge_line(values[row], ids[row])
        score += row_score
        new_values[row, : len(merged_values)] = merged_values
        new_ids[row, : len(merged_ids)] = merged_ids
        merges.extend((row, *merge) for merge in row_merges)

    return score, new_values, new_ids, merges


def move(board: Board, score: int, direction: int) -> MoveResult:
    """
    Apply one move to the board, without adding a new tile.

    Parameters
    ----------
    board : Board
        The current board. It is never modified.
    score : int
        The score before the move.
    direction : int
        The direction to apply (0: left, 1: up, 2: right, 3: down).

    Returns
    -------
    MoveResult
        The new board, the updated score and the merge events.

    Raises
    ------
    ValueError
        If ``direction`` is not one of the four codes.

    Notes
    -----
    Every direction is a left slide of the board rotated ``direction`` quarter turns. Merge positions are
    mapped back through an index grid rotated the same way.
    """
    turns = int(Direction(direction))
    size = board.size

    positions = rot90(arange(size * size).reshape(size, size), k=turns)
    gained, new_values, new_ids, merges = slide_and_merge(rot90(board.values, k=turns), rot90(board.ids, k=turns))

    merged_tiles = tuple(
        MergedTile(
            source_id=source_id,
            target_id=target_id,
            position=divmod(int(positions[row, index]), size),
            new_value=new_value,
        )
        for row, index, source_id, target_id, new_value in merges
    )
    new_board = Board(rot90(new_values, k=-turns), rot90(new_ids, k=-turns))
    return MoveResult(board=new_board, score=score + gained, merged_tiles=merged_tiles)
