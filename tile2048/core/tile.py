"""
Value records for single cells and merge events.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Tile:
    """
    Content of one board cell.

    Attributes
    ----------
    id : int
        Stable identity, assigned once when the tile spawns. Zero for empty cells.
    value : int
        A power of two, or 0 for an empty cell.
    """

    id: int
    value: int

    @property
    def is_empty(self) -> bool:
        """True if the cell holds no tile."""
        return self.value == 0


EMPTY_TILE = Tile(0, 0)


@dataclass(frozen=True)
class MergedTile:
    """
    One merge that happened during a move.

    Attributes
    ----------
    source_id : int
        Id of the tile that was consumed.
    target_id : int
        Id of the surviving tile, which now holds ``new_value``.
    position : tuple[int, int]
        Board position (row, col) of the surviving tile after the move.
    new_value : int
        The doubled value.
    """

    source_id: int
    target_id: int
    position: tuple[int, int]
    new_value: int
