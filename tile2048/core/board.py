"""
Immutable N×N board of tiles, backed by numpy arrays of values and ids.
"""

from typing import Iterator, Sequence

from numpy import arange, argwhere, array_equal, asarray, count_nonzero, int64, ndarray, unique, zeros

from tile2048.core.tile import EMPTY_TILE, Tile


def _frozen(data: ndarray) -> ndarray:
    # ##>: Own the memory so no outside view can write into the board.
    frozen = data.astype(int64, copy=True)
    frozen.flags.writeable = False
    return frozen


class Board:
    """
    An N×N grid of tiles.

    The board never changes once built: every transition returns a new ``Board``. Values and ids are kept
    in two read-only ``int64`` arrays of identical shape, so board-wide checks stay vectorised.

    Parameters
    ----------
    values : array_like
        Square 2D grid of tile values (0 for empty, otherwise a power of two).
    ids : array_like, optional
        Grid of tile ids, same shape as ``values``. When omitted, non-empty cells are numbered ``1..k`` in
        row-major order.

    Raises
    ------
    ValueError
        If the grid is not square, a value is not 0 or a power of two, an id is negative, an empty cell
        carries an id, or two tiles share an id.
    """

    __slots__ = ("_values", "_ids")

    def __init__(self, values, ids=None):
        values = asarray(values)
        if values.ndim != 2 or values.shape[0] != values.shape[1] or values.shape[0] == 0:
            raise ValueError(f"Board must be a non-empty square grid, got shape {values.shape}")

        values = values.astype(int64)
        if ((values < 0) | (values == 1) | ((values & (values - 1)) != 0)).any():
            raise ValueError("Tile values must be 0 or a power of two greater than 1")

        occupied = values != 0
        if ids is None:
            ids = zeros(values.shape, dtype=int64)
            ids[occupied] = arange(1, count_nonzero(occupied) + 1)
        else:
            ids = asarray(ids).astype(int64)
            if ids.shape != values.shape:
                raise ValueError(f"Ids shape {ids.shape} does not match values shape {values.shape}")
            if (ids < 0).any():
                raise ValueError("Tile ids must be non-negative")
            if (ids[~occupied] != 0).any():
                raise ValueError("Empty cells must carry id 0")
            if len(unique(ids[occupied])) != count_nonzero(occupied):
                raise ValueError("Tile ids must be unique among non-empty cells")

        self._values = _frozen(values)
        self._ids = _frozen(ids)

    @classmethod
    def empty(cls, size: int) -> "Board":
        """Build a board with every cell empty."""
        return cls(zeros((size, size), dtype=int64))

    @classmethod
    def from_tiles(cls, rows: Sequence[Sequence[Tile]]) -> "Board":
        """Build a board from rows of ``Tile`` objects."""
        values = [[tile.value for tile in row] for row in rows]
        ids = [[tile.id for tile in row] for row in rows]
        return cls(values, ids)

    @property
    def size(self) -> int:
        """Number of rows (and columns)."""
        return self._values.shape[0]

    @property
    def values(self) -> ndarray:
        """Read-only grid of tile values."""
        return self._values

    @property
    def ids(self) -> ndarray:
        """Read-only grid of tile ids."""
        return self._ids

    @property
    def max_value(self) -> int:
        """Largest tile value on the board."""
        return int(self._values.max())

    def __getitem__(self, position: tuple[int, int]) -> Tile:
        row, col = position
        value = int(self._values[row, col])
        if value == 0:
            return EMPTY_TILE
        return Tile(int(self._ids[row, col]), value)

    def rows(self) -> list[list[Tile]]:
        """Return the board as a list of rows of ``Tile`` objects."""
        return [[self[row, col] for col in range(self.size)] for row in range(self.size)]

    def __iter__(self) -> Iterator[list[Tile]]:
        return iter(self.rows())

    def empty_cells(self) -> list[tuple[int, int]]:
        """Positions (row, col) of every empty cell, in row-major order."""
        return [(int(row), int(col)) for row, col in argwhere(self._values == 0)]

    def count_empty(self) -> int:
        """Number of empty cells."""
        return int(self._values.size - count_nonzero(self._values))

    def is_full(self) -> bool:
        """True if no cell is empty."""
        return bool(self._values.all())

    def with_tile(self, row: int, col: int, tile: Tile) -> "Board":
        """
        Return a copy of the board with ``tile`` placed at (row, col).

        Parameters
        ----------
        row : int
            Target row.
        col : int
            Target column.
        tile : Tile
            Tile to place. An empty tile clears the cell.

        Returns
        -------
        Board
            The new board; ``self`` is left untouched.
        """
        values = self._values.copy()
        ids = self._ids.copy()
        values[row, col] = tile.value
        ids[row, col] = 0 if tile.is_empty else tile.id
        return Board(values, ids)

    def find(self, tile_id: int) -> tuple[int, int] | None:
        """Position of the tile carrying ``tile_id``, or None if it is not on the board."""
        if tile_id == 0:
            return None
        found = argwhere((self._ids == tile_id) & (self._values != 0))
        if len(found) == 0:
            return None
        return int(found[0][0]), int(found[0][1])

    def same_tiles(self, other: "Board") -> bool:
        """True if both boards hold the same values and the same ids in every cell."""
        return self == other and bool(array_equal(self._ids, other._ids))

    def __eq__(self, other: object) -> bool:
        # ##: Equality by value only, ids are ignored.
        if not isinstance(other, Board):
            return NotImplemented
        return bool(array_equal(self._values, other._values))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Board({self._values.tolist()!r}, ids={self._ids.tolist()!r})"

    def __str__(self) -> str:
        return "\n".join(" \t".join(map(str, row)) for row in self._values.tolist())
