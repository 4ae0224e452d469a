"""Game session for the 2048 game: turns, history and rewind."""

import logging
from collections import deque

from numpy.random import Generator, default_rng

from tile2048.addons.config import HISTORY_SIZE, REWIND_STEPS, GameMode, get_mode
from tile2048.addons.types import GameState, HistoryEntry, Phase
from tile2048.core.board import Board
from tile2048.core.gameboard import move
from tile2048.core.gamemove import Direction, legal_actions
from tile2048.core.spawn import fill_cells, spawn
from tile2048.core.terminal import is_lose, is_win
from tile2048.core.tile import MergedTile

logger = logging.getLogger(__name__)

# ##: Ids start at 1, 0 marks empty cells.
FIRST_TILE_ID = 1


class GameSession:
    """
    One game of 2048, owned by a single caller.

    This class applies the move engine, the spawn generator and the terminal checks turn by turn, keeps a
    bounded history of pre-move snapshots, and exposes every turn as an immutable ``GameState``.

    Parameters
    ----------
    mode : GameMode | str | int, optional
        Game mode, mode name or board size (default is the classic 4x4 mode).
    history_size : int, optional
        Maximum number of snapshots kept for rewind (default is 5).
    seed : int, optional
        Seed for the session random source.
    rng : Generator, optional
        Random source to use instead of a seeded one.
    """

    def __init__(
        self,
        mode: "GameMode | str | int" = "classic",
        history_size: int = HISTORY_SIZE,
        seed: int | None = None,
        rng: Generator | None = None,
    ):
        if history_size < 1:
            raise ValueError(f"History size must be at least 1, got {history_size}")

        self._mode = get_mode(mode)
        self._rng = rng if rng is not None else default_rng(seed)
        self._history: deque[HistoryEntry] = deque(maxlen=history_size)
        self._state: GameState
        self.reset()

    @property
    def mode(self) -> GameMode:
        """The mode of the current game."""
        return self._mode

    @property
    def state(self) -> GameState:
        """The current snapshot."""
        return self._state

    @property
    def board(self) -> Board:
        """The current board."""
        return self._state.board

    @property
    def score(self) -> int:
        """The current score."""
        return self._state.score

    @property
    def next_id(self) -> int:
        """Id the next spawned tile will carry."""
        return self._state.next_id

    @property
    def is_win(self) -> bool:
        """True if a tile has reached the win threshold."""
        return self._state.is_win

    @property
    def is_lose(self) -> bool:
        """True if no move can change the board."""
        return self._state.is_lose

    @property
    def phase(self) -> Phase:
        """PLAYING, WON or LOST."""
        return self._state.phase

    @property
    def last_merged_tiles(self) -> tuple[MergedTile, ...]:
        """Merge events of the last successful move."""
        return self._state.last_merged_tiles

    @property
    def history(self) -> tuple[HistoryEntry, ...]:
        """Snapshots taken before each successful move, oldest first."""
        return tuple(self._history)

    @property
    def available_moves(self) -> list[Direction]:
        """Directions that would change the board."""
        return legal_actions(self._state.board)

    def _snapshot(self, board: Board, score: int, next_id: int, **changes) -> GameState:
        fields = {
            "is_win": is_win(board, self._mode.win_threshold),
            "is_lose": is_lose(board),
            "last_merged_tiles": (),
        }
        fields.update(changes)
        return GameState(
            board=board,
            score=score,
            next_id=next_id,
            board_size=self._mode.size,
            move_history=tuple(self._history),
            **fields,
        )

    def reset(self, mode: "GameMode | str | int | None" = None, seed: int | None = None) -> GameState:
        """
        Start a new game on an empty board with two random tiles.

        Parameters
        ----------
        mode : GameMode | str | int, optional
            New mode, mode name or board size. Keeps the current mode when omitted.
        seed : int, optional
            Reseed the session random source.

        Returns
        -------
        GameState
            The initial snapshot.

        Notes
        -----
        - The two seed tiles land on distinct cells, with ids 1 and 2.
        - History is cleared and the score starts at the mode's starting score.
        """
        if mode is not None:
            self._mode = get_mode(mode)
        if seed is not None:
            self._rng = default_rng(seed)

        board, next_id = fill_cells(Board.empty(self._mode.size), 2, FIRST_TILE_ID, rng=self._rng)
        self._history.clear()
        self._state = self._snapshot(board, self._mode.starting_score, next_id)
        logger.debug("New %s game (size %d)", self._mode.label, self._mode.size)
        return self._state

    def apply_move(self, direction: "Direction | int") -> GameState:
        """
        Apply the selected move to the board.

        Parameters
        ----------
        direction : Direction | int
            The move (0: left, 1: up, 2: right, 3: down).

        Returns
        -------
        GameState
            The new snapshot, or the unchanged one if the move did nothing.

        Notes
        -----
        - An unknown direction code is ignored.
        - A move that leaves the board unchanged is a no-op: no history entry, no spawn, no score or id
          change, and the previous merge events stay in place.
        - After a successful move a tile spawns with the next id, and win/lose flags are recomputed.
        """
        try:
            direction = Direction(direction)
        except ValueError:
            logger.warning("Ignoring invalid direction %r", direction)
            return self._state

        current = self._state
        result = move(current.board, current.score, direction)
        if result.board == current.board:
            logger.debug("Move %s changed nothing", direction.name)
            return current

        self._history.append(HistoryEntry(board=current.board, score=current.score, next_id=current.next_id))
        row, col, tile = spawn(result.board, current.next_id, self._rng)
        board = result.board.with_tile(row, col, tile)

        self._state = self._snapshot(
            board, result.score, current.next_id + 1, last_merged_tiles=result.merged_tiles
        )
        logger.debug(
            "Move %s: %d merge(s), score %d, spawned %d at (%d, %d)",
            direction.name,
            len(result.merged_tiles),
            result.score,
            tile.value,
            row,
            col,
        )
        return self._state

    def rewind(self, steps_back: int = REWIND_STEPS) -> GameState:
        """
        Go back up to ``steps_back`` successful moves.

        Parameters
        ----------
        steps_back : int, optional
            Number of moves to undo (default is 5). Clamped to the available history.

        Returns
        -------
        GameState
            The restored snapshot, or the current one if there is nothing to rewind.

        Notes
        -----
        - Board, score and next id come from the restored history entry.
        - History keeps only the entries strictly older than the restored one.
        - The lose flag is cleared and merge events are emptied.
        """
        if not self._history or steps_back < 1:
            return self._state

        index = max(len(self._history) - steps_back, 0)
        undone = len(self._history) - index
        entry = self._history[index]
        kept = list(self._history)[:index]
        self._history.clear()
        self._history.extend(kept)

        self._state = self._snapshot(entry.board, entry.score, entry.next_id, is_lose=False)
        logger.debug("Rewound %d move(s), %d left in history", undone, len(kept))
        return self._state

    def render(self) -> None:
        """
        Render the game board. This method prints the current state of the game board to the console.
        """
        print(self._state.board)
