# -*- coding: utf-8 -*-
"""
Play 2048 Game in the console.
"""
import argparse

from tile2048.core import Direction
from tile2048.envs import GameSession
from tile2048.utils import format_score

KEYS = {"a": Direction.LEFT, "w": Direction.UP, "d": Direction.RIGHT, "s": Direction.DOWN}


def redraw(session: GameSession):
    """
    Redraw the game board.

    Parameters
    ----------
    session: GameSession
        The game to draw
    """
    print()
    session.render()
    print(f"score={format_score(session.score)}  phase={session.phase.value}")


def key_handler(session: GameSession, key: str) -> bool:
    """
    Handle one line of keyboard input.

    Parameters
    ----------
    session: GameSession
        The game

    key: str
        Key typed by the player

    Returns
    -------
    bool
        False when the player quits.
    """
    if key == "q":
        return False

    if key == "r":
        session.reset()
    elif key == "u":
        session.rewind()
    elif key in KEYS:
        session.apply_move(KEYS[key])
    elif key.isdigit() and Direction.from_keypad(int(key)) is not None:
        session.apply_move(Direction.from_keypad(int(key)))
    else:
        print("keys: w/a/s/d or 8/4/2/6 to move, u to rewind, r to reset, q to quit")
        return True

    redraw(session)
    if session.last_merged_tiles:
        print(f"merged {len(session.last_merged_tiles)} tile(s)")
    return True


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Play 2048 in the console.")
    parser.add_argument("--mode", default="classic", help="classic, mini, large or extreme")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    game = GameSession(mode=args.mode, seed=args.seed)
    redraw(game)

    try:
        while key_handler(game, input("> ").strip().lower()):
            pass
    except (EOFError, KeyboardInterrupt):
        pass
