"""..."""
from .config import (
    CLASSIC,
    EXTREME,
    HISTORY_SIZE,
    LARGE,
    MINI,
    MODES,
    REWIND_STEPS,
    WIN_THRESHOLD,
    GameMode,
    get_mode,
)
from .types import GameState, HistoryEntry, Phase
