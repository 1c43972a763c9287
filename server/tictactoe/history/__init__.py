"""Game history tracking."""
from .move import MoveEntry
from .manager import GameHistory, HistoryIndexError

__all__ = [
    "MoveEntry",
    "GameHistory",
    "HistoryIndexError",
]
