"""Game session that coordinates the move gate, history and status."""
from __future__ import annotations
import logging

from .board import BoardSnapshot, Mark
from .config import GameConfig
from .history import GameHistory, MoveEntry
from .rules import GameStatus, detect_winner, game_status, is_legal_move

logger = logging.getLogger(__name__)


class GameSession:
    """Explicit state holder for one game; the UI re-reads it after each change."""

    def __init__(self, config: GameConfig | None = None):
        self.config = config or GameConfig()
        self.history = GameHistory()

    @property
    def board(self) -> BoardSnapshot:
        return self.history.current_snapshot()

    @property
    def turn(self) -> Mark:
        return self.history.current_turn()

    @property
    def winner(self) -> Mark | None:
        return detect_winner(self.board)

    def select_cell(self, index: int) -> bool:
        """Play the current player's mark at `index`.

        Returns False and leaves the game untouched when the cell is
        taken, out of range, or the game already has a winner.
        """
        board = self.board
        if not is_legal_move(board, index):
            logger.debug("Ignoring selection of cell %s at move %d", index, self.history.current)
            return False

        mark = self.turn
        move = self.history.append(board.with_mark(index, mark))
        logger.info("Move %d: %s takes cell %d", move, self.config.player_for(mark).display_name, index)
        return True

    def jump_to(self, move: int) -> BoardSnapshot:
        """Show an earlier (or later) position. Raises HistoryIndexError."""
        snapshot = self.history.jump_to(move)
        logger.info("Jumped to move %d of %d", move, len(self.history) - 1)
        return snapshot

    def status(self) -> GameStatus:
        return game_status(self.board, self.turn, self.config)

    def moves(self) -> list[MoveEntry]:
        return self.history.moves()

    def to_dict(self) -> dict:
        """Full view state for rendering."""
        config = self.config
        return {
            "board": self.board.to_list(),
            "symbols": [config.symbol_for(mark) for mark in self.board],
            "current_move": self.history.current,
            "history_length": len(self.history),
            "turn": self.turn.value,
            "status": self.status().to_dict(),
            "moves": [m.to_dict() for m in self.moves()],
            "players": {
                Mark.PLAYER_A.value: config.player_a.to_dict(),
                Mark.PLAYER_B.value: config.player_b.to_dict(),
            },
        }
