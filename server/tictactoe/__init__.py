from .board import BoardSnapshot, Mark
from .rules import WIN_LINES, GameStatus, detect_winner, winning_line, is_legal_move, game_status
from .history import GameHistory, HistoryIndexError, MoveEntry
from .config import GameConfig, PlayerConfig, ServerConfig, AppConfig, load_config
from .session import GameSession
