"""Game and server configuration dataclasses."""
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal
import json
import os

from .board import Mark

CONFIG_ENV_VAR = "TICTACTOE_CONFIG"


@dataclass
class PlayerConfig:
    """Configuration for a single player."""
    symbol: str
    name: str | None = None

    @property
    def display_name(self) -> str:
        """Name shown in the status line, e.g. "Red (X)", or just the symbol."""
        if self.name:
            return f"{self.name} ({self.symbol})"
        return self.symbol

    def to_dict(self) -> dict:
        return {
            "symbol": self.symbol,
            "name": self.name,
        }

    @classmethod
    def from_dict(cls, data: dict) -> PlayerConfig:
        return cls(**data)


@dataclass
class GameConfig:
    """Complete game configuration."""
    player_a: PlayerConfig = field(default_factory=lambda: PlayerConfig(symbol="X"))
    player_b: PlayerConfig = field(default_factory=lambda: PlayerConfig(symbol="O"))
    # Report a full board without a winner as "Draw" instead of "Next player"
    report_draw: bool = True

    def __post_init__(self):
        if not self.player_a.symbol or not self.player_b.symbol:
            raise ValueError("Player symbols must be non-empty")
        if self.player_a.symbol == self.player_b.symbol:
            raise ValueError(f"Players cannot share the symbol {self.player_a.symbol!r}")

    def player_for(self, mark: Mark) -> PlayerConfig:
        if mark is Mark.PLAYER_A:
            return self.player_a
        if mark is Mark.PLAYER_B:
            return self.player_b
        raise ValueError("EMPTY is not a player")

    def symbol_for(self, mark: Mark) -> str:
        """Display symbol of a mark; empty cells render as an empty string."""
        if mark.is_empty:
            return ""
        return self.player_for(mark).symbol

    def to_dict(self) -> dict:
        return {
            "player_a": self.player_a.to_dict(),
            "player_b": self.player_b.to_dict(),
            "report_draw": self.report_draw,
        }

    @classmethod
    def from_dict(cls, data: dict) -> GameConfig:
        defaults = cls()
        return cls(
            player_a=PlayerConfig.from_dict(data["player_a"]) if "player_a" in data else defaults.player_a,
            player_b=PlayerConfig.from_dict(data["player_b"]) if "player_b" in data else defaults.player_b,
            report_draw=data.get("report_draw", True),
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_json(cls, json_str: str) -> GameConfig:
        return cls.from_dict(json.loads(json_str))


@dataclass
class ServerConfig:
    """Where the web UI listens."""
    host: str = "0.0.0.0"
    port: int = 7000
    log_level: Literal["debug", "info", "warning", "error"] = "info"

    def to_dict(self) -> dict:
        return {
            "host": self.host,
            "port": self.port,
            "log_level": self.log_level,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ServerConfig:
        return cls(
            host=data.get("host", "0.0.0.0"),
            port=data.get("port", 7000),
            log_level=data.get("log_level", "info"),
        )


@dataclass
class AppConfig:
    game: GameConfig = field(default_factory=GameConfig)
    server: ServerConfig = field(default_factory=ServerConfig)

    @classmethod
    def from_dict(cls, data: dict) -> AppConfig:
        return cls(
            game=GameConfig.from_dict(data.get("game", {})),
            server=ServerConfig.from_dict(data.get("server", {})),
        )


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from `path`, else from $TICTACTOE_CONFIG, else defaults."""
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return AppConfig()
    return AppConfig.from_dict(json.loads(Path(path).read_text()))
