import json

import pytest

from tictactoe.board import Mark
from tictactoe.config import CONFIG_ENV_VAR, GameConfig, PlayerConfig, ServerConfig, load_config


def test_defaults():
    config = GameConfig()
    assert config.symbol_for(Mark.PLAYER_A) == "X"
    assert config.symbol_for(Mark.PLAYER_B) == "O"
    assert config.symbol_for(Mark.EMPTY) == ""
    assert config.report_draw


def test_json_round_trip():
    config = GameConfig(player_a=PlayerConfig(symbol="R", name="Red"), report_draw=False)
    restored = GameConfig.from_json(config.to_json())
    assert restored == config
    assert restored.player_a.display_name == "Red (R)"
    assert restored.player_b.display_name == "O"


def test_same_symbols_rejected():
    with pytest.raises(ValueError):
        GameConfig(player_a=PlayerConfig(symbol="X"), player_b=PlayerConfig(symbol="X"))


def test_empty_symbol_rejected():
    with pytest.raises(ValueError):
        GameConfig(player_a=PlayerConfig(symbol=""))


def test_load_config_defaults(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    config = load_config()
    assert config.game == GameConfig()
    assert config.server == ServerConfig()


def test_load_config_from_env(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "game": {"player_b": {"symbol": "Z"}, "report_draw": False},
        "server": {"port": 8123},
    }))
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    config = load_config()
    assert config.game.player_a.symbol == "X"
    assert config.game.player_b.symbol == "Z"
    assert not config.game.report_draw
    assert config.server.port == 8123
    assert config.server.host == "0.0.0.0"
