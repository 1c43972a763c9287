"""FastAPI server with WebSocket for time-travel tic-tac-toe."""

import json
import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.responses import HTMLResponse, FileResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, Field

from tictactoe.board import CELL_COUNT
from tictactoe.config import AppConfig, GameConfig, load_config
from tictactoe.history import HistoryIndexError
from tictactoe.session import GameSession

logger = logging.getLogger(__name__)

CLIENT_PATH = Path(__file__).parent.parent.parent / "client"

FALLBACK_PAGE = "<h1>Tic-tac-toe</h1><p>Client not found</p>"


class ConnectionManager:
    """Manages WebSocket connections."""

    def __init__(self):
        self.active_connections: list[WebSocket] = []

    async def connect(self, websocket: WebSocket):
        await websocket.accept()
        self.active_connections.append(websocket)

    def disconnect(self, websocket: WebSocket):
        if websocket in self.active_connections:
            self.active_connections.remove(websocket)

    async def broadcast(self, message: dict):
        """Broadcast message to all connected clients."""
        dead = []
        for connection in self.active_connections:
            try:
                await connection.send_json(message)
            except Exception as e:
                logger.warning("Dropping websocket after failed send: %s", e)
                dead.append(connection)
        for conn in dead:
            self.disconnect(conn)


class SelectRequest(BaseModel):
    """Request body for a cell selection."""
    cell: int = Field(ge=0, lt=CELL_COUNT)


class JumpRequest(BaseModel):
    """Request body for a history jump."""
    move: int = Field(ge=0)


def create_app(config: Optional[GameConfig] = None, client_path: Path = CLIENT_PATH) -> FastAPI:
    app = FastAPI(title="Tic-tac-toe")
    manager = ConnectionManager()
    app.state.connections = manager
    game_config = config or GameConfig()

    # One session at a time; "new game" swaps it for a fresh one
    session = GameSession(game_config)

    def build_state_message(extra: dict | None = None) -> dict:
        """Build a state broadcast message from a fresh read of the session."""
        msg = {
            "type": "state",
            "state": session.to_dict(),
        }
        if extra:
            msg.update(extra)
        return msg

    # Static files
    if client_path.exists():
        app.mount("/static", StaticFiles(directory=str(client_path)), name="static")

    @app.get("/")
    async def get_index():
        """Serve the main page."""
        index_path = client_path / "index.html"
        if index_path.exists():
            return FileResponse(index_path)
        return HTMLResponse(FALLBACK_PAGE)

    # ==================== Game ====================

    @app.get("/api/state")
    async def get_state():
        """Get current view state."""
        return {"status": "ok", "state": session.to_dict(), "config": game_config.to_dict()}

    @app.post("/api/new-game")
    async def new_game():
        """Start over with an empty board and history."""
        nonlocal session
        session = GameSession(game_config)
        logger.info("New game started")

        await manager.broadcast(build_state_message({"event": "new_game"}))

        return {"status": "ok", "state": session.to_dict()}

    @app.post("/api/select")
    async def select_cell(request: SelectRequest):
        """Play the current player's mark on a cell. Illegal selections are ignored."""
        accepted = session.select_cell(request.cell)
        state = session.to_dict()

        if accepted:
            await manager.broadcast(build_state_message({"event": "move", "cell": request.cell}))

        return {"status": "ok", "accepted": accepted, "state": state}

    # ==================== History ====================

    @app.get("/api/history")
    async def get_history():
        """Get the move list."""
        return {
            "status": "ok",
            "current_move": session.history.current,
            "moves": [m.to_dict() for m in session.moves()],
        }

    @app.post("/api/jump")
    async def jump_to(request: JumpRequest):
        """Show the board as it was after the given move."""
        try:
            session.jump_to(request.move)
        except HistoryIndexError as e:
            logger.warning("Rejected jump: %s", e)
            return {"status": "error", "message": str(e)}

        await manager.broadcast(build_state_message({"event": "jump", "move": request.move}))

        return {"status": "ok", "state": session.to_dict()}

    # ==================== WebSocket ====================

    @app.websocket("/ws")
    async def websocket_endpoint(websocket: WebSocket):
        await manager.connect(websocket)
        try:
            await websocket.send_json(build_state_message())

            while True:
                data = await websocket.receive_text()
                try:
                    cmd = json.loads(data)
                except json.JSONDecodeError:
                    logger.debug("Ignoring malformed websocket message: %r", data)
                    continue
                if not isinstance(cmd, dict):
                    logger.debug("Ignoring non-object websocket message: %r", data)
                    continue
                if cmd.get("type") == "ping":
                    await websocket.send_json({"type": "pong"})
        except WebSocketDisconnect:
            pass
        finally:
            manager.disconnect(websocket)

    return app


app = create_app()


def main(app_config: Optional[AppConfig] = None):
    import uvicorn

    app_config = app_config or load_config()
    server = app_config.server
    logging.basicConfig(
        level=server.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(create_app(app_config.game), host=server.host, port=server.port,
                log_level=server.log_level)


if __name__ == "__main__":
    main()
