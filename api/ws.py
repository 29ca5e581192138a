"""WebSocket endpoint pushing redraws to connected viewers."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from engine.render import render_view
from models.actions import TurnResult
from models.game_state import GameState

logger = logging.getLogger(__name__)

router = APIRouter()

# Every connected viewer receives every redraw
connections: list[WebSocket] = []


async def broadcast(message: dict[str, Any]) -> None:
    """Send a message to all connected WebSocket clients.

    Args:
        message: The JSON-serializable message to send.
    """
    disconnected = []
    for i, ws in enumerate(connections):
        try:
            await ws.send_json(message)
        except Exception:
            logger.debug("Dropping viewer that failed to receive a frame", exc_info=True)
            disconnected.append(i)
    for i in reversed(disconnected):
        connections.pop(i)


async def notify_turn(result: TurnResult, game_state: GameState) -> None:
    """Push the outcome of a resolved turn plus a fresh frame."""
    await broadcast({
        "type": "turn",
        "result": result.model_dump(mode="json"),
        "view": render_view(game_state),
    })


@router.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """Viewers connect here to receive the current frame and every later redraw."""
    await websocket.accept()
    connections.append(websocket)

    try:
        session = websocket.app.state.session
        await websocket.send_json({
            "type": "connected",
            "view": render_view(session.state),
        })

        # Keep the connection open; viewers send nothing meaningful
        while True:
            try:
                await websocket.receive_text()
            except WebSocketDisconnect:
                break
    finally:
        if websocket in connections:
            connections.remove(websocket)
