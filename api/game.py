"""Move submission, state retrieval, and frame endpoints."""

from fastapi import APIRouter, HTTPException, Request

from api.ws import notify_turn
from engine.controls import direction_for_button, direction_for_key
from engine.render import hud, render_ascii, render_view
from engine.session import GameSession
from models.actions import (
    ButtonRequest,
    KeyRequest,
    MoveRequest,
    TurnOutcome,
    TurnResult,
)

router = APIRouter()


def _get_session(request: Request) -> GameSession:
    """Get the singleton session from app state."""
    return request.app.state.session


@router.get("/state")
def get_game_state(request: Request) -> dict:
    """Get the full game state plus the HUD values."""
    session = _get_session(request)
    return {
        **session.state.model_dump(mode="json"),
        "hud": hud(session.state),
    }


@router.get("/view")
def get_view(request: Request) -> dict:
    """Get a draw-ready frame and its text rendering."""
    session = _get_session(request)
    return {
        **render_view(session.state),
        "ascii": render_ascii(session.state),
    }


async def _resolve(session: GameSession, dx: int, dy: int) -> TurnResult:
    try:
        result = session.attempt_move(dx, dy)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    if result.outcome != TurnOutcome.BLOCKED:
        await notify_turn(result, session.state)
    return result


@router.post("/move", response_model=TurnResult)
async def submit_move(move: MoveRequest, request: Request) -> TurnResult:
    """Move the player one step in a direction and resolve the turn."""
    session = _get_session(request)
    dx, dy = move.direction.delta
    return await _resolve(session, dx, dy)


@router.post("/key")
async def submit_key(key: KeyRequest, request: Request) -> dict:
    """Resolve a raw key press.

    Keys without a binding are acknowledged but change nothing.
    """
    session = _get_session(request)
    direction = direction_for_key(key.key)
    if direction is None:
        return {"handled": False}

    result = await _resolve(session, *direction.delta)
    return {"handled": True, "result": result.model_dump(mode="json")}


@router.post("/button")
async def submit_button(button: ButtonRequest, request: Request) -> dict:
    """Resolve an on-screen direction button press.

    Unknown button ids are acknowledged but change nothing.
    """
    session = _get_session(request)
    direction = direction_for_button(button.button)
    if direction is None:
        return {"handled": False}

    result = await _resolve(session, *direction.delta)
    return {"handled": True, "result": result.model_dump(mode="json")}
