"""FastAPI app entry point for Gloomdeep."""

from fastapi import FastAPI

from api.game import router as game_router
from api.ws import router as ws_router
from config import COLS, LOG_LEVEL, ROWS, SEED
from engine.session import GameSession
from utils.logging import setup_logging

setup_logging(LOG_LEVEL)

app = FastAPI(
    title="Gloomdeep",
    description="A headless turn-based dungeon crawler",
    version="0.1.0",
)

# One process, one session; it lives only as long as the server does
app.state.session = GameSession.new(seed=SEED, rows=ROWS, cols=COLS)

app.include_router(game_router, prefix="/game", tags=["Game"])
app.include_router(ws_router, prefix="/game", tags=["WebSocket"])


@app.get("/")
def root() -> dict:
    """Root endpoint returning server info."""
    return {"name": "Gloomdeep", "version": "0.1.0", "status": "running"}


@app.get("/health")
def health() -> dict:
    """Health check endpoint."""
    return {"healthy": True}
