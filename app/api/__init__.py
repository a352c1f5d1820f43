"""API routes."""
from app.api.games import router as games_router

__all__ = [
    "games_router",
]
