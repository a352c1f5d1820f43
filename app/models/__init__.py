"""SQLAlchemy models."""
from app.models.game import GameRecord

__all__ = [
    "GameRecord",
]
