"""Catalog value types."""
from typing import Optional

from pydantic import BaseModel, Field


class Review(BaseModel):
    """One rating of a game. Scores are assumed to be on a 0-10 scale."""
    score: float
    reviewer: Optional[str] = None
    comment: Optional[str] = None

    class Config:
        frozen = True
        from_attributes = True


class GameInput(BaseModel):
    """A game as submitted for creation, before the store assigns an id."""
    title: str
    developer: Optional[str] = None
    genres: list[str] = Field(default_factory=list)
    price: float = 0.0
    total_stock: int = 0
    reviews: list[Review] = Field(default_factory=list)

    class Config:
        frozen = True


class Game(GameInput):
    """A stored game snapshot."""
    id: Optional[str] = None

    class Config:
        frozen = True
        from_attributes = True


class SearchCriteria(BaseModel):
    """Optional search fields; every field left as None matches all games."""
    title: Optional[str] = None
    developer: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    genre: Optional[str] = None

    class Config:
        frozen = True
