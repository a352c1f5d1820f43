"""Catalog query and review aggregation engine."""
from app.catalog.errors import CatalogError, NotFoundError, StorageError
from app.catalog.service import CatalogService
from app.catalog.types import Game, GameInput, Review, SearchCriteria

__all__ = [
    "CatalogError",
    "NotFoundError",
    "StorageError",
    "CatalogService",
    "Game",
    "GameInput",
    "Review",
    "SearchCriteria",
]
