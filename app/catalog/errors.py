"""Catalog error taxonomy."""


class CatalogError(Exception):
    """Base class for failures surfaced by the catalog service."""


class NotFoundError(CatalogError):
    """A specific game id did not resolve to a game."""

    def __init__(self, game_id: str):
        self.game_id = game_id
        super().__init__(f"Game with ID {game_id} not found")


class StorageError(CatalogError):
    """The record store failed; the original failure is kept as __cause__."""
