"""Base record store class."""
from abc import ABC, abstractmethod
from typing import Optional

from app.catalog.types import Game


class RecordStoreError(Exception):
    """A store backend failed to complete an operation."""


class GameStore(ABC):
    """Persistence contract the catalog service relies on.

    Implementations return Game snapshots that share no state with the
    stored record; changing one only reaches the store through upsert.
    """

    @abstractmethod
    async def scan_all(self) -> list[Game]:
        """Return every stored game in the store's natural order."""
        pass

    @abstractmethod
    async def find_by_id(self, game_id: str) -> Optional[Game]:
        """Return the game with this id, or None."""
        pass

    @abstractmethod
    async def upsert(self, game: Game) -> Game:
        """Insert a game without id (assigning one) or replace an existing one.

        Raises RecordStoreError when the id is not one this store can hold.
        """
        pass

    @abstractmethod
    async def delete_by_id(self, game_id: str) -> None:
        """Remove the game with this id. Unknown ids are ignored."""
        pass
