"""In-process game store."""
import logging
import uuid
from typing import Optional

from app.catalog.types import Game
from app.stores.base import GameStore

logger = logging.getLogger(__name__)


class InMemoryGameStore(GameStore):
    """Keeps games in a dict, in insertion order.

    Games are copied deeply on the way in and on the way out, so changing
    the lists of a returned game never reaches the stored record.
    """

    def __init__(self, games: Optional[list[Game]] = None):
        self._games: dict[str, Game] = {}
        for game in games or []:
            self._put(game)

    def _put(self, game: Game) -> Game:
        update = {"id": str(uuid.uuid4())} if game.id is None else {}
        stored = game.model_copy(update=update, deep=True)
        self._games[stored.id] = stored
        return stored.model_copy(deep=True)

    async def scan_all(self) -> list[Game]:
        return [game.model_copy(deep=True) for game in self._games.values()]

    async def find_by_id(self, game_id: str) -> Optional[Game]:
        game = self._games.get(game_id)
        return game.model_copy(deep=True) if game else None

    async def upsert(self, game: Game) -> Game:
        stored = self._put(game)
        logger.debug(f"Stored game {stored.id}")
        return stored

    async def delete_by_id(self, game_id: str) -> None:
        if self._games.pop(game_id, None) is not None:
            logger.debug(f"Removed game {game_id}")
