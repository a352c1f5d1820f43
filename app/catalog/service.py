"""Catalog service: the public operations over a game store."""
import logging
from typing import Awaitable, Optional, TypeVar

from app.catalog import query, reviews
from app.catalog.errors import NotFoundError, StorageError
from app.catalog.types import Game, GameInput, SearchCriteria
from app.stores.base import GameStore, RecordStoreError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CatalogService:
    """Answers catalog queries and review statistics from a GameStore.

    The service keeps no state between calls and never retries. Store
    failures surface as StorageError with the store failure as the cause.
    NotFoundError is only raised by the review statistics operations; every
    other lookup reports absence as None or an empty list.
    """

    def __init__(self, store: GameStore):
        self.store = store

    async def _call(self, operation: Awaitable[T], message: str) -> T:
        try:
            return await operation
        except RecordStoreError as e:
            raise StorageError(message) from e

    async def _scan(self) -> list[Game]:
        return await self._call(self.store.scan_all(), "Error fetching games from storage")

    async def list_games(self) -> list[Game]:
        """Return all games in store order."""
        logger.debug("list_games: entering")
        return await self._scan()

    async def get_game(self, game_id: str) -> Optional[Game]:
        """Return the game with this id, or None when it does not exist."""
        logger.debug(f"get_game: entering ({game_id})")
        game = await self._call(
            self.store.find_by_id(game_id),
            f"Error fetching game with ID {game_id} from storage",
        )
        if game is None:
            logger.info(f"Game {game_id} not found")
        return game

    async def search_games(self, criteria: SearchCriteria) -> list[Game]:
        """Games matching every field set in criteria."""
        logger.debug(f"search_games: entering ({criteria})")
        return query.search(await self._scan(), criteria)

    async def games_by_title(self, title: str) -> list[Game]:
        logger.debug(f"games_by_title: entering ({title!r})")
        return query.by_title(await self._scan(), title)

    async def games_by_price_range(self, low: float, high: float) -> list[Game]:
        logger.debug(f"games_by_price_range: entering ({low}, {high})")
        return query.by_price_range(await self._scan(), low, high)

    async def add_game(self, game: GameInput) -> Game:
        """Store a new game and return it with its assigned id."""
        logger.debug("add_game: entering")
        stored = await self._call(
            self.store.upsert(Game(**game.model_dump())),
            "Error saving game to storage",
        )
        logger.info(f"Added game {stored.id} ({stored.title})")
        return stored

    async def delete_game(self, game_id: str) -> None:
        """Delete a game. Deleting an unknown id does nothing."""
        logger.debug(f"delete_game: entering ({game_id})")
        await self._call(
            self.store.delete_by_id(game_id),
            f"Error deleting game with ID {game_id} from storage",
        )
        logger.info(f"Deleted game {game_id}")

    async def _resolve(self, game_id: str) -> Game:
        game = await self.get_game(game_id)
        if game is None:
            raise NotFoundError(game_id)
        return game

    async def average_score(self, game_id: str) -> float:
        """Mean review score of a game; 0.0 when it has no reviews."""
        return reviews.average_score(await self._resolve(game_id))

    async def total_reviews(self, game_id: str) -> int:
        """Number of reviews of a game."""
        return reviews.total_reviews(await self._resolve(game_id))
