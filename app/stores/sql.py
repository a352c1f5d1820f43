"""Game store backed by the catalog database."""
import logging
import uuid
from typing import Optional

from sqlalchemy import select, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.catalog.types import Game, Review
from app.models import GameRecord
from app.stores.base import GameStore, RecordStoreError

logger = logging.getLogger(__name__)


def _parse_id(game_id: str) -> Optional[uuid.UUID]:
    """Parse a game id. Ids that are not UUIDs cannot exist in the table."""
    try:
        return uuid.UUID(str(game_id))
    except ValueError:
        return None


def to_game(record: GameRecord) -> Game:
    """Build a Game snapshot from a table row."""
    return Game(
        id=str(record.id),
        title=record.title,
        developer=record.developer,
        genres=list(record.genres or []),
        price=record.price or 0.0,
        total_stock=record.total_stock or 0,
        reviews=[Review(**review) for review in (record.reviews or [])],
    )


class SqlGameStore(GameStore):
    """Store games as rows of the games table, reviews embedded as JSONB."""

    def __init__(self, session: AsyncSession):
        self.db = session

    async def scan_all(self) -> list[Game]:
        try:
            result = await self.db.execute(
                select(GameRecord).order_by(GameRecord.created_at.asc())
            )
            return [to_game(record) for record in result.scalars().all()]
        except SQLAlchemyError as e:
            raise RecordStoreError(f"Error scanning games: {e}") from e

    async def find_by_id(self, game_id: str) -> Optional[Game]:
        key = _parse_id(game_id)
        if key is None:
            return None

        try:
            record = await self.db.get(GameRecord, key)
        except SQLAlchemyError as e:
            raise RecordStoreError(f"Error fetching game {game_id}: {e}") from e

        return to_game(record) if record else None

    async def upsert(self, game: Game) -> Game:
        values = {
            "title": game.title,
            "developer": game.developer,
            "genres": list(game.genres),
            "price": game.price,
            "total_stock": game.total_stock,
            "reviews": [review.model_dump() for review in game.reviews],
        }

        key = None
        if game.id is not None:
            key = _parse_id(game.id)
            if key is None:
                raise RecordStoreError(f"Cannot save game with malformed ID {game.id}")

        try:
            record = await self.db.get(GameRecord, key) if key else None

            if record is None:
                record = GameRecord(id=key or uuid.uuid4(), **values)
                self.db.add(record)
            else:
                for field, value in values.items():
                    setattr(record, field, value)

            await self.db.flush()
            await self.db.refresh(record)
        except SQLAlchemyError as e:
            raise RecordStoreError(f"Error saving game: {e}") from e

        logger.debug(f"Stored game {record.id}")
        return to_game(record)

    async def delete_by_id(self, game_id: str) -> None:
        key = _parse_id(game_id)
        if key is None:
            return

        try:
            await self.db.execute(delete(GameRecord).where(GameRecord.id == key))
            await self.db.flush()
        except SQLAlchemyError as e:
            raise RecordStoreError(f"Error deleting game {game_id}: {e}") from e
