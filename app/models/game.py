"""Game table model."""
import uuid
from datetime import datetime
from sqlalchemy import Column, String, Integer, Float, DateTime, ARRAY
from sqlalchemy.dialects.postgresql import UUID, JSONB

from app.database import Base


class GameRecord(Base):
    """A game in the catalog, with its reviews embedded."""

    __tablename__ = "games"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String(255), nullable=False)
    developer = Column(String(255))
    genres = Column(ARRAY(String), default=list)
    price = Column(Float, nullable=False, default=0.0)
    total_stock = Column(Integer, nullable=False, default=0)

    # Reviews
    reviews = Column(JSONB, default=list)  # [{score, reviewer, comment}]

    created_at = Column(DateTime(timezone=True), default=datetime.utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), default=datetime.utcnow, onupdate=datetime.utcnow)
