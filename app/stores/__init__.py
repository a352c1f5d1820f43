"""Record stores for catalog games."""
from app.stores.base import GameStore, RecordStoreError
from app.stores.memory import InMemoryGameStore
from app.stores.sql import SqlGameStore

__all__ = [
    "GameStore",
    "RecordStoreError",
    "InMemoryGameStore",
    "SqlGameStore",
]
