"""Application configuration."""
from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Database
    database_url: str
    store_backend: str = "sql"  # 'sql' or 'memory'

    # API Security
    api_secret_key: str

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    debug: bool = False
    log_level: str = "INFO"

    @property
    def use_memory_store(self) -> bool:
        """Whether games are kept in process memory instead of the database."""
        return self.store_backend.strip().lower() == "memory"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
