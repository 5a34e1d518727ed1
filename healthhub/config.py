from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List
import os


class Settings(BaseSettings):
    """Global app settings loaded from environment.
    - Keep defaults light for dev.
    - Override via .env or real env vars.
    """

    APP_NAME: str = "healthhub_admin"
    APP_ENV: str = "dev"
    APP_DEBUG: bool = True

    MONGODB_URI: str = "mongodb://localhost:27017/healthhub"
    MONGODB_DB_NAME: str | None = None
    # Multi-document transactions need a replica set; standalone dev servers
    # fall back to compensating deletes in the unit of work.
    MONGODB_TRANSACTIONS: bool = True

    # JWT settings
    JWT_SECRET: str = "healthhub_admin_dev_secret"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # bcrypt cost factor for stored secrets
    BCRYPT_ROUNDS: int = 12

    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100

    # Raw CORS string from env (comma-separated); parsed via cors_origins property
    CORS_ORIGINS: str | None = None

    LOG_DIR: str = "logs"
    RATE_LIMIT_ENABLED: bool = True

    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def cors_origins(self) -> List[str]:
        """Return CORS origins as a list, parsing comma-separated env string."""
        raw = self.CORS_ORIGINS or os.getenv("CORS_ORIGINS", "") or ""
        return [o.strip() for o in raw.split(",") if o.strip()]

    @property
    def database_name(self) -> str:
        """Explicit MONGODB_DB_NAME wins, otherwise the path segment of the URI."""
        if self.MONGODB_DB_NAME:
            return self.MONGODB_DB_NAME
        db_name = self.MONGODB_URI.rsplit("/", 1)[-1].split("?")[0]
        return db_name or "healthhub"


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
