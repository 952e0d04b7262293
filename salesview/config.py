from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ==============================
    # Application
    # ==============================
    APP_NAME: str = "Sales Transaction Browser"
    ENVIRONMENT: str = "local"
    CORS_ORIGINS: str = "*"

    # ==============================
    # Database
    # ==============================
    DATABASE_URL: str = "sqlite:///./data/sales.db"

    # ==============================
    # Logging
    # ==============================
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # ==============================
    # Pagination
    # ==============================
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100

    # ==============================
    # Bulk Import
    # ==============================
    IMPORT_CSV_PATH: str = "data/sales_data.csv"
    IMPORT_BATCH_SIZE: int = 500

    @property
    def cors_origins(self) -> list[str]:
        origins = [part.strip() for part in self.CORS_ORIGINS.split(",") if part.strip()]
        return origins or ["*"]


@lru_cache
def get_settings() -> Settings:
    """Cached settings loader (once per process)."""
    return Settings()


__all__ = ["Settings", "get_settings"]
