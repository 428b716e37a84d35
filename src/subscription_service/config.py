# Файл: src/subscription_service/config.py

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Literal, Optional

# --- 1. PostgreSQL ---
class PostgresConfig(BaseModel):
    user: str = "postgres"
    password: str = "postgres"
    host: str = "localhost"
    port: int = 5432
    db: str = "subscriptions"

    # Full SQLAlchemy URL, wins over the individual fields (sqlite+aiosqlite in dev/tests)
    url: Optional[str] = None

    pool_size: int = 5
    max_overflow: int = 5
    pool_timeout: int = 30
    pool_recycle: int = 1800
    pool_pre_ping: bool = True
    application_name: str = "subscription_service"

    def get_pg_dsn(self) -> str:
        """Builds the SQLAlchemy DSN from this object's fields."""
        if self.url:
            return self.url
        return f"postgresql+asyncpg://{self.user}:{self.password}@{self.host}:{self.port}/{self.db}"

    def is_postgres(self) -> bool:
        return self.get_pg_dsn().startswith("postgresql")


# --- 2. Payment profile tables ---
class CimConfig(BaseModel):
    # 'test' reads card data from the *_TEST payment profile table
    transaction_mode: Literal["production", "test"] = "production"


class ServerConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 3113
    prefix: str = "/v1"


# --- 3. Explicit wiring for the data store ---
class DataStoreConfig(BaseModel):
    postgres: PostgresConfig = Field(default_factory=PostgresConfig)
    cim: CimConfig = Field(default_factory=CimConfig)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )

    log_level: str = Field("INFO", alias="LOG_LEVEL")

    postgres: PostgresConfig = Field(default_factory=PostgresConfig)
    cim: CimConfig = Field(default_factory=CimConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)

    def data_store_config(self) -> DataStoreConfig:
        return DataStoreConfig(postgres=self.postgres, cim=self.cim)


_cached_settings: Optional[Settings] = None

def get_settings() -> Settings:
    """
    Returns the settings singleton, building it on first call so that
    importing this module never fails validation.
    """
    global _cached_settings
    if _cached_settings is None:
        _cached_settings = Settings()
    return _cached_settings


def reset_settings() -> None:
    global _cached_settings
    _cached_settings = None
