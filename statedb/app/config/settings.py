"""Settings for the statedb service."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str = Field(..., validation_alias="DATABASE_URL")
    database_backend: str = Field("sqlalchemy", validation_alias="DATABASE_BACKEND")

    database_pool_size: int = Field(5, validation_alias="DATABASE_POOL_SIZE")
    database_max_overflow: int = Field(10, validation_alias="DATABASE_MAX_OVERFLOW")
    database_pool_timeout_seconds: float = Field(30.0, validation_alias="DATABASE_POOL_TIMEOUT_SECONDS")
    database_pool_pre_ping: bool = Field(True, validation_alias="DATABASE_POOL_PRE_PING")

    startup_probe_enabled: bool = Field(True, validation_alias="STARTUP_PROBE_ENABLED")

    app_host: str = Field("0.0.0.0", validation_alias="APP_HOST")
    app_port: int = Field(8080, validation_alias="APP_PORT")
