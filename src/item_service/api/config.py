"""Service configuration management for the item service."""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from .models import IdStrategy

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Config(BaseSettings):
    """Item service configuration."""

    model_config = {"env_prefix": "ITEM_SERVICE_", "env_file": ".env", "case_sensitive": False}

    host: str = Field(default="127.0.0.1", description="API host address")
    port: int = Field(default=3000, description="API port")
    log_level: str = Field(default="INFO", description="Logging level")

    id_strategy: IdStrategy = Field(
        default=IdStrategy.MONOTONIC, description="Identifier assignment for new items"
    )
    seed_items: bool = Field(default=True, description="Seed the registry with example items")

    docs_url: str = Field(default="/api-docs", description="Path of the generated API docs UI")
    cors_allowed_origins: List[str] = Field(default=["*"], description="CORS allowed origins")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase for logging compatibility."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment variables and .env files."""
        return cls()

    @property
    def base_url(self) -> str:
        """URL the server is reachable at."""
        return f"http://{self.host}:{self.port}"
