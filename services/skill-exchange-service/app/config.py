"""Configuration for Skill Exchange Service."""

from typing import Dict, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Skill exchange service configuration.

    All settings can be overridden via environment variables.
    """

    # Service configuration
    SERVICE_NAME: str = Field(default="skill-exchange-service")
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )

    # Simulated network latency (milliseconds)
    SIMULATED_LATENCY_ENABLED: bool = Field(default=True)
    LATENCY_GET_ALL_MS: int = Field(default=300, ge=0)
    LATENCY_GET_BY_ID_MS: int = Field(default=200, ge=0)
    LATENCY_CREATE_MS: int = Field(default=400, ge=0)
    LATENCY_UPDATE_MS: int = Field(default=350, ge=0)
    LATENCY_DELETE_MS: int = Field(default=300, ge=0)
    LATENCY_FILTER_MS: int = Field(default=250, ge=0)

    # Match lookup cache
    MATCH_CACHE_TTL_SECONDS: float = Field(default=300.0, gt=0)
    MATCH_CACHE_MAX_SIZE: int = Field(default=1000, ge=1)
    MATCH_CACHE_INVALIDATE_ON_WRITE: bool = Field(default=False)

    # Placeholder compatibility scoring
    COMPATIBILITY_SCORE_MIN: int = Field(default=70, ge=0, le=100)
    COMPATIBILITY_SCORE_MAX: int = Field(default=100, ge=0, le=100)

    # Seed datasets (defaults to the JSON files shipped with the package)
    SEED_DATA_DIR: Optional[str] = Field(default=None)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def latency_profile(self) -> Dict[str, int]:
        """Per-operation delay in milliseconds."""
        return {
            "get_all": self.LATENCY_GET_ALL_MS,
            "get_by_id": self.LATENCY_GET_BY_ID_MS,
            "create": self.LATENCY_CREATE_MS,
            "update": self.LATENCY_UPDATE_MS,
            "delete": self.LATENCY_DELETE_MS,
            "filter": self.LATENCY_FILTER_MS,
        }


settings = Settings()
