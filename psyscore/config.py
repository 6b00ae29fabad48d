"""Application configuration with validation."""
from typing import List, Literal
from functools import lru_cache
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# =============================================================================
# KNOWN SCORING METHODS
# =============================================================================
# Mirrors psyscore.models.enumerations.ScoringMethod; kept as plain strings so
# the settings module has no import-time dependency on the models package.
# =============================================================================

KNOWN_SCORING_METHODS = ("sum", "average", "weighted")


class Settings(BaseSettings):
    """Scoring service settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Psychological Assessment Scoring Engine"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # API
    API_V1_PREFIX: str = "/api/v1"
    CORS_ALLOW_ORIGINS: List[str] = Field(default=["*"])

    # Scoring
    FIXED_SCALE_ALIASES: List[str] = Field(
        default=["SCL-90", "SCL90"],
        description="Scale codes routed to the fixed nine-factor scorer (matched after upper-casing, no trimming)",
    )
    DEFAULT_SCORING_METHOD: str = Field(
        default="sum",
        description="Aggregation method used when a generic scale ships no scale_config",
    )

    # Score statistics
    TREND_WINDOW: int = Field(default=3, ge=1, le=20)
    TREND_STABLE_THRESHOLD: float = Field(default=0.3, ge=0)

    @field_validator("FIXED_SCALE_ALIASES")
    @classmethod
    def normalize_aliases(cls, v: List[str]) -> List[str]:
        aliases = [alias.strip().upper() for alias in v if alias and alias.strip()]
        if not aliases:
            raise ValueError("FIXED_SCALE_ALIASES must contain at least one alias")
        return aliases

    @field_validator("DEFAULT_SCORING_METHOD")
    @classmethod
    def validate_default_method(cls, v: str) -> str:
        method = v.strip().lower()
        if method not in KNOWN_SCORING_METHODS:
            raise ValueError(
                f"DEFAULT_SCORING_METHOD must be one of {KNOWN_SCORING_METHODS}, got {v!r}"
            )
        return method

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Ensure production does not run in debug mode."""
        if self.APP_ENV == "production" and self.DEBUG:
            raise ValueError("DEBUG must be False in production")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
