"""Configuration management for FastAPI backend."""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List

from youtube_synthesis.core.config import config as core_config


def _parse_origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


@dataclass
class APIConfig:
    """API configuration settings."""

    # Core API settings
    host: str = field(default_factory=lambda: os.getenv("API_HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "3000")))
    debug: bool = field(default_factory=lambda: os.getenv("API_DEBUG", "false").lower() == "true")

    # CORS settings
    cors_origins: List[str] = field(default_factory=lambda: _parse_origins(os.getenv("API_CORS_ORIGINS", "*")))

    # Application metadata
    title: str = field(default_factory=lambda: core_config.app.name)
    description: str = "Summaries, cross-video syntheses and title ideas for YouTube videos"
    version: str = field(default_factory=lambda: core_config.app.version)

    # Environment
    environment: str = field(default_factory=lambda: os.getenv("ENVIRONMENT", "development"))

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []

        if self.port < 1 or self.port > 65535:
            errors.append("PORT must be between 1 and 65535")

        if not self.cors_origins:
            errors.append("API_CORS_ORIGINS must list at least one origin")

        errors.extend(core_config.validate())
        return errors


@lru_cache()
def get_api_config() -> APIConfig:
    """Get validated API configuration."""
    config = APIConfig()

    errors = config.validate()
    if errors:
        raise ValueError(f"Configuration errors: {', '.join(errors)}")

    return config
