"""
Configuration for the YouTube synthesis core.
Every value can be overridden via environment variables or a local .env file.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path('.env')
if env_path.exists():
    load_dotenv(dotenv_path=env_path)


def _optional_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    return float(value)


# =============================================================================
# CORE APPLICATION SETTINGS
# =============================================================================

@dataclass
class AppConfig:
    """Core application configuration."""
    name: str = field(default_factory=lambda: os.getenv('APP_NAME', 'YouTube Synthesis API'))
    version: str = field(default_factory=lambda: os.getenv('APP_VERSION', '0.1.0'))
    environment: str = field(default_factory=lambda: os.getenv('ENVIRONMENT', 'development'))


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = field(default_factory=lambda: os.getenv('LOG_LEVEL', 'INFO'))
    format: str = field(default_factory=lambda: os.getenv('LOG_FORMAT', '%(asctime)s [%(name)s] %(levelname)s: %(message)s'))
    date_format: str = field(default_factory=lambda: os.getenv('LOG_DATE_FORMAT', '%Y-%m-%d %H:%M:%S'))


# =============================================================================
# EXTERNAL SERVICES
# =============================================================================

@dataclass
class YouTubeConfig:
    """YouTube Data API settings."""
    # Checked when metadata is fetched, never at startup
    api_key: Optional[str] = field(default_factory=lambda: os.getenv('YOUTUBE_API_KEY') or None)
    api_base_url: str = field(default_factory=lambda: os.getenv('YOUTUBE_API_BASE_URL', 'https://www.googleapis.com/youtube/v3'))
    transcript_languages: List[str] = field(default_factory=lambda: [
        lang.strip() for lang in os.getenv('TRANSCRIPT_LANGUAGES', 'en').split(',') if lang.strip()
    ])


@dataclass
class LLMConfig:
    """LLM configuration settings."""
    api_key: Optional[str] = field(default_factory=lambda: os.getenv('OPENAI_API_KEY') or None)
    default_model: str = field(default_factory=lambda: os.getenv('LLM_DEFAULT_MODEL', 'gpt-4o-mini'))
    default_temperature: Optional[float] = field(default_factory=lambda: _optional_float('LLM_DEFAULT_TEMPERATURE'))
    default_timeout: int = field(default_factory=lambda: int(os.getenv('LLM_DEFAULT_TIMEOUT', '60')))


@dataclass
class NetworkConfig:
    """Network and timeout configuration."""
    http_timeout_total: float = field(default_factory=lambda: float(os.getenv('HTTP_TIMEOUT_TOTAL', '30')))
    http_timeout_connect: float = field(default_factory=lambda: float(os.getenv('HTTP_TIMEOUT_CONNECT', '10')))
    user_agent: str = field(default_factory=lambda: os.getenv('HTTP_USER_AGENT', 'YouTube-Synthesis/0.1'))


# =============================================================================
# MAIN CONFIGURATION CLASS
# =============================================================================

@dataclass
class Config:
    """Main configuration class that combines all configuration sections."""
    app: AppConfig = field(default_factory=AppConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    youtube: YouTubeConfig = field(default_factory=YouTubeConfig)
    llm: LLMConfig = field(default_factory=LLMConfig)
    network: NetworkConfig = field(default_factory=NetworkConfig)

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []

        if self.llm.default_temperature is not None and not 0.0 <= self.llm.default_temperature <= 2.0:
            errors.append("LLM_DEFAULT_TEMPERATURE must be between 0.0 and 2.0")

        if self.llm.default_timeout < 1:
            errors.append("LLM_DEFAULT_TIMEOUT must be positive")

        if self.network.http_timeout_total <= 0:
            errors.append("HTTP_TIMEOUT_TOTAL must be positive")

        if not self.youtube.transcript_languages:
            errors.append("TRANSCRIPT_LANGUAGES must name at least one language")

        return errors

    def missing_credentials(self) -> List[str]:
        """Names of API keys that are not configured."""
        missing = []
        if not self.youtube.api_key:
            missing.append("YOUTUBE_API_KEY")
        if not self.llm.api_key:
            missing.append("OPENAI_API_KEY")
        return missing


def load_config() -> Config:
    """Build a fresh configuration from the current environment."""
    return Config()


# Global configuration instance
config = load_config()
