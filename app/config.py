"""
Configuration management for the Fuel Price Finder API
Loads settings from environment variables
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
import json


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # API Configuration
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Fuel Price Finder API"
    VERSION: str = "1.0.0"

    # CORS
    BACKEND_CORS_ORIGINS: str = '["*"]'

    # Application
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Feed fetching
    FETCH_TIMEOUT_MS: int = 8000
    USER_AGENT: str = "FuelPriceFinder/1.0"

    # Feed freshness window (seconds a successfully fetched payload is reused)
    ENABLE_FEED_CACHE: bool = True
    FEED_CACHE_TTL_SECONDS: int = 60

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="allow"
    )

    @property
    def cors_origins(self) -> List[str]:
        """Parse CORS origins from JSON string"""
        try:
            return json.loads(self.BACKEND_CORS_ORIGINS)
        except ValueError:
            return ["*"]

    @property
    def fetch_timeout_seconds(self) -> float:
        """Per-feed fetch timeout in seconds"""
        return self.FETCH_TIMEOUT_MS / 1000


# Global settings instance
settings = Settings()
