"""
Configuration management using .env file
"""
from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment / .env file"""
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Application
    environment: str = "development"  # development | test | production

    # Logging
    log_dir: str = "logs"
    app_name: str = "data_quality"

    # Sentiment score rule
    sentiment_min_score: float = -2.0
    sentiment_max_score: float = 2.0

    @model_validator(mode="after")
    def check_sentiment_bounds(self) -> "Settings":
        if self.sentiment_min_score > self.sentiment_max_score:
            raise ValueError("sentiment_min_score must not be greater than sentiment_max_score")
        return self


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
