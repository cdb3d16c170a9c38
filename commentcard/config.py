"""
Application configuration management.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Comments API
    api_base_url: str = "https://jsonplaceholder.typicode.com"
    request_timeout_seconds: float = 10.0

    # Screen
    post_id: int = 1

    # Application
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
