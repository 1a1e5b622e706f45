"""
Configuration management for the Hackernews backend
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Document store
    mongodb_url: str = "mongodb://localhost:27017"
    mongodb_database: str = "hackernews"
    mongodb_collection: str = "links"
    mongodb_timeout_ms: int = 5000  # server selection timeout

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "HACKERNEWS_"
        case_sensitive = False


# Global settings instance
settings = Settings()


def is_production(config: Settings | None = None) -> bool:
    """Whether the given (or global) settings describe a production deployment."""
    config = config or settings
    return config.environment.lower() in ("production", "prod")
