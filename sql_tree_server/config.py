"""
Application configuration management.
"""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Parsing
    grammar: str = "sql"
    grammars_dir: Optional[Path] = None  # Defaults to the bundled grammars package

    # Transport
    transport: str = "stdio"  # "stdio" or "sse"
    host: str = "127.0.0.1"
    port: int = 8000

    # Application
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
