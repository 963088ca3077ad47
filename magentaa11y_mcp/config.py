"""Centralized configuration for the MagentaA11y MCP Server."""

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Server configuration loaded from environment variables."""

    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    # Content corpus (contains the `web` and `native` platform directories)
    content_root: Path = Path("magentaA11y/public/content/documentation")

    # Fuzzy matching (Fuse-style distance: 0.0 is a perfect match)
    search_threshold: float = 0.4
    suggest_threshold: float = 0.5

    # Result shaping
    default_max_results: int = 10
    suggestion_limit: int = 5
    max_snippets: int = 3
    snippet_max_chars: int = 200

    model_config = {"env_prefix": "MAGENTAA11Y_", "env_file": ".env", "extra": "ignore"}


settings = Settings()
