"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from svgtag.models.style import StyleOverrides


class Settings(BaseSettings):
    svgtag_env: str = "development"
    svgtag_log_level: str = "info"

    # Icon cache and fetch substrate
    svgtag_cache_dir: str = "~/.cache/svgtag/icons"
    svgtag_fetch_timeout: float = 10.0
    svgtag_user_agent: str = "svgtag/0.1.0"
    # Extra icon collections, merged over the built-in ones (name -> URL template)
    svgtag_collections: dict[str, str] = {}

    # Named styles, each a partial style over the default (name -> fields)
    svgtag_styles: dict[str, StyleOverrides] = {}

    # Text grid metrics: "fixed" or "pillow"
    svgtag_metrics: str = "fixed"
    svgtag_char_width: float = 10.0
    svgtag_char_height: float = 20.0

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
