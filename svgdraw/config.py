"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svgdraw_env: str = "development"
    svgdraw_log_level: str = "info"

    # Abort a parse on the first malformed <path> instead of skipping it
    svgdraw_strict_paths: bool = False

    # Largest SVG accepted by the HTTP API
    svgdraw_max_upload_bytes: int = 2_000_000

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
