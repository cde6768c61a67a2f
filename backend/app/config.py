"""Application configuration from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    anthropic_api_key: str = ""
    rectart_env: str = "development"
    rectart_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Model routing
    model_cheap: str = "claude-haiku-4-5-20251001"
    model_mid: str = "claude-sonnet-4-5-20250929"
    llm_temperature: float = 0.2

    # History
    history_dir: Path = Path(__file__).parent / "data"
    history_limit: int = 10

    # Packer
    packer_gap: float = 2.0
    packer_max_attempts_per_rect: int = 500
    packer_allow_nesting: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
