"""Application configuration using Pydantic Settings."""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings

_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Settings loaded from METAR_EXPLAIN_* environment variables and .env."""

    # Logging
    log_level: str = "INFO"

    # CLI output
    output_format: Literal["text", "json"] = "text"
    pretty_json: bool = False

    # HTTP server
    host: str = "127.0.0.1"
    port: int = 8000

    model_config = {"env_prefix": "METAR_EXPLAIN_", "env_file": str(_ENV_FILE)}


settings = Settings()
