"""
Configuration & Environment Loading.

Settings are read from environment variables. A `.env` file at the project
root, if present, is loaded first so local overrides do not have to be
exported by hand.

- `HODL_LOG_LEVEL`: A standard logging level name (default `INFO`).
- `HODL_CURRENCY`: A three-letter currency code for display (default `USD`).
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
DOTENV_PATH = PROJECT_ROOT / ".env"


def load_env_file(dotenv_path: Path = DOTENV_PATH) -> bool:
    """Loads a .env file into the environment. Variables already set win."""
    return load_dotenv(dotenv_path=dotenv_path)


load_env_file()

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


class Settings(BaseModel):
    """Runtime settings for the hodl CLI."""
    log_level: str = "INFO"
    currency: str = Field(default="USD", min_length=3, max_length=3)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'.")
        return level

    @field_validator("currency")
    @classmethod
    def _upper_currency(cls, value: str) -> str:
        return value.upper()


def get_settings(currency: Optional[str] = None) -> Settings:
    """Builds the settings from the current environment, with an optional currency override."""
    values = {}
    if "HODL_LOG_LEVEL" in os.environ:
        values["log_level"] = os.environ["HODL_LOG_LEVEL"]
    if "HODL_CURRENCY" in os.environ:
        values["currency"] = os.environ["HODL_CURRENCY"]
    if currency is not None:
        values["currency"] = currency
    return Settings(**values)


def configure_logging(settings: Settings) -> None:
    """Configures the root logger from the settings."""
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
