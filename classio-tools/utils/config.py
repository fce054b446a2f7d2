"""Configuration for ClassIO Tools, read from the environment and an optional .env file."""

import os
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger
from pydantic import BaseModel, Field

load_dotenv()

NOTION_API_URL = "https://api.notion.com/v1"
NOTION_VERSION = "2022-06-28"


class Settings(BaseModel):
    # paths
    static_dir: Path = Field(default=Path(__file__).parent.parent / "static")

    # integrations
    notion_token: Optional[str] = None
    default_block_id: Optional[str] = None       # fallback parent page for notion_write
    notion_version: str = Field(default=NOTION_VERSION)
    n8n_webhook_url: Optional[str] = None
    http_timeout: float = Field(default=15.0)

    # server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    log_level: str = Field(default="INFO")


def get_settings() -> Settings:
    """Build settings from the current environment (re-read on every call)."""
    values = {
        "static_dir": os.getenv("CLASSIO_STATIC_DIR"),
        "notion_token": os.getenv("NOTION_TOKEN"),
        "default_block_id": os.getenv("DEFAULT_BLOCK_ID"),
        "n8n_webhook_url": os.getenv("N8N_WEBHOOK_URL"),
        "http_timeout": os.getenv("HTTP_TIMEOUT"),
        "host": os.getenv("HOST"),
        "port": os.getenv("PORT"),
        "log_level": os.getenv("LOG_LEVEL"),
    }
    # unset (or blank) variables fall back to the field defaults
    return Settings(**{k: v for k, v in values.items() if v})


def is_notion_configured() -> bool:
    return bool(get_settings().notion_token)


def is_webhook_configured() -> bool:
    return bool(get_settings().n8n_webhook_url)


def configure_logging(level: str = "INFO") -> None:
    """Send log output to stderr at the given level."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


class ServiceNotConfiguredError(RuntimeError):
    """Raised when an integration is called without its token or URL."""
