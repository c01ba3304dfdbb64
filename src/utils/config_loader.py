"""
Configuration loader for the waitlist server
"""

import os
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError
import logging

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent.parent

MAX_BODY_BYTES = 64 * 1024


class Settings(BaseModel):
    """Process-wide settings, built once at startup and never mutated"""

    model_config = ConfigDict(frozen=True)

    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=0, le=65535)
    telegram_token: str = ""
    telegram_chat_id: str = ""
    telegram_api_base: str = "https://api.telegram.org"
    static_dir: Path = Field(default_factory=lambda: PROJECT_ROOT / "public")
    site_name: str = "nsin.ir"
    max_body_bytes: int = Field(default=MAX_BODY_BYTES, ge=1)
    notify_timeout_seconds: float = Field(default=5.0, gt=0)
    # None leaves inbound body reads unbounded in time
    body_read_timeout_seconds: Optional[float] = Field(default=None, gt=0)
    log_level: str = "INFO"

    @property
    def notifier_configured(self) -> bool:
        return bool(self.telegram_token and self.telegram_chat_id)


_ENV_KEYS = {
    "HOST": "host",
    "PORT": "port",
    "TELEGRAM_TOKEN": "telegram_token",
    "TELEGRAM_CHAT_ID": "telegram_chat_id",
    "TELEGRAM_API_BASE": "telegram_api_base",
    "STATIC_DIR": "static_dir",
    "SITE_NAME": "site_name",
    "BODY_READ_TIMEOUT_SECONDS": "body_read_timeout_seconds",
    "LOG_LEVEL": "log_level",
}


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build validated Settings from environment variables

    Args:
        env: Mapping to read from. Defaults to os.environ after loading .env

    Returns:
        Frozen Settings object

    Raises:
        ValidationError: If a variable has an invalid value (e.g. non-numeric PORT)
    """
    if env is None:
        load_dotenv()
        env = os.environ

    values = {}
    for key, field_name in _ENV_KEYS.items():
        raw = env.get(key)
        if raw is None or raw.strip() == "":
            continue
        values[field_name] = raw.strip()

    try:
        settings = Settings(**values)
    except ValidationError as e:
        logger.error(f"Settings validation failed: {e}")
        raise

    if not settings.notifier_configured:
        logger.warning("TELEGRAM_TOKEN/TELEGRAM_CHAT_ID not set; /waitlist will answer 500")
    return settings
