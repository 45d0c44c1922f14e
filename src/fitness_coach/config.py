"""Runtime configuration and logging setup."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

# Default data directory (repository root / data)
DATA_DIR = Path(__file__).parent.parent.parent / "data"

GEMINI_KEY_ENV_VARS = ("GOOGLE_GEMINI_API_KEY", "GEMINI_API_KEY", "GOOGLE_API_KEY")

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Service credentials and tunables."""

    gemini_api_key: str | None = None
    gemini_model: str = "gemini-2.5-flash"
    elevenlabs_api_key: str | None = None
    elevenlabs_voice_id: str = "21m00Tcm4TlvDq8ikWAM"
    elevenlabs_model_id: str = "eleven_monolingual_v1"
    elevenlabs_base_url: str = "https://api.elevenlabs.io/v1"
    image_base_url: str = "https://image.pollinations.ai/prompt"
    placeholder_base_url: str = "https://via.placeholder.com"
    image_size: int = 1024
    image_model: str = "flux"
    verify_images: bool = False
    request_timeout: float = 30.0
    data_dir: Path = DATA_DIR
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables (and a .env file if present)."""
        load_dotenv()

        gemini_key = None
        for var in GEMINI_KEY_ENV_VARS:
            if os.environ.get(var):
                gemini_key = os.environ[var]
                break

        data_dir = os.environ.get("FITNESS_COACH_DATA_DIR")

        return cls(
            gemini_api_key=gemini_key,
            gemini_model=os.environ.get("GEMINI_MODEL", cls.gemini_model),
            elevenlabs_api_key=os.environ.get("ELEVENLABS_API_KEY") or None,
            elevenlabs_voice_id=os.environ.get("ELEVENLABS_VOICE_ID", cls.elevenlabs_voice_id),
            elevenlabs_model_id=os.environ.get("ELEVENLABS_MODEL_ID", cls.elevenlabs_model_id),
            image_base_url=os.environ.get("IMAGE_BASE_URL", cls.image_base_url),
            verify_images=_env_flag("VERIFY_IMAGES"),
            request_timeout=float(os.environ.get("REQUEST_TIMEOUT", cls.request_timeout)),
            data_dir=Path(data_dir) if data_dir else DATA_DIR,
            log_level=os.environ.get("LOG_LEVEL", cls.log_level).upper(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the process-wide settings."""
    return Settings.from_env()


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the package logger."""
    logger = logging.getLogger("fitness_coach")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
