# config/appconfig.py
"""
Application Configuration
Remote clinic API location, session storage and logging for the CuraSync web layer
"""
from pathlib import Path
from typing import Any, Dict, Literal

from pydantic_settings import BaseSettings

# Calculate the project root
BASE_DIR = Path(__file__).resolve().parent.parent


class AppSettings(BaseSettings):
    """Configuration for the CuraSync browser-facing layer"""

    APP_NAME: str = "CuraSync"

    # ============================================================================
    # REMOTE CLINIC API
    # ============================================================================
    API_BASE_URL: str = "http://localhost:5000/api"
    API_TIMEOUT_SECONDS: float = 10.0

    # ============================================================================
    # SESSION
    # ============================================================================
    SESSION_COOKIE_NAME: str = "curasync_session"
    SESSION_STORAGE_KEY: str = "curasync_current_user"
    SESSION_FILE_PATH: str = str(BASE_DIR / ".curasync_session.json")

    # ============================================================================
    # LOGGING
    # ============================================================================
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def resolved_session_file(self) -> Path:
        """Get absolute path to the on-device session file."""
        path = Path(self.SESSION_FILE_PATH)
        return path if path.is_absolute() else BASE_DIR / path

    @property
    def LOGGING_CONFIG(self) -> Dict[str, Any]:
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "loggers": {
                "app": {"level": self.LOG_LEVEL},
                "uvicorn": {"handlers": ["console"], "level": "INFO", "propagate": False},
            },
            "root": {"handlers": ["console"], "level": "WARNING"},
        }


settings = AppSettings()
