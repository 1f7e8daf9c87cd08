import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent / ".env")

LOCAL_DEV_ORIGINS = ("http://localhost:3000", "http://localhost:5173")


def _get_int(name: str, fallback: int) -> int:
    raw_value = os.getenv(name)
    if not raw_value:
        return fallback
    try:
        return int(raw_value)
    except ValueError as exc:
        raise RuntimeError(f"Environment variable {name} must be an integer") from exc


def _get_list(name: str, fallback: str = "") -> List[str]:
    raw_value = os.getenv(name, fallback)
    if not raw_value:
        return []
    return [item.strip() for item in raw_value.split(",") if item.strip()]


def _default_origins() -> List[str]:
    origins = _get_list("ALLOWED_ORIGINS")
    if origins:
        return origins
    frontend_url = os.getenv("FRONTEND_URL")
    defaults = [frontend_url] if frontend_url else []
    return defaults + list(LOCAL_DEV_ORIGINS)


@dataclass(frozen=True)
class Settings:
    environment: str = os.getenv("APP_ENV", "production")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = _get_int("PORT", 3001)
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    max_notifications: int = _get_int("MAX_NOTIFICATIONS", 100)
    admin_orders_limit: int = _get_int("ADMIN_ORDERS_LIMIT", 20)
    notifications_limit: int = _get_int("NOTIFICATIONS_LIMIT", 20)
    allowed_origins: List[str] = field(default_factory=_default_origins)

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


settings = Settings()
