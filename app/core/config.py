"""
Centralised application settings loaded from environment variables / .env file.
Every setting has a default, so the service starts without a .env file.
"""
import os

from dotenv import load_dotenv

load_dotenv()


def _csv(key: str, default: str) -> list[str]:
    """Read a comma-separated env var into a list, dropping blanks."""
    raw = os.getenv(key, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


class _Settings:
    # ── Application ───────────────────────────────────────────────────────────
    APP_TITLE: str   = os.getenv("APP_TITLE", "Hydration Deviation Alert")
    APP_VERSION: str = os.getenv("APP_VERSION", "1.0.0")

    # ── Logging ───────────────────────────────────────────────────────────────
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # ── CORS ──────────────────────────────────────────────────────────────────
    CORS_ORIGINS: list[str] = _csv("CORS_ORIGINS", "*")


settings = _Settings()
