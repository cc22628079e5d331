"""Configuration helpers for the packing engine and its API process."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(slots=True)
class PackingSettings:
    """Centralised container for the environment-driven settings."""

    catalog_path: Optional[str] = None
    locale: str = "en"
    debug_logging: bool = False
    log_level: str = "INFO"
    cors_origins: List[str] = field(
        default_factory=lambda: ["http://localhost:3000", "http://localhost:3001"]
    )

    @classmethod
    def from_env(cls) -> "PackingSettings":
        """Load settings from the ``PACKING_*`` environment variables."""

        origins = os.getenv("PACKING_CORS_ORIGINS")
        settings = cls(
            catalog_path=os.getenv("PACKING_CATALOG_PATH") or None,
            locale=os.getenv("PACKING_LOCALE", "en"),
            debug_logging=_env_flag("PACKING_DEBUG_LOGGING"),
            log_level=os.getenv("PACKING_LOG_LEVEL", "INFO").upper(),
        )
        if origins:
            settings.cors_origins = [origin.strip() for origin in origins.split(",") if origin.strip()]
        return settings


def configure_logging(level: str = "INFO") -> None:
    """Attach a basic stream handler to the root logger for the API process."""

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    )
