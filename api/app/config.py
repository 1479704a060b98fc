"""Runtime settings read from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    cors_origins: tuple[str, ...] = ("*",)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from BONDLAB_* variables (PORT kept for container platforms)."""
        origins = os.environ.get("BONDLAB_CORS_ORIGINS", "*")
        return cls(
            host=os.environ.get("BONDLAB_HOST", "0.0.0.0"),
            port=int(os.environ.get("PORT", "3000")),
            log_level=os.environ.get("BONDLAB_LOG_LEVEL", "INFO").upper(),
            cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        )


settings = Settings.from_env()
