"""Runtime settings for the migration gate."""

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
]


@dataclass
class GateSettings:
    """Settings for the HTTP surface and logging."""
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    api_prefix: str = "/api"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "log_level": self.log_level,
            "cors_origins": self.cors_origins,
            "api_prefix": self.api_prefix,
        }

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GateSettings":
        """Create from MIGRATION_GATE_* environment variables."""
        env = os.environ if environ is None else environ

        origins = env.get("MIGRATION_GATE_CORS_ORIGINS")
        if origins is not None:
            cors_origins = [o.strip() for o in origins.split(",") if o.strip()]
        else:
            cors_origins = list(DEFAULT_CORS_ORIGINS)

        return cls(
            log_level=env.get("MIGRATION_GATE_LOG_LEVEL", "INFO").upper(),
            cors_origins=cors_origins,
            api_prefix=env.get("MIGRATION_GATE_API_PREFIX", "/api").rstrip("/"),
        )


def configure_logging(level: str = "INFO") -> None:
    """Set up root logging in the application's format."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
