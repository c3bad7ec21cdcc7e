"""Configuration for Hunt the Wumpus."""

import os
from dataclasses import dataclass
from pathlib import Path


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes")


@dataclass
class Config:
    """Application configuration."""

    log_level: str = "INFO"
    log_file: Path | None = None
    json_logs: bool = False
    seed: int | None = None
    max_drain_ticks: int = 64

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        log_file = os.getenv("WUMPUS_LOG_FILE")
        seed = os.getenv("WUMPUS_SEED")

        return cls(
            log_level=os.getenv("WUMPUS_LOG_LEVEL", cls.log_level),
            log_file=Path(log_file) if log_file else None,
            json_logs=_env_flag("WUMPUS_JSON_LOGS", False),
            seed=int(seed) if seed else None,
            max_drain_ticks=int(
                os.getenv("WUMPUS_MAX_DRAIN_TICKS", str(cls.max_drain_ticks))
            ),
        )
