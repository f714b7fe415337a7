"""Configuration for Wanderer."""

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

    database_url: str = "sqlite:///./wanderer.db"
    host: str = "localhost"
    port: int = 1965
    certfile: Path | None = None
    keyfile: Path | None = None
    log_level: str = "INFO"
    log_file: Path | None = None
    json_logs: bool = False
    hash_fingerprints: bool = True
    # Packaged world name or path to a JSON world file.
    world: str = "dungeon"
    max_turns: int = 10
    strategy: str = "random"
    goal: str | None = None

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        certfile = os.getenv("WANDERER_CERTFILE")
        keyfile = os.getenv("WANDERER_KEYFILE")
        log_file = os.getenv("WANDERER_LOG_FILE")

        return cls(
            database_url=os.getenv("WANDERER_DATABASE_URL", cls.database_url),
            host=os.getenv("WANDERER_HOST", cls.host),
            port=int(os.getenv("WANDERER_PORT", str(cls.port))),
            certfile=Path(certfile) if certfile else None,
            keyfile=Path(keyfile) if keyfile else None,
            log_level=os.getenv("WANDERER_LOG_LEVEL", cls.log_level),
            log_file=Path(log_file) if log_file else None,
            json_logs=_env_flag("WANDERER_JSON_LOGS", False),
            hash_fingerprints=_env_flag("WANDERER_HASH_FINGERPRINTS", True),
            world=os.getenv("WANDERER_WORLD", cls.world),
            max_turns=int(os.getenv("WANDERER_MAX_TURNS", str(cls.max_turns))),
            strategy=os.getenv("WANDERER_STRATEGY", cls.strategy),
            goal=os.getenv("WANDERER_GOAL") or None,
        )
