"""Configuration for Haunted Campus."""

import os
from dataclasses import dataclass
from pathlib import Path


def _positive_int(var: str, default: int) -> int:
    """Read a positive integer from the environment."""
    raw = os.getenv(var, str(default))
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{var} must be a whole number, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{var} must be greater than 0, got {value}")
    return value


@dataclass
class Config:
    """Application configuration."""

    starting_health: int = 100
    attack_power: int = 10
    log_level: str = "WARNING"
    log_file: Path | None = None
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Raises ValueError naming the variable when a stat is not a positive
        whole number.
        """
        log_file = os.getenv("HAUNTED_LOG_FILE")

        return cls(
            starting_health=_positive_int(
                "HAUNTED_STARTING_HEALTH", cls.starting_health
            ),
            attack_power=_positive_int("HAUNTED_ATTACK_POWER", cls.attack_power),
            log_level=os.getenv("HAUNTED_LOG_LEVEL", cls.log_level),
            log_file=Path(log_file) if log_file else None,
            json_logs=os.getenv("HAUNTED_JSON_LOGS", "").lower()
            in ("true", "1", "yes"),
        )
