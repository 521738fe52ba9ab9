import logging
import os
from dataclasses import dataclass
from typing import Optional

ENV_PREFIX = "ABI_RETURN_GUESSER_"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class GuesserConfig:
    # appended for words no heuristic can classify. None drops them from the result
    unknown_type: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL


def resolve_log_level(level: str) -> int:
    """Map a level name such as ``debug`` to its ``logging`` constant."""
    normalized = (level or "").strip().upper()
    value = logging.getLevelName(normalized)
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level '{level}'.")
    return value


def load_config() -> GuesserConfig:
    """Load configuration from environment variables."""
    unknown_type = os.getenv(f"{ENV_PREFIX}UNKNOWN_TYPE") or None
    log_level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    resolve_log_level(log_level)

    return GuesserConfig(unknown_type=unknown_type, log_level=log_level)
