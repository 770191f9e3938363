"""Runtime configuration read from the environment.

A ``.env`` file in the working directory is loaded first; variables that
are already set in the environment win over it.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

DEFAULT_API_URL = "http://localhost:5000/api"
DEFAULT_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings(dotenv_path: str | None = None) -> Settings:
    load_dotenv(dotenv_path or find_dotenv(usecwd=True))

    raw_timeout = os.getenv("ORDERDESK_TIMEOUT", str(DEFAULT_TIMEOUT))
    try:
        timeout = float(raw_timeout)
    except ValueError:
        raise ValueError(f"ORDERDESK_TIMEOUT must be a number, got {raw_timeout!r}")
    if timeout <= 0:
        raise ValueError(f"ORDERDESK_TIMEOUT must be positive, got {raw_timeout!r}")

    log_level = os.getenv("ORDERDESK_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"ORDERDESK_LOG_LEVEL is not a logging level: {log_level!r}")

    return Settings(
        api_url=os.getenv("ORDERDESK_API_URL", DEFAULT_API_URL),
        timeout=timeout,
        log_level=log_level,
    )


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
