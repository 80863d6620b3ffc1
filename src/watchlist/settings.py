from __future__ import annotations

import os
from dataclasses import dataclass, asdict

from dotenv import load_dotenv


@dataclass
class RuntimeSettings:
    """Process-wide knobs, read from the environment (and `.env`)."""

    log_level: str = "INFO"
    logger_name: str = "watchlist"

    def to_dict(self):
        return asdict(self)


def load_settings(env_file: str = ".env") -> RuntimeSettings:
    # real environment variables win over the .env file
    load_dotenv(env_file, override=False)
    return RuntimeSettings(
        log_level=os.getenv("WATCHLIST_LOG_LEVEL", "INFO").upper(),
        logger_name=os.getenv("WATCHLIST_LOGGER_NAME", "watchlist"),
    )
