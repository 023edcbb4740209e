"""Centralised settings for extract-href.

Values can be overridden via environment variables or a `.env` file in the
project root (loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # HTTP fetch
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("EXTRACT_HREF_TIMEOUT", "30.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "EXTRACT_HREF_USER_AGENT", "Mozilla/5.0 (compatible; extract-href/1.0)"
        )
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("EXTRACT_HREF_LOG_LEVEL", "WARNING")
    )


# Module-level singleton; import this everywhere:
#   from extract_href.config import settings
settings = Settings()
