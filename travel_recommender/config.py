# =============================================================================
# travel_recommender/config.py  -  Runtime Settings
# =============================================================================
#
# Settings come from environment variables.  Entry points (main.py and the
# MCP server) call dotenv's load_dotenv() first, so a local .env file works
# too; this module itself only reads os.environ and stays framework-free.
#
#   TRAVEL_MIN_CONFIDENCE   threshold for "high confidence" (default 0.7)
#   TRAVEL_LOG_LEVEL        logging level name for entry points (default INFO)
# =============================================================================

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from travel_recommender.models import InvalidArgumentError

DEFAULT_MIN_CONFIDENCE = 0.7
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    min_confidence: float = DEFAULT_MIN_CONFIDENCE
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Read settings from ``environ`` (defaults to ``os.environ``).

        Raises:
            InvalidArgumentError: if a value is present but unusable.
        """
        environ = os.environ if environ is None else environ

        raw_confidence = environ.get("TRAVEL_MIN_CONFIDENCE", "").strip()
        if raw_confidence:
            try:
                min_confidence = float(raw_confidence)
            except ValueError:
                raise InvalidArgumentError(
                    f"TRAVEL_MIN_CONFIDENCE must be a number, got {raw_confidence!r}"
                ) from None
            if not 0.0 <= min_confidence <= 1.0:
                raise InvalidArgumentError(
                    f"TRAVEL_MIN_CONFIDENCE must be between 0.0 and 1.0, got {min_confidence!r}"
                )
        else:
            min_confidence = DEFAULT_MIN_CONFIDENCE

        log_level = environ.get("TRAVEL_LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL
        if not isinstance(logging.getLevelName(log_level), int):
            raise InvalidArgumentError(f"TRAVEL_LOG_LEVEL is not a logging level: {log_level!r}")

        return cls(min_confidence=min_confidence, log_level=log_level)
