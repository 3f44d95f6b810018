"""
Logging utilities for stack synthesis.

Emits one JSON object per line on stderr, so progress output never mixes
with templates written to stdout by `cdk synth`.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict


class SynthLogger:
    """
    JSON logger used while the construct tree is being built.

    Example:
        logger = SynthLogger(__name__)
        logger.info("Creating function", function_name="fitness_score_get")
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.logger = logging.getLogger(name)
        self.logger.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())

    def _log(self, level: int, message: str, **kwargs: Any) -> None:
        """Internal method to emit structured JSON logs."""
        if not self.logger.isEnabledFor(level):
            return

        log_entry: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": logging.getLevelName(level),
            "logger": self.name,
            "message": message,
            **kwargs,
        }

        # Remove None values
        log_entry = {k: v for k, v in log_entry.items() if v is not None}

        print(json.dumps(log_entry, default=str), file=sys.stderr)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log info level message."""
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log warning level message."""
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log error level message."""
        self._log(logging.ERROR, message, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log debug level message."""
        self._log(logging.DEBUG, message, **kwargs)
