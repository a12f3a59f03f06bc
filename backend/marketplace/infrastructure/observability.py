"""Structured Logging — one JSON object per line for the marketplace API.

Base keys: timestamp, level, logger, message. Optional keys appear only when
a call site passes them via `extra`:
    - listing_id: listing store mutations, flagged submissions, listing errors
    - user_id: signup and user session start/end
    - keywords: piracy terms that flagged a submission
    - status: new moderation status, or HTTP status on error responses
    - error_code, path: set by the API error handlers

LOG_FORMAT=text switches to a plain one-line format for local runs.
"""

import logging
import json
from datetime import datetime, timezone


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in (
            "listing_id", "user_id", "error_code", "path",
            "status", "keywords",
        ):
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
