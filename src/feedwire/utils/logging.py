"""Structured JSON logging for feedwire components.

Conversions attach context (entry index, encoding) through ``extra=``;
those keys are emitted alongside the message so log pipelines can filter
on them without parsing text.
"""

import logging
import json
import sys
from datetime import datetime, timezone

from feedwire.config import settings

# Attributes every LogRecord carries; anything else came in via ``extra=``.
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """Emit one JSON object per record, including ``extra`` context."""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "component": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS and key not in log_entry:
                log_entry[key] = value
        if record.exc_info and record.exc_info[0] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, default=str)


def configure_logging(level=None, stream=None):
    """Attach a JSON handler to the ``feedwire`` logger.

    ``level`` defaults to ``FEEDWIRE_LOG_LEVEL`` from settings. Calling it
    again replaces the handler installed by the previous call instead of
    stacking a second one.
    """
    if level is None:
        level = settings.log_level

    root = logging.getLogger("feedwire")
    for existing in list(root.handlers):
        if isinstance(existing.formatter, JSONFormatter):
            root.removeHandler(existing)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(JSONFormatter())
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.addHandler(handler)
    root.propagate = False
    return root
