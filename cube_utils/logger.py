import logging
import json
import sys
from datetime import datetime, timezone

# Attributes every LogRecord carries; anything else came in through 'extra'.
STANDARD_ATTRS = frozenset([
    'args', 'asctime', 'created', 'exc_info', 'exc_text',
    'filename',
    'funcName', 'levelname', 'levelno',
    'lineno',
    'module', 'msecs',
    'message', 'msg', 'name', 'pathname', 'process', 'processName',
    'relativeCreated', 'stack_info', 'thread', 'threadName'
])
OPTIONAL_ATTRS = frozenset(['taskName'])


class JsonFormatter(logging.Formatter):
    """Custom formatter to output logs in JSON format including 'extra' fields."""
    def format(self, record):
        log_record = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key in STANDARD_ATTRS:
                continue
            if key in OPTIONAL_ATTRS and value is None:
                continue
            log_record[key] = value

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_record, default=str)


class StageFilter(logging.Filter):
    """Injects the generation target as the taskName for all records."""
    def __init__(self, stage: str = "cube-utils"):
        super().__init__()
        self.stage = stage

    def filter(self, record):
        record.taskName = self.stage
        return True


def setup_logger(name: str, stream=None) -> logging.Logger:
    """
    Configures and returns a logger with JSON formatting.

    Records go to stderr by default: stdout carries the generated source.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)
        logger.setLevel(logging.WARNING)

    return logger
