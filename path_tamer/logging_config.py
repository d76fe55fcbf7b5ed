"""Logging setup for the CLI.

Log lines are either human-readable or one JSON object per line, tagged with
the stage of the pipeline that emitted them.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import TextIO

PLAIN_FORMAT = "%(asctime)s %(levelname)5s [%(name)s] %(message)s"


class StructuredFormatter(logging.Formatter):
    """Render records as JSON with a pipeline stage ``category``."""

    # path_tamer module -> stage; anything else is "system"
    CATEGORIES = {
        "sampler": "sampling",
        "bounds": "sampling",
        "arc_length": "sampling",
        "normalize": "normalize",
        "pipeline": "normalize",
        "path_string": "io",
        "cli": "cli",
    }

    def category(self, logger_name: str) -> str:
        package, _, module = logger_name.partition(".")
        if package != "path_tamer":
            return "system"
        return self.CATEGORIES.get(module.split(".")[0], "system")

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "category": self.category(record.name),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def configure_logging(
    *,
    json_format: bool = False,
    log_level: int | str = logging.INFO,
    stream: TextIO | None = None,
) -> None:
    """Replace the root logger's handlers with a single stream handler.

    Args:
        json_format: Emit JSON lines instead of the plain format
        log_level: Minimum log level (number or name)
        stream: Destination stream (default: sys.stderr)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter: logging.Formatter
    if json_format:
        formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(PLAIN_FORMAT, datefmt="%H:%M:%S")

    stream_handler = logging.StreamHandler(stream or sys.stderr)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)
