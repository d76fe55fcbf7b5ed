"""Tests for logging configuration."""

from __future__ import annotations

import json
import logging
import sys
from io import StringIO

import pytest

from path_tamer.logging_config import StructuredFormatter, configure_logging


@pytest.fixture
def restore_root_logger():
    """Keep the root logger's handlers and level intact across a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(name: str, msg: str = "Test", exc_info=None) -> logging.LogRecord:
    return logging.LogRecord(
        name=name,
        level=logging.INFO,
        pathname="sampler.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )


class TestStructuredFormatter:
    @pytest.fixture
    def formatter(self) -> StructuredFormatter:
        return StructuredFormatter()

    def test_basic_json_output(self, formatter: StructuredFormatter) -> None:
        data = json.loads(formatter.format(_record("path_tamer.sampler", "Sampled")))
        assert "timestamp" in data
        assert data["level"] == "INFO"
        assert data["logger"] == "path_tamer.sampler"
        assert data["message"] == "Sampled"

    def test_category_detection(self, formatter: StructuredFormatter) -> None:
        expected = {
            "path_tamer.sampler": "sampling",
            "path_tamer.normalize": "normalize",
            "path_tamer.path_string": "io",
            "path_tamer.cli": "cli",
            "something.else": "system",
        }
        for name, category in expected.items():
            data = json.loads(formatter.format(_record(name)))
            assert data["category"] == category

    def test_nested_and_foreign_loggers(self, formatter: StructuredFormatter) -> None:
        assert formatter.category("path_tamer.cli.sub") == "cli"
        assert formatter.category("path_tamer") == "system"
        assert formatter.category("other.sampler") == "system"

    def test_no_exception_key_by_default(self, formatter: StructuredFormatter) -> None:
        data = json.loads(formatter.format(_record("path_tamer.bounds")))
        assert "exception" not in data

    def test_exception_is_included(self, formatter: StructuredFormatter) -> None:
        try:
            raise ValueError("bad extent")
        except ValueError:
            record = _record("path_tamer.normalize", "Failed", exc_info=sys.exc_info())

        data = json.loads(formatter.format(record))
        assert "ValueError: bad extent" in data["exception"]


class TestConfigureLogging:
    @pytest.mark.usefixtures("restore_root_logger")
    def test_json_output_to_stream(self) -> None:
        stream = StringIO()
        configure_logging(json_format=True, stream=stream)
        logging.getLogger("path_tamer.pipeline").info("Tamed path")

        data = json.loads(stream.getvalue().strip())
        assert data["message"] == "Tamed path"
        assert data["category"] == "normalize"

    @pytest.mark.usefixtures("restore_root_logger")
    def test_plain_output_respects_level(self) -> None:
        stream = StringIO()
        configure_logging(json_format=False, log_level="WARNING", stream=stream)
        logging.getLogger("path_tamer.sampler").info("hidden")
        logging.getLogger("path_tamer.sampler").warning("shown")

        output = stream.getvalue()
        assert "hidden" not in output
        assert "[path_tamer.sampler] shown" in output
