# tests/unit/core/test_logging.py
"""Tests for structlog configuration."""

import json
import logging

import pytest
import structlog

from propsuite.contracts.config import PropertyArgs
from propsuite.core.logging import configure_logging
from propsuite.core.options import set_option


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()


class TestConfigureLogging:
    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(json_output=True, level="DEBUG")

        structlog.get_logger("propsuite.test").info("option_set", option="maxSize", value="10")

        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "option_set"
        assert record["option"] == "maxSize"
        assert record["level"] == "info"
        assert "_record" not in record

    def test_stdlib_loggers_share_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(json_output=True, level="INFO")

        logging.getLogger("propsuite.stdlib").warning("plain message")

        record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert record["event"] == "plain message"

    def test_level_filters(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(json_output=True, level="WARNING")

        structlog.get_logger("propsuite.test").debug("hidden")

        assert "hidden" not in capsys.readouterr().err

    def test_noisy_loggers_never_below_warning(self) -> None:
        configure_logging(level="DEBUG")
        assert logging.getLogger("hypothesis").level == logging.WARNING

    def test_module_loggers_follow_configuration(
        self, capsys: pytest.CaptureFixture[str], std_args: PropertyArgs
    ) -> None:
        configure_logging(json_output=True, level="DEBUG")

        set_option("maxSize", "10", std_args)

        records = [json.loads(line) for line in capsys.readouterr().err.strip().splitlines()]
        assert {"event": "option_set", "option": "maxSize", "value": "10"}.items() <= records[-1].items()
