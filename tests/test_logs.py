# Copyright (c) Rich Connexions Ltd. All rights reserved.
# Licensed under the MIT License. See LICENSE for details.
"""Tests for logging setup and environment configuration."""

import importlib
import json
import logging
import sys

import pytest

import saidify.config
from saidify.logs import _JSONFormatter, configure_logging


def _record(msg="hello %s", args=("world",), exc_info=None):
    return logging.LogRecord(
        name="saidify.said",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=args,
        exc_info=exc_info,
        func="derive_said_bytes",
    )


class TestJSONFormatter:
    def test_fields(self):
        entry = json.loads(_JSONFormatter().format(_record()))
        assert entry["level"] == "INFO"
        assert entry["logger"] == "saidify.said"
        assert entry["message"] == "hello world"
        assert entry["funcName"] == "derive_said_bytes"
        assert "timestamp" in entry
        assert "exception" not in entry

    def test_exception(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record(exc_info=sys.exc_info())
        entry = json.loads(_JSONFormatter().format(record))
        assert "ValueError: boom" in entry["exception"]


class TestConfigureLogging:
    def test_single_handler(self, restore_root_logging):
        configure_logging(level="DEBUG")
        configure_logging(level="DEBUG")
        root = restore_root_logging
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, _JSONFormatter)

    def test_text_format(self, restore_root_logging):
        configure_logging(level="warning", fmt="text")
        root = restore_root_logging
        assert root.level == logging.WARNING
        assert not isinstance(root.handlers[0].formatter, _JSONFormatter)

    def test_unknown_level_falls_back_to_info(self, restore_root_logging):
        configure_logging(level="chatty")
        assert restore_root_logging.level == logging.INFO


class TestEnvironmentConfig:
    """Configurable defaults are read from the environment at import."""

    @pytest.fixture
    def reload_config(self, monkeypatch):
        yield monkeypatch
        monkeypatch.undo()
        importlib.reload(saidify.config)

    def test_defaults(self):
        assert saidify.config.PAD_CHARACTER == "#"
        assert saidify.config.DEFAULT_LABEL == "d"
        assert saidify.config.DEFAULT_CODE == "E"
        assert saidify.config.DEFAULT_KIND == "JSON"

    def test_overrides(self, reload_config):
        reload_config.setenv("SAIDIFY_DEFAULT_LABEL", "i")
        reload_config.setenv("SAIDIFY_DEFAULT_CODE", "I")
        reload_config.setenv("SAIDIFY_DEFAULT_KIND", "cbor")
        reload_config.setenv("SAIDIFY_LOG_FORMAT", "text")
        importlib.reload(saidify.config)
        assert saidify.config.DEFAULT_LABEL == "i"
        assert saidify.config.DEFAULT_CODE == "I"
        assert saidify.config.DEFAULT_KIND == "CBOR"
        assert saidify.config.LOG_FORMAT == "text"
