# Copyright (c) Rich Connexions Ltd. All rights reserved.
# Licensed under the MIT License. See LICENSE for details.
"""Shared test fixtures for the saidify test suite.

Provides reusable field maps (plain, versioned in both version string
dialects) and a factory for building versioned KERI-style events.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict

import pytest

from saidify.codes import DigDex


# =========================================================================
# Field maps
# =========================================================================

@pytest.fixture
def attr_sad() -> Dict[str, str]:
    """Unversioned map whose Blake3-256 SAID is a known value."""
    return {
        "d": "",
        "attr1": "value1",
        "attr2": "value2",
        "attr3": "value3",
    }


@pytest.fixture
def small_sad() -> Dict[str, object]:
    """Map with the label last, after integer fields."""
    return {"a": 1, "b": 2, "d": ""}


@pytest.fixture
def make_event() -> Callable[..., Dict[str, object]]:
    """Factory fixture: a versioned KERI-style event with an empty SAID.

    Keyword arguments override the version string and add extra fields.
    """

    def _make(vs: str = "KERI10JSON000000_", **extra: object) -> Dict[str, object]:
        event: Dict[str, object] = {
            "v": vs,
            "t": "icp",
            "d": "",
            "i": "BKxy2sgzfplyr-tgwIxS19f2OchFHtLwPWD3v4oYimBx",
            "s": "0",
            "kt": "1",
        }
        event.update(extra)
        return event

    return _make


@pytest.fixture(params=list(DigDex), ids=lambda code: f"code-{code}")
def code(request) -> str:
    """Every supported derivation code."""
    return request.param


# =========================================================================
# Logging isolation
# =========================================================================

@pytest.fixture
def restore_root_logging():
    """Put the root logger's handlers and level back after a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
