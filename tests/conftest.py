"""Shared fixtures: two simple services and a strategy that records its calls."""

import json
import logging
from typing import Any, List, Sequence

import pytest
import structlog


class Primary:
    def __init__(self):
        self.calls: List[tuple] = []

    def handle(self, payload, *, suffix=""):
        self.calls.append(("handle", payload))
        return f"P:{payload}{suffix}"

    def each(self, items, callback):
        return [callback(item) for item in items]

    def explode(self):
        raise RuntimeError("primary failed")


class Experimental:
    def __init__(self):
        self.calls: List[tuple] = []

    def handle(self, payload, *, suffix=""):
        self.calls.append(("handle", payload))
        return f"E:{payload}{suffix}"

    def only_experimental(self):
        return "experimental"


class RecordingStrategy:
    """Picks a fixed index and remembers every candidate list it saw."""

    def __init__(self, index: int = 0):
        self.index = index
        self.seen: List[Sequence[Any]] = []

    def select(self, candidates):
        self.seen.append(candidates)
        return candidates[self.index]


@pytest.fixture
def primary():
    return Primary()


@pytest.fixture
def experimental():
    return Experimental()


@pytest.fixture
def services(primary, experimental):
    return [primary, experimental]


@pytest.fixture
def recording_strategy():
    return RecordingStrategy


@pytest.fixture
def config_file(tmp_path):
    """Write a JSON payload to a temporary config file and return its path."""

    def write(payload, name="balancer.json"):
        path = tmp_path / name
        path.write_text(payload if isinstance(payload, str) else json.dumps(payload))
        return str(path)

    return write


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo configure_logging(): structlog defaults, root level and basicConfig handlers."""
    root = logging.getLogger()
    level = root.level
    yield
    structlog.reset_defaults()
    for handler in list(root.handlers):
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)
