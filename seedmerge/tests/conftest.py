"""Shared fixtures: in-memory storage and a fixed clock."""
from datetime import datetime, timezone
from typing import Dict

import pytest

from seedmerge.clock import Clock
from seedmerge.storage import FileStorage

FIXED_NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)
FIXED_NOW_ISO = "2024-05-01T12:00:00.000Z"


class FakeFileStorage(FileStorage):
    """In-memory storage that records writes.

    Paths listed in ``unwritable`` raise PermissionError on write.
    """

    def __init__(self, files: Dict[str, bytes] = None, unwritable=()):
        self.files = dict(files or {})
        self.unwritable = set(unwritable)
        self.writes = []

    def read(self, path: str) -> bytes:
        if path not in self.files:
            raise FileNotFoundError(path)
        return self.files[path]

    def write(self, path: str, data: bytes) -> None:
        if path in self.unwritable:
            raise PermissionError(f"Permission denied: {path}")
        self.writes.append(path)
        self.files[path] = data


class FakeClock(Clock):
    """Clock frozen at a given moment."""

    def __init__(self, moment: datetime = FIXED_NOW):
        self.moment = moment

    def now(self) -> datetime:
        return self.moment


@pytest.fixture
def storage():
    return FakeFileStorage()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def empty_registry():
    return {"servers": [], "metadata": {"count": 0}}
