"""File storage abstraction.

The merge pipeline reads and writes through ``FileStorage`` so tests can run
against an in-memory implementation.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class FileStorage(ABC):
    """Abstract byte-level file access for dependency injection."""

    @abstractmethod
    def read(self, path: str) -> bytes:
        """Return the full contents of ``path``.

        Raises:
            OSError: If the file is missing or unreadable
        """
        ...

    @abstractmethod
    def write(self, path: str, data: bytes) -> None:
        """Replace the contents of ``path`` with ``data``.

        Raises:
            OSError: If the destination is unwritable
        """
        ...


class LocalFileStorage(FileStorage):
    """Production implementation backed by the local filesystem."""

    def read(self, path: str) -> bytes:
        return Path(path).read_bytes()

    def write(self, path: str, data: bytes) -> None:
        Path(path).write_bytes(data)
