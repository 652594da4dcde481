"""File storage abstraction layer.

Generated files are written through a storage backend so callers can
redirect output (tests use a temporary directory). Filesystem errors such
as permission or disk-space failures propagate as OSError.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from dummyfile.config import get_settings


class StorageBackend(ABC):
    """Abstract base class for storage backends."""

    @abstractmethod
    def save(self, data: bytes, filename: str) -> Path:
        """Save bytes under filename and return the written path."""
        pass

    @abstractmethod
    def read(self, filename: str) -> bytes:
        """Read a file's contents."""
        pass

    @abstractmethod
    def size(self, filename: str) -> int:
        """Return the stored size of a file in bytes."""
        pass


class LocalStorageBackend(StorageBackend):
    """Local filesystem storage backend."""

    def __init__(self, base_dir: str | Path | None = None) -> None:
        self.base_dir = Path(base_dir or get_settings().output_dir)

    def get_path(self, filename: str) -> Path:
        """Get the path a file is stored at."""
        return self.base_dir / filename

    def save(self, data: bytes, filename: str) -> Path:
        """Write bytes to the local filesystem, replacing any existing file."""
        self.base_dir.mkdir(parents=True, exist_ok=True)
        file_path = self.get_path(filename)
        with open(file_path, "wb") as dest:
            dest.write(data)
        return file_path

    def read(self, filename: str) -> bytes:
        """Read a file from the local filesystem."""
        file_path = self.get_path(filename)
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {filename}")
        return file_path.read_bytes()

    def size(self, filename: str) -> int:
        """Return the size of a file on disk."""
        return self.get_path(filename).stat().st_size


# Default storage instance
_storage: StorageBackend | None = None


def get_storage() -> StorageBackend:
    """Get the configured storage backend."""
    global _storage
    if _storage is None:
        _storage = LocalStorageBackend(get_settings().output_dir)
    return _storage


def reset_storage() -> None:
    """Reset the storage singleton (useful for testing)."""
    global _storage
    _storage = None
