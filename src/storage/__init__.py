"""Task storage module.

Public API:
    TaskStorage: Interface with load() and save().
    FileTaskStorage: Text-file backend, one record per line.
    InMemoryTaskStorage: Backend for tests.
    StorageError: Base exception for module errors.
"""

from .exceptions import StorageError, StorageLoadError, StorageSaveError
from .task_storage import (
    DATA_FILE_ENV_VAR,
    DEFAULT_DATA_FILE,
    FileTaskStorage,
    InMemoryTaskStorage,
    TaskStorage,
)

__all__ = [
    "TaskStorage",
    "FileTaskStorage",
    "InMemoryTaskStorage",
    "DATA_FILE_ENV_VAR",
    "DEFAULT_DATA_FILE",
    "StorageError",
    "StorageLoadError",
    "StorageSaveError",
]
