"""Exceptions for the storage module."""


class StorageError(Exception):
    """Base exception for task storage errors."""

    pass


class StorageLoadError(StorageError):
    """Raised when stored tasks cannot be read or decoded."""

    def __init__(self, location: str, reason: str):
        self.location = location
        self.reason = reason
        super().__init__(f"Cannot load tasks from '{location}': {reason}")


class StorageSaveError(StorageError):
    """Raised when tasks cannot be written."""

    def __init__(self, location: str, reason: str):
        self.location = location
        self.reason = reason
        super().__init__(f"Cannot save tasks to '{location}': {reason}")
