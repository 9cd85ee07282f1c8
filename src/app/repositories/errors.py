"""
Repository Errors

Raised by repository implementations so the application layer can tell
client-caused conflicts apart from backend faults.
"""


class StoreError(Exception):
    """Base class for persistence failures"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class StoreUnavailableError(StoreError):
    """Backing store could not complete the operation (connection, timeout, ...)"""


class DuplicateRecordError(StoreError):
    """A uniqueness constraint rejected the write"""
