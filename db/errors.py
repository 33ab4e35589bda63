"""
db/errors.py
------------
Exceptions raised by the database layer.
"""


class StorageError(Exception):
    """A statement could not be executed against the store."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
