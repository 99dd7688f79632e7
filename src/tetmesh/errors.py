"""
Mesh Read Errors
================

Exception hierarchy raised while loading ``.mesh`` files.

Every error aborts the whole load; no partial result is returned.
"""

from typing import Optional


class MeshReadError(Exception):
    """Base exception for all mesh loading failures."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.message = message
        self.line_number = line_number
        if line_number is not None:
            message = f"{message} (line {line_number})"
        super().__init__(message)


class MeshIOError(MeshReadError, OSError):
    """File could not be opened for reading."""
    pass


class MeshFormatError(MeshReadError, ValueError):
    """An expected keyword or value is missing or does not match."""
    pass


class MeshTruncationError(MeshReadError, ValueError):
    """Fewer numeric tokens are available than a count or record requires."""
    pass


class MeshShapeError(MeshReadError, ValueError):
    """Rows of a section are not rectangular or have the wrong width."""
    pass


class MeshIndexError(MeshReadError, IndexError):
    """Connectivity index outside the range of loaded vertices."""
    pass
