"""Error types raised by the text store and its collaborators."""

from __future__ import annotations

from os import PathLike
from typing import Optional, Union

PathType = Union[str, "PathLike[str]"]


class EditEngineError(RuntimeError):
    """Base class for engine failures that callers are expected to handle."""


class AllocationFailure(EditEngineError, MemoryError):
    """Raised when the gap buffer cannot grow to fit a mutation.

    Nothing is mutated or logged when this is raised.
    """

    def __init__(self, message: str, *, requested: int, capacity: int) -> None:
        super().__init__(message)
        self.requested = requested
        self.capacity = capacity


class FileAccessError(EditEngineError):
    """Raised when a load or save cannot complete."""

    def __init__(self, message: str, *, path: Optional[PathType] = None) -> None:
        super().__init__(message)
        self.path = path


class FileNotReadable(FileAccessError):
    pass


class FileNotWritable(FileAccessError):
    pass


class NoFilenameSet(FileAccessError):
    pass


__all__ = [
    "PathType",
    "EditEngineError",
    "AllocationFailure",
    "FileAccessError",
    "FileNotReadable",
    "FileNotWritable",
    "NoFilenameSet",
]
