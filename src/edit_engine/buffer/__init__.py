"""Gap-buffer text store, undo log, selection and jump history."""

from .buffer import TextStore, Transaction
from .errors import (
    AllocationFailure,
    EditEngineError,
    FileAccessError,
    FileNotReadable,
    FileNotWritable,
    NoFilenameSet,
)
from .gap import GapBuffer
from .jumplist import PositionHistory
from .registers import RegisterBank, RegisterValue
from .state import CursorState, Selection
from .undo import OpKind, Operation, UndoLog
from .validation import clamp_offset, coerce_bytes

__all__ = [
    "TextStore",
    "Transaction",
    "GapBuffer",
    "CursorState",
    "Selection",
    "OpKind",
    "Operation",
    "UndoLog",
    "PositionHistory",
    "RegisterBank",
    "RegisterValue",
    "EditEngineError",
    "AllocationFailure",
    "FileAccessError",
    "FileNotReadable",
    "FileNotWritable",
    "NoFilenameSet",
    "clamp_offset",
    "coerce_bytes",
]
