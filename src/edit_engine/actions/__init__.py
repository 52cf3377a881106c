"""Navigation and compound editing operations over a text store."""

from .edit import (
    delete_line,
    delete_word_backward,
    delete_word_forward,
    duplicate_line,
    move_line_down,
    move_line_up,
    replace_selection,
)
from .motion import (
    goto_line,
    is_word_byte,
    move_to_document_end,
    move_to_document_start,
    move_word_left,
    move_word_right,
)
from .search import find, find_next, find_wrapping
from .select import Motion, apply_motion, select_all, select_line, select_word

__all__ = [
    "Motion",
    "is_word_byte",
    "move_word_left",
    "move_word_right",
    "move_to_document_start",
    "move_to_document_end",
    "goto_line",
    "delete_word_backward",
    "delete_word_forward",
    "duplicate_line",
    "delete_line",
    "move_line_up",
    "move_line_down",
    "replace_selection",
    "select_word",
    "select_line",
    "select_all",
    "apply_motion",
    "find",
    "find_next",
    "find_wrapping",
]
