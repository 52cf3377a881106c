"""Line-oriented syntax tokenization."""

from .keywords import KEYWORDS, TYPES
from .tokenizer import (
    INITIAL_STATE,
    LineTokens,
    Token,
    TokenizerState,
    TokenKind,
    carried_state,
    token_kind_at,
    tokenize_line,
    tokenize_lines,
)

__all__ = [
    "KEYWORDS",
    "TYPES",
    "INITIAL_STATE",
    "LineTokens",
    "Token",
    "TokenKind",
    "TokenizerState",
    "carried_state",
    "token_kind_at",
    "tokenize_line",
    "tokenize_lines",
]
