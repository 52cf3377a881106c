"""Line-at-a-time C/C++ tokenizer with carried block-comment state.

The tokenizer keeps no cache: a caller re-tokenizes the lines it needs and
threads the returned ``TokenizerState`` into the next line. Tokens cover only
recognised regions; bytes between them are implicitly ``NORMAL``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, NamedTuple, Sequence

from .keywords import KEYWORDS, TYPES

_SPACE = frozenset(b" \t\n\r\x0b\x0c")
_NUMBER_TAIL = frozenset(b".eE'fFlLuU")
_HEX_PREFIX = frozenset(b"xX")

_HASH = 0x23
_SLASH = 0x2F
_STAR = 0x2A
_BACKSLASH = 0x5C
_DQUOTE = 0x22
_SQUOTE = 0x27
_DOT = 0x2E
_UNDERSCORE = 0x5F
_LPAREN = 0x28
_ZERO = 0x30


class TokenKind(str, Enum):
    NORMAL = "normal"
    KEYWORD = "keyword"
    TYPE = "type"
    STRING = "string"
    CHAR = "char"
    COMMENT = "comment"
    NUMBER = "number"
    PREPROCESSOR = "preprocessor"
    FUNCTION = "function"


@dataclass(frozen=True, slots=True)
class Token:
    """Span ``[start, start + len)`` relative to the tokenized line."""

    kind: TokenKind
    start: int
    len: int

    @property
    def end(self) -> int:
        return self.start + self.len

    def contains(self, col: int) -> bool:
        return self.start <= col < self.start + self.len


@dataclass(frozen=True, slots=True)
class TokenizerState:
    in_block_comment: bool = False


INITIAL_STATE = TokenizerState()


class LineTokens(NamedTuple):
    tokens: tuple[Token, ...]
    state: TokenizerState


def _is_digit(byte: int) -> bool:
    return 0x30 <= byte <= 0x39


def _is_alpha(byte: int) -> bool:
    return 0x41 <= byte <= 0x5A or 0x61 <= byte <= 0x7A


def _is_ident(byte: int) -> bool:
    return _is_alpha(byte) or _is_digit(byte) or byte == _UNDERSCORE


def _is_hex(byte: int) -> bool:
    return _is_digit(byte) or 0x41 <= byte <= 0x46 or 0x61 <= byte <= 0x66


def _scan_quoted(line: bytes, start: int, quote: int) -> int:
    """Index just past the closing ``quote`` (or the line end), honouring escapes."""

    i = start + 1
    n = len(line)
    while i < n:
        byte = line[i]
        if byte == _BACKSLASH and i + 1 < n:
            i += 2
        elif byte == quote:
            return i + 1
        else:
            i += 1
    return i


def _scan_number(line: bytes, start: int) -> int:
    n = len(line)
    if line[start] == _ZERO and start + 1 < n and line[start + 1] in _HEX_PREFIX:
        i = start + 2
        while i < n and (_is_hex(line[i]) or line[i] == _SQUOTE):
            i += 1
        return i
    i = start
    while i < n and (_is_digit(line[i]) or line[i] in _NUMBER_TAIL):
        i += 1
    return i


def _classify_identifier(line: bytes, start: int, end: int) -> TokenKind:
    word = line[start:end]
    if word in KEYWORDS:
        return TokenKind.KEYWORD
    if word in TYPES:
        return TokenKind.TYPE
    i = end
    n = len(line)
    while i < n and line[i] in _SPACE:
        i += 1
    if i < n and line[i] == _LPAREN:
        return TokenKind.FUNCTION
    return TokenKind.NORMAL


def tokenize_line(
    line: bytes, state: TokenizerState = INITIAL_STATE
) -> LineTokens:
    """Tokenize one line (without its newline) starting in ``state``."""

    line = bytes(line)
    n = len(line)
    tokens: list[Token] = []
    i = 0

    if state.in_block_comment:
        close = line.find(b"*/")
        if close == -1:
            if n:
                tokens.append(Token(TokenKind.COMMENT, 0, n))
            return LineTokens(tuple(tokens), TokenizerState(in_block_comment=True))
        tokens.append(Token(TokenKind.COMMENT, 0, close + 2))
        i = close + 2

    while i < n:
        byte = line[i]

        if byte in _SPACE:
            i += 1
            continue

        if byte == _HASH and (i == 0 or not _is_ident(line[i - 1])):
            tokens.append(Token(TokenKind.PREPROCESSOR, i, n - i))
            break

        if byte == _SLASH and i + 1 < n and line[i + 1] == _SLASH:
            tokens.append(Token(TokenKind.COMMENT, i, n - i))
            break

        if byte == _SLASH and i + 1 < n and line[i + 1] == _STAR:
            close = line.find(b"*/", i + 2)
            if close == -1:
                tokens.append(Token(TokenKind.COMMENT, i, n - i))
                return LineTokens(tuple(tokens), TokenizerState(in_block_comment=True))
            tokens.append(Token(TokenKind.COMMENT, i, close + 2 - i))
            i = close + 2
            continue

        if byte == _DQUOTE or byte == _SQUOTE:
            end = _scan_quoted(line, i, byte)
            kind = TokenKind.STRING if byte == _DQUOTE else TokenKind.CHAR
            tokens.append(Token(kind, i, end - i))
            i = end
            continue

        if _is_digit(byte) or (byte == _DOT and i + 1 < n and _is_digit(line[i + 1])):
            end = _scan_number(line, i)
            tokens.append(Token(TokenKind.NUMBER, i, end - i))
            i = end
            continue

        if _is_alpha(byte) or byte == _UNDERSCORE:
            end = i
            while end < n and _is_ident(line[end]):
                end += 1
            tokens.append(Token(_classify_identifier(line, i, end), i, end - i))
            i = end
            continue

        i += 1

    return LineTokens(tuple(tokens), TokenizerState(in_block_comment=False))


def token_kind_at(tokens: Sequence[Token], col: int) -> TokenKind:
    for token in tokens:
        if token.contains(col):
            return token.kind
    return TokenKind.NORMAL


def tokenize_lines(
    lines: Iterable[bytes], state: TokenizerState = INITIAL_STATE
) -> Iterator[LineTokens]:
    """Tokenize consecutive lines, threading the carried state between them."""

    for line in lines:
        result = tokenize_line(line, state)
        state = result.state
        yield result


def carried_state(
    lines: Iterable[bytes], state: TokenizerState = INITIAL_STATE
) -> TokenizerState:
    """State left after ``lines``; the tokens themselves are discarded."""

    for result in tokenize_lines(lines, state):
        state = result.state
    return state


__all__ = [
    "TokenKind",
    "Token",
    "TokenizerState",
    "INITIAL_STATE",
    "LineTokens",
    "tokenize_line",
    "token_kind_at",
    "tokenize_lines",
    "carried_state",
]
