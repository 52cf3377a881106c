from __future__ import annotations

from edit_engine.syntax import (
    KEYWORDS,
    TYPES,
    Token,
    TokenizerState,
    TokenKind,
    carried_state,
    token_kind_at,
    tokenize_line,
    tokenize_lines,
)


def kinds(line: bytes, state: TokenizerState = TokenizerState()) -> list[TokenKind]:
    return [token.kind for token in tokenize_line(line, state).tokens]


def test_vocabularies_are_immutable_byte_sets() -> None:
    assert isinstance(KEYWORDS, frozenset)
    assert isinstance(TYPES, frozenset)
    assert b"if" in KEYWORDS
    assert b"nullptr" in KEYWORDS
    assert b"int" in TYPES
    assert b"uint64_t" in TYPES


def test_types_and_function_names() -> None:
    result = tokenize_line(b"int main() {")

    assert result.tokens == (
        Token(TokenKind.TYPE, 0, 3),
        Token(TokenKind.FUNCTION, 4, 4),
    )
    assert result.state.in_block_comment is False


def test_function_name_with_space_before_paren() -> None:
    assert kinds(b"foo (x)") == [TokenKind.FUNCTION, TokenKind.NORMAL]


def test_keywords_and_numbers() -> None:
    result = tokenize_line(b"return 0x1F + 3.5f;")

    assert result.tokens == (
        Token(TokenKind.KEYWORD, 0, 6),
        Token(TokenKind.NUMBER, 7, 4),
        Token(TokenKind.NUMBER, 14, 4),
    )


def test_number_forms() -> None:
    assert tokenize_line(b"x = .5;").tokens[1] == Token(TokenKind.NUMBER, 4, 2)
    assert tokenize_line(b"1e10UL").tokens == (Token(TokenKind.NUMBER, 0, 6),)
    assert tokenize_line(b"0xFF'FF").tokens == (Token(TokenKind.NUMBER, 0, 7),)


def test_preprocessor_runs_to_end_of_line() -> None:
    assert tokenize_line(b"#include <stdio.h>").tokens == (
        Token(TokenKind.PREPROCESSOR, 0, 18),
    )
    assert tokenize_line(b"  #define X 1").tokens == (
        Token(TokenKind.PREPROCESSOR, 2, 11),
    )


def test_hash_inside_identifier_is_not_preprocessor() -> None:
    assert TokenKind.PREPROCESSOR not in kinds(b"x = a#b")


def test_string_with_escaped_quote() -> None:
    result = tokenize_line(b'printf("a\\"b");')

    assert result.tokens == (
        Token(TokenKind.FUNCTION, 0, 6),
        Token(TokenKind.STRING, 7, 6),
    )


def test_char_literal_and_unterminated_string() -> None:
    assert tokenize_line(b"'x'").tokens == (Token(TokenKind.CHAR, 0, 3),)
    assert tokenize_line(b'"open').tokens == (Token(TokenKind.STRING, 0, 5),)


def test_line_comment() -> None:
    assert tokenize_line(b"a // hi").tokens == (
        Token(TokenKind.NORMAL, 0, 1),
        Token(TokenKind.COMMENT, 2, 5),
    )


def test_block_comment_closed_on_same_line() -> None:
    result = tokenize_line(b"/* a */ b")

    assert result.tokens == (
        Token(TokenKind.COMMENT, 0, 7),
        Token(TokenKind.NORMAL, 8, 1),
    )
    assert result.state.in_block_comment is False


def test_block_comment_carries_across_lines() -> None:
    first = tokenize_line(b"int x; /* start")
    assert first.tokens[-1] == Token(TokenKind.COMMENT, 7, 8)
    assert first.state.in_block_comment is True

    middle = tokenize_line(b"still comment", first.state)
    assert middle.tokens == (Token(TokenKind.COMMENT, 0, 13),)
    assert middle.state.in_block_comment is True

    last = tokenize_line(b"end */ int y;", middle.state)
    assert last.tokens == (
        Token(TokenKind.COMMENT, 0, 6),
        Token(TokenKind.TYPE, 7, 3),
        Token(TokenKind.NORMAL, 11, 1),
    )
    assert last.state.in_block_comment is False


def test_slash_star_slash_does_not_close() -> None:
    assert tokenize_line(b"/*/").state.in_block_comment is True


def test_empty_line_inside_block_comment() -> None:
    result = tokenize_line(b"", TokenizerState(in_block_comment=True))

    assert result.tokens == ()
    assert result.state.in_block_comment is True


def test_token_kind_at_defaults_to_normal() -> None:
    tokens = tokenize_line(b"int main()").tokens

    assert token_kind_at(tokens, 1) is TokenKind.TYPE
    assert token_kind_at(tokens, 3) is TokenKind.NORMAL
    assert token_kind_at(tokens, 5) is TokenKind.FUNCTION
    assert token_kind_at(tokens, 50) is TokenKind.NORMAL


def test_tokenize_lines_threads_state() -> None:
    lines = [b"/* a", b"b", b"c */ d"]

    results = list(tokenize_lines(lines))

    assert [result.state.in_block_comment for result in results] == [True, True, False]
    assert results[2].tokens[-1] == Token(TokenKind.NORMAL, 5, 1)
    assert carried_state(lines[:2]).in_block_comment is True
    assert carried_state(lines).in_block_comment is False
