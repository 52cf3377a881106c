"""Fixed C/C++ vocabularies used to classify identifiers."""

from __future__ import annotations

KEYWORDS: frozenset[bytes] = frozenset(
    word.encode("ascii")
    for word in (
        "if", "else", "for", "while", "do", "switch", "case", "default",
        "break", "continue", "return", "goto", "sizeof", "typedef",
        "struct", "union", "enum", "static", "extern", "const", "volatile",
        "inline", "register", "auto", "restrict", "_Bool", "_Complex",
        "true", "false", "NULL", "nullptr",
        "class", "public", "private", "protected", "virtual", "override",
        "new", "delete", "this", "template", "typename", "namespace",
        "using", "try", "catch", "throw", "const_cast", "static_cast",
        "dynamic_cast", "reinterpret_cast", "explicit", "friend", "mutable",
        "operator", "constexpr", "noexcept", "final", "decltype",
    )
)  # fmt: skip

TYPES: frozenset[bytes] = frozenset(
    word.encode("ascii")
    for word in (
        "void", "char", "short", "int", "long", "float", "double",
        "signed", "unsigned", "bool", "size_t", "ssize_t", "ptrdiff_t",
        "int8_t", "int16_t", "int32_t", "int64_t",
        "uint8_t", "uint16_t", "uint32_t", "uint64_t",
        "i8", "i16", "i32", "i64", "u8", "u16", "u32", "u64",
        "FILE", "string", "vector", "map", "set", "array",
    )
)  # fmt: skip

__all__ = ["KEYWORDS", "TYPES"]
