"""Identifier detection and text-to-identifier transformation."""

from __future__ import annotations

from typing import Final

_ASCII_LETTERS: Final[frozenset[str]] = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
)
_ASCII_DIGITS: Final[frozenset[str]] = frozenset("0123456789")

_IDENTIFIER_START: Final[frozenset[str]] = _ASCII_LETTERS | {"_"}
_IDENTIFIER_CHARS: Final[frozenset[str]] = _IDENTIFIER_START | _ASCII_DIGITS
# Space is kept even though splitting has already consumed every space.
_KEEP_CHARS: Final[frozenset[str]] = _IDENTIFIER_CHARS | {" "}

TOKEN_DELIMITER: Final[str] = " "


def is_identifier_char(ch: str) -> bool:
    return ch in _IDENTIFIER_CHARS


def is_identifier_start(ch: str) -> bool:
    return ch in _IDENTIFIER_START


def is_valid_identifier(text: str) -> bool:
    """Return True if `text` is already an ASCII identifier (`[A-Za-z_][A-Za-z0-9_]*`)."""
    if not text:
        return False
    if not is_identifier_start(text[0]):
        return False
    return all(is_identifier_char(ch) for ch in text)


def _capitalize_token(token: str) -> str:
    # Unlike str.capitalize(), the tail of the token keeps its case.
    return token[:1].upper() + token[1:]


def transform(text: str) -> str:
    """Build an identifier from arbitrary text.

    Steps:
    - split on single spaces (consecutive spaces yield empty tokens),
    - upper-case the first character of every token,
    - join the tokens with no separator,
    - drop every character outside `[ _0-9A-Za-z]`.

    Example: `'f"o^o $ bar_z'` becomes `'FooBar_z'`.
    """
    joined = "".join(_capitalize_token(t) for t in text.split(TOKEN_DELIMITER))
    return "".join(ch for ch in joined if ch in _KEEP_CHARS)
