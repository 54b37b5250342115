"""Single-constraint checks shared by every scalar.

Each check either returns the literal's value unchanged or raises a
`ScalarValidationError` subclass.
"""

import re
from collections.abc import Container

from custom_scalars.shared.literals import LiteralKind, RawLiteral

from .exceptions import InvalidCharacter, InvalidKind, PatternMismatch, TooLong, TooShort


def check_kind(literal: RawLiteral) -> str:
    """Require a textual literal.

    Raises:
        InvalidKind: If the literal is not a STRING

    """
    if literal.kind is not LiteralKind.STRING:
        raise InvalidKind(literal)
    return literal.value


def check_length(literal: RawLiteral, min_length: int = 1, max_length: int | None = None) -> str:
    """Check the value length in codepoints.

    Args:
        literal: Literal to check
        min_length: Smallest accepted length
        max_length: Largest accepted length, or None for no upper bound

    Returns:
        The unchanged value

    Raises:
        TooShort: If the value has fewer than `min_length` codepoints
        TooLong: If the value has more than `max_length` codepoints

    """
    length = len(literal.value)
    if length < min_length:
        raise TooShort(literal, min_length)
    if max_length is not None and length > max_length:
        raise TooLong(literal, max_length)
    return literal.value


def check_alphabet(literal: RawLiteral, alphabet: Container[str]) -> str:
    """Reject the first character (left to right) not in `alphabet`.

    Raises:
        InvalidCharacter: On the first disallowed character

    """
    for character in literal.value:
        if character not in alphabet:
            raise InvalidCharacter(literal, character)
    return literal.value


def check_pattern(literal: RawLiteral, pattern: re.Pattern[str], message: str) -> str:
    """Require `pattern` to match the whole value.

    Raises:
        PatternMismatch: With `message` if the pattern does not match

    """
    if pattern.fullmatch(literal.value) is None:
        raise PatternMismatch(literal, message)
    return literal.value
