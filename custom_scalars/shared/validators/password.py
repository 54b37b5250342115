"""Password complexity checks."""

import re
from collections.abc import Callable
from enum import StrEnum

from custom_scalars.shared.literals import RawLiteral

from .exceptions import ComplexityUnmet

_ALPHA_NUMERIC = re.compile(r"(?=.*[A-Za-z])(?=.*[0-9])", re.DOTALL)
_LOWERCASE = re.compile(r"[a-z]")
_UPPERCASE = re.compile(r"[A-Z]")
_SPECIAL = re.compile(r"[^A-Za-z0-9]")


class Complexity(StrEnum):
    """Password complexity rules.

    ALPHA_NUMERIC: at least one ASCII letter and one digit.
    MIXED_CASE: at least one lowercase and one uppercase letter.
    SPECIAL_CHARS: at least one character outside [A-Za-z0-9].
    """

    ALPHA_NUMERIC = "alpha_numeric"
    MIXED_CASE = "mixed_case"
    SPECIAL_CHARS = "special_chars"


def check_alpha_numeric(literal: RawLiteral) -> str:
    """Require at least one letter and one digit.

    Args:
        literal: Literal to validate

    Returns:
        The unchanged value

    Raises:
        ComplexityUnmet: If the value lacks a letter or a digit

    Examples:
        >>> check_alpha_numeric(RawLiteral.string("abc123"))
        'abc123'
        >>> check_alpha_numeric(RawLiteral.string("dddd"))
        Traceback (most recent call last):
        ...
        custom_scalars.shared.validators.exceptions.ComplexityUnmet: String must contain at least one number and one letter

    """
    if not _ALPHA_NUMERIC.match(literal.value):
        raise ComplexityUnmet(
            literal, Complexity.ALPHA_NUMERIC, "String must contain at least one number and one letter"
        )
    return literal.value


def check_mixed_case(literal: RawLiteral) -> str:
    """Require at least one lowercase and one uppercase letter."""
    if not (_LOWERCASE.search(literal.value) and _UPPERCASE.search(literal.value)):
        raise ComplexityUnmet(
            literal,
            Complexity.MIXED_CASE,
            "String must contain at least one uppercase and one lowercase letter",
        )
    return literal.value


def check_special_chars(literal: RawLiteral) -> str:
    """Require at least one character outside [A-Za-z0-9]."""
    if not _SPECIAL.search(literal.value):
        raise ComplexityUnmet(literal, Complexity.SPECIAL_CHARS, "String must contain at least one special character")
    return literal.value


COMPLEXITY_CHECKS: dict[Complexity, Callable[[RawLiteral], str]] = {
    Complexity.ALPHA_NUMERIC: check_alpha_numeric,
    Complexity.MIXED_CASE: check_mixed_case,
    Complexity.SPECIAL_CHARS: check_special_chars,
}
