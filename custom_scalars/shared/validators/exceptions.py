"""Validation errors raised by scalar checks.

Every error carries a fixed human-readable message and the offending
literal. None of them is retried or recovered from inside the library.
"""

from custom_scalars.shared.literals import RawLiteral


class ScalarValidationError(ValueError):
    """Base scalar validation error."""

    def __init__(self, literal: RawLiteral, message: str = "Validation failed"):
        super().__init__(message)
        self.message = message
        self.literal = literal

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, literal={self.literal!r})"


class InvalidKind(ScalarValidationError):
    """Raised when a non-textual literal reaches a textual scalar."""

    def __init__(self, literal: RawLiteral):
        super().__init__(literal, f"Can only parse strings got a: {literal.kind.value}")


class TooShort(ScalarValidationError):
    """Raised when a value is shorter than the minimum length."""

    def __init__(self, literal: RawLiteral, min_length: int):
        super().__init__(literal, "String not long enough")
        self.min_length = min_length


class TooLong(ScalarValidationError):
    """Raised when a value is longer than the maximum length."""

    def __init__(self, literal: RawLiteral, max_length: int):
        super().__init__(literal, "String too long")
        self.max_length = max_length


class InvalidCharacter(ScalarValidationError):
    """Raised on the first character outside the allowed alphabet."""

    def __init__(self, literal: RawLiteral, character: str):
        super().__init__(literal, "Invalid character found")
        self.character = character


class PatternMismatch(ScalarValidationError):
    """Raised when a regex-based scalar does not match."""


class ComplexityUnmet(ScalarValidationError):
    """Raised when a single complexity rule is not satisfied."""

    def __init__(self, literal: RawLiteral, rule: str, message: str):
        super().__init__(literal, message)
        self.rule = rule
