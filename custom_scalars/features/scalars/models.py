"""Scalar domain models: constraints, definitions and validation results."""

import logging
import re
from abc import abstractmethod
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from custom_scalars.shared.literals import RawLiteral
from custom_scalars.shared.validators.checks import check_alphabet, check_kind, check_length, check_pattern
from custom_scalars.shared.validators.exceptions import ScalarValidationError
from custom_scalars.shared.validators.password import COMPLEXITY_CHECKS, Complexity

logger = logging.getLogger(__name__)


class _Constraint(BaseModel):
    """Base for constraint variants."""

    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def check(self, literal: RawLiteral) -> str:
        """Return the literal's value, or raise a ScalarValidationError."""


class KindConstraint(_Constraint):
    """Only textual literals are accepted."""

    type: Literal["kind"] = "kind"

    def check(self, literal: RawLiteral) -> str:
        return check_kind(literal)


class LengthConstraint(_Constraint):
    """Length bounds measured in codepoints.

    `max_length=None` means no upper bound.
    """

    type: Literal["length"] = "length"
    min_length: int = Field(default=1, ge=0)
    max_length: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def validate_bounds(self) -> "LengthConstraint":
        """Reject unsatisfiable bounds."""
        if self.max_length is not None and self.min_length > self.max_length:
            raise ValueError(f"min_length ({self.min_length}) must not exceed max_length ({self.max_length})")
        return self

    def check(self, literal: RawLiteral) -> str:
        return check_length(literal, self.min_length, self.max_length)


class AlphabetConstraint(_Constraint):
    """Every character must belong to `alphabet`."""

    type: Literal["alphabet"] = "alphabet"
    alphabet: frozenset[str] = Field(..., min_length=1)

    @field_validator("alphabet", mode="before")
    @classmethod
    def split_characters(cls, value: Any) -> Any:
        """Accept a plain string as a set of characters."""
        if isinstance(value, str):
            return frozenset(value)
        return value

    @field_validator("alphabet")
    @classmethod
    def single_characters(cls, value: frozenset[str]) -> frozenset[str]:
        """Each alphabet entry must be exactly one codepoint."""
        if any(len(character) != 1 for character in value):
            raise ValueError("Alphabet entries must be single characters")
        return value

    def check(self, literal: RawLiteral) -> str:
        return check_alphabet(literal, self.alphabet)


class RegexConstraint(_Constraint):
    """The whole value must match `pattern`; `message` is reported otherwise."""

    type: Literal["regex"] = "regex"
    pattern: re.Pattern[str]
    message: str = Field(..., min_length=1)

    def check(self, literal: RawLiteral) -> str:
        return check_pattern(literal, self.pattern, self.message)


class ComplexityConstraint(_Constraint):
    """A single password complexity rule."""

    type: Literal["complexity"] = "complexity"
    rule: Complexity

    def check(self, literal: RawLiteral) -> str:
        return COMPLEXITY_CHECKS[self.rule](literal)


ConstraintSpec = Annotated[
    KindConstraint | LengthConstraint | AlphabetConstraint | RegexConstraint | ComplexityConstraint,
    Field(discriminator="type"),
]


class ValidationResult(BaseModel):
    """Outcome of a non-raising validation.

    Exactly one of `value` and `error` is set.
    """

    value: str | None = None
    error: ScalarValidationError | None = None

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @model_validator(mode="after")
    def validate_outcome(self) -> "ValidationResult":
        """Require exactly one of value and error."""
        if (self.value is None) == (self.error is None):
            raise ValueError("Exactly one of value and error must be set")
        return self

    @property
    def ok(self) -> bool:
        """Check if the validation succeeded."""
        return self.error is None


class ScalarDefinition(BaseModel):
    """A named scalar type backed by an ordered constraint pipeline.

    The pipeline runs in declaration order and stops at the first failing
    constraint. Accepted values are returned verbatim.

    Exposes the three hooks a GraphQL engine calls on a custom scalar:
    - serialize: identity on output
    - parse_value: runtime (variable) input
    - parse_literal: inline literal input
    """

    name: str = Field(..., min_length=1)
    description: str = ""
    pipeline: tuple[ConstraintSpec, ...] = ()

    model_config = ConfigDict(frozen=True)

    def serialize(self, value: Any) -> Any:
        """Return the stored value unchanged."""
        return value

    def parse_literal(self, literal: RawLiteral) -> str:
        """Validate an inline literal.

        Args:
            literal: Literal as written in the query

        Returns:
            The literal's value, unchanged

        Raises:
            ScalarValidationError: The first failing constraint's error

        """
        for constraint in self.pipeline:
            try:
                constraint.check(literal)
            except ScalarValidationError as exc:
                logger.debug(f"{self.name} rejected {literal.value!r}: {exc.message}")
                raise
        return literal.value

    def parse_value(self, value: Any) -> str:
        """Validate a runtime value through the same pipeline as literals."""
        return self.parse_literal(RawLiteral.from_value(value))

    def validate_literal(self, literal: RawLiteral) -> ValidationResult:
        """Validate without raising.

        Returns:
            ValidationResult holding either the accepted value or the error

        """
        try:
            return ValidationResult(value=self.parse_literal(literal))
        except ScalarValidationError as exc:
            return ValidationResult(error=exc)

    def is_valid(self, value: Any) -> bool:
        """Check if a runtime value passes the pipeline."""
        return self.validate_literal(RawLiteral.from_value(value)).ok
