"""Custom GraphQL scalar validators.

Scalar definitions validate raw literals and variable values through an
ordered pipeline of constraints and hand accepted values back unchanged.
"""

from custom_scalars.features.scalars.adapter import graphql_scalars, to_graphql_scalar
from custom_scalars.features.scalars.builtins import BUILTIN_SCALARS, DATETIME, EMAIL, URL, UUID
from custom_scalars.features.scalars.models import (
    AlphabetConstraint,
    ComplexityConstraint,
    ConstraintSpec,
    KindConstraint,
    LengthConstraint,
    RegexConstraint,
    ScalarDefinition,
    ValidationResult,
)
from custom_scalars.features.scalars.schemas import ComplexityOptions, ConstrainedStringOptions, RegexScalarOptions
from custom_scalars.features.scalars.service import ScalarFactory
from custom_scalars.shared.literals import LiteralKind, RawLiteral
from custom_scalars.shared.validators.exceptions import (
    ComplexityUnmet,
    InvalidCharacter,
    InvalidKind,
    PatternMismatch,
    ScalarValidationError,
    TooLong,
    TooShort,
)
from custom_scalars.shared.validators.password import Complexity

__version__ = "0.1.0"

__all__ = [
    "BUILTIN_SCALARS",
    "DATETIME",
    "EMAIL",
    "URL",
    "UUID",
    "AlphabetConstraint",
    "Complexity",
    "ComplexityConstraint",
    "ComplexityOptions",
    "ComplexityUnmet",
    "ConstrainedStringOptions",
    "ConstraintSpec",
    "InvalidCharacter",
    "InvalidKind",
    "KindConstraint",
    "LengthConstraint",
    "LiteralKind",
    "PatternMismatch",
    "RawLiteral",
    "RegexConstraint",
    "RegexScalarOptions",
    "ScalarDefinition",
    "ScalarFactory",
    "ScalarValidationError",
    "TooLong",
    "TooShort",
    "ValidationResult",
    "graphql_scalars",
    "to_graphql_scalar",
]
