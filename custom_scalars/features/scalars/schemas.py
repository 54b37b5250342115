"""Scalar configuration schemas."""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from custom_scalars.shared.validators.password import Complexity


class RegexScalarOptions(BaseModel):
    """Options for a regex-backed scalar."""

    name: str = Field(..., min_length=1)
    pattern: re.Pattern[str]
    description: str = ""
    error: str | None = Field(None, min_length=1, description="Message reported when the pattern does not match")

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def error_message(self) -> str:
        """Configured message, or the generic one for this scalar."""
        return self.error or f"Validation error for {self.name}"


class ComplexityOptions(BaseModel):
    """Password complexity flags.

    camelCase aliases (alphaNumeric, mixedCase, specialChars) are accepted
    alongside the field names.
    """

    alpha_numeric: bool = Field(False, alias="alphaNumeric")
    mixed_case: bool = Field(False, alias="mixedCase")
    special_chars: bool = Field(False, alias="specialChars")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    def rules(self) -> list[Complexity]:
        """Requested rules in evaluation order."""
        flags = [
            (self.alpha_numeric, Complexity.ALPHA_NUMERIC),
            (self.mixed_case, Complexity.MIXED_CASE),
            (self.special_chars, Complexity.SPECIAL_CHARS),
        ]
        return [rule for enabled, rule in flags if enabled]


class ConstrainedStringOptions(BaseModel):
    """Options for a length/alphabet/complexity constrained string family."""

    name_prefix: str = Field(..., min_length=1)
    description: str = ""
    min_length: int = Field(1, ge=0)
    max_length: int | None = Field(None, ge=0)
    alphabet: str | None = None
    complexity: ComplexityOptions = Field(default_factory=ComplexityOptions)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("min_length", mode="before")
    @classmethod
    def default_min_length(cls, value):
        """Treat an explicit None as the default minimum of 1."""
        return 1 if value is None else value

    @field_validator("alphabet")
    @classmethod
    def empty_alphabet_disables_check(cls, value: str | None) -> str | None:
        """An empty alphabet means no alphabet restriction."""
        return value or None

    @field_validator("complexity", mode="before")
    @classmethod
    def default_complexity(cls, value):
        """Treat an explicit None as no complexity rules."""
        return ComplexityOptions() if value is None else value

    @model_validator(mode="after")
    def validate_bounds(self) -> "ConstrainedStringOptions":
        """Validate that min_length does not exceed max_length."""
        if self.max_length is not None and self.min_length > self.max_length:
            raise ValueError(f"min_length ({self.min_length}) must not exceed max_length ({self.max_length})")
        return self
