"""Literal representation fed into every scalar validator."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict


class LiteralKind(StrEnum):
    """Kind tag of an input literal."""

    STRING = "STRING"
    INT = "INT"
    FLOAT = "FLOAT"
    OTHER = "OTHER"


class RawLiteral(BaseModel):
    """A raw input value together with the kind it was written as.

    Inline query literals carry the kind reported by the parser. Runtime
    values (query variables) are classified with `from_value`.
    """

    kind: LiteralKind
    value: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def string(cls, value: str) -> "RawLiteral":
        """Build a STRING literal."""
        return cls(kind=LiteralKind.STRING, value=value)

    @classmethod
    def from_value(cls, value: Any) -> "RawLiteral":
        """Classify an already-deserialized runtime value.

        Args:
            value: Value received out-of-band (e.g. a query variable)

        Returns:
            RawLiteral whose kind reflects the Python type of `value`

        """
        if isinstance(value, str):
            return cls.string(value)
        # bool is a subclass of int
        if isinstance(value, bool):
            return cls(kind=LiteralKind.OTHER, value=str(value).lower())
        if isinstance(value, int):
            return cls(kind=LiteralKind.INT, value=str(value))
        if isinstance(value, float):
            return cls(kind=LiteralKind.FLOAT, value=repr(value))
        return cls(kind=LiteralKind.OTHER, value=str(value))
