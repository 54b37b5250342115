"""Scalar factory service."""

import logging
import threading
from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError

from .models import (
    AlphabetConstraint,
    ComplexityConstraint,
    ConstraintSpec,
    KindConstraint,
    LengthConstraint,
    RegexConstraint,
    ScalarDefinition,
)
from .schemas import ComplexityOptions, ConstrainedStringOptions, RegexScalarOptions

logger = logging.getLogger(__name__)

LIMITED_STRING_PREFIX = "LimitedString"
PASSWORD_PREFIX = "Password"


def _family_options(**kwargs: Any) -> ConstrainedStringOptions:
    """Validate family options, logging rejected configurations."""
    try:
        return ConstrainedStringOptions(**kwargs)
    except ValidationError as exc:
        logger.error(f"Invalid {kwargs.get('name_prefix')} configuration: {exc}")
        raise


class ScalarFactory:
    """Builds scalar definitions for one schema-build context.

    Parameterized families (LimitedString, Password, ...) get schema-unique
    names: the first definition of a family uses the bare prefix, later ones
    are numbered 2, 3, ... in construction order. The counters belong to
    this factory, so separate schemas should use separate factories.
    """

    def __init__(self):
        self._counters: dict[str, int] = {}
        self._lock = threading.Lock()

    def _next_name(self, prefix: str) -> str:
        """Reserve the next name of a family."""
        with self._lock:
            count = self._counters.get(prefix, 0) + 1
            self._counters[prefix] = count
        return prefix if count == 1 else f"{prefix}{count}"

    def build_custom_scalar(
        self, name: str, description: str = "", pipeline: Iterable[ConstraintSpec] = ()
    ) -> ScalarDefinition:
        """Build a scalar from an arbitrary ordered constraint pipeline.

        Args:
            name: Schema-unique scalar name
            description: Human-readable description
            pipeline: Constraints, run in the given order

        Returns:
            ScalarDefinition

        """
        definition = ScalarDefinition(name=name, description=description, pipeline=tuple(pipeline))
        logger.debug(f"Scalar built: {definition.name} ({len(definition.pipeline)} constraints)")
        return definition

    def build_regex_scalar(self, options: RegexScalarOptions) -> ScalarDefinition:
        """Build a scalar accepting strings that fully match a pattern.

        Args:
            options: Name, pattern, description and optional error message

        Returns:
            ScalarDefinition with pipeline [kind, regex]

        """
        return self.build_custom_scalar(
            options.name,
            options.description,
            [KindConstraint(), RegexConstraint(pattern=options.pattern, message=options.error_message)],
        )

    def build_constrained_string(self, options: ConstrainedStringOptions) -> ScalarDefinition:
        """Build a length/alphabet/complexity constrained string scalar.

        The pipeline order is fixed: kind, length, alphabet, complexity rules.
        A too-short value with disallowed characters therefore always reports
        TooShort.

        Args:
            options: Family prefix, bounds, alphabet and complexity flags

        Returns:
            ScalarDefinition named after the family prefix

        """
        pipeline: list[ConstraintSpec] = [
            KindConstraint(),
            LengthConstraint(min_length=options.min_length, max_length=options.max_length),
        ]
        if options.alphabet:
            pipeline.append(AlphabetConstraint(alphabet=options.alphabet))
        pipeline.extend(ComplexityConstraint(rule=rule) for rule in options.complexity.rules())

        return self.build_custom_scalar(self._next_name(options.name_prefix), options.description, pipeline)

    def limited_string(
        self,
        min_length: int | None = 1,
        max_length: int | None = None,
        alphabet: str | None = None,
    ) -> ScalarDefinition:
        """Build a LimitedString scalar."""
        return self.build_constrained_string(
            _family_options(
                name_prefix=LIMITED_STRING_PREFIX,
                description="A string with restricted length and, optionally, alphabet.",
                min_length=min_length,
                max_length=max_length,
                alphabet=alphabet,
            )
        )

    def password(
        self,
        min_length: int | None = 1,
        max_length: int | None = None,
        alphabet: str | None = None,
        complexity: ComplexityOptions | dict[str, Any] | None = None,
    ) -> ScalarDefinition:
        """Build a Password scalar.

        Args:
            min_length: Smallest accepted length (None means 1)
            max_length: Largest accepted length (None means unbounded)
            alphabet: Allowed characters (None means any)
            complexity: ComplexityOptions or a dict of its flags

        Returns:
            ScalarDefinition

        """
        return self.build_constrained_string(
            _family_options(
                name_prefix=PASSWORD_PREFIX,
                description="A password string with restricted length, alphabet and complexity.",
                min_length=min_length,
                max_length=max_length,
                alphabet=alphabet,
                complexity=complexity,
            )
        )
