"""graphql-core adapter for scalar definitions."""

import logging
from collections.abc import Iterable
from typing import Any

from graphql import FloatValueNode, GraphQLError, GraphQLScalarType, IntValueNode, StringValueNode, ValueNode

from custom_scalars.config.settings import Settings, settings
from custom_scalars.shared.literals import LiteralKind, RawLiteral
from custom_scalars.shared.validators.exceptions import ScalarValidationError

from .models import ScalarDefinition

logger = logging.getLogger(__name__)


def literal_from_node(node: ValueNode) -> RawLiteral:
    """Convert a GraphQL value AST node to a RawLiteral."""
    if isinstance(node, StringValueNode):
        return RawLiteral(kind=LiteralKind.STRING, value=node.value)
    if isinstance(node, IntValueNode):
        return RawLiteral(kind=LiteralKind.INT, value=node.value)
    if isinstance(node, FloatValueNode):
        return RawLiteral(kind=LiteralKind.FLOAT, value=node.value)
    return RawLiteral(kind=LiteralKind.OTHER, value=str(getattr(node, "value", "")))


def to_graphql_scalar(definition: ScalarDefinition, config: Settings | None = None) -> GraphQLScalarType:
    """Expose a scalar definition as a graphql-core scalar type.

    Validation errors are re-raised as GraphQLError so the engine reports
    the message unchanged (prefixed with `config.error_prefix`).

    Args:
        definition: Scalar definition to expose
        config: Settings override (defaults to the module-level settings)

    Returns:
        GraphQLScalarType

    """
    config = config or settings

    def to_graphql_error(exc: ScalarValidationError, node: ValueNode | None = None) -> GraphQLError:
        return GraphQLError(f"{config.error_prefix}{exc.message}", node, original_error=exc)

    def parse_value(value: Any) -> str:
        try:
            return definition.parse_value(value)
        except ScalarValidationError as exc:
            raise to_graphql_error(exc) from exc

    def parse_literal(node: ValueNode, _variables: dict[str, Any] | None = None) -> str:
        try:
            return definition.parse_literal(literal_from_node(node))
        except ScalarValidationError as exc:
            raise to_graphql_error(exc, node) from exc

    logger.debug(f"GraphQL scalar created: {definition.name}")
    return GraphQLScalarType(
        name=definition.name,
        description=definition.description or None,
        serialize=definition.serialize,
        parse_value=parse_value,
        parse_literal=parse_literal,
    )


def graphql_scalars(
    definitions: Iterable[ScalarDefinition], config: Settings | None = None
) -> dict[str, GraphQLScalarType]:
    """Convert several definitions, keyed by scalar name.

    Raises:
        ValueError: If two definitions share a name

    """
    scalars: dict[str, GraphQLScalarType] = {}
    for definition in definitions:
        if definition.name in scalars:
            logger.error(f"Duplicate scalar name: {definition.name}")
            raise ValueError(f"Duplicate scalar name: {definition.name}")
        scalars[definition.name] = to_graphql_scalar(definition, config)
    return scalars
