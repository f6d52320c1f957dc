"""
GraphQL SDL loader.

Builds a :class:`~blokgen.core.ir.TypeGraph` from schema source using
graphql-core's parser. Only the document AST is used; the schema is not
validated, so directive definitions and built-in scalars may be omitted.
"""

from __future__ import annotations

import logging
from pathlib import Path

from graphql import GraphQLError, parse
from graphql.language import (
    BooleanValueNode,
    DirectiveNode,
    EnumTypeDefinitionNode,
    EnumValueNode,
    FieldDefinitionNode,
    FloatValueNode,
    IntValueNode,
    ListTypeNode,
    ListValueNode,
    NamedTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    ScalarTypeDefinitionNode,
    StringValueNode,
    TypeNode,
    UnionTypeDefinitionNode,
    ValueNode,
)

from ..core.errors import SchemaLoadError
from ..core.ir import (
    Directive,
    DirectiveArgValue,
    DirectiveScalar,
    EnumSymbol,
    EnumValueDefinition,
    FieldDefinition,
    TypeDefinition,
    TypeGraph,
    TypeKind,
    TypeReference,
)

logger = logging.getLogger(__name__)


def load_type_graph(sdl: str) -> TypeGraph:
    """
    Parse GraphQL SDL into a type graph.

    Args:
        sdl: Schema source

    Returns:
        TypeGraph with object, enum, union and scalar definitions

    Raises:
        SchemaLoadError: If the source is not valid GraphQL
    """
    try:
        document = parse(sdl)
    except GraphQLError as e:
        raise SchemaLoadError(f"Invalid GraphQL schema: {e.message}") from e

    definitions: list[TypeDefinition] = []
    for node in document.definitions:
        definition = _type_definition(node)
        if definition is not None:
            definitions.append(definition)

    logger.debug("Loaded %d type definitions", len(definitions))
    return TypeGraph.from_definitions(definitions)


def load_type_graph_file(path: Path) -> TypeGraph:
    """Load a type graph from a ``.graphql`` file."""
    try:
        sdl = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SchemaLoadError(f"Cannot read schema {path}: {e}") from e
    return load_type_graph(sdl)


def _type_definition(node: object) -> TypeDefinition | None:
    if isinstance(node, ObjectTypeDefinitionNode):
        return TypeDefinition(
            name=node.name.value,
            kind=TypeKind.OBJECT,
            fields=[_field(f) for f in node.fields or ()],
            directives=_directives(node.directives),
            description=_description(node),
        )
    if isinstance(node, EnumTypeDefinitionNode):
        return TypeDefinition(
            name=node.name.value,
            kind=TypeKind.ENUM,
            values=[
                EnumValueDefinition(name=v.name.value, description=_description(v))
                for v in node.values or ()
            ],
            directives=_directives(node.directives),
            description=_description(node),
        )
    if isinstance(node, UnionTypeDefinitionNode):
        return TypeDefinition(
            name=node.name.value,
            kind=TypeKind.UNION,
            members=[t.name.value for t in node.types or ()],
            directives=_directives(node.directives),
            description=_description(node),
        )
    if isinstance(node, ScalarTypeDefinitionNode):
        return TypeDefinition(
            name=node.name.value,
            kind=TypeKind.SCALAR,
            directives=_directives(node.directives),
            description=_description(node),
        )
    return None


def _field(node: FieldDefinitionNode) -> FieldDefinition:
    return FieldDefinition(
        name=node.name.value,
        type=_type_reference(node.type),
        description=_description(node),
        directives=_directives(node.directives),
    )


def _type_reference(node: TypeNode) -> TypeReference:
    required = isinstance(node, NonNullTypeNode)
    inner = node.type if isinstance(node, NonNullTypeNode) else node

    if isinstance(inner, ListTypeNode):
        item = inner.type
        return TypeReference(
            name=_named_type(item),
            is_list=True,
            required=required,
            item_required=isinstance(item, NonNullTypeNode),
        )
    return TypeReference(name=_named_type(inner), required=required)


def _named_type(node: TypeNode) -> str:
    while not isinstance(node, NamedTypeNode):
        node = node.type  # type: ignore[attr-defined]
    return node.name.value


def _description(node: object) -> str | None:
    description = getattr(node, "description", None)
    return description.value if description is not None else None


def _directives(nodes: tuple[DirectiveNode, ...] | None) -> list[Directive]:
    directives = []
    for node in nodes or ():
        arguments: dict[str, DirectiveArgValue] = {}
        for argument in node.arguments or ():
            value = _value(argument.value)
            if value is not None:
                arguments[argument.name.value] = value
        directives.append(Directive(name=node.name.value, arguments=arguments))
    return directives


def _value(node: ValueNode) -> DirectiveArgValue | None:
    """Convert an argument literal; null and object literals are dropped."""
    if isinstance(node, ListValueNode):
        items = [_scalar(v) for v in node.values]
        return [v for v in items if v is not None]
    return _scalar(node)


def _scalar(node: ValueNode) -> DirectiveScalar | None:
    if isinstance(node, StringValueNode):
        return node.value
    if isinstance(node, BooleanValueNode):
        return node.value
    if isinstance(node, IntValueNode):
        return int(node.value)
    if isinstance(node, FloatValueNode):
        return float(node.value)
    if isinstance(node, EnumValueNode):
        return EnumSymbol(value=node.value)
    return None
