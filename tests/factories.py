"""Builders for type graph fragments used across tests."""

from typing import Any

from blokgen.core import ir


def field_def(
    name: str,
    type_name: str,
    *,
    is_list: bool = False,
    required: bool = False,
    description: str | None = None,
    **arguments: Any,
) -> ir.FieldDefinition:
    """Build a field annotated with ``@storyblokField(**arguments)``."""
    return ir.FieldDefinition(
        name=name,
        type=ir.TypeReference(name=type_name, is_list=is_list, required=required),
        description=description,
        directives=[ir.Directive(name="storyblokField", arguments=arguments)],
    )


def symbol(value: str) -> ir.EnumSymbol:
    """Build an enum literal argument."""
    return ir.EnumSymbol(value=value)


def object_type(name: str, fields: list[ir.FieldDefinition], **storyblok: Any) -> ir.TypeDefinition:
    """Build an object type annotated with ``@storyblok(**storyblok)``."""
    return ir.TypeDefinition(
        name=name,
        kind=ir.TypeKind.OBJECT,
        fields=fields,
        directives=[ir.Directive(name="storyblok", arguments=storyblok)],
    )
