"""
Component assembly: one annotated GraphQL type -> one Storyblok component.

Schema positions run without gaps over the ordinary fields (declaration
order), then sections, then tabs.
"""

from __future__ import annotations

import logging

from .classifier import classify
from .directives import (
    DirectiveName,
    FieldArg,
    TypeArg,
    has_directive,
    resolve_bool,
    resolve_str,
    resolve_symbol,
)
from .errors import BlokgenError, DuplicateFieldError, ErrorContext
from .grouping import build_groups
from .integration import CommercetoolsConfig
from .ir import (
    Component,
    ConfigValue,
    FieldDefinition,
    SchemaField,
    SchemaGroup,
    TypeDefinition,
    TypeGraph,
)
from .naming import icon_name, sentence_case, snake_case
from .values import if_value

logger = logging.getLogger(__name__)


def mapped_fields(definition: TypeDefinition) -> list[FieldDefinition]:
    """Get the fields annotated with ``@storyblokField``, in declaration order."""
    return [f for f in definition.fields if has_directive(f, DirectiveName.STORYBLOK_FIELD)]


def _display_name(field: FieldDefinition) -> str:
    display_name = resolve_str(field, FieldArg.DISPLAY_NAME)
    return display_name if display_name is not None else sentence_case(field.name)


def build_schema_field(
    field: FieldDefinition,
    position: int,
    graph: TypeGraph,
    integration: CommercetoolsConfig | None = None,
) -> SchemaField:
    """Build an ordinary schema entry: common attributes plus the classified kind."""
    return SchemaField(
        position=position,
        translatable=resolve_bool(field, FieldArg.TRANSLATABLE),
        default_value=resolve_str(field, FieldArg.DEFAULT),
        no_translate=resolve_bool(field, FieldArg.EXCLUDE_FROM_EXPORT),
        display_name=_display_name(field),
        required=field.type.required,
        description=field.description,
        field=classify(field, graph, integration),
    )


def build_schema(
    definition: TypeDefinition,
    graph: TypeGraph,
    integration: CommercetoolsConfig | None = None,
) -> dict[str, SchemaField | SchemaGroup]:
    """
    Build the ordered schema of a component.

    Args:
        definition: Object type to map
        graph: Full type graph
        integration: Commercetools settings, if the schema uses them

    Returns:
        Field name -> schema entry, in position order

    Raises:
        UnsupportedTypeError: If a field's type has no mapping rule
        MissingIntegrationConfigError: If a commercetools field has no settings
        DuplicateFieldError: If a field name repeats or a group key collides with a field
    """
    schema: dict[str, SchemaField | SchemaGroup] = {}

    for field in mapped_fields(definition):
        if field.name in schema:
            raise DuplicateFieldError(field.name, ErrorContext(definition.name, field.name))
        try:
            schema[field.name] = build_schema_field(field, len(schema), graph, integration)
        except BlokgenError as e:
            raise e.with_context(ErrorContext(definition.name, field.name))

    for key, group in build_groups(definition):
        if key in schema:
            raise DuplicateFieldError(key, ErrorContext(definition.name))
        schema[key] = SchemaGroup(position=len(schema), field=group)

    return schema


def _preview(definition: TypeDefinition) -> tuple[str | None, str | None]:
    """Get (preview_field, preview_tmpl) from ``@storyblok(preview: ...)``."""
    value = resolve_str(definition, TypeArg.PREVIEW)
    if not value:
        return None, None
    if definition.get_field(value) is not None:
        return snake_case(value), None
    return None, value


def is_component(definition: TypeDefinition) -> bool:
    """True for object types annotated with ``@storyblok``."""
    return definition.is_object and has_directive(definition, DirectiveName.STORYBLOK)


def build_component(
    definition: TypeDefinition,
    graph: TypeGraph,
    space_id: int,
    integration: CommercetoolsConfig | None = None,
    component_group_uuid: ConfigValue | None = None,
) -> Component:
    """
    Build the Storyblok component for one object type.

    Args:
        definition: Object type to map
        graph: Full type graph
        space_id: Target Storyblok space
        integration: Commercetools settings, if the schema uses them
        component_group_uuid: Optional component group reference

    Returns:
        Component with its ordered schema
    """
    component_type = resolve_symbol(definition, TypeArg.TYPE)
    preview_field, preview_tmpl = _preview(definition)

    component = Component(
        name=snake_case(definition.name),
        space_id=space_id,
        is_root=component_type in ("contentType", "universal"),
        is_nestable=component_type != "contentType",
        icon=if_value(resolve_str(definition, TypeArg.ICON), icon_name),
        color=resolve_str(definition, TypeArg.COLOR),
        image=resolve_str(definition, TypeArg.IMAGE),
        display_name=resolve_str(definition, TypeArg.DISPLAY_NAME),
        component_group_uuid=component_group_uuid,
        preview_field=preview_field,
        preview_tmpl=preview_tmpl,
        schema=build_schema(definition, graph, integration),
    )
    logger.debug("Component %s: %d schema entries", component.name, len(component.schema_))
    return component


def build_components(
    graph: TypeGraph,
    space_id: int,
    integration: CommercetoolsConfig | None = None,
    component_group_uuid: ConfigValue | None = None,
) -> list[Component]:
    """Build a component for every ``@storyblok`` object type, in declaration order."""
    components = [
        build_component(definition, graph, space_id, integration, component_group_uuid)
        for definition in graph.object_types()
        if is_component(definition)
    ]
    logger.info("Built %d components", len(components))
    return components
