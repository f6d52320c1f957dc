"""
Field classification: maps one GraphQL field to one Storyblok field kind.

Dispatch order for a singular field:

1. enum type                      -> option
2. well-known type name           -> asset, multilink, seo, table, text..., number, ...
3. object type / union            -> option (content reference) or bloks
4. anything else                  -> UnsupportedTypeError

A list field supports fewer kinds: multiasset, options (enum, content
reference, datasource), bloks and the commercetools product picker.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .directives import (
    FieldArg,
    TypeArg,
    resolve_bool,
    resolve_int,
    resolve_number,
    resolve_str,
    resolve_strings,
    resolve_symbol,
    resolve_symbols,
)
from .errors import MissingIntegrationConfigError, UnsupportedTypeError
from .integration import CommercetoolsConfig, category_options, connection_options
from .ir import (
    AssetField,
    BloksField,
    BooleanField,
    ComponentField,
    CustomField,
    CustomOption,
    DatetimeField,
    FieldDefinition,
    LiteralValue,
    MarkdownField,
    MultiassetField,
    MultilinkField,
    NumberField,
    OptionEntry,
    OptionField,
    OptionsField,
    RichtextField,
    TableField,
    TextareaField,
    TextField,
    TypeDefinition,
    TypeGraph,
)
from .naming import param_case, sentence_case, snake_case
from .values import true_or_none, unique

logger = logging.getLogger(__name__)

# Well-known type names
STRING = "String"
BOOLEAN = "Boolean"
INT = "Int"
FLOAT = "Float"
DATE = "Date"
DATE_TIME = "DateTime"
ASSET = "StoryblokAsset"
LINK = "StoryblokLink"
SEO = "StoryblokSeo"
TABLE = "StoryblokTable"
CT_TYPE_ID = "CtTypeId"

CONTENT_TYPE_MARKERS = ("contentType", "universal")

# Richtext toolbar button for embedded bloks
BLOK_TOOLBAR_ITEM = "blok"

CUSTOM_SEO = "seo-metatags"
CUSTOM_CT_PRODUCT = "sb-commercetools"
CUSTOM_CT_CATEGORY = "ct-category"

Integration = CommercetoolsConfig | None


def classify(
    field: FieldDefinition,
    graph: TypeGraph,
    integration: Integration = None,
) -> ComponentField:
    """
    Build the Storyblok field specification for a GraphQL field.

    Args:
        field: Field definition with its directives
        graph: Type graph used to resolve the field's named type
        integration: Commercetools settings, required by commercetools fields

    Returns:
        Exactly one component field variant

    Raises:
        UnsupportedTypeError: If the field's type has no mapping rule
        MissingIntegrationConfigError: If a commercetools field has no settings
    """
    if field.type.is_list:
        result = classify_array(field, graph, integration)
    else:
        result = classify_single(field, graph, integration)
    logger.debug("Field %s (%s) -> %s", field.name, field.type.name, result.type)
    return result


# =============================================================================
# Singular fields
# =============================================================================


def classify_single(
    field: FieldDefinition,
    graph: TypeGraph,
    integration: Integration = None,
) -> ComponentField:
    type_name = field.type.name
    node = graph.get(type_name)

    if node is not None and node.is_enum:
        return OptionField(options=_enum_options(node))

    builder = _SINGLE_BUILDERS.get(type_name)
    if builder is not None:
        return builder(field, integration)

    if node is not None and (node.is_object or node.is_union):
        members = _member_types(node, graph)
        if _is_content_reference(members):
            return OptionField(
                source="internal_stories",
                filter_content_type=_component_names(members),
                folder_slug=resolve_str(field, FieldArg.FOLDER),
                use_uuid=True,
            )
        return BloksField(
            component_whitelist=_component_names(members),
            restrict_components=True,
            minimum=1 if field.type.required else 0,
            maximum=1,
        )

    raise UnsupportedTypeError(type_name)


def _string_field(field: FieldDefinition, integration: Integration) -> ComponentField:
    datasource = resolve_str(field, FieldArg.DATASOURCE)
    if datasource:
        return OptionField(datasource_slug=datasource, source="internal", use_uuid=True)

    if resolve_str(field, FieldArg.CT_TYPE) == "category":
        if integration is None:
            raise MissingIntegrationConfigError(field.name)
        return CustomField(field_type=CUSTOM_CT_CATEGORY, options=category_options(integration))

    match resolve_str(field, FieldArg.FORMAT):
        case "richtext":
            return _richtext_field(field)
        case "markdown":
            toolbar = _toolbar(field)
            return MarkdownField(
                rtl=resolve_bool(field, FieldArg.RTL),
                max_length=resolve_int(field, FieldArg.MAX),
                rich_markdown=True,
                customize_toolbar=_customized(toolbar),
                toolbar=toolbar,
            )
        case "textarea":
            return TextareaField(
                rtl=resolve_bool(field, FieldArg.RTL),
                max_length=resolve_int(field, FieldArg.MAX),
            )
        case _:
            return TextField(
                rtl=resolve_bool(field, FieldArg.RTL),
                max_length=resolve_int(field, FieldArg.MAX),
                regex=resolve_str(field, FieldArg.REGEX),
            )


def _richtext_field(field: FieldDefinition) -> RichtextField:
    components = _blok_types(field)
    if components is not None:
        components = unique(components)

    toolbar = _toolbar(field)
    if components:
        toolbar = [*(toolbar or []), BLOK_TOOLBAR_ITEM]
    if toolbar is not None:
        toolbar = unique(toolbar)

    link_features = resolve_symbols(field, FieldArg.LINK_FEATURES) or []

    return RichtextField(
        rtl=resolve_bool(field, FieldArg.RTL),
        max_length=resolve_int(field, FieldArg.MAX),
        customize_toolbar=_customized(toolbar),
        toolbar=toolbar,
        allow_target_blank=true_or_none("newTab" in link_features),
        restrict_components=true_or_none(components is not None),
        component_whitelist=components,
    )


def _toolbar(field: FieldDefinition) -> list[str] | None:
    """Get the param-cased toolbar buttons in directive order, repeats kept."""
    symbols = resolve_symbols(field, FieldArg.TOOLBAR)
    if symbols is None:
        return None
    return [param_case(s) for s in symbols]


def _customized(toolbar: list[str] | None) -> bool | None:
    return true_or_none(toolbar is not None)


def _blok_types(field: FieldDefinition) -> list[str] | None:
    names = resolve_strings(field, FieldArg.BLOK_TYPES)
    if names is None:
        return None
    return [snake_case(n) for n in names]


def _boolean_field(field: FieldDefinition, integration: Integration) -> BooleanField:
    return BooleanField()


def _number_field(field: FieldDefinition, integration: Integration) -> NumberField:
    return NumberField(
        decimals_value=resolve_number(field, FieldArg.DECIMALS),
        steps_value=resolve_number(field, FieldArg.STEPS),
        min_value=resolve_number(field, FieldArg.MIN),
        max_value=resolve_number(field, FieldArg.MAX),
    )


def _date_field(field: FieldDefinition, integration: Integration) -> DatetimeField:
    return DatetimeField(disable_time=True)


def _datetime_field(field: FieldDefinition, integration: Integration) -> DatetimeField:
    return DatetimeField()


def _asset_field(field: FieldDefinition, integration: Integration) -> AssetField:
    return AssetField(filetypes=resolve_symbols(field, FieldArg.FILETYPES) or [])


def _link_field(field: FieldDefinition, integration: Integration) -> MultilinkField:
    folder = resolve_str(field, FieldArg.FOLDER)
    features = resolve_symbols(field, FieldArg.LINK_FEATURES) or []
    components = _blok_types(field)

    return MultilinkField(
        link_scope=folder,
        force_link_scope=true_or_none(bool(folder)),
        restrict_content_types=true_or_none(bool(components)),
        component_whitelist=components,
        asset_link_type=true_or_none("assets" in features),
        allow_target_blank=true_or_none("newTab" in features),
        email_link_type=true_or_none("email" in features),
        show_anchor=true_or_none("anchor" in features),
    )


def _seo_field(field: FieldDefinition, integration: Integration) -> CustomField:
    return CustomField(field_type=CUSTOM_SEO)


def _table_field(field: FieldDefinition, integration: Integration) -> TableField:
    return TableField()


def _product_field(field: FieldDefinition, integration: Integration) -> CustomField:
    return _product_picker(field, integration, limit="1")


_SINGLE_BUILDERS: dict[str, Callable[[FieldDefinition, Integration], ComponentField]] = {
    ASSET: _asset_field,
    LINK: _link_field,
    SEO: _seo_field,
    TABLE: _table_field,
    STRING: _string_field,
    BOOLEAN: _boolean_field,
    INT: _number_field,
    FLOAT: _number_field,
    DATE: _date_field,
    DATE_TIME: _datetime_field,
    CT_TYPE_ID: _product_field,
}


# =============================================================================
# List fields
# =============================================================================


def classify_array(
    field: FieldDefinition,
    graph: TypeGraph,
    integration: Integration = None,
) -> ComponentField:
    type_name = field.type.name
    node = graph.get(type_name)

    if type_name == ASSET:
        return MultiassetField(filetypes=resolve_symbols(field, FieldArg.FILETYPES) or [])

    if node is not None and (node.is_object or node.is_union):
        members = _member_types(node, graph)
        if _is_content_reference(members):
            return OptionsField(
                source="internal_stories",
                filter_content_type=_component_names(members),
                use_uuid=True,
                folder_slug=resolve_str(field, FieldArg.FOLDER),
            )
        return BloksField(
            component_whitelist=_component_names(members),
            restrict_components=True,
            minimum=resolve_int(field, FieldArg.MIN),
            maximum=resolve_int(field, FieldArg.MAX),
        )

    if node is not None and node.is_enum:
        return OptionsField(
            options=_enum_options(node),
            minimum=resolve_int(field, FieldArg.MIN),
            maximum=resolve_int(field, FieldArg.MAX),
        )

    if type_name == STRING:
        datasource = resolve_str(field, FieldArg.DATASOURCE)
        if not datasource:
            raise UnsupportedTypeError(type_name, f"Datasource is required for type {type_name}")
        return OptionsField(datasource_slug=datasource, source="internal", use_uuid=True)

    if type_name == CT_TYPE_ID:
        limit = resolve_int(field, FieldArg.MAX)
        return _product_picker(field, integration, limit=None if limit is None else str(limit))

    raise UnsupportedTypeError(type_name, f"Unsupported array type {type_name}")


# =============================================================================
# Shared builders
# =============================================================================


def _product_picker(field: FieldDefinition, integration: Integration, limit: str | None) -> CustomField:
    """Build the commercetools product picker with an optional item limit."""
    if integration is None:
        raise MissingIntegrationConfigError(field.name)

    options = connection_options(integration)
    if limit:
        options.append(CustomOption(name="limit", value=LiteralValue(value=limit)))
    ct_type = resolve_str(field, FieldArg.CT_TYPE)
    if ct_type:
        options.append(CustomOption(name="selectOnly", value=LiteralValue(value=ct_type)))

    return CustomField(field_type=CUSTOM_CT_PRODUCT, options=options)


def _enum_options(node: TypeDefinition) -> list[OptionEntry]:
    return [
        OptionEntry(
            name=value.description if value.description is not None else sentence_case(value.name),
            value=value.name,
        )
        for value in node.values
    ]


def _member_types(node: TypeDefinition, graph: TypeGraph) -> list[TypeDefinition]:
    """Get the object types a field can hold: the union members or the type itself."""
    if node.is_union:
        return graph.union_members(node)
    return [node]


def _is_content_reference(members: list[TypeDefinition]) -> bool:
    """True when every member is a content type, so the field links stories."""
    return all(resolve_symbol(m, TypeArg.TYPE) in CONTENT_TYPE_MARKERS for m in members)


def _component_names(members: list[TypeDefinition]) -> list[str]:
    return [snake_case(m.name) for m in members]
