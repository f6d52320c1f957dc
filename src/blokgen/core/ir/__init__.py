"""
blokgen Intermediate Representation (IR) types.

The type graph is the input of the field mapper; components and their
fields are its output. All types are re-exported from this package.
"""

# Components
from .component import Component

# Component fields
from .fields import (
    AssetField,
    BloksField,
    BooleanField,
    ComponentField,
    ConfigValue,
    CustomField,
    CustomOption,
    DatetimeField,
    GroupField,
    LiteralValue,
    MarkdownField,
    MultiassetField,
    MultilinkField,
    NumberField,
    OptionEntry,
    OptionField,
    OptionsField,
    ReferenceValue,
    RichtextField,
    SchemaField,
    SchemaGroup,
    SectionField,
    TabField,
    TableField,
    TextareaField,
    TextField,
)

# Type graph
from .graph import (
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

__all__ = [
    # Type graph
    "Directive",
    "DirectiveArgValue",
    "DirectiveScalar",
    "EnumSymbol",
    "EnumValueDefinition",
    "FieldDefinition",
    "TypeDefinition",
    "TypeGraph",
    "TypeKind",
    "TypeReference",
    # Component fields
    "AssetField",
    "BloksField",
    "BooleanField",
    "ComponentField",
    "ConfigValue",
    "CustomField",
    "CustomOption",
    "DatetimeField",
    "GroupField",
    "LiteralValue",
    "MarkdownField",
    "MultiassetField",
    "MultilinkField",
    "NumberField",
    "OptionEntry",
    "OptionField",
    "OptionsField",
    "ReferenceValue",
    "RichtextField",
    "SchemaField",
    "SchemaGroup",
    "SectionField",
    "TabField",
    "TableField",
    "TextareaField",
    "TextField",
    # Components
    "Component",
]
