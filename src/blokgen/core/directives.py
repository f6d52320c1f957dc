"""
Directive lookup for types and fields.

Directive names and argument keys are closed enums. The first directive with
a matching name wins; later duplicates are ignored.

    @storyblok(type: contentType, icon: block_at)        on object types
    @storyblokField(format: richtext, max: 200)          on fields
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum

from .ir import Directive, DirectiveArgValue, EnumSymbol, FieldDefinition, TypeDefinition


class DirectiveName(StrEnum):
    """Known directive names."""

    STORYBLOK = "storyblok"
    STORYBLOK_FIELD = "storyblokField"


class TypeArg(StrEnum):
    """Arguments of ``@storyblok`` on a type."""

    TYPE = "type"
    ICON = "icon"
    COLOR = "color"
    IMAGE = "image"
    DISPLAY_NAME = "displayName"
    PREVIEW = "preview"


class FieldArg(StrEnum):
    """Arguments of ``@storyblokField`` on a field."""

    TRANSLATABLE = "translatable"
    DEFAULT = "default"
    EXCLUDE_FROM_EXPORT = "excludeFromExport"
    DISPLAY_NAME = "displayName"
    FORMAT = "format"
    DATASOURCE = "datasource"
    CT_TYPE = "ctType"
    MIN = "min"
    MAX = "max"
    REGEX = "regex"
    RTL = "rtl"
    TOOLBAR = "toolbar"
    BLOK_TYPES = "blokTypes"
    LINK_FEATURES = "linkFeatures"
    FOLDER = "folder"
    FILETYPES = "filetypes"
    DECIMALS = "decimals"
    STEPS = "steps"
    SECTION = "section"
    TAB = "tab"


Holder = TypeDefinition | FieldDefinition


def find_directive(holder: Holder, name: DirectiveName) -> Directive | None:
    """Get the first directive called ``name``."""
    for directive in holder.directives:
        if directive.name == name.value:
            return directive
    return None


def has_directive(holder: Holder, name: DirectiveName) -> bool:
    return find_directive(holder, name) is not None


def resolve(holder: Holder, name: DirectiveName, key: TypeArg | FieldArg) -> DirectiveArgValue | None:
    """
    Look up a directive argument on a type or field.

    Args:
        holder: Type or field carrying the directives
        name: Directive name
        key: Argument key

    Returns:
        The literal argument value, or None when the directive or key is absent
    """
    directive = find_directive(holder, name)
    if directive is None:
        return None
    return directive.arguments.get(key.value)


def _arg(holder: Holder, key: TypeArg | FieldArg) -> DirectiveArgValue | None:
    name = DirectiveName.STORYBLOK if isinstance(key, TypeArg) else DirectiveName.STORYBLOK_FIELD
    return resolve(holder, name, key)


def resolve_str(holder: Holder, key: TypeArg | FieldArg) -> str | None:
    """Get a string argument; enum symbols are returned as their name."""
    value = _arg(holder, key)
    if isinstance(value, EnumSymbol):
        return value.value
    if isinstance(value, str):
        return value
    return None


def resolve_symbol(holder: Holder, key: TypeArg | FieldArg) -> str | None:
    """Get an enum argument as its symbol name."""
    value = _arg(holder, key)
    if isinstance(value, EnumSymbol):
        return value.value
    return None


def resolve_int(holder: Holder, key: TypeArg | FieldArg) -> int | None:
    value = _arg(holder, key)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def resolve_number(holder: Holder, key: TypeArg | FieldArg) -> int | float | None:
    """Get a numeric argument; numeric strings such as ``"0.5"`` are converted."""
    value = _arg(holder, key)
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return value
    if isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return None
        return int(number) if number.is_integer() else number
    return None


def resolve_bool(holder: Holder, key: TypeArg | FieldArg) -> bool | None:
    value = _arg(holder, key)
    if isinstance(value, bool):
        return value
    return None


def _list(holder: Holder, key: TypeArg | FieldArg) -> list[DirectiveArgValue] | None:
    value = _arg(holder, key)
    if value is None:
        return None
    if isinstance(value, list):
        return value
    # GraphQL input coercion: a single value where a list is expected
    return [value]


def resolve_symbols(holder: Holder, key: TypeArg | FieldArg) -> list[str] | None:
    """Get the enum symbols of a list argument, dropping other literals."""
    values = _list(holder, key)
    if values is None:
        return None
    return _symbols(values)


def resolve_strings(holder: Holder, key: TypeArg | FieldArg) -> list[str] | None:
    """Get the string literals of a list argument, dropping other literals."""
    values = _list(holder, key)
    if values is None:
        return None
    return [v for v in values if isinstance(v, str)]


def _symbols(values: Iterable[DirectiveArgValue]) -> list[str]:
    return [v.value for v in values if isinstance(v, EnumSymbol)]
