"""
Section and tab synthesis.

Fields tagged ``@storyblokField(section: "Basics")`` or ``tab: "Info"`` are
collected into section and tab fields. A tab also lists every section that
shares a field with it.
"""

from __future__ import annotations

from typing import Literal

from .directives import FieldArg, resolve_str
from .ir import FieldDefinition, SectionField, TabField, TypeDefinition
from .naming import camel_case
from .values import compact, unique

GroupKind = Literal["section", "tab"]

_GROUP_ARGS: dict[GroupKind, FieldArg] = {
    "section": FieldArg.SECTION,
    "tab": FieldArg.TAB,
}


def group_key(kind: GroupKind, name: str) -> str:
    """Schema key of a group, e.g. ``("section", "Basics")`` -> ``sectionBasics``."""
    return camel_case(f"{kind} {name}")


def group_names(definition: TypeDefinition, kind: GroupKind) -> list[str]:
    """Get distinct group names of one kind in first-occurrence order."""
    arg = _GROUP_ARGS[kind]
    return unique(compact(resolve_str(f, arg) for f in definition.fields))


def _tagged(definition: TypeDefinition, kind: GroupKind, name: str) -> list[FieldDefinition]:
    arg = _GROUP_ARGS[kind]
    return [f for f in definition.fields if resolve_str(f, arg) == name]


def build_section(definition: TypeDefinition, name: str) -> SectionField:
    """Build a section listing every field tagged with ``name``."""
    return SectionField(
        display_name=name,
        keys=[f.name for f in _tagged(definition, "section", name)],
    )


def build_tab(definition: TypeDefinition, name: str) -> TabField:
    """
    Build a tab listing its loose fields, then the sections of its other fields.

    A field that belongs to a section is reached through the section key.
    """
    fields = []
    sections = []
    for field in _tagged(definition, "tab", name):
        section = resolve_str(field, FieldArg.SECTION)
        if section is None:
            fields.append(field.name)
        else:
            sections.append(group_key("section", section))
    keys = fields + sections
    return TabField(display_name=name, keys=unique(keys))


def build_groups(definition: TypeDefinition) -> list[tuple[str, SectionField | TabField]]:
    """
    Synthesize the sections and tabs of a type.

    Args:
        definition: Object type whose fields carry section/tab tags

    Returns:
        (key, group) pairs: sections in discovery order, then tabs in discovery order
    """
    groups: list[tuple[str, SectionField | TabField]] = []
    for name in group_names(definition, "section"):
        groups.append((group_key("section", name), build_section(definition, name)))
    for name in group_names(definition, "tab"):
        groups.append((group_key("tab", name), build_tab(definition, name)))
    return groups
