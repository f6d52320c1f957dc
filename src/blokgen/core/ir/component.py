"""
Component definition for blokgen IR.

A component is the Storyblok unit of content-type configuration: a named,
ordered schema of fields plus display metadata.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .fields import ConfigValue, SchemaField, SchemaGroup


class Component(BaseModel):
    """
    A Storyblok component built from one annotated type.

    Attributes:
        name: Technical name (snake_case type name)
        space_id: Target Storyblok space
        is_root: Can be used as a content type
        is_nestable: Can be nested in bloks fields
        icon: Editor icon
        color: Editor color
        image: Preview image URL
        display_name: Label shown in the editor
        component_group_uuid: Optional component group reference
        preview_field: Field used as preview in the editor
        preview_tmpl: Preview template when no field matches
        schema_: Ordered field name -> field specification
    """

    name: str
    space_id: int
    is_root: bool = False
    is_nestable: bool = True
    icon: str | None = None
    color: str | None = None
    image: str | None = None
    display_name: str | None = None
    component_group_uuid: ConfigValue | None = None
    preview_field: str | None = None
    preview_tmpl: str | None = None
    schema_: dict[str, SchemaField | SchemaGroup] = Field(default_factory=dict, alias="schema")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def fields(self) -> list[SchemaField]:
        """Get ordinary fields in position order."""
        return [f for f in self.schema_.values() if isinstance(f, SchemaField)]

    @property
    def groups(self) -> list[SchemaGroup]:
        """Get synthesized sections and tabs in position order."""
        return [f for f in self.schema_.values() if isinstance(f, SchemaGroup)]

    def to_wire(self) -> dict[str, Any]:
        """Flatten into the provider's resource arguments, omitting unset attributes."""
        attributes: dict[str, Any] = {
            "name": self.name,
            "space_id": self.space_id,
            "is_root": self.is_root,
            "is_nestable": self.is_nestable,
            "icon": self.icon,
            "color": self.color,
            "image": self.image,
            "display_name": self.display_name,
            "component_group_uuid": self.component_group_uuid,
            "schema": {key: entry.to_wire() for key, entry in self.schema_.items()},
            "preview_field": self.preview_field,
            "preview_tmpl": self.preview_tmpl,
        }
        return {k: v for k, v in attributes.items() if v is not None}
