"""
Type graph definitions for blokgen IR.

The type graph is the read-only input of the field mapper: named type
definitions with their fields, enum values, union members and directive
annotations, as produced by a schema loader.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class EnumSymbol(BaseModel):
    """An enum literal used as a directive argument, e.g. ``type: contentType``."""

    value: str

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.value


DirectiveScalar = str | int | float | bool | EnumSymbol
DirectiveArgValue = DirectiveScalar | list[DirectiveScalar]


class Directive(BaseModel):
    """
    A directive annotation on a type or field.

    Examples:
        - @storyblok(type: contentType): Directive(name="storyblok", arguments={"type": EnumSymbol(value="contentType")})
        - @storyblokField(max: 2): Directive(name="storyblokField", arguments={"max": 2})
    """

    name: str
    arguments: dict[str, DirectiveArgValue] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class TypeReference(BaseModel):
    """
    A reference to a named type with list and non-null modifiers.

    Examples:
        - String!: TypeReference(name="String", required=True)
        - [Color!]: TypeReference(name="Color", is_list=True, item_required=True)
    """

    name: str
    is_list: bool = False
    required: bool = False  # outermost wrapper is non-null
    item_required: bool = False

    model_config = ConfigDict(frozen=True)


class FieldDefinition(BaseModel):
    """A field of an object type."""

    name: str
    type: TypeReference
    description: str | None = None
    directives: list[Directive] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class EnumValueDefinition(BaseModel):
    """A single member of an enum type."""

    name: str
    description: str | None = None

    model_config = ConfigDict(frozen=True)


class TypeKind(StrEnum):
    """Shape of a type definition."""

    OBJECT = "object"
    ENUM = "enum"
    UNION = "union"
    SCALAR = "scalar"


class TypeDefinition(BaseModel):
    """
    A named type in the graph.

    Attributes:
        name: Type name
        kind: object, enum, union or scalar
        fields: Ordered fields (object types)
        values: Ordered members (enum types)
        members: Ordered member type names (union types)
        directives: Directive annotations on the type
        description: Optional description
    """

    name: str
    kind: TypeKind
    fields: list[FieldDefinition] = Field(default_factory=list)
    values: list[EnumValueDefinition] = Field(default_factory=list)
    members: list[str] = Field(default_factory=list)
    directives: list[Directive] = Field(default_factory=list)
    description: str | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_enum(self) -> bool:
        return self.kind == TypeKind.ENUM

    @property
    def is_object(self) -> bool:
        return self.kind == TypeKind.OBJECT

    @property
    def is_union(self) -> bool:
        return self.kind == TypeKind.UNION

    def get_field(self, name: str) -> FieldDefinition | None:
        """Find a field by name."""
        for field in self.fields:
            if field.name == name:
                return field
        return None


class TypeGraph(BaseModel):
    """
    All type definitions of a schema, keyed by name.

    Insertion order of ``types`` is the declaration order of the schema.
    """

    types: dict[str, TypeDefinition] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_definitions(cls, definitions: list[TypeDefinition]) -> TypeGraph:
        """Build a graph from a list of definitions (later names win)."""
        return cls(types={d.name: d for d in definitions})

    def get(self, name: str) -> TypeDefinition | None:
        """Look up a type by name."""
        return self.types.get(name)

    def object_types(self) -> list[TypeDefinition]:
        """Get all object types in declaration order."""
        return [t for t in self.types.values() if t.is_object]

    def union_members(self, union: TypeDefinition) -> list[TypeDefinition]:
        """Get the members of a union that resolve to object types."""
        members = []
        for name in union.members:
            member = self.get(name)
            if member is not None and member.is_object:
                members.append(member)
        return members
