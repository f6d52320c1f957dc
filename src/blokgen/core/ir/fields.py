"""
Component field definitions for blokgen IR.

One model per Storyblok field kind. Each model carries only the attributes
meaningful for that kind; attribute names are the provider's schema keys.
``None`` means "omit from output", ``False`` is emitted as-is.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Option values
# =============================================================================


class LiteralValue(BaseModel):
    """A plain string, rendered quoted."""

    value: str

    model_config = ConfigDict(frozen=True)


class ReferenceValue(BaseModel):
    """A Terraform expression such as ``var.ct_client_id``, rendered unquoted."""

    expression: str

    model_config = ConfigDict(frozen=True)


ConfigValue = LiteralValue | ReferenceValue


class OptionEntry(BaseModel):
    """One choice of an option/options field."""

    name: str
    value: str

    model_config = ConfigDict(frozen=True)


class CustomOption(BaseModel):
    """One name/value option passed to a custom field plugin."""

    name: str
    value: ConfigValue

    model_config = ConfigDict(frozen=True)


# =============================================================================
# Field kinds
# =============================================================================


class _FieldBase(BaseModel):
    model_config = ConfigDict(frozen=True)


class TextField(_FieldBase):
    type: Literal["text"] = "text"
    rtl: bool | None = None
    max_length: int | None = None
    regex: str | None = None


class TextareaField(_FieldBase):
    type: Literal["textarea"] = "textarea"
    rtl: bool | None = None
    max_length: int | None = None


class MarkdownField(_FieldBase):
    type: Literal["markdown"] = "markdown"
    rtl: bool | None = None
    max_length: int | None = None
    rich_markdown: bool = True
    customize_toolbar: bool | None = None
    toolbar: list[str] | None = None


class RichtextField(_FieldBase):
    type: Literal["richtext"] = "richtext"
    rtl: bool | None = None
    max_length: int | None = None
    customize_toolbar: bool | None = None
    toolbar: list[str] | None = None
    allow_target_blank: bool | None = None
    restrict_components: bool | None = None
    component_whitelist: list[str] | None = None


class NumberField(_FieldBase):
    type: Literal["number"] = "number"
    decimals_value: int | float | None = None
    steps_value: int | float | None = None
    min_value: int | float | None = None
    max_value: int | float | None = None


class BooleanField(_FieldBase):
    type: Literal["boolean"] = "boolean"


class DatetimeField(_FieldBase):
    type: Literal["datetime"] = "datetime"
    disable_time: bool | None = None


class AssetField(_FieldBase):
    type: Literal["asset"] = "asset"
    filetypes: list[str] = Field(default_factory=list)


class MultiassetField(_FieldBase):
    type: Literal["multiasset"] = "multiasset"
    filetypes: list[str] = Field(default_factory=list)


class MultilinkField(_FieldBase):
    type: Literal["multilink"] = "multilink"
    link_scope: str | None = None
    force_link_scope: bool | None = None
    restrict_content_types: bool | None = None
    component_whitelist: list[str] | None = None
    asset_link_type: bool | None = None
    allow_target_blank: bool | None = None
    email_link_type: bool | None = None
    show_anchor: bool | None = None


class OptionField(_FieldBase):
    """
    Single choice, either from inline options, a datasource or stories.

    Examples:
        - enum: OptionField(options=[...])
        - datasource: OptionField(source="internal", datasource_slug="colors", use_uuid=True)
        - content reference: OptionField(source="internal_stories", filter_content_type=["page"], use_uuid=True)
    """

    type: Literal["option"] = "option"
    options: list[OptionEntry] | None = None
    source: str | None = None
    datasource_slug: str | None = None
    filter_content_type: list[str] | None = None
    folder_slug: str | None = None
    use_uuid: bool | None = None


class OptionsField(_FieldBase):
    """Multiple choice; same sources as OptionField plus bounds."""

    type: Literal["options"] = "options"
    options: list[OptionEntry] | None = None
    source: str | None = None
    datasource_slug: str | None = None
    filter_content_type: list[str] | None = None
    folder_slug: str | None = None
    use_uuid: bool | None = None
    minimum: int | None = None
    maximum: int | None = None


class BloksField(_FieldBase):
    type: Literal["bloks"] = "bloks"
    component_whitelist: list[str] = Field(default_factory=list)
    restrict_components: bool = True
    minimum: int | None = None
    maximum: int | None = None


class TableField(_FieldBase):
    type: Literal["table"] = "table"


class SectionField(_FieldBase):
    type: Literal["section"] = "section"
    display_name: str
    keys: list[str] = Field(default_factory=list)


class TabField(_FieldBase):
    type: Literal["tab"] = "tab"
    display_name: str
    keys: list[str] = Field(default_factory=list)


class CustomField(_FieldBase):
    """A field rendered by a field-type plugin."""

    type: Literal["custom"] = "custom"
    field_type: str
    options: list[CustomOption] | None = None


ComponentField = Annotated[
    TextField
    | TextareaField
    | MarkdownField
    | RichtextField
    | NumberField
    | BooleanField
    | DatetimeField
    | AssetField
    | MultiassetField
    | MultilinkField
    | OptionField
    | OptionsField
    | BloksField
    | TableField
    | SectionField
    | TabField
    | CustomField,
    Field(discriminator="type"),
]

GroupField = Annotated[SectionField | TabField, Field(discriminator="type")]


# =============================================================================
# Schema entries
# =============================================================================


def _wire_value(value: Any) -> Any:
    """Convert nested IR values to plain data, keeping ConfigValue objects."""
    if isinstance(value, LiteralValue | ReferenceValue):
        return value
    if isinstance(value, BaseModel):
        return _wire_dict(value)
    if isinstance(value, list):
        return [_wire_value(item) for item in value]
    return value


def _wire_dict(model: BaseModel) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for name in type(model).model_fields:
        value = getattr(model, name)
        if value is None:
            continue
        result[name] = _wire_value(value)
    return result


class SchemaField(BaseModel):
    """
    An ordinary component field: common attributes plus the kind-specific field.

    Attributes:
        position: Zero-based position in the component schema
        display_name: Label shown in the editor
        required: True when the source type is non-null
        translatable: Optional translatable flag
        default_value: Optional default
        no_translate: Optional "exclude from export" flag
        description: Optional help text
        field: Kind-specific specification
    """

    position: int
    display_name: str
    required: bool = False
    translatable: bool | None = None
    default_value: str | None = None
    no_translate: bool | None = None
    description: str | None = None
    field: ComponentField

    model_config = ConfigDict(frozen=True)

    def to_wire(self) -> dict[str, Any]:
        """Flatten into the provider's field map, omitting unset attributes."""
        common = {
            "position": self.position,
            "translatable": self.translatable,
            "default_value": self.default_value,
            "no_translate": self.no_translate,
            "display_name": self.display_name,
            "required": self.required,
            "description": self.description,
        }
        wire = {k: v for k, v in common.items() if v is not None}
        wire.update(_wire_dict(self.field))
        return wire


class SchemaGroup(BaseModel):
    """A synthesized section or tab."""

    position: int
    field: GroupField

    model_config = ConfigDict(frozen=True)

    def to_wire(self) -> dict[str, Any]:
        return {"position": self.position, **_wire_dict(self.field)}
