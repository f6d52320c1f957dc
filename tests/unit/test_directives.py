"""Tests for directive lookup."""

from blokgen.core import ir
from blokgen.core.directives import (
    DirectiveName,
    FieldArg,
    TypeArg,
    find_directive,
    has_directive,
    resolve,
    resolve_bool,
    resolve_int,
    resolve_number,
    resolve_str,
    resolve_strings,
    resolve_symbol,
    resolve_symbols,
)
from tests.factories import field_def, symbol


def _field_with(*directives: ir.Directive) -> ir.FieldDefinition:
    return ir.FieldDefinition(
        name="title",
        type=ir.TypeReference(name="String"),
        directives=list(directives),
    )


class TestResolve:
    def test_missing_directive(self) -> None:
        field = _field_with()

        assert resolve(field, DirectiveName.STORYBLOK_FIELD, FieldArg.MAX) is None
        assert not has_directive(field, DirectiveName.STORYBLOK_FIELD)

    def test_missing_key(self) -> None:
        field = field_def("title", "String", max=3)

        assert resolve(field, DirectiveName.STORYBLOK_FIELD, FieldArg.MIN) is None

    def test_first_directive_wins(self) -> None:
        """Later directives with the same name are ignored, even for keys only they carry."""
        field = _field_with(
            ir.Directive(name="storyblokField", arguments={"max": 1}),
            ir.Directive(name="storyblokField", arguments={"max": 2, "min": 1}),
        )

        assert resolve(field, DirectiveName.STORYBLOK_FIELD, FieldArg.MAX) == 1
        assert resolve(field, DirectiveName.STORYBLOK_FIELD, FieldArg.MIN) is None

    def test_other_directives_are_skipped(self) -> None:
        field = _field_with(
            ir.Directive(name="deprecated", arguments={"reason": "old"}),
            ir.Directive(name="storyblokField", arguments={"displayName": "Title"}),
        )

        assert find_directive(field, DirectiveName.STORYBLOK_FIELD) == field.directives[1]
        assert resolve_str(field, FieldArg.DISPLAY_NAME) == "Title"

    def test_type_arguments_read_storyblok_directive(self) -> None:
        definition = ir.TypeDefinition(
            name="Page",
            kind=ir.TypeKind.OBJECT,
            directives=[ir.Directive(name="storyblok", arguments={"type": symbol("contentType")})],
        )

        assert resolve_str(definition, TypeArg.TYPE) == "contentType"


class TestTypedAccessors:
    def test_str_accepts_enum_symbol(self) -> None:
        assert resolve_str(field_def("f", "String", format=symbol("richtext")), FieldArg.FORMAT) == "richtext"

    def test_symbol_rejects_strings(self) -> None:
        assert resolve_symbol(field_def("f", "String", ctType=symbol("product")), FieldArg.CT_TYPE) == "product"
        assert resolve_symbol(field_def("f", "String", ctType="product"), FieldArg.CT_TYPE) is None

    def test_str_rejects_other_literals(self) -> None:
        assert resolve_str(field_def("f", "String", format=3), FieldArg.FORMAT) is None

    def test_int_rejects_bool(self) -> None:
        assert resolve_int(field_def("f", "Int", max=True), FieldArg.MAX) is None
        assert resolve_int(field_def("f", "Int", max=7), FieldArg.MAX) == 7

    def test_number_parses_strings(self) -> None:
        field = field_def("f", "Float", decimals="2", steps="0.25", min="abc")

        assert resolve_number(field, FieldArg.DECIMALS) == 2
        assert resolve_number(field, FieldArg.STEPS) == 0.25
        assert resolve_number(field, FieldArg.MIN) is None

    def test_bool(self) -> None:
        assert resolve_bool(field_def("f", "String", rtl=False), FieldArg.RTL) is False
        assert resolve_bool(field_def("f", "String", rtl="yes"), FieldArg.RTL) is None

    def test_symbols_drop_strings(self) -> None:
        field = field_def("f", "String", toolbar=[symbol("bold"), "italic", symbol("h1")])

        assert resolve_symbols(field, FieldArg.TOOLBAR) == ["bold", "h1"]

    def test_strings_accept_single_value(self) -> None:
        field = field_def("f", "String", blokTypes="Teaser")

        assert resolve_strings(field, FieldArg.BLOK_TYPES) == ["Teaser"]

    def test_absent_list_is_none(self) -> None:
        field = field_def("f", "String")

        assert resolve_symbols(field, FieldArg.TOOLBAR) is None
        assert resolve_strings(field, FieldArg.BLOK_TYPES) is None
