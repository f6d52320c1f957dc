"""Tests for the GraphQL SDL loader."""

from pathlib import Path

import pytest

from blokgen.core import ir
from blokgen.core.errors import SchemaLoadError
from blokgen.loaders import load_type_graph, load_type_graph_file

SDL = '''
"A landing page"
type Page @storyblok(type: contentType, icon: block_at) {
  "Page title"
  title: String! @storyblokField(max: 80, translatable: true)
  tags: [Tag!]! @storyblokField(toolbar: [bold, italic], ratio: 0.5, blokTypes: "Teaser")
  body: [Block] @storyblokField(default: null, extra: {a: 1})
  slug: String
}

enum Tag {
  "News item"
  NEWS
  EVENT
}

union Block = Page | Teaser

scalar Date

interface Node {
  id: ID!
}
'''


@pytest.fixture
def graph() -> ir.TypeGraph:
    return load_type_graph(SDL)


class TestLoadTypeGraph:
    def test_type_kinds(self, graph: ir.TypeGraph) -> None:
        assert list(graph.types) == ["Page", "Tag", "Block", "Date"]
        assert graph.types["Page"].kind == ir.TypeKind.OBJECT
        assert graph.types["Tag"].kind == ir.TypeKind.ENUM
        assert graph.types["Block"].kind == ir.TypeKind.UNION
        assert graph.types["Date"].kind == ir.TypeKind.SCALAR

    def test_interfaces_are_skipped(self, graph: ir.TypeGraph) -> None:
        assert graph.get("Node") is None

    def test_descriptions(self, graph: ir.TypeGraph) -> None:
        page = graph.types["Page"]
        tag = graph.types["Tag"]

        assert page.description == "A landing page"
        assert page.fields[0].description == "Page title"
        assert [(v.name, v.description) for v in tag.values] == [("NEWS", "News item"), ("EVENT", None)]

    def test_field_order(self, graph: ir.TypeGraph) -> None:
        assert [f.name for f in graph.types["Page"].fields] == ["title", "tags", "body", "slug"]

    def test_type_references(self, graph: ir.TypeGraph) -> None:
        page = graph.types["Page"]
        title, tags, body, slug = page.fields

        assert title.type == ir.TypeReference(name="String", required=True)
        assert tags.type == ir.TypeReference(name="Tag", is_list=True, required=True, item_required=True)
        assert body.type == ir.TypeReference(name="Block", is_list=True)
        assert slug.type == ir.TypeReference(name="String")

    def test_union_members(self, graph: ir.TypeGraph) -> None:
        block = graph.types["Block"]

        assert block.members == ["Page", "Teaser"]
        # Teaser is not defined, so only Page resolves
        assert [m.name for m in graph.union_members(block)] == ["Page"]

    def test_type_directive(self, graph: ir.TypeGraph) -> None:
        directive = graph.types["Page"].directives[0]

        assert directive.name == "storyblok"
        assert directive.arguments == {
            "type": ir.EnumSymbol(value="contentType"),
            "icon": ir.EnumSymbol(value="block_at"),
        }

    def test_argument_literals(self, graph: ir.TypeGraph) -> None:
        title, tags, body, slug = graph.types["Page"].fields

        assert title.directives[0].arguments == {"max": 80, "translatable": True}
        assert tags.directives[0].arguments == {
            "toolbar": [ir.EnumSymbol(value="bold"), ir.EnumSymbol(value="italic")],
            "ratio": 0.5,
            "blokTypes": "Teaser",
        }
        assert body.directives[0].arguments == {}
        assert slug.directives == []

    def test_argument_value_types(self, graph: ir.TypeGraph) -> None:
        arguments = graph.types["Page"].fields[0].directives[0].arguments

        assert type(arguments["max"]) is int
        assert type(arguments["translatable"]) is bool

    def test_invalid_sdl(self) -> None:
        with pytest.raises(SchemaLoadError, match="Invalid GraphQL schema"):
            load_type_graph("type Page {")

    def test_empty_document(self) -> None:
        with pytest.raises(SchemaLoadError):
            load_type_graph("")


class TestLoadTypeGraphFile:
    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "schema.graphql"
        path.write_text(SDL, encoding="utf-8")

        assert list(load_type_graph_file(path).types) == ["Page", "Tag", "Block", "Date"]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(SchemaLoadError, match="Cannot read schema"):
            load_type_graph_file(tmp_path / "missing.graphql")
