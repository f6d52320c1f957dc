"""Shared pytest fixtures for blokgen tests."""

import pytest

from blokgen.core import ir
from blokgen.core.integration import CommercetoolsConfig
from blokgen.loaders import load_type_graph


@pytest.fixture
def empty_graph() -> ir.TypeGraph:
    return ir.TypeGraph()


@pytest.fixture
def ct_config() -> CommercetoolsConfig:
    """Return commercetools settings mixing literals and Terraform references."""
    return CommercetoolsConfig(
        project_key="my-project",
        endpoint="https://api.europe-west1.gcp.commercetools.com",
        client_id="var.ct_client_id",
        client_secret="local.ct_secret",
        locale="en",
    )


@pytest.fixture
def content_graph() -> ir.TypeGraph:
    """Return a graph with content types, nestable bloks, an enum and unions."""
    return load_type_graph(
        '''
        enum Color {
          Red
          "Deep blue"
          Blue
        }

        type Page @storyblok(type: contentType) {
          title: String! @storyblokField
        }

        type Article @storyblok(type: universal) {
          title: String @storyblokField
        }

        type Teaser @storyblok(type: nestable) {
          headline: String @storyblokField
        }

        type Hero {
          headline: String @storyblokField
        }

        union Linkable = Page | Article
        union Block = Teaser | Hero
        union Mixed = Page | Teaser
        '''
    )
