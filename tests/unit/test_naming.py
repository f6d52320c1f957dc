"""Tests for case conversion helpers."""

import pytest

from blokgen.core.naming import camel_case, icon_name, param_case, sentence_case, snake_case


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("BlogPost", "blog_post"),
        ("blogPost", "blog_post"),
        ("SEOPage", "seo_page"),
        ("hero_image", "hero_image"),
        ("Page", "page"),
    ],
)
def test_snake_case(name: str, expected: str) -> None:
    assert snake_case(name) == expected


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("section Basics", "sectionBasics"),
        ("tab Main Info", "tabMainInfo"),
        ("section my-group", "sectionMyGroup"),
        ("tab Step 2", "tabStep_2"),
    ],
)
def test_camel_case(name: str, expected: str) -> None:
    assert camel_case(name) == expected


def test_param_case() -> None:
    assert param_case("inlineCode") == "inline-code"
    assert param_case("h1") == "h1"


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("heroImage", "Hero image"),
        ("title", "Title"),
        ("RED", "Red"),
        ("", ""),
    ],
)
def test_sentence_case(name: str, expected: str) -> None:
    assert sentence_case(name) == expected


def test_icon_name() -> None:
    assert icon_name("block_at") == "block-@"
    assert icon_name("block_text_img_l") == "block-text-img-l"
