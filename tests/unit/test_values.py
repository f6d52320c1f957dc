"""Tests for optional-value and list helpers."""

from blokgen.core.values import compact, if_value, is_value, true_or_none, unique


def test_is_value() -> None:
    assert is_value(0)
    assert is_value("")
    assert is_value(False)
    assert not is_value(None)


def test_if_value() -> None:
    assert if_value("3", int) == 3
    assert if_value(None, int) is None


def test_unique_keeps_first_occurrence() -> None:
    assert unique(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


def test_unique_with_key() -> None:
    assert unique(["Teaser", "teaser", "Hero"], key=str.lower) == ["Teaser", "Hero"]


def test_compact() -> None:
    assert compact([None, "a", None, ""]) == ["a", ""]


def test_true_or_none() -> None:
    assert true_or_none(True) is True
    assert true_or_none(False) is None
