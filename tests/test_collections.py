"""Tests for collection normalisation and component definitions."""

from __future__ import annotations

import pytest

from formkit_ui import Forms, component_definition, normalize_collection, swap_choices


class TestNormalizeCollection:
    def test_mapping_is_label_to_value(self) -> None:
        assert normalize_collection({"Free": "free", "Pro": "pro"}) == [("Free", "free"), ("Pro", "pro")]

    def test_pairs(self) -> None:
        assert normalize_collection([("Yes", 1), ["No", 0]]) == [("Yes", 1), ("No", 0)]

    def test_scalars_are_label_and_value(self) -> None:
        assert normalize_collection(["red", "green"]) == [("red", "red"), ("green", "green")]

    def test_generator(self) -> None:
        assert normalize_collection(n for n in range(2)) == [(0, 0), (1, 1)]

    def test_none_is_empty(self) -> None:
        assert normalize_collection(None) == []

    def test_string_rejected(self) -> None:
        with pytest.raises(TypeError):
            normalize_collection("abc")

    def test_wrong_sized_option_rejected(self) -> None:
        with pytest.raises(ValueError, match="label, value"):
            normalize_collection([("a", 1, "extra")])


def test_swap_choices() -> None:
    assert swap_choices([("free", "Free")]) == [("Free", "free")]


def test_component_definition_shape() -> None:
    assert component_definition("Forms", "Input", {"name": "email"}) == {
        "category": "Forms",
        "component_type": "Input",
        "props": {"name": "email"},
    }


def test_button_definition_defaults() -> None:
    assert Forms.Button()["props"] == {"value": "Submit", "type": "submit"}
