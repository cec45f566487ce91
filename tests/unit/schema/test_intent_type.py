"""Tests for IntentType construction and mutability."""
from __future__ import annotations

from enum import Enum

import pytest

from epiphany.core.exceptions import SchemaValidationError
from epiphany.core.schema import IntentType, unwrap_intent


class Entity(Enum):
    ORIGIN = "origin"
    DESTINATION = "destination"


class TestIntentTypeFromRaw:
    def test_fields(self) -> None:
        intent = IntentType.from_raw(
            {
                "type": "book_flight",
                "required_entities": ["origin", "destination"],
                "optional_entities": ["date"],
                "keywords_boost": ["fly"],
            }
        )
        assert intent.type == "book_flight"
        assert intent.required_entities == ["origin", "destination"]
        assert intent.optional_entities == ["date"]
        assert intent.keywords_boost == ["fly"]

    def test_defaults_are_empty_and_independent(self) -> None:
        a = IntentType.from_raw({}, source="a.json")
        b = IntentType.from_raw({}, source="b.json")
        assert a.required_entities == [] and a.optional_entities == [] and a.keywords_boost == []
        a.required_entities.append("x")
        assert b.required_entities == []

    def test_type_inferred_from_filename(self) -> None:
        intent = IntentType.from_raw({}, source="/lib/epiphany/intent_types/track_exercise.json")
        assert intent.type == "track_exercise"

    def test_no_type_name_raises(self) -> None:
        with pytest.raises(SchemaValidationError):
            IntentType.from_raw({"required_entities": ["x"]})

    def test_enum_entity_names_become_strings(self) -> None:
        intent = IntentType.from_raw({"type": "book_flight", "required_entities": [Entity.ORIGIN]})
        assert intent.required_entities == ["origin"]


class TestIntentTypeMutability:
    def test_fields_accept_assignment(self) -> None:
        intent = IntentType.from_raw({"type": "book_flight", "required_entities": ["origin"]})
        intent.type = "book_train"
        intent.required_entities = ["station"]
        intent.keywords_boost.append("rail")
        assert intent.type == "book_train"
        assert intent.required_entities == ["station"]
        assert intent.keywords_boost == ["rail"]

    def test_equality_by_value(self) -> None:
        a = IntentType.from_raw({"type": "x", "required_entities": ["a"]}, source="one.json")
        b = IntentType.from_raw({"type": "x", "required_entities": ["a"]}, source="two.json")
        assert a == b


class TestUnwrapIntent:
    def test_wrapped_definition(self) -> None:
        data = {"book_flight": {"required_entities": ["origin"]}}
        intent = IntentType.from_raw(unwrap_intent(data))
        assert intent.type == "book_flight"
        assert intent.required_entities == ["origin"]

    def test_wrapping_key_overrides_nested_type(self) -> None:
        data = {"book_flight": {"type": "other", "required_entities": ["origin"]}}
        assert unwrap_intent(data)["type"] == "book_flight"

    def test_named_key_selected(self) -> None:
        data = {"first": {"required_entities": ["a"]}, "second": {"required_entities": ["b"]}}
        merged = unwrap_intent(data, "second")
        assert merged["type"] == "second"
        assert merged["required_entities"] == ["b"]

    def test_unknown_name_falls_back_to_first_key(self) -> None:
        data = {"book_flight": {"required_entities": ["origin"]}}
        assert unwrap_intent(data, "search_twitter")["type"] == "book_flight"

    def test_input_not_mutated(self) -> None:
        data = {"book_flight": {"required_entities": ["origin"]}}
        unwrap_intent(data)
        assert data == {"book_flight": {"required_entities": ["origin"]}}

    @pytest.mark.parametrize("data", [{}, [], "book_flight", {"book_flight": ["origin"]}])
    def test_malformed(self, data) -> None:
        with pytest.raises(SchemaValidationError):
            unwrap_intent(data, source="bad.json")
