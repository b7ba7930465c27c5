"""Tests for default application."""

import datetime
import time

import pytest

from mongozen.schema.defaults import apply_defaults
from mongozen.schema.definition import build_schema_tree
from mongozen.schema.validation import validate_document


UTC = datetime.timezone.utc


class TestStaticDefaults:

    def test_applies_static_values(self):
        tree = build_schema_tree({
            "name": str,
            "age": {"type": int, "default": 18},
            "is_active": {"type": bool, "default": True},
            "tags": {"type": list, "default": []},
        })

        processed = apply_defaults(tree, {"name": "John"})

        assert processed == {"name": "John", "age": 18, "is_active": True, "tags": []}

    def test_mutable_defaults_are_not_shared(self):
        tree = build_schema_tree({"tags": {"type": list, "default": ["new"]}})

        first = apply_defaults(tree, {})
        first["tags"].append("changed")
        second = apply_defaults(tree, {})

        assert second["tags"] == ["new"]

    def test_existing_values_are_kept(self):
        tree = build_schema_tree({
            "name": {"type": str, "default": "Unknown"},
            "age": {"type": int, "default": 18},
        })

        assert apply_defaults(tree, {"name": "John", "age": 30}) == {"name": "John", "age": 30}

    def test_explicit_none_counts_as_present(self):
        tree = build_schema_tree({"name": {"type": str, "default": "Unknown"}})
        assert apply_defaults(tree, {"name": None}) == {"name": None}

    def test_fields_without_default_stay_absent(self):
        tree = build_schema_tree({"name": str, "age": {"type": int, "required": True}})
        assert apply_defaults(tree, {}) == {}

    def test_undeclared_fields_pass_through(self):
        tree = build_schema_tree({"name": {"type": str, "default": "Unknown"}})
        assert apply_defaults(tree, {"extra": 1}) == {"extra": 1, "name": "Unknown"}

    def test_input_is_not_mutated(self):
        tree = build_schema_tree({"name": {"type": str, "default": "Unknown"}})
        document = {"age": 3}

        apply_defaults(tree, document)

        assert document == {"age": 3}


class TestProducerDefaults:

    def test_producer_is_called_per_document(self):
        counter = iter(range(10))
        tree = build_schema_tree({"seq": {"type": int, "default": lambda: next(counter)}})

        assert apply_defaults(tree, {})["seq"] == 0
        assert apply_defaults(tree, {})["seq"] == 1

    def test_type_as_producer(self):
        tree = build_schema_tree({"tags": {"type": list, "default": list}})
        assert apply_defaults(tree, {}) == {"tags": []}

    def test_numeric_producer_on_date_is_converted(self):
        tree = build_schema_tree({"created_at": {"type": datetime.datetime, "default": lambda: 1672531200}})

        processed = apply_defaults(tree, {})

        assert processed["created_at"] == datetime.datetime(2023, 1, 1, tzinfo=UTC)

    def test_time_time_producer_yields_datetime(self):
        tree = build_schema_tree({"created_at": {"type": datetime.datetime, "default": time.time}})
        assert isinstance(apply_defaults(tree, {})["created_at"], datetime.datetime)

    def test_out_of_range_producer_value_is_left_for_validation(self):
        tree = build_schema_tree({"at": {"type": datetime.datetime, "default": lambda: float("inf")}})

        processed = apply_defaults(tree, {})

        assert processed == {"at": float("inf")}
        assert validate_document(tree, processed).messages() == ["at must be of type Date"]

    def test_numeric_producer_on_number_is_kept(self):
        tree = build_schema_tree({"score": {"type": float, "default": lambda: 0.5}})
        assert apply_defaults(tree, {}) == {"score": 0.5}

    def test_producer_not_called_when_value_present(self):
        def explode():
            raise AssertionError("producer must not run")

        tree = build_schema_tree({"uuid": {"type": str, "default": explode}})

        assert apply_defaults(tree, {"uuid": "abc"}) == {"uuid": "abc"}


class TestNestedDefaults:

    def test_nested_defaults_create_sub_document(self):
        tree = build_schema_tree({
            "name": str,
            "favorites": {
                "movie": {"type": str, "default": "LOTR"},
                "book": {"type": str, "default": "The Hobbit"},
                "food": {"type": str},
            },
        })

        processed = apply_defaults(tree, {"name": "John"})

        assert processed == {"name": "John", "favorites": {"movie": "LOTR", "book": "The Hobbit"}}

    def test_nested_producers(self):
        tree = build_schema_tree({
            "metadata": {
                "created_at": {"type": datetime.datetime, "default": lambda: 1672531200},
                "id": {"type": str, "default": lambda: "ID-123"},
            },
        })

        processed = apply_defaults(tree, {})

        assert processed["metadata"]["created_at"] == datetime.datetime(2023, 1, 1, tzinfo=UTC)
        assert processed["metadata"]["id"] == "ID-123"

    def test_no_empty_sub_document_without_defaults(self):
        tree = build_schema_tree({"name": str, "preferences": {"theme": str, "language": str}})

        processed = apply_defaults(tree, {"name": "John"})

        assert "preferences" not in processed

    def test_deeply_nested_defaults(self):
        tree = build_schema_tree({"a": {"b": {"c": {"type": int, "default": 1}}, "d": {"e": str}}})
        assert apply_defaults(tree, {}) == {"a": {"b": {"c": 1}}}

    def test_present_sub_document_is_left_alone(self):
        tree = build_schema_tree({"favorites": {"movie": {"type": str, "default": "LOTR"}, "food": str}})
        assert apply_defaults(tree, {"favorites": {"food": "pizza"}}) == {"favorites": {"food": "pizza"}}


class TestDocumentArgument:

    def test_none_document_is_empty(self):
        tree = build_schema_tree({"name": {"type": str, "default": "Unknown"}})
        assert apply_defaults(tree) == {"name": "Unknown"}

    def test_non_mapping_document_is_rejected(self):
        tree = build_schema_tree({"name": str})
        with pytest.raises(TypeError, match="Document must be a mapping"):
            apply_defaults(tree, ["not", "a", "document"])


def test_idempotent():
    tree = build_schema_tree({
        "name": {"type": str, "default": "Unknown"},
        "tags": {"type": list, "default": []},
        "favorites": {"movie": {"type": str, "default": "LOTR"}},
        "note": {"type": str, "default": None},
    })
    document = {"tags": None}

    once = apply_defaults(tree, document)

    assert apply_defaults(tree, once) == once
