"""Tests for the type registry."""

import datetime
from collections.abc import Mapping
from types import MappingProxyType

import pytest

from mongozen.schema.types import (
    TYPE_VALIDATORS,
    check_type,
    is_known_type,
    resolve_type_name,
    timestamp_to_date,
)


class TestPredicates:

    @pytest.mark.parametrize("type_name,value,expected", [
        ("String", "test", True),
        ("String", 123, False),
        ("String", [], False),
        ("Number", 123, True),
        ("Number", 0, True),
        ("Number", -10.5, True),
        ("Number", "test", False),
        ("Number", True, False),
        ("Number", float("nan"), False),
        ("Boolean", True, True),
        ("Boolean", False, True),
        ("Boolean", 1, False),
        ("Boolean", 0, False),
        ("Date", datetime.datetime(2023, 1, 1), True),
        ("Date", datetime.date(2023, 1, 1), False),
        ("Date", "2023-01-01", False),
        ("Date", 123, False),
        ("ObjectId", "507f1f77bcf86cd799439011", True),
        ("ObjectId", "507f1f77bcf86cd7994390", False),
        ("ObjectId", "507f1f77bcf86cd79943901z", False),
        ("ObjectId", 123, False),
        ("Array", [], True),
        ("Array", [1, 2, 3], True),
        ("Array", (1, 2), True),
        ("Array", "test", False),
        ("Array", {}, False),
        ("Buffer", b"test", True),
        ("Buffer", bytearray(b"test"), True),
        ("Buffer", "test", False),
        ("Map", {}, True),
        ("Map", MappingProxyType({"a": 1}), True),
        ("Map", [], False),
        ("Map", "test", False),
        ("BigInt", 2 ** 80, True),
        ("BigInt", True, False),
        ("BigInt", 1.0, False),
        ("BigInt", "123", False),
    ])
    def test_predicate(self, type_name, value, expected):
        assert check_type(type_name, value) is expected

    @pytest.mark.parametrize("value", ["test", 123, True, {}, [], None, datetime.datetime.now()])
    def test_mixed_accepts_everything(self, value):
        assert check_type("Mixed", value) is True

    def test_registry_is_closed_set(self):
        assert set(TYPE_VALIDATORS) == {
            "String", "Number", "Boolean", "Date", "ObjectId",
            "Array", "Mixed", "Buffer", "Map", "BigInt",
        }


class TestResolveTypeName:

    @pytest.mark.parametrize("ref,expected", [
        (str, "String"),
        (int, "Number"),
        (float, "Number"),
        (bool, "Boolean"),
        (datetime.datetime, "Date"),
        (list, "Array"),
        (bytes, "Buffer"),
        (memoryview, "Buffer"),
        (dict, "Mixed"),
        (Mapping, "Map"),
        ("String", "String"),
        ("ObjectId", "ObjectId"),
        ("str", "String"),
        (" BOOLEAN ", "Boolean"),
        ("datetime", "Date"),
        ("any", "Mixed"),
    ])
    def test_known_references(self, ref, expected):
        assert resolve_type_name(ref) == expected

    def test_object_id_class_resolves_by_name(self):
        class ObjectId:
            pass

        assert resolve_type_name(ObjectId) == "ObjectId"

    def test_big_int_is_declared_by_name(self):
        assert resolve_type_name(int) == "Number"
        assert resolve_type_name("BigInt") == "BigInt"
        assert resolve_type_name("bigint") == "BigInt"

    def test_unknown_string_is_returned_unchanged(self):
        assert resolve_type_name("InvalidType") == "InvalidType"
        assert not is_known_type("InvalidType")

    def test_unknown_object_resolves_to_none(self):
        class Custom:
            pass

        assert resolve_type_name(Custom) is None
        assert resolve_type_name(42) is None
        assert resolve_type_name(None) is None


def test_timestamp_to_date_is_utc():
    assert timestamp_to_date(1672531200) == datetime.datetime(2023, 1, 1, tzinfo=datetime.timezone.utc)
