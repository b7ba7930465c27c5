# Copyright 2026 The mongozen Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Canonical schema tree construction.

A raw declaration maps field names to one of:

* a type reference (``str``, ``"String"``, ``"str"``),
* an options mapping carrying a ``type`` key,
* a list literal holding at most one element declaration (``[str]``),
* a nested mapping without a ``type`` key (a sub-document).

``build_schema_tree`` resolves every variant once into :class:`FieldSpec` leaves
and read-only nested mappings. Nothing downstream inspects the raw shapes again.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, Optional, Pattern, Tuple, Union

from ..exceptions import SchemaDefinitionError
from .types import (
    MIXED,
    TIMESTAMP_ERRORS,
    check_type,
    describe_type_ref,
    is_known_type,
    resolve_type_name,
    timestamp_to_date,
)


class _NoDefault:
    def __repr__(self) -> str:
        return "NO_DEFAULT"

    def __bool__(self) -> bool:
        return False


NO_DEFAULT = _NoDefault()

OPTION_ALIASES: Dict[str, str] = {
    "minLength": "min_length",
    "maxLength": "max_length",
    "match": "pattern",
    "arrayType": "array_type",
}

KNOWN_OPTIONS = frozenset(
    {
        "type",
        "required",
        "default",
        "validate",
        "message",
        "min",
        "max",
        "min_length",
        "max_length",
        "pattern",
        "enum",
        "array_type",
    }
)


@dataclass(frozen=True)
class FieldSpec:
    """Normalized description of a single leaf field."""

    type_name: str = MIXED
    required: bool = False
    default: Any = NO_DEFAULT
    validate: Optional[Callable[[Any], Any]] = None
    message: Optional[str] = None
    min: Optional[float] = None
    max: Optional[float] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    pattern: Optional[Pattern] = None
    enum: Optional[Tuple[Any, ...]] = None
    # element spec of an Array field: a FieldSpec, or a SchemaTree for sub-documents
    items: Optional[Union["FieldSpec", "SchemaTree"]] = None
    extra: Mapping = field(default_factory=lambda: MappingProxyType({}))

    @property
    def has_default(self) -> bool:
        return self.default is not NO_DEFAULT

    @property
    def has_document_items(self) -> bool:
        return isinstance(self.items, Mapping)


SchemaNode = Union[FieldSpec, "SchemaTree"]
SchemaTree = Mapping[str, SchemaNode]


def join_field_path(base: str, token: Any) -> str:
    if not base:
        return str(token)
    return f"{base}.{token}"


def build_schema_tree(definition: Any, path_prefix: str = "") -> SchemaTree:
    """Normalize a raw declaration into a read-only schema tree.

    Raises:
        SchemaDefinitionError: At the first malformed field, naming its dotted path.
    """
    if definition is None:
        raise SchemaDefinitionError("Schema definition is required")
    if not isinstance(definition, Mapping):
        raise SchemaDefinitionError("Schema definition must be an object")
    return _build_tree(definition, path_prefix)


def _build_tree(definition: Mapping, prefix: str) -> SchemaTree:
    processed: Dict[str, SchemaNode] = {}
    for name, declaration in definition.items():
        if not isinstance(name, str) or not name:
            raise SchemaDefinitionError(f"Field names must be non-empty strings, got: {name!r}")
        processed[name] = _build_node(declaration, join_field_path(prefix, name))
    return MappingProxyType(processed)


def _build_node(declaration: Any, path: str) -> SchemaNode:
    if declaration is None:
        raise SchemaDefinitionError(f"Definition cannot be undefined or null for field '{path}'")

    if isinstance(declaration, (list, tuple)):
        return FieldSpec(type_name="Array", items=_build_items(declaration, path))

    if isinstance(declaration, Mapping):
        # a mapping-valued "type" is a sub-document field that happens to be named "type"
        if "type" not in declaration or isinstance(declaration["type"], Mapping):
            return _build_tree(declaration, path)
        return _build_field(declaration, path)

    return _build_field({"type": declaration}, path)


def _build_items(elements: Any, path: str) -> SchemaNode:
    if len(elements) > 1:
        raise SchemaDefinitionError(
            f"Array declaration must hold at most one element type (field '{path}')"
        )
    if not elements:
        return FieldSpec(type_name=MIXED)
    return _build_node(elements[0], f"{path}[]")


def _build_field(options: Mapping, path: str) -> FieldSpec:
    opts: Dict[str, Any] = {}
    extra: Dict[str, Any] = {}
    for key, value in options.items():
        canonical = OPTION_ALIASES.get(key, key)
        if canonical in KNOWN_OPTIONS:
            opts[canonical] = value
        else:
            extra[key] = value

    type_ref = opts.get("type", MIXED)
    items: Optional[SchemaNode] = None
    if isinstance(type_ref, (list, tuple)):
        type_name = "Array"
        items = _build_items(type_ref, path)
    else:
        type_name = resolve_type_name(type_ref)
        if not is_known_type(type_name):
            shown = type_name if type_name is not None else describe_type_ref(type_ref)
            raise SchemaDefinitionError(f"Invalid type: {shown} (field '{path}')")

    if "array_type" in opts:
        if type_name != "Array":
            raise SchemaDefinitionError(f"arrayType is only valid on Array fields (field '{path}')")
        if items is None:
            items = _build_items([opts["array_type"]], path)

    validate = opts.get("validate")
    if validate and not callable(validate):
        raise SchemaDefinitionError(f"Validation function must be a function (field '{path}')")

    required = opts.get("required", False)
    if not isinstance(required, bool):
        raise SchemaDefinitionError(f"Required property must be a boolean (field '{path}')")

    message = opts.get("message")
    if message is not None and not isinstance(message, str):
        raise SchemaDefinitionError(f"Message must be a string (field '{path}')")

    return FieldSpec(
        type_name=type_name,
        required=required,
        default=_check_default(opts.get("default", NO_DEFAULT), type_name, path),
        validate=validate or None,
        message=message,
        min=_check_number(opts, "min", path),
        max=_check_number(opts, "max", path),
        min_length=_check_length(opts, "min_length", path),
        max_length=_check_length(opts, "max_length", path),
        pattern=_check_pattern(opts.get("pattern"), path),
        enum=_check_enum(opts.get("enum"), path),
        items=items,
        extra=MappingProxyType(extra),
    )


def _check_default(default: Any, type_name: str, path: str) -> Any:
    if default is NO_DEFAULT or default is None or callable(default):
        return default
    if type_name == "Date" and check_type("Number", default):
        try:
            return timestamp_to_date(default)
        except TIMESTAMP_ERRORS as exc:
            raise SchemaDefinitionError(
                f"Default timestamp out of range for Date (field '{path}')"
            ) from exc
    if type_name != MIXED and not check_type(type_name, default):
        raise SchemaDefinitionError(f"Default value must be of type {type_name} (field '{path}')")
    return default


def _check_number(opts: Dict[str, Any], key: str, path: str) -> Optional[float]:
    value = opts.get(key)
    if value is None:
        return None
    if not check_type("Number", value):
        raise SchemaDefinitionError(f"'{key}' must be a number (field '{path}')")
    return value


def _check_length(opts: Dict[str, Any], key: str, path: str) -> Optional[int]:
    value = opts.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise SchemaDefinitionError(f"'{key}' must be a non-negative integer (field '{path}')")
    return value


def _check_pattern(pattern: Any, path: str) -> Optional[Pattern]:
    if pattern is None:
        return None
    if isinstance(pattern, re.Pattern):
        return pattern
    if not isinstance(pattern, str):
        raise SchemaDefinitionError(f"Pattern must be a string or compiled regex (field '{path}')")
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise SchemaDefinitionError(f"Invalid pattern '{pattern}': {exc} (field '{path}')") from exc


def _check_enum(enum: Any, path: str) -> Optional[Tuple[Any, ...]]:
    if enum is None:
        return None
    if not isinstance(enum, (list, tuple)):
        raise SchemaDefinitionError(f"Enum must be a list of allowed values (field '{path}')")
    return tuple(enum)
