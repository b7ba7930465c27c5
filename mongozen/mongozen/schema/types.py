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

"""Type registry: type tags, the predicates behind them and type reference lookup.

The registry is closed. A field declaration may name a type with a canonical tag
(``"String"``), a case-insensitive alias (``"str"``) or a Python type object
(``str``); all three resolve to the canonical tag at construction time and only
the tag is consulted during validation.
"""

from __future__ import annotations

import datetime
import math
import re
from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional


MIXED = "Mixed"

_OBJECT_ID_RE = re.compile(r"^[0-9a-fA-F]{24}$")


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (isinstance(value, float) and math.isnan(value))


def _is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def _is_date(value: Any) -> bool:
    return isinstance(value, datetime.datetime)


def _is_object_id(value: Any) -> bool:
    # bson.ObjectId renders as its 24-character hex form
    try:
        text = str(value)
    except Exception:
        return False
    return bool(_OBJECT_ID_RE.match(text))


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _is_buffer(value: Any) -> bool:
    return isinstance(value, (bytes, bytearray, memoryview))


def _is_map(value: Any) -> bool:
    return isinstance(value, Mapping)


def _is_big_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


TYPE_VALIDATORS: Dict[str, Callable[[Any], bool]] = {
    "ObjectId": _is_object_id,
    "Buffer": _is_buffer,
    "Map": _is_map,
    "BigInt": _is_big_int,
    "String": _is_string,
    "Number": _is_number,
    "Boolean": _is_boolean,
    "Date": _is_date,
    "Array": _is_array,
    MIXED: lambda value: True,
}

# Python type objects accepted as type references
TYPE_REFERENCES: Dict[type, str] = {
    str: "String",
    int: "Number",
    float: "Number",
    bool: "Boolean",
    datetime.datetime: "Date",
    list: "Array",
    tuple: "Array",
    bytes: "Buffer",
    bytearray: "Buffer",
    memoryview: "Buffer",
    dict: MIXED,
    object: MIXED,
    Mapping: "Map",
}

TYPE_ALIASES: Dict[str, str] = {
    "string": "String",
    "str": "String",
    "number": "Number",
    "int": "Number",
    "integer": "Number",
    "float": "Number",
    "double": "Number",
    "boolean": "Boolean",
    "bool": "Boolean",
    "date": "Date",
    "datetime": "Date",
    "objectid": "ObjectId",
    "array": "Array",
    "list": "Array",
    "mixed": MIXED,
    "any": MIXED,
    "object": MIXED,
    "buffer": "Buffer",
    "bytes": "Buffer",
    "map": "Map",
    "bigint": "BigInt",
}


def resolve_type_name(type_ref: Any) -> Optional[str]:
    """Resolve a type reference to its canonical tag.

    Unknown strings are returned unchanged so the caller can report them;
    unknown non-string references resolve to ``None``. A class named
    ``ObjectId`` (``bson.ObjectId``) resolves to ``"ObjectId"``. ``BigInt`` has no
    type object of its own, ``int`` being ``Number``, so it is declared by name.
    """
    if type_ref is None:
        return None
    if isinstance(type_ref, str):
        if type_ref in TYPE_VALIDATORS:
            return type_ref
        return TYPE_ALIASES.get(type_ref.strip().lower(), type_ref)
    if isinstance(type_ref, type):
        if type_ref in TYPE_REFERENCES:
            return TYPE_REFERENCES[type_ref]
        if type_ref.__name__ == "ObjectId":
            return "ObjectId"
    return None


def is_known_type(type_name: Optional[str]) -> bool:
    return bool(type_name) and type_name in TYPE_VALIDATORS


def check_type(type_name: str, value: Any) -> bool:
    """Run the registry predicate for ``type_name`` against ``value``."""
    return TYPE_VALIDATORS[type_name](value)


def describe_type_ref(type_ref: Any) -> str:
    if isinstance(type_ref, type):
        return type_ref.__name__
    return str(type_ref)


# raised by datetime.fromtimestamp for values outside the platform range
TIMESTAMP_ERRORS = (OverflowError, ValueError, OSError)


def timestamp_to_date(value: Any) -> datetime.datetime:
    """Promote a numeric POSIX timestamp (seconds) to an aware UTC datetime.

    Raises:
        One of ``TIMESTAMP_ERRORS`` when the value is out of range (infinity,
        or a millisecond timestamp read as seconds).
    """
    return datetime.datetime.fromtimestamp(value, tz=datetime.timezone.utc)
