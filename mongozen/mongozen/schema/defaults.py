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

"""Default value application over a canonical schema tree."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any, Dict, Optional

from .definition import FieldSpec, SchemaTree
from .types import TIMESTAMP_ERRORS, check_type, timestamp_to_date


def apply_defaults(tree: SchemaTree, document: Optional[Mapping] = None) -> Dict[str, Any]:
    """Return a shallow copy of ``document`` with declared defaults filled in.

    Only absent keys are populated; a key holding ``None`` counts as present.
    Nested sub-documents are created only when at least one nested default applies.

    Raises:
        TypeError: If ``document`` is not a mapping.
    """
    if document is None:
        document = {}
    if not isinstance(document, Mapping):
        raise TypeError(f"Document must be a mapping, got {type(document).__name__}")

    result = dict(document)
    for name, node in tree.items():
        if name in result:
            continue

        if isinstance(node, FieldSpec):
            if node.has_default:
                result[name] = _default_value(node)
            continue

        nested = apply_defaults(node, {})
        if nested:
            result[name] = nested

    return result


def _default_value(spec: FieldSpec) -> Any:
    if callable(spec.default):
        value = spec.default()
        if spec.type_name == "Date" and check_type("Number", value):
            try:
                return timestamp_to_date(value)
            except TIMESTAMP_ERRORS:
                # left as produced; validation reports it as a type mismatch
                return value
        return value
    return copy.deepcopy(spec.default)
