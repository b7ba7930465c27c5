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

"""Schema definitions and validation.

The engine works on in-memory mappings only; no document store driver is
imported here.
"""

from .definition import NO_DEFAULT, FieldSpec, SchemaTree, build_schema_tree
from .defaults import apply_defaults
from .schema import Schema
from .types import TYPE_VALIDATORS, check_type, is_known_type, resolve_type_name
from .validation import ValidationIssue, ValidationResult, validate_document

__all__ = [
    "NO_DEFAULT",
    "FieldSpec",
    "Schema",
    "SchemaTree",
    "TYPE_VALIDATORS",
    "ValidationIssue",
    "ValidationResult",
    "apply_defaults",
    "build_schema_tree",
    "check_type",
    "is_known_type",
    "resolve_type_name",
    "validate_document",
]
