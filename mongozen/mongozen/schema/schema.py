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

"""Schema engine: a canonical tree built once plus the operations that walk it."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Tuple

from .defaults import apply_defaults
from .definition import SchemaTree, build_schema_tree
from .validation import ValidationResult, validate_document

_module_logger = logging.getLogger(__name__)


class Schema:
    """Field-typed document shape with default application and validation.

    The declaration is normalized and checked at construction; a malformed
    declaration raises :class:`~mongozen.exceptions.SchemaDefinitionError` and no
    schema is created. After construction the tree is read-only, so one instance
    can serve any number of callers.
    """

    def __init__(self, definition: Optional[Mapping] = None, *, logger: Optional[logging.Logger] = None, **options: Any):
        self._tree: SchemaTree = build_schema_tree(definition)
        self._original_definition = definition
        self._options: Dict[str, Any] = dict(options)
        self._logger = logger

        (logger or _module_logger).debug("Schema created")

    @property
    def definition(self) -> SchemaTree:
        return self._tree

    @property
    def original_definition(self) -> Mapping:
        return self._original_definition

    @property
    def field_names(self) -> List[str]:
        return list(self._tree.keys())

    @property
    def logger(self) -> Optional[logging.Logger]:
        return self._logger

    @property
    def options(self) -> Dict[str, Any]:
        return dict(self._options)

    def apply_defaults(self, document: Optional[Mapping] = None) -> Dict[str, Any]:
        """Return a new document with declared defaults filled in for absent fields."""
        return apply_defaults(self._tree, document)

    def validate(self, document: Any) -> ValidationResult:
        """Validate a document, returning every violation found."""
        return validate_document(self._tree, document)

    def prepare(self, document: Optional[Mapping] = None) -> Tuple[Dict[str, Any], ValidationResult]:
        """Apply defaults, then validate the result."""
        prepared = self.apply_defaults(document)
        return prepared, self.validate(prepared)

    def __repr__(self) -> str:
        return f"Schema(fields={self.field_names!r})"
