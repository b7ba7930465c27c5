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

"""Collection-bound document preparation.

A :class:`Model` is the seam between the schema engine and a document store
gateway: every document is passed through :meth:`Model.prepare_document` before
it is written. The store itself is not part of this package.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Sequence

from .exceptions import DocumentValidationError
from .schema import Schema

_module_logger = logging.getLogger(__name__)


class Model:
    """Applies a schema to documents destined for one collection."""

    def __init__(self, collection_name: str, schema: Schema, *, logger: Optional[logging.Logger] = None):
        if not collection_name:
            raise ValueError("Collection name is required")
        if schema is None:
            raise ValueError("Schema is required")

        self.collection_name = collection_name
        self.schema = schema
        self.logger = logger or _module_logger

        self.logger.debug("Model created for collection: %s", self.collection_name)

    def prepare_document(self, document: Optional[Mapping] = None) -> Dict[str, Any]:
        """Apply defaults and validate a document before it is written.

        Returns:
            The document with defaults applied.

        Raises:
            DocumentValidationError: If the prepared document violates the schema.
                Its message joins every violation with ", " in validation order.
        """
        prepared, result = self.schema.prepare(document)
        if not result.is_valid:
            error_message = result.format(", ")
            self.logger.error("Validation failed for %s: %s", self.collection_name, error_message)
            raise DocumentValidationError(f"Validation failed: {error_message}", result.errors)

        self.logger.debug("Document prepared for %s", self.collection_name)
        return prepared

    def prepare_documents(self, documents: Sequence[Mapping]) -> List[Dict[str, Any]]:
        """Prepare a batch of documents; the first invalid document aborts the batch."""
        if not isinstance(documents, (list, tuple)):
            raise TypeError("prepare_documents requires a list of documents")
        return [self.prepare_document(document) for document in documents]

    def __repr__(self) -> str:
        return f"Model(collection_name={self.collection_name!r})"
