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

"""Linter package: checks YAML/JSON document files against a schema declaration."""

import datetime
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, List

from ..exceptions import MongoZenError
from ..parsing.yaml_parser import yaml_parser
from ..schema import Schema
from ..utils.source_location import field_path_to_pointer, lookup_source
from .report import LintResult

__all__ = ['lint_documents', 'lint_file', 'promote_dates', 'LintResult']

logger = logging.getLogger(__name__)


def promote_dates(value: Any) -> Any:
    """Turn YAML date-only scalars (``born: 2020-01-01``) into midnight UTC datetimes.

    PyYAML loads them as ``datetime.date``, while Date fields hold ``datetime``.
    """
    if isinstance(value, datetime.date) and not isinstance(value, datetime.datetime):
        return datetime.datetime(value.year, value.month, value.day, tzinfo=datetime.timezone.utc)
    if isinstance(value, Mapping):
        return {key: promote_dates(item) for key, item in value.items()}
    if isinstance(value, list):
        return [promote_dates(item) for item in value]
    return value


def lint_file(schema: Schema, file_path: Path, apply_defaults: bool = True) -> LintResult:
    """Validate every document stored in one file.

    A file holds either a single mapping or a list of mappings.
    """
    result = LintResult(file_path)

    try:
        data, source_map = yaml_parser.load_file_with_source(file_path)
    except MongoZenError as e:
        result.add_error(f"Failed to load document file: {e}")
        return result

    is_batch = isinstance(data, list)
    documents = data if is_batch else [data]
    if not documents:
        result.add_warning("No documents found", line=1)
        return result

    for index, document in enumerate(documents):
        base = f"/{index}" if is_batch else ""
        doc_index = index if is_batch else None
        result.documents += 1

        if not isinstance(document, Mapping):
            loc = lookup_source(source_map, base)
            result.add_error("Document must be an object", line=loc.line, column=loc.column,
                             yaml_path=base, document=doc_index)
            continue

        document = promote_dates(document)
        prepared = schema.apply_defaults(document) if apply_defaults else document
        validation = schema.validate(prepared)
        for issue in validation.errors:
            pointer = field_path_to_pointer(issue.field, base)
            loc = lookup_source(source_map, pointer)
            result.add_error(
                issue.message,
                line=loc.line,
                column=loc.column,
                yaml_path=pointer,
                field=issue.field,
                document=doc_index,
            )

    logger.debug("Linted %s: %d document(s), %d error(s)", file_path, result.documents, len(result.errors))
    return result


def lint_documents(schema: Schema, file_paths: List[Path], apply_defaults: bool = True) -> List[LintResult]:
    """Lint a list of document files.

    Args:
        schema: Schema every document must conform to
        file_paths: List of file paths to lint
        apply_defaults: Whether declared defaults are applied before validation

    Returns:
        List of LintResult objects, one per file
    """
    return [lint_file(schema, Path(file_path), apply_defaults) for file_path in file_paths]
