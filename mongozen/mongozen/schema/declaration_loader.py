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

"""Declaration file loading.

A declaration file is YAML (or JSON) of the form::

    name: users
    fields:
      name: {type: String, required: true}
      tags: [String]
      address:
        city: String

Its structure is checked against the bundled JSON Schema before the ``fields``
mapping is handed to :class:`~mongozen.schema.schema.Schema`.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import jsonschema

from ..exceptions import DeclarationFileError, SchemaDefinitionError
from ..parsing.yaml_parser import SourceMap, yaml_parser
from ..utils.source_location import SourceLocation, format_source, lookup_source
from .schema import Schema

_module_logger = logging.getLogger(__name__)

META_SCHEMA_PATH = Path(__file__).parent / "json" / "declaration.json"

# Meta schema cache to avoid reloading the file
_META_SCHEMA_CACHE: Dict[str, dict] = {}


@dataclass(frozen=True)
class DeclarationIssue:
    message: str
    yaml_path: str = ""


def load_meta_schema() -> dict:
    """Load the JSON Schema describing declaration files.

    Raises:
        DeclarationFileError: If the bundled schema is missing or not valid JSON.
    """
    cache_key = str(META_SCHEMA_PATH)
    if cache_key in _META_SCHEMA_CACHE:
        return _META_SCHEMA_CACHE[cache_key]

    try:
        with open(META_SCHEMA_PATH, "r", encoding="utf-8") as f:
            schema = json.load(f)
    except FileNotFoundError as exc:
        raise DeclarationFileError(f"Declaration meta schema not found: {META_SCHEMA_PATH}") from exc
    except json.JSONDecodeError as exc:
        raise DeclarationFileError(f"Invalid JSON in declaration meta schema {META_SCHEMA_PATH}: {exc.msg}") from exc

    _META_SCHEMA_CACHE[cache_key] = schema
    return schema


def clear_cache() -> None:
    """Clear the meta schema cache. Useful for testing."""
    _META_SCHEMA_CACHE.clear()


def check_declaration(data: Any) -> List[DeclarationIssue]:
    """Check the structure of a parsed declaration file, returning every issue found."""
    if not isinstance(data, dict):
        return [DeclarationIssue(message="Declaration root must be a mapping/object", yaml_path="")]

    validator = jsonschema.Draft7Validator(load_meta_schema())
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])

    issues: List[DeclarationIssue] = []
    for error in errors:
        path = "/" + "/".join(str(p) for p in error.absolute_path) if error.absolute_path else ""
        issues.append(DeclarationIssue(message=error.message, yaml_path=path))
    return issues


def _format_issues(issues: List[DeclarationIssue], source_map: Optional[SourceMap], file_path: Optional[Path]) -> str:
    lines = []
    for issue in issues:
        loc = lookup_source(source_map, issue.yaml_path)
        if file_path is not None:
            loc = SourceLocation(file_path=file_path, yaml_path=loc.yaml_path, line=loc.line, column=loc.column)
        lines.append(f"  - {issue.message}{format_source(loc)}")
    return "\n".join(lines)


def schema_from_declaration(
    data: Any,
    *,
    source_map: Optional[SourceMap] = None,
    file_path: Optional[Path] = None,
    logger: Optional[logging.Logger] = None,
) -> Schema:
    """Build a :class:`Schema` from an already parsed declaration document."""
    origin = str(file_path) if file_path is not None else "<string>"

    issues = check_declaration(data)
    if issues:
        details = _format_issues(issues, source_map, file_path)
        raise DeclarationFileError(f"Schema declaration {origin} is invalid:\n{details}", issues)

    try:
        schema = Schema(data["fields"], logger=logger, name=data.get("name"), source=origin)
    except SchemaDefinitionError as exc:
        raise SchemaDefinitionError(f"{exc} in {origin}") from exc

    _module_logger.debug("Loaded schema declaration %s (%d fields)", origin, len(schema.field_names))
    return schema


def load_schema_file(file_path: Union[str, Path], logger: Optional[logging.Logger] = None) -> Schema:
    """Load and build a schema from a YAML or JSON declaration file.

    Raises:
        DeclarationFileError: If the file cannot be read or its structure is invalid.
        SchemaDefinitionError: If the declared fields do not normalize.
    """
    path = Path(file_path)
    data, source_map = yaml_parser.load_file_with_source(path)
    return schema_from_declaration(data, source_map=source_map, file_path=path, logger=logger)


def load_schema_string(content: str, logger: Optional[logging.Logger] = None) -> Schema:
    """Build a schema from YAML or JSON declaration text."""
    data, source_map = yaml_parser.load_string_with_source(content)
    return schema_from_declaration(data, source_map=source_map, logger=logger)
