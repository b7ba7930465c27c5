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

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from ..parsing.yaml_parser import json_pointer_escape


@dataclass(frozen=True)
class SourceLocation:
    file_path: Optional[Path] = None
    yaml_path: Optional[str] = None
    line: Optional[int] = None  # 1-based
    column: Optional[int] = None  # 1-based


def field_path_to_pointer(field_path: str, base: str = "") -> str:
    """Convert a dotted field path (``address.zip``, ``tags.1``) to a JSON pointer."""
    if not field_path:
        return base
    tokens = [json_pointer_escape(token) for token in field_path.split(".")]
    return base + "/" + "/".join(tokens)


def lookup_source(source_map: Optional[Dict[str, Dict[str, int]]], yaml_path: Optional[str]) -> SourceLocation:
    """Find the closest recorded location for ``yaml_path``.

    Absent fields have no node of their own, so the lookup walks up to the
    nearest ancestor that does.
    """
    if not source_map or yaml_path is None:
        return SourceLocation(yaml_path=yaml_path)

    candidate = yaml_path
    while True:
        entry = source_map.get(candidate)
        if entry:
            return SourceLocation(yaml_path=yaml_path, line=entry.get("line"), column=entry.get("column"))
        if not candidate:
            return SourceLocation(yaml_path=yaml_path)
        candidate = candidate.rsplit("/", 1)[0]


def format_source(loc: Optional[SourceLocation]) -> str:
    if not loc:
        return ""

    parts = []
    if loc.file_path is not None:
        if loc.line is not None and loc.column is not None:
            parts.append(f"source= {loc.file_path}:{loc.line}:{loc.column}")
        elif loc.line is not None:
            parts.append(f"source= {loc.file_path}:{loc.line}")
        else:
            parts.append(f"source= {loc.file_path}")
    elif loc.line is not None:
        parts.append(f"line= {loc.line}")

    if loc.yaml_path:
        parts.append(f"yaml_path= {loc.yaml_path}")

    if not parts:
        return ""

    return " (" + " ".join(parts) + ")"
