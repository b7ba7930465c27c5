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

"""YAML loader for declaration and document files, with optional caching."""

import yaml
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from ..config import mongozen_config
from ..exceptions import DeclarationFileError

logger = logging.getLogger(__name__)

SourceMap = Dict[str, Dict[str, int]]


def json_pointer_escape(token: str) -> str:
    # JSON Pointer escaping: "~" -> "~0", "/" -> "~1"
    return token.replace("~", "~0").replace("/", "~1")


class YamlParser:
    """YAML parser with caching and source tracking."""

    def __init__(self, cache_enabled: Optional[bool] = None):
        """Initialize YAML parser.

        Args:
            cache_enabled: Whether to enable caching. If None, uses global config.
        """
        self.cache_enabled = cache_enabled if cache_enabled is not None else mongozen_config.cache_enabled
        self._cache: Dict[Path, Tuple[Any, SourceMap]] = {}

    @staticmethod
    def build_source_map(content: str) -> SourceMap:
        """Build a mapping from JSON-pointer paths to 1-based line/column.

        This uses PyYAML's node tree (yaml.compose) so locations can be tracked
        without changing the data shapes returned by safe_load.
        """
        source_map: SourceMap = {}

        try:
            root = yaml.compose(content, Loader=yaml.SafeLoader)
        except yaml.YAMLError:
            # parse errors are reported by safe_load
            return source_map

        if root is None:
            return source_map

        def _walk(node, path: str) -> None:
            mark = node.start_mark
            # PyYAML marks are 0-based
            source_map[path] = {"line": mark.line + 1, "column": mark.column + 1}

            if isinstance(node, yaml.nodes.MappingNode):
                for key_node, value_node in node.value:
                    key = getattr(key_node, "value", None)
                    if key is None:
                        continue
                    _walk(value_node, f"{path}/{json_pointer_escape(str(key))}")
            elif isinstance(node, yaml.nodes.SequenceNode):
                for idx, item_node in enumerate(node.value):
                    _walk(item_node, f"{path}/{idx}")

        _walk(root, "")
        return source_map

    def load_file_with_source(self, file_path: Union[str, Path]) -> Tuple[Any, SourceMap]:
        """Load a YAML (or JSON) file and return (data, source_map).

        Raises:
            DeclarationFileError: If the file is missing or cannot be parsed.
        """
        path = Path(file_path)

        if not path.exists():
            raise DeclarationFileError(f"File not found: {path}")

        if not path.is_file():
            raise DeclarationFileError(f"Path is not a file: {path}")

        if self.cache_enabled and path in self._cache:
            logger.debug("Loading %s from cache", path)
            return self._cache[path]

        logger.debug("Loading file: %s", path)
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise DeclarationFileError(f"Failed to read file {path}: {exc}") from exc

        data, source_map = self._parse(content, origin=str(path))

        if self.cache_enabled:
            self._cache[path] = (data, source_map)

        return data, source_map

    def load_file(self, file_path: Union[str, Path]) -> Any:
        """Load a YAML (or JSON) file, returning the parsed content."""
        data, _ = self.load_file_with_source(file_path)
        return data

    def load_string_with_source(self, content: str) -> Tuple[Any, SourceMap]:
        """Load YAML content from a string and return (data, source_map)."""
        return self._parse(content, origin="<string>")

    def load_string(self, content: str) -> Any:
        data, _ = self._parse(content, origin="<string>")
        return data

    def _parse(self, content: str, origin: str) -> Tuple[Any, SourceMap]:
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise DeclarationFileError(f"Failed to parse YAML in {origin}: {exc}") from exc

        if data is None:
            data = {}

        return data, self.build_source_map(content)

    def clear_cache(self) -> None:
        """Clear the file cache."""
        self._cache.clear()
        logger.debug("YAML cache cleared")


# Global parser instance
yaml_parser = YamlParser()
