#!/usr/bin/env python3
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

"""CLI entry point for checking document files against a schema declaration."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..config import MongoZenConfig, mongozen_config
from ..exceptions import DeclarationFileError, SchemaDefinitionError
from ..schema.declaration_loader import load_schema_file
from . import lint_documents, LintResult

logger = logging.getLogger(__name__)

DOCUMENT_EXTENSIONS = ('.yaml', '.yml', '.json')


def find_document_files(paths: List[str], exclude: Optional[Path] = None) -> List[Path]:
    """Find all YAML/JSON document files in given paths."""
    document_files = []
    excluded = exclude.resolve() if exclude is not None else None

    for path_str in paths:
        path = Path(path_str)

        if not path.exists():
            logger.warning("Path does not exist: %s", path)
            continue

        if path.is_file():
            if path.suffix in DOCUMENT_EXTENSIONS:
                document_files.append(path)
            else:
                logger.warning("File is not a YAML or JSON file: %s", path)
        elif path.is_dir():
            for ext in DOCUMENT_EXTENSIONS:
                document_files.extend(path.rglob(f'*{ext}'))
        else:
            logger.warning("Path is neither file nor directory: %s", path)

    return sorted({f for f in document_files if excluded is None or f.resolve() != excluded})


def _location(entry: dict) -> str:
    parts = []
    if 'document' in entry:
        parts.append(f"[{entry['document']}]")
    if 'line' in entry:
        parts.append(f":{entry['line']}")
    return "".join(parts)


def print_results(results: List[LintResult], output_format: str) -> None:
    if output_format == 'json':
        output = {
            'files': len(results),
            'documents': sum(r.documents for r in results),
            'errors': sum(len(r.errors) for r in results),
            'warnings': sum(len(r.warnings) for r in results),
            'results': [r.to_dict() for r in results],
        }
        print(json.dumps(output, indent=2))
    elif output_format == 'github-actions':
        for result in results:
            for error in result.errors:
                print(f"::error file={result.file_path},line={error.get('line', 1)}::{error['message']}")
            for warning in result.warnings:
                print(f"::warning file={result.file_path},line={warning.get('line', 1)}::{warning['message']}")
    else:  # human-readable
        for result in results:
            if result.errors or result.warnings:
                print(f"\n{result.file_path}:")
                for error in result.errors:
                    print(f"  ERROR{_location(error)}: {error['message']}")
                for warning in result.warnings:
                    print(f"  WARNING{_location(warning)}: {warning['message']}")


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the document linter CLI."""
    parser = argparse.ArgumentParser(
        description='Validate YAML/JSON documents against a mongozen schema declaration',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        'paths',
        nargs='*',
        default=None,
        help='Document files or directories to check (default: current directory)',
    )
    parser.add_argument(
        '--schema',
        required=True,
        help='Schema declaration file (YAML or JSON)',
    )
    parser.add_argument(
        '--no-defaults',
        action='store_true',
        help='Validate documents as written, without applying declared defaults',
    )
    parser.add_argument(
        '--format',
        choices=['human', 'json', 'github-actions'],
        default='human',
        help='Output format (default: human)',
    )
    parser.add_argument(
        '--log-level',
        default=mongozen_config.log_level,
        help='Log level: error, warn, info or debug (default: %(default)s)',
    )

    args = parser.parse_args(argv)

    MongoZenConfig(
        log_level=args.log_level,
        print_level=mongozen_config.print_level,
        cache_enabled=mongozen_config.cache_enabled,
    ).set_logging()

    if not args.paths:
        args.paths = ['.']

    try:
        schema = load_schema_file(args.schema)
    except (DeclarationFileError, SchemaDefinitionError) as e:
        logger.error("Failed to load schema: %s", e)
        sys.exit(1)

    document_files = find_document_files(args.paths, exclude=Path(args.schema))

    if not document_files:
        logger.error("No document files found.")
        sys.exit(1)

    results = lint_documents(schema, document_files, apply_defaults=not args.no_defaults)
    print_results(results, args.format)

    # Exit with error code if any errors found
    total_errors = sum(len(r.errors) for r in results)
    if total_errors > 0:
        sys.exit(1)
    if args.format == 'human':
        print("All documents are valid.")
    sys.exit(0)


if __name__ == '__main__':
    main()
