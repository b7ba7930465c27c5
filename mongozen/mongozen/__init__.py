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

"""Schema-driven document validation and default application for document stores."""

__version__ = "0.1.1"

from .exceptions import (
    DeclarationFileError,
    DocumentValidationError,
    MongoZenError,
    SchemaDefinitionError,
)
from .model import Model
from .schema import Schema, ValidationIssue, ValidationResult
from .schema.declaration_loader import load_schema_file, load_schema_string

__all__ = [
    "DeclarationFileError",
    "DocumentValidationError",
    "Model",
    "MongoZenError",
    "Schema",
    "SchemaDefinitionError",
    "ValidationIssue",
    "ValidationResult",
    "load_schema_file",
    "load_schema_string",
]
