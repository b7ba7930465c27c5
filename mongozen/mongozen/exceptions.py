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

"""Custom exceptions for the mongozen schema engine."""


class MongoZenError(Exception):
    """Base exception for mongozen related errors."""
    pass


class SchemaDefinitionError(MongoZenError):
    """Exception raised when a schema declaration is malformed."""
    pass


class DocumentValidationError(MongoZenError):
    """Exception raised when a document is refused because it failed validation."""

    def __init__(self, message, issues=None):
        super().__init__(message)
        self.issues = list(issues or [])


class DeclarationFileError(MongoZenError):
    """Exception raised when a declaration or document file cannot be loaded."""

    def __init__(self, message, issues=None):
        super().__init__(message)
        self.issues = list(issues or [])
