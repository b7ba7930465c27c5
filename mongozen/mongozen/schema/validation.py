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

"""Document validation against a canonical schema tree.

Every violation is collected; nothing is raised for a non-conforming document.
Within one field the checks run in a fixed order and a failed type check ends
that field's chain. Sibling fields are always checked.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .definition import FieldSpec, SchemaNode, SchemaTree, join_field_path
from .types import MIXED, check_type


@dataclass(frozen=True)
class ValidationIssue:
    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass
class ValidationResult:
    errors: List[ValidationIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def __bool__(self) -> bool:
        return self.is_valid

    def messages(self) -> List[str]:
        return [issue.message for issue in self.errors]

    def format(self, delimiter: str = ", ") -> str:
        return delimiter.join(self.messages())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "errors": [issue.to_dict() for issue in self.errors],
        }


def validate_document(tree: SchemaTree, document: Any) -> ValidationResult:
    """Validate ``document`` against ``tree`` and collect every violation."""
    if not isinstance(document, Mapping):
        return ValidationResult([ValidationIssue(field="", message="Document must be an object")])

    issues: List[ValidationIssue] = []
    _validate_tree(tree, document, "", issues)
    return ValidationResult(issues)


def _is_missing(value: Any) -> bool:
    return value is None


def _validate_tree(tree: SchemaTree, document: Mapping, path: str, issues: List[ValidationIssue]) -> None:
    for name, node in tree.items():
        _validate_node(node, document.get(name), join_field_path(path, name), issues)


def _validate_node(node: SchemaNode, value: Any, path: str, issues: List[ValidationIssue]) -> None:
    if isinstance(node, FieldSpec):
        _validate_leaf(node, value, path, issues)
        return

    if _is_missing(value):
        _report_missing_required(node, path, issues)
        return
    if not isinstance(value, Mapping):
        issues.append(ValidationIssue(field=path, message=f"{path} must be an object"))
        return
    _validate_tree(node, value, path, issues)


def _report_missing_required(tree: SchemaTree, path: str, issues: List[ValidationIssue]) -> None:
    for name, node in tree.items():
        child_path = join_field_path(path, name)
        if isinstance(node, FieldSpec):
            if node.required:
                issues.append(ValidationIssue(field=child_path, message=f"{child_path} is required"))
        else:
            _report_missing_required(node, child_path, issues)


def _validate_leaf(spec: FieldSpec, value: Any, path: str, issues: List[ValidationIssue]) -> None:
    if _is_missing(value):
        if spec.required:
            issues.append(ValidationIssue(field=path, message=f"{path} is required"))
        return

    if spec.type_name != MIXED and not check_type(spec.type_name, value):
        issues.append(ValidationIssue(field=path, message=f"{path} must be of type {spec.type_name}"))
        return

    if spec.enum is not None and value not in spec.enum:
        allowed = ", ".join(str(option) for option in spec.enum)
        issues.append(ValidationIssue(field=path, message=f"{path} must be one of: {allowed}"))

    if spec.type_name == "String":
        _check_string(spec, value, path, issues)
    elif spec.type_name == "Number":
        _check_number(spec, value, path, issues)
    elif spec.type_name == "Array" and spec.items is not None:
        for index, element in enumerate(value):
            _validate_node(spec.items, element, join_field_path(path, index), issues)

    if spec.validate is not None:
        _run_custom_validator(spec, value, path, issues)


def _check_string(spec: FieldSpec, value: str, path: str, issues: List[ValidationIssue]) -> None:
    if spec.min_length is not None and len(value) < spec.min_length:
        issues.append(
            ValidationIssue(field=path, message=f"{path} must be at least {spec.min_length} characters long")
        )
    if spec.max_length is not None and len(value) > spec.max_length:
        issues.append(
            ValidationIssue(field=path, message=f"{path} must be at most {spec.max_length} characters long")
        )
    if spec.pattern is not None and not spec.pattern.search(value):
        issues.append(
            ValidationIssue(field=path, message=f"{path} does not match pattern {spec.pattern.pattern}")
        )


def _check_number(spec: FieldSpec, value: float, path: str, issues: List[ValidationIssue]) -> None:
    if spec.min is not None and value < spec.min:
        issues.append(ValidationIssue(field=path, message=f"{path} must be at least {spec.min}"))
    if spec.max is not None and value > spec.max:
        issues.append(ValidationIssue(field=path, message=f"{path} must be at most {spec.max}"))


def _run_custom_validator(spec: FieldSpec, value: Any, path: str, issues: List[ValidationIssue]) -> None:
    try:
        passed = spec.validate(value)
    except Exception as exc:
        issues.append(ValidationIssue(field=path, message=str(exc) or type(exc).__name__))
        return
    if not passed:
        issues.append(
            ValidationIssue(field=path, message=spec.message or f"Field '{path}' failed custom validation")
        )
