"""Shared pytest fixtures for the mongozen test suite."""

import logging
from datetime import datetime

import pytest

from mongozen.schema import Schema


@pytest.fixture
def user_schema():
    return Schema({
        "name": {"type": str, "required": True},
        "age": {"type": int, "min": 18, "max": 100},
        "email": {"type": str, "match": r"^[^\s@]+@[^\s@]+\.[^\s@]+$"},
        "is_active": bool,
        "tags": [str],
        "metadata": dict,
        "created_at": {"type": datetime, "default": datetime.now},
    })


@pytest.fixture
def valid_user():
    return {
        "name": "John Doe",
        "age": 30,
        "email": "john@example.com",
        "is_active": True,
        "tags": ["user", "admin"],
        "metadata": {"role": "admin"},
    }


@pytest.fixture
def restore_root_logging():
    """Drop root handlers installed by CLI entry points and restore the root level."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def write_file(tmp_path):
    def _write(name, content):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path
    return _write
