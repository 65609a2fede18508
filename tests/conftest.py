"""
Global pytest configuration and fixtures.
"""

import logging

import pytest


@pytest.fixture(autouse=True)
def isolate_config(monkeypatch, tmp_path):
    """Keep every test away from the real ~/.schemacheck/config.yml.

    HOME points at an empty temporary directory and the environment
    overrides are cleared, so settings always start from their defaults.
    """
    monkeypatch.delenv("SCHEMACHECK_CONFIG", raising=False)
    monkeypatch.delenv("SCHEMACHECK_DEBUG", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


@pytest.fixture(autouse=True)
def restore_logging():
    """CLI commands reconfigure the root logger; undo that after each test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture
def user_schema():
    """Object schema exercising every constraint kind."""
    return {
        "type": "object",
        "required": ["email", "name"],
        "properties": {
            "email": {"type": "string", "format": "email"},
            "name": {"type": "string", "minLength": 2, "maxLength": 50},
            "age": {"type": "integer", "minimum": 0, "maximum": 150},
            "ssn": {"type": "string", "pattern": r"^\d{3}-\d{2}-\d{4}$"},
            "status": {"type": "string", "enum": ["active", "inactive"]},
            "tags": {"type": "array", "items": {"type": "string"}, "maxItems": 3},
            "phone": {
                "type": "string",
                "description": "Contact phone number, recommended for notifications",
            },
        },
    }
