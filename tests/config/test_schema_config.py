# Copyright 2026 rdlkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the schema configuration module."""

from pathlib import Path

import pytest

from rdlkit.builder import SchemaBuilder
from rdlkit.config import (
    SchemaConfig,
    SchemaConfigError,
    load_schema_config,
    parse_schema_config,
)

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a schema config file and return its path."""
    config_file = tmp_path / "schema.yaml"
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_minimal_config(tmp_path: Path) -> None:
    """A config with only a name leaves every other header field unset."""
    config = load_schema_config(_write_config(tmp_path, "name: contacts\n"))

    assert config == SchemaConfig(name="contacts")


def test_full_config(tmp_path: Path) -> None:
    content = """\
name: contacts
namespace: com.example
version: 3
base: /api/v3
comment: Contact book service.
"""
    config = load_schema_config(_write_config(tmp_path, content))

    assert config.name == "contacts"
    assert config.namespace == "com.example"
    assert config.version == 3
    assert config.base == "/api/v3"
    assert config.comment == "Contact book service."


def test_null_optional_values_are_unset() -> None:
    config = parse_schema_config("name: contacts\nnamespace:\n")
    assert config.namespace is None


def test_loaded_config_applies_to_builder(tmp_path: Path) -> None:
    config = load_schema_config(_write_config(tmp_path, "name: geo\nversion: 1\nbase: /geo\n"))
    schema = SchemaBuilder.from_config(config).build()

    assert schema.name == "geo"
    assert schema.version == 1
    assert schema.base == "/geo"


# ###############
# Error Cases
# ###############


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SchemaConfigError, match="not found"):
        load_schema_config(tmp_path / "absent.yaml")


def test_invalid_yaml() -> None:
    with pytest.raises(SchemaConfigError, match="Invalid YAML"):
        parse_schema_config("name: [unclosed\n")


def test_not_a_mapping() -> None:
    with pytest.raises(SchemaConfigError, match="must be a YAML mapping"):
        parse_schema_config("- name\n")


def test_missing_name() -> None:
    with pytest.raises(SchemaConfigError, match="missing required field 'name'"):
        parse_schema_config("version: 1\n")


def test_unknown_key() -> None:
    with pytest.raises(SchemaConfigError, match="unknown key"):
        parse_schema_config("name: contacts\nowner: me\n")


def test_version_must_be_integer() -> None:
    with pytest.raises(SchemaConfigError, match="'version' must be an integer"):
        parse_schema_config("name: contacts\nversion: two\n")


def test_version_rejects_boolean() -> None:
    with pytest.raises(SchemaConfigError, match="'version' must be an integer"):
        parse_schema_config("name: contacts\nversion: true\n")


def test_name_must_be_string() -> None:
    with pytest.raises(SchemaConfigError, match="'name' must be a string"):
        parse_schema_config("name: 42\n")


def test_error_message_includes_source_label(tmp_path: Path) -> None:
    path = _write_config(tmp_path, "version: 1\n")
    with pytest.raises(SchemaConfigError, match="schema.yaml"):
        load_schema_config(path)
