# Copyright 2026 rdlkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for schema header configuration files.

A generator can keep a schema's name, namespace, version, base path, and
comment in a small YAML file next to its type definitions::

    name: contacts
    namespace: com.example
    version: 3
    base: /api/v3
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############


class SchemaConfigError(Exception):
    """Raised when a schema configuration file is invalid or cannot be loaded."""


@dataclass(frozen=True)
class SchemaConfig:
    """Header settings applied to a new schema builder.

    Attributes:
        name: The schema name.
        namespace: Optional dotted namespace.
        version: Optional schema version.
        base: Optional base path shared by all resources.
        comment: Optional schema comment.
    """

    name: str
    namespace: str | None = None
    version: int | None = None
    base: str | None = None
    comment: str | None = None


def load_schema_config(path: Path) -> SchemaConfig:
    """Load and parse a schema configuration file.

    Args:
        path: Path to the YAML file.

    Returns:
        A SchemaConfig populated from the file.

    Raises:
        SchemaConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise SchemaConfigError(f"Schema config file not found: {path}") from None
    except OSError as exc:
        raise SchemaConfigError(f"Cannot read schema config file: {exc}") from exc

    return parse_schema_config(text, source_label=str(path))


def parse_schema_config(text: str, source_label: str = "<string>") -> SchemaConfig:
    """Parse schema config YAML text into a SchemaConfig.

    Raises:
        SchemaConfigError: If the YAML is invalid, a required key is missing,
            a value has the wrong type, or an unknown key is present.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SchemaConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if not isinstance(data, dict):
        raise SchemaConfigError(f"{source_label}: schema config must be a YAML mapping")

    unknown = sorted(str(key) for key in data if key not in _KNOWN_KEYS)
    if unknown:
        raise SchemaConfigError(f"{source_label}: unknown key(s): {', '.join(unknown)}")

    if "name" not in data:
        raise SchemaConfigError(f"{source_label}: missing required field 'name'")

    return SchemaConfig(
        name=_string(data, "name", source_label),
        namespace=_optional_string(data, "namespace", source_label),
        version=_optional_int(data, "version", source_label),
        base=_optional_string(data, "base", source_label),
        comment=_optional_string(data, "comment", source_label),
    )


# ################
# Implementation
# ################

_KNOWN_KEYS = frozenset({"name", "namespace", "version", "base", "comment"})


def _string(mapping: dict[str, object], key: str, source_label: str) -> str:
    value = mapping[key]
    if not isinstance(value, str):
        raise SchemaConfigError(f"{source_label}: '{key}' must be a string")
    return value


def _optional_string(mapping: dict[str, object], key: str, source_label: str) -> str | None:
    if mapping.get(key) is None:
        return None
    return _string(mapping, key, source_label)


def _optional_int(mapping: dict[str, object], key: str, source_label: str) -> int | None:
    value = mapping.get(key)
    if value is None:
        return None
    # YAML booleans are ints in Python; reject them explicitly.
    if isinstance(value, bool) or not isinstance(value, int):
        raise SchemaConfigError(f"{source_label}: '{key}' must be an integer")
    return value
