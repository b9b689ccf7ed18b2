# Copyright 2026 rdlkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema header configuration files."""

from rdlkit.config.schema_config import (
    SchemaConfig,
    SchemaConfigError,
    load_schema_config,
    parse_schema_config,
)

__all__ = [
    "SchemaConfig",
    "SchemaConfigError",
    "load_schema_config",
    "parse_schema_config",
]
