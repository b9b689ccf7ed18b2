# Copyright 2026 rdlkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Fluent builders for types, resources, and schemas."""

from rdlkit.builder.base import Builder, BuilderConsumedError
from rdlkit.builder.resource import ResourceBuilder
from rdlkit.builder.schema import SchemaBuilder
from rdlkit.builder.types import (
    AliasTypeBuilder,
    ArrayTypeBuilder,
    EnumTypeBuilder,
    MapTypeBuilder,
    NumberTypeBuilder,
    StringTypeBuilder,
    StructTypeBuilder,
    UnionTypeBuilder,
)

__all__ = [
    "Builder",
    "BuilderConsumedError",
    "AliasTypeBuilder",
    "StringTypeBuilder",
    "NumberTypeBuilder",
    "StructTypeBuilder",
    "ArrayTypeBuilder",
    "MapTypeBuilder",
    "EnumTypeBuilder",
    "UnionTypeBuilder",
    "ResourceBuilder",
    "SchemaBuilder",
]
