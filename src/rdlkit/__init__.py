# Copyright 2026 rdlkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""rdlkit: build RDL schema documents with dependency-ordered types."""

from loguru import logger

from rdlkit.analysis import (
    DanglingReferenceError,
    DuplicateTypeNameError,
    ReferenceCycleError,
    SchemaBuildError,
    resolve_types,
)
from rdlkit.builder import (
    AliasTypeBuilder,
    ArrayTypeBuilder,
    BuilderConsumedError,
    EnumTypeBuilder,
    MapTypeBuilder,
    NumberTypeBuilder,
    ResourceBuilder,
    SchemaBuilder,
    StringTypeBuilder,
    StructTypeBuilder,
    UnionTypeBuilder,
)
from rdlkit.model import BaseType, Resource, Schema, Type, is_base_type

# Library code stays silent until an application calls logger.enable("rdlkit").
logger.disable("rdlkit")

__all__ = [
    "BaseType",
    "is_base_type",
    "Type",
    "Resource",
    "Schema",
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
    "BuilderConsumedError",
    "resolve_types",
    "SchemaBuildError",
    "DanglingReferenceError",
    "DuplicateTypeNameError",
    "ReferenceCycleError",
]
