# Copyright 2026 rdlkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema model for RDL (types, resources, and the schema document)."""

from rdlkit.model.entities import (
    ExceptionDef,
    Resource,
    ResourceAuth,
    ResourceInput,
    ResourceOutput,
    Schema,
)
from rdlkit.model.types import (
    BASE_TYPE_NAMES,
    AliasTypeDef,
    ArrayTypeDef,
    BaseType,
    EnumElementDef,
    EnumTypeDef,
    MapTypeDef,
    Number,
    NumberKind,
    NumberTypeDef,
    StringTypeDef,
    StructFieldDef,
    StructTypeDef,
    Type,
    UnionTypeDef,
    is_base_type,
    make_number,
    type_info,
)

__all__ = [
    # Type system
    "BaseType",
    "BASE_TYPE_NAMES",
    "is_base_type",
    "Number",
    "NumberKind",
    "make_number",
    "AliasTypeDef",
    "StringTypeDef",
    "NumberTypeDef",
    "StructFieldDef",
    "StructTypeDef",
    "ArrayTypeDef",
    "MapTypeDef",
    "EnumElementDef",
    "EnumTypeDef",
    "UnionTypeDef",
    "Type",
    "type_info",
    # Entities
    "ResourceInput",
    "ResourceOutput",
    "ResourceAuth",
    "ExceptionDef",
    "Resource",
    "Schema",
]
