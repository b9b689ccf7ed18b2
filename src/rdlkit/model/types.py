# Copyright 2026 rdlkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type descriptors for the RDL schema model.

A declared type is one of eight variants, each its own model tagged by a
``kind`` literal. Only the attributes relevant to a variant are
representable on it.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Annotated, Any, Literal

from pydantic import AfterValidator, BaseModel, ConfigDict, PlainSerializer, model_validator
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class BaseType(Enum):
    """Built-in type names. These never require dependency resolution."""

    BOOL = "Bool"
    INT8 = "Int8"
    INT16 = "Int16"
    INT32 = "Int32"
    INT64 = "Int64"
    FLOAT32 = "Float32"
    FLOAT64 = "Float64"
    STRING = "String"
    BYTES = "Bytes"
    TIMESTAMP = "Timestamp"
    SYMBOL = "Symbol"
    UUID = "UUID"
    STRUCT = "Struct"
    ARRAY = "Array"
    MAP = "Map"
    ENUM = "Enum"
    UNION = "Union"
    ANY = "Any"


BASE_TYPE_NAMES: frozenset[str] = frozenset(b.value for b in BaseType)

NumberKind = Literal["Int8", "Int16", "Int32", "Int64", "Float32", "Float64"]


def is_base_type(name: str) -> bool:
    """Return True if *name* is one of the built-in base type names."""
    return name in BASE_TYPE_NAMES


def frozen_mapping(value: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return a read-only copy of *value*."""
    return MappingProxyType(dict(value))


def _mapping_to_dict(value: Mapping[str, Any]) -> dict[str, Any]:
    return dict(value)


# Extension annotations (`x_` keys). Read-only once validated; dumped as a dict.
Annotations = Annotated[Mapping[str, str], AfterValidator(frozen_mapping), PlainSerializer(_mapping_to_dict)]


class Number(BaseModel):
    """A numeric bound tagged with its width and signedness."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: NumberKind
    value: int | float

    @model_validator(mode="after")
    def _check_range(self) -> Number:
        if self.kind in _INT_RANGES:
            if not isinstance(self.value, int):
                raise ValueError(f"{self.kind} bound must be an integer, got {self.value!r}")
            low, high = _INT_RANGES[self.kind]
            if not low <= self.value <= high:
                raise ValueError(f"{self.value} is out of range for {self.kind}")
        return self


def make_number(value: int | float, kind: NumberKind | None = None) -> Number:
    """Build a :class:`Number`, inferring its kind from *value* when not given.

    Integers default to ``Int32`` and widen to ``Int64`` when they do not
    fit; floats default to ``Float64``. Booleans are rejected.
    """
    if isinstance(value, bool):
        raise TypeError("bool is not a numeric bound")
    if kind is None:
        if isinstance(value, int):
            low, high = _INT_RANGES["Int32"]
            kind = "Int32" if low <= value <= high else "Int64"
        elif isinstance(value, float):
            kind = "Float64"
        else:
            raise TypeError(f"unsupported numeric bound: {value!r}")
    return Number(kind=kind, value=value)


class _TypeDefBase(BaseModel):
    """Attributes shared by all type variants."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    type: str
    comment: str | None = None
    annotations: Annotations = _Field(default_factory=dict, validate_default=True)


class AliasTypeDef(_TypeDefBase):
    """A plain renaming of another type."""

    kind: Literal["alias"] = "alias"


class StringTypeDef(_TypeDefBase):
    """A string type restricted by pattern, size bounds, or allowed values."""

    kind: Literal["string"] = "string"
    pattern: str | None = None
    values: tuple[str, ...] | None = None
    min_size: int | None = None
    max_size: int | None = None


class NumberTypeDef(_TypeDefBase):
    """A numeric type with optional inclusive bounds."""

    kind: Literal["number"] = "number"
    min: Number | None = None
    max: Number | None = None


class StructFieldDef(BaseModel):
    """A field of a struct type.

    For inline array and map fields ``type`` is ``Array`` or ``Map`` and the
    element types are carried in ``items`` and ``keys``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    type: str
    optional: bool = False
    default: Any = None
    comment: str | None = None
    items: str | None = None
    keys: str | None = None
    annotations: Annotations = _Field(default_factory=dict, validate_default=True)


class StructTypeDef(_TypeDefBase):
    """A record type with an ordered list of fields."""

    kind: Literal["struct"] = "struct"
    fields: tuple[StructFieldDef, ...] = ()
    closed: bool = False


class ArrayTypeDef(_TypeDefBase):
    """A homogeneous sequence type."""

    kind: Literal["array"] = "array"
    items: str = BaseType.ANY.value
    size: int | None = None
    min_size: int | None = None
    max_size: int | None = None


class MapTypeDef(_TypeDefBase):
    """A keyed collection type."""

    kind: Literal["map"] = "map"
    keys: str = BaseType.STRING.value
    items: str = BaseType.ANY.value
    size: int | None = None
    min_size: int | None = None
    max_size: int | None = None


class EnumElementDef(BaseModel):
    """One symbol of an enumeration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    symbol: str
    comment: str | None = None


class EnumTypeDef(_TypeDefBase):
    """A closed set of symbols."""

    kind: Literal["enum"] = "enum"
    elements: tuple[EnumElementDef, ...] = ()


class UnionTypeDef(_TypeDefBase):
    """A value that is exactly one of several named types."""

    kind: Literal["union"] = "union"
    variants: tuple[str, ...] = ()


# A declared type: one of the eight variants, discriminated by `kind`.
Type = Annotated[
    AliasTypeDef
    | StringTypeDef
    | NumberTypeDef
    | StructTypeDef
    | ArrayTypeDef
    | MapTypeDef
    | EnumTypeDef
    | UnionTypeDef,
    _Field(discriminator="kind"),
]


def type_info(t: Type) -> tuple[str, str, str | None]:
    """Return the ``(name, supertype, comment)`` triple of a declared type."""
    return t.name, t.type, t.comment


# ################
# Implementation
# ################

_INT_RANGES: dict[str, tuple[int, int]] = {
    "Int8": (-(2**7), 2**7 - 1),
    "Int16": (-(2**15), 2**15 - 1),
    "Int32": (-(2**31), 2**31 - 1),
    "Int64": (-(2**63), 2**63 - 1),
}
