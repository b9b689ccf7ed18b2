# Copyright 2026 rdlkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Fluent builders for the eight type descriptor variants.

Each builder is created from a supertype name and the new type's name,
configured through chained calls, and finished with ``build()``. Referenced
type names are stored verbatim; they are checked only when the schema is
finalized.
"""

from __future__ import annotations

from typing import Any, get_args

from rdlkit.builder.base import Builder
from rdlkit.model.types import (
    AliasTypeDef,
    ArrayTypeDef,
    EnumElementDef,
    EnumTypeDef,
    MapTypeDef,
    NumberKind,
    NumberTypeDef,
    StringTypeDef,
    StructFieldDef,
    StructTypeDef,
    UnionTypeDef,
    make_number,
)

# ###############
# Public Interface
# ###############


class AliasTypeBuilder(Builder):
    """Builds an :class:`AliasTypeDef`."""

    def __init__(self, supertype: str, name: str) -> None:
        super().__init__(type=supertype, name=name)

    def build(self) -> AliasTypeDef:
        return AliasTypeDef(**self._consume())


class StringTypeBuilder(Builder):
    """Builds a :class:`StringTypeDef`.

    A builder left without a pattern, size bounds, or allowed values
    produces an :class:`AliasTypeDef` instead, since it adds no constraint
    to its supertype.
    """

    def __init__(self, supertype: str, name: str) -> None:
        super().__init__(type=supertype, name=name)

    def pattern(self, pattern: str) -> StringTypeBuilder:
        return self._set("pattern", pattern)

    def min_size(self, min_size: int) -> StringTypeBuilder:
        return self._set("min_size", min_size)

    def max_size(self, max_size: int) -> StringTypeBuilder:
        return self._set("max_size", max_size)

    def value(self, value: str) -> StringTypeBuilder:
        """Add an allowed value."""
        return self._append("values", value)

    def build(self) -> StringTypeDef | AliasTypeDef:
        proto = self._consume()
        # An empty pattern matches anything and counts as no pattern.
        if not proto.get("pattern"):
            proto.pop("pattern", None)
        if not any(key in proto for key in ("pattern", "min_size", "max_size", "values")):
            return AliasTypeDef(**proto)
        return StringTypeDef(**proto)


class NumberTypeBuilder(Builder):
    """Builds a :class:`NumberTypeDef`.

    Bounds take the width of the supertype when it is a numeric base type
    (``Int8`` bounds for an ``Int8``-based type); otherwise the width is
    inferred from the Python value unless *kind* is given.
    """

    def __init__(self, supertype: str, name: str) -> None:
        super().__init__(type=supertype, name=name)
        self._default_kind: NumberKind | None = supertype if supertype in _NUMBER_KINDS else None

    def min(self, value: int | float, kind: NumberKind | None = None) -> NumberTypeBuilder:
        return self._set("min", make_number(value, kind or self._default_kind))

    def max(self, value: int | float, kind: NumberKind | None = None) -> NumberTypeBuilder:
        return self._set("max", make_number(value, kind or self._default_kind))

    def build(self) -> NumberTypeDef:
        return NumberTypeDef(**self._consume())


class StructTypeBuilder(Builder):
    """Builds a :class:`StructTypeDef` from an ordered list of fields."""

    def __init__(self, supertype: str, name: str) -> None:
        super().__init__(type=supertype, name=name)

    def field(
        self,
        name: str,
        type_name: str,
        *,
        optional: bool = False,
        default: Any = None,
        comment: str | None = None,
    ) -> StructTypeBuilder:
        f = StructFieldDef(name=name, type=type_name, optional=optional, default=default, comment=comment)
        return self._append("fields", f)

    def array_field(
        self,
        name: str,
        items: str,
        *,
        optional: bool = False,
        comment: str | None = None,
    ) -> StructTypeBuilder:
        """Add a field holding an inline ``Array<items>``."""
        f = StructFieldDef(name=name, type="Array", items=items, optional=optional, comment=comment)
        return self._append("fields", f)

    def map_field(
        self,
        name: str,
        keys: str,
        items: str,
        *,
        optional: bool = False,
        comment: str | None = None,
    ) -> StructTypeBuilder:
        """Add a field holding an inline ``Map<keys, items>``."""
        f = StructFieldDef(name=name, type="Map", keys=keys, items=items, optional=optional, comment=comment)
        return self._append("fields", f)

    def closed(self, closed: bool = True) -> StructTypeBuilder:
        """Mark the struct as rejecting fields it does not declare."""
        return self._set("closed", closed)

    def build(self) -> StructTypeDef:
        return StructTypeDef(**self._consume())


class ArrayTypeBuilder(Builder):
    """Builds an :class:`ArrayTypeDef`."""

    def __init__(self, supertype: str, name: str) -> None:
        super().__init__(type=supertype, name=name)

    def items(self, items: str) -> ArrayTypeBuilder:
        return self._set("items", items)

    def size(self, size: int) -> ArrayTypeBuilder:
        return self._set("size", size)

    def min_size(self, min_size: int) -> ArrayTypeBuilder:
        return self._set("min_size", min_size)

    def max_size(self, max_size: int) -> ArrayTypeBuilder:
        return self._set("max_size", max_size)

    def build(self) -> ArrayTypeDef:
        return ArrayTypeDef(**self._consume())


class MapTypeBuilder(Builder):
    """Builds a :class:`MapTypeDef`."""

    def __init__(self, supertype: str, name: str) -> None:
        super().__init__(type=supertype, name=name)

    def keys(self, keys: str) -> MapTypeBuilder:
        return self._set("keys", keys)

    def items(self, items: str) -> MapTypeBuilder:
        return self._set("items", items)

    def size(self, size: int) -> MapTypeBuilder:
        return self._set("size", size)

    def min_size(self, min_size: int) -> MapTypeBuilder:
        return self._set("min_size", min_size)

    def max_size(self, max_size: int) -> MapTypeBuilder:
        return self._set("max_size", max_size)

    def build(self) -> MapTypeDef:
        return MapTypeDef(**self._consume())


class EnumTypeBuilder(Builder):
    """Builds an :class:`EnumTypeDef`."""

    def __init__(self, supertype: str, name: str) -> None:
        super().__init__(type=supertype, name=name)

    def element(self, symbol: str, comment: str | None = None) -> EnumTypeBuilder:
        return self._append("elements", EnumElementDef(symbol=symbol, comment=comment))

    def build(self) -> EnumTypeDef:
        return EnumTypeDef(**self._consume())


class UnionTypeBuilder(Builder):
    """Builds a :class:`UnionTypeDef`."""

    def __init__(self, supertype: str, name: str) -> None:
        super().__init__(type=supertype, name=name)

    def variant(self, variant: str) -> UnionTypeBuilder:
        return self._append("variants", variant)

    def build(self) -> UnionTypeDef:
        return UnionTypeDef(**self._consume())


# ################
# Implementation
# ################

_NUMBER_KINDS: frozenset[str] = frozenset(get_args(NumberKind))
