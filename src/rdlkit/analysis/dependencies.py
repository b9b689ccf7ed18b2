# Copyright 2026 rdlkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Dependency ordering for declared schema types.

A type depends on its supertype (when that is not a base type) and on every
type its variant contains: array items, map items and keys, struct field
types including inline array/map element types, and union variants. The
resolver emits the declared types so that each one follows everything it
depends on, each exactly once.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from loguru import logger

from rdlkit.model.types import (
    BASE_TYPE_NAMES,
    ArrayTypeDef,
    MapTypeDef,
    StructTypeDef,
    Type,
    UnionTypeDef,
    is_base_type,
)

# ###############
# Public Interface
# ###############


class SchemaBuildError(Exception):
    """Raised when a schema cannot be finalized."""


class DanglingReferenceError(SchemaBuildError):
    """A type refers to a name that is neither a base type nor declared.

    Attributes:
        reference: The unresolvable type name.
        referrer: The declared type holding the reference.
    """

    def __init__(self, reference: str, referrer: str) -> None:
        super().__init__(f"Type '{referrer}' references undefined type '{reference}'")
        self.reference = reference
        self.referrer = referrer


class DuplicateTypeNameError(SchemaBuildError):
    """Two declared types share a name, or a declared type reuses a base type name."""

    def __init__(self, name: str, *, shadows_base: bool = False) -> None:
        if shadows_base:
            message = f"Type name '{name}' is reserved for a base type"
        else:
            message = f"Duplicate type name '{name}'"
        super().__init__(message)
        self.name = name


class ReferenceCycleError(SchemaBuildError):
    """Declared types depend on each other in a cycle.

    Attributes:
        cycle: The type names along the cycle, starting and ending with the
            same name.
    """

    def __init__(self, cycle: list[str]) -> None:
        super().__init__(f"Reference cycle between types: {' -> '.join(cycle)}")
        self.cycle = cycle


def type_dependencies(t: Type) -> list[str]:
    """Return the type names *t* depends on, in resolution order.

    Base type names are included; callers skip them as needed.
    """
    deps: list[str] = []
    if not is_base_type(t.type):
        deps.append(t.type)
    if isinstance(t, ArrayTypeDef):
        deps.append(t.items)
    elif isinstance(t, MapTypeDef):
        deps.extend((t.items, t.keys))
    elif isinstance(t, StructTypeDef):
        for f in t.fields:
            deps.append(f.type)
            if f.items is not None:
                deps.append(f.items)
            if f.keys is not None:
                deps.append(f.keys)
    elif isinstance(t, UnionTypeDef):
        deps.extend(t.variants)
    return deps


def resolve_types(types: Sequence[Type]) -> tuple[Type, ...]:
    """Order declared types so that dependencies come first.

    Types are visited in declaration order; a type's dependencies are
    emitted depth-first before the type itself. Input that is already in a
    valid order is returned unchanged.

    Args:
        types: The declared types, in append order.

    Returns:
        The same types as a topologically ordered tuple.

    Raises:
        DuplicateTypeNameError: If two types share a name or a type uses a
            base type name.
        DanglingReferenceError: If a reference names an undeclared type.
        ReferenceCycleError: If types depend on each other cyclically.
    """
    return _DependencyResolver(types).resolve()


# ################
# Implementation
# ################


class _DependencyResolver:
    """Depth-first topological sort over a name-keyed type table."""

    def __init__(self, types: Sequence[Type]) -> None:
        self._types = types
        self._all: dict[str, Type] = {}
        for t in types:
            if is_base_type(t.name):
                raise DuplicateTypeNameError(t.name, shadows_base=True)
            if t.name in self._all:
                raise DuplicateTypeNameError(t.name)
            self._all[t.name] = t
        self._resolved: set[str] = set(BASE_TYPE_NAMES)
        # Names on the current descent path, in order.
        self._visiting: list[str] = []
        self._on_path: set[str] = set()
        self._ordered: list[Type] = []

    def resolve(self) -> tuple[Type, ...]:
        for t in self._types:
            self._resolve(t.name)
        return tuple(self._ordered)

    def _resolve(self, root: str) -> None:
        """Emit *root* after everything it depends on.

        Iterative depth-first walk: each stack frame pairs a type name with
        an iterator over its remaining dependencies, so ``self._visiting``
        always mirrors the stack.
        """
        if root in self._resolved:
            return
        self._enter(root)
        stack: list[tuple[str, Iterator[str]]] = [(root, iter(type_dependencies(self._all[root])))]
        while stack:
            name, deps = stack[-1]
            ref = next(deps, None)
            if ref is None:
                stack.pop()
                self._leave(name)
                continue
            if ref in self._resolved:
                continue
            if ref not in self._all:
                raise DanglingReferenceError(ref, name)
            self._enter(ref)
            stack.append((ref, iter(type_dependencies(self._all[ref]))))

    def _enter(self, name: str) -> None:
        if name in self._on_path:
            start = self._visiting.index(name)
            raise ReferenceCycleError(self._visiting[start:] + [name])
        self._visiting.append(name)
        self._on_path.add(name)

    def _leave(self, name: str) -> None:
        self._visiting.pop()
        self._on_path.discard(name)
        t = self._all[name]
        self._resolved.add(name)
        self._ordered.append(t)
        logger.debug("Resolved type '{}' (supertype '{}')", name, t.type)
