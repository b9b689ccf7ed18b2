# Copyright 2026 rdlkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema builder: collects types and resources, then finalizes the schema.

Finalizing runs the dependency resolver over every declared type so the
resulting :class:`~rdlkit.model.entities.Schema` lists each type after all
the types it references. Resources keep the order in which they were added.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from rdlkit.analysis.dependencies import resolve_types
from rdlkit.builder.base import Builder
from rdlkit.model.entities import Resource, Schema
from rdlkit.model.types import Type

if TYPE_CHECKING:
    from rdlkit.config.schema_config import SchemaConfig

# ###############
# Public Interface
# ###############


class SchemaBuilder(Builder):
    """Accumulates a schema's header, types, and resources."""

    def __init__(self, name: str) -> None:
        super().__init__(name=name)
        self._types: list[Type] = []
        self._resources: list[Resource] = []

    @classmethod
    def from_config(cls, config: SchemaConfig) -> SchemaBuilder:
        """Create a builder whose header fields come from *config*."""
        sb = cls(config.name)
        if config.namespace is not None:
            sb.namespace(config.namespace)
        if config.version is not None:
            sb.version(config.version)
        if config.base is not None:
            sb.base(config.base)
        if config.comment is not None:
            sb.comment(config.comment)
        return sb

    def namespace(self, namespace: str) -> SchemaBuilder:
        return self._set("namespace", namespace)

    def version(self, version: int) -> SchemaBuilder:
        return self._set("version", version)

    def base(self, base: str) -> SchemaBuilder:
        """Set the base path shared by all resources."""
        return self._set("base", base)

    def add_type(self, t: Type) -> SchemaBuilder:
        self._check_open()
        self._types.append(t)
        return self

    def add_resource(self, r: Resource) -> SchemaBuilder:
        self._check_open()
        self._resources.append(r)
        return self

    def build(self) -> Schema:
        """Finalize the schema.

        Returns:
            The finished schema with its types in dependency order.

        Raises:
            SchemaBuildError: If a type name is duplicated, a reference is
                dangling, or types reference each other in a cycle. The
                builder is consumed either way.
        """
        header = self._consume()
        types, self._types = self._types, []
        resources, self._resources = self._resources, []
        logger.debug(
            "Finalizing schema '{}' with {} types and {} resources", header["name"], len(types), len(resources)
        )
        ordered = resolve_types(types)
        schema = Schema(**header, types=ordered, resources=tuple(resources))
        logger.debug("Finalized schema '{}'", schema.name)
        return schema
