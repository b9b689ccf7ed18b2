# Copyright 2026 rdlkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Fluent builder for resource (service operation) descriptors."""

from __future__ import annotations

from typing import Any

from loguru import logger

from rdlkit.builder.base import Builder
from rdlkit.model.entities import (
    ExceptionDef,
    Resource,
    ResourceAuth,
    ResourceInput,
    ResourceOutput,
)

# ###############
# Public Interface
# ###############


class ResourceBuilder(Builder):
    """Builds a :class:`Resource` for *method* on *path* over *type_name*.

    The expected outcome defaults to ``OK``.
    """

    def __init__(self, type_name: str, method: str, path: str) -> None:
        super().__init__(type=type_name, method=method, path=path, expected="OK")

    def name(self, name: str) -> ResourceBuilder:
        """Set the resource's display name."""
        return self._set("name", name)

    def input(
        self,
        name: str,
        type_name: str,
        *,
        path_param: bool = False,
        query_param: str | None = None,
        header: str | None = None,
        optional: bool = False,
        default: Any = None,
        comment: str | None = None,
    ) -> ResourceBuilder:
        """Add a request input.

        An input with none of *path_param*, *query_param*, or *header* set
        is the request body. The three are not checked for exclusivity.
        """
        ri = ResourceInput(
            name=name,
            type=type_name,
            path_param=path_param,
            query_param=query_param,
            header=header,
            optional=optional,
            default=default,
            comment=comment,
        )
        return self._append("inputs", ri)

    def output(
        self,
        name: str,
        type_name: str,
        *,
        header: str | None = None,
        optional: bool = False,
        comment: str | None = None,
    ) -> ResourceBuilder:
        ro = ResourceOutput(name=name, type=type_name, header=header, optional=optional, comment=comment)
        return self._append("outputs", ro)

    def auth(
        self,
        action: str | None,
        resource: str | None,
        *,
        authenticate: bool = False,
        domain: str | None = None,
    ) -> ResourceBuilder:
        ra = ResourceAuth(authenticate=authenticate, action=action, resource=resource, domain=domain)
        return self._set("auth", ra)

    def expected(self, symbol: str) -> ResourceBuilder:
        return self._set("expected", symbol)

    def alternative(self, symbol: str) -> ResourceBuilder:
        """Add another successful outcome besides the expected one."""
        return self._append("alternatives", symbol)

    def exception(self, symbol: str, type_name: str, comment: str | None = None) -> ResourceBuilder:
        """Register the error payload for outcome *symbol*.

        A later registration under the same symbol replaces the earlier one.
        """
        self._check_open()
        exceptions: dict[str, ExceptionDef] = self._proto.setdefault("exceptions", {})
        if symbol in exceptions:
            logger.debug(
                "Replacing exception for outcome '{}' on {} {}", symbol, self._proto["method"], self._proto["path"]
            )
        exceptions[symbol] = ExceptionDef(type=type_name, comment=comment)
        return self

    def build(self) -> Resource:
        return Resource(**self._consume())
