# Copyright 2026 rdlkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Resources and the top-level schema document."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, PlainSerializer
from pydantic import Field as _Field

from rdlkit.model.types import Annotations, Type, frozen_mapping

# ###############
# Public Interface
# ###############


class ResourceInput(BaseModel):
    """A request parameter: path parameter, query parameter, header, or body."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    type: str
    path_param: bool = False
    query_param: str | None = None
    header: str | None = None
    optional: bool = False
    default: Any = None
    comment: str | None = None


class ResourceOutput(BaseModel):
    """A response value delivered in a named header."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    type: str
    header: str | None = None
    optional: bool = False
    comment: str | None = None


class ResourceAuth(BaseModel):
    """Authorization requirements of a resource."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    authenticate: bool = False
    action: str | None = None
    resource: str | None = None
    domain: str | None = None


class ExceptionDef(BaseModel):
    """The payload type returned for a non-expected outcome."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: str
    comment: str | None = None


def _exceptions_to_dict(value: Mapping[str, ExceptionDef]) -> dict[str, ExceptionDef]:
    return dict(value)


class Resource(BaseModel):
    """A service operation: method and path template over a target type."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: str
    method: str
    path: str
    name: str | None = None
    comment: str | None = None
    inputs: tuple[ResourceInput, ...] = ()
    outputs: tuple[ResourceOutput, ...] = ()
    auth: ResourceAuth | None = None
    expected: str = "OK"
    alternatives: tuple[str, ...] = ()
    exceptions: Annotated[
        Mapping[str, ExceptionDef], AfterValidator(frozen_mapping), PlainSerializer(_exceptions_to_dict)
    ] = _Field(default_factory=dict, validate_default=True)
    annotations: Annotations = _Field(default_factory=dict, validate_default=True)


class Schema(BaseModel):
    """A finished schema document.

    ``types`` is in dependency order: every declared type referenced by a
    type appears before it. ``resources`` keeps declaration order.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    namespace: str | None = None
    version: int | None = None
    base: str | None = None
    comment: str | None = None
    annotations: Annotations = _Field(default_factory=dict, validate_default=True)
    types: tuple[Type, ...] = ()
    resources: tuple[Resource, ...] = ()

    def find_type(self, name: str) -> Type | None:
        """Return the declared type called *name*, or None."""
        for t in self.types:
            if t.name == name:
                return t
        return None
