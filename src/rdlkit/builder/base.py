# Copyright 2026 rdlkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lifecycle shared by all builders: configure, then build exactly once."""

from __future__ import annotations

from typing import Any, Self

# ###############
# Public Interface
# ###############


class BuilderConsumedError(Exception):
    """Raised when a builder is used after it has produced its result."""


class Builder:
    """Base class for fluent builders with a consuming ``build()``.

    Accumulated settings live in ``self._proto``. Configuration methods go
    through :meth:`_set` / :meth:`_append`, which refuse to run once
    ``build()`` has called :meth:`_consume`.
    """

    def __init__(self, **proto: Any) -> None:
        self._proto: dict[str, Any] = dict(proto)
        self._consumed = False

    @property
    def consumed(self) -> bool:
        """True once ``build()`` has been called."""
        return self._consumed

    def comment(self, comment: str) -> Self:
        """Set the descriptor's comment."""
        return self._set("comment", comment)

    def annotation(self, key: str, value: str) -> Self:
        """Attach an extension annotation (e.g. ``x_owner``)."""
        self._check_open()
        self._proto.setdefault("annotations", {})[key] = value
        return self

    # ---- helpers for subclasses ----

    def _check_open(self) -> None:
        if self._consumed:
            raise BuilderConsumedError(f"{type(self).__name__} has already been built")

    def _set(self, key: str, value: Any) -> Self:
        self._check_open()
        self._proto[key] = value
        return self

    def _append(self, key: str, value: Any) -> Self:
        self._check_open()
        self._proto.setdefault(key, []).append(value)
        return self

    def _consume(self) -> dict[str, Any]:
        """Mark the builder as used and hand over its settings.

        List values are frozen into tuples.
        """
        self._check_open()
        self._consumed = True
        proto, self._proto = self._proto, {}
        return {k: tuple(v) if isinstance(v, list) else v for k, v in proto.items()}
