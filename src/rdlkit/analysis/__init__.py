# Copyright 2026 rdlkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Analysis passes over declared schema types (dependency ordering)."""

from rdlkit.analysis.dependencies import (
    DanglingReferenceError,
    DuplicateTypeNameError,
    ReferenceCycleError,
    SchemaBuildError,
    resolve_types,
    type_dependencies,
)

__all__ = [
    "resolve_types",
    "type_dependencies",
    "SchemaBuildError",
    "DanglingReferenceError",
    "DuplicateTypeNameError",
    "ReferenceCycleError",
]
