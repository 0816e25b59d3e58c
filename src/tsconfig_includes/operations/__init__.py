"""High-level operations for tsconfig-includes."""

from tsconfig_includes.operations.aggregate import aggregate
from tsconfig_includes.operations.closure import owning_package
from tsconfig_includes.operations.closure import resolve_packages
from tsconfig_includes.operations.estimate import estimate_includes
from tsconfig_includes.operations.exact import exact_includes
from tsconfig_includes.operations.includes import enumerate_by_package
from tsconfig_includes.operations.includes import enumerate_project

__all__ = [
    "aggregate",
    "enumerate_by_package",
    "enumerate_project",
    "estimate_includes",
    "exact_includes",
    "owning_package",
    "resolve_packages",
]
