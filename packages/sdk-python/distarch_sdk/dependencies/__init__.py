"""
distarch Dependency Management
==============================

Provides utilities for:
- Normalizing distribution names and versions into package names and versions
- Translating CPAN version requirements into pacman constraints
- Merging dependency maps, keeping the tightest requirement
- Separating build-only dependencies from runtime ones
"""

from .classifier import classify_deps, is_test_dist
from .constraints import (
    BoundOperator,
    Constraint,
    Exact,
    Ranges,
    SpecOperator,
    Unconstrained,
    VersionBound,
    constraint_for,
    dependency_entries,
    deps_string,
    translate_constraint_spec,
)
from .merger import DependencyMap, merge_deps
from .names import is_main_module, module_to_dist, normalize_name
from .resolver import PackageDeps, resolve_package_deps, translate_dist_deps
from .version import (
    DottedVersion,
    compare_versions,
    has_version,
    normalize_version,
    parse_version,
    translate_perl_version,
)

__all__ = [
    # Names
    "normalize_name",
    "module_to_dist",
    "is_main_module",
    # Versions
    "DottedVersion",
    "normalize_version",
    "parse_version",
    "compare_versions",
    "translate_perl_version",
    # Constraints
    "SpecOperator",
    "BoundOperator",
    "VersionBound",
    "Unconstrained",
    "Exact",
    "Ranges",
    "Constraint",
    "translate_constraint_spec",
    "constraint_for",
    "dependency_entries",
    "deps_string",
    # Merging and classification
    "DependencyMap",
    "merge_deps",
    "classify_deps",
    "is_test_dist",
    # Resolution
    "PackageDeps",
    "has_version",
    "translate_dist_deps",
    "resolve_package_deps",
]
