"""distarch SDK - turn CPAN distribution metadata into Arch Linux PKGBUILDs.

This package provides tools for:
- Loading distribution metadata from META.yml / META.json text
- Translating distribution names, versions and requirements to pacman rules
- Rendering PKGBUILDs from templates

Example:
    >>> from distarch_sdk import load_distmeta_string, render_pkgbuild
    >>> meta = load_distmeta_string(meta_yml, cpan_path="authors/id/E/ET/ETHER",
    ...                             archive="Moose-2.2011.tar.gz")
    >>> pkgbuild = render_pkgbuild(meta, md5sums=md5_hex)

Package Structure:
    distarch_sdk/
    ├── core/           - META loading
    ├── dependencies/   - Names, versions, constraints, merging, classification
    └── templates/      - Template language, evaluators, PKGBUILD rendering
"""

# META loading
from .core import load_distmeta_string

# Dependencies
from .dependencies import (
    PackageDeps,
    classify_deps,
    deps_string,
    merge_deps,
    normalize_name,
    normalize_version,
    resolve_package_deps,
    translate_constraint_spec,
)

# Templates
from .templates import (
    PKGBUILD_TEMPLATE,
    BuiltinEvaluator,
    PkgbuildContext,
    TemplateRenderer,
    discover_evaluator,
    get_renderer,
    render,
    render_pkgbuild,
)

__version__ = "0.1.0"

__all__ = [
    # META loading
    "load_distmeta_string",
    # Dependencies
    "normalize_name",
    "normalize_version",
    "translate_constraint_spec",
    "merge_deps",
    "classify_deps",
    "deps_string",
    "resolve_package_deps",
    "PackageDeps",
    # Templates
    "TemplateRenderer",
    "PkgbuildContext",
    "BuiltinEvaluator",
    "discover_evaluator",
    "get_renderer",
    "render",
    "render_pkgbuild",
    "PKGBUILD_TEMPLATE",
]
