"""
Dependency Resolution
=====================

Turns the module requirements of a distribution into the ``depends`` and
``makedepends`` maps of its package:

1. Module names are mapped to distributions, then to package names
2. Modules shipped with perl itself are dropped when perl's copy is new enough
3. Build-only packages are moved to makedepends
4. build/configure requirements are merged into makedepends
5. Library packages found for XS code are merged into depends
6. perl is always depended on, directly or through a perl-* package

Looking up the distribution of a module and the versions of perl's core
modules is left to the caller (``dist_of`` and ``core_versions``).
"""

from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional

from distarch_common import ROOT_PACKAGE_NAME
from distarch_common.logger import get_logger
from distarch_schema import DistMeta

from .classifier import classify_deps, is_test_dist
from .constraints import deps_string
from .merger import DependencyMap, merge_deps
from .names import is_main_module, module_to_dist, normalize_name
from .version import compare_versions, has_version, translate_perl_version

logger = get_logger(__name__)

DistLookup = Callable[[str], Optional[str]]


@dataclass
class PackageDeps:
    """Runtime and build-time dependency maps of one package."""

    depends: DependencyMap = field(default_factory=dict)
    makedepends: DependencyMap = field(default_factory=dict)

    @property
    def depends_string(self) -> str:
        return deps_string(self.depends)

    @property
    def makedepends_string(self) -> str:
        return deps_string(self.makedepends)


def translate_dist_deps(
    requires: Mapping[str, Optional[str]],
    core_versions: Optional[Mapping[str, Optional[str]]] = None,
    dist_of: DistLookup = module_to_dist,
) -> DependencyMap:
    """
    Translate module requirements into package requirements.

    Args:
        requires: Module name -> raw CPAN version requirement
        core_versions: Module name -> version shipped with the target perl
        dist_of: Returns the distribution providing a module, or None to
            skip the module

    Returns:
        Package name -> raw version requirement (None when unversioned)

    Raises:
        NamingError: If a distribution name cannot become a package name
    """
    core_versions = core_versions or {}
    pkgdeps: DependencyMap = {}

    for module, depver in requires.items():
        # Sometimes a perl version is given as a prerequisite
        if module == ROOT_PACKAGE_NAME:
            pkgdeps[ROOT_PACKAGE_NAME] = translate_perl_version(depver) if has_version(depver) else None
            logger.debug(f"req on perl {depver} -> {pkgdeps[ROOT_PACKAGE_NAME]}")
            continue

        corever = core_versions.get(module)
        if corever:
            if not has_version(depver):
                continue
            order = compare_versions(corever, depver)
            if order is not None and order >= 0:
                logger.debug(f"{module} {depver} is provided by perl ({corever})")
                continue

        dist = dist_of(module)
        if not dist:
            logger.debug(f"No distribution found for {module}, skipping")
            continue
        pkgname = normalize_name(dist)

        # Only the main module's version says anything about the dist version
        version = depver if has_version(depver) and is_main_module(module, dist) else None
        if not pkgdeps.get(pkgname):
            pkgdeps[pkgname] = version

    return pkgdeps


def resolve_package_deps(
    meta: DistMeta,
    core_versions: Optional[Mapping[str, Optional[str]]] = None,
    xs_deps: Optional[Mapping[str, Optional[str]]] = None,
    dist_of: DistLookup = module_to_dist,
) -> PackageDeps:
    """
    Compute ``depends`` and ``makedepends`` for a distribution.

    Args:
        meta: Distribution metadata
        core_versions: Versions of modules shipped with perl
        xs_deps: Package name -> installed version of C libraries linked by
            the distribution's XS code
        dist_of: Module -> distribution lookup

    Returns:
        PackageDeps with both maps filled in
    """
    depends = translate_dist_deps(meta.requires, core_versions, dist_of)
    makedepends = classify_deps(depends, is_test_dist(meta.name))

    cfgdeps = translate_dist_deps(meta.configure_requires, core_versions, dist_of)
    builddeps = translate_dist_deps(meta.build_requires, core_versions, dist_of)

    # Build requirements are often repeated in the runtime list
    for name, version in builddeps.items():
        if name in depends and depends[name] == version:
            del depends[name]

    merge_deps(makedepends, cfgdeps)
    merge_deps(makedepends, builddeps)
    merge_deps(depends, dict(xs_deps or {}))

    # Require perl unless we have a dependency on a module or perl itself.
    if not any(name.startswith(ROOT_PACKAGE_NAME) for name in depends):
        depends[ROOT_PACKAGE_NAME] = None

    logger.debug(
        f"Resolved {meta.name}: {len(depends)} depends, {len(makedepends)} makedepends"
    )
    return PackageDeps(depends=depends, makedepends=makedepends)
