"""
Dependency Merger
=================

Folds one dependency map into another, keeping the tightest requirement for
every package. Maps hold raw CPAN version requirements (or None), i.e. they
are merged before constraint translation.
"""

from typing import Dict, Mapping, Optional

from distarch_common.logger import get_logger

from .version import compare_versions, has_version

logger = get_logger(__name__)

DependencyMap = Dict[str, Optional[str]]


def merge_deps(primary: DependencyMap, incoming: Mapping[str, Optional[str]]) -> DependencyMap:
    """
    Merge ``incoming`` into ``primary`` in place.

    Rules for a package present in both maps:
    - an unconstrained existing entry is replaced by the incoming one
    - an unconstrained incoming entry never replaces a constrained one
    - otherwise the higher version wins, ties keep the existing entry
    - versions that cannot be compared numerically keep the existing entry

    Args:
        primary: Map to update
        incoming: Map whose entries are folded in

    Returns:
        ``primary``
    """
    for name, version in incoming.items():
        if name not in primary or not has_version(primary[name]):
            primary[name] = version
            continue
        if not has_version(version):
            continue

        existing = primary[name]
        order = compare_versions(existing, version)
        if order is None:
            logger.debug(
                f"Cannot compare versions for {name}: {existing!r} vs {version!r}, "
                f"keeping {existing!r}"
            )
        elif order < 0:
            logger.debug(f"Raising {name} requirement from {existing} to {version}")
            primary[name] = version

    return primary
