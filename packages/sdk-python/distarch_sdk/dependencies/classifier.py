"""
Dependency Classification
=========================

Moves build-only packages (test tools, documentation checkers, build helpers)
out of the runtime dependency map so they end up in ``makedepends``.
"""

import re
from typing import Dict, Optional

from distarch_common import (
    BUILD_HELPER_PATTERN,
    DOC_TOOL_PACKAGES,
    SELF_TEST_DIST_PATTERN,
    TEST_TOOL_PATTERN,
)

from .merger import DependencyMap


def is_test_dist(dist_name: str) -> bool:
    """Test-* distributions need their test modules at runtime."""
    return re.search(SELF_TEST_DIST_PATTERN, dist_name) is not None


def classify_deps(deps: DependencyMap, is_self_test_package: bool = False) -> DependencyMap:
    """
    Relocate build-only entries from ``deps`` into a new map.

    Args:
        deps: Runtime dependency map; moved entries are deleted from it
        is_self_test_package: Keep test tools in ``deps`` when the package
            being built is itself a test tool

    Returns:
        The build-only dependency map
    """
    build_only: Dict[str, Optional[str]] = {}

    if not is_self_test_package:
        for name in [n for n in deps if re.search(TEST_TOOL_PATTERN, n)]:
            build_only[name] = deps.pop(name)
        for name in DOC_TOOL_PACKAGES:
            if name in deps:
                build_only[name] = deps.pop(name)

    for name in [n for n in deps if re.search(BUILD_HELPER_PATTERN, n)]:
        build_only[name] = deps.pop(name)

    return build_only
