"""
Package Name Normalization
==========================

Maps CPAN distribution names onto pacman package names:

- ``Foo_Bar``     -> ``perl-foo-bar``
- ``libwww-perl`` -> ``perl-libwww`` (override table)
- ``perl``        -> ``perl``
"""

import re
from typing import Mapping, Optional

from distarch_common import (
    PACKAGE_PREFIX,
    PKGNAME_OVERRIDES,
    ROOT_PACKAGE_NAME,
    NamingError,
)

_INVALID_CHARS = re.compile(r"[^a-z0-9+-]")
_HYPHEN_PLUS = re.compile(r"-\+")
_PLUS_HYPHEN = re.compile(r"\+-")
_HYPHEN_RUN = re.compile(r"-{2,}")


def normalize_name(raw_name: str, overrides: Optional[Mapping[str, str]] = None) -> str:
    """
    Convert a distribution name into a valid package name.

    Args:
        raw_name: CPAN distribution name, e.g. "Moose" or "Foo_Bar"
        overrides: Exact-match name table consulted first
            (defaults to PKGNAME_OVERRIDES)

    Returns:
        Package name such as "perl-foo-bar"

    Raises:
        NamingError: If nothing usable is left after stripping invalid characters
    """
    table = PKGNAME_OVERRIDES if overrides is None else overrides
    if raw_name in table:
        return table[raw_name]

    name = raw_name.lower().replace("_", "-")
    name = _INVALID_CHARS.sub("", name)
    # + next to - looks weird
    name = _HYPHEN_PLUS.sub("-", name)
    name = _PLUS_HYPHEN.sub("-", name)
    name = _HYPHEN_RUN.sub("-", name)
    name = name.removeprefix("-").removesuffix("-")

    if not name:
        raise NamingError(raw_name)

    if name == ROOT_PACKAGE_NAME:
        return name
    return f"{PACKAGE_PREFIX}-{name}"


def module_to_dist(module_name: str) -> str:
    """Guess the distribution of a module: ``Foo::Bar`` -> ``Foo-Bar``."""
    return re.sub(r":+", "-", module_name)


def is_main_module(module_name: str, dist_name: str) -> bool:
    """Check whether a distribution is named after the given module."""
    return module_to_dist(module_name).lower() == dist_name.lower()
