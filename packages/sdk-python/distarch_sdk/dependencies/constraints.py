"""
Version Constraint Translation
==============================

Translates CPAN version requirements into pacman dependency constraints.

A requirement is either a bare version ("1.5", meaning "at least 1.5") or a
comma separated list of comparisons as found in META files::

    >= 0, != 6.04, != 6.05

pacman has no "not equal" operator, so ``!= v`` becomes the pair ``<v``,
``>v``; ``>= 0`` is redundant and dropped. The example above therefore
translates to ``<6.04 >6.04 <6.05 >6.05``.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Mapping, Optional, Tuple, Union

from distarch_common import VersionSpecError

from .version import BARE_VERSION, has_version, normalize_version

_CLAUSE_SPLIT = re.compile(r"\s*,\s*")
_CLAUSE = re.compile(r"([<>]=?|[!=]=) *([0-9A-Za-z._-]+)")


class SpecOperator(str, Enum):
    """Comparison operators accepted in CPAN requirements."""

    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="
    NE = "!="
    EQ = "=="


class BoundOperator(str, Enum):
    """Comparison operators pacman understands."""

    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="
    EQ = "=="


@dataclass(frozen=True)
class VersionBound:
    """One pacman comparison, e.g. ``>=1.2``."""

    operator: BoundOperator
    version: str

    def __str__(self) -> str:
        return f"{self.operator.value}{self.version}"


@dataclass(frozen=True)
class Unconstrained:
    """Any version satisfies the dependency."""

    def to_dependencies(self, name: str) -> List[str]:
        return [name]


@dataclass(frozen=True)
class Exact:
    """A bare version requirement; rendered as a minimum version."""

    version: str

    def to_dependencies(self, name: str) -> List[str]:
        if not self.version:
            return [name]
        return [f"{name}>={self.version}"]


@dataclass(frozen=True)
class Ranges:
    """Ordered list of pacman comparisons, one dependency entry each."""

    bounds: Tuple[VersionBound, ...]

    def to_dependencies(self, name: str) -> List[str]:
        return [f"{name}{bound}" for bound in self.bounds]


Constraint = Union[Unconstrained, Exact, Ranges]


def translate_constraint_spec(spec: str) -> Constraint:
    """
    Translate one CPAN version requirement.

    Args:
        spec: Requirement like "1.5" or ">= 1.2, != 1.5, < 2"

    Returns:
        Exact for a bare version, Ranges for comparisons, or Unconstrained
        when every comparison was redundant

    Raises:
        VersionSpecError: If a clause is not ``<op> <version>`` with a
            supported operator; the message quotes the full spec
    """
    text = spec.strip()

    # The simplest case is a version.
    if BARE_VERSION.fullmatch(text):
        return Exact(normalize_version(text))

    bounds: List[VersionBound] = []
    for clause in _CLAUSE_SPLIT.split(text):
        match = _CLAUSE.fullmatch(clause)
        if not match:
            raise VersionSpecError(spec)

        operator = SpecOperator(match.group(1))
        version = normalize_version(match.group(2))
        if not version:
            raise VersionSpecError(spec, f"no usable version in clause '{clause}'")

        if operator == SpecOperator.NE:
            bounds.append(VersionBound(BoundOperator.LT, version))
            bounds.append(VersionBound(BoundOperator.GT, version))
        elif operator == SpecOperator.GE and version == "0":
            continue
        else:
            bounds.append(VersionBound(BoundOperator(operator.value), version))

    if not bounds:
        return Unconstrained()
    return Ranges(tuple(bounds))


def constraint_for(spec: Optional[str]) -> Constraint:
    """Translate a dependency map value, treating None, "" and zero versions as unconstrained."""
    if not has_version(spec):
        return Unconstrained()
    return translate_constraint_spec(spec)


def dependency_entries(deps: Mapping[str, Optional[str]]) -> List[str]:
    """Expand a dependency map into pacman dependency strings, sorted by package."""
    entries: List[str] = []
    for name in sorted(deps):
        entries.extend(constraint_for(deps[name]).to_dependencies(name))
    return entries


def deps_string(deps: Mapping[str, Optional[str]]) -> str:
    """
    Render a dependency map as the body of a PKGBUILD ``depends=()`` array.

    Example:
        >>> deps_string({"perl-moose": "2.0", "perl": None})
        "'perl' 'perl-moose>=2.0'"
    """
    return " ".join(f"'{entry}'" for entry in dependency_entries(deps))
