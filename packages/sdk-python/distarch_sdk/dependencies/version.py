"""
Version Normalization and Comparison
====================================

pacman only understands numeric, dot separated versions, so CPAN versions are
reduced to digits and dots before they reach a PKGBUILD:

- ``1.2.3_04`` -> ``1.2.3`` (developer release suffix dropped)
- ``v1.2.3``   -> ``1.2.3``
- ``0.29a``    -> ``0.29``
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

BARE_VERSION = re.compile(r"[0-9A-Za-z._-]+")
_DEV_SUFFIX = re.compile(r"_[^_]+\Z")
_NON_VERSION_CHARS = re.compile(r"[^0-9.]")
_DOT_RUN = re.compile(r"\.{2,}")
_DOTTED = re.compile(r"\d+(?:\.\d+)*")
_PERL_DECIMAL = re.compile(r"(\d+)\.(\d{3})(\d{1,3})")
_ZERO_VERSION = re.compile(r"0*(?:\.0*)?")


def normalize_version(raw_version: str) -> str:
    """
    Convert a CPAN version into a pacman version.

    Never raises; an empty result means there is no usable version.
    """
    version = _DEV_SUFFIX.sub("", raw_version)
    version = version.replace("-", ".").replace("_", ".")
    version = _NON_VERSION_CHARS.sub("", version)
    version = _DOT_RUN.sub(".", version)
    return version.removeprefix(".").removesuffix(".")


@dataclass(frozen=True)
class DottedVersion:
    """
    A numeric dotted version such as 1.2.3.

    Comparison is component-wise on integers; the shorter version is padded
    with zeros, so ``1.2 == 1.2.0`` and ``1.10 > 1.9``.
    """

    parts: Tuple[int, ...]

    def __str__(self) -> str:
        return ".".join(str(p) for p in self.parts)

    def _padded(self, other: "DottedVersion") -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
        width = max(len(self.parts), len(other.parts))
        return (
            self.parts + (0,) * (width - len(self.parts)),
            other.parts + (0,) * (width - len(other.parts)),
        )

    def __lt__(self, other: "DottedVersion") -> bool:
        mine, theirs = self._padded(other)
        return mine < theirs

    def __le__(self, other: "DottedVersion") -> bool:
        mine, theirs = self._padded(other)
        return mine <= theirs

    def __gt__(self, other: "DottedVersion") -> bool:
        mine, theirs = self._padded(other)
        return mine > theirs

    def __ge__(self, other: "DottedVersion") -> bool:
        mine, theirs = self._padded(other)
        return mine >= theirs

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DottedVersion):
            return False
        mine, theirs = self._padded(other)
        return mine == theirs

    def __hash__(self) -> int:
        parts = list(self.parts)
        while len(parts) > 1 and parts[-1] == 0:
            parts.pop()
        return hash(tuple(parts))


def parse_version(version_str: str) -> DottedVersion:
    """
    Parse an already normalized version string.

    Args:
        version_str: Version like "1", "1.2" or "1.2.3.4"

    Returns:
        DottedVersion object

    Raises:
        ValueError: If the string is not purely numeric and dotted
    """
    version_str = version_str.strip()
    if not _DOTTED.fullmatch(version_str):
        raise ValueError(f"Invalid version string: '{version_str}'")
    return DottedVersion(tuple(int(p) for p in version_str.split(".")))


def compare_versions(left: str, right: str) -> Optional[int]:
    """
    Compare two raw CPAN versions after normalization.

    Only bare versions take part; a comparison list such as
    ">= 1.0, != 1.5" is incomparable.

    Returns:
        -1, 0 or 1 like a classic cmp, or None when either side is not a
        bare version or has no usable numeric version
    """
    if not (BARE_VERSION.fullmatch(left.strip()) and BARE_VERSION.fullmatch(right.strip())):
        return None
    try:
        left_v = parse_version(normalize_version(left))
        right_v = parse_version(normalize_version(right))
    except ValueError:
        return None
    if left_v < right_v:
        return -1
    if left_v > right_v:
        return 1
    return 0


def translate_perl_version(perl_version: str) -> str:
    """
    Convert a requirement on perl itself into the Arch perl package's version.

    - ``v5.10.1``  -> ``5.10.1`` (v-strings lose their "v")
    - ``5.010001`` -> ``5.10.1`` (decimal form becomes dotted)
    - ``5.0081``   -> ``5.8.100`` (trailing zeros re-applied)

    Anything else is returned unchanged.
    """
    if perl_version.startswith("v"):
        return perl_version[1:]

    match = _PERL_DECIMAL.fullmatch(perl_version)
    if not match:
        return perl_version

    major, minor, patch = match.groups()
    patch = patch.ljust(3, "0")
    return f"{int(major)}.{int(minor)}.{int(patch)}"


def has_version(spec: Optional[str]) -> bool:
    """False for missing, empty and zero versions ("0", "0.0", "0.00")."""
    if spec is None:
        return False
    text = str(spec).strip()
    return bool(text) and not _ZERO_VERSION.fullmatch(text)
