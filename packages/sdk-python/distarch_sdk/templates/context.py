"""
PKGBUILD Template Context
=========================

Builds the variable map a PKGBUILD template is rendered with, from a
distribution's metadata plus values computed elsewhere (checksums, URLs).
"""

import re
from typing import Any, Callable, Dict, Mapping, Optional

from distarch_common import (
    ARCH_ANY,
    ARCH_XS,
    DEFAULT_PKGREL,
    DISTARCH_VERSION,
    Settings,
    ValidationError,
    get_settings,
)
from distarch_common.logger import get_logger
from distarch_schema import DistMeta

from ..dependencies import (
    PackageDeps,
    module_to_dist,
    normalize_name,
    normalize_version,
    resolve_package_deps,
)
from ..dependencies.resolver import DistLookup

logger = get_logger(__name__)

_BASH_SPECIAL = re.compile(r'([$"`])')


def escape_pkgdesc(text: str) -> str:
    """Quote a description for use inside a double-quoted bash string."""
    return _BASH_SPECIAL.sub(r"\\\1", text)


class PkgbuildContext:
    """
    Builds the context dictionary for PKGBUILD rendering.

    Example:
        >>> ctx = PkgbuildContext(meta)
        >>> variables = ctx.build(md5sums="d41d8cd98f00b204e9800998ecf8427e")
    """

    def __init__(
        self,
        meta: DistMeta,
        settings: Optional[Settings] = None,
        pkgrel: int = DEFAULT_PKGREL,
        core_versions: Optional[Mapping[str, Optional[str]]] = None,
        xs_deps: Optional[Mapping[str, Optional[str]]] = None,
        dist_of: DistLookup = module_to_dist,
    ):
        """
        Initialize context builder.

        Args:
            meta: Distribution metadata
            settings: Packager settings (read from the environment if omitted)
            pkgrel: Package release number
            core_versions: Versions of modules shipped with perl
            xs_deps: Library packages linked by XS code
            dist_of: Module -> distribution lookup
        """
        self.meta = meta
        self.settings = settings or get_settings()
        self.pkgrel = pkgrel
        self.core_versions = core_versions
        self.xs_deps = xs_deps
        self.dist_of = dist_of

    def resolve_deps(self) -> PackageDeps:
        return resolve_package_deps(
            self.meta,
            core_versions=self.core_versions,
            xs_deps=self.xs_deps,
            dist_of=self.dist_of,
        )

    def pkgver(self) -> str:
        """Package version; fails when the distribution version has no digits."""
        pkgver = normalize_version(self.meta.version)
        if not pkgver:
            raise ValidationError(
                f"Version '{self.meta.version}' of {self.meta.name} has no usable digits"
            )
        return pkgver

    def dist_url(self) -> str:
        """Version agnostic home page of the distribution."""
        return f"{self.settings.cpan_url}/dist/{self.meta.name}"

    def source_url(self) -> str:
        """Download link of the source archive."""
        if not self.meta.cpan_path or not self.meta.archive:
            raise ValidationError(
                f"Cannot build the source URL of {self.meta.name}: "
                "cpan_path and archive are required (or pass source=...)"
            )
        path = self.meta.cpan_path.strip("/")
        return f"{self.settings.cpan_url}/CPAN/{path}/{self.meta.archive}"

    def build(
        self,
        md5sums: str,
        sha512sums: Optional[str] = None,
        source: Optional[str] = None,
        url: Optional[str] = None,
        extra_context: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Build the complete template context.

        Args:
            md5sums: MD5 hex digest of the source archive
            sha512sums: SHA-512 hex digest, if one was computed
            source: Source archive URL (computed from the metadata if omitted)
            url: Home page URL (computed from the metadata if omitted)
            extra_context: Additional variables; these override computed ones,
                which are then not computed at all

        Returns:
            Dictionary with all template variables

        Raises:
            ValidationError: If the version or source URL cannot be determined
        """
        overrides: Dict[str, Any] = {}
        if url:
            overrides["url"] = url
        if source:
            overrides["source"] = source
        overrides.update(extra_context or {})

        deps: Optional[PackageDeps] = None

        def package_deps() -> PackageDeps:
            nonlocal deps
            if deps is None:
                deps = self.resolve_deps()
            return deps

        computed: Dict[str, Callable[[], Any]] = {
            "packager": lambda: self.settings.packager,
            "version": lambda: DISTARCH_VERSION,
            "pkgname": lambda: normalize_name(self.meta.name),
            "pkgver": self.pkgver,
            "pkgrel": lambda: self.pkgrel,
            "pkgdesc": lambda: escape_pkgdesc(self.meta.pkgdesc),
            "arch": lambda: ARCH_XS if self.meta.has_xs else ARCH_ANY,
            "depends": lambda: package_deps().depends_string,
            "makedepends": lambda: package_deps().makedepends_string,
            "depends_map": lambda: dict(package_deps().depends),
            "makedepends_map": lambda: dict(package_deps().makedepends),
            "url": self.dist_url,
            "source": self.source_url,
            "md5sums": lambda: md5sums,
            "sha512sums": lambda: sha512sums or "",
            "distdir": lambda: self.meta.build_dir,
            "is_makemaker": lambda: self.meta.installer_type == "makemaker",
            "is_modulebuild": lambda: self.meta.installer_type == "modulebuild",
        }

        context: Dict[str, Any] = {}
        for key, compute in computed.items():
            context[key] = overrides[key] if key in overrides else compute()
        context.update(overrides)

        logger.debug(f"Built PKGBUILD context for {context['pkgname']}-{context['pkgver']}")
        return context
