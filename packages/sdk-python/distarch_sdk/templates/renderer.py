"""
distarch Template Renderer
==========================

Renders PKGBUILDs and other descriptors from templates.

The evaluator is chosen explicitly when the renderer is constructed. It
defaults to the built-in evaluator; ``TemplateRenderer.discover()`` picks an
installed template engine instead.
"""

import threading
from typing import Any, Dict, Iterable, Mapping, Optional

from distarch_common import ValidationError
from distarch_common.logger import get_logger
from distarch_schema import DistMeta

from .context import PkgbuildContext
from .evaluators import DEFAULT_SEARCH, BuiltinEvaluator, Evaluator, discover_evaluator
from .pkgbuild import PKGBUILD_TEMPLATE

logger = get_logger(__name__)


class TemplateRenderer:
    """
    Main template rendering engine.

    Example:
        >>> renderer = TemplateRenderer()
        >>> renderer.render("[% IF x -%]yes[% END -%]no", {"x": 1})
        'yesno'
    """

    def __init__(self, evaluator: Optional[Evaluator] = None):
        """
        Initialize the template renderer.

        Args:
            evaluator: Evaluator to render with (built-in if omitted)
        """
        self.evaluator = evaluator or BuiltinEvaluator()
        logger.debug(f"Template evaluator: {self.evaluator.name}")

    @classmethod
    def discover(cls, search: Iterable[str] = DEFAULT_SEARCH, **options: Any) -> "TemplateRenderer":
        """Create a renderer using the first installed template engine."""
        return cls(discover_evaluator(search, **options))

    def render(self, template: str, variables: Mapping[str, Any]) -> str:
        """
        Render template text with the given variables.

        Raises:
            ValidationError: If arguments have the wrong type
            TemplateError: If the template references unknown variables or
                is malformed
        """
        if not isinstance(template, str):
            raise ValidationError(f"template must be a string, got {type(template).__name__}")
        if not isinstance(variables, Mapping):
            raise ValidationError(
                f"template variables must be a mapping, got {type(variables).__name__}"
            )
        return self.evaluator.render(template, variables)

    def render_pkgbuild(
        self,
        meta: DistMeta,
        md5sums: str,
        sha512sums: Optional[str] = None,
        template: Optional[str] = None,
        source: Optional[str] = None,
        url: Optional[str] = None,
        extra_context: Optional[Dict[str, Any]] = None,
        **context_options: Any,
    ) -> str:
        """
        Render a PKGBUILD for a distribution.

        Args:
            meta: Distribution metadata
            md5sums: MD5 hex digest of the source archive
            sha512sums: SHA-512 hex digest, if computed
            template: Custom template text (defaults to PKGBUILD_TEMPLATE)
            source: Source archive URL, required when the metadata has no
                cpan_path or archive
            url: Home page URL (the CPAN dist page if omitted)
            extra_context: Additional or overriding template variables
            **context_options: Passed to PkgbuildContext (settings, pkgrel,
                core_versions, xs_deps, dist_of)

        Returns:
            PKGBUILD content
        """
        context = PkgbuildContext(meta, **context_options).build(
            md5sums=md5sums,
            sha512sums=sha512sums,
            source=source,
            url=url,
            extra_context=extra_context,
        )
        logger.info(f"Rendering PKGBUILD for {context['pkgname']} with {self.evaluator.name}")
        return self.render(template or PKGBUILD_TEMPLATE, context)


# ============================================================================
# Convenience Functions
# ============================================================================

# Default renderer instance (lazy initialization)
_renderer: Optional[TemplateRenderer] = None
_renderer_lock = threading.Lock()


def get_renderer() -> TemplateRenderer:
    """Get or create the default template renderer (built-in evaluator)."""
    global _renderer
    if _renderer is None:
        with _renderer_lock:
            if _renderer is None:
                _renderer = TemplateRenderer()
    return _renderer


def render(template: str, variables: Mapping[str, Any]) -> str:
    """Convenience function to render template text with the default renderer."""
    return get_renderer().render(template, variables)


def render_pkgbuild(meta: DistMeta, md5sums: str, **kwargs: Any) -> str:
    """Convenience function to render a PKGBUILD with the default renderer."""
    return get_renderer().render_pkgbuild(meta, md5sums, **kwargs)


__all__ = [
    "TemplateRenderer",
    "get_renderer",
    "render",
    "render_pkgbuild",
]
