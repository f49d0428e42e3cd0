"""
Template System Module
======================

Template language, evaluators and the PKGBUILD renderer.
"""

from .context import PkgbuildContext, escape_pkgdesc
from .evaluators import (
    EVALUATOR_ADAPTERS,
    BuiltinEvaluator,
    Evaluator,
    discover_evaluator,
    is_true,
)
from .parser import If, Text, Var, parse_template, tokenize
from .pkgbuild import PKGBUILD_TEMPLATE
from .renderer import TemplateRenderer, get_renderer, render, render_pkgbuild

__all__ = [
    "TemplateRenderer",
    "PkgbuildContext",
    "escape_pkgdesc",
    "get_renderer",
    "render",
    "render_pkgbuild",
    "Evaluator",
    "BuiltinEvaluator",
    "EVALUATOR_ADAPTERS",
    "discover_evaluator",
    "is_true",
    "parse_template",
    "tokenize",
    "Text",
    "Var",
    "If",
    "PKGBUILD_TEMPLATE",
]
