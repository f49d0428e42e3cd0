"""
Template Evaluators
===================

An evaluator turns template text plus a variable map into rendered text.

- ``BuiltinEvaluator`` is always available and implements the strict
  semantics PKGBUILD templates rely on: unknown IF variables, missing
  placeholders and unbalanced blocks are errors, never empty strings.
- Adapters for full template engines are loaded on demand by
  ``discover_evaluator``; their own semantics apply.
"""

import importlib
import importlib.util
from typing import Any, Dict, Iterable, List, Mapping, Protocol, runtime_checkable

from distarch_common import MissingVariableError, UnknownIfVariableError
from distarch_common.logger import get_logger

from .parser import If, Node, Text, parse_template

logger = get_logger(__name__)

# Template engine module -> "module:attribute" of its adapter
EVALUATOR_ADAPTERS: Dict[str, str] = {
    "jinja2": "distarch_sdk.templates.jinja_engine:JinjaEvaluator",
}

DEFAULT_SEARCH = ("jinja2",)


@runtime_checkable
class Evaluator(Protocol):
    """Anything that can render template text against a variable map."""

    name: str

    def render(self, template: str, variables: Mapping[str, Any]) -> str: ...


def is_true(value: Any) -> bool:
    """IF-block truthiness: None, "", "0", 0, False and empty containers are false."""
    if value is None:
        return False
    if isinstance(value, str):
        return value not in ("", "0")
    return bool(value)


def to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


class BuiltinEvaluator:
    """
    Evaluator for the built-in template language (see ``parser``).

    IF blocks are resolved first, then placeholders are substituted, so
    placeholders and IF blocks inside a false branch are never checked.
    """

    name = "builtin"

    def render(self, template: str, variables: Mapping[str, Any]) -> str:
        nodes = parse_template(template)
        flat = self._prune(nodes, variables)
        return "".join(self._substitute(node, variables) for node in flat)

    def _prune(self, nodes: Iterable[Node], variables: Mapping[str, Any]) -> List[Node]:
        """Replace every IF block by its body when true, or by nothing."""
        flat: List[Node] = []
        for node in nodes:
            if isinstance(node, If):
                if node.name not in variables:
                    raise UnknownIfVariableError(node.name)
                if is_true(variables[node.name]):
                    flat.extend(self._prune(node.body, variables))
            else:
                flat.append(node)
        return flat

    @staticmethod
    def _substitute(node: Node, variables: Mapping[str, Any]) -> str:
        if isinstance(node, Text):
            return node.text
        value = variables.get(node.name)
        if value is None:
            raise MissingVariableError(node.name)
        return to_text(value)


def _load_adapter(target: str) -> type:
    module_name, _, attribute = target.partition(":")
    return getattr(importlib.import_module(module_name), attribute)


def discover_evaluator(search: Iterable[str] = DEFAULT_SEARCH, **options: Any) -> Evaluator:
    """
    Pick the first installed template engine from ``search``.

    Args:
        search: Engine module names in order of preference; each must have an
            entry in EVALUATOR_ADAPTERS
        **options: Passed to the adapter's constructor

    Returns:
        The engine's adapter, or a BuiltinEvaluator when none is installed
    """
    logger.debug("Searching for template engines...")
    for module_name in search:
        target = EVALUATOR_ADAPTERS.get(module_name)
        if target is None:
            logger.warning(f"No evaluator adapter for template engine '{module_name}'")
            continue
        if importlib.util.find_spec(module_name) is None:
            continue
        logger.debug(f"Loaded template engine: {module_name}")
        return _load_adapter(target)(**options)

    logger.debug("None found, using the built-in evaluator")
    return BuiltinEvaluator()
