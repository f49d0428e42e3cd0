"""
Jinja2 Evaluator
================

Renders the built-in template language with Jinja2. The template is parsed
with the built-in parser and compiled to Jinja2 source, so the same PKGBUILD
templates work with either evaluator:

- ``[% name %]``               -> ``{{ vars["name"] }}``
- ``[% IF name %]...[% END %]`` -> ``{% if vars["name"] is flag %}...{% endif %}``

Undefined variables raise through ``StrictUndefined``; every Jinja2 failure is
reported as a TemplateEngineError.
"""

from typing import Any, Iterable, Mapping

from jinja2 import Environment, StrictUndefined
from jinja2 import TemplateError as JinjaTemplateError

from distarch_common import TemplateEngineError
from distarch_common.logger import get_logger

from .evaluators import is_true, to_text
from .parser import If, Node, Text, parse_template

logger = get_logger(__name__)


def _literal(text: str) -> str:
    """Wrap literal text in a raw block so no brace can join a generated tag."""
    # an "endraw" inside the text would close the block early
    text = text.replace("endraw", "end{% endraw %}{% raw %}raw")
    return "{% raw %}" + text + "{% endraw %}"


def to_jinja_source(nodes: Iterable[Node]) -> str:
    """Compile a parsed template tree into Jinja2 source."""
    parts = []
    for node in nodes:
        if isinstance(node, Text):
            parts.append(_literal(node.text))
        elif isinstance(node, If):
            parts.append(f"{{% if vars[{node.name!r}] is flag %}}")
            parts.append(to_jinja_source(node.body))
            parts.append("{% endif %}")
        else:
            parts.append(f"{{{{ vars[{node.name!r}] }}}}")
    return "".join(parts)


class JinjaEvaluator:
    """
    Evaluator backed by a Jinja2 ``Environment``.

    Example:
        >>> evaluator = JinjaEvaluator()
        >>> evaluator.render("pkgname=[% pkgname %]", {"pkgname": "perl-moose"})
        'pkgname=perl-moose'
    """

    name = "jinja2"

    def __init__(self, **env_options: Any):
        """
        Args:
            **env_options: Extra ``jinja2.Environment`` options
        """
        options = {
            "undefined": StrictUndefined,
            "keep_trailing_newline": True,
            "autoescape": False,
            "finalize": to_text,
        }
        options.update(env_options)
        self.env = Environment(**options)
        self.env.tests["flag"] = is_true

    def render(self, template: str, variables: Mapping[str, Any]) -> str:
        source = to_jinja_source(parse_template(template))
        logger.debug("Processing template using jinja2")
        try:
            return self.env.from_string(source).render(vars=dict(variables))
        except JinjaTemplateError as e:
            raise TemplateEngineError(self.name, str(e)) from e
