"""
Template Parser
===============

Parses the small Template-Toolkit-like language used by PKGBUILD templates:

- ``[% name %]``            substitutes a variable
- ``[% IF name %] ... [% END %]``  keeps its body when ``name`` is true;
  blocks nest
- ``-%]`` also swallows the newlines that follow the directive

Any other ``[% ... %]`` directive is kept as literal text.

The template is tokenized in one pass and turned into a tree of Text, Var and
If nodes by a recursive-descent parser.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from distarch_common import TemplateSyntaxError, UnterminatedBlockError

_DIRECTIVE = re.compile(
    r"\[%-?\s*(?P<body>(?:(?!\[%).)*?)\s*(?P<chomp>-)?%\](?(chomp)\n*)",
    re.DOTALL,
)
_IF = re.compile(r"IF(?:\s+(?P<name>\w*))?")
_WORD = re.compile(r"\w+")

EXCERPT_LENGTH = 30


@dataclass
class Text:
    text: str


@dataclass
class Var:
    name: str


@dataclass
class If:
    name: str
    body: List["Node"] = field(default_factory=list)


Node = Union[Text, Var, If]


@dataclass
class Token:
    kind: str  # "text", "var", "if" or "end"
    value: str
    start: int
    end: int


def _location(template: str, pos: int) -> Tuple[int, str]:
    """Line number and a short excerpt of the template at ``pos``."""
    line = template.count("\n", 0, pos) + 1
    return line, template[pos : pos + EXCERPT_LENGTH]


def tokenize(template: str) -> List[Token]:
    """
    Split a template into text and directive tokens.

    Raises:
        TemplateSyntaxError: If an IF directive has no variable name
    """
    tokens: List[Token] = []
    pos = 0

    for match in _DIRECTIVE.finditer(template):
        if match.start() > pos:
            tokens.append(Token("text", template[pos : match.start()], pos, match.start()))

        body = match.group("body")
        if_match = _IF.fullmatch(body)
        if body == "END":
            tokens.append(Token("end", body, match.start(), match.end()))
        elif if_match:
            name = if_match.group("name")
            if not name:
                line, _ = _location(template, match.start())
                raise TemplateSyntaxError(
                    f"Invalid template given (line {line}). "
                    "Must provide a variable name in an IF block"
                )
            tokens.append(Token("if", name, match.start(), match.end()))
        elif _WORD.fullmatch(body):
            tokens.append(Token("var", body, match.start(), match.end()))
        else:
            tokens.append(Token("text", match.group(0), match.start(), match.end()))
        pos = match.end()

    if pos < len(template):
        tokens.append(Token("text", template[pos:], pos, len(template)))
    return tokens


def _parse_nodes(
    template: str, tokens: List[Token], index: int, opener: Optional[Token]
) -> Tuple[List[Node], int]:
    """Parse tokens until the END closing ``opener`` (or the end of input)."""
    nodes: List[Node] = []

    while index < len(tokens):
        token = tokens[index]
        if token.kind == "text":
            nodes.append(Text(token.value))
        elif token.kind == "var":
            nodes.append(Var(token.value))
        elif token.kind == "if":
            body, index = _parse_nodes(template, tokens, index + 1, token)
            nodes.append(If(token.value, body))
        elif opener is None:
            line, excerpt = _location(template, token.start)
            raise UnterminatedBlockError("END without a matching IF", line, excerpt)
        else:
            return nodes, index
        index += 1

    if opener is not None:
        line, excerpt = _location(template, opener.end)
        raise UnterminatedBlockError(
            f"could not find ending match for IF {opener.value}", line, excerpt
        )
    return nodes, index


def parse_template(template: str) -> List[Node]:
    """
    Parse template text into a node tree.

    Raises:
        TemplateSyntaxError: For an IF without a variable name
        UnterminatedBlockError: For an IF without END or an END without IF
    """
    nodes, _ = _parse_nodes(template, tokenize(template), 0, None)
    return nodes
