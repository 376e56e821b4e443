"""
Placeholder templates: tokenizer, parser and evaluator.

Grammar (markup and typesetting sources share it):

    {{name}}                      placeholder
    {{#if name}} ... {{/if}}      conditional block
    \\if{name} ... \\fi             conditional block (typesetting sources)

Templates are parsed once into a small AST (`Text`, `Placeholder`,
`Conditional`) and evaluated against a `SubstitutionContext`. A conditional
is decided from the raw field before anything inside it is evaluated, so a
placeholder nested in a dropped block never produces output.
"""

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Union

from cvpress.exceptions import TemplateSyntaxError

MARKUP = 'markup'
TYPESET = 'typeset'

_TOKEN = re.compile(
    r'\{\{\s*#if\s+(?P<if_open>[A-Za-z_]\w*)\s*\}\}'
    r'|\{\{\s*/if\s*\}\}(?P<if_close>)'
    r'|\\if\{(?P<tex_open>[A-Za-z_]\w*)\}'
    r'|\\fi(?![A-Za-z])(?P<tex_close>)'
    r'|\{\{\s*(?P<placeholder>[A-Za-z_]\w*)\s*\}\}'
)


@dataclass(frozen=True)
class Text:
    value: str


@dataclass(frozen=True)
class Placeholder:
    name: str


@dataclass
class Conditional:
    name: str
    kind: str = MARKUP
    children: list = field(default_factory=list)


Node = Union[Text, Placeholder, Conditional]


def parse_template(source: str, template_id: str | None = None) -> list[Node]:
    """Parse `source` into a list of nodes.

    ``\\fi`` only closes an open ``\\if{...}`` block; anywhere else it is
    ordinary text, so LaTeX sources keep their own conditionals.

    Raises:
        TemplateSyntaxError: on a stray or mismatched closing marker, or an
            unclosed block.
    """
    root: list[Node] = []
    stack: list[tuple[Conditional, int]] = []
    current = root
    pos = 0

    for m in _TOKEN.finditer(source):
        kind = m.lastgroup
        if kind == 'tex_close' and not (stack and stack[-1][0].kind == TYPESET):
            continue  # plain LaTeX \fi, stays in the surrounding text
        if m.start() > pos:
            current.append(Text(source[pos : m.start()]))
        pos = m.end()

        if kind in ('if_open', 'tex_open'):
            node = Conditional(m.group(kind), MARKUP if kind == 'if_open' else TYPESET)
            current.append(node)
            stack.append((node, m.start()))
            current = node.children
        elif kind in ('if_close', 'tex_close'):
            expected = MARKUP if kind == 'if_close' else TYPESET
            if not stack:
                raise TemplateSyntaxError(
                    f"Closing marker {m.group(0)!r} without an open block",
                    template_id,
                    m.start(),
                )
            if stack[-1][0].kind != expected:
                raise TemplateSyntaxError(
                    f"Closing marker {m.group(0)!r} does not match block "
                    f"{stack[-1][0].name!r}",
                    template_id,
                    m.start(),
                )
            stack.pop()
            current = stack[-1][0].children if stack else root
        else:
            current.append(Placeholder(m.group('placeholder')))

    if stack:
        node, start = stack[-1]
        raise TemplateSyntaxError(f"Unclosed block {node.name!r}", template_id, start)
    if pos < len(source):
        current.append(Text(source[pos:]))
    return root


class SubstitutionContext:
    """Values available to a template during one population.

    Args:
        scalars: raw scalar fields (escaped with `escape` on output)
        generators: section name -> zero-arg callable returning ready markup;
            each is called at most once
        escape: escaping function for scalar values
    """

    def __init__(
        self,
        scalars: Mapping[str, str],
        generators: Mapping[str, Callable[[], str]],
        escape: Callable[[str], str],
    ):
        self._scalars = scalars
        self._generators = generators
        self._escape = escape
        self._generated: dict[str, str] = {}

    def _generate(self, name: str) -> str:
        if name not in self._generated:
            self._generated[name] = self._generators[name]() or ''
        return self._generated[name]

    def is_present(self, name: str) -> bool:
        """True when the field is a string with non-whitespace content."""
        if name in self._scalars:
            value = self._scalars[name]
        elif name in self._generators:
            value = self._generate(name)
        else:
            return False
        return isinstance(value, str) and bool(value.strip())

    def value(self, name: str) -> str:
        if name in self._scalars:
            return self._escape(self._scalars[name] or '')
        if name in self._generators:
            return self._generate(name)
        return ''


def render_nodes(nodes: list[Node], context: SubstitutionContext) -> str:
    out = []
    for node in nodes:
        if isinstance(node, Text):
            out.append(node.value)
        elif isinstance(node, Placeholder):
            out.append(context.value(node.name))
        elif context.is_present(node.name):
            out.append(render_nodes(node.children, context))
    return ''.join(out)


def render_template(
    source: str, context: SubstitutionContext, template_id: str | None = None
) -> str:
    """Parse and evaluate `source` in one go."""
    return render_nodes(parse_template(source, template_id), context)
