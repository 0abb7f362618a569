"""Host integration: feed references to a parser's consume and link primitives."""

import re
from typing import Any, Callable, NamedTuple

from .links import Repo
from .tokenize import tokenize

# Inline markdown whose text must not be re-linked: code spans, link definitions,
# inline and reference links/images, autolinks
PROTECTED_PATTERN = re.compile(
    r'(`+)[\s\S]*?\1'
    r'|^ {0,3}\[[^\]]+\]:[^\n]*'
    r'|!?\[[^\]]*\]\([^)]*\)'
    r'|!?\[[^\]]*\]\[[^\]]*\]'
    r'|<https?://[^>\s]*>',
    re.MULTILINE,
)


class Position(NamedTuple):
    line: int
    column: int
    offset: int


class Eater:
    """Consume primitive for a run of text.

    `eat(subvalue)` advances past `subvalue` and returns a function that
    commits a node; `eat.now()` is the position of the next unconsumed
    character. Committed nodes are collected in `nodes`.
    """

    def __init__(self, value: str, line: int = 1, column: int = 1, offset: int = 0):
        self.value = value
        self.line = line
        self.column = column
        self.offset = offset
        self.nodes = []

    def now(self) -> Position:
        return Position(self.line, self.column, self.offset)

    def __call__(self, subvalue: str) -> Callable[[Any], Any]:
        if not self.value.startswith(subvalue, self.offset):
            raise ValueError(f"Incorrectly eaten value at offset {self.offset}: {subvalue!r}")

        newlines = subvalue.count('\n')
        if newlines:
            self.line += newlines
            self.column = len(subvalue) - subvalue.rindex('\n')
        else:
            self.column += len(subvalue)
        self.offset += len(subvalue)

        def apply(node):
            self.nodes.append(node)
            return node

        return apply


def augment(
    eat,
    value: str,
    repo: Repo,
    render_link: Callable,
    render_text: Callable,
    in_link: bool = False,
) -> list:
    """Commit the links and plain-text spans of `value`, in order.

    Args:
        eat: Consume primitive (see `Eater`)
        value: Plain inline text, starting at `eat.now()`
        repo: Repository that bare and user-qualified references resolve against
        render_link: Called as `render_link(True, href, text, None, position)`
        render_text: Called as `render_text(value, position)`
        in_link: Text already inside a link; everything is committed as text

    Returns:
        The committed nodes
    """
    nodes = []
    for token in tokenize(value, repo, start=eat.now().offset, in_link=in_link):
        now = eat.now()
        if token.link:
            node = render_link(True, token.link.href, token.link.text, None, now)
        else:
            node = render_text(token.value, now)
        nodes.append(eat(token.value)(node))
    return nodes


def markdown_link(is_link: bool, href: str, text: str, title: str | None, position: Position) -> str:
    if title:
        return f'[{text}]({href} "{title}")'
    return f'[{text}]({href})'


def markdown_text(value: str, position: Position) -> str:
    return value


def linkify(text: str, repo: Repo) -> str:
    """Replace GitHub references in `text` with markdown links.

    Existing inline and reference links, link definitions, autolinks and code
    spans are left intact, so linkifying already-linkified text is a no-op.
    Shortcut reference links (`[text]` alone) are not recognized.
    """
    eat = Eater(text)
    pos = 0
    for m in PROTECTED_PATTERN.finditer(text):
        augment(eat, text[pos:m.start()], repo, markdown_link, markdown_text)
        augment(eat, m.group(0), repo, markdown_link, markdown_text, in_link=True)
        pos = m.end()
    augment(eat, text[pos:], repo, markdown_link, markdown_text)
    return ''.join(eat.nodes)
