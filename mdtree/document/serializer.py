"""Serialize the document tree to canonical Markdown.

Rendering is a pure function of the tree: nodes are only read, never mutated,
and rendering the same tree twice yields byte-identical text. Blocks are
separated by exactly one blank line, list items are indented four spaces per
nesting level, and code fences are always longer than any backtick run they
enclose.
"""

import re

from loguru import logger

from mdtree.document.models import (
    AnyNode,
    Blockquote,
    Break,
    CodeBlock,
    Delete,
    Emphasis,
    Heading,
    Image,
    Inline,
    InlineCode,
    Link,
    List,
    ListItem,
    Paragraph,
    Root,
    Strong,
    Text,
    ThematicBreak,
)
from mdtree.exceptions import DocumentTooDeepError

DEFAULT_MAX_DEPTH = 100  # nesting levels, each node counts as one
LIST_INDENT = "    "
HARD_BREAK = "  \n"
THEMATIC_BREAK = "---"

_SPECIAL_CHARS = re.compile(r"([*_`~\\])")
# A run of '#' (optionally interleaved with blanks) at the start of a line reads as a heading marker.
# Lines start after '\n' or a bare '\r'; blanks are any whitespace except line ends.
_HEADING_MARKER = re.compile(r"(?:^|(?<=\r))([^\S\r\n]*#(?:[^\S\r\n]|#)*)", re.MULTILINE)
_BACKTICK_RUN = re.compile(r"`+")
_FENCE_RUN = re.compile(r"`{3,}")
_BLANK_LINES = re.compile(r"\n{2,}")
_EXCESS_BLANK_LINES = re.compile(r"\n{3,}")


def escape_text(text: str) -> str:
    """Escape literal text so it cannot be read back as Markdown syntax.

    Every ``* _ ` ~ \\`` gets a backslash, and a leading ``#`` run on any line
    is escaped so the text never turns into a heading.
    """
    escaped = _SPECIAL_CHARS.sub(r"\\\1", text)
    return _HEADING_MARKER.sub(lambda m: m.group(1).replace("#", "\\#"), escaped)


def _longest_run(pattern: re.Pattern[str], text: str) -> int:
    return max((len(run) for run in pattern.findall(text)), default=0)


def _render_inline_code(value: str) -> str:
    fence = "`" * (_longest_run(_BACKTICK_RUN, value) + 1)
    return f"{fence}{value}{fence}"


def _title_suffix(title: str | None) -> str:
    if not title:
        return ""
    escaped = title.replace('"', '\\"')
    return f' "{escaped}"'


def _render_code_block(node: CodeBlock) -> str:
    value = node.value.removesuffix("\n")
    fence = "`" * max(3, _longest_run(_FENCE_RUN, value) + 1)
    info = " ".join(part for part in (node.lang, node.meta) if part)
    opening = f"{fence} {info}" if info else fence
    return f"{opening}\n{value}\n{fence}"


def _indent_lines(text: str, indent: str) -> str:
    return "\n".join(f"{indent}{line}" for line in text.split("\n"))


class MarkdownSerializer:
    """Renders nodes of the document tree as Markdown.

    ``max_depth`` bounds how deep the tree may nest before rendering gives up
    with DocumentTooDeepError instead of exhausting the interpreter stack.
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH):
        self.max_depth = max_depth

    def render(self, node: AnyNode) -> str:
        """Render a node and all of its descendants."""
        return self._render(node, 0)

    def _check_depth(self, depth: int) -> None:
        if depth > self.max_depth:
            raise DocumentTooDeepError(self.max_depth)

    def _render(self, node: AnyNode, depth: int) -> str:
        self._check_depth(depth)

        match node:
            # inline
            case Text():
                return escape_text(node.value)
            case Break():
                return HARD_BREAK
            case InlineCode():
                return _render_inline_code(node.value)
            case Emphasis():
                return f"*{self._render_inlines(node.children, depth)}*"
            case Strong():
                return f"**{self._render_inlines(node.children, depth)}**"
            case Delete():
                return f"~~{self._render_inlines(node.children, depth)}~~"
            case Link():
                text = self._render_inlines(node.children, depth) or node.url
                return f"[{text}]({node.url}{_title_suffix(node.title)})"
            case Image():
                alt = escape_text(node.alt) if node.alt else ""
                return f"![{alt}]({node.url}{_title_suffix(node.title)})"
            # block
            case Paragraph():
                return _BLANK_LINES.sub("\n", self._render_inlines(node.children, depth))
            case Heading():
                level = min(6, max(1, node.depth))
                return f"{'#' * level} {self._render_inlines(node.children, depth)}".rstrip()
            case ThematicBreak():
                return THEMATIC_BREAK
            case CodeBlock():
                return _render_code_block(node)
            case Blockquote():
                inner = "\n\n".join(self._render(child, depth + 1) for child in node.children)
                return _indent_lines(inner, "> ")
            case List():
                return self._render_list(node, depth)
            case ListItem():
                return self._render_list_item(node, "", 0, ordered=False, start=1, depth=depth)
            case Root():
                return self._render_root(node, depth)
            case _:
                raise TypeError(f"Cannot render {type(node).__name__!r} as markdown")

    def _render_inlines(self, children: list[Inline], depth: int) -> str:
        return "".join(self._render(child, depth + 1) for child in children)

    def _render_list(self, node: List, depth: int) -> str:
        start = node.start if node.start is not None else 1
        items = [
            self._render_list_item(item, "", index, ordered=node.ordered, start=start, depth=depth + 1)
            for index, item in enumerate(node.children)
        ]
        return ("\n\n" if node.spread else "\n").join(items)

    def _render_list_item(
        self,
        item: ListItem,
        prefix: str,
        index: int,
        *,
        ordered: bool,
        start: int,
        depth: int,
    ) -> str:
        """Render one item: the bullet line, then any further blocks indented one level deeper.

        Nested lists are just further blocks, so they pick up the extra
        indentation without special handling.
        """
        self._check_depth(depth)

        bullet = f"{start + index}." if ordered else "-"
        task = "" if item.checked is None else ("[x] " if item.checked else "[ ] ")
        content = self._render(item.children[0], depth + 1) if item.children else ""
        bullet_line = f"{prefix}{bullet} {task}{content}".rstrip()

        if len(item.children) < 2:
            return bullet_line

        rest = "\n\n".join(self._render(child, depth + 1) for child in item.children[1:])
        return f"{bullet_line}\n{_indent_lines(rest, prefix + LIST_INDENT)}"

    def _render_root(self, root: Root, depth: int) -> str:
        parts: list[str] = []
        for child in root.children:
            block = self._render(child, depth + 1).rstrip()
            if not block:
                continue
            # Only separate when the text so far doesn't already end in a blank line
            if parts and not parts[-1].endswith("\n\n"):
                parts.append("\n\n")
            parts.append(block)

        document = _EXCESS_BLANK_LINES.sub("\n\n", "".join(parts)).rstrip() + "\n"
        logger.debug(f"Rendered document: {len(root.children)} blocks, {len(document)} chars")
        return document


def render(node: AnyNode, max_depth: int = DEFAULT_MAX_DEPTH) -> str:
    """Render any node of the document tree as Markdown.

    Args:
        node: A Root (for a whole document) or any node reachable from one
        max_depth: Nesting limit before DocumentTooDeepError is raised

    Returns:
        Markdown text. A Root always renders with exactly one trailing newline.
    """
    return MarkdownSerializer(max_depth=max_depth).render(node)
