"""Transform a markdown AST into the document tree.

Walks the markdown-it-py SyntaxTreeNode and builds a Root of the node catalogue
in mdtree.document.models. This is how an initial document is built from
existing Markdown text; the serializer is the inverse direction.
"""

import re
from functools import lru_cache
from typing import cast

from loguru import logger
from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from mdtree.document.models import (
    Block,
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
from mdtree.exceptions import UnsupportedNodeError

# GFM task list marker at the very start of an item's first paragraph
_TASK_MARKER = re.compile(r"^\[([ xX])\](?: |$)")


@lru_cache(maxsize=1)
def _markdown_parser() -> MarkdownIt:
    """CommonMark plus GFM strikethrough, the syntax the node catalogue can hold.

    Tables stay disabled so their source reads back as paragraph text. With
    text_join off, entities and backslash escapes arrive as separate
    ``text_special`` tokens and keep their source form.
    """
    return MarkdownIt("commonmark").enable("strikethrough").disable("text_join")


def parse_markdown(text: str) -> SyntaxTreeNode:
    """Parse markdown text into a markdown-it syntax tree."""
    return SyntaxTreeNode(_markdown_parser().parse(text))


def _merge_text(nodes: list[Inline]) -> list[Inline]:
    """Join adjacent Text nodes into one."""
    merged: list[Inline] = []
    for node in nodes:
        if isinstance(node, Text) and merged and isinstance(merged[-1], Text):
            merged[-1] = Text(value=merged[-1].value + node.value)
        else:
            merged.append(node)
    return merged


class DocumentTransformer:
    """Transforms markdown AST to a document Root."""

    def __init__(self, strict: bool = False):
        self.strict = strict
        self._skipped: list[str] = []

    def transform(self, ast: SyntaxTreeNode) -> Root:
        """Transform AST root to a document Root."""
        self._skipped = []
        root = Root(children=self._transform_children(ast))
        if self._skipped:
            logger.warning(f"Skipped {len(self._skipped)} unsupported markdown nodes: {sorted(set(self._skipped))}")
        return root

    def _transform_children(self, node: SyntaxTreeNode) -> list[Block]:
        """Transform all block children of a node."""
        blocks: list[Block] = []
        for child in node.children:
            block = self._transform_node(child)
            if block is not None:
                blocks.append(block)
        return blocks

    def _transform_node(self, node: SyntaxTreeNode) -> Block | None:
        """Transform a single block-level AST node, None if the model has no counterpart."""
        handlers = {
            "heading": self._transform_heading,
            "paragraph": self._transform_paragraph,
            "fence": self._transform_code,
            "code_block": self._transform_code,
            "bullet_list": self._transform_list,
            "ordered_list": self._transform_list,
            "blockquote": self._transform_blockquote,
            "hr": self._transform_hr,
        }

        handler = handlers.get(node.type)
        if handler:
            return handler(node)

        if self.strict:
            raise UnsupportedNodeError(node.type)
        logger.debug(f"Skipping unsupported block node {node.type!r}")
        self._skipped.append(node.type)
        return None

    # === BLOCKS ===

    def _transform_heading(self, node: SyntaxTreeNode) -> Heading:
        depth = int(node.tag[1])  # h1 -> 1, h2 -> 2, etc.
        inline = node.children[0] if node.children else None
        return Heading(depth=depth, children=self._transform_inline(inline))

    def _transform_paragraph(self, node: SyntaxTreeNode) -> Paragraph:
        inline = node.children[0] if node.children else None
        return Paragraph(children=self._transform_inline(inline))

    def _transform_code(self, node: SyntaxTreeNode) -> CodeBlock:
        """Transform fenced or indented code block. The info string splits into lang and meta."""
        info = (node.info or "").strip() if node.type == "fence" else ""
        lang, _, meta = info.partition(" ")
        return CodeBlock(
            lang=lang or None,
            meta=meta.strip() or None,
            value=(node.content or "").removesuffix("\n"),
        )

    def _transform_list(self, node: SyntaxTreeNode) -> List:
        """Transform list (bullet or ordered) node.

        markdown-it hides the paragraphs of tight lists, so any visible paragraph
        means the list is spread.
        """
        ordered = node.type == "ordered_list"
        start = cast(int | None, node.attrs.get("start")) if ordered else None

        items = [self._transform_list_item(item) for item in node.children]
        spread = any(
            child.type == "paragraph" and not child.hidden for item in node.children for child in item.children
        )
        return List(ordered=ordered, start=start, spread=spread, children=items)

    def _transform_list_item(self, node: SyntaxTreeNode) -> ListItem:
        children = self._transform_children(node)
        checked = None

        if children and isinstance(children[0], Paragraph):
            first = children[0]
            if first.children and isinstance(first.children[0], Text):
                marker = _TASK_MARKER.match(first.children[0].value)
                if marker:
                    checked = marker.group(1) in "xX"
                    remainder = first.children[0].value[marker.end() :]
                    inlines = first.children[1:]
                    first.children = [Text(value=remainder), *inlines] if remainder else inlines

        return ListItem(checked=checked, children=children)

    def _transform_blockquote(self, node: SyntaxTreeNode) -> Blockquote:
        return Blockquote(children=self._transform_children(node))

    def _transform_hr(self, node: SyntaxTreeNode) -> ThematicBreak:
        return ThematicBreak()

    # === INLINE CONTENT ===

    def _transform_inline(self, inline: SyntaxTreeNode | None) -> list[Inline]:
        """Transform the children of an ``inline`` node."""
        if not inline or not inline.children:
            return []
        return self._transform_inline_children(inline)

    def _transform_inline_children(self, node: SyntaxTreeNode) -> list[Inline]:
        result: list[Inline] = []
        for child in node.children:
            result.extend(self._transform_inline_node(child))
        return _merge_text(result)

    def _transform_inline_node(self, node: SyntaxTreeNode) -> list[Inline]:
        """Transform a single inline node."""
        if node.type == "text":
            return [Text(value=node.content or "")]
        elif node.type == "text_special":
            # entities keep their encoded source, escapes become the literal character
            if node.info == "entity":
                return [Text(value=node.markup)]
            return [Text(value=node.content or "")]
        elif node.type == "strong":
            return [Strong(children=self._transform_inline_children(node))]
        elif node.type == "em":
            return [Emphasis(children=self._transform_inline_children(node))]
        elif node.type == "s":  # strikethrough
            return [Delete(children=self._transform_inline_children(node))]
        elif node.type == "code_inline":
            return [InlineCode(value=node.content or "")]
        elif node.type == "link":
            return [
                Link(
                    url=cast(str, node.attrs.get("href", "")),
                    title=cast(str | None, node.attrs.get("title")),
                    children=self._transform_inline_children(node),
                )
            ]
        elif node.type == "image":
            # Alt text is in node.content, not attrs['alt']
            return [
                Image(
                    url=cast(str, node.attrs.get("src", "")),
                    alt=node.content or None,
                    title=cast(str | None, node.attrs.get("title")),
                )
            ]
        elif node.type == "softbreak":
            return [Text(value="\n")]
        elif node.type == "hardbreak":
            return [Break()]
        else:
            # html_inline and unknown types keep their raw text
            if node.content:
                return [Text(value=node.content)]
            return []


def transform_to_document(ast: SyntaxTreeNode, strict: bool = False) -> Root:
    """Transform markdown AST to a document Root.

    Args:
        ast: Root SyntaxTreeNode from parse_markdown
        strict: Raise UnsupportedNodeError on blocks the model can't hold instead
            of skipping them.
    """
    return DocumentTransformer(strict=strict).transform(ast)


def markdown_to_document(text: str, strict: bool = False) -> Root:
    """Parse markdown text straight into a document Root."""
    return transform_to_document(parse_markdown(text), strict=strict)
