"""Markdown document tree and its serializer."""

from mdtree.document.models import (
    AnyNode,
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
from mdtree.document.sample import build_sample_document
from mdtree.document.serializer import MarkdownSerializer, escape_text, render
from mdtree.document.transformer import (
    DocumentTransformer,
    markdown_to_document,
    parse_markdown,
    transform_to_document,
)

__all__ = [
    # Serializer
    "render",
    "escape_text",
    "MarkdownSerializer",
    # Parser / transformer
    "parse_markdown",
    "DocumentTransformer",
    "transform_to_document",
    "markdown_to_document",
    # Sample
    "build_sample_document",
    # Models
    "AnyNode",
    "Inline",
    "Block",
    "Root",
    "Text",
    "Break",
    "InlineCode",
    "Emphasis",
    "Strong",
    "Delete",
    "Link",
    "Image",
    "Paragraph",
    "Heading",
    "ThematicBreak",
    "CodeBlock",
    "Blockquote",
    "List",
    "ListItem",
]
