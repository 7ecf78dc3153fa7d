"""Node catalogue for the Markdown document tree.

Two disjoint recursive families make up a document:

- inline nodes (Text, Break, InlineCode, Emphasis, Strong, Delete, Link, Image)
  appear inside the running text of a block
- block nodes (Paragraph, Heading, ThematicBreak, CodeBlock, Blockquote, List)
  appear at the top level of a Root or inside a Blockquote / ListItem

Each node carries a frozen ``type`` tag using the mdast type names, so trees
round-trip through JSON and a node's kind can never change after creation.
Every other field stays mutable for the editing layer; assignments are
validated against the same unions used at construction.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class Node(BaseModel):
    """Base for every document node."""

    model_config = ConfigDict(validate_assignment=True)

    def to_markdown(self) -> str:
        """Render this node (and its descendants) as Markdown."""
        from mdtree.document.serializer import render

        return render(self)


# === INLINE NODES ===


class Text(Node):
    type: Literal["text"] = Field(default="text", frozen=True)
    value: str


class Break(Node):
    """Hard line break."""

    type: Literal["break"] = Field(default="break", frozen=True)


class InlineCode(Node):
    type: Literal["inlineCode"] = Field(default="inlineCode", frozen=True)
    value: str


class Emphasis(Node):
    type: Literal["emphasis"] = Field(default="emphasis", frozen=True)
    children: list["Inline"] = Field(default_factory=list)


class Strong(Node):
    type: Literal["strong"] = Field(default="strong", frozen=True)
    children: list["Inline"] = Field(default_factory=list)


class Delete(Node):
    """Strikethrough."""

    type: Literal["delete"] = Field(default="delete", frozen=True)
    children: list["Inline"] = Field(default_factory=list)


class Link(Node):
    type: Literal["link"] = Field(default="link", frozen=True)
    url: str
    title: str | None = None
    children: list["Inline"] = Field(default_factory=list)  # empty -> url is the link text


class Image(Node):
    type: Literal["image"] = Field(default="image", frozen=True)
    url: str
    alt: str | None = None
    title: str | None = None


Inline = Annotated[
    Text | Break | InlineCode | Emphasis | Strong | Delete | Link | Image,
    Field(discriminator="type"),
]


# === BLOCK NODES ===


class Paragraph(Node):
    type: Literal["paragraph"] = Field(default="paragraph", frozen=True)
    children: list[Inline] = Field(default_factory=list)


class Heading(Node):
    type: Literal["heading"] = Field(default="heading", frozen=True)
    depth: int = 1  # stored as given, clamped to 1-6 when rendered
    children: list[Inline] = Field(default_factory=list)


class ThematicBreak(Node):
    type: Literal["thematicBreak"] = Field(default="thematicBreak", frozen=True)


class CodeBlock(Node):
    type: Literal["code"] = Field(default="code", frozen=True)
    lang: str | None = None
    meta: str | None = None
    value: str = ""


class Blockquote(Node):
    type: Literal["blockquote"] = Field(default="blockquote", frozen=True)
    children: list["Block"] = Field(default_factory=list)


class ListItem(Node):
    """Item of a List. ``checked`` set (True or False) makes it a task item."""

    type: Literal["listItem"] = Field(default="listItem", frozen=True)
    checked: bool | None = None
    children: list["Block"] = Field(default_factory=list)


class List(Node):
    type: Literal["list"] = Field(default="list", frozen=True)
    ordered: bool = False
    start: int | None = None  # ordered lists number from 1 when unset
    spread: bool | None = None
    children: list[ListItem] = Field(default_factory=list)


Block = Annotated[
    Paragraph | Heading | ThematicBreak | CodeBlock | Blockquote | List,
    Field(discriminator="type"),
]


# === DOCUMENT ===


class Root(Node):
    """The document: an ordered sequence of top-level blocks."""

    type: Literal["root"] = Field(default="root", frozen=True)
    children: list[Block] = Field(default_factory=list)


# Update forward references
Emphasis.model_rebuild()
Strong.model_rebuild()
Delete.model_rebuild()
Link.model_rebuild()
Paragraph.model_rebuild()
Heading.model_rebuild()
Blockquote.model_rebuild()
ListItem.model_rebuild()
List.model_rebuild()
Root.model_rebuild()


InlineNode = Text | Break | InlineCode | Emphasis | Strong | Delete | Link | Image
BlockNode = Paragraph | Heading | ThematicBreak | CodeBlock | Blockquote | List
AnyNode = InlineNode | BlockNode | ListItem | Root
