"""Built-in sample document.

A sandwich-themed guide that exercises most of the node catalogue: headings of
several depths, mixed inline formatting, a thematic break, a blockquote holding
a list, task items with a nested ordered list, a code block, a titled link and
strikethrough.
"""

from mdtree.document.models import (
    Blockquote,
    Break,
    CodeBlock,
    Delete,
    Emphasis,
    Heading,
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

SAMPLE_TITLE = "The Definitive Guide to Sandwiches"

_RECIPE_JSON = """{
  "name": "Grilled Halloumi Stack",
  "components": ["ciabatta", "halloumi", "harissa yogurt", "roasted peppers", "mint"],
  "toasting": "medium"
}"""


def _para(*children) -> Paragraph:
    return Paragraph(children=list(children))


def _item(text: str, *, checked: bool | None = None, nested: List | None = None) -> ListItem:
    children = [_para(Text(value=text))]
    if nested is not None:
        children.append(nested)
    return ListItem(checked=checked, children=children)


def _lead_item(lead: str, rest: str) -> ListItem:
    return ListItem(children=[_para(Strong(children=[Text(value=lead)]), Text(value=rest))])


def build_sample_document() -> Root:
    """Build the sample document. Every call returns a new, independent tree."""
    toasting = List(
        ordered=True,
        start=1,
        children=[
            _item("Light toast: preserves tenderness"),
            _item("Medium toast: adds structure"),
            _item("Dark toast: risks bitterness"),
        ],
    )

    return Root(
        children=[
            Heading(depth=1, children=[Text(value=SAMPLE_TITLE)]),
            _para(
                Text(value="A "),
                Strong(children=[Text(value="sandwich")]),
                Text(
                    value=" is a beautifully adaptable meal: from humble PB&J to towering gourmet constructions. "
                    "This guide explores structure, technique, and creativity."
                ),
            ),
            ThematicBreak(),
            # Origins
            Heading(depth=2, children=[Text(value="1. Origins & Definition")]),
            _para(
                Text(
                    value="Legend credits John Montagu, the 4th Earl of Sandwich, with popularizing the form: "
                    "meat between bread enabling continued play at the gaming table."
                ),
                Break(),
                Emphasis(children=[Text(value="But:")]),
                Text(value=" variations existed globally far earlier."),
            ),
            Blockquote(
                children=[
                    _para(Text(value="“Two slices of bread may conceal infinite possibility.”")),
                    List(
                        ordered=False,
                        children=[
                            _item("Texture contrast matters."),
                            _item("Balance salt, fat, acid, and crunch."),
                        ],
                    ),
                ]
            ),
            # Bread
            Heading(depth=2, children=[Text(value="2. Bread Selection")]),
            _para(
                Text(value="Bread is both vessel and ingredient. It should "),
                Emphasis(children=[Text(value="support")]),
                Text(value=" fillings without dominating."),
            ),
            List(
                ordered=False,
                children=[
                    _item("Sourdough (structure + tang)", checked=True),
                    _item("Ciabatta (airy crumb, crisp exterior)", checked=False),
                    _item("Brioche (soft, subtly sweet)", nested=toasting),
                ],
            ),
            # Components
            Heading(depth=2, children=[Text(value="3. Core Components")]),
            _para(
                Text(value="A balanced sandwich layers: "),
                InlineCode(value="foundation -> moisture barrier -> protein -> accents -> greens -> lid"),
                Text(value="."),
            ),
            List(
                ordered=True,
                start=1,
                children=[
                    _lead_item("Moisture Control:", " butter, aioli, or dried greens can prevent soggy bread."),
                    _lead_item("Protein:", " from roasted vegetables to seared halloumi or classic deli meats."),
                    _lead_item("Crunch:", " pickled onions, shredded cabbage, crisp lettuce."),
                ],
            ),
            CodeBlock(lang="json", value=_RECIPE_JSON),
            _para(
                Text(value="For deeper sandwich taxonomy explore the "),
                Link(
                    url="https://en.wikipedia.org/wiki/Sandwich",
                    title="Wikipedia Sandwich Entry",
                    children=[Text(value="Sandwich encyclopedia entry")],
                ),
                Text(value="."),
            ),
            _para(
                Text(value="Avoid "),
                Delete(children=[Text(value="excessive sogginess")]),
                Text(value="; strive for "),
                Emphasis(children=[Text(value="structural integrity")]),
                Text(value=" with flavor contrast."),
            ),
            Heading(depth=3, children=[Text(value="Final Thought")]),
            _para(Text(value="Great sandwiches are iterative: taste, adjust, refine.")),
        ]
    )
