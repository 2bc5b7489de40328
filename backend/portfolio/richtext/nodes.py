# portfolio/richtext/nodes.py
from __future__ import annotations

from typing import Dict, List, Optional, Union

VOID_TAGS = {"br", "hr", "img", "source"}
BLOCK_TAGS = {
    "p", "h1", "h2", "h3", "h4", "h5", "h6", "blockquote", "pre",
    "ul", "ol", "li", "table", "thead", "tbody", "tr", "th", "td",
    "div", "hr", "figure", "iframe", "video",
}
INLINE_FORMAT_TAGS = {"b", "strong", "i", "em", "u", "s", "strike", "span", "font", "sub", "sup"}


class Text:
    __slots__ = ("value",)

    def __init__(self, value: str):
        self.value = value

    def __eq__(self, other):
        return isinstance(other, Text) and other.value == self.value

    def __repr__(self):
        return f"Text({self.value!r})"


class Element:
    __slots__ = ("tag", "attrs", "children")

    def __init__(
        self,
        tag: str,
        attrs: Optional[Dict[str, str]] = None,
        children: Optional[List["Node"]] = None,
    ):
        self.tag = tag.lower()
        self.attrs = dict(attrs or {})
        self.children = list(children or [])

    @property
    def is_void(self) -> bool:
        return self.tag in VOID_TAGS

    def append(self, node: "Node") -> "Element":
        self.children.append(node)
        return self

    def __eq__(self, other):
        return (
            isinstance(other, Element)
            and other.tag == self.tag
            and other.attrs == self.attrs
            and other.children == self.children
        )

    def __repr__(self):
        return f"Element({self.tag!r}, {self.attrs!r}, {self.children!r})"


class Document:
    """Root of an editable rich-text tree."""

    __slots__ = ("children",)

    def __init__(self, children: Optional[List["Node"]] = None):
        self.children = list(children or [])

    def append(self, node: "Node") -> "Document":
        self.children.append(node)
        return self

    def __eq__(self, other):
        return isinstance(other, Document) and other.children == self.children

    def __repr__(self):
        return f"Document({self.children!r})"


Node = Union[Text, Element]


def iter_text(node) -> List[str]:
    if isinstance(node, Text):
        return [node.value]
    parts: List[str] = []
    for child in node.children:
        parts.extend(iter_text(child))
        if isinstance(child, Element) and child.tag in BLOCK_TAGS | {"br"}:
            parts.append(" ")
    return parts


def plain_text(node) -> str:
    return " ".join("".join(iter_text(node)).split())
