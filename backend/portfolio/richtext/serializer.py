# portfolio/richtext/serializer.py
from html import escape

from .nodes import Document, Element, Text


def _attributes(attrs) -> str:
    parts = []
    for name, value in attrs.items():
        if value == "":
            parts.append(f" {name}")
        else:
            parts.append(f' {name}="{escape(str(value), quote=True)}"')
    return "".join(parts)


def to_html(node) -> str:
    """Serialize a node tree back to an HTML string."""
    if isinstance(node, Text):
        return escape(node.value, quote=False)

    if isinstance(node, Document):
        return "".join(to_html(child) for child in node.children)

    if isinstance(node, Element):
        opening = f"<{node.tag}{_attributes(node.attrs)}>"
        if node.is_void:
            return opening
        inner = "".join(to_html(child) for child in node.children)
        return f"{opening}{inner}</{node.tag}>"

    raise TypeError(f"Cannot serialize {type(node).__name__}")
