# portfolio/richtext/parser.py
from html.parser import HTMLParser
from typing import List, Union

from .nodes import Document, Element, Text


class _TreeBuilder(HTMLParser):
    """
    Build a node tree from an HTML fragment.

    Unmatched end tags are ignored and unclosed elements are closed at the
    end of input, so any string yields a tree.
    """

    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.document = Document()
        self._stack: List[Union[Document, Element]] = [self.document]

    @property
    def _current(self):
        return self._stack[-1]

    def handle_starttag(self, tag, attrs):
        element = Element(tag, {name: value or "" for name, value in attrs})
        self._current.append(element)
        if not element.is_void:
            self._stack.append(element)

    def handle_startendtag(self, tag, attrs):
        self._current.append(Element(tag, {name: value or "" for name, value in attrs}))

    def handle_endtag(self, tag):
        tag = tag.lower()
        for index in range(len(self._stack) - 1, 0, -1):
            node = self._stack[index]
            if isinstance(node, Element) and node.tag == tag:
                del self._stack[index:]
                return

    def handle_data(self, data):
        if not data:
            return
        children = self._current.children
        if children and isinstance(children[-1], Text):
            children[-1].value += data
        else:
            children.append(Text(data))


def parse_html(html: str | None) -> Document:
    builder = _TreeBuilder()
    builder.feed(html or "")
    builder.close()
    return builder.document
