# portfolio/richtext/editor.py
from enum import Enum

from portfolio.domain.invariants.exceptions import InvariantViolation
from portfolio.utils.text import count_words, estimate_read_time
from .nodes import plain_text
from .parser import parse_html
from .sanitize import sanitize_html
from .serializer import to_html
from .toolbar import clear_formatting


class ViewMode(str, Enum):
    VISUAL = "visual"
    SOURCE = "source"
    PREVIEW = "preview"


class EditorModeError(InvariantViolation):
    pass


def load_document(html):
    return parse_html(sanitize_html(html))


def content_text(html):
    """Readable text of stored HTML, as counted for word count and read time."""
    return plain_text(parse_html(html))


def content_read_time(html):
    return estimate_read_time(content_text(html))


def normalize_html(html):
    """Sanitize, parse and re-serialize stored rich-text content."""
    if html is None:
        return None
    return to_html(load_document(html))


class RichTextEditor:
    """
    Rich-text content held as a node tree.

    The editor is always in exactly one view mode. Blocks are inserted in
    visual mode, raw HTML is replaced in source mode, and preview mode is
    read-only. Its output is the serialized HTML string.
    """

    def __init__(self, html: str = "", mode: ViewMode = ViewMode.VISUAL):
        self.document = load_document(html)
        self.mode = ViewMode(mode)

    def switch_to(self, mode) -> "RichTextEditor":
        try:
            self.mode = ViewMode(mode)
        except ValueError as exc:
            raise EditorModeError(f"Unknown view mode: {mode}") from exc
        return self

    def _require(self, mode: ViewMode, action: str) -> None:
        if self.mode is not mode:
            raise EditorModeError(
                f"Cannot {action} in {self.mode.value} mode; switch to {mode.value} first"
            )

    def insert(self, node) -> "RichTextEditor":
        self._require(ViewMode.VISUAL, "insert content")
        # Built nodes pass the same allow-list as loaded HTML
        self.document.children.extend(load_document(to_html(node)).children)
        return self

    def clear_formatting(self) -> "RichTextEditor":
        self._require(ViewMode.VISUAL, "clear formatting")
        clear_formatting(self.document)
        return self

    def replace_source(self, html: str) -> "RichTextEditor":
        self._require(ViewMode.SOURCE, "edit HTML source")
        self.document = load_document(html)
        return self

    def preview(self) -> str:
        self._require(ViewMode.PREVIEW, "render a preview")
        return self.html

    @property
    def html(self) -> str:
        return to_html(self.document)

    @property
    def text(self) -> str:
        return plain_text(self.document)

    @property
    def word_count(self) -> int:
        return count_words(self.text)

    @property
    def read_time(self) -> int:
        return estimate_read_time(self.text)
