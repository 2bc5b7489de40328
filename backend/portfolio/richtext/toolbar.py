# portfolio/richtext/toolbar.py
from typing import Any, Callable, Dict, Iterable
from urllib.parse import parse_qs, urlparse

from portfolio.domain.invariants.exceptions import InvariantViolation
from .nodes import Element, INLINE_FORMAT_TAGS, Text

EMBED_WIDTH = "560"
EMBED_HEIGHT = "315"


def _inline(tag):
    def build(text: str) -> Element:
        return Element(tag, children=[Text(text)])
    return build


bold = _inline("strong")
italic = _inline("em")
underline = _inline("u")
strike = _inline("s")


def paragraph(text: str) -> Element:
    return Element("p", children=[Text(text)])


def heading(level: int, text: str) -> Element:
    if level not in range(1, 7):
        raise InvariantViolation(f"Heading level must be 1-6, got {level}")
    return Element(f"h{level}", children=[Text(text)])


def blockquote(text: str) -> Element:
    return Element("blockquote", children=[Text(text)])


def code_block(code: str) -> Element:
    return Element("pre", children=[Element("code", children=[Text(code)])])


def _list(tag, items: Iterable[str]) -> Element:
    return Element(tag, children=[Element("li", children=[Text(item)]) for item in items])


def bullet_list(items: Iterable[str]) -> Element:
    return _list("ul", items)


def numbered_list(items: Iterable[str]) -> Element:
    return _list("ol", items)


def link(url: str, text: str | None = None) -> Element:
    if not url:
        raise InvariantViolation("Link URL is required")
    return Element("a", {"href": url}, [Text(text or url)])


def image(url: str, alt: str = "") -> Element:
    if not url:
        raise InvariantViolation("Image URL is required")
    return Element("img", {"src": url, "alt": alt})


def table(rows: int = 3, cols: int = 3) -> Element:
    """First row holds "Header" cells, the rest "Cell" cells."""
    if rows < 1 or cols < 1:
        raise InvariantViolation("A table needs at least one row and one column")

    def row(cell_tag, label):
        return Element("tr", children=[
            Element(cell_tag, children=[Text(label)]) for _ in range(cols)
        ])

    # Explicit sections so the sanitizer's parser keeps the structure as built
    grid = Element("table", children=[Element("thead", children=[row("th", "Header")])])
    if rows > 1:
        grid.append(Element("tbody", children=[row("td", "Cell") for _ in range(rows - 1)]))
    return grid


def _iframe(src: str) -> Element:
    return Element("iframe", {
        "src": src,
        "width": EMBED_WIDTH,
        "height": EMBED_HEIGHT,
        "frameborder": "0",
        "allowfullscreen": "",
    })


def youtube_id(url: str) -> str | None:
    parsed = urlparse(url)
    if "youtu.be" in parsed.netloc:
        return parsed.path.rstrip("/").split("/")[-1] or None
    return (parse_qs(parsed.query).get("v") or [None])[0]


def video_embed(url: str) -> Element:
    """
    YouTube and Vimeo links become player iframes; any other URL is
    treated as a direct mp4 source.
    """
    if not url:
        raise InvariantViolation("Video URL is required")

    wrapper = Element("div", {"class": "video-embed"})

    if "youtube.com" in url or "youtu.be" in url:
        video_id = youtube_id(url)
        if not video_id:
            raise InvariantViolation(f"Could not find a YouTube video id in {url}")
        return wrapper.append(_iframe(f"https://www.youtube.com/embed/{video_id}"))

    if "vimeo.com" in url:
        video_id = urlparse(url).path.rstrip("/").split("/")[-1]
        return wrapper.append(_iframe(f"https://player.vimeo.com/video/{video_id}"))

    return wrapper.append(Element(
        "video",
        {"controls": "", "width": EMBED_WIDTH, "height": EMBED_HEIGHT},
        [
            Element("source", {"src": url, "type": "video/mp4"}),
            Text("Your browser does not support the video tag."),
        ],
    ))


def horizontal_rule() -> Element:
    return Element("hr")


def clear_formatting(node):
    """Unwrap inline formatting elements, keeping their text and structure."""
    unwrapped = []
    for child in node.children:
        if isinstance(child, Element):
            clear_formatting(child)
            if child.tag in INLINE_FORMAT_TAGS:
                unwrapped.extend(child.children)
                continue
        unwrapped.append(child)

    merged = []
    for child in unwrapped:
        if isinstance(child, Text) and merged and isinstance(merged[-1], Text):
            merged[-1] = Text(merged[-1].value + child.value)
        else:
            merged.append(child)
    node.children = merged
    return node


def _string(spec: Dict[str, Any], key: str, default: str | None = None) -> str:
    value = spec.get(key, default) if default is not None else spec[key]
    if not isinstance(value, str):
        raise InvariantViolation(f"'{key}' must be a string")
    return value


def _strings(spec: Dict[str, Any], key: str) -> list[str]:
    items = spec[key]
    if not isinstance(items, list) or not all(isinstance(item, str) for item in items):
        raise InvariantViolation(f"'{key}' must be a list of strings")
    return items


def _optional_string(spec: Dict[str, Any], key: str) -> str | None:
    if spec.get(key) is None:
        return None
    return _string(spec, key)


BLOCK_BUILDERS: Dict[str, Callable[..., Any]] = {
    "bold": lambda spec: bold(_string(spec, "text")),
    "italic": lambda spec: italic(_string(spec, "text")),
    "underline": lambda spec: underline(_string(spec, "text")),
    "strike": lambda spec: strike(_string(spec, "text")),
    "paragraph": lambda spec: paragraph(_string(spec, "text")),
    "heading": lambda spec: heading(int(spec.get("level", 2)), _string(spec, "text")),
    "blockquote": lambda spec: blockquote(_string(spec, "text")),
    "code": lambda spec: code_block(_string(spec, "code")),
    "bullet_list": lambda spec: bullet_list(_strings(spec, "items")),
    "numbered_list": lambda spec: numbered_list(_strings(spec, "items")),
    "link": lambda spec: link(_string(spec, "url"), _optional_string(spec, "text")),
    "image": lambda spec: image(_string(spec, "url"), _string(spec, "alt", "")),
    "table": lambda spec: table(int(spec.get("rows", 3)), int(spec.get("cols", 3))),
    "video": lambda spec: video_embed(_string(spec, "url")),
    "hr": lambda spec: horizontal_rule(),
}


def build_block(spec: Dict[str, Any]) -> Element:
    """Build a toolbar block from a payload such as {"type": "table", "rows": 2}."""
    block_type = (spec or {}).get("type")
    builder = BLOCK_BUILDERS.get(block_type)
    if builder is None:
        raise InvariantViolation(f"Unknown block type: {block_type}")

    try:
        return builder(spec)
    except KeyError as exc:
        raise InvariantViolation(f"Block '{block_type}' is missing '{exc.args[0]}'") from exc
    except (TypeError, ValueError) as exc:
        raise InvariantViolation(f"Invalid '{block_type}' block: {exc}") from exc

