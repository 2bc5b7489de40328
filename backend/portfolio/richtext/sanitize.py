# portfolio/richtext/sanitize.py
import bleach

ALLOWED_TAGS = frozenset({
    'p', 'br', 'strong', 'em', 'b', 'i', 'u', 's', 'strike', 'sub', 'sup',
    'blockquote', 'code', 'pre', 'ul', 'ol', 'li',
    'h1', 'h2', 'h3', 'h4', 'h5', 'h6',
    'a', 'img', 'table', 'thead', 'tbody', 'tr', 'th', 'td', 'hr',
    'div', 'span', 'figure', 'iframe', 'video', 'source',
})

EMBED_HOSTS = (
    "https://www.youtube.com/embed/",
    "https://player.vimeo.com/video/",
)

IFRAME_ATTRIBUTES = {'width', 'height', 'frameborder', 'allowfullscreen'}


def _iframe_attribute(tag, name, value):
    if name == 'src':
        return value.startswith(EMBED_HOSTS)
    return name in IFRAME_ATTRIBUTES


ALLOWED_ATTRIBUTES = {
    '*': ['class'],
    'a': ['href', 'title', 'target', 'rel'],
    'img': ['src', 'alt', 'title', 'width', 'height'],
    'iframe': _iframe_attribute,
    'video': ['controls', 'width', 'height'],
    'source': ['src', 'type'],
    'th': ['colspan', 'rowspan'],
    'td': ['colspan', 'rowspan'],
}

ALLOWED_PROTOCOLS = frozenset({'http', 'https', 'mailto'})


def sanitize_html(html: str | None) -> str:
    """Strip tags, attributes and URL schemes outside the allow-lists."""
    return bleach.clean(
        html or "",
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
        strip_comments=True,
    )
