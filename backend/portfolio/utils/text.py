import math
from slugify import slugify

WORDS_PER_MINUTE = 200


def generate_slug(title: str) -> str:
    """
    Derive a URL-safe slug from a title.

    "Hello, World!  Foo" -> "hello-world-foo". Applying it to its own
    output returns the same slug. Uniqueness is not checked.
    """
    return slugify(title or "", lowercase=True)


def count_words(content: str | None) -> int:
    return len((content or "").split())


def estimate_read_time(content: str | None, words_per_minute: int = WORDS_PER_MINUTE) -> int:
    """Minutes needed to read `content`, never less than 1."""
    return max(1, math.ceil(count_words(content) / words_per_minute))
