from portfolio.models.code_snippet import SNIPPET_DIFFICULTIES, SNIPPET_USAGE_FREQUENCIES
from .content import assert_required, assert_choice, assert_string_list

def assert_snippet(snippet):
    assert_required(snippet, ("title", "slug", "code", "language"))
    assert_choice(snippet, "difficulty", SNIPPET_DIFFICULTIES)
    assert_choice(snippet, "usage_frequency", SNIPPET_USAGE_FREQUENCIES)
    assert_string_list(snippet, "tags")

SNIPPET_FIELD_TYPES = {
    "title": str, "slug": str, "description": str, "code": str,
    "language": str, "category": str, "tags": list, "difficulty": str,
    "usage_frequency": str, "featured": bool, "published": bool,
}
