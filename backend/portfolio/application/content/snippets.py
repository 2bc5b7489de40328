# portfolio/application/content/snippets.py
from typing import Any, Dict, Optional

from portfolio.domain.invariants.snippet import assert_snippet, SNIPPET_FIELD_TYPES
from portfolio.models.code_snippet import CodeSnippet
from portfolio.normalizers.pagination import normalize_pagination
from portfolio.normalizers.snippet import normalize_snippet
from portfolio.utils.filtering import facet_values, filter_records
from .entries import create_entry, delete_entry, prepare_slug, toggle_entry, update_entry

SNIPPET_FIELDS = (
    "title", "slug", "description", "code", "language", "category", "tags",
    "difficulty", "usage_frequency", "featured", "published",
)

SNIPPET_DEFAULTS = {
    "tags": [],
    "difficulty": "beginner",
    "usage_frequency": "medium",
    "featured": False,
    "published": False,
}

ADMIN_SEARCH_FIELDS = ("title", "description")
PUBLIC_SEARCH_FIELDS = ("title", "description", "tags")
FEATURED_LIMIT = 3
HOMEPAGE_LIMIT = 6


def prepare_snippet(payload: Dict[str, Any], snippet: Optional[CodeSnippet]) -> Dict[str, Any]:
    return prepare_slug(payload)


def create_snippet(data):
    return create_entry(
        CodeSnippet, data,
        fields=SNIPPET_FIELDS,
        validate=assert_snippet,
        field_types=SNIPPET_FIELD_TYPES,
        prepare=prepare_snippet,
        defaults=SNIPPET_DEFAULTS,
    )


def update_snippet(snippet_id, data):
    return update_entry(
        CodeSnippet, snippet_id, data,
        fields=SNIPPET_FIELDS,
        validate=assert_snippet,
        field_types=SNIPPET_FIELD_TYPES,
        prepare=prepare_snippet,
    )


def delete_snippet(snippet_id):
    delete_entry(CodeSnippet, snippet_id)


def toggle_snippet(snippet_id):
    return toggle_entry(CodeSnippet, snippet_id)


def list_snippets(*, search=None, language=None):
    snippets = [
        normalize_snippet(s, admin=True)
        for s in CodeSnippet.query.order_by(CodeSnippet.created_at.desc()).all()
    ]
    items = filter_records(
        snippets,
        search=search,
        search_fields=ADMIN_SEARCH_FIELDS,
        facets={"language": (language, ("language",))},
    )
    return normalize_pagination(items, languages=facet_values(snippets, "language"))


def list_published_snippets(*, search=None, language=None, category=None):
    snippets = [
        normalize_snippet(s)
        for s in (
            CodeSnippet.query
            .filter_by(published=True)
            .order_by(CodeSnippet.created_at.desc())
            .all()
        )
    ]
    items = filter_records(
        snippets,
        search=search,
        search_fields=PUBLIC_SEARCH_FIELDS,
        facets={
            "language": (language, ("language",)),
            "category": (category, ("category",)),
        },
    )
    return normalize_pagination(
        items,
        languages=facet_values(snippets, "language"),
        categories=facet_values(snippets, "category"),
    )


def featured_snippets(limit=FEATURED_LIMIT):
    snippets = (
        CodeSnippet.query
        .filter_by(published=True, featured=True)
        .order_by(CodeSnippet.created_at.desc())
        .limit(limit)
        .all()
    )
    return normalize_pagination(snippets, normalize_snippet)


def latest_snippets(limit=HOMEPAGE_LIMIT):
    """Newest published snippets, featured or not."""
    snippets = (
        CodeSnippet.query
        .filter_by(published=True)
        .order_by(CodeSnippet.created_at.desc())
        .limit(limit)
        .all()
    )
    return normalize_pagination(snippets, normalize_snippet)


def find_published_snippet(slug):
    return (
        CodeSnippet.query
        .filter_by(slug=slug, published=True)
        .order_by(CodeSnippet.created_at.desc())
        .first()
    )
