# portfolio/application/content/blog.py
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from portfolio.domain.invariants.blog_post import assert_blog_post, BLOG_POST_FIELD_TYPES
from portfolio.models.blog_post import BlogPost
from portfolio.normalizers.blog_post import normalize_blog_post
from portfolio.normalizers.pagination import normalize_pagination
from portfolio.richtext.editor import content_read_time, normalize_html
from portfolio.utils.filtering import facet_values, filter_records
from portfolio.utils.pagination import paginate_slice
from .entries import create_entry, delete_entry, prepare_slug, toggle_entry, update_entry

BLOG_FIELDS = (
    "title", "slug", "excerpt", "content", "image_url", "category", "tags",
    "read_time", "featured", "meta_title", "meta_description", "published",
    "published_at",
)

BLOG_DEFAULTS = {
    "tags": [],
    "featured": False,
    "published": False,
}

ADMIN_SEARCH_FIELDS = ("title", "excerpt")
ARCHIVE_SEARCH_FIELDS = ("title", "excerpt", "tags")
POSTS_PER_PAGE = 9
HOMEPAGE_LIMIT = 6
HOMEPAGE_SEARCH_FIELDS = ("title", "excerpt")


def prepare_blog_post(payload: Dict[str, Any], post: Optional[BlogPost]) -> Dict[str, Any]:
    """
    Derive slug and read time, and stamp `published_at` when the post moves
    from unpublished to published. Clients cannot set `published_at`.
    """
    prepare_slug(payload)
    payload.pop("published_at", None)

    if "content" in payload:
        payload["content"] = normalize_html(payload["content"])
        if "read_time" not in payload:
            payload["read_time"] = content_read_time(payload["content"])

    was_published = bool(post and post.published)
    if payload.get("published") is True and not was_published:
        payload["published_at"] = datetime.now(timezone.utc)

    return payload


def create_blog_post(data):
    return create_entry(
        BlogPost, data,
        fields=BLOG_FIELDS,
        validate=assert_blog_post,
        field_types=BLOG_POST_FIELD_TYPES,
        prepare=prepare_blog_post,
        defaults=BLOG_DEFAULTS,
    )


def update_blog_post(post_id, data):
    return update_entry(
        BlogPost, post_id, data,
        fields=BLOG_FIELDS,
        validate=assert_blog_post,
        field_types=BLOG_POST_FIELD_TYPES,
        prepare=prepare_blog_post,
    )


def delete_blog_post(post_id):
    delete_entry(BlogPost, post_id)


def toggle_blog_post(post_id):
    return toggle_entry(BlogPost, post_id)


def list_blog_posts(*, search=None, category=None):
    posts = [
        normalize_blog_post(p, admin=True, include_content=False)
        for p in BlogPost.query.order_by(BlogPost.created_at.desc()).all()
    ]
    items = filter_records(
        posts,
        search=search,
        search_fields=ADMIN_SEARCH_FIELDS,
        facets={"category": (category, ("category",))},
    )
    return normalize_pagination(items, categories=facet_values(posts, "category"))


def blog_archive(*, search=None, category=None, page=1, per_page=POSTS_PER_PAGE):
    """Published posts, newest first, filtered then sliced into pages."""
    posts = [
        normalize_blog_post(p, include_content=False)
        for p in (
            BlogPost.query
            .filter_by(published=True)
            .order_by(BlogPost.published_at.desc(), BlogPost.created_at.desc())
            .all()
        )
    ]
    filtered = filter_records(
        posts,
        search=search,
        search_fields=ARCHIVE_SEARCH_FIELDS,
        facets={"category": (category, ("category",))},
    )
    window, meta = paginate_slice(filtered, page=page, per_page=per_page)
    return normalize_pagination(
        window,
        meta=meta,
        categories=facet_values(posts, "category"),
    )


def homepage_posts(*, search=None, category=None, limit=HOMEPAGE_LIMIT):
    """
    The latest published posts for the homepage section.

    Categories come from those posts only. After filtering, the first
    featured post is split out and the remaining featured posts are dropped
    from `items`.
    """
    latest = [
        normalize_blog_post(p, include_content=False)
        for p in (
            BlogPost.query
            .filter_by(published=True)
            .order_by(BlogPost.published_at.desc(), BlogPost.created_at.desc())
            .limit(limit)
            .all()
        )
    ]
    filtered = filter_records(
        latest,
        search=search,
        search_fields=HOMEPAGE_SEARCH_FIELDS,
        facets={"category": (category, ("category",))},
    )
    featured = next((post for post in filtered if post["featured"]), None)

    return normalize_pagination(
        [post for post in filtered if not post["featured"]],
        featured=featured,
        categories=facet_values(latest, "category"),
    )


def find_published_post(slug):
    return (
        BlogPost.query
        .filter_by(slug=slug, published=True)
        .order_by(BlogPost.created_at.desc())
        .first()
    )
