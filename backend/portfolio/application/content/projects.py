# portfolio/application/content/projects.py
from typing import Any, Dict, Optional

from portfolio.domain.invariants.exceptions import InvariantViolation
from portfolio.domain.invariants.project import assert_project, PROJECT_FIELD_TYPES
from portfolio.models.project import Project
from portfolio.normalizers.pagination import normalize_pagination
from portfolio.normalizers.project import normalize_project
from portfolio.richtext.editor import normalize_html
from portfolio.utils.dates import parse_date
from portfolio.utils.filtering import facet_values, filter_records
from .entries import create_entry, delete_entry, prepare_slug, toggle_entry, update_entry

PROJECT_FIELDS = (
    "title", "slug", "description", "content", "image_url", "technologies",
    "category", "subcategory", "status", "client", "duration", "live_url",
    "github_url", "highlights", "date_completed", "featured",
    "meta_title", "meta_description", "published",
)

PROJECT_DEFAULTS = {
    "technologies": [],
    "highlights": [],
    "status": "completed",
    "featured": False,
    "published": False,
}

ADMIN_SEARCH_FIELDS = ("title", "description")
PUBLIC_SEARCH_FIELDS = ("title", "description", "technologies")
FEATURED_LIMIT = 3
PROJECT_SORTS = ("date", "title", "featured")


def prepare_project(payload: Dict[str, Any], project: Optional[Project]) -> Dict[str, Any]:
    prepare_slug(payload)
    if "content" in payload:
        payload["content"] = normalize_html(payload["content"])
    if "date_completed" in payload:
        payload["date_completed"] = parse_date(payload["date_completed"], "date_completed")
    return payload


def create_project(data):
    return create_entry(
        Project, data,
        fields=PROJECT_FIELDS,
        validate=assert_project,
        field_types=PROJECT_FIELD_TYPES,
        prepare=prepare_project,
        defaults=PROJECT_DEFAULTS,
    )


def update_project(project_id, data):
    return update_entry(
        Project, project_id, data,
        fields=PROJECT_FIELDS,
        validate=assert_project,
        field_types=PROJECT_FIELD_TYPES,
        prepare=prepare_project,
    )


def delete_project(project_id):
    delete_entry(Project, project_id)


def toggle_project(project_id):
    return toggle_entry(Project, project_id)


def list_projects(*, search=None, category=None):
    projects = [
        normalize_project(p, admin=True)
        for p in Project.query.order_by(Project.created_at.desc()).all()
    ]
    items = filter_records(
        projects,
        search=search,
        search_fields=ADMIN_SEARCH_FIELDS,
        facets={"category": (category, ("category",))},
    )
    return normalize_pagination(items, categories=facet_values(projects, "category"))


def sort_projects(projects, sort=None):
    """
    Reorder serialized projects. "date" keeps the newest-first order of the
    query; "featured" moves featured projects first and keeps the rest.
    """
    if sort in (None, "", "date"):
        return projects
    if sort == "title":
        return sorted(projects, key=lambda p: (p["title"] or "").casefold())
    if sort == "featured":
        return sorted(projects, key=lambda p: not p["featured"])
    raise InvariantViolation(f"Invalid sort '{sort}'. Expected one of: {', '.join(PROJECT_SORTS)}")


def list_published_projects(*, search=None, category=None, sort=None):
    projects = [
        normalize_project(p)
        for p in (
            Project.query
            .filter_by(published=True)
            .order_by(Project.created_at.desc())
            .all()
        )
    ]
    # A category filter also matches the subcategory
    items = filter_records(
        projects,
        search=search,
        search_fields=PUBLIC_SEARCH_FIELDS,
        facets={"category": (category, ("category", "subcategory"))},
    )
    return normalize_pagination(sort_projects(items, sort), categories=facet_values(projects, "category"))


def featured_projects(limit=FEATURED_LIMIT):
    projects = (
        Project.query
        .filter_by(published=True, featured=True)
        .order_by(Project.created_at.desc())
        .limit(limit)
        .all()
    )
    return normalize_pagination(projects, normalize_project)


def find_published_project(slug):
    return (
        Project.query
        .filter_by(slug=slug, published=True)
        .order_by(Project.created_at.desc())
        .first()
    )
