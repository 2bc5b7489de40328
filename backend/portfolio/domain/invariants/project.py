from portfolio.models.project import PROJECT_STATUSES
from .content import assert_required, assert_choice, assert_string_list

def assert_project(project):
    assert_required(project, ("title", "slug", "description"))
    assert_choice(project, "status", PROJECT_STATUSES)
    assert_string_list(project, "technologies")
    assert_string_list(project, "highlights")

PROJECT_FIELD_TYPES = {
    "title": str, "slug": str, "description": str, "content": str,
    "image_url": str, "technologies": list, "category": str,
    "subcategory": str, "status": str, "client": str, "duration": str,
    "live_url": str, "github_url": str, "highlights": list,
    "date_completed": str, "featured": bool, "meta_title": str,
    "meta_description": str, "published": bool,
}
