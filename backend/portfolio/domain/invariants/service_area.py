from .content import assert_required, assert_string_list
from .exceptions import InvariantViolation

def assert_service_area(area):
    assert_required(area, ("slug", "title"))
    assert_string_list(area, "local_expertise")

    for entry in area.faq or []:
        if not isinstance(entry, dict) or not entry.get("question") or not entry.get("answer"):
            raise InvariantViolation("Each FAQ entry needs a question and an answer")

SERVICE_AREA_FIELD_TYPES = {
    "slug": str, "title": str, "meta_title": str, "meta_description": str,
    "intro_text": str, "hero_image": str, "faq": list,
    "local_expertise": list, "active": bool,
}
