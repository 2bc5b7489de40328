# portfolio/application/content/service_areas.py
from typing import Any, Dict, Optional

from portfolio.domain.invariants.service_area import assert_service_area, SERVICE_AREA_FIELD_TYPES
from portfolio.domain.lifecycle.publish import toggle_active
from portfolio.models.service_area import ServiceArea
from portfolio.normalizers.pagination import normalize_pagination
from portfolio.normalizers.service_area import normalize_service_area
from portfolio.utils.text import generate_slug
from .entries import create_entry, delete_entry, toggle_entry, update_entry

SERVICE_AREA_FIELDS = (
    "slug", "title", "meta_title", "meta_description", "intro_text",
    "hero_image", "faq", "local_expertise", "active",
)

SERVICE_AREA_DEFAULTS = {
    "faq": [],
    "local_expertise": [],
    "active": True,
}


def prepare_service_area(payload: Dict[str, Any], area: Optional[ServiceArea]) -> Dict[str, Any]:
    # Area slugs are entered by hand and never derived from the title
    if "slug" in payload:
        payload["slug"] = generate_slug(payload["slug"])
    return payload


def create_service_area(data):
    return create_entry(
        ServiceArea, data,
        fields=SERVICE_AREA_FIELDS,
        validate=assert_service_area,
        field_types=SERVICE_AREA_FIELD_TYPES,
        prepare=prepare_service_area,
        defaults=SERVICE_AREA_DEFAULTS,
    )


def update_service_area(area_id, data):
    return update_entry(
        ServiceArea, area_id, data,
        fields=SERVICE_AREA_FIELDS,
        validate=assert_service_area,
        field_types=SERVICE_AREA_FIELD_TYPES,
        prepare=prepare_service_area,
    )


def delete_service_area(area_id):
    delete_entry(ServiceArea, area_id)


def toggle_service_area(area_id):
    return toggle_entry(ServiceArea, area_id, toggle=toggle_active)


def list_service_areas():
    areas = ServiceArea.query.order_by(ServiceArea.created_at.desc()).all()
    return normalize_pagination(areas, lambda a: normalize_service_area(a, admin=True))


def list_active_service_areas():
    areas = (
        ServiceArea.query
        .filter_by(active=True)
        .order_by(ServiceArea.created_at.desc())
        .all()
    )
    return normalize_pagination(areas, normalize_service_area)


def find_active_service_area(slug):
    return ServiceArea.query.filter_by(slug=slug, active=True).first()
