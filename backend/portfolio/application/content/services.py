# portfolio/application/content/services.py
from portfolio.domain.invariants.service import assert_service, SERVICE_FIELD_TYPES
from portfolio.models.service import Service
from portfolio.normalizers.pagination import normalize_pagination
from portfolio.normalizers.service import normalize_service
from .entries import create_entry, delete_entry, toggle_entry, update_entry

SERVICE_FIELDS = (
    "title", "description", "icon", "features", "price", "order_index", "published",
)


def _ordered(query):
    return query.order_by(Service.order_index.asc(), Service.created_at.asc())


def create_service(data):
    """New services go to the end of the list unless an index is given."""
    defaults = {
        "features": [],
        "published": False,
        "order_index": Service.query.count(),
    }
    return create_entry(
        Service, data,
        fields=SERVICE_FIELDS,
        validate=assert_service,
        field_types=SERVICE_FIELD_TYPES,
        defaults=defaults,
    )


def update_service(service_id, data):
    return update_entry(
        Service, service_id, data,
        fields=SERVICE_FIELDS,
        validate=assert_service,
        field_types=SERVICE_FIELD_TYPES,
    )


def delete_service(service_id):
    delete_entry(Service, service_id)


def toggle_service(service_id):
    return toggle_entry(Service, service_id)


def list_services():
    return normalize_pagination(
        _ordered(Service.query).all(),
        lambda s: normalize_service(s, admin=True),
    )


def list_published_services():
    return normalize_pagination(
        _ordered(Service.query.filter_by(published=True)).all(),
        normalize_service,
    )
