# portfolio/application/content/entries.py
from typing import Any, Callable, Dict, Iterable, Optional

from flask import current_app
from portfolio.extensions import db
from portfolio.domain.invariants.content import assert_field_types
from portfolio.domain.lifecycle.publish import toggle_published
from portfolio.utils.text import generate_slug
from portfolio.utils.transaction import transactional

Payload = Dict[str, Any]
Prepare = Callable[[Payload, Any], Payload]


def apply_fields(entity, data: Payload, fields: Iterable[str]) -> list[str]:
    """Copy whitelisted keys onto `entity`; return the names that changed."""
    changed_fields: list[str] = []
    for field in fields:
        if field in data and getattr(entity, field) != data[field]:
            setattr(entity, field, data[field])
            changed_fields.append(field)
    return changed_fields


def prepare_slug(payload: Payload) -> Payload:
    """
    An explicit slug is cleaned; otherwise a new title produces a new slug.
    """
    if payload.get("slug"):
        payload["slug"] = generate_slug(payload["slug"])
    elif payload.get("title"):
        payload["slug"] = generate_slug(payload["title"])
    return payload


def create_entry(
    model,
    data: Payload,
    *,
    fields: Iterable[str],
    validate: Callable[[Any], None],
    prepare: Optional[Prepare] = None,
    defaults: Optional[Payload] = None,
    field_types: Optional[Dict[str, type]] = None,
):
    """
    Insert one record built from whitelisted fields.

    Responsibilities:
    - Value types of the raw payload
    - Defaults for omitted fields
    - Derived fields (slug, read time, sanitized HTML)
    - Required-field and enum checks
    """
    assert_field_types(data, field_types or {})
    payload = {**(defaults or {}), **data}
    if prepare:
        payload = prepare(payload, None)

    entity = model()
    apply_fields(entity, payload, fields)

    with transactional():
        validate(entity)
        db.session.add(entity)

    current_app.logger.info(f"Created {model.__tablename__} {entity.id}")
    return entity


def update_entry(
    model,
    entry_id: str,
    data: Payload,
    *,
    fields: Iterable[str],
    validate: Callable[[Any], None],
    prepare: Optional[Prepare] = None,
    field_types: Optional[Dict[str, type]] = None,
):
    """
    Update mutable fields on a record. Last write wins.
    """
    entity = db.get_or_404(model, entry_id)
    assert_field_types(data, field_types or {})
    payload = prepare(dict(data), entity) if prepare else dict(data)

    with transactional():
        changed_fields = apply_fields(entity, payload, fields)
        validate(entity)

    if changed_fields:
        current_app.logger.info(
            f"Updated {model.__tablename__} {entry_id}: {', '.join(changed_fields)}"
        )
    return entity


def delete_entry(model, entry_id: str) -> None:
    entity = db.get_or_404(model, entry_id)

    with transactional():
        db.session.delete(entity)

    current_app.logger.info(f"Deleted {model.__tablename__} {entry_id}")


def toggle_entry(model, entry_id: str, toggle: Callable[[Any], Any] = toggle_published):
    entity = db.get_or_404(model, entry_id)

    with transactional():
        toggle(entity)

    return entity


def get_entry(model, entry_id: str):
    return db.get_or_404(model, entry_id)
