# portfolio/application/submissions.py
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from portfolio.domain.invariants.exceptions import InvariantViolation
from portfolio.domain.invariants.content import assert_field_types
from portfolio.domain.invariants.submissions import (
    assert_contact_message,
    assert_quote_request,
    CONTACT_FIELD_TYPES,
    QUOTE_FIELD_TYPES,
)
from portfolio.domain.lifecycle.status import assert_status
from portfolio.extensions import db
from portfolio.models.contact_message import ContactMessage, MESSAGE_STATUSES
from portfolio.models.quote_request import QuoteRequest, QUOTE_STATUSES
from portfolio.normalizers.pagination import normalize_pagination
from portfolio.normalizers.submissions import normalize_contact_message, normalize_quote_request
from portfolio.utils.filtering import filter_records
from portfolio.utils.transaction import transactional
from .content.entries import apply_fields, delete_entry

CONTACT_FIELDS = ("name", "email", "phone", "company", "subject", "message")
QUOTE_FIELDS = (
    "name", "email", "company", "phone", "project_type", "budget",
    "timeline", "description", "requirements",
)

MESSAGE_SEARCH_FIELDS = ("name", "email", "subject", "message", "company")
QUOTE_SEARCH_FIELDS = ("name", "email", "project_type", "description", "company")


def _submit(model, data, *, fields, field_types, validate, status, success, failure):
    """
    Store a public form submission and answer with a toast-style result.
    Validation messages are shown to the visitor; storage errors are not.
    """
    try:
        assert_field_types(data, field_types)
    except InvariantViolation as e:
        return {"success": False, "message": str(e)}

    entity = model(status=status)
    apply_fields(entity, data, fields)

    try:
        with transactional():
            validate(entity)
            db.session.add(entity)
    except InvariantViolation as e:
        return {"success": False, "message": str(e)}
    except SQLAlchemyError as e:
        current_app.logger.error(f"Failed to store {model.__tablename__}: {e}")
        return {"success": False, "message": failure}

    current_app.logger.info(f"Received {model.__tablename__} {entity.id}")
    return {"success": True, "message": success}


def submit_contact(data):
    return _submit(
        ContactMessage, data,
        fields=CONTACT_FIELDS,
        field_types=CONTACT_FIELD_TYPES,
        validate=assert_contact_message,
        status="unread",
        success="Message sent successfully!",
        failure="Failed to send message. Please try again.",
    )


def submit_quote(data):
    return _submit(
        QuoteRequest, data,
        fields=QUOTE_FIELDS,
        field_types=QUOTE_FIELD_TYPES,
        validate=assert_quote_request,
        status="pending",
        success="Quote request sent successfully!",
        failure="Failed to send quote request. Please try again.",
    )


# -------------------------------------------------
# Admin inbox
# -------------------------------------------------

def list_messages(*, search=None, status=None):
    messages = [
        normalize_contact_message(m)
        for m in ContactMessage.query.order_by(ContactMessage.created_at.desc()).all()
    ]
    items = filter_records(
        messages,
        search=search,
        search_fields=MESSAGE_SEARCH_FIELDS,
        facets={"status": (status, ("status",))},
    )
    return normalize_pagination(items, statuses=["All", *MESSAGE_STATUSES])


def set_message_status(message_id, status):
    assert_status(status, MESSAGE_STATUSES)
    message = db.get_or_404(ContactMessage, message_id)

    with transactional():
        message.status = status

    current_app.logger.info(f"Message {message_id} marked {status}")
    return message


def reply_to_message(message_id):
    message = db.get_or_404(ContactMessage, message_id)

    with transactional():
        message.replied = True
        message.status = "replied"

    current_app.logger.info(f"Message {message_id} replied")
    return message


def delete_message(message_id):
    delete_entry(ContactMessage, message_id)


def list_quotes(*, search=None, status=None):
    quotes = [
        normalize_quote_request(q)
        for q in QuoteRequest.query.order_by(QuoteRequest.created_at.desc()).all()
    ]
    items = filter_records(
        quotes,
        search=search,
        search_fields=QUOTE_SEARCH_FIELDS,
        facets={"status": (status, ("status",))},
    )
    return normalize_pagination(items, statuses=["All", *QUOTE_STATUSES])


def set_quote_status(quote_id, status):
    assert_status(status, QUOTE_STATUSES)
    quote = db.get_or_404(QuoteRequest, quote_id)

    with transactional():
        quote.status = status

    current_app.logger.info(f"Quote {quote_id} marked {status}")
    return quote


def delete_quote(quote_id):
    delete_entry(QuoteRequest, quote_id)
