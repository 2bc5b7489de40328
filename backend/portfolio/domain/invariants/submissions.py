from portfolio.models.contact_message import MESSAGE_STATUSES
from portfolio.models.quote_request import QUOTE_STATUSES
from .content import assert_required, assert_choice

def assert_contact_message(message):
    assert_required(message, ("name", "email", "message"))
    assert_choice(message, "status", MESSAGE_STATUSES)

def assert_quote_request(quote):
    assert_required(quote, ("name", "email", "project_type", "description"))
    assert_choice(quote, "status", QUOTE_STATUSES)

CONTACT_FIELD_TYPES = {
    "name": str, "email": str, "phone": str, "company": str,
    "subject": str, "message": str,
}

QUOTE_FIELD_TYPES = {
    "name": str, "email": str, "company": str, "phone": str,
    "project_type": str, "budget": str, "timeline": str,
    "description": str, "requirements": str,
}
