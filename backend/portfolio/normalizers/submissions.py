from portfolio.utils.dates import isoformat
from portfolio.utils.formatting import format_budget, format_project_type, format_timeline

def normalize_contact_message(message):
    return {
        "id": message.id,
        "name": message.name,
        "email": message.email,
        "phone": message.phone,
        "company": message.company,
        "subject": message.subject,
        "message": message.message,
        "replied": bool(message.replied),
        "status": message.status,
        "created_at": isoformat(message.created_at),
        "updated_at": isoformat(message.updated_at),
    }

def normalize_quote_request(quote):
    return {
        "id": quote.id,
        "name": quote.name,
        "email": quote.email,
        "company": quote.company,
        "phone": quote.phone,
        "project_type": quote.project_type,
        "project_type_label": format_project_type(quote.project_type),
        "budget": quote.budget,
        "budget_label": format_budget(quote.budget),
        "timeline": quote.timeline,
        "timeline_label": format_timeline(quote.timeline),
        "description": quote.description,
        "requirements": quote.requirements,
        "status": quote.status,
        "created_at": isoformat(quote.created_at),
        "updated_at": isoformat(quote.updated_at),
    }
