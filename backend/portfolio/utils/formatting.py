BUDGET_LABELS = {
    "under-5k": "Under $5,000",
    "5k-10k": "$5,000 - $10,000",
    "10k-25k": "$10,000 - $25,000",
    "25k-50k": "$25,000 - $50,000",
    "over-50k": "Over $50,000",
    "discuss": "Let's Discuss",
}

TIMELINE_LABELS = {
    "asap": "ASAP",
    "1-month": "1 Month",
    "2-3-months": "2-3 Months",
    "3-6-months": "3-6 Months",
    "flexible": "Flexible",
}


def format_budget(budget):
    """Unknown values are returned unchanged."""
    if not budget:
        return budget
    return BUDGET_LABELS.get(budget, budget)


def format_timeline(timeline):
    if not timeline:
        return timeline
    return TIMELINE_LABELS.get(timeline, timeline)


def format_project_type(project_type):
    # "web-development" -> "Web Development"
    if not project_type:
        return project_type
    return " ".join(word[:1].upper() + word[1:] for word in project_type.split("-"))
