from portfolio.utils.dates import isoformat

def normalize_snippet(snippet, admin=False):
    data = {
        "id": snippet.id,
        "title": snippet.title,
        "slug": snippet.slug,
        "description": snippet.description,
        "code": snippet.code,
        "language": snippet.language,
        "category": snippet.category,
        "tags": snippet.tags or [],
        "difficulty": snippet.difficulty,
        "usage_frequency": snippet.usage_frequency,
        "featured": bool(snippet.featured),
        "created_at": isoformat(snippet.created_at),
        "updated_at": isoformat(snippet.updated_at),
    }

    if admin:
        data["published"] = bool(snippet.published)

    return data
