from portfolio.utils.dates import isoformat

def normalize_service_area(area, admin=False):
    data = {
        "id": area.id,
        "slug": area.slug,
        "title": area.title,
        "meta_title": area.meta_title,
        "meta_description": area.meta_description,
        "intro_text": area.intro_text,
        "hero_image": area.hero_image,
        "faq": area.faq or [],
        "local_expertise": area.local_expertise or [],
    }

    if admin:
        data["active"] = bool(area.active)
        data["created_at"] = isoformat(area.created_at)
        data["updated_at"] = isoformat(area.updated_at)

    return data
