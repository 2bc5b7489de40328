from portfolio.utils.dates import isoformat

def normalize_project(project, admin=False):
    data = {
        "id": project.id,
        "title": project.title,
        "slug": project.slug,
        "description": project.description,
        "content": project.content,
        "image_url": project.image_url,
        "technologies": project.technologies or [],
        "category": project.category,
        "subcategory": project.subcategory,
        "status": project.status,
        "client": project.client,
        "duration": project.duration,
        "live_url": project.live_url,
        "github_url": project.github_url,
        "highlights": project.highlights or [],
        "date_completed": isoformat(project.date_completed),
        "featured": bool(project.featured),
        "meta_title": project.meta_title,
        "meta_description": project.meta_description,
        "created_at": isoformat(project.created_at),
        "updated_at": isoformat(project.updated_at),
    }

    if admin:
        data["published"] = bool(project.published)

    return data
