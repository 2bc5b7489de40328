from portfolio.utils.dates import isoformat

def normalize_blog_post(post, admin=False, include_content=True):
    data = {
        "id": post.id,
        "title": post.title,
        "slug": post.slug,
        "excerpt": post.excerpt,
        "image_url": post.image_url,
        "category": post.category,
        "tags": post.tags or [],
        "read_time": post.read_time,
        "featured": bool(post.featured),
        "meta_title": post.meta_title,
        "meta_description": post.meta_description,
        "published_at": isoformat(post.published_at),
        "created_at": isoformat(post.created_at),
        "updated_at": isoformat(post.updated_at),
    }

    if include_content:
        data["content"] = post.content

    if admin:
        data["published"] = bool(post.published)

    return data
