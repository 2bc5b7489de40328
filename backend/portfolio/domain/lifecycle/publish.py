from datetime import datetime, timezone


def toggle_published(entity, *, now=None):
    """
    Flip the publish flag of a record in place.

    Only records that carry `published_at` (blog posts) get a timestamp,
    and only on the unpublished -> published transition. Unpublishing
    keeps the previous `published_at`.
    """
    becoming_published = not entity.published
    entity.published = becoming_published

    if becoming_published and hasattr(entity, "published_at"):
        entity.published_at = now or datetime.now(timezone.utc)

    return entity


def toggle_active(area):
    area.active = not area.active
    return area
