from portfolio.utils.dates import isoformat

def normalize_service(service, admin=False):
    data = {
        "id": service.id,
        "title": service.title,
        "description": service.description,
        "icon": service.icon,
        "features": service.features or [],
        "price": service.price,
        "order_index": service.order_index,
    }

    if admin:
        data["published"] = bool(service.published)
        data["created_at"] = isoformat(service.created_at)
        data["updated_at"] = isoformat(service.updated_at)

    return data
