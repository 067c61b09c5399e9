def normalize_gallery_item(item, admin=False):
    base = {
        "id": item.id,
        "title": item.title,
        "description": item.description,
        "image_url": item.image_url,
        "type": item.type,
        "order": item.order,
    }

    if admin:
        base["created_at"] = item.created_at.isoformat() if item.created_at else None

    return base
