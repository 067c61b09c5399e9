def normalize_track(track, admin=False):
    base = {
        "id": track.id,
        "title": track.title,
        "description": track.description,
        "duration": track.duration,
        "audio_url": track.audio_url,
        "thumbnail_url": track.thumbnail_url,
        "composer_notes": track.composer_notes,
        "lyrics": track.lyrics,
        "release_date": track.release_date.isoformat() if track.release_date else None,
        "order": track.order,
    }

    if admin:
        base["is_published"] = track.is_published
        base["created_at"] = track.created_at.isoformat() if track.created_at else None
        base["updated_at"] = track.updated_at.isoformat() if track.updated_at else None

    return base
