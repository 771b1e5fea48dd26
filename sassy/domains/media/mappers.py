"""DTO mappers for media."""

from __future__ import annotations

from sassy.domains.media.models import Media


def map_media(media: Media) -> dict:
    return {
        "id": media.id,
        "name": media.key,
        "url": media.url,
        "size": media.size,
        "content_type": media.content_type,
        "created_at": media.created_at.isoformat() if media.created_at else None,
        "author": {"name": media.author.name if media.author else "Admin"},
    }
