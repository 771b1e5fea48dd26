from sassy.domains.media.services.media_service import (
    count_media,
    delete_image,
    delete_media,
    get_media_by_key,
    list_media,
    upload_image,
    upload_media,
)

__all__ = [
    "count_media",
    "delete_image",
    "delete_media",
    "get_media_by_key",
    "list_media",
    "upload_image",
    "upload_media",
]
