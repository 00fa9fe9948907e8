from community.core.config import settings


def resolve_media_url(stored: str | None) -> str | None:
    """Turn a stored media value into a URL the frontend can load."""
    if not stored or not stored.strip():
        return None
    if stored.startswith("http://") or stored.startswith("https://"):
        return stored
    return settings.MEDIA_ROUTE_PREFIX + stored


def avatar_url(stored: str | None) -> str:
    return resolve_media_url(stored) or settings.DEFAULT_AVATAR_URL
