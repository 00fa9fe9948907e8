"""Live push channel - Redis pub/sub publisher keyed by user destination."""

import json
from typing import Any, Protocol

from community.core.config import settings
from community.core.sessions import _get_redis_client


class PushChannel(Protocol):
    def publish(self, destination: str, payload: Any) -> None: ...


class RedisPushChannel:
    """Publishes JSON payloads on a Redis channel named after the destination."""

    def publish(self, destination: str, payload: Any) -> None:
        client = _get_redis_client()
        client.publish(destination, json.dumps(payload))


def unread_count_destination(email: str) -> str:
    """Per-user destination for unread-count updates."""
    return f"{settings.PUSH_DESTINATION_PREFIX}{email}{settings.PUSH_UNREAD_SUFFIX}"


def get_push_channel() -> PushChannel:
    return RedisPushChannel()
