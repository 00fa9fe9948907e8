"""Notification dispatch: durable record plus best-effort unread-count push."""

from typing import Protocol

from sqlmodel import Session

from community.core.logger import logger
from community.core.push import PushChannel, unread_count_destination
from community.models.notification import PRIVATE_MESSAGE, Notification
from community.models.user import User
from community.services.message_store import PrivateMessageStore


class NotificationSink(Protocol):
    def create(
        self, recipient: User, message: str, category: str, reference_id: int | None
    ) -> None: ...


class DatabaseNotificationSink:
    """Stores notifications in the caller's session and transaction."""

    def __init__(self, session: Session):
        self.session = session

    def create(
        self, recipient: User, message: str, category: str, reference_id: int | None
    ) -> None:
        self.session.add(
            Notification(
                recipient_id=recipient.id,
                message=message,
                category=category,
                reference_id=reference_id,
            )
        )


class NotificationDispatcher:
    def __init__(
        self,
        sink: NotificationSink,
        store: PrivateMessageStore,
        push: PushChannel,
    ):
        self.sink = sink
        self.store = store
        self.push = push

    def record_new_message(self, sender: User, recipient: User) -> None:
        """Create the recipient's notification. Runs inside the send transaction."""
        self.sink.create(
            recipient,
            f"You received a new message from {sender.name}",
            PRIVATE_MESSAGE,
            sender.id,
        )

    def push_unread_count(self, user: User | None) -> None:
        """
        Recompute and publish the user's unread count.

        Must run after the triggering write is committed. Failures are logged
        and never propagate to the caller.
        """
        if user is None or not user.email:
            return

        try:
            count = self.store.count_unread(user.id)
            self.push.publish(unread_count_destination(user.email), count)
        except Exception as exc:
            logger.warning(
                f"Unread count push failed for user {user.id}",
                extra={"error": str(exc)},
            )
