"""Private messaging operations exposed to the API layer."""

from sqlmodel import Session

from community.core.content_filter import ProfanityFilter
from community.core.db import transaction
from community.core.errors import Forbidden, InvalidArgument, InvalidContent, NotFound
from community.core.logger import logger
from community.core.push import PushChannel
from community.models.message import PrivateMessage
from community.models.user import User
from community.schemas.messages import PrivateMessageRead
from community.services.block_policy import ensure_can_send
from community.services.directory import UserDirectory
from community.services.message_store import PrivateMessageStore
from community.services.notifications import (
    DatabaseNotificationSink,
    NotificationDispatcher,
    NotificationSink,
)


def to_read(message: PrivateMessage, sender: User, recipient: User) -> PrivateMessageRead:
    return PrivateMessageRead(
        id=message.id,
        content=message.content,
        sent_at=message.sent_at,
        sender_id=sender.id,
        sender_name=sender.name,
        sender_email=sender.email,
        recipient_id=recipient.id,
        recipient_name=recipient.name,
        recipient_email=recipient.email,
        is_read=message.is_read,
    )


class MessagingService:
    def __init__(
        self,
        session: Session,
        content_filter: ProfanityFilter,
        push: PushChannel,
        sink: NotificationSink | None = None,
    ):
        self.session = session
        self.content_filter = content_filter
        self.directory = UserDirectory(session)
        self.store = PrivateMessageStore(session)
        self.dispatcher = NotificationDispatcher(
            sink or DatabaseNotificationSink(session), self.store, push
        )

    def _check_content(self, content: str, detail: str) -> None:
        if self.content_filter.contains_prohibited_content(content):
            raise InvalidContent(detail)

    def _get_message(self, message_id: int) -> PrivateMessage:
        message = self.store.get(message_id)
        if not message:
            raise NotFound("Message not found")
        return message

    def _participants(self, message: PrivateMessage) -> tuple[User, User]:
        users = self.directory.get_many([message.sender_id, message.recipient_id])
        return users[message.sender_id], users[message.recipient_id]

    def send(
        self, content: str, sender_email: str, recipient_id: int
    ) -> PrivateMessageRead:
        """
        Store a new message and notify the recipient.

        Order of checks: content gate, user resolution, block policy.
        The unread-count push happens only after the commit so the
        recipient never receives a count that misses the new row.
        """
        self._check_content(content, "Your message contains text that is not allowed.")

        sender = self.directory.get_by_email(sender_email, "Sender not found")
        recipient = self.directory.get_by_id(recipient_id, "Recipient not found")

        if sender.id == recipient.id:
            raise InvalidArgument("You cannot send a message to yourself.")

        ensure_can_send(self.directory.block_snapshot(sender.id), recipient.id)

        with transaction(self.session):
            message = self.store.add(content, sender.id, recipient.id)
            self.dispatcher.record_new_message(sender, recipient)

        logger.info(f"Message {message.id} sent from user {sender.id} to user {recipient.id}")

        self.dispatcher.push_unread_count(recipient)
        return to_read(message, sender, recipient)

    def edit(
        self, message_id: int, new_content: str, requesting_email: str
    ) -> PrivateMessageRead:
        self._check_content(new_content, "Your edit contains text that is not allowed.")

        message = self._get_message(message_id)
        sender, recipient = self._participants(message)
        if sender.email != requesting_email:
            raise Forbidden("You cannot edit this message.")

        with transaction(self.session):
            message.content = new_content
            self.session.add(message)

        return to_read(message, sender, recipient)

    def delete(self, message_id: int, requesting_email: str) -> PrivateMessageRead:
        """Delete one message. Returns the record as it was before deletion."""
        message = self._get_message(message_id)
        sender, recipient = self._participants(message)
        if sender.email != requesting_email:
            raise Forbidden("You cannot delete this message.")

        snapshot = to_read(message, sender, recipient)
        with transaction(self.session):
            self.store.remove(message)

        return snapshot

    def find_between(self, user_a_id: int, user_b_id: int) -> list[PrivateMessageRead]:
        user_a = self.directory.get_by_id(user_a_id)
        user_b = self.directory.get_by_id(user_b_id)
        users = {user_a.id: user_a, user_b.id: user_b}

        return [
            to_read(message, users[message.sender_id], users[message.recipient_id])
            for message in self.store.between(user_a.id, user_b.id)
        ]

    def count_unread(self, user_email: str) -> int:
        user = self.directory.get_by_email(user_email)
        return self.store.count_unread(user.id)

    def mark_conversation_read(self, reader_email: str, peer_id: int) -> None:
        reader = self.directory.get_by_email(reader_email, "Current user not found")
        peer = self.directory.get_by_id(peer_id, "Sender not found")

        with transaction(self.session):
            updated = self.store.mark_read(reader.id, peer.id)

        if updated:
            logger.info(f"User {reader.id} read {updated} message(s) from user {peer.id}")

        self.dispatcher.push_unread_count(reader)

    def delete_conversation(self, user_email: str, peer_id: int) -> None:
        user = self.directory.get_by_email(user_email)
        peer = self.directory.get_by_id(peer_id, "Other user not found")

        with transaction(self.session):
            removed = self.store.delete_between(user.id, peer.id)

        logger.info(
            f"User {user.id} deleted conversation with user {peer.id} ({removed} messages)"
        )
