"""Conversation aggregation: one latest-message summary per visible peer."""

from sqlmodel import Session

from community.core.media import avatar_url
from community.models.message import PrivateMessage
from community.models.user import User
from community.schemas.messages import ConversationSummary
from community.services.block_policy import visible_to
from community.services.directory import UserDirectory
from community.services.message_store import PrivateMessageStore


def peer_of(message: PrivateMessage, user_id: int) -> int:
    if message.sender_id == user_id:
        return message.recipient_id
    return message.sender_id


def to_summary(message: PrivateMessage, peer: User) -> ConversationSummary:
    return ConversationSummary(
        peer_id=peer.id,
        peer_name=peer.name,
        peer_email=peer.email,
        peer_photo_url=avatar_url(peer.profile_photo),
        last_message_id=message.id,
        last_message_content=message.content,
        last_message_sent_at=message.sent_at,
        last_message_sender_id=message.sender_id,
    )


class ConversationAggregator:
    def __init__(self, session: Session):
        self.directory = UserDirectory(session)
        self.store = PrivateMessageStore(session)

    def summarize(self, user_email: str) -> list[ConversationSummary]:
        """
        Latest message per peer, newest conversation first.

        Three queries regardless of conversation count: latest messages,
        the user's block snapshot (both directions), and the peer rows.
        Filtering is done in memory over the snapshot.
        """
        user = self.directory.get_by_email(user_email, "Current user not found")

        latest = self.store.latest_per_peer(user.id)
        snapshot = self.directory.block_snapshot(user.id)

        visible = visible_to(snapshot, latest, lambda m: peer_of(m, user.id))
        peers = self.directory.get_many(peer_of(m, user.id) for m in visible)

        return [
            to_summary(message, peers[peer_of(message, user.id)])
            for message in visible
            if peer_of(message, user.id) in peers
        ]
