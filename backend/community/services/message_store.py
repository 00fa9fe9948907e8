"""Private message persistence. Callers own the transaction boundaries."""

from sqlalchemy import and_, case, delete, func, or_, update
from sqlmodel import Session, select

from community.models.message import PrivateMessage


def _between(user_a: int, user_b: int):
    return or_(
        and_(PrivateMessage.sender_id == user_a, PrivateMessage.recipient_id == user_b),
        and_(PrivateMessage.sender_id == user_b, PrivateMessage.recipient_id == user_a),
    )


class PrivateMessageStore:
    def __init__(self, session: Session):
        self.session = session

    def add(self, content: str, sender_id: int, recipient_id: int) -> PrivateMessage:
        message = PrivateMessage(
            content=content,
            sender_id=sender_id,
            recipient_id=recipient_id,
        )
        self.session.add(message)
        self.session.flush()
        return message

    def get(self, message_id: int) -> PrivateMessage | None:
        return self.session.get(PrivateMessage, message_id)

    def remove(self, message: PrivateMessage) -> None:
        self.session.delete(message)

    def between(self, user_a: int, user_b: int) -> list[PrivateMessage]:
        """Full pairwise history, oldest first."""
        statement = (
            select(PrivateMessage)
            .where(_between(user_a, user_b))
            .order_by(PrivateMessage.sent_at.asc(), PrivateMessage.id.asc())
        )
        return list(self.session.exec(statement).all())

    def count_unread(self, user_id: int) -> int:
        statement = (
            select(func.count())
            .select_from(PrivateMessage)
            .where(
                PrivateMessage.recipient_id == user_id,
                PrivateMessage.is_read.is_(False),
            )
        )
        return self.session.exec(statement).one()

    def mark_read(self, reader_id: int, peer_id: int) -> int:
        """Single UPDATE flagging everything peer sent to reader. Returns rows changed."""
        statement = (
            update(PrivateMessage)
            .where(
                PrivateMessage.sender_id == peer_id,
                PrivateMessage.recipient_id == reader_id,
                PrivateMessage.is_read.is_(False),
            )
            .values(is_read=True)
        )
        return self.session.exec(statement).rowcount

    def delete_between(self, user_a: int, user_b: int) -> int:
        """Single DELETE of both directions. Returns rows removed."""
        statement = delete(PrivateMessage).where(_between(user_a, user_b))
        return self.session.exec(statement).rowcount

    def latest_per_peer(self, user_id: int) -> list[PrivateMessage]:
        """
        Latest message with every peer of user_id, in one query.

        Messages are partitioned by the other participant regardless of
        direction and ranked newest first. Rows ranked first win; the
        result is ordered newest conversation first.
        """
        peer_id = case(
            (PrivateMessage.sender_id == user_id, PrivateMessage.recipient_id),
            else_=PrivateMessage.sender_id,
        )
        ranked = (
            select(
                PrivateMessage.id.label("message_id"),
                func.row_number()
                .over(
                    partition_by=peer_id,
                    order_by=(PrivateMessage.sent_at.desc(), PrivateMessage.id.desc()),
                )
                .label("position"),
            )
            .where(
                or_(
                    PrivateMessage.sender_id == user_id,
                    PrivateMessage.recipient_id == user_id,
                )
            )
            .subquery()
        )
        statement = (
            select(PrivateMessage)
            .join(ranked, PrivateMessage.id == ranked.c.message_id)
            .where(ranked.c.position == 1)
            .order_by(PrivateMessage.sent_at.desc(), PrivateMessage.id.desc())
        )
        return list(self.session.exec(statement).all())
