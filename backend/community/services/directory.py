"""User directory - identity lookups and ownership of the block relation."""

from collections.abc import Iterable

from sqlmodel import Session, select

from community.core.db import transaction
from community.core.errors import NotFound
from community.core.logger import logger
from community.models.user import User, UserBlock
from community.services.block_policy import BlockSnapshot, ensure_not_self


class UserDirectory:
    def __init__(self, session: Session):
        self.session = session

    def find_by_email(self, email: str) -> User | None:
        statement = select(User).where(User.email == email)
        return self.session.exec(statement).first()

    def find_by_id(self, user_id: int) -> User | None:
        return self.session.get(User, user_id)

    def get_by_email(self, email: str, detail: str = "User not found") -> User:
        user = self.find_by_email(email)
        if not user:
            raise NotFound(detail)
        return user

    def get_by_id(self, user_id: int, detail: str = "User not found") -> User:
        user = self.find_by_id(user_id)
        if not user:
            raise NotFound(detail)
        return user

    def get_many(self, user_ids: Iterable[int]) -> dict[int, User]:
        """Load several users in one query, keyed by id."""
        ids = set(user_ids)
        if not ids:
            return {}
        statement = select(User).where(User.id.in_(ids))
        return {user.id: user for user in self.session.exec(statement).all()}

    # ------------------------------------------------------------------
    # Block relation
    # ------------------------------------------------------------------

    def blocked_ids(self, user_id: int) -> frozenset[int]:
        statement = select(UserBlock.blocked_id).where(UserBlock.blocker_id == user_id)
        return frozenset(self.session.exec(statement).all())

    def blocker_ids(self, user_id: int) -> frozenset[int]:
        statement = select(UserBlock.blocker_id).where(UserBlock.blocked_id == user_id)
        return frozenset(self.session.exec(statement).all())

    def block_snapshot(self, user_id: int) -> BlockSnapshot:
        """Resolve both directions of the relation into plain id sets."""
        return BlockSnapshot(
            user_id=user_id,
            blocked_ids=self.blocked_ids(user_id),
            blocker_ids=self.blocker_ids(user_id),
        )

    def block(self, blocker_email: str, blocked_id: int) -> None:
        blocker = self.get_by_email(blocker_email)
        ensure_not_self(blocker.id, blocked_id)
        blocked = self.get_by_id(blocked_id, "Target user not found")

        with transaction(self.session):
            if self.session.get(UserBlock, (blocker.id, blocked.id)) is None:
                self.session.add(UserBlock(blocker_id=blocker.id, blocked_id=blocked.id))

        logger.info(f"User {blocker.id} blocked user {blocked_id}")

    def unblock(self, blocker_email: str, blocked_id: int) -> None:
        blocker = self.get_by_email(blocker_email)
        blocked = self.get_by_id(blocked_id, "Target user not found")

        with transaction(self.session):
            link = self.session.get(UserBlock, (blocker.id, blocked.id))
            if link is not None:
                self.session.delete(link)

        logger.info(f"User {blocker.id} unblocked user {blocked_id}")

    def has_blocked(self, email: str, other_id: int) -> bool:
        """True if the user identified by email blocked the other user."""
        user = self.get_by_email(email)
        other = self.get_by_id(other_id, "Other user not found")
        return self.session.get(UserBlock, (user.id, other.id)) is not None

    def is_blocked_by(self, email: str, other_id: int) -> bool:
        """True if the other user blocked the user identified by email."""
        user = self.get_by_email(email)
        other = self.get_by_id(other_id, "Other user not found")
        return self.session.get(UserBlock, (other.id, user.id)) is not None

    def list_blocked(self, email: str) -> list[User]:
        user = self.get_by_email(email)
        statement = (
            select(User)
            .join(UserBlock, UserBlock.blocked_id == User.id)
            .where(UserBlock.blocker_id == user.id)
            .order_by(User.name)
        )
        return list(self.session.exec(statement).all())
