"""
Block policy - pure permission checks over pre-loaded block id sets.

Nothing in here touches the database. Callers build a BlockSnapshot once
(see UserDirectory.block_snapshot) and every predicate below is evaluated
against those in-memory sets.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TypeVar

from community.core.errors import Forbidden, InvalidArgument

T = TypeVar("T")


@dataclass(frozen=True)
class BlockSnapshot:
    """Both directions of one user's block relation."""

    user_id: int
    # Users this user has blocked
    blocked_ids: frozenset[int] = field(default_factory=frozenset)
    # Users who have blocked this user
    blocker_ids: frozenset[int] = field(default_factory=frozenset)

    def has_blocked(self, other_id: int) -> bool:
        return other_id in self.blocked_ids

    def is_blocked_by(self, other_id: int) -> bool:
        return other_id in self.blocker_ids

    def is_blocked_either_way(self, other_id: int) -> bool:
        return self.has_blocked(other_id) or self.is_blocked_by(other_id)


def can_send(sender: BlockSnapshot, recipient_id: int) -> bool:
    return not sender.is_blocked_either_way(recipient_id)


def ensure_can_send(sender: BlockSnapshot, recipient_id: int) -> None:
    """Raise Forbidden when either side has blocked the other."""
    if sender.has_blocked(recipient_id):
        raise Forbidden("You blocked this user and cannot send them messages.")
    if sender.is_blocked_by(recipient_id):
        raise Forbidden("You have been blocked by this user.")


def ensure_not_self(blocker_id: int, blocked_id: int) -> None:
    if blocker_id == blocked_id:
        raise InvalidArgument("You cannot block yourself.")


def visible_to(
    viewer: BlockSnapshot,
    items: Iterable[T],
    peer_of: Callable[[T], int],
) -> list[T]:
    """Keep the items whose peer is not blocked in either direction."""
    return [item for item in items if not viewer.is_blocked_either_way(peer_of(item))]
