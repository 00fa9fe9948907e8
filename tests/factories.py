from typing import Any

from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import community.models  # noqa: F401  registers tables on the metadata
from community.models.user import User, UserBlock


class RecordingPushChannel:
    """Push channel that keeps every publish in memory."""

    def __init__(self):
        self.published: list[tuple[str, Any]] = []

    def publish(self, destination: str, payload: Any) -> None:
        self.published.append((destination, payload))

    def payloads_for(self, destination: str) -> list[Any]:
        return [payload for dest, payload in self.published if dest == destination]


class FailingPushChannel:
    def publish(self, destination: str, payload: Any) -> None:
        raise ConnectionError("redis is down")


class FailingNotificationSink:
    def create(self, recipient, message, category, reference_id) -> None:
        raise RuntimeError("notification store unavailable")


def make_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    return engine


def create_user(
    session: Session, email: str, name: str, profile_photo: str | None = None
) -> User:
    user = User(email=email, name=name, profile_photo=profile_photo)
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def add_block(session: Session, blocker: User, blocked: User) -> None:
    session.add(UserBlock(blocker_id=blocker.id, blocked_id=blocked.id))
    session.commit()
