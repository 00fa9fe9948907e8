from datetime import UTC, datetime

from sqlmodel import Field, SQLModel


class PrivateMessage(SQLModel, table=True):
    """One-to-one message. Only content and is_read change after creation."""

    id: int | None = Field(default=None, primary_key=True)
    content: str
    sent_at: datetime = Field(default_factory=lambda: datetime.now(UTC), index=True)
    sender_id: int = Field(foreign_key="user.id", ondelete="CASCADE", index=True)
    recipient_id: int = Field(foreign_key="user.id", ondelete="CASCADE", index=True)

    is_read: bool = False
