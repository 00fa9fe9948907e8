from datetime import UTC, datetime

from sqlmodel import Field, SQLModel

PRIVATE_MESSAGE = "PRIVATE_MESSAGE"


class Notification(SQLModel, table=True):
    """Durable notification shown in the recipient's activity feed."""

    id: int | None = Field(default=None, primary_key=True)
    recipient_id: int = Field(foreign_key="user.id", ondelete="CASCADE", index=True)
    message: str = Field(max_length=255)
    category: str = Field(max_length=50)
    # Id of the entity the notification points at, e.g. the sender
    reference_id: int | None = None
    is_read: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
