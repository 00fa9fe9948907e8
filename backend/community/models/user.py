from datetime import UTC, datetime

from sqlmodel import Field, SQLModel


class UserBase(SQLModel):
    """Base user fields."""

    email: str = Field(unique=True, index=True)
    name: str = Field(max_length=100)
    profile_photo: str | None = None
    is_active: bool = True


class User(UserBase, table=True):
    """User database model."""

    id: int | None = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class UserBlock(SQLModel, table=True):
    """
    Directional block relation: blocker hides messaging with blocked.
    Only the blocker's own rows are ever written on their behalf.
    """

    blocker_id: int = Field(foreign_key="user.id", ondelete="CASCADE", primary_key=True)
    blocked_id: int = Field(
        foreign_key="user.id", ondelete="CASCADE", primary_key=True, index=True
    )
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
