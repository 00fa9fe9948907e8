from pydantic import BaseModel


class BlockedUserRead(BaseModel):
    """Entry in the current user's block list."""

    id: int
    name: str
    email: str
    photo_url: str


class BlockStatusResponse(BaseModel):
    """Block relation between the current user and another user."""

    user_id: int
    blocked_by_me: bool
    blocked_me: bool
