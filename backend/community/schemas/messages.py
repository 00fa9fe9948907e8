from datetime import datetime

from pydantic import BaseModel, Field


class SendMessageRequest(BaseModel):
    """Request to send a private message."""

    recipient_id: int
    content: str = Field(..., min_length=1, max_length=5000)


class EditMessageRequest(BaseModel):
    """Request to replace a message's content."""

    content: str = Field(..., min_length=1, max_length=5000)


class PrivateMessageRead(BaseModel):
    """Message as returned to clients, with participant display fields."""

    id: int
    content: str
    sent_at: datetime
    sender_id: int
    sender_name: str
    sender_email: str
    recipient_id: int
    recipient_name: str
    recipient_email: str
    is_read: bool


class ConversationSummary(BaseModel):
    """Latest message exchanged with one peer."""

    peer_id: int
    peer_name: str
    peer_email: str
    peer_photo_url: str
    last_message_id: int
    last_message_content: str
    last_message_sent_at: datetime
    last_message_sender_id: int


class UnreadCountResponse(BaseModel):
    count: int
