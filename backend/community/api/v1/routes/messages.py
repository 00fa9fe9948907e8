"""Private message routes."""

# ENDPOINTS:
# POST   /messages                        - Send a message
# GET    /messages/conversations          - Latest message per peer
# GET    /messages/unread-count           - Unread messages addressed to me
# GET    /messages/with/{peer_id}         - Full history with a peer
# POST   /messages/with/{peer_id}/read    - Mark everything from peer as read
# DELETE /messages/with/{peer_id}         - Delete the whole conversation
# PUT    /messages/{message_id}           - Edit own message
# DELETE /messages/{message_id}           - Delete own message

from fastapi import APIRouter, Depends, status

from community.api.deps import (
    get_conversation_aggregator,
    get_current_user,
    get_messaging_service,
)
from community.models.user import User
from community.schemas.messages import (
    ConversationSummary,
    EditMessageRequest,
    PrivateMessageRead,
    SendMessageRequest,
    UnreadCountResponse,
)
from community.services import ConversationAggregator, MessagingService

router = APIRouter(prefix="/messages", tags=["messages"])


@router.post(
    "", response_model=PrivateMessageRead, status_code=status.HTTP_201_CREATED
)
def send_message(
    send_request: SendMessageRequest,
    current_user: User = Depends(get_current_user),
    service: MessagingService = Depends(get_messaging_service),
) -> PrivateMessageRead:
    """Send a private message. Rejected if either side blocked the other."""
    return service.send(
        send_request.content, current_user.email, send_request.recipient_id
    )


@router.get("/conversations", response_model=list[ConversationSummary])
def list_conversations(
    current_user: User = Depends(get_current_user),
    aggregator: ConversationAggregator = Depends(get_conversation_aggregator),
) -> list[ConversationSummary]:
    """Get one summary per peer, hiding peers blocked in either direction."""
    return aggregator.summarize(current_user.email)


@router.get("/unread-count", response_model=UnreadCountResponse)
def get_unread_count(
    current_user: User = Depends(get_current_user),
    service: MessagingService = Depends(get_messaging_service),
) -> UnreadCountResponse:
    return UnreadCountResponse(count=service.count_unread(current_user.email))


@router.get("/with/{peer_id}", response_model=list[PrivateMessageRead])
def get_conversation(
    peer_id: int,
    current_user: User = Depends(get_current_user),
    service: MessagingService = Depends(get_messaging_service),
) -> list[PrivateMessageRead]:
    """Get the full history with a peer, oldest first."""
    return service.find_between(current_user.id, peer_id)


@router.post("/with/{peer_id}/read", status_code=status.HTTP_204_NO_CONTENT)
def mark_conversation_read(
    peer_id: int,
    current_user: User = Depends(get_current_user),
    service: MessagingService = Depends(get_messaging_service),
) -> None:
    service.mark_conversation_read(current_user.email, peer_id)


@router.delete("/with/{peer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_conversation(
    peer_id: int,
    current_user: User = Depends(get_current_user),
    service: MessagingService = Depends(get_messaging_service),
) -> None:
    """Delete every message in both directions. Cannot be undone."""
    service.delete_conversation(current_user.email, peer_id)


@router.put("/{message_id}", response_model=PrivateMessageRead)
def edit_message(
    message_id: int,
    edit_request: EditMessageRequest,
    current_user: User = Depends(get_current_user),
    service: MessagingService = Depends(get_messaging_service),
) -> PrivateMessageRead:
    """Edit a message (sender only)."""
    return service.edit(message_id, edit_request.content, current_user.email)


@router.delete("/{message_id}", response_model=PrivateMessageRead)
def delete_message(
    message_id: int,
    current_user: User = Depends(get_current_user),
    service: MessagingService = Depends(get_messaging_service),
) -> PrivateMessageRead:
    """Delete a message (sender only) and return what was deleted."""
    return service.delete(message_id, current_user.email)
