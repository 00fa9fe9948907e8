from fastapi import Depends, HTTPException, Request, status
from sqlmodel import Session

from community.core.config import settings
from community.core.content_filter import ProfanityFilter, get_content_filter
from community.core.db import get_db_session
from community.core.push import PushChannel, get_push_channel
from community.core.sessions import get_session
from community.models.user import User
from community.services import ConversationAggregator, MessagingService, UserDirectory


def get_current_user(
    request: Request,
    db_session: Session = Depends(get_db_session),
) -> User:
    """
    Get current authenticated user from session cookie.

    Raises:
        HTTPException: If session is invalid or user not found
    """
    session_id = request.cookies.get(settings.SESSION_COOKIE_NAME)

    if not session_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    session_data = get_session(session_id)
    if not session_data:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Session expired",
        )

    user = db_session.get(User, session_data.user_id)
    if not user or not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found or inactive",
        )

    return user


def get_messaging_service(
    db_session: Session = Depends(get_db_session),
    content_filter: ProfanityFilter = Depends(get_content_filter),
    push: PushChannel = Depends(get_push_channel),
) -> MessagingService:
    return MessagingService(db_session, content_filter, push)


def get_conversation_aggregator(
    db_session: Session = Depends(get_db_session),
) -> ConversationAggregator:
    return ConversationAggregator(db_session)


def get_user_directory(
    db_session: Session = Depends(get_db_session),
) -> UserDirectory:
    return UserDirectory(db_session)
