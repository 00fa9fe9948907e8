"""User block routes."""

from fastapi import APIRouter, Depends, status

from community.api.deps import get_current_user, get_user_directory
from community.core.media import avatar_url
from community.models.user import User
from community.schemas.users import BlockedUserRead, BlockStatusResponse
from community.services import UserDirectory

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/blocked", response_model=list[BlockedUserRead])
def list_blocked_users(
    current_user: User = Depends(get_current_user),
    directory: UserDirectory = Depends(get_user_directory),
) -> list[BlockedUserRead]:
    return [
        BlockedUserRead(
            id=user.id,
            name=user.name,
            email=user.email,
            photo_url=avatar_url(user.profile_photo),
        )
        for user in directory.list_blocked(current_user.email)
    ]


@router.post("/{user_id}/block", status_code=status.HTTP_204_NO_CONTENT)
def block_user(
    user_id: int,
    current_user: User = Depends(get_current_user),
    directory: UserDirectory = Depends(get_user_directory),
) -> None:
    directory.block(current_user.email, user_id)


@router.delete("/{user_id}/block", status_code=status.HTTP_204_NO_CONTENT)
def unblock_user(
    user_id: int,
    current_user: User = Depends(get_current_user),
    directory: UserDirectory = Depends(get_user_directory),
) -> None:
    directory.unblock(current_user.email, user_id)


@router.get("/{user_id}/block-status", response_model=BlockStatusResponse)
def get_block_status(
    user_id: int,
    current_user: User = Depends(get_current_user),
    directory: UserDirectory = Depends(get_user_directory),
) -> BlockStatusResponse:
    """Report both directions of the block relation with another user."""
    return BlockStatusResponse(
        user_id=user_id,
        blocked_by_me=directory.has_blocked(current_user.email, user_id),
        blocked_me=directory.is_blocked_by(current_user.email, user_id),
    )
