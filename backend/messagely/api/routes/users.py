from fastapi import APIRouter, Depends

from ..schemas import (
    UserSummaryResponse, UserDetailResponse, UserListResponse, UserResponse,
    OutboundMessageResponse, InboundMessageResponse,
    OutboundThreadResponse, InboundThreadResponse
)
from ...auth.dependencies import get_current_user, ensure_correct_user
from ...services.user_directory import UserDirectory, get_user_directory
from ...services.message_ledger import MessageLedger, get_message_ledger

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=UserListResponse)
async def list_users(
    current_user: str = Depends(get_current_user),
    directory: UserDirectory = Depends(get_user_directory)
):
    """List all users: {users: [{username, first_name, last_name, phone}, ...]}"""
    users = await directory.all()
    return UserListResponse(users=[UserSummaryResponse.model_validate(u) for u in users])


@router.get("/{username}", response_model=UserResponse)
async def get_user(
    username: str,
    current_user: str = Depends(ensure_correct_user),
    directory: UserDirectory = Depends(get_user_directory)
):
    """Detail of one user, including join and last login times"""
    user = await directory.get(username)
    return UserResponse(user=UserDetailResponse.model_validate(user))


@router.get("/{username}/to", response_model=InboundThreadResponse)
async def messages_to(
    username: str,
    current_user: str = Depends(ensure_correct_user),
    ledger: MessageLedger = Depends(get_message_ledger)
):
    """Messages received by the user, each with its sender"""
    messages = await ledger.messages_to(username)
    return InboundThreadResponse(
        messages=[InboundMessageResponse.model_validate(m) for m in messages]
    )


@router.get("/{username}/from", response_model=OutboundThreadResponse)
async def messages_from(
    username: str,
    current_user: str = Depends(ensure_correct_user),
    ledger: MessageLedger = Depends(get_message_ledger)
):
    """Messages sent by the user, each with its recipient"""
    messages = await ledger.messages_from(username)
    return OutboundThreadResponse(
        messages=[OutboundMessageResponse.model_validate(m) for m in messages]
    )
