from fastapi import APIRouter, Depends

from ..schemas import (
    SendMessageRequest, MessageRecordResponse, SentMessageResponse,
    MessageDetailResponse, MessageResponse
)
from ...auth.dependencies import get_current_user
from ...core.exceptions import AuthorizationError
from ...services.message_ledger import MessageLedger, get_message_ledger

router = APIRouter(prefix="/messages", tags=["messages"])


@router.post("", response_model=SentMessageResponse, status_code=201)
async def send_message(
    request: SendMessageRequest,
    current_user: str = Depends(get_current_user),
    ledger: MessageLedger = Depends(get_message_ledger)
):
    """Send a message from the logged-in user"""
    message = await ledger.send(current_user, request.to_username, request.body)
    return SentMessageResponse(message=MessageRecordResponse.model_validate(message))


@router.get("/{message_id}", response_model=MessageResponse)
async def get_message(
    message_id: int,
    current_user: str = Depends(get_current_user),
    ledger: MessageLedger = Depends(get_message_ledger)
):
    """Get one message; only its sender or recipient may read it"""
    message = await ledger.get(message_id)
    if current_user not in (message.from_user.username, message.to_user.username):
        raise AuthorizationError(f"Not allowed to read message {message_id}")
    return MessageResponse(message=MessageDetailResponse.model_validate(message))
