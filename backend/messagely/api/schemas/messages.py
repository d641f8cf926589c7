from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime

from .users import UserSummaryResponse


class SendMessageRequest(BaseModel):
    """Request model for sending a message"""
    to_username: str = Field(..., min_length=1, max_length=100)
    body: str


class MessageRecordResponse(BaseModel):
    """A message as stored"""
    id: int
    from_username: str
    to_username: str
    body: Optional[str]
    sent_at: datetime
    read_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class OutboundMessageResponse(BaseModel):
    id: int
    body: Optional[str]
    sent_at: datetime
    read_at: Optional[datetime] = None
    to_user: UserSummaryResponse

    class Config:
        from_attributes = True


class InboundMessageResponse(BaseModel):
    id: int
    body: Optional[str]
    sent_at: datetime
    read_at: Optional[datetime] = None
    from_user: UserSummaryResponse

    class Config:
        from_attributes = True


class MessageDetailResponse(BaseModel):
    id: int
    body: Optional[str]
    sent_at: datetime
    read_at: Optional[datetime] = None
    from_user: UserSummaryResponse
    to_user: UserSummaryResponse

    class Config:
        from_attributes = True


class OutboundThreadResponse(BaseModel):
    messages: List[OutboundMessageResponse]


class InboundThreadResponse(BaseModel):
    messages: List[InboundMessageResponse]


class MessageResponse(BaseModel):
    message: MessageDetailResponse


class SentMessageResponse(BaseModel):
    message: MessageRecordResponse
