from .auth import (
    RegisterRequest,
    LoginRequest,
    TokenResponse
)
from .users import (
    UserSummaryResponse,
    UserDetailResponse,
    UserListResponse,
    UserResponse
)
from .messages import (
    SendMessageRequest,
    MessageRecordResponse,
    OutboundMessageResponse,
    InboundMessageResponse,
    MessageDetailResponse,
    OutboundThreadResponse,
    InboundThreadResponse,
    MessageResponse,
    SentMessageResponse
)
from .common import (
    ErrorResponse,
    HealthResponse
)

__all__ = [
    # Auth schemas
    "RegisterRequest",
    "LoginRequest",
    "TokenResponse",

    # User schemas
    "UserSummaryResponse",
    "UserDetailResponse",
    "UserListResponse",
    "UserResponse",

    # Message schemas
    "SendMessageRequest",
    "MessageRecordResponse",
    "OutboundMessageResponse",
    "InboundMessageResponse",
    "MessageDetailResponse",
    "OutboundThreadResponse",
    "InboundThreadResponse",
    "MessageResponse",
    "SentMessageResponse",

    # Common schemas
    "ErrorResponse",
    "HealthResponse"
]
