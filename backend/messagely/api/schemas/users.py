from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime


class UserSummaryResponse(BaseModel):
    """Public identity of a user"""
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None

    class Config:
        from_attributes = True


class UserDetailResponse(UserSummaryResponse):
    """Full public view of a user"""
    join_at: Optional[datetime] = None
    last_login_at: Optional[datetime] = None


class UserListResponse(BaseModel):
    users: List[UserSummaryResponse]


class UserResponse(BaseModel):
    user: UserDetailResponse
