from pydantic import BaseModel, Field, field_validator
from typing import Optional

from ...services.password_hasher import MAX_PASSWORD_BYTES


def _check_password_bytes(value: str) -> str:
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes when UTF-8 encoded")
    return value


class RegisterRequest(BaseModel):
    """Request model for user registration"""
    username: str = Field(..., min_length=1, max_length=100, description="Unique username")
    password: str = Field(..., min_length=1, description="User's password, at most 72 UTF-8 bytes")
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, max_length=40)

    @field_validator('password')
    @classmethod
    def validate_password(cls, v):
        return _check_password_bytes(v)


class LoginRequest(BaseModel):
    """Request model for user login"""
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)

    @field_validator('password')
    @classmethod
    def validate_password(cls, v):
        return _check_password_bytes(v)


class TokenResponse(BaseModel):
    """Response carrying a signed bearer token"""
    token: str
