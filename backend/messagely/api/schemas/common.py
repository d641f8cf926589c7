from pydantic import BaseModel
from typing import Optional


class ErrorResponse(BaseModel):
    """Standard error response"""
    success: bool = False
    message: str
    status_code: int
    path: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "success": False,
                "message": "The user with the username 'bob' does not exist!",
                "status_code": 404,
                "path": "/api/v1/users/bob"
            }
        }


class HealthResponse(BaseModel):
    """Health check response"""
    status: str = "healthy"
    service: str = "messagely-api"
    version: str = "0.1.0"
    timestamp: str
    database: str = "connected"
