from fastapi import APIRouter

from messagely.api.routes import (
    auth_router,
    users_router,
    messages_router,
    health_router
)
from messagely.api.schemas import ErrorResponse
from messagely.core.config import settings

# Create main API router; every route may answer with the standard error body
api_router = APIRouter(
    prefix=settings.API_V1_STR,
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    }
)

# Include all route modules
api_router.include_router(auth_router)
api_router.include_router(users_router)
api_router.include_router(messages_router)
api_router.include_router(health_router)
