from fastapi import Depends, HTTPException, Request, status

from ..core.config import Settings, get_settings
from ..core.exceptions import AuthorizationError
from ..services.token_service import decode_token


async def get_current_user(request: Request, settings: Settings = Depends(get_settings)) -> str:
    """
    Dependency that validates the bearer token and returns its username claim.
    Use this on all protected endpoints.
    """
    auth_header = request.headers.get("Authorization")

    if not auth_header or not auth_header.startswith("Bearer "):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = auth_header[len("Bearer "):]
    claims = decode_token(token, settings.SECRET_KEY, settings.JWT_ALGORITHM)

    if not claims or not claims.get("username"):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return claims["username"]


async def ensure_correct_user(username: str, current_user: str = Depends(get_current_user)) -> str:
    """
    Dependency for routes scoped to one user: the token must belong to the
    username in the path.
    """
    if current_user != username:
        raise AuthorizationError(f"Not allowed to access '{username}'")
    return current_user
