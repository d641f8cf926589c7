from fastapi import APIRouter, Depends

from ..schemas import RegisterRequest, LoginRequest, TokenResponse
from ...services.session_issuer import SessionIssuer, get_session_issuer

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/login", response_model=TokenResponse)
async def login(request: LoginRequest, issuer: SessionIssuer = Depends(get_session_issuer)):
    """login: {username, password} => {token}, stamping the user's last login"""
    token = await issuer.login(request.username, request.password)
    return TokenResponse(token=token)


@router.post("/register", response_model=TokenResponse)
async def register(request: RegisterRequest, issuer: SessionIssuer = Depends(get_session_issuer)):
    """register: {username, password, first_name, last_name, phone} => {token}"""
    token = await issuer.register_and_issue(request.model_dump())
    return TokenResponse(token=token)
