"""Authentication routes for sign-up, login, logout, and token management."""
from fastapi import APIRouter, Depends, status, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from eventsnap.schemas import UserRegister, UserOut, Token, LoginResponse, LoginRequest, RefreshTokenRequest
from eventsnap.services.auth_service import AuthService
from eventsnap.db.session import get_session
from eventsnap.db.models import User
from eventsnap.auth import get_current_user
from eventsnap.core.rate_limit import limiter, LOGIN_RATE_LIMIT, REGISTER_RATE_LIMIT, REFRESH_RATE_LIMIT

router = APIRouter(prefix="/auth", tags=["auth"])
security = HTTPBearer()

def get_auth_service(session: AsyncSession = Depends(get_session)) -> AuthService:
    return AuthService(session)

@router.post("/register", response_model=UserOut, status_code=status.HTTP_201_CREATED)
@limiter.limit(REGISTER_RATE_LIMIT)
async def register(
    request: Request,
    payload: UserRegister,
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    Sign up as an event organizer.

    Rate limit: 3 requests per minute

    Raises:
        HTTPException: 400 for a weak password, 409 if the email already exists
    """
    return await auth_service.register(payload)

@router.post("/login", response_model=LoginResponse)
@limiter.limit(LOGIN_RATE_LIMIT)
async def login(
    request: Request,
    form_data: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    Login endpoint returning access and refresh tokens plus the user record.

    Rate limit: 5 requests per minute
    """
    return await auth_service.login(form_data)

@router.post("/refresh", response_model=Token)
@limiter.limit(REFRESH_RATE_LIMIT)
async def refresh_access_token(
    request: Request,
    payload: RefreshTokenRequest,
    auth_service: AuthService = Depends(get_auth_service)
):
    return await auth_service.refresh_access_token(payload.refresh_token)

@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    current_user: User = Depends(get_current_user),
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    Logout user by revoking their current token.
    Requires valid access token in Authorization header.
    """
    await auth_service.logout(credentials.credentials)
    return None

@router.get("/me", response_model=UserOut)
async def get_current_user_info(current_user: User = Depends(get_current_user)):
    return current_user
