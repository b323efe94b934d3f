from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from eventsnap.db.session import get_session
from eventsnap.db.models import User, RoleEnum
from eventsnap.db.repositories import get_user
from eventsnap.core.security import decode_token, is_token_revoked

security = HTTPBearer()


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    session: AsyncSession = Depends(get_session)
) -> User:
    """
    Resolve the user behind a bearer access token.

    Raises:
        HTTPException: 401 if the token is invalid, revoked or of the wrong
            type, 403 if the account has been deactivated
    """
    token = credentials.credentials

    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if await is_token_revoked(token):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has been revoked",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = decode_token(token)
    except ValueError:
        raise credentials_exception

    if payload.get("type") != "access":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token type",
            headers={"WWW-Authenticate": "Bearer"},
        )

    subject: Optional[str] = payload.get("sub")
    try:
        user_id = int(subject)
    except (TypeError, ValueError):
        raise credentials_exception

    user = await get_user(session, user_id)
    if not user:
        raise credentials_exception
    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Account is inactive")
    return user


def role_required(required_role: RoleEnum):
    """
    Dependency to require specific role for endpoint access.

    Administrators pass every role check.
    """
    async def role_checker(user: User = Depends(get_current_user)) -> User:
        if user.role not in (required_role, RoleEnum.administrator):
            raise HTTPException(status_code=403, detail="Forbidden")
        return user
    return role_checker


admin_required = role_required(RoleEnum.administrator)
organizer_required = role_required(RoleEnum.event_organizer)
