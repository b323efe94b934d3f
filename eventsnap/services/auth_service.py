"""Authentication service for sign-up, login and JWT token operations."""
from typing import Optional
from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from eventsnap.schemas import UserCreate, UserRegister, LoginRequest, UserRole
from eventsnap.db.models import User
from eventsnap.db.repositories import (
    create_user as db_create_user,
    get_user as db_get_user,
    get_user_by_email as db_get_user_by_email,
)
from eventsnap.core.security import (
    create_access_token,
    create_refresh_token,
    decode_token,
    revoke_token,
    validate_password,
    verify_password,
)
from eventsnap.core.logging import logger


class AuthService:
    """
    Service layer for authentication operations.

    Handles organizer sign-up, login, token refresh and logout.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_user(self, payload: UserCreate) -> User:
        """
        Create a user after checking password strength.

        Raises:
            HTTPException: 400 if the password is weak, 409 if the email exists
        """
        try:
            validate_password(payload.password)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

        user = await db_create_user(self.session, payload)
        logger.info(f"Created {user.role.value} account {user.id} ({user.email})")
        return user

    async def register(self, payload: UserRegister) -> User:
        """Public sign-up; always creates an event organizer."""
        return await self.create_user(
            UserCreate(**payload.dict(), role=UserRole.event_organizer)
        )

    async def login(self, form_data: LoginRequest) -> dict:
        """
        Authenticate user and generate access and refresh tokens.

        Returns:
            Dictionary with access_token, refresh_token, token_type and user

        Raises:
            HTTPException: 401 if credentials are invalid, 403 if the account
                is inactive
        """
        user = await db_get_user_by_email(self.session, form_data.email)
        if not user or not verify_password(form_data.password, user.password_hash):
            logger.warning(f"Failed login for {form_data.email}")
            raise HTTPException(status_code=401, detail="Invalid email or password")
        if not user.is_active:
            logger.warning(f"Login attempt on inactive account {user.id}")
            raise HTTPException(status_code=403, detail="Account is inactive")

        token_data = {"sub": str(user.id), "role": user.role.value}
        return {
            "access_token": create_access_token(token_data),
            "refresh_token": create_refresh_token(token_data),
            "token_type": "bearer",
            "user": user,
        }

    async def refresh_access_token(self, refresh_token: str) -> dict:
        """
        Generate a new access token using a valid refresh token.

        Raises:
            HTTPException: 401 if the refresh token is invalid, of the wrong
                type, or belongs to a deactivated or deleted account
        """
        try:
            token_data = decode_token(refresh_token)
        except ValueError:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid refresh token"
            )

        if token_data.get("type") != "refresh":
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid token type"
            )

        try:
            user_id = int(token_data["sub"])
        except (TypeError, ValueError):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid refresh token"
            )

        user = await self.get_current_user(user_id)
        if not user or not user.is_active:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid refresh token"
            )

        access_token = create_access_token({"sub": str(user.id), "role": user.role.value})
        return {
            "access_token": access_token,
            "token_type": "bearer"
        }

    async def logout(self, token: str):
        """Revoke user's access token."""
        await revoke_token(token)

    async def get_current_user(self, user_id: int) -> Optional[User]:
        return await db_get_user(self.session, user_id)
