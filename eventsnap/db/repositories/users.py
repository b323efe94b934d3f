"""
User persistence, including the organizer cascade delete.
"""
from typing import List, Optional
from fastapi import HTTPException
from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from eventsnap.db.models import User, Event, RoleEnum
from eventsnap.db.repositories.events import delete_event_children
from eventsnap.schemas import UserCreate
from eventsnap.core.config import settings
from eventsnap.core.security import hash_password
from eventsnap.core.logging import logger


async def _commit_user_changes(db: AsyncSession) -> None:
    # A concurrent sign-up can pass the email lookup too; the unique index on users.email decides
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        if "email" in str(e.orig).lower():
            raise HTTPException(status_code=409, detail="Email already registered")
        raise HTTPException(status_code=400, detail="Database constraint violation")


async def create_user(db: AsyncSession, user_in: UserCreate) -> User:
    """
    Create a new user with hashed password.

    Args:
        db: Database session
        user_in: User data; a missing upload_rate_limit takes the configured default

    Returns:
        Created User object

    Raises:
        HTTPException: 409 if the email is already registered
    """
    if await get_user_by_email(db, user_in.email):
        raise HTTPException(status_code=409, detail="Email already registered")

    upload_rate_limit = user_in.upload_rate_limit
    if upload_rate_limit is None:
        upload_rate_limit = settings.DEFAULT_UPLOAD_RATE_LIMIT

    user = User(
        username=user_in.username,
        email=user_in.email,
        password_hash=hash_password(user_in.password),
        role=RoleEnum(user_in.role.value),
        subscription_status=user_in.subscription_status,
        upload_rate_limit=upload_rate_limit,
    )
    db.add(user)
    await _commit_user_changes(db)
    await db.refresh(user)
    return user


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    """
    Retrieve user by email address.

    Returns:
        User object if found, None otherwise
    """
    q = select(User).where(User.email == email)
    res = await db.execute(q)
    return res.scalars().first()


async def get_user(db: AsyncSession, user_id: int) -> Optional[User]:
    q = select(User).where(User.id == user_id)
    res = await db.execute(q)
    return res.scalars().first()


async def list_users(db: AsyncSession) -> List[User]:
    res = await db.execute(select(User).order_by(User.created_at.desc(), User.id.desc()))
    return list(res.scalars().all())


async def update_user(db: AsyncSession, user_id: int, changes: dict) -> User:
    """
    Apply a partial update to a user.

    Raises:
        HTTPException: 404 if the user does not exist, 409 if the new email is taken
    """
    user = await get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    new_email = changes.get("email")
    if new_email is not None and new_email != user.email:
        if await get_user_by_email(db, new_email):
            raise HTTPException(status_code=409, detail="Email already registered")

    for field, value in changes.items():
        setattr(user, field, value)
    await _commit_user_changes(db)
    await db.refresh(user)
    return user


async def deactivate_user(db: AsyncSession, user_id: int) -> User:
    return await update_user(db, user_id, {"is_active": False})


async def delete_user(db: AsyncSession, user_id: int) -> None:
    """
    Delete a user, their events and every event's programs, contacts and uploads.

    All statements run in one transaction; a failure leaves nothing half-deleted.

    Raises:
        HTTPException: 404 if the user does not exist
    """
    user = await get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    try:
        res = await db.execute(select(Event.id).where(Event.organizer_id == user_id))
        event_ids = list(res.scalars().all())
        await delete_event_children(db, event_ids)
        await db.execute(delete(Event).where(Event.organizer_id == user_id))
        await db.execute(delete(User).where(User.id == user_id))
        await db.commit()
    except Exception:
        await db.rollback()
        logger.exception(f"Cascade delete of user {user_id} rolled back")
        raise
    logger.info(f"Deleted user {user_id} with {len(event_ids)} event(s)")
