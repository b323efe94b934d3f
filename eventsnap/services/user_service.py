from typing import List, Optional
from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from eventsnap.schemas import UserCreate, UserUpdate
from eventsnap.db.models import User
from eventsnap.db.repositories import (
    get_user as db_get_user,
    list_users as db_list_users,
    update_user as db_update_user,
    deactivate_user as db_deactivate_user,
    delete_user as db_delete_user,
)
from eventsnap.services.auth_service import AuthService
from eventsnap.services.permissions import ensure_admin, ensure_self_or_admin, is_admin
from eventsnap.core.logging import logger


class UserService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_user(self, payload: UserCreate, actor: User) -> User:
        ensure_admin(actor)
        return await AuthService(self.session).create_user(payload)

    async def get_all_users(self, actor: User) -> List[User]:
        ensure_admin(actor)
        return await db_list_users(self.session)

    async def get_user_by_id(self, user_id: int, actor: User) -> Optional[User]:
        ensure_self_or_admin(user_id, actor)
        return await db_get_user(self.session, user_id)

    async def update_user(self, user_id: int, payload: UserUpdate, actor: User) -> User:
        """
        Partially update a user. Organizers may edit their own record, including
        their upload rate limit, but only administrators change ``is_active``.
        """
        ensure_self_or_admin(user_id, actor)
        changes = payload.dict(exclude_unset=True)
        if "is_active" in changes and not is_admin(actor):
            raise HTTPException(status_code=403, detail="Only administrators can change account status")
        user = await db_update_user(self.session, user_id, changes)
        logger.info(f"User {user_id} updated by {actor.id}: {sorted(changes)}")
        return user

    async def deactivate_user(self, user_id: int, actor: User) -> User:
        ensure_admin(actor)
        user = await db_deactivate_user(self.session, user_id)
        logger.info(f"User {user_id} deactivated by {actor.id}")
        return user

    async def delete_user(self, user_id: int, actor: User) -> None:
        ensure_admin(actor)
        await db_delete_user(self.session, user_id)
