from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from eventsnap.schemas import UserCreate, UserUpdate, UserOut, DeleteResult
from eventsnap.db.session import get_session
from eventsnap.db.models import User
from eventsnap.services.user_service import UserService
from eventsnap.auth import get_current_user, admin_required

router = APIRouter(prefix="/users", tags=["users"])

def get_user_service(session: AsyncSession = Depends(get_session)) -> UserService:
    return UserService(session)

@router.get("/", response_model=List[UserOut])
async def get_all_users(
    user: User = Depends(admin_required),
    user_service: UserService = Depends(get_user_service)
):
    return await user_service.get_all_users(user)

@router.post("/", response_model=UserOut, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: UserCreate,
    user: User = Depends(admin_required),
    user_service: UserService = Depends(get_user_service)
):
    """Create an account with any role (administrators only)."""
    return await user_service.create_user(payload, user)

@router.get("/{user_id}", response_model=UserOut)
async def get_user_by_id(
    user_id: int,
    user: User = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service)
):
    found = await user_service.get_user_by_id(user_id, user)
    if not found:
        raise HTTPException(status_code=404, detail="User not found")
    return found

@router.patch("/{user_id}", response_model=UserOut)
async def update_user(
    user_id: int,
    payload: UserUpdate,
    user: User = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service)
):
    return await user_service.update_user(user_id, payload, user)

@router.post("/{user_id}/deactivate", response_model=UserOut)
async def deactivate_user(
    user_id: int,
    user: User = Depends(admin_required),
    user_service: UserService = Depends(get_user_service)
):
    return await user_service.deactivate_user(user_id, user)

@router.delete("/{user_id}", response_model=DeleteResult)
async def delete_user(
    user_id: int,
    user: User = Depends(admin_required),
    user_service: UserService = Depends(get_user_service)
):
    """Delete a user together with their events and everything attached to them."""
    await user_service.delete_user(user_id, user)
    return DeleteResult()
