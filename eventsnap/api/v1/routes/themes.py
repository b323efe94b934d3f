from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from eventsnap.schemas import EventThemeCreate, EventThemeUpdate, EventThemeOut, DeleteResult
from eventsnap.db.session import get_session
from eventsnap.db.models import User
from eventsnap.services.theme_service import ThemeService
from eventsnap.auth import get_current_user, admin_required

router = APIRouter(prefix="/themes", tags=["themes"])

def get_theme_service(session: AsyncSession = Depends(get_session)) -> ThemeService:
    return ThemeService(session)

@router.get("/standard", response_model=List[EventThemeOut])
async def get_standard_themes(theme_service: ThemeService = Depends(get_theme_service)):
    return await theme_service.get_standard_themes()

@router.get("/", response_model=List[EventThemeOut])
async def get_all_themes(
    user: User = Depends(get_current_user),
    theme_service: ThemeService = Depends(get_theme_service)
):
    return await theme_service.get_all_themes()

@router.post("/", response_model=EventThemeOut, status_code=status.HTTP_201_CREATED)
async def create_event_theme(
    payload: EventThemeCreate,
    user: User = Depends(admin_required),
    theme_service: ThemeService = Depends(get_theme_service)
):
    return await theme_service.create_event_theme(payload, user)

@router.patch("/{theme_id}", response_model=EventThemeOut)
async def update_event_theme(
    theme_id: int,
    payload: EventThemeUpdate,
    user: User = Depends(admin_required),
    theme_service: ThemeService = Depends(get_theme_service)
):
    return await theme_service.update_event_theme(theme_id, payload, user)

@router.delete("/{theme_id}", response_model=DeleteResult)
async def delete_event_theme(
    theme_id: int,
    user: User = Depends(admin_required),
    theme_service: ThemeService = Depends(get_theme_service)
):
    """Fails with 409 while any event still uses the theme."""
    await theme_service.delete_event_theme(theme_id, user)
    return DeleteResult()
