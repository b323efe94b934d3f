from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from eventsnap.schemas import EventCreate, EventUpdate, EventOut, DeleteResult
from eventsnap.db.session import get_session
from eventsnap.db.models import User
from eventsnap.services.event_service import EventService
from eventsnap.auth import get_current_user, admin_required, organizer_required

router = APIRouter(prefix="/events", tags=["events"])

def get_event_service(session: AsyncSession = Depends(get_session)) -> EventService:
    return EventService(session)

@router.post("/", response_model=EventOut, status_code=status.HTTP_201_CREATED)
async def create_event(
    payload: EventCreate,
    user: User = Depends(organizer_required),
    event_service: EventService = Depends(get_event_service)
):
    """Create an event owned by the caller; the QR code token is generated here."""
    return await event_service.create_event(payload, user)

@router.get("/", response_model=List[EventOut])
async def get_all_events(
    user: User = Depends(admin_required),
    event_service: EventService = Depends(get_event_service)
):
    return await event_service.get_all_events(user)

@router.get("/organizer/{organizer_id}", response_model=List[EventOut])
async def get_events_by_organizer(
    organizer_id: int,
    user: User = Depends(get_current_user),
    event_service: EventService = Depends(get_event_service)
):
    return await event_service.get_events_by_organizer(organizer_id, user)

@router.get("/{event_id}", response_model=EventOut)
async def get_event_by_id(
    event_id: int,
    user: User = Depends(get_current_user),
    event_service: EventService = Depends(get_event_service)
):
    ev = await event_service.get_event_by_id(event_id, user)
    if not ev:
        raise HTTPException(status_code=404, detail="Event not found")
    return ev

@router.patch("/{event_id}", response_model=EventOut)
async def update_event(
    event_id: int,
    payload: EventUpdate,
    user: User = Depends(get_current_user),
    event_service: EventService = Depends(get_event_service)
):
    return await event_service.update_event(event_id, payload, user)

@router.delete("/{event_id}", response_model=DeleteResult)
async def delete_event(
    event_id: int,
    user: User = Depends(get_current_user),
    event_service: EventService = Depends(get_event_service)
):
    await event_service.delete_event(event_id, user)
    return DeleteResult()
