from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from eventsnap.schemas import ContactPersonCreate, ContactPersonUpdate, ContactPersonOut, DeleteResult
from eventsnap.db.session import get_session
from eventsnap.db.models import User
from eventsnap.services.contact_service import ContactService
from eventsnap.auth import get_current_user

router = APIRouter(prefix="/contacts", tags=["contacts"])

def get_contact_service(session: AsyncSession = Depends(get_session)) -> ContactService:
    return ContactService(session)

@router.post("/", response_model=ContactPersonOut, status_code=status.HTTP_201_CREATED)
async def create_contact_person(
    payload: ContactPersonCreate,
    user: User = Depends(get_current_user),
    contact_service: ContactService = Depends(get_contact_service)
):
    return await contact_service.create_contact_person(payload, user)

@router.get("/event/{event_id}", response_model=List[ContactPersonOut])
async def get_contact_persons_by_event(
    event_id: int,
    user: User = Depends(get_current_user),
    contact_service: ContactService = Depends(get_contact_service)
):
    """All contacts of the event, designated contact persons first."""
    return await contact_service.get_contact_persons_by_event(event_id, user)

@router.patch("/{contact_id}", response_model=ContactPersonOut)
async def update_contact_person(
    contact_id: int,
    payload: ContactPersonUpdate,
    user: User = Depends(get_current_user),
    contact_service: ContactService = Depends(get_contact_service)
):
    return await contact_service.update_contact_person(contact_id, payload, user)

@router.delete("/{contact_id}", response_model=DeleteResult)
async def delete_contact_person(
    contact_id: int,
    user: User = Depends(get_current_user),
    contact_service: ContactService = Depends(get_contact_service)
):
    await contact_service.delete_contact_person(contact_id, user)
    return DeleteResult()
