"""
Public routes for guests arriving through an event's QR code or link.

No bearer token is required; the QR code token in the path is the capability.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession
from eventsnap.schemas import (
    EventOut,
    EventProgramOut,
    ContactPersonOut,
    GuestUploadFile,
    GuestUploadOut,
    RateLimitStatus,
)
from eventsnap.db.session import get_session
from eventsnap.services.guest_service import GuestService
from eventsnap.core.rate_limit import get_client_ip

router = APIRouter(prefix="/guest/events", tags=["guest"])

def get_guest_service(session: AsyncSession = Depends(get_session)) -> GuestService:
    return GuestService(session)

@router.get("/{qr_code_token}", response_model=Optional[EventOut])
async def get_event_by_token(
    qr_code_token: str,
    guest_service: GuestService = Depends(get_guest_service)
):
    """
    Event details for a guest. An unknown or stale token yields ``null``
    rather than an error.
    """
    return await guest_service.get_event(qr_code_token)

@router.get("/{qr_code_token}/programs", response_model=List[EventProgramOut])
async def get_event_programs(
    qr_code_token: str,
    guest_service: GuestService = Depends(get_guest_service)
):
    return await guest_service.get_programs(qr_code_token)

@router.get("/{qr_code_token}/contacts", response_model=List[ContactPersonOut])
async def get_event_contacts(
    qr_code_token: str,
    guest_service: GuestService = Depends(get_guest_service)
):
    return await guest_service.get_contacts(qr_code_token)

@router.get("/{qr_code_token}/rate-limit", response_model=RateLimitStatus)
async def check_upload_rate_limit(
    request: Request,
    qr_code_token: str,
    guest_service: GuestService = Depends(get_guest_service)
):
    """How many more uploads the calling address may submit right now."""
    return await guest_service.check_upload_rate_limit(qr_code_token, get_client_ip(request))

@router.post("/{qr_code_token}/uploads", response_model=GuestUploadOut, status_code=status.HTTP_201_CREATED)
async def create_guest_upload(
    request: Request,
    qr_code_token: str,
    payload: GuestUploadFile,
    guest_service: GuestService = Depends(get_guest_service)
):
    """
    Submit one photo's metadata. Answers 429 once the calling address has
    reached the organizer's upload limit for the current window.
    """
    return await guest_service.submit_upload(qr_code_token, payload, get_client_ip(request))
