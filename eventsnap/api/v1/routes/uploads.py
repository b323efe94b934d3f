from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from eventsnap.schemas import (
    GuestUploadCreate,
    GuestUploadUpdate,
    GuestUploadOut,
    UploadDownload,
    RateLimitStatus,
    DeleteResult,
)
from eventsnap.db.session import get_session
from eventsnap.db.models import User
from eventsnap.services.upload_service import UploadService
from eventsnap.auth import get_current_user, admin_required

router = APIRouter(prefix="/uploads", tags=["uploads"])

def get_upload_service(session: AsyncSession = Depends(get_session)) -> UploadService:
    return UploadService(session)

@router.post("/", response_model=GuestUploadOut, status_code=status.HTTP_201_CREATED)
async def create_guest_upload(
    payload: GuestUploadCreate,
    user: User = Depends(get_current_user),
    upload_service: UploadService = Depends(get_upload_service)
):
    """Record an upload on behalf of the event's organizer (no admission check)."""
    return await upload_service.create_guest_upload(payload, user)

@router.get("/", response_model=List[GuestUploadOut])
async def get_all_uploads(
    user: User = Depends(admin_required),
    upload_service: UploadService = Depends(get_upload_service)
):
    return await upload_service.get_all_uploads(user)

@router.get("/event/{event_id}", response_model=List[GuestUploadOut])
async def get_uploads_by_event(
    event_id: int,
    user: User = Depends(get_current_user),
    upload_service: UploadService = Depends(get_upload_service)
):
    """Uploads of one event, favorites first, then newest first."""
    return await upload_service.get_uploads_by_event(event_id, user)

@router.get("/event/{event_id}/rate-limit", response_model=RateLimitStatus)
async def check_upload_rate_limit(
    event_id: int,
    upload_ip: str = Query(..., min_length=1, description="Submitter address to evaluate"),
    user: User = Depends(get_current_user),
    upload_service: UploadService = Depends(get_upload_service)
):
    return await upload_service.check_upload_rate_limit(event_id, upload_ip, user)

@router.get("/{upload_id}/download", response_model=UploadDownload)
async def download_upload(
    upload_id: int,
    user: User = Depends(get_current_user),
    upload_service: UploadService = Depends(get_upload_service)
):
    download = await upload_service.download_upload(upload_id, user)
    if download is None:
        raise HTTPException(status_code=404, detail="Upload not found")
    return download

@router.patch("/{upload_id}", response_model=GuestUploadOut)
async def update_guest_upload(
    upload_id: int,
    payload: GuestUploadUpdate,
    user: User = Depends(get_current_user),
    upload_service: UploadService = Depends(get_upload_service)
):
    return await upload_service.update_guest_upload(upload_id, payload, user)

@router.delete("/{upload_id}", response_model=DeleteResult)
async def delete_guest_upload(
    upload_id: int,
    user: User = Depends(get_current_user),
    upload_service: UploadService = Depends(get_upload_service)
):
    await upload_service.delete_guest_upload(upload_id, user)
    return DeleteResult()
