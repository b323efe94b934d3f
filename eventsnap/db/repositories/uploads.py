"""
Guest upload persistence and upload admission control.

Admission is advisory: ``check_upload_rate_limit`` only reads, and the caller
creates the upload in a separate step. Two submissions from the same address
arriving together can both be admitted.
"""
from datetime import datetime, timedelta
from typing import List, Optional
from fastapi import HTTPException
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from eventsnap.db.models import GuestUpload, Event, User
from eventsnap.db.repositories.events import get_event
from eventsnap.db.session import utcnow
from eventsnap.schemas import GuestUploadCreate
from eventsnap.core.config import settings


async def create_upload(db: AsyncSession, payload: GuestUploadCreate) -> GuestUpload:
    """
    Record metadata of a file a guest has uploaded.

    Uploads always start unfavorited.

    Raises:
        HTTPException: 404 if the event does not exist
    """
    if not await get_event(db, payload.event_id):
        raise HTTPException(status_code=404, detail="Event not found")
    upload = GuestUpload(**payload.dict(), is_favorited=False)
    db.add(upload)
    await db.commit()
    await db.refresh(upload)
    return upload


async def get_upload(db: AsyncSession, upload_id: int) -> Optional[GuestUpload]:
    res = await db.execute(select(GuestUpload).where(GuestUpload.id == upload_id))
    return res.scalars().first()


async def list_uploads_for_event(db: AsyncSession, event_id: int) -> List[GuestUpload]:
    """
    Uploads of one event: favorited first, newest first within each group.

    Raises:
        HTTPException: 404 if the event does not exist
    """
    if not await get_event(db, event_id):
        raise HTTPException(status_code=404, detail="Event not found")
    q = (
        select(GuestUpload)
        .where(GuestUpload.event_id == event_id)
        .order_by(GuestUpload.is_favorited.desc(), GuestUpload.created_at.desc(), GuestUpload.id.desc())
    )
    res = await db.execute(q)
    return list(res.scalars().all())


async def list_uploads(db: AsyncSession) -> List[GuestUpload]:
    q = select(GuestUpload).order_by(GuestUpload.created_at.desc(), GuestUpload.id.desc())
    res = await db.execute(q)
    return list(res.scalars().all())


async def update_upload(db: AsyncSession, upload_id: int, changes: dict) -> GuestUpload:
    upload = await get_upload(db, upload_id)
    if not upload:
        raise HTTPException(status_code=404, detail="Upload not found")
    for field, value in changes.items():
        setattr(upload, field, value)
    await db.commit()
    await db.refresh(upload)
    return upload


async def delete_upload(db: AsyncSession, upload_id: int) -> None:
    upload = await get_upload(db, upload_id)
    if not upload:
        raise HTTPException(status_code=404, detail="Upload not found")
    await db.delete(upload)
    await db.commit()


async def count_recent_uploads(
    db: AsyncSession,
    event_id: int,
    upload_ip: str,
    since: datetime
) -> int:
    """Uploads to ``event_id`` from exactly ``upload_ip`` created at or after ``since``."""
    q = select(func.count(GuestUpload.id)).where(
        GuestUpload.event_id == event_id,
        GuestUpload.upload_ip == upload_ip,
        GuestUpload.created_at >= since,
    )
    res = await db.execute(q)
    return res.scalar() or 0


async def check_upload_rate_limit(
    db: AsyncSession,
    event_id: int,
    upload_ip: str,
    now: Optional[datetime] = None
) -> dict:
    """
    Decide whether another upload from ``upload_ip`` to ``event_id`` is admitted.

    The limit is the organizer's ``upload_rate_limit``, counted over a rolling
    window of UPLOAD_RATE_LIMIT_WINDOW_MINUTES ending at ``now``.

    Args:
        db: Database session
        event_id: Event receiving the upload
        upload_ip: Submitter address, compared exactly
        now: Evaluation time, defaults to the current UTC time

    Returns:
        ``{"allowed": bool, "remaining": int}``

    Raises:
        HTTPException: 404 if the event does not exist
    """
    q = (
        select(User.upload_rate_limit)
        .join(Event, Event.organizer_id == User.id)
        .where(Event.id == event_id)
    )
    res = await db.execute(q)
    rate_limit = res.scalar()
    if rate_limit is None:
        raise HTTPException(status_code=404, detail="Event not found")

    window_start = (now or utcnow()) - timedelta(minutes=settings.UPLOAD_RATE_LIMIT_WINDOW_MINUTES)
    current = await count_recent_uploads(db, event_id, upload_ip, window_start)
    return {
        "allowed": current < rate_limit,
        "remaining": max(0, rate_limit - current),
    }
