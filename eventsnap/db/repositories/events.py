"""
Event persistence, QR token generation and the event cascade.
"""
import secrets
from typing import Iterable, List, Optional
from fastapi import HTTPException
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from eventsnap.db.models import Event, EventTheme, User, EventProgram, ContactPerson, GuestUpload
from eventsnap.schemas import EventCreate
from eventsnap.core.logging import logger


def generate_qr_code_token() -> str:
    """Random URL-safe capability string printed into the event's QR code."""
    return secrets.token_urlsafe(24)


async def _ensure_theme_exists(db: AsyncSession, theme_id: int) -> None:
    res = await db.execute(select(EventTheme.id).where(EventTheme.id == theme_id))
    if res.scalar() is None:
        raise HTTPException(status_code=404, detail="Theme not found")


async def create_event(db: AsyncSession, payload: EventCreate, organizer_id: int) -> Event:
    """
    Create an event for an organizer.

    Args:
        db: Database session
        payload: Event creation data
        organizer_id: Id of the owning user

    Returns:
        Created Event object with a freshly generated QR code token

    Raises:
        HTTPException: 404 if the organizer or the referenced theme does not exist
    """
    res = await db.execute(select(User.id).where(User.id == organizer_id))
    if res.scalar() is None:
        raise HTTPException(status_code=404, detail="Organizer not found")
    if payload.theme_id is not None:
        await _ensure_theme_exists(db, payload.theme_id)

    ev = Event(**payload.dict(), organizer_id=organizer_id, qr_code_token=generate_qr_code_token())
    db.add(ev)
    await db.commit()
    await db.refresh(ev)
    return ev


async def get_event(db: AsyncSession, event_id: int) -> Optional[Event]:
    q = select(Event).where(Event.id == event_id)
    res = await db.execute(q)
    return res.scalars().first()


async def get_event_by_token(db: AsyncSession, qr_code_token: str) -> Optional[Event]:
    """
    Look up an event by its QR code token.

    Unknown tokens yield None; guests holding a stale link are not an error.
    """
    q = select(Event).where(Event.qr_code_token == qr_code_token)
    res = await db.execute(q)
    return res.scalars().first()


async def list_events(db: AsyncSession, organizer_id: Optional[int] = None) -> List[Event]:
    q = select(Event).order_by(Event.event_date.desc(), Event.id.desc())
    if organizer_id is not None:
        q = q.where(Event.organizer_id == organizer_id)
    res = await db.execute(q)
    return list(res.scalars().all())


async def update_event(db: AsyncSession, event_id: int, changes: dict) -> Event:
    """
    Apply a partial update; keys absent from ``changes`` keep their value.

    Raises:
        HTTPException: 404 if the event or a newly referenced theme does not exist
    """
    ev = await get_event(db, event_id)
    if not ev:
        raise HTTPException(status_code=404, detail="Event not found")
    if changes.get("theme_id") is not None:
        await _ensure_theme_exists(db, changes["theme_id"])

    for field, value in changes.items():
        setattr(ev, field, value)
    await db.commit()
    await db.refresh(ev)
    return ev


async def delete_event_children(db: AsyncSession, event_ids: Iterable[int]) -> None:
    """
    Delete programs, contacts and uploads of the given events.

    Does not commit; callers finish the cascade and commit once.
    """
    event_ids = list(event_ids)
    if not event_ids:
        return
    await db.execute(delete(GuestUpload).where(GuestUpload.event_id.in_(event_ids)))
    await db.execute(delete(ContactPerson).where(ContactPerson.event_id.in_(event_ids)))
    await db.execute(delete(EventProgram).where(EventProgram.event_id.in_(event_ids)))


async def delete_event(db: AsyncSession, event_id: int) -> None:
    """
    Delete an event and everything hanging off it in a single transaction.

    Raises:
        HTTPException: 404 if the event does not exist
    """
    ev = await get_event(db, event_id)
    if not ev:
        raise HTTPException(status_code=404, detail="Event not found")

    try:
        await delete_event_children(db, [event_id])
        await db.execute(delete(Event).where(Event.id == event_id))
        await db.commit()
    except Exception:
        await db.rollback()
        logger.exception(f"Cascade delete of event {event_id} rolled back")
        raise
