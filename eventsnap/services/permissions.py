"""Ownership checks shared by the services."""
from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from eventsnap.db.models import Event, User, RoleEnum
from eventsnap.db.repositories import get_event


def is_admin(user: User) -> bool:
    return user.role == RoleEnum.administrator


def ensure_admin(user: User) -> None:
    if not is_admin(user):
        raise HTTPException(status_code=403, detail="Administrator access required")


def ensure_self_or_admin(user_id: int, actor: User) -> None:
    if actor.id != user_id and not is_admin(actor):
        raise HTTPException(status_code=403, detail="Forbidden")


def ensure_event_access(event: Event, actor: User) -> None:
    """Organizers may only touch their own events."""
    if event.organizer_id != actor.id and not is_admin(actor):
        raise HTTPException(status_code=403, detail="You do not manage this event")


async def load_event_for(session: AsyncSession, event_id: int, actor: User) -> Event:
    """Fetch an event the actor may manage, or fail with 404/403."""
    event = await get_event(session, event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    ensure_event_access(event, actor)
    return event
