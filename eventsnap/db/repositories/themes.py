from typing import List, Optional
from fastapi import HTTPException
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from eventsnap.db.models import EventTheme, Event
from eventsnap.schemas import EventThemeCreate


async def create_theme(db: AsyncSession, payload: EventThemeCreate) -> EventTheme:
    theme = EventTheme(**payload.dict())
    db.add(theme)
    await db.commit()
    await db.refresh(theme)
    return theme


async def get_theme(db: AsyncSession, theme_id: int) -> Optional[EventTheme]:
    res = await db.execute(select(EventTheme).where(EventTheme.id == theme_id))
    return res.scalars().first()


async def list_themes(db: AsyncSession, standard_only: bool = False) -> List[EventTheme]:
    q = select(EventTheme).order_by(EventTheme.name, EventTheme.id)
    if standard_only:
        q = q.where(EventTheme.is_standard.is_(True))
    res = await db.execute(q)
    return list(res.scalars().all())


async def update_theme(db: AsyncSession, theme_id: int, changes: dict) -> EventTheme:
    theme = await get_theme(db, theme_id)
    if not theme:
        raise HTTPException(status_code=404, detail="Theme not found")
    for field, value in changes.items():
        setattr(theme, field, value)
    await db.commit()
    await db.refresh(theme)
    return theme


async def count_events_using_theme(db: AsyncSession, theme_id: int) -> int:
    res = await db.execute(select(func.count(Event.id)).where(Event.theme_id == theme_id))
    return res.scalar() or 0


async def delete_theme(db: AsyncSession, theme_id: int) -> None:
    """
    Delete a theme that no event references.

    Raises:
        HTTPException: 409 while any event uses the theme, 404 if it does not exist
    """
    theme = await get_theme(db, theme_id)
    if not theme:
        raise HTTPException(status_code=404, detail="Theme not found")
    if await count_events_using_theme(db, theme_id) > 0:
        raise HTTPException(
            status_code=409,
            detail="Cannot delete theme: it is currently in use by one or more events"
        )
    await db.delete(theme)
    await db.commit()
