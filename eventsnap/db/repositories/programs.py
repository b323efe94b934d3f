from typing import List, Optional
from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from eventsnap.db.models import EventProgram
from eventsnap.db.repositories.events import get_event
from eventsnap.schemas import EventProgramCreate


async def create_program(db: AsyncSession, payload: EventProgramCreate) -> EventProgram:
    """
    Add a program entry to an event.

    Raises:
        HTTPException: 404 if the event does not exist
    """
    if not await get_event(db, payload.event_id):
        raise HTTPException(status_code=404, detail="Event not found")
    program = EventProgram(**payload.dict())
    db.add(program)
    await db.commit()
    await db.refresh(program)
    return program


async def get_program(db: AsyncSession, program_id: int) -> Optional[EventProgram]:
    res = await db.execute(select(EventProgram).where(EventProgram.id == program_id))
    return res.scalars().first()


async def list_programs_for_event(db: AsyncSession, event_id: int) -> List[EventProgram]:
    """Program entries in guest-facing display order."""
    q = (
        select(EventProgram)
        .where(EventProgram.event_id == event_id)
        .order_by(EventProgram.order_index.asc(), EventProgram.id.asc())
    )
    res = await db.execute(q)
    return list(res.scalars().all())


async def update_program(db: AsyncSession, program_id: int, changes: dict) -> EventProgram:
    program = await get_program(db, program_id)
    if not program:
        raise HTTPException(status_code=404, detail="Program entry not found")
    for field, value in changes.items():
        setattr(program, field, value)
    await db.commit()
    await db.refresh(program)
    return program


async def delete_program(db: AsyncSession, program_id: int) -> None:
    program = await get_program(db, program_id)
    if not program:
        raise HTTPException(status_code=404, detail="Program entry not found")
    await db.delete(program)
    await db.commit()


async def reorder_programs(db: AsyncSession, event_id: int, program_ids: List[int]) -> List[EventProgram]:
    """
    Renumber an event's program entries.

    Listed entries take order_index 0..n-1 in list order; entries not listed
    keep their relative order and are placed after them.

    Raises:
        HTTPException: 404 if the event does not exist or a listed id is not
            one of its program entries
    """
    if not await get_event(db, event_id):
        raise HTTPException(status_code=404, detail="Event not found")

    current = await list_programs_for_event(db, event_id)
    by_id = {p.id: p for p in current}
    missing = [pid for pid in program_ids if pid not in by_id]
    if missing:
        raise HTTPException(
            status_code=404,
            detail=f"Program entries not found for event {event_id}: {missing}"
        )

    listed = list(dict.fromkeys(program_ids))
    listed_ids = set(listed)
    ordered = [by_id[pid] for pid in listed] + [p for p in current if p.id not in listed_ids]
    for index, program in enumerate(ordered):
        program.order_index = index
    await db.commit()
    return await list_programs_for_event(db, event_id)
