from typing import List, Optional
from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from eventsnap.db.models import ContactPerson
from eventsnap.db.repositories.events import get_event
from eventsnap.schemas import ContactPersonCreate


async def create_contact(db: AsyncSession, payload: ContactPersonCreate) -> ContactPerson:
    if not await get_event(db, payload.event_id):
        raise HTTPException(status_code=404, detail="Event not found")
    contact = ContactPerson(**payload.dict())
    db.add(contact)
    await db.commit()
    await db.refresh(contact)
    return contact


async def get_contact(db: AsyncSession, contact_id: int) -> Optional[ContactPerson]:
    res = await db.execute(select(ContactPerson).where(ContactPerson.id == contact_id))
    return res.scalars().first()


async def list_contacts_for_event(
    db: AsyncSession,
    event_id: int,
    designated_only: bool = False
) -> List[ContactPerson]:
    """
    Contacts of an event, designated contacts first, then alphabetically.

    Args:
        designated_only: Return only contacts flagged for public display
    """
    q = (
        select(ContactPerson)
        .where(ContactPerson.event_id == event_id)
        .order_by(ContactPerson.is_contact_person.desc(), ContactPerson.name.asc(), ContactPerson.id.asc())
    )
    if designated_only:
        q = q.where(ContactPerson.is_contact_person.is_(True))
    res = await db.execute(q)
    return list(res.scalars().all())


async def update_contact(db: AsyncSession, contact_id: int, changes: dict) -> ContactPerson:
    contact = await get_contact(db, contact_id)
    if not contact:
        raise HTTPException(status_code=404, detail="Contact person not found")
    for field, value in changes.items():
        setattr(contact, field, value)
    await db.commit()
    await db.refresh(contact)
    return contact


async def delete_contact(db: AsyncSession, contact_id: int) -> None:
    contact = await get_contact(db, contact_id)
    if not contact:
        raise HTTPException(status_code=404, detail="Contact person not found")
    await db.delete(contact)
    await db.commit()
