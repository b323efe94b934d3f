from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi import HTTPException
from eventsnap.schemas import ContactPersonCreate, ContactPersonUpdate
from eventsnap.db.models import ContactPerson, User
from eventsnap.db.repositories import (
    create_contact as db_create_contact,
    get_contact as db_get_contact,
    list_contacts_for_event as db_list_contacts,
    update_contact as db_update_contact,
    delete_contact as db_delete_contact,
)
from eventsnap.services.permissions import load_event_for


class ContactService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def _load_contact_for(self, contact_id: int, actor: User) -> ContactPerson:
        contact = await db_get_contact(self.session, contact_id)
        if not contact:
            raise HTTPException(status_code=404, detail="Contact person not found")
        await load_event_for(self.session, contact.event_id, actor)
        return contact

    async def create_contact_person(self, payload: ContactPersonCreate, actor: User) -> ContactPerson:
        await load_event_for(self.session, payload.event_id, actor)
        return await db_create_contact(self.session, payload)

    async def get_contact_persons_by_event(self, event_id: int, actor: User) -> List[ContactPerson]:
        await load_event_for(self.session, event_id, actor)
        return await db_list_contacts(self.session, event_id)

    async def update_contact_person(self, contact_id: int, payload: ContactPersonUpdate, actor: User) -> ContactPerson:
        await self._load_contact_for(contact_id, actor)
        return await db_update_contact(self.session, contact_id, payload.dict(exclude_unset=True))

    async def delete_contact_person(self, contact_id: int, actor: User) -> None:
        await self._load_contact_for(contact_id, actor)
        await db_delete_contact(self.session, contact_id)
