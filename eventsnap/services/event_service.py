from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from eventsnap.schemas import EventCreate, EventUpdate
from eventsnap.db.models import Event, User
from eventsnap.db.repositories import (
    create_event as db_create_event,
    get_event as db_get_event,
    get_event_by_token as db_get_event_by_token,
    list_events as db_list_events,
    update_event as db_update_event,
    delete_event as db_delete_event,
)
from eventsnap.services.permissions import ensure_admin, ensure_event_access, ensure_self_or_admin, load_event_for
from eventsnap.core.logging import logger


class EventService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_event(self, payload: EventCreate, actor: User) -> Event:
        event = await db_create_event(self.session, payload, actor.id)
        logger.info(f"Event {event.id} created by organizer {actor.id}")
        return event

    async def get_events_by_organizer(self, organizer_id: int, actor: User) -> List[Event]:
        ensure_self_or_admin(organizer_id, actor)
        return await db_list_events(self.session, organizer_id=organizer_id)

    async def get_all_events(self, actor: User) -> List[Event]:
        ensure_admin(actor)
        return await db_list_events(self.session)

    async def get_event_by_id(self, event_id: int, actor: User) -> Optional[Event]:
        event = await db_get_event(self.session, event_id)
        if event:
            ensure_event_access(event, actor)
        return event

    async def get_event_by_token(self, qr_code_token: str) -> Optional[Event]:
        return await db_get_event_by_token(self.session, qr_code_token)

    async def update_event(self, event_id: int, payload: EventUpdate, actor: User) -> Event:
        await load_event_for(self.session, event_id, actor)
        return await db_update_event(self.session, event_id, payload.dict(exclude_unset=True))

    async def delete_event(self, event_id: int, actor: User) -> None:
        await load_event_for(self.session, event_id, actor)
        await db_delete_event(self.session, event_id)
        logger.info(f"Event {event_id} and its programs, contacts and uploads deleted by {actor.id}")
