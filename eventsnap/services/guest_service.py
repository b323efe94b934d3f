"""
Guest-facing operations. Guests hold no credentials; the event's QR code
token is the only capability they present.
"""
from typing import List, Optional
from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from eventsnap.schemas import GuestUploadFile, GuestUploadCreate
from eventsnap.db.models import Event, EventProgram, ContactPerson, GuestUpload
from eventsnap.db.repositories import (
    get_event_by_token as db_get_event_by_token,
    list_programs_for_event as db_list_programs,
    list_contacts_for_event as db_list_contacts,
    create_upload as db_create_upload,
    check_upload_rate_limit as db_check_upload_rate_limit,
)
from eventsnap.core.logging import logger


class GuestService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def _require_event(self, qr_code_token: str) -> Event:
        event = await db_get_event_by_token(self.session, qr_code_token)
        if not event:
            raise HTTPException(status_code=404, detail="Event not found")
        return event

    async def get_event(self, qr_code_token: str) -> Optional[Event]:
        return await db_get_event_by_token(self.session, qr_code_token)

    async def get_programs(self, qr_code_token: str) -> List[EventProgram]:
        event = await self._require_event(qr_code_token)
        return await db_list_programs(self.session, event.id)

    async def get_contacts(self, qr_code_token: str) -> List[ContactPerson]:
        """Only contacts the organizer marked for public display."""
        event = await self._require_event(qr_code_token)
        return await db_list_contacts(self.session, event.id, designated_only=True)

    def _require_accepting_uploads(self, event: Event) -> None:
        if not event.is_active:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Event is not accepting uploads")

    async def check_upload_rate_limit(self, qr_code_token: str, upload_ip: str) -> dict:
        """
        Remaining uploads for the calling address.

        Raises:
            HTTPException: 404 for an unknown token, 403 if the event is inactive
        """
        event = await self._require_event(qr_code_token)
        self._require_accepting_uploads(event)
        return await db_check_upload_rate_limit(self.session, event.id, upload_ip)

    async def submit_upload(self, qr_code_token: str, payload: GuestUploadFile, upload_ip: str) -> GuestUpload:
        """
        Admit and record one guest upload.

        Raises:
            HTTPException: 404 for an unknown token, 403 if the event is
                inactive, 429 once the address has used up the organizer's limit
        """
        event = await self._require_event(qr_code_token)
        self._require_accepting_uploads(event)

        admission = await db_check_upload_rate_limit(self.session, event.id, upload_ip)
        if not admission["allowed"]:
            logger.warning(f"Upload from {upload_ip} to event {event.id} denied: rate limit reached")
            raise HTTPException(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                detail="Upload limit reached, please try again later"
            )

        upload = await db_create_upload(
            self.session,
            GuestUploadCreate(**payload.dict(), event_id=event.id, upload_ip=upload_ip),
        )
        logger.info(f"Upload {upload.id} accepted for event {event.id} ({admission['remaining'] - 1} left for {upload_ip})")
        return upload
