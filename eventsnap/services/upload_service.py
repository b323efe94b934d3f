from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi import HTTPException
from eventsnap.schemas import GuestUploadCreate, GuestUploadUpdate
from eventsnap.db.models import GuestUpload, User
from eventsnap.db.repositories import (
    create_upload as db_create_upload,
    get_upload as db_get_upload,
    list_uploads_for_event as db_list_uploads_for_event,
    list_uploads as db_list_uploads,
    update_upload as db_update_upload,
    delete_upload as db_delete_upload,
    check_upload_rate_limit as db_check_upload_rate_limit,
    get_event as db_get_event,
)
from eventsnap.services.permissions import ensure_admin, ensure_event_access, load_event_for
from eventsnap.core.logging import logger


class UploadService:
    """Organizer- and administrator-side handling of guest uploads."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _load_upload_for(self, upload_id: int, actor: User) -> GuestUpload:
        upload = await db_get_upload(self.session, upload_id)
        if not upload:
            raise HTTPException(status_code=404, detail="Upload not found")
        await load_event_for(self.session, upload.event_id, actor)
        return upload

    async def create_guest_upload(self, payload: GuestUploadCreate, actor: User) -> GuestUpload:
        """Direct upload by the organizer; not subject to admission control."""
        await load_event_for(self.session, payload.event_id, actor)
        return await db_create_upload(self.session, payload)

    async def get_uploads_by_event(self, event_id: int, actor: User) -> List[GuestUpload]:
        await load_event_for(self.session, event_id, actor)
        return await db_list_uploads_for_event(self.session, event_id)

    async def get_all_uploads(self, actor: User) -> List[GuestUpload]:
        ensure_admin(actor)
        return await db_list_uploads(self.session)

    async def update_guest_upload(self, upload_id: int, payload: GuestUploadUpdate, actor: User) -> GuestUpload:
        await self._load_upload_for(upload_id, actor)
        return await db_update_upload(self.session, upload_id, payload.dict(exclude_unset=True))

    async def delete_guest_upload(self, upload_id: int, actor: User) -> None:
        upload = await self._load_upload_for(upload_id, actor)
        await db_delete_upload(self.session, upload_id)
        logger.info(f"Upload {upload_id} of event {upload.event_id} deleted by {actor.id}")

    async def check_upload_rate_limit(self, event_id: int, upload_ip: str, actor: User) -> dict:
        event = await db_get_event(self.session, event_id)
        if event:
            ensure_event_access(event, actor)
        return await db_check_upload_rate_limit(self.session, event_id, upload_ip)

    async def download_upload(self, upload_id: int, actor: User) -> Optional[dict]:
        """File location for download, or None if the upload does not exist."""
        upload = await db_get_upload(self.session, upload_id)
        if not upload:
            return None
        await load_event_for(self.session, upload.event_id, actor)
        return {"file_url": upload.file_url, "file_name": upload.file_name}
