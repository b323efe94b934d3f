from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from eventsnap.schemas import EventThemeCreate, EventThemeUpdate
from eventsnap.db.models import EventTheme, User
from eventsnap.db.repositories import (
    create_theme as db_create_theme,
    list_themes as db_list_themes,
    update_theme as db_update_theme,
    delete_theme as db_delete_theme,
)
from eventsnap.services.permissions import ensure_admin
from eventsnap.core.logging import logger


class ThemeService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_standard_themes(self) -> List[EventTheme]:
        return await db_list_themes(self.session, standard_only=True)

    async def get_all_themes(self) -> List[EventTheme]:
        return await db_list_themes(self.session)

    async def create_event_theme(self, payload: EventThemeCreate, actor: User) -> EventTheme:
        ensure_admin(actor)
        theme = await db_create_theme(self.session, payload)
        logger.info(f"Theme {theme.id} '{theme.name}' created")
        return theme

    async def update_event_theme(self, theme_id: int, payload: EventThemeUpdate, actor: User) -> EventTheme:
        ensure_admin(actor)
        return await db_update_theme(self.session, theme_id, payload.dict(exclude_unset=True))

    async def delete_event_theme(self, theme_id: int, actor: User) -> None:
        ensure_admin(actor)
        await db_delete_theme(self.session, theme_id)
        logger.info(f"Theme {theme_id} deleted")
