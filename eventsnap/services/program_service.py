from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi import HTTPException
from eventsnap.schemas import EventProgramCreate, EventProgramUpdate
from eventsnap.db.models import EventProgram, User
from eventsnap.db.repositories import (
    create_program as db_create_program,
    get_program as db_get_program,
    list_programs_for_event as db_list_programs,
    update_program as db_update_program,
    delete_program as db_delete_program,
    reorder_programs as db_reorder_programs,
)
from eventsnap.services.permissions import load_event_for


class ProgramService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def _load_program_for(self, program_id: int, actor: User) -> EventProgram:
        program = await db_get_program(self.session, program_id)
        if not program:
            raise HTTPException(status_code=404, detail="Program entry not found")
        await load_event_for(self.session, program.event_id, actor)
        return program

    async def create_event_program(self, payload: EventProgramCreate, actor: User) -> EventProgram:
        await load_event_for(self.session, payload.event_id, actor)
        return await db_create_program(self.session, payload)

    async def get_programs_by_event(self, event_id: int, actor: User) -> List[EventProgram]:
        await load_event_for(self.session, event_id, actor)
        return await db_list_programs(self.session, event_id)

    async def update_event_program(self, program_id: int, payload: EventProgramUpdate, actor: User) -> EventProgram:
        await self._load_program_for(program_id, actor)
        return await db_update_program(self.session, program_id, payload.dict(exclude_unset=True))

    async def delete_event_program(self, program_id: int, actor: User) -> None:
        await self._load_program_for(program_id, actor)
        await db_delete_program(self.session, program_id)

    async def reorder_event_programs(self, event_id: int, program_ids: List[int], actor: User) -> List[EventProgram]:
        await load_event_for(self.session, event_id, actor)
        return await db_reorder_programs(self.session, event_id, program_ids)
