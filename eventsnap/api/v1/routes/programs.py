from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from eventsnap.schemas import (
    EventProgramCreate,
    EventProgramUpdate,
    EventProgramOut,
    ReorderProgramsRequest,
    DeleteResult,
)
from eventsnap.db.session import get_session
from eventsnap.db.models import User
from eventsnap.services.program_service import ProgramService
from eventsnap.auth import get_current_user

router = APIRouter(prefix="/programs", tags=["programs"])

def get_program_service(session: AsyncSession = Depends(get_session)) -> ProgramService:
    return ProgramService(session)

@router.post("/", response_model=EventProgramOut, status_code=status.HTTP_201_CREATED)
async def create_event_program(
    payload: EventProgramCreate,
    user: User = Depends(get_current_user),
    program_service: ProgramService = Depends(get_program_service)
):
    return await program_service.create_event_program(payload, user)

@router.get("/event/{event_id}", response_model=List[EventProgramOut])
async def get_programs_by_event(
    event_id: int,
    user: User = Depends(get_current_user),
    program_service: ProgramService = Depends(get_program_service)
):
    return await program_service.get_programs_by_event(event_id, user)

@router.put("/event/{event_id}/order", response_model=List[EventProgramOut])
async def reorder_event_programs(
    event_id: int,
    payload: ReorderProgramsRequest,
    user: User = Depends(get_current_user),
    program_service: ProgramService = Depends(get_program_service)
):
    """Renumber the event's program entries in the order of ``program_ids``."""
    return await program_service.reorder_event_programs(event_id, payload.program_ids, user)

@router.patch("/{program_id}", response_model=EventProgramOut)
async def update_event_program(
    program_id: int,
    payload: EventProgramUpdate,
    user: User = Depends(get_current_user),
    program_service: ProgramService = Depends(get_program_service)
):
    return await program_service.update_event_program(program_id, payload, user)

@router.delete("/{program_id}", response_model=DeleteResult)
async def delete_event_program(
    program_id: int,
    user: User = Depends(get_current_user),
    program_service: ProgramService = Depends(get_program_service)
):
    await program_service.delete_event_program(program_id, user)
    return DeleteResult()
