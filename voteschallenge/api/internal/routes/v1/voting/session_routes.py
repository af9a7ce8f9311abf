# Standard library imports
from uuid import UUID

# Third-party imports
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from voteschallenge.core.db import get_async_session
from voteschallenge.schemas.voting import SessionCreate, SessionResponse, VoteTallyResponse
from voteschallenge.services.voting import session_services, vote_services

router = APIRouter(prefix="/sessions", tags=["Sessions"])


@router.post("/", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
async def open_session(
    session_data: SessionCreate,
    db: AsyncSession = Depends(get_async_session),
):
    """Open a voting session on a ruling"""
    session = await session_services.open_session(db, session_data)
    return session_services.build_session_response(session)


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session(session_id: UUID, db: AsyncSession = Depends(get_async_session)):
    """Get a voting session and whether it is open"""
    session = await session_services.get_session(db, session_id)
    return session_services.build_session_response(session)


@router.get("/{session_id}/tally", response_model=VoteTallyResponse)
async def get_session_tally(session_id: UUID, db: AsyncSession = Depends(get_async_session)):
    """Current yes/no counts of a session"""
    session = await session_services.get_session(db, session_id)
    return await vote_services.tally_session(db, session.id)
