# Standard library imports
from uuid import UUID

# Third-party imports
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from voteschallenge.core.db import get_async_session
from voteschallenge.schemas.voting import RulingCreate, RulingResponse, RulingResultResponse
from voteschallenge.services.voting import ruling_services

router = APIRouter(prefix="/rulings", tags=["Rulings"])


@router.post("/", response_model=RulingResponse, status_code=status.HTTP_201_CREATED)
async def create_ruling(
    ruling_data: RulingCreate,
    db: AsyncSession = Depends(get_async_session),
):
    """Create a ruling (agenda item) to be put to vote"""
    ruling = await ruling_services.create_ruling(db, ruling_data)
    return RulingResponse.model_validate(ruling)


@router.get("/{ruling_id}", response_model=RulingResponse)
async def get_ruling(ruling_id: UUID, db: AsyncSession = Depends(get_async_session)):
    """Get ruling details and outcome"""
    ruling = await ruling_services.get_ruling(db, ruling_id)
    return RulingResponse.model_validate(ruling)


@router.get("/{ruling_id}/result", response_model=RulingResultResponse)
async def get_ruling_result(ruling_id: UUID, db: AsyncSession = Depends(get_async_session)):
    """Count the votes of a closed session and record the ruling outcome"""
    return await ruling_services.count_ruling_votes(db, ruling_id)
