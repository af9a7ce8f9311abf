# Third-party imports
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from voteschallenge.core.db import get_async_session
from voteschallenge.schemas.voting import AssociateCreate, AssociateResponse
from voteschallenge.services.voting import associate_services

router = APIRouter(prefix="/associates", tags=["Associates"])


@router.post("/", response_model=AssociateResponse, status_code=status.HTTP_201_CREATED)
async def register_associate(
    associate_data: AssociateCreate,
    db: AsyncSession = Depends(get_async_session),
):
    """Register an associate allowed to vote"""
    associate = await associate_services.register_associate(db, associate_data)
    return AssociateResponse.model_validate(associate)


@router.get("/{cpf}", response_model=AssociateResponse)
async def get_associate(cpf: str, db: AsyncSession = Depends(get_async_session)):
    """Find an associate by CPF"""
    associate = await associate_services.find_associate_by_cpf(db, cpf)
    return AssociateResponse.model_validate(associate)
