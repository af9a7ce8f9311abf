# Third-party imports
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from voteschallenge.core.db import get_async_session
from voteschallenge.schemas.voting import ComputingVoteRequest, VotedResponse, VoteValidationResponse
from voteschallenge.services.voting import vote_services

router = APIRouter(prefix="/votes", tags=["Votes"])


@router.post("/validate", response_model=VoteValidationResponse)
async def validate_vote(vote_data: ComputingVoteRequest):
    """Check a vote request (required fields and CPF) without touching the database"""
    vote_services.validate_computing_vote_information(vote_data)
    return VoteValidationResponse(valid=True)


@router.post("/", response_model=VotedResponse, status_code=status.HTTP_201_CREATED)
async def create_vote(
    vote_data: ComputingVoteRequest,
    db: AsyncSession = Depends(get_async_session),
):
    """Vote yes or no on an open session (one vote per associate per session)"""
    return await vote_services.create_vote(db, vote_data)
