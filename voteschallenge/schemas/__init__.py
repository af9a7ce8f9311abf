"""
Pydantic schemas package.

This package contains all Pydantic schemas for request/response
validation and serialization.
"""

# Local application imports
from voteschallenge.schemas.common import BaseResponse, ErrorDetails
from voteschallenge.schemas.voting import (
    AssociateCreate,
    AssociateResponse,
    ComputingVoteRequest,
    RulingCreate,
    RulingResponse,
    RulingResultResponse,
    SessionCreate,
    SessionResponse,
    VotedResponse,
    VoteTallyResponse,
    VoteValidationResponse,
)

__all__ = [
    # Common schemas
    "BaseResponse",
    "ErrorDetails",
    # Voting schemas
    "AssociateCreate",
    "AssociateResponse",
    "ComputingVoteRequest",
    "RulingCreate",
    "RulingResponse",
    "RulingResultResponse",
    "SessionCreate",
    "SessionResponse",
    "VotedResponse",
    "VoteTallyResponse",
    "VoteValidationResponse",
]
