from .associate_schemas import AssociateCreate, AssociateResponse
from .ruling_schemas import RulingCreate, RulingResponse, RulingResultResponse
from .session_schemas import SessionCreate, SessionResponse
from .vote_schemas import ComputingVoteRequest, VotedResponse, VoteTallyResponse, VoteValidationResponse

__all__ = [
    "AssociateCreate",
    "AssociateResponse",
    "RulingCreate",
    "RulingResponse",
    "RulingResultResponse",
    "SessionCreate",
    "SessionResponse",
    "ComputingVoteRequest",
    "VotedResponse",
    "VoteTallyResponse",
    "VoteValidationResponse",
]
