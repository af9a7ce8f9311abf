# Standard library imports
from uuid import UUID

# Third-party imports
from pydantic import BaseModel


class ComputingVoteRequest(BaseModel):
    """Incoming vote. Fields are optional here so the service can report what is missing."""

    cpf: str | None = None
    session_id: UUID | None = None
    vote: bool | None = None


class VotedResponse(BaseModel):
    vote_id: UUID
    session_id: UUID
    topic: str
    session_date: str
    cpf_associate: str
    computed_vote: str


class VoteTallyResponse(BaseModel):
    session_id: UUID
    yes_votes: int
    no_votes: int
    total_votes: int


class VoteValidationResponse(BaseModel):
    valid: bool
