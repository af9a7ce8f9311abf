# Standard library imports
from datetime import datetime
from uuid import UUID

# Third-party imports
from pydantic import BaseModel, ConfigDict, Field

# Local application imports
from voteschallenge.models.voting.ruling import RulingOutcome


class RulingCreate(BaseModel):
    title: str | None = Field(None, max_length=200)
    description: str | None = None


class RulingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: str | None
    outcome: RulingOutcome
    vote_count_date: datetime | None
    created_at: datetime


class RulingResultResponse(BaseModel):
    ruling_id: UUID
    session_id: UUID
    title: str
    outcome: RulingOutcome
    yes_votes: int
    no_votes: int
    total_votes: int
    vote_count_date: datetime | None
