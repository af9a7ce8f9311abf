# Standard library imports
from datetime import datetime
from uuid import UUID

# Third-party imports
from pydantic import BaseModel


class SessionCreate(BaseModel):
    ruling_id: UUID | None = None
    # Minutes; the configured default applies when omitted
    duration: int | None = None


class SessionResponse(BaseModel):
    id: UUID
    ruling_id: UUID
    topic: str
    duration: int
    created_at: datetime
    closes_at: datetime
    is_open: bool
