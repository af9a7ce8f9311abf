# Standard library imports
from datetime import datetime
from uuid import UUID

# Third-party imports
from pydantic import BaseModel, ConfigDict, Field


class AssociateCreate(BaseModel):
    name: str | None = Field(None, max_length=200)
    cpf: str | None = None


class AssociateResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    cpf: str
    created_at: datetime
