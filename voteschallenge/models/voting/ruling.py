# Standard library imports
from datetime import datetime
import enum
from typing import TYPE_CHECKING

# Third-party imports
from sqlalchemy import TIMESTAMP, Enum as SQLEnum, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

# Local application imports
from voteschallenge.models.base import Base
from voteschallenge.models.mixins.uuid_timestamp import UUIDTimeStampMixin

if TYPE_CHECKING:
    # Local application imports
    from voteschallenge.models.voting.session import VotingSession


class RulingOutcome(str, enum.Enum):
    UNDECIDED = "undecided"
    APPROVED = "approved"
    REJECTED = "rejected"


class Ruling(UUIDTimeStampMixin, Base):
    """Agenda item put to vote. Its outcome is written once, when the session is tallied."""

    __tablename__ = "rulings"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    outcome: Mapped[RulingOutcome] = mapped_column(
        SQLEnum(RulingOutcome, name="ruling_outcome", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=RulingOutcome.UNDECIDED,
    )
    vote_count_date: Mapped[datetime | None] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=True,
        comment="When the votes were tallied",
    )

    sessions: Mapped[list["VotingSession"]] = relationship("VotingSession", back_populates="ruling")

    @property
    def is_tallied(self) -> bool:
        return self.outcome != RulingOutcome.UNDECIDED

    def __str__(self) -> str:
        return f"Ruling: {self.title} ({self.outcome.value})"
