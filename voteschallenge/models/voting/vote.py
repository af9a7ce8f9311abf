# Standard library imports
from typing import TYPE_CHECKING
import uuid

# Third-party imports
from sqlalchemy import Boolean, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

# Local application imports
from voteschallenge.models.base import Base
from voteschallenge.models.mixins.uuid_timestamp import UUIDTimeStampMixin

if TYPE_CHECKING:
    # Local application imports
    from voteschallenge.models.voting.associate import Associate
    from voteschallenge.models.voting.session import VotingSession


UNIQUE_VOTE_CONSTRAINT = "uq_votes_associate_session"


class Vote(UUIDTimeStampMixin, Base):
    __tablename__ = "votes"
    # One vote per associate per session, enforced by the database
    __table_args__ = (UniqueConstraint("associate_id", "session_id", name=UNIQUE_VOTE_CONSTRAINT),)

    associate_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("associates.id"),
        nullable=False,
        index=True,
    )
    session_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("voting_sessions.id"),
        nullable=False,
        index=True,
    )
    vote: Mapped[bool] = mapped_column(Boolean, nullable=False, comment="True for yes, False for no")

    associate: Mapped["Associate"] = relationship("Associate")
    session: Mapped["VotingSession"] = relationship("VotingSession", back_populates="votes")
