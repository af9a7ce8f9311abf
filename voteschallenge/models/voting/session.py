# Standard library imports
from typing import TYPE_CHECKING
import uuid

# Third-party imports
from sqlalchemy import ForeignKey, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

# Local application imports
from voteschallenge.models.base import Base
from voteschallenge.models.mixins.uuid_timestamp import UUIDTimeStampMixin

if TYPE_CHECKING:
    # Local application imports
    from voteschallenge.models.voting.ruling import Ruling
    from voteschallenge.models.voting.vote import Vote


class VotingSession(UUIDTimeStampMixin, Base):
    """A voting window on a ruling, open for ``duration`` minutes from ``created_at``."""

    __tablename__ = "voting_sessions"

    ruling_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("rulings.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    duration: Mapped[int] = mapped_column(Integer, nullable=False, comment="Open window in minutes")

    ruling: Mapped["Ruling"] = relationship("Ruling", back_populates="sessions", lazy="joined")
    votes: Mapped[list["Vote"]] = relationship("Vote", back_populates="session")
