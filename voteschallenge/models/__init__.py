"""
Database models package.

This package contains all SQLAlchemy models for the application.
"""

# Local application imports
from voteschallenge.models.base import Base
from voteschallenge.models.voting import Associate, Ruling, RulingOutcome, Vote, VotingSession

__all__ = [
    "Base",
    # Voting models
    "Associate",
    "Ruling",
    "RulingOutcome",
    "Vote",
    "VotingSession",
]
