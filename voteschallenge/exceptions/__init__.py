# Local application imports
from voteschallenge.exceptions.voting import (
    AlreadyVotedError,
    AssociateAlreadyExistsError,
    AssociateNotFoundError,
    InvalidIdentityError,
    MissingInformationError,
    RulingAlreadyTalliedError,
    RulingNotFoundError,
    SessionClosedError,
    SessionNotFoundError,
    SessionStillOpenError,
    VotingError,
    VotingErrorKind,
)

__all__ = [
    "AlreadyVotedError",
    "AssociateAlreadyExistsError",
    "AssociateNotFoundError",
    "InvalidIdentityError",
    "MissingInformationError",
    "RulingAlreadyTalliedError",
    "RulingNotFoundError",
    "SessionClosedError",
    "SessionNotFoundError",
    "SessionStillOpenError",
    "VotingError",
    "VotingErrorKind",
]
