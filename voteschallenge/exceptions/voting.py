# Standard library imports
import enum


class VotingErrorKind(str, enum.Enum):
    MISSING_INFORMATION = "missing_information"
    INVALID_IDENTITY = "invalid_identity"
    RULING_NOT_FOUND = "ruling_not_found"
    SESSION_NOT_FOUND = "session_not_found"
    ASSOCIATE_NOT_FOUND = "associate_not_found"
    SESSION_CLOSED = "session_closed"
    SESSION_STILL_OPEN = "session_still_open"
    ALREADY_VOTED = "already_voted"
    ASSOCIATE_ALREADY_EXISTS = "associate_already_exists"
    RULING_ALREADY_TALLIED = "ruling_already_tallied"


class VotingError(Exception):
    """
    Rejection of a single request by the voting rules.

    Each subclass fixes ``kind`` and a default user-readable message; callers may
    pass a more specific message.
    """

    kind: VotingErrorKind
    default_message: str = "The request was rejected."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingInformationError(VotingError):
    kind = VotingErrorKind.MISSING_INFORMATION
    default_message = "Required information is missing."


class InvalidIdentityError(VotingError):
    kind = VotingErrorKind.INVALID_IDENTITY
    default_message = "Invalid CPF."


class RulingNotFoundError(VotingError):
    kind = VotingErrorKind.RULING_NOT_FOUND
    default_message = "Ruling not found."


class SessionNotFoundError(VotingError):
    kind = VotingErrorKind.SESSION_NOT_FOUND
    default_message = "Voting session not found."


class AssociateNotFoundError(VotingError):
    kind = VotingErrorKind.ASSOCIATE_NOT_FOUND
    default_message = "No associate registered with this CPF."


class SessionClosedError(VotingError):
    kind = VotingErrorKind.SESSION_CLOSED
    default_message = "This voting session is closed."


class SessionStillOpenError(VotingError):
    kind = VotingErrorKind.SESSION_STILL_OPEN
    default_message = "The voting session is still open; votes can only be counted after it closes."


class AlreadyVotedError(VotingError):
    kind = VotingErrorKind.ALREADY_VOTED
    default_message = "This CPF has already voted in this session."


class AssociateAlreadyExistsError(VotingError):
    kind = VotingErrorKind.ASSOCIATE_ALREADY_EXISTS
    default_message = "An associate with this CPF is already registered."


class RulingAlreadyTalliedError(VotingError):
    kind = VotingErrorKind.RULING_ALREADY_TALLIED
    default_message = "This ruling has already been tallied."
