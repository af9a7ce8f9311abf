# Standard library imports
from uuid import UUID

# Third-party imports
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from voteschallenge.core.monitoring.logging import get_contextual_logger
from voteschallenge.db_selectors.voting import (
    count_votes_by_session,
    create_vote_in_db,
    get_associate_by_cpf,
    get_session_by_id,
    vote_exists,
)
from voteschallenge.exceptions.voting import (
    AlreadyVotedError,
    AssociateNotFoundError,
    InvalidIdentityError,
    MissingInformationError,
    SessionClosedError,
    SessionNotFoundError,
)
from voteschallenge.models.voting import Vote
from voteschallenge.models.voting.vote import UNIQUE_VOTE_CONSTRAINT
from voteschallenge.schemas.voting import ComputingVoteRequest, VotedResponse, VoteTallyResponse
from voteschallenge.services.voting.session_services import is_session_open
from voteschallenge.settings import settings
from voteschallenge.utils.date_utils import format_date
from voteschallenge.utils.validators.cpf_validator import is_valid_cpf, normalize_cpf


def computed_vote_label(choice: bool) -> str:
    return settings.VOTE_YES_LABEL if choice else settings.VOTE_NO_LABEL


def validate_computing_vote_information(vote_data: ComputingVoteRequest) -> None:
    """
    Check that a vote request is complete and carries a well-formed CPF.

    Runs before any database lookup.

    Raises:
        MissingInformationError: CPF, session id or choice is missing
        InvalidIdentityError: The CPF fails the check-digit validation
    """
    if not vote_data.cpf or vote_data.session_id is None or vote_data.vote is None:
        raise MissingInformationError()

    if not is_valid_cpf(vote_data.cpf):
        raise InvalidIdentityError()


def is_duplicate_vote_error(error: IntegrityError) -> bool:
    """
    Tell whether an IntegrityError comes from the one-vote-per-session constraint.

    asyncpg reports the constraint name; SQLite only lists the constrained columns.
    """
    cause = getattr(error.orig, "__cause__", None)
    constraint_name = getattr(cause, "constraint_name", None)
    if constraint_name is not None:
        return constraint_name == UNIQUE_VOTE_CONSTRAINT

    message = str(error.orig)
    if UNIQUE_VOTE_CONSTRAINT in message:
        return True
    return "UNIQUE constraint failed: votes.associate_id, votes.session_id" in message


async def has_voted(db: AsyncSession, associate_id: UUID, session_id: UUID) -> bool:
    return await vote_exists(db, associate_id, session_id)


async def record_vote(db: AsyncSession, associate_id: UUID, session_id: UUID, choice: bool) -> Vote:
    """
    Insert a vote, relying on the (associate, session) unique constraint.

    A duplicate that slipped past ``has_voted`` is reported as AlreadyVotedError;
    any other integrity error (unknown associate or session, missing choice)
    propagates after the rollback.
    """
    logger = get_contextual_logger(__name__, associate_id=associate_id, session_id=session_id)
    vote = Vote(associate_id=associate_id, session_id=session_id, vote=choice)
    try:
        return await create_vote_in_db(db, vote)
    except IntegrityError as e:
        await db.rollback()
        if not is_duplicate_vote_error(e):
            logger.error("Vote insert violated a constraint", exc_info=True)
            raise
        logger.warning("Duplicate vote rejected by the unique constraint")
        raise AlreadyVotedError() from e
    except SQLAlchemyError:
        await db.rollback()
        logger.error("Failed to record vote", exc_info=True)
        raise


async def tally_session(db: AsyncSession, session_id: UUID) -> VoteTallyResponse:
    counts = await count_votes_by_session(db, session_id)
    return VoteTallyResponse(
        session_id=session_id,
        yes_votes=counts[True],
        no_votes=counts[False],
        total_votes=counts[True] + counts[False],
    )


async def create_vote(db: AsyncSession, vote_data: ComputingVoteRequest) -> VotedResponse:
    """
    Compute an associate's vote on an open session.

    Each check fails fast, in order: required fields, CPF format, session
    existence, session window, associate existence, duplicate vote.

    Args:
        db: Database session
        vote_data: CPF of the associate, target session and the yes/no choice

    Returns:
        VotedResponse confirming the recorded vote
    """
    validate_computing_vote_information(vote_data)

    cpf = normalize_cpf(vote_data.cpf)
    logger = get_contextual_logger(__name__, session_id=vote_data.session_id, cpf=cpf)

    session = await get_session_by_id(db, vote_data.session_id)
    if session is None:
        raise SessionNotFoundError()

    if not is_session_open(session):
        logger.info("Vote rejected: session closed")
        raise SessionClosedError()

    associate = await get_associate_by_cpf(db, cpf)
    if associate is None:
        raise AssociateNotFoundError()

    if await has_voted(db, associate.id, session.id):
        logger.info("Vote rejected: associate already voted")
        raise AlreadyVotedError()

    vote = await record_vote(db, associate.id, session.id, vote_data.vote)
    logger.info(f"Vote {vote.id} computed")

    return VotedResponse(
        vote_id=vote.id,
        session_id=session.id,
        topic=session.ruling.title,
        session_date=format_date(session.created_at),
        cpf_associate=associate.cpf,
        computed_vote=computed_vote_label(vote.vote),
    )
