# Standard library imports
from datetime import datetime, timedelta
from uuid import UUID

# Third-party imports
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from voteschallenge.core.monitoring.logging import get_contextual_logger
from voteschallenge.db_selectors.voting import create_session_in_db, get_ruling_by_id, get_session_by_id
from voteschallenge.exceptions.voting import (
    MissingInformationError,
    RulingAlreadyTalliedError,
    RulingNotFoundError,
    SessionNotFoundError,
)
from voteschallenge.models.voting import VotingSession
from voteschallenge.schemas.voting import SessionCreate, SessionResponse
from voteschallenge.settings import settings
from voteschallenge.utils.date_utils import as_utc, now_utc


def session_closes_at(session: VotingSession) -> datetime:
    return as_utc(session.created_at) + timedelta(minutes=session.duration)


def is_session_open(session: VotingSession, now: datetime | None = None) -> bool:
    """
    Tell whether a session accepts votes at ``now`` (defaults to the current UTC time).

    The window is ``[created_at, created_at + duration]``, both ends included.
    A session with a duration of zero or less never opens.
    """
    if session.duration is None or session.duration <= 0:
        return False

    now = as_utc(now) if now is not None else now_utc()
    opens_at = as_utc(session.created_at)
    return opens_at <= now <= session_closes_at(session)


def build_session_response(session: VotingSession, now: datetime | None = None) -> SessionResponse:
    return SessionResponse(
        id=session.id,
        ruling_id=session.ruling_id,
        topic=session.ruling.title,
        duration=session.duration,
        created_at=as_utc(session.created_at),
        closes_at=session_closes_at(session),
        is_open=is_session_open(session, now),
    )


async def open_session(db: AsyncSession, session_data: SessionCreate) -> VotingSession:
    """
    Open a voting session on an undecided ruling.

    Args:
        db: Database session
        session_data: Target ruling and optional duration in minutes

    Returns:
        The new VotingSession, opened now

    Raises:
        MissingInformationError: No ruling id was given
        RulingNotFoundError: The ruling does not exist
        RulingAlreadyTalliedError: The ruling already has an outcome
    """
    logger = get_contextual_logger(__name__, ruling_id=session_data.ruling_id)

    if session_data.ruling_id is None:
        raise MissingInformationError("A ruling id is required to open a session.")

    ruling = await get_ruling_by_id(db, session_data.ruling_id)
    if ruling is None:
        raise RulingNotFoundError()

    if ruling.is_tallied:
        logger.info("Refusing to open a session on a tallied ruling")
        raise RulingAlreadyTalliedError()

    duration = session_data.duration
    if duration is None:
        duration = settings.DEFAULT_SESSION_DURATION_MINUTES

    session = VotingSession(ruling_id=ruling.id, duration=duration, created_at=now_utc())
    session = await create_session_in_db(db, session)
    logger.info(f"Voting session {session.id} opened for {duration} minute(s)")
    return session


async def get_session(db: AsyncSession, session_id: UUID) -> VotingSession:
    session = await get_session_by_id(db, session_id)
    if session is None:
        raise SessionNotFoundError()
    return session
