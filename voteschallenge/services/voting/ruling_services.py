# Standard library imports
from uuid import UUID

# Third-party imports
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from voteschallenge.core.monitoring.logging import get_contextual_logger
from voteschallenge.db_selectors.voting import (
    create_ruling_in_db,
    get_latest_session_for_ruling,
    get_ruling_by_id,
    update_ruling_outcome_in_db,
)
from voteschallenge.exceptions.voting import (
    MissingInformationError,
    RulingNotFoundError,
    SessionNotFoundError,
    SessionStillOpenError,
)
from voteschallenge.models.voting import Ruling, RulingOutcome
from voteschallenge.schemas.voting import RulingCreate, RulingResultResponse
from voteschallenge.services.voting.session_services import is_session_open
from voteschallenge.services.voting.vote_services import tally_session
from voteschallenge.utils.date_utils import now_utc


def decide_outcome(yes_votes: int, no_votes: int) -> RulingOutcome:
    # Approval needs a strict majority of the votes cast; a tie rejects
    return RulingOutcome.APPROVED if yes_votes > no_votes else RulingOutcome.REJECTED


async def create_ruling(db: AsyncSession, ruling_data: RulingCreate) -> Ruling:
    if not ruling_data.title or not ruling_data.title.strip():
        raise MissingInformationError("A ruling needs a title.")

    ruling = Ruling(title=ruling_data.title.strip(), description=ruling_data.description)
    ruling = await create_ruling_in_db(db, ruling)
    get_contextual_logger(__name__, ruling_id=ruling.id).info("Ruling created")
    return ruling


async def get_ruling(db: AsyncSession, ruling_id: UUID) -> Ruling:
    ruling = await get_ruling_by_id(db, ruling_id)
    if ruling is None:
        raise RulingNotFoundError()
    return ruling


async def count_ruling_votes(db: AsyncSession, ruling_id: UUID) -> RulingResultResponse:
    """
    Tally the latest session of a ruling and record its outcome.

    The outcome and tally date are written only the first time the ruling is
    counted after its session closes; later calls report the stored outcome
    alongside the current counts.

    Raises:
        RulingNotFoundError: The ruling does not exist
        SessionNotFoundError: No session was ever opened for the ruling
        SessionStillOpenError: The latest session still accepts votes
    """
    logger = get_contextual_logger(__name__, ruling_id=ruling_id)

    ruling = await get_ruling(db, ruling_id)

    session = await get_latest_session_for_ruling(db, ruling.id)
    if session is None:
        raise SessionNotFoundError("No voting session was opened for this ruling.")

    if is_session_open(session):
        raise SessionStillOpenError()

    tally = await tally_session(db, session.id)

    if not ruling.is_tallied:
        outcome = decide_outcome(tally.yes_votes, tally.no_votes)
        ruling = await update_ruling_outcome_in_db(db, ruling, outcome, now_utc())
        logger.info(f"Ruling tallied as {outcome.value} ({tally.yes_votes} yes / {tally.no_votes} no)")

    return RulingResultResponse(
        ruling_id=ruling.id,
        session_id=session.id,
        title=ruling.title,
        outcome=ruling.outcome,
        yes_votes=tally.yes_votes,
        no_votes=tally.no_votes,
        total_votes=tally.total_votes,
        vote_count_date=ruling.vote_count_date,
    )
