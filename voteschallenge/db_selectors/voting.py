# Standard library imports
from datetime import datetime
from uuid import UUID

# Third-party imports
from sqlalchemy import and_, exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from voteschallenge.models.voting import Associate, Ruling, RulingOutcome, Vote, VotingSession


# ---- Rulings ----
async def get_ruling_by_id(db: AsyncSession, ruling_id: UUID) -> Ruling | None:
    result = await db.execute(select(Ruling).where(Ruling.id == ruling_id))
    return result.scalar_one_or_none()


async def create_ruling_in_db(db: AsyncSession, ruling: Ruling) -> Ruling:
    db.add(ruling)
    await db.commit()
    await db.refresh(ruling)
    return ruling


async def update_ruling_outcome_in_db(
    db: AsyncSession,
    ruling: Ruling,
    outcome: RulingOutcome,
    vote_count_date: datetime,
) -> Ruling:
    ruling.outcome = outcome
    ruling.vote_count_date = vote_count_date
    await db.commit()
    await db.refresh(ruling)
    return ruling


# ---- Sessions ----
async def get_session_by_id(db: AsyncSession, session_id: UUID) -> VotingSession | None:
    result = await db.execute(select(VotingSession).where(VotingSession.id == session_id))
    return result.scalar_one_or_none()


async def get_latest_session_for_ruling(db: AsyncSession, ruling_id: UUID) -> VotingSession | None:
    result = await db.execute(
        select(VotingSession)
        .where(VotingSession.ruling_id == ruling_id)
        .order_by(VotingSession.created_at.desc())
        .limit(1)
    )
    return result.scalar_one_or_none()


async def create_session_in_db(db: AsyncSession, session: VotingSession) -> VotingSession:
    db.add(session)
    await db.commit()
    await db.refresh(session)
    return session


# ---- Associates ----
async def get_associate_by_cpf(db: AsyncSession, cpf: str) -> Associate | None:
    result = await db.execute(select(Associate).where(Associate.cpf == cpf))
    return result.scalar_one_or_none()


async def create_associate_in_db(db: AsyncSession, associate: Associate) -> Associate:
    db.add(associate)
    await db.commit()
    await db.refresh(associate)
    return associate


# ---- Votes ----
async def get_vote_by_id(db: AsyncSession, vote_id: UUID) -> Vote | None:
    result = await db.execute(select(Vote).where(Vote.id == vote_id))
    return result.scalar_one_or_none()


async def vote_exists(db: AsyncSession, associate_id: UUID, session_id: UUID) -> bool:
    result = await db.execute(
        select(exists().where(and_(Vote.associate_id == associate_id, Vote.session_id == session_id)))
    )
    return bool(result.scalar())


async def create_vote_in_db(db: AsyncSession, vote: Vote) -> Vote:
    db.add(vote)
    await db.commit()
    await db.refresh(vote)
    return vote


async def count_votes_by_session(db: AsyncSession, session_id: UUID) -> dict[bool, int]:
    """Return ``{True: yes_count, False: no_count}`` for a session."""
    result = await db.execute(
        select(Vote.vote, func.count(Vote.id)).where(Vote.session_id == session_id).group_by(Vote.vote)
    )
    counts = {True: 0, False: 0}
    for choice, total in result.all():
        counts[bool(choice)] = total
    return counts
