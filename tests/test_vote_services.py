"""Tests for vote computation and the vote ledger."""

import uuid

import pytest
from sqlalchemy.exc import IntegrityError

from voteschallenge.db_selectors.voting import get_vote_by_id
from voteschallenge.exceptions.voting import (
    AlreadyVotedError,
    AssociateNotFoundError,
    InvalidIdentityError,
    MissingInformationError,
    SessionClosedError,
    SessionNotFoundError,
    VotingErrorKind,
)
from voteschallenge.models.voting import Vote
from voteschallenge.schemas.voting import AssociateCreate, ComputingVoteRequest
from voteschallenge.services.voting.associate_services import register_associate
from voteschallenge.services.voting.vote_services import (
    create_vote,
    has_voted,
    is_duplicate_vote_error,
    record_vote,
    tally_session,
    validate_computing_vote_information,
)
from voteschallenge.utils.date_utils import format_date
from voteschallenge.utils.validators import generate_cpf


class TestValidateComputingVoteInformation:
    def test_empty_request_is_missing_information(self):
        with pytest.raises(MissingInformationError) as exc_info:
            validate_computing_vote_information(ComputingVoteRequest())

        assert exc_info.value.kind == VotingErrorKind.MISSING_INFORMATION
        assert exc_info.value.message == MissingInformationError.default_message

    @pytest.mark.parametrize(
        "fields",
        [
            {"session_id": uuid.uuid4(), "vote": True},
            {"cpf": "", "session_id": uuid.uuid4(), "vote": True},
            {"cpf": "52998224725", "vote": True},
            {"cpf": "52998224725", "session_id": uuid.uuid4()},
        ],
    )
    def test_any_missing_field_is_rejected(self, fields):
        with pytest.raises(MissingInformationError):
            validate_computing_vote_information(ComputingVoteRequest(**fields))

    def test_invalid_cpf_is_rejected(self):
        with pytest.raises(InvalidIdentityError):
            validate_computing_vote_information(
                ComputingVoteRequest(cpf="52998224724", session_id=uuid.uuid4(), vote=False)
            )

    def test_complete_request_passes(self):
        validate_computing_vote_information(
            ComputingVoteRequest(cpf="529.982.247-25", session_id=uuid.uuid4(), vote=False)
        )


class TestCreateVote:
    @pytest.mark.asyncio
    async def test_computes_vote(self, db, voting_session, associate):
        voted = await create_vote(
            db,
            ComputingVoteRequest(cpf=associate.cpf, session_id=voting_session.id, vote=True),
        )

        found_vote = await get_vote_by_id(db, voted.vote_id)
        assert found_vote is not None
        assert voted.computed_vote == "Sim"
        assert voted.vote_id == found_vote.id
        assert voted.session_id == voting_session.id
        assert voted.topic == "Title test"
        assert voted.session_date == format_date(voting_session.created_at)
        assert voted.cpf_associate == associate.cpf

    @pytest.mark.asyncio
    async def test_no_vote_is_labelled_nao(self, db, voting_session, associate):
        voted = await create_vote(
            db,
            ComputingVoteRequest(cpf=associate.cpf, session_id=voting_session.id, vote=False),
        )

        assert voted.computed_vote == "Não"

    @pytest.mark.asyncio
    async def test_accepts_formatted_cpf(self, db, voting_session, associate):
        formatted = f"{associate.cpf[:3]}.{associate.cpf[3:6]}.{associate.cpf[6:9]}-{associate.cpf[9:]}"

        voted = await create_vote(
            db,
            ComputingVoteRequest(cpf=formatted, session_id=voting_session.id, vote=True),
        )

        assert voted.cpf_associate == associate.cpf

    @pytest.mark.asyncio
    async def test_missing_information(self, db):
        with pytest.raises(MissingInformationError):
            await create_vote(db, ComputingVoteRequest(cpf="", session_id=None, vote=None))

    @pytest.mark.asyncio
    async def test_all_same_digit_cpf_is_invalid(self, db, voting_session):
        with pytest.raises(InvalidIdentityError):
            await create_vote(
                db,
                ComputingVoteRequest(cpf="00000000000", session_id=voting_session.id, vote=True),
            )

    @pytest.mark.asyncio
    async def test_unknown_session(self, db, associate):
        with pytest.raises(SessionNotFoundError):
            await create_vote(
                db,
                ComputingVoteRequest(cpf=associate.cpf, session_id=uuid.uuid4(), vote=True),
            )

    @pytest.mark.asyncio
    async def test_closed_session(self, db, closed_session, associate):
        with pytest.raises(SessionClosedError):
            await create_vote(
                db,
                ComputingVoteRequest(cpf=associate.cpf, session_id=closed_session.id, vote=True),
            )

    @pytest.mark.asyncio
    async def test_closed_session_is_checked_before_associate(self, db, closed_session):
        with pytest.raises(SessionClosedError):
            await create_vote(
                db,
                ComputingVoteRequest(cpf=generate_cpf(), session_id=closed_session.id, vote=True),
            )

    @pytest.mark.asyncio
    async def test_unregistered_associate(self, db, voting_session):
        with pytest.raises(AssociateNotFoundError):
            await create_vote(
                db,
                ComputingVoteRequest(cpf=generate_cpf(), session_id=voting_session.id, vote=True),
            )

    @pytest.mark.asyncio
    async def test_already_voted(self, db, voting_session, associate):
        db.add(Vote(associate_id=associate.id, session_id=voting_session.id, vote=True))
        await db.commit()

        with pytest.raises(AlreadyVotedError) as exc_info:
            await create_vote(
                db,
                ComputingVoteRequest(cpf=associate.cpf, session_id=voting_session.id, vote=True),
            )

        assert exc_info.value.message == AlreadyVotedError.default_message

    @pytest.mark.asyncio
    async def test_second_vote_through_service_is_rejected(self, db, voting_session, associate):
        request = ComputingVoteRequest(cpf=associate.cpf, session_id=voting_session.id, vote=True)
        await create_vote(db, request)

        with pytest.raises(AlreadyVotedError):
            await create_vote(db, request.model_copy(update={"vote": False}))


class TestVoteLedger:
    @pytest.mark.asyncio
    async def test_has_voted_after_record(self, db, voting_session, associate):
        associate_id, session_id = associate.id, voting_session.id

        assert not await has_voted(db, associate_id, session_id)
        await record_vote(db, associate_id, session_id, True)
        assert await has_voted(db, associate_id, session_id)

    @pytest.mark.asyncio
    async def test_unique_constraint_rejects_duplicate(self, db, voting_session, associate):
        # Skips the pre-check, as a concurrent request would
        associate_id, session_id = associate.id, voting_session.id
        await record_vote(db, associate_id, session_id, True)

        with pytest.raises(AlreadyVotedError):
            await record_vote(db, associate_id, session_id, False)

        tally = await tally_session(db, session_id)
        assert tally.total_votes == 1
        assert tally.yes_votes == 1

    @pytest.mark.asyncio
    async def test_tally_counts_yes_and_no(self, db, voting_session):
        session_id = voting_session.id
        choices = [True, True, False]
        for index, choice in enumerate(choices):
            voter = await register_associate(db, AssociateCreate(name=f"Voter {index}", cpf=generate_cpf()))
            await record_vote(db, voter.id, session_id, choice)

        tally = await tally_session(db, session_id)
        assert tally.session_id == session_id
        assert (tally.yes_votes, tally.no_votes, tally.total_votes) == (2, 1, 3)

    @pytest.mark.asyncio
    async def test_tally_of_empty_session(self, db, voting_session):
        tally = await tally_session(db, voting_session.id)
        assert (tally.yes_votes, tally.no_votes, tally.total_votes) == (0, 0, 0)

    @pytest.mark.asyncio
    async def test_other_integrity_errors_are_not_reported_as_duplicates(self, db, voting_session, associate):
        associate_id, session_id = associate.id, voting_session.id

        # NOT NULL on the choice column
        with pytest.raises(IntegrityError):
            await record_vote(db, associate_id, session_id, None)

        assert not await has_voted(db, associate_id, session_id)
        await record_vote(db, associate_id, session_id, False)
        assert (await tally_session(db, session_id)).no_votes == 1


class TestIsDuplicateVoteError:
    class ConstraintViolation(Exception):
        def __init__(self, message, constraint_name):
            super().__init__(message)
            self.constraint_name = constraint_name

    def wrap(self, cause):
        # Mirrors the asyncpg adapter: the driver error is chained as __cause__
        try:
            raise Exception(str(cause)) from cause
        except Exception as adapted:
            return IntegrityError("INSERT INTO votes ...", {}, adapted)

    def test_sqlite_unique_failure(self):
        error = IntegrityError(
            "INSERT INTO votes ...",
            {},
            Exception("UNIQUE constraint failed: votes.associate_id, votes.session_id"),
        )
        assert is_duplicate_vote_error(error)

    def test_sqlite_not_null_failure(self):
        error = IntegrityError("INSERT INTO votes ...", {}, Exception("NOT NULL constraint failed: votes.vote"))
        assert not is_duplicate_vote_error(error)

    def test_postgres_unique_violation(self):
        cause = self.ConstraintViolation(
            'duplicate key value violates unique constraint "uq_votes_associate_session"',
            "uq_votes_associate_session",
        )
        assert is_duplicate_vote_error(self.wrap(cause))

    def test_postgres_foreign_key_violation(self):
        cause = self.ConstraintViolation(
            'insert or update on table "votes" violates foreign key constraint "fk_votes_associate_id_associates"',
            "fk_votes_associate_id_associates",
        )
        assert not is_duplicate_vote_error(self.wrap(cause))
