# Local application imports
from voteschallenge.services.voting.associate_services import find_associate_by_cpf, register_associate
from voteschallenge.services.voting.ruling_services import count_ruling_votes, create_ruling, get_ruling
from voteschallenge.services.voting.session_services import (
    build_session_response,
    get_session,
    is_session_open,
    open_session,
    session_closes_at,
)
from voteschallenge.services.voting.vote_services import (
    computed_vote_label,
    create_vote,
    has_voted,
    record_vote,
    tally_session,
    validate_computing_vote_information,
)

__all__ = [
    "build_session_response",
    "computed_vote_label",
    "count_ruling_votes",
    "create_ruling",
    "create_vote",
    "find_associate_by_cpf",
    "get_ruling",
    "get_session",
    "has_voted",
    "is_session_open",
    "open_session",
    "record_vote",
    "register_associate",
    "session_closes_at",
    "tally_session",
    "validate_computing_vote_information",
]
