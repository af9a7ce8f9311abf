# Local application imports
from voteschallenge.db_selectors.voting import (
    count_votes_by_session,
    create_associate_in_db,
    create_ruling_in_db,
    create_session_in_db,
    create_vote_in_db,
    get_associate_by_cpf,
    get_latest_session_for_ruling,
    get_ruling_by_id,
    get_session_by_id,
    get_vote_by_id,
    update_ruling_outcome_in_db,
    vote_exists,
)

__all__ = [
    "count_votes_by_session",
    "create_associate_in_db",
    "create_ruling_in_db",
    "create_session_in_db",
    "create_vote_in_db",
    "get_associate_by_cpf",
    "get_latest_session_for_ruling",
    "get_ruling_by_id",
    "get_session_by_id",
    "get_vote_by_id",
    "update_ruling_outcome_in_db",
    "vote_exists",
]
