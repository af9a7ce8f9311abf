# Local application imports
from voteschallenge.models.voting.associate import Associate
from voteschallenge.models.voting.ruling import Ruling, RulingOutcome
from voteschallenge.models.voting.session import VotingSession
from voteschallenge.models.voting.vote import Vote

__all__ = ["Associate", "Ruling", "RulingOutcome", "Vote", "VotingSession"]
