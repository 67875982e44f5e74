"""Domain services."""

from .acceptance_service import AcceptanceService
from .answer_service import AnswerService
from .base import Service
from .identity_service import IdentityService
from .question_service import QuestionService
from .reaction_dispatcher import NotificationClient, ReactionDispatcher
from .tally_service import TallyService
from .view_service import ViewCounterService
from .vote_service import VoteService

__all__ = [
    "AcceptanceService",
    "AnswerService",
    "IdentityService",
    "NotificationClient",
    "QuestionService",
    "ReactionDispatcher",
    "Service",
    "TallyService",
    "ViewCounterService",
    "VoteService",
]
