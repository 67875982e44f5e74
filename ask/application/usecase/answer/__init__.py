"""Answer use cases."""

from .accept_answer import (
    AcceptAnswerRequest,
    AcceptAnswerResponse,
    AcceptAnswerUseCase,
)
from .list_answers import (
    AnswerListItem,
    ListAnswersRequest,
    ListAnswersResponse,
    ListAnswersUseCase,
)
from .submit_answer import (
    SubmitAnswerRequest,
    SubmitAnswerResponse,
    SubmitAnswerUseCase,
)

__all__ = [
    "AcceptAnswerRequest",
    "AcceptAnswerResponse",
    "AcceptAnswerUseCase",
    "AnswerListItem",
    "ListAnswersRequest",
    "ListAnswersResponse",
    "ListAnswersUseCase",
    "SubmitAnswerRequest",
    "SubmitAnswerResponse",
    "SubmitAnswerUseCase",
]
