"""Builders for test data."""

from uuid import uuid4

from ask.config import Settings
from ask.domain.model import Answer, Question
from ask.domain.value import AnswerId, QuestionId, UserId
from ask.util.jwt import sign_identity


def make_question(author_id: UserId | None = None) -> Question:
    """Build a question owned by author_id (a fresh user if omitted)."""
    return Question(id=QuestionId(uuid4()), author_id=author_id or UserId(uuid4()))


def make_answer(question: Question, author_id: UserId | None = None) -> Answer:
    """Build an answer to question by author_id (a fresh user if omitted)."""
    return Answer(
        id=AnswerId(uuid4()),
        question_id=question.id,
        author_id=author_id or UserId(uuid4()),
    )


def make_token(user_id: UserId) -> str:
    """Sign an auth_token cookie value the way the identity provider does."""
    return sign_identity(user_id, Settings().auth)
