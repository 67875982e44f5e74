"""Question use cases."""

from .record_view import RecordViewRequest, RecordViewResponse, RecordViewUseCase
from .register_question import (
    RegisterQuestionRequest,
    RegisterQuestionResponse,
    RegisterQuestionUseCase,
)

__all__ = [
    "RecordViewRequest",
    "RecordViewResponse",
    "RecordViewUseCase",
    "RegisterQuestionRequest",
    "RegisterQuestionResponse",
    "RegisterQuestionUseCase",
]
