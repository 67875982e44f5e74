"""Unit tests for domain error to HTTP status mapping."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from ask.domain.error import (
    AnswerNotFoundError,
    InvalidTargetError,
    NotFoundError,
    NotQuestionOwnerError,
    StorageUnavailableError,
    UnauthenticatedError,
)
from ask.interface.api.errors import register_error_handlers


@pytest.fixture
def client():
    app_instance = FastAPI()
    register_error_handlers(app_instance)

    errors = {
        "unauthenticated": UnauthenticatedError("vote"),
        "not-found": NotFoundError("Question", "q1"),
        "invalid-target": InvalidTargetError("answer:a1"),
        "answer-not-found": AnswerNotFoundError("a1", "q1"),
        "not-owner": NotQuestionOwnerError("q1", "u1"),
        "unavailable": StorageUnavailableError("Storage temporarily unavailable"),
    }

    @app_instance.get("/raise/{name}")
    async def raise_error(name: str):
        raise errors[name]

    return TestClient(app_instance)


class TestErrorHandlers:
    """Each domain error maps to one status code."""

    @pytest.mark.parametrize(
        "name, status_code",
        [
            ("unauthenticated", 401),
            ("not-found", 404),
            ("invalid-target", 404),
            ("answer-not-found", 404),
            ("not-owner", 403),
            ("unavailable", 503),
        ],
    )
    def test_status_codes(self, client, name, status_code):
        response = client.get(f"/raise/{name}")

        assert response.status_code == status_code
        assert response.json()["detail"]

    def test_storage_unavailable_suggests_retry(self, client):
        response = client.get("/raise/unavailable")

        assert response.headers["retry-after"] == "1"
