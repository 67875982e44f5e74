"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """Base for use cases.

    A use case is one client action. It validates the request, calls domain
    services and shapes the result for the API.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
