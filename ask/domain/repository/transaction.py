"""Transaction boundary interface."""

from abc import ABC, abstractmethod
from typing import AsyncContextManager


class TransactionManager(ABC):
    """Unit-of-work boundary shared by the repositories of one request.

    Everything written inside `transaction()` commits together when the
    block exits normally and is rolled back when it raises.
    """

    @abstractmethod
    def transaction(self) -> AsyncContextManager[None]:
        """Open a transaction scope.

        Raises:
            StorageUnavailableError: If the store failed transiently
        """
        pass
