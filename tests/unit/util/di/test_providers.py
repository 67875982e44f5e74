"""Unit tests for provider resolution."""

import pytest

from ask.domain.repository import TransactionManager
from ask.persistence.repository.inmemory import InMemoryTransactionManager
from ask.util.di import (
    ProdNotificationProvider,
    ProdPersistenceProvider,
    resolve_providers,
)
from tests.di import (
    MockNotificationProvider,
    MockPersistenceProvider,
    build_test_container,
)


class TestResolveProviders:
    def test_production_by_default(self):
        kinds = {type(p) for p in resolve_providers()}

        assert ProdPersistenceProvider in kinds
        assert ProdNotificationProvider in kinds
        assert MockPersistenceProvider not in kinds

    def test_mocks_selected_per_component(self):
        kinds = {type(p) for p in resolve_providers(["notification"])}

        assert MockNotificationProvider in kinds
        assert ProdPersistenceProvider in kinds

    def test_unknown_component_rejected(self):
        with pytest.raises(ValueError, match="Unknown components"):
            resolve_providers(["search"])


class TestBuildTestContainer:
    def test_unknown_unmock_rejected(self):
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"cache"})

    @pytest.mark.asyncio
    async def test_everything_mocked_by_default(self):
        container = build_test_container()
        try:
            async with container() as request_container:
                manager = await request_container.get(TransactionManager)
            assert isinstance(manager, InMemoryTransactionManager)
        finally:
            await container.close()
