"""Mock notification providers for testing."""

from dishka import Scope, provide

from ask.adapter.notification import MockNotificationClient
from ask.domain.service import NotificationClient
from ask.util.di.infrastructure.notification import NotificationProvider


class MockNotificationProvider(NotificationProvider):
    """Mock notification provider recording events in memory."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_notification_client(self) -> NotificationClient:
        """Provide mock notification client."""
        return MockNotificationClient()
