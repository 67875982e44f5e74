"""Notification infrastructure providers."""

from dishka import Scope, provide
import logfire

from ask.adapter.notification import (
    LoggingNotificationClient,
    WebhookNotificationClient,
)
from ask.config import NotificationSettings
from ask.domain.service import NotificationClient
from ask.util.di.base import ProviderBase


class NotificationProvider(ProviderBase):
    """Notification component base."""

    __mock_component__ = "notification"


class ProdNotificationProvider(NotificationProvider):
    """Production notification provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_notification_client(
        self, notification_settings: NotificationSettings
    ) -> NotificationClient:
        """Provide notification client.

        Returns:
            Webhook client when a webhook URL is configured, otherwise a
            client that only logs events
        """
        if not notification_settings.webhook_url:
            logfire.info("No notification webhook configured, events will be logged")
            return LoggingNotificationClient()

        return WebhookNotificationClient(
            webhook_url=notification_settings.webhook_url,
            timeout_seconds=notification_settings.timeout_seconds,
        )
