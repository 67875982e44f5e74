"""Notification service adapter."""

from .client import (
    LoggingNotificationClient,
    MockNotificationClient,
    WebhookNotificationClient,
)

__all__ = [
    "WebhookNotificationClient",
    "LoggingNotificationClient",
    "MockNotificationClient",
]
