"""Notification service clients.

Events are delivered as JSON documents whose `type` field names the event.
"""

import httpx
import logfire

from ask.adapter.error import NotificationDeliveryError
from ask.domain.model.event import Event
from ask.domain.service.reaction_dispatcher import NotificationClient


class WebhookNotificationClient(NotificationClient):
    """Posts events to an HTTP webhook."""

    def __init__(self, webhook_url: str, timeout_seconds: float = 5.0) -> None:
        """Initialize webhook client.

        Args:
            webhook_url: Endpoint receiving POSTed events
            timeout_seconds: Per-request timeout
        """
        self.webhook_url = webhook_url
        self.timeout_seconds = timeout_seconds

    async def deliver(self, event: Event) -> None:
        """POST the event to the webhook.

        Raises:
            NotificationDeliveryError: On transport errors or a non-2xx reply
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                response = await client.post(
                    self.webhook_url, json=event.model_dump(mode="json")
                )
        except httpx.HTTPError as e:
            raise NotificationDeliveryError(
                f"HTTP error delivering {event.type}: {e}"
            ) from e

        if response.is_error:
            logfire.warn(
                "Notification webhook rejected event",
                event_type=event.type,
                status_code=response.status_code,
                error=response.text,
            )
            raise NotificationDeliveryError(
                f"Webhook returned {response.status_code} for {event.type}"
            )


class LoggingNotificationClient(NotificationClient):
    """Logs events instead of delivering them (no webhook configured)."""

    async def deliver(self, event: Event) -> None:
        logfire.info(
            "Notification event",
            event_type=event.type,
            question_owner_id=str(event.question_owner_id),
            question_id=str(event.question_id),
            answer_id=str(event.answer_id),
        )


class MockNotificationClient(NotificationClient):
    """Mock notification client for testing.

    Records every delivered event. Set `fail` to make deliveries raise.
    """

    def __init__(self) -> None:
        self.delivered: list[Event] = []
        self.fail = False

    async def deliver(self, event: Event) -> None:
        if self.fail:
            raise NotificationDeliveryError("Mock delivery failure")
        self.delivered.append(event)
