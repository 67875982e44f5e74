"""Reaction dispatcher: best-effort notification side channel.

Events are handed over only after the originating mutation has committed.
Delivery runs in background tasks that the mutating caller never awaits;
a failed delivery is logged and dropped, it never fails or rolls back the
operation that produced the event.
"""

import asyncio

import logfire

from ask.domain.model.event import Event

from .base import Service


class NotificationClient:
    """Generic notification service client interface."""

    async def deliver(self, event: Event) -> None:
        """Deliver an event to the notification service.

        Args:
            event: Committed domain event
        """
        raise NotImplementedError


class ReactionDispatcher(Service):
    """Fire-and-continue dispatcher for post-commit events."""

    def __init__(
        self, notification_client: NotificationClient, max_pending: int = 1000
    ) -> None:
        """Initialize reaction dispatcher.

        Args:
            notification_client: Client for the external notification service
            max_pending: Deliveries allowed in flight before new events are dropped
        """
        self.notification_client = notification_client
        self.max_pending = max_pending
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> int:
        """Number of deliveries still in flight."""
        return len(self._pending)

    def notify(self, event: Event) -> None:
        """Schedule delivery of an event and return immediately.

        Must be called from a running event loop.

        Args:
            event: Committed domain event
        """
        if len(self._pending) >= self.max_pending:
            logfire.warn(
                "Notification dropped, too many pending deliveries",
                event_type=event.type,
                answer_id=str(event.answer_id),
                pending=len(self._pending),
            )
            return

        task = asyncio.create_task(self._deliver(event))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def drain(self) -> None:
        """Wait for every scheduled delivery to finish."""
        while self._pending:
            in_flight = list(self._pending)
            await asyncio.gather(*in_flight)
            self._pending.difference_update(in_flight)

    async def _deliver(self, event: Event) -> None:
        with logfire.span(
            "reaction_dispatcher.deliver",
            event_type=event.type,
            answer_id=str(event.answer_id),
        ):
            try:
                await self.notification_client.deliver(event)
                logfire.info(
                    "Notification delivered",
                    event_type=event.type,
                    question_id=str(event.question_id),
                    answer_id=str(event.answer_id),
                )
            except Exception as e:
                logfire.error(
                    "Notification delivery failed",
                    event_type=event.type,
                    answer_id=str(event.answer_id),
                    error=str(e),
                    error_type=type(e).__name__,
                )
