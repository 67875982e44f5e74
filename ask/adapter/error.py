"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class NotificationDeliveryError(AdapterError):
    """The notification service rejected or never received an event."""

    pass
