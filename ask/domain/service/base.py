"""Base class for domain services."""


class Service:
    """Marker base for domain services.

    Services own the transaction boundary of the operations they expose
    and are the only callers of repository mutations.
    """
