"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal, get_args

from dishka import Provider

Component = Literal["persistence", "notification"]
COMPONENTS: tuple[Component, ...] = get_args(Component)


class ProviderBase(Provider):
    """Base for every provider in the container.

    Mockable components set ``__mock_component__`` on an abstract base and
    ship one production and one mock subclass, told apart by ``__is_mock__``.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
