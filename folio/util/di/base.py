"""Base class for dishka providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure components that tests can swap for in-memory fakes
Component = Literal["persistence", "storage"]


class ProviderBase(Provider):
    """Provider carrying the metadata used to pick prod or mock wiring.

    A mockable component declares ``__mock_component__`` on a base class;
    its production and mock subclasses set ``__is_mock__``.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_mockable(cls) -> bool:
        """Whether this is a component base with swappable implementations."""
        return cls.__mock_component__ is not None and bool(cls.__subclasses__())
