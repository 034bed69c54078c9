"""Base classes for dependency injection providers.

A provider is either concrete (used as-is everywhere) or a mockable
component: a base class naming the component, with one production and one
mock subclass selected by ``__is_mock__``.
"""

from typing import ClassVar, Literal

from dishka import Provider

# Components tests can swap for in-memory doubles
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for all UniHub providers.

    Attributes:
        __mock_component__: Component name on a mockable base, None otherwise
        __is_mock__: Set on the mock implementation of a component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_mockable(cls) -> bool:
        """A base with implementations registered under a component name."""
        return cls.__mock_component__ is not None and bool(cls.__subclasses__())

    @classmethod
    def implementation(cls, use_mock: bool) -> "type[ProviderBase] | None":
        """The subclass implementing this component in the requested flavour."""
        for impl in cls.__subclasses__():
            if impl.__is_mock__ == use_mock:
                return impl
        return None
