"""Base classes for dependency injection providers."""

from typing import Any, ClassVar, Literal

from dishka import Provider

# Components whose repositories can be swapped for in-memory ones
Component = Literal["persistence"]

# (component, is_mock) -> implementation, filled as implementations are defined
_IMPLEMENTATIONS: dict[tuple[Component, bool], type["ProviderBase"]] = {}


class ProviderBase(Provider):
    """Base for all DI providers.

    A provider that names a ``__mock_component__`` and sets ``__is_mock__``
    registers itself as the production or mock implementation of that
    component. The component base leaves ``__is_mock__`` unset.

    Attributes:
        __mock_component__: Component name, None for concrete providers
        __is_mock__: Whether this is a mock implementation, None on a base
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool | None] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__mock_component__ is None or cls.__is_mock__ is None:
            return

        _IMPLEMENTATIONS[(cls.__mock_component__, cls.__is_mock__)] = cls


def find_implementation(
    component: Component, use_mock: bool
) -> type[ProviderBase] | None:
    """Registered implementation of a component, if any."""
    return _IMPLEMENTATIONS.get((component, use_mock))
