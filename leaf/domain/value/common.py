"""Base class for value objects."""

from typing import Generic, TypeVar

from pydantic import ConfigDict, RootModel

T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around a single primitive value.

    The wrapped value is available as ``.root`` and ``model_dump()`` returns
    the primitive itself.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """Return string representation of the root value."""
        return str(self.root)
