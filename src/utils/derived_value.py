"""Memoized derived values keyed on input identity."""

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")

_UNSET = object()


class DerivedValue(Generic[T]):
    """Value recomputed only when one of its inputs is a new object.

    Inputs are compared by identity, not equality: handing the same list
    objects back returns the cached result, while a refetched collection
    always triggers a fresh computation.
    """

    def __init__(self, compute: Callable[..., T]) -> None:
        """Initialize the node.

        Args:
            compute: Pure function deriving the value from its inputs.
        """
        self._compute = compute
        self._inputs: tuple = ()
        self._value = _UNSET
        self.computations = 0

    def get(self, *inputs) -> T:
        """Return the derived value for the given inputs.

        Args:
            *inputs: Positional inputs forwarded to the compute function.

        Returns:
            T: Cached value when every input is the same object as in the
            previous call, otherwise a freshly computed one.
        """
        if self._value is not _UNSET and self._same_inputs(inputs):
            return self._value
        value = self._compute(*inputs)
        self._inputs = inputs
        self._value = value
        self.computations += 1
        return value

    def invalidate(self) -> None:
        """Drop the cached value and inputs."""
        self._inputs = ()
        self._value = _UNSET

    def _same_inputs(self, inputs: tuple) -> bool:
        if len(inputs) != len(self._inputs):
            return False
        return all(new is old for new, old in zip(inputs, self._inputs))


__all__ = ["DerivedValue"]
