"""Three-way comparators for sorted structures."""

from abc import ABC, abstractmethod
from functools import cmp_to_key
from typing import Any, Callable


class Comparator(ABC):
    """Imposes a total ordering on some collection of values."""

    @abstractmethod
    def compare(self, left: Any, right: Any) -> int:
        """
        Compare two values.

        Returns:
            A negative integer, zero or a positive integer as ``left`` is
            less than, equal to or greater than ``right``
        """

    def key(self) -> Callable[[Any], Any]:
        """Adapter for ``sorted``/``list.sort``/``min``/``max`` ``key=`` arguments."""
        return cmp_to_key(self.compare)


class CallbackComparator(Comparator):
    """Comparator that delegates to a plain two-argument function."""

    def __init__(self, callback: Callable[[Any, Any], int]):
        if not callable(callback):
            raise TypeError(f"callback must be callable, got {type(callback).__name__}")
        self.callback = callback

    def compare(self, left: Any, right: Any) -> int:
        return self.callback(left, right)
