"""Capability contracts a value may satisfy to describe its own semantics.

The contracts are structural: a class satisfies one by defining the method,
no registration or inheritance required. ``Equatable`` and ``Hashable`` are
independent; a class may implement neither, either or both.
"""

from typing import Any

from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class Equatable(Protocol):
    """A value that compares itself to another value of its own kind."""

    def equals(self, other: Any) -> bool:
        """
        Whether this value is equivalent to ``other``.

        Must be reflexive, symmetric, transitive and consistent, and must
        return ``False`` (never raise) for values of another kind.
        """
        ...


@runtime_checkable
class Hashable(Protocol):
    """A value that produces its own hash code.

    Values equal under ``equals`` must produce the same code.
    """

    def get_hash(self) -> int:
        ...


@runtime_checkable
class Comparable(Protocol):
    """A value that orders itself relative to another value of its own kind."""

    def compare_to(self, other: Any) -> int:
        """Negative, zero or positive as this value sorts before, with or after ``other``."""
        ...
