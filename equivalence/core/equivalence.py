"""
Equivalence relations and the category-dispatching base class.

An equivalence relation decides whether two values should be treated as
the same. ``GenericEquivalence`` routes each comparison to one method per
value category, so concrete relations only describe what equivalence means
for booleans, strings, objects and so on.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Sequence, Union

from ..categories import Category, classify
from ..errors import UnknownCategoryError


class Equivalence(ABC):
    """
    A reflexive, symmetric, transitive and consistent relation over values.

    Relations may be generic (any value) or type-specific (one class and its
    subclasses). Relations also compare themselves through ``equals``, which
    reports whether two relations are configured identically.
    """

    @abstractmethod
    def equivalent(self, left: Any, right: Any) -> bool:
        """Whether ``left`` and ``right`` are equivalent under this relation."""

    @abstractmethod
    def equals(self, other: Any) -> bool:
        """Whether ``other`` is a relation configured exactly like this one."""


class GenericEquivalence(Equivalence):
    """
    Equivalence relation over every value category.

    ``equivalent`` classifies the left operand and hands both operands to the
    matching ``equivalent_*`` method. The right operand is passed through
    unclassified; each method decides whether it is compatible.
    """

    _EQUIVALENCE_METHODS: Dict[Category, str] = {
        Category.ARRAY: 'equivalent_array',
        Category.BOOLEAN: 'equivalent_boolean',
        Category.FLOAT: 'equivalent_float',
        Category.INTEGER: 'equivalent_integer',
        Category.OBJECT: 'equivalent_object',
        Category.RESOURCE: 'equivalent_resource',
        Category.STRING: 'equivalent_string',
    }

    def equivalent(self, left: Any, right: Any) -> bool:
        category = classify(left)

        if category is Category.NULL:
            return self.equivalent_null(right)

        method_name = self._EQUIVALENCE_METHODS.get(category)
        if method_name is None:
            # Only reachable if a new category is introduced
            raise UnknownCategoryError(f'Unknown category "{category}".', category=category)

        return getattr(self, method_name)(left, right)

    @abstractmethod
    def equivalent_array(self, left: Union[Sequence, Mapping], right: Any) -> bool:
        """Compare a list, tuple or mapping with any value."""

    @abstractmethod
    def equivalent_boolean(self, left: bool, right: Any) -> bool:
        """Compare a boolean with any value."""

    @abstractmethod
    def equivalent_float(self, left: float, right: Any) -> bool:
        """Compare a float with any value."""

    @abstractmethod
    def equivalent_integer(self, left: int, right: Any) -> bool:
        """Compare an integer with any value."""

    @abstractmethod
    def equivalent_null(self, right: Any) -> bool:
        """Compare ``None`` with any value."""

    @abstractmethod
    def equivalent_object(self, left: Any, right: Any) -> bool:
        """Compare an object with any value."""

    @abstractmethod
    def equivalent_resource(self, left: Any, right: Any) -> bool:
        """Compare an operating-system handle with any value."""

    @abstractmethod
    def equivalent_string(self, left: Union[str, bytes], right: Any) -> bool:
        """Compare a text or bytes value with any value."""
