"""
Hashers: equivalence relations that also produce hash codes.

A hasher must keep its two halves consistent: values it reports as
equivalent must produce the same hash code. The converse does not hold,
distinct values may collide.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Dict, Mapping, Sequence, Union

from ..categories import Category, classify
from ..errors import UnknownCategoryError
from .equivalence import Equivalence, GenericEquivalence


class Hasher(Equivalence):
    """An equivalence relation with a consistent hash function."""

    @abstractmethod
    def hash(self, value: Any) -> int:
        """Signed 32-bit hash code of ``value``."""


class GenericHasher(GenericEquivalence, Hasher):
    """
    Hasher over every value category.

    ``hash`` classifies the value and hands it to the matching ``hash_*``
    method, mirroring the dispatch of ``GenericEquivalence.equivalent``.
    """

    _HASH_METHODS: Dict[Category, str] = {
        Category.ARRAY: 'hash_array',
        Category.BOOLEAN: 'hash_boolean',
        Category.FLOAT: 'hash_float',
        Category.INTEGER: 'hash_integer',
        Category.OBJECT: 'hash_object',
        Category.RESOURCE: 'hash_resource',
        Category.STRING: 'hash_string',
    }

    def hash(self, value: Any) -> int:
        category = classify(value)

        if category is Category.NULL:
            return self.hash_null()

        method_name = self._HASH_METHODS.get(category)
        if method_name is None:
            # Only reachable if a new category is introduced
            raise UnknownCategoryError(f'Unknown category "{category}".', category=category)

        return getattr(self, method_name)(value)

    @abstractmethod
    def hash_array(self, value: Union[Sequence, Mapping]) -> int:
        ...

    @abstractmethod
    def hash_boolean(self, value: bool) -> int:
        ...

    @abstractmethod
    def hash_float(self, value: float) -> int:
        ...

    @abstractmethod
    def hash_integer(self, value: int) -> int:
        ...

    @abstractmethod
    def hash_null(self) -> int:
        ...

    @abstractmethod
    def hash_object(self, value: Any) -> int:
        ...

    @abstractmethod
    def hash_resource(self, value: Any) -> int:
        ...

    @abstractmethod
    def hash_string(self, value: Union[str, bytes]) -> int:
        ...
