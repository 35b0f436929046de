"""
Identity hasher: native value semantics for primitives, instance identity
for objects and handles, and recursive comparison for sequences.

Hash codes follow the classic 32-bit scheme: polynomial rolling hashes with
multiplier 31 for strings and sequences, the IEEE-754 single-precision bit
pattern for floats, and small prime constants for the fixed values.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, Tuple, Union

from ..categories import Category, classify, is_binary, type_name
from ..core.hasher import GenericHasher
from ..utils.bits import float32_bits, wrap_int32


def iter_items(value: Union[list, tuple, Mapping]) -> Iterable[Tuple[Any, Any]]:
    """(key, value) pairs of an array in iteration order; positions are the keys of lists."""
    if isinstance(value, Mapping):
        return value.items()
    return enumerate(value)


class IdentityHasher(GenericHasher):
    """
    Hasher comparing values by identity.

    Booleans, numbers, strings and ``None`` compare by value within their own
    category, so ``True``, ``1`` and ``1.0`` are pairwise non-equivalent.
    Objects and handles are only equivalent to themselves. Arrays are
    equivalent when they hold equivalent keys and values at every position.

    Arrays are walked recursively with no depth guard, so comparing or hashing
    a self-containing or very deeply nested array raises ``RecursionError``.
    """

    HASH_NULL = 0
    HASH_ARRAY = 991
    HASH_FALSE = 1237
    HASH_TRUE = 1231
    HASH_OBJECT = 1093
    HASH_RESOURCE = 1471
    HASH_STRING = 1321

    def equals(self, other: Any) -> bool:
        """Identity hashers carry no configuration: any instance of the same class is equal."""
        return type(other) is type(self)

    def get_hash(self) -> int:
        return self.hash_string(type_name(type(self)))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, GenericHasher):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return self.get_hash()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    # -- equivalence ---------------------------------------------------------

    def equivalent_array(self, left, right) -> bool:
        if classify(right) is not Category.ARRAY or len(left) != len(right):
            return False

        for (left_key, left_item), (right_key, right_item) in zip(iter_items(left), iter_items(right)):
            if not self.equivalent(left_key, right_key):
                return False
            if not self.equivalent(left_item, right_item):
                return False

        return True

    def equivalent_boolean(self, left, right) -> bool:
        return classify(right) is Category.BOOLEAN and bool(left) == bool(right)

    def equivalent_float(self, left, right) -> bool:
        # NaN is never equal to itself; 0.0 and -0.0 are equal
        return classify(right) is Category.FLOAT and float(left) == float(right)

    def equivalent_integer(self, left, right) -> bool:
        return classify(right) is Category.INTEGER and int(left) == int(right)

    def equivalent_null(self, right) -> bool:
        return right is None

    def equivalent_object(self, left, right) -> bool:
        return left is right

    def equivalent_resource(self, left, right) -> bool:
        return left is right

    def equivalent_string(self, left, right) -> bool:
        if classify(right) is not Category.STRING:
            return False
        if is_binary(left) != is_binary(right):
            return False
        return left == right

    # -- hashing -------------------------------------------------------------

    def hash_array(self, value) -> int:
        hash_code = self.HASH_ARRAY

        for key, item in iter_items(value):
            hash_code = wrap_int32(hash_code * 31 + (self.hash_key(key) ^ self.hash(item)))

        return hash_code

    def hash_key(self, key: Any) -> int:
        """
        Hash an array key.

        String and integer keys hash as their text, so list position ``0``
        and mapping key ``0`` agree. Other mapping keys use ``hash``.
        """
        category = classify(key)
        if category is Category.STRING:
            return self.hash_string(key)
        if category is Category.INTEGER:
            return self.hash_string(str(int(key)))
        return self.hash(key)

    def hash_boolean(self, value) -> int:
        return self.HASH_TRUE if value else self.HASH_FALSE

    def hash_float(self, value) -> int:
        return float32_bits(value)

    def hash_integer(self, value) -> int:
        return wrap_int32(int(value))

    def hash_null(self) -> int:
        return self.HASH_NULL

    def hash_object(self, value) -> int:
        return wrap_int32(self.HASH_OBJECT * self.hash_string(format(id(value), 'x')))

    def hash_resource(self, value) -> int:
        return wrap_int32(self.HASH_RESOURCE * (1 + id(value)))

    def hash_string(self, value) -> int:
        hash_code = self.HASH_STRING
        codes = value if is_binary(value) else map(ord, value)

        for code in codes:
            hash_code = wrap_int32(hash_code * 31 + code)

        return hash_code
