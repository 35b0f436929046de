"""Value categories used to dispatch equivalence and hashing.

Every Python value falls into exactly one of eight categories. The
classifier is total: anything that is not a primitive, a sequence or an
operating-system handle is an ``OBJECT``.
"""

from __future__ import annotations

import io
import mmap
import socket
from collections.abc import Mapping
from enum import Enum
from typing import Any, Tuple, Union

import numpy as np


class Category(Enum):
    """The fixed set of value kinds."""

    ARRAY = "array"
    BOOLEAN = "boolean"
    FLOAT = "float"
    INTEGER = "integer"
    NULL = "null"
    OBJECT = "object"
    RESOURCE = "resource"
    STRING = "string"


# Ordered containers keyed by position, plus mappings keyed by their own keys
ARRAY_TYPES = (list, tuple, Mapping)

BOOLEAN_TYPES = (bool, np.bool_)
INTEGER_TYPES = (int, np.integer)
FLOAT_TYPES = (float, np.floating)
TEXT_TYPES = (str,)
BINARY_TYPES = (bytes, bytearray)

# Opaque operating-system handles
RESOURCE_TYPES = (io.IOBase, socket.socket, mmap.mmap)


def classify(value: Any) -> Category:
    """
    Determine the category of a value.

    Args:
        value: Any Python value

    Returns:
        The single category the value belongs to
    """
    if value is None:
        return Category.NULL
    # bool subclasses int, so it has to be checked first
    if isinstance(value, BOOLEAN_TYPES):
        return Category.BOOLEAN
    if isinstance(value, INTEGER_TYPES):
        return Category.INTEGER
    if isinstance(value, FLOAT_TYPES):
        return Category.FLOAT
    if isinstance(value, TEXT_TYPES + BINARY_TYPES):
        return Category.STRING
    if isinstance(value, ARRAY_TYPES):
        return Category.ARRAY
    if isinstance(value, RESOURCE_TYPES):
        return Category.RESOURCE
    return Category.OBJECT


def is_binary(value: Any) -> bool:
    """Whether a string-category value holds bytes rather than text."""
    return isinstance(value, BINARY_TYPES)


def type_name(cls: type) -> str:
    """Dotted ``module.qualname`` identifier of a class."""
    return f"{cls.__module__}.{cls.__qualname__}"


def ancestor_chain(value_or_type: Union[type, Any]) -> Tuple[str, ...]:
    """
    Type identifiers of a value's class and its ancestors.

    The chain follows the method resolution order, so it is linear and runs
    from the most to the least specific type.

    Args:
        value_or_type: A class, or an instance whose class is used

    Returns:
        Tuple of dotted type identifiers
    """
    cls = value_or_type if isinstance(value_or_type, type) else type(value_or_type)
    return tuple(type_name(ancestor) for ancestor in cls.__mro__)
