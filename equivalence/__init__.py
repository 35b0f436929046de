"""Equivalence - value equivalence and consistent hash codes for Python values."""

__version__ = "0.1.0"

from .categories import Category, classify
from .contracts import Comparable, Equatable, Hashable
from .comparators import CallbackComparator, Comparator
from .core.equivalence import Equivalence, GenericEquivalence
from .core.hasher import GenericHasher, Hasher
from .errors import (
    ComparisonError,
    ConfigurationError,
    InconsistentHashingError,
    UnexpectedTypeError,
    UnknownCategoryError,
)
from .hashers.dates import DateTimeHasher
from .hashers.identity import IdentityHasher
from .hashers.value import ValueHasher
from .keys import EquivalenceMap, HashKey

__all__ = [
    "Category",
    "classify",
    "Comparable",
    "Equatable",
    "Hashable",
    "CallbackComparator",
    "Comparator",
    "Equivalence",
    "GenericEquivalence",
    "GenericHasher",
    "Hasher",
    "ComparisonError",
    "ConfigurationError",
    "InconsistentHashingError",
    "UnexpectedTypeError",
    "UnknownCategoryError",
    "DateTimeHasher",
    "IdentityHasher",
    "ValueHasher",
    "EquivalenceMap",
    "HashKey",
    "__version__",
]
