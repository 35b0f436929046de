"""
Value hasher: identity semantics extended with per-type overrides.

Objects are compared, in order of precedence, by:

1. their own ``equals``/``get_hash`` when they implement the self-describing
   contracts,
2. a relation registered for their class or the nearest ancestor class,
3. instance identity.

Every other category behaves exactly as in ``IdentityHasher``, including
the recursive comparison of arrays, whose nested objects get the rules above.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from ..categories import Category, ancestor_chain, classify, type_name
from ..contracts import Equatable, Hashable
from ..core.equivalence import Equivalence
from ..core.hasher import Hasher
from ..errors import ConfigurationError, InconsistentHashingError, UnexpectedTypeError
from ..utils.bits import wrap_int32
from .identity import IdentityHasher

logger = logging.getLogger(__name__)

TypeKey = Union[type, str]


class ValueHasher(IdentityHasher):
    """
    Hasher that compares objects by value where it knows how to.

    Args:
        equivalences: Mapping from a class (or its dotted type identifier)
            to the relation used for instances of that class and its
            subclasses. Relations that are also ``Hasher`` instances provide
            the hash codes of those objects too.

    Raises:
        UnexpectedTypeError: If a registered value is not an ``Equivalence``
        ConfigurationError: If a class and its dotted identifier are both given

    Example:
        >>> from datetime import datetime
        >>> from equivalence.hashers import DateTimeHasher
        >>> hasher = ValueHasher({datetime: DateTimeHasher()})
        >>> hasher.equivalent(datetime(2016, 1, 1), datetime(2016, 1, 1))
        True
    """

    def __init__(self, equivalences: Optional[Mapping[TypeKey, Equivalence]] = None):
        registry: Dict[str, Equivalence] = {}

        for key, relation in (equivalences or {}).items():
            if not isinstance(relation, Equivalence):
                raise UnexpectedTypeError.for_type(Equivalence, relation)
            name = key if isinstance(key, str) else type_name(key)
            if name in registry:
                raise ConfigurationError(
                    f'Type "{name}" is registered more than once.',
                    key=name
                )
            registry[name] = relation

        self._equivalences = MappingProxyType(registry)

    def get_equivalences(self) -> Mapping[str, Equivalence]:
        """Read-only view of the registered relations keyed by type identifier."""
        return self._equivalences

    def get_equivalence(self, type_or_name: TypeKey) -> Optional[Equivalence]:
        """
        Find the relation registered for a type or its nearest ancestor.

        Args:
            type_or_name: A class, or a dotted type identifier. A bare
                identifier has no known ancestors, so only an exact match
                can be found for it.

        Returns:
            The relation, or ``None`` when neither the type nor any ancestor
            is registered
        """
        if not self._equivalences:
            return None

        if isinstance(type_or_name, str):
            chain = (type_or_name,)
        else:
            chain = ancestor_chain(type_or_name)

        for name in chain:
            relation = self._equivalences.get(name)
            if relation is not None:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("Resolved %s to the relation registered for %s", chain[0], name)
                return relation

        return None

    def equals(self, other: Any) -> bool:
        if other is self:
            return True

        if not super().equals(other):
            return False

        theirs = other.get_equivalences()

        if len(self._equivalences) != len(theirs):
            return False

        for name, relation in self._equivalences.items():
            if name not in theirs:
                return False
            if not relation.equals(theirs[name]):
                return False

        return True

    def get_hash(self) -> int:
        # Depends on the registered type names only, to stay consistent with equals()
        hash_code = super().get_hash()
        for name in sorted(self._equivalences):
            hash_code = wrap_int32(hash_code * 31 + self.hash_string(name))
        return hash_code

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._equivalences)!r})"

    def equivalent_object(self, left, right) -> bool:
        left_equatable = isinstance(left, Equatable)

        if left_equatable != isinstance(right, Equatable):
            return False

        if left_equatable:
            return bool(left.equals(right))

        relation = self.get_equivalence(type(left))
        if relation is not None:
            return relation.equivalent(left, right)

        if classify(right) is Category.OBJECT:
            relation = self.get_equivalence(type(right))
            if relation is not None:
                return relation.equivalent(right, left)

        return super().equivalent_object(left, right)

    def hash_object(self, value) -> int:
        if isinstance(value, Hashable):
            return wrap_int32(self.HASH_OBJECT + int(value.get_hash()))

        if isinstance(value, Equatable):
            raise InconsistentHashingError(
                f'Any object implementing {Equatable.__name__} must also implement '
                f'{Hashable.__name__}, otherwise the resulting hash code cannot be '
                f'guaranteed by {type(self).__name__} to be distributable across '
                f'equivalences (given "{type_name(type(value))}").',
                value_type=type_name(type(value)),
                hasher_type=type_name(type(self))
            )

        relation = self.get_equivalence(type(value))
        if isinstance(relation, Hasher):
            return wrap_int32(self.HASH_OBJECT + int(relation.hash(value)))

        return super().hash_object(value)
