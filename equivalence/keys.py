"""
Adapters that put hashers to work inside Python's own hash containers.

``dict`` and ``set`` only know ``__hash__`` and ``__eq__``. ``HashKey``
routes both through a hasher so that, for instance, two lists holding the
same values can share a dictionary slot. ``EquivalenceMap`` wraps that in a
mapping interface that hides the keys.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any, Dict, Iterable, Iterator, Mapping, Tuple, Union

from .core.hasher import Hasher


class HashKey:
    """
    A value paired with the hasher that decides its identity.

    The hash code is computed once, on construction; the wrapped value must
    not change while the key is stored in a container.
    """

    __slots__ = ("value", "hasher", "_hash")

    def __init__(self, value: Any, hasher: Hasher):
        self.value = value
        self.hasher = hasher
        self._hash = hasher.hash(value)

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, HashKey):
            return NotImplemented
        if self._hash != other._hash:
            return False
        # Keys from differently configured hashers never match
        if self.hasher is not other.hasher and not self.hasher.equals(other.hasher):
            return False
        return self.hasher.equivalent(self.value, other.value)

    def __repr__(self) -> str:
        return f"HashKey({self.value!r})"


class EquivalenceMap(MutableMapping):
    """
    Mapping whose keys are matched with a hasher instead of ``==``.

    Keys need not be hashable in the Python sense: lists and dicts work.
    Iteration yields the first key stored for each equivalence class, in
    insertion order.

    Example:
        >>> from equivalence import IdentityHasher
        >>> counts = EquivalenceMap(IdentityHasher())
        >>> counts[[1, 2]] = 1
        >>> counts[[1, 2]]
        1
    """

    def __init__(self, hasher: Hasher,
                 items: Union[Mapping[Any, Any], Iterable[Tuple[Any, Any]]] = ()):
        self.hasher = hasher
        self._entries: Dict[HashKey, Tuple[Any, Any]] = {}
        self.update(items)

    def _key(self, key: Any) -> HashKey:
        return HashKey(key, self.hasher)

    def __getitem__(self, key: Any) -> Any:
        try:
            return self._entries[self._key(key)][1]
        except KeyError:
            raise KeyError(key) from None

    def __setitem__(self, key: Any, value: Any) -> None:
        wrapped = self._key(key)
        existing = self._entries.get(wrapped)
        stored_key = existing[0] if existing is not None else key
        self._entries[wrapped] = (stored_key, value)

    def __delitem__(self, key: Any) -> None:
        try:
            del self._entries[self._key(key)]
        except KeyError:
            raise KeyError(key) from None

    def __iter__(self) -> Iterator[Any]:
        for stored_key, _ in self._entries.values():
            yield stored_key

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self._entries.values())
        return f"{type(self).__name__}({{{items}}})"
