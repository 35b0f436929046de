"""Concrete hashers."""

from .dates import DateTimeHasher
from .identity import IdentityHasher
from .value import ValueHasher

__all__ = ['DateTimeHasher', 'IdentityHasher', 'ValueHasher']
