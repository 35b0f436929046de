"""Abstract relations and the category-dispatching engines."""

from .equivalence import Equivalence, GenericEquivalence
from .hasher import GenericHasher, Hasher

__all__ = ['Equivalence', 'GenericEquivalence', 'GenericHasher', 'Hasher']
