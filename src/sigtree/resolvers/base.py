"""Base class for type-relationship resolvers.

A resolver answers one question for the comparator: given two distinct type
names, is one an ancestor of the other? How names are looked up (a static
hierarchy table, runtime imports, a code index) is entirely up to the
subclass.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from sigtree.core.errors import UnresolvableNameError
from sigtree.core.models import Relation

logger = logging.getLogger(__name__)


class TypeRelationshipResolver(ABC):
    """Abstract interface for type-relationship oracles.

    Subclasses implement _relate(). Callers use relate(), which short-circuits
    textual equality and folds UnresolvableNameError into Relation.UNRELATED.
    Implementations must be deterministic for a given pair of names.
    """

    def relate(self, left: str, right: str) -> Relation:
        """Classify how ``left`` relates to ``right``.

        Args:
            left: Name on the left-hand side of the comparison.
            right: Name on the right-hand side of the comparison.

        Returns:
            The directional relation between the two names.
        """
        if left == right:
            return Relation.EQUAL
        try:
            return self._relate(left, right)
        except UnresolvableNameError as e:
            logger.debug(f"Treating '{left}' vs '{right}' as unrelated: {e}")
            return Relation.UNRELATED

    @abstractmethod
    def _relate(self, left: str, right: str) -> Relation:
        """Classify two textually different names.

        Raises:
            UnresolvableNameError: If either name cannot be resolved.
        """
        ...
