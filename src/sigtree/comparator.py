"""Graded and strict structural comparison of TypeNode trees.

Grades (see Grade):

* ``-1`` the trees are incompatible somewhere,
* ``0`` the trees are identical,
* ``1`` the left tree is the broader one (left names are ancestors),
* ``2`` the right tree is the broader one,
* ``3`` children disagree on the direction, or parameter counts differ.

Comparison is directional: swapping the arguments swaps 1 and 2.
"""

from __future__ import annotations

import logging

from sigtree.core.config import get_config
from sigtree.core.errors import TreeDepthError, TypeMismatchError
from sigtree.core.models import Grade, Relation, TypeNode
from sigtree.resolvers.base import TypeRelationshipResolver

logger = logging.getLogger(__name__)

_RELATION_GRADES = {
    Relation.LEFT_ANCESTOR_OF_RIGHT: Grade.LEFT_ANCESTOR,
    Relation.RIGHT_ANCESTOR_OF_LEFT: Grade.RIGHT_ANCESTOR,
    Relation.UNRELATED: Grade.UNRELATED,
}


class TreeComparator:
    """Compare type trees with the help of a type-relationship resolver."""

    def __init__(
        self, resolver: TypeRelationshipResolver, max_depth: int | None = None
    ) -> None:
        """Initialize the comparator.

        Args:
            resolver: Oracle consulted for every pair of differing names.
            max_depth: Maximum tree depth to compare. Defaults to
                SigtreeConfig.max_depth.
        """
        self.resolver = resolver
        self.max_depth = max_depth if max_depth is not None else get_config().max_depth

    def graded_compare(self, a: TypeNode, b: TypeNode) -> Grade:
        """Grade how tree ``a`` relates to tree ``b``.

        Raises:
            TreeDepthError: If either tree is deeper than max_depth.
        """
        grade, _ = self._compare(a, b, 0)
        return grade

    def strict_compare(self, a: TypeNode, b: TypeNode | None) -> None:
        """Require ``a`` and ``b`` to be identical.

        Raises:
            TypeMismatchError: If ``b`` is None or the trees do not grade 0.
        """
        if b is None:
            raise TypeMismatchError(a.name)
        grade, mismatch = self._compare(a, b, 0)
        if grade != Grade.EQUAL:
            raise TypeMismatchError(a.name, b.name, grade=grade, mismatch=mismatch)

    def _compare(
        self, a: TypeNode, b: TypeNode, depth: int
    ) -> tuple[Grade, tuple[str, str] | None]:
        if depth > self.max_depth:
            raise TreeDepthError(a.name, self.max_depth)

        if a.name != b.name:
            relation = self.resolver.relate(a.name, b.name)
            if relation != Relation.EQUAL:
                return _RELATION_GRADES[relation], (a.name, b.name)
            # Aliases of one type still have to agree on every parameter.

        if a.is_leaf and b.is_leaf:
            return Grade.EQUAL, None

        if len(a) != len(b):
            logger.debug(
                f"Arity mismatch for '{a.name}': {len(a)} vs {len(b)} type parameters"
            )
            return Grade.CONFLICT, (a.to_descriptor(), b.to_descriptor())

        seen: set[Grade] = set()
        first_mismatch: tuple[str, str] | None = None
        for left, right in zip(a.children, b.children):
            grade, mismatch = self._compare(left, right, depth + 1)
            if grade == Grade.UNRELATED:
                return grade, mismatch
            if grade != Grade.EQUAL:
                seen.add(grade)
                if first_mismatch is None:
                    first_mismatch = mismatch

        if not seen:
            return Grade.EQUAL, None
        if len(seen) == 1:
            return seen.pop(), first_mismatch
        return Grade.CONFLICT, first_mismatch
