"""Public client interface for sigtree.

The parser and comparator are usable on their own; this module bundles them
into one entrypoint that accepts either descriptor strings or parsed trees.
"""

from __future__ import annotations

from sigtree.comparator import TreeComparator
from sigtree.core.models import Grade, TypeNode
from sigtree.parser import SignatureParser
from sigtree.resolvers.base import TypeRelationshipResolver
from sigtree.resolvers.importing import ImportResolver


class SignatureClient:
    """High-level client that owns a parser and a comparator."""

    def __init__(
        self,
        resolver: TypeRelationshipResolver | None = None,
        *,
        max_depth: int | None = None,
    ) -> None:
        """Create a sigtree client.

        Args:
            resolver: Relationship oracle (defaults to ImportResolver).
            max_depth: Optional nesting limit shared by parser and comparator.
        """
        self._resolver = resolver or ImportResolver()
        self._parser = SignatureParser(max_depth)
        self._comparator = TreeComparator(self._resolver, max_depth)

    @property
    def resolver(self) -> TypeRelationshipResolver:
        return self._resolver

    @property
    def parser(self) -> SignatureParser:
        return self._parser

    @property
    def comparator(self) -> TreeComparator:
        return self._comparator

    def parse(self, descriptor: str, parent: TypeNode | None = None) -> TypeNode:
        """Parse a descriptor into a frozen tree."""
        return self._parser.parse(descriptor, parent)

    def graded_compare(self, a: TypeNode | str, b: TypeNode | str) -> Grade:
        """Grade two trees or descriptors (see TreeComparator.graded_compare)."""
        return self._comparator.graded_compare(self._as_node(a), self._as_node(b))

    def strict_compare(self, a: TypeNode | str, b: TypeNode | str | None) -> None:
        """Require two trees or descriptors to be identical.

        Raises:
            TypeMismatchError: If ``b`` is None or the trees differ.
        """
        self._comparator.strict_compare(
            self._as_node(a), None if b is None else self._as_node(b)
        )

    def _as_node(self, value: TypeNode | str) -> TypeNode:
        if isinstance(value, TypeNode):
            return value
        return self._parser.parse(value)
