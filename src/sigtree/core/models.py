"""Data models for sigtree type trees.

This module defines the TypeNode tree entity together with the verdict enums
shared by resolvers and the comparator.
"""

from __future__ import annotations

import re
import weakref
from collections.abc import Iterator
from enum import Enum, IntEnum

from sigtree.core.errors import FrozenNodeError

_DELIMITERS = frozenset("<>,")


class Relation(str, Enum):
    """Directional relationship between two type names."""

    EQUAL = "EQUAL"
    LEFT_ANCESTOR_OF_RIGHT = "LEFT_ANCESTOR_OF_RIGHT"
    RIGHT_ANCESTOR_OF_LEFT = "RIGHT_ANCESTOR_OF_LEFT"
    UNRELATED = "UNRELATED"


class Grade(IntEnum):
    """Result codes of a graded tree comparison."""

    UNRELATED = -1
    EQUAL = 0
    LEFT_ANCESTOR = 1
    RIGHT_ANCESTOR = 2
    CONFLICT = 3


class TypeNode:
    """A type name together with its ordered type parameters.

    Children are owned by their parent. The parent link is a weak reference,
    so a detached subtree never keeps its former root alive.

    Nodes are built by a single writer and then frozen; freezing seals the
    whole subtree and later calls to add() raise FrozenNodeError.
    """

    def __init__(self, name: str, parent: TypeNode | None = None) -> None:
        if not name:
            raise ValueError("TypeNode name must be a non-empty string")
        if _DELIMITERS.intersection(name):
            raise ValueError(f"TypeNode name '{name}' must not contain '<', '>' or ','")
        self._name = name
        self._parent_ref: weakref.ReferenceType[TypeNode] | None = (
            weakref.ref(parent) if parent is not None else None
        )
        self._children: list[TypeNode] = []
        self._frozen = False

    @property
    def name(self) -> str:
        """Type name, without any type parameters."""
        return self._name

    @property
    def parent(self) -> TypeNode | None:
        """Enclosing node, or None for a root (or a collected parent)."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def children(self) -> tuple[TypeNode, ...]:
        """Read-only view of the type parameters, in declaration order."""
        return tuple(self._children)

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def is_leaf(self) -> bool:
        return not self._children

    def child_at(self, index: int) -> TypeNode:
        """Return the child at ``index``.

        Raises:
            IndexError: If index is outside [0, len(children)).
        """
        if not 0 <= index < len(self._children):
            raise IndexError(
                f"Child index {index} out of range for '{self._name}' "
                f"with {len(self._children)} children"
            )
        return self._children[index]

    def first_child_matching(self, pattern: str | re.Pattern[str]) -> TypeNode | None:
        """Return the first immediate child whose whole name matches ``pattern``.

        Grandchildren are never searched.
        """
        regex = re.compile(pattern) if isinstance(pattern, str) else pattern
        for child in self._children:
            if regex.fullmatch(child.name):
                return child
        return None

    def add(self, child: TypeNode) -> TypeNode:
        """Append ``child`` and make this node its parent.

        Returns:
            The added child.

        Raises:
            FrozenNodeError: If this node has been frozen.
            ValueError: If child is this node or already belongs to another parent.
        """
        if self._frozen:
            raise FrozenNodeError(self._name)
        if child is self:
            raise ValueError(f"TypeNode '{self._name}' cannot contain itself")
        current = child.parent
        if current is None:
            # Unattached, or its former parent has been garbage-collected.
            child._parent_ref = weakref.ref(self)
        elif current is not self:
            raise ValueError(
                f"TypeNode '{child.name}' is already attached to another parent"
            )
        if any(existing is child for existing in self._children):
            raise ValueError(f"TypeNode '{child.name}' is already a child of '{self._name}'")
        self._children.append(child)
        return child

    def freeze(self) -> TypeNode:
        """Seal this node and all of its descendants against further add() calls."""
        stack: list[TypeNode] = [self]
        while stack:
            node = stack.pop()
            node._frozen = True
            stack.extend(node._children)
        return self

    def to_descriptor(self) -> str:
        """Render the tree back to descriptor text, e.g. ``Map<String, List<Integer>>``."""
        if not self._children:
            return self._name
        params = ", ".join(child.to_descriptor() for child in self._children)
        return f"{self._name}<{params}>"

    def __len__(self) -> int:
        return len(self._children)

    def __bool__(self) -> bool:
        # Leaves have len() == 0 but are still real nodes.
        return True

    def __iter__(self) -> Iterator[TypeNode]:
        return iter(tuple(self._children))

    def __eq__(self, other: object) -> bool:
        # Structural: names and children, parents are not compared.
        if not isinstance(other, TypeNode):
            return NotImplemented
        if self._name != other._name or len(self._children) != len(other._children):
            return False
        return all(a == b for a, b in zip(self._children, other._children))

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.to_descriptor()

    def __repr__(self) -> str:
        return f"TypeNode({self.to_descriptor()!r})"
