"""Table-driven resolver backed by an explicit supertype hierarchy."""

from __future__ import annotations

import json
from collections import deque
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from sigtree.core.errors import SerializationError, UnresolvableNameError
from sigtree.core.models import Relation
from sigtree.resolvers.base import TypeRelationshipResolver


class TypeHierarchy(BaseModel):
    """Known types and their direct supertypes."""

    supertypes: dict[str, list[str]] = Field(
        default_factory=dict, description="type_name -> [direct supertype names]"
    )

    def add_type(self, type_name: str, supertypes: list[str] | None = None) -> None:
        """Register a type and (optionally) its direct supertypes."""
        known = self.supertypes.setdefault(type_name, [])
        for supertype in supertypes or []:
            if supertype not in known:
                known.append(supertype)
            self.supertypes.setdefault(supertype, [])

    def knows(self, type_name: str) -> bool:
        return type_name in self.supertypes

    def is_ancestor(self, ancestor: str, descendant: str) -> bool:
        """Check whether ``ancestor`` is a (transitive) supertype of ``descendant``.

        Cycles in the table are tolerated; every type is visited once.
        """
        seen = {descendant}
        queue = deque(self.supertypes.get(descendant, []))
        while queue:
            current = queue.popleft()
            if current == ancestor:
                return True
            if current in seen:
                continue
            seen.add(current)
            queue.extend(self.supertypes.get(current, []))
        return False


class HierarchyResolver(TypeRelationshipResolver):
    """Resolve relationships from a TypeHierarchy table.

    Names missing from the table are unresolvable and therefore unrelated.
    """

    def __init__(self, hierarchy: TypeHierarchy | dict[str, list[str]] | None = None) -> None:
        if hierarchy is None:
            hierarchy = TypeHierarchy()
        elif not isinstance(hierarchy, TypeHierarchy):
            table = TypeHierarchy()
            for type_name, supertypes in hierarchy.items():
                table.add_type(type_name, supertypes)
            hierarchy = table
        self.hierarchy = hierarchy

    @classmethod
    def from_file(cls, path: Path) -> HierarchyResolver:
        """Load a resolver from a JSON file mapping type names to supertype lists.

        Raises:
            SerializationError: If the file cannot be read or has the wrong shape.
        """
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except OSError as e:
            raise SerializationError(
                message=f"Cannot read hierarchy file {path}", details=str(e)
            ) from e
        except json.JSONDecodeError as e:
            raise SerializationError(
                message="Invalid JSON format",
                details=f"Line {e.lineno}, column {e.colno}: {e.msg}",
            ) from e
        try:
            table = TypeHierarchy.model_validate({"supertypes": data})
        except ValidationError as e:
            raise SerializationError(
                message="Hierarchy file must map type names to lists of supertypes",
                details=str(e),
            ) from e
        return cls(table.supertypes)

    def _relate(self, left: str, right: str) -> Relation:
        for name in (left, right):
            if not self.hierarchy.knows(name):
                raise UnresolvableNameError(name, "not in hierarchy")
        if self.hierarchy.is_ancestor(left, right):
            return Relation.LEFT_ANCESTOR_OF_RIGHT
        if self.hierarchy.is_ancestor(right, left):
            return Relation.RIGHT_ANCESTOR_OF_LEFT
        return Relation.UNRELATED
