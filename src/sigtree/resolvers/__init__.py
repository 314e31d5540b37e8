"""Type-relationship resolvers consulted by the tree comparator."""

from sigtree.resolvers.base import TypeRelationshipResolver
from sigtree.resolvers.hierarchy import HierarchyResolver, TypeHierarchy
from sigtree.resolvers.importing import ImportResolver, load_type

__all__ = [
    "HierarchyResolver",
    "ImportResolver",
    "TypeHierarchy",
    "TypeRelationshipResolver",
    "load_type",
]
