"""sigtree - parse type signatures into trees and grade how they relate."""

from sigtree.client import SignatureClient
from sigtree.comparator import TreeComparator
from sigtree.core import (
    DescriptorDepthError,
    FrozenNodeError,
    Grade,
    MalformedDescriptorError,
    Relation,
    SigtreeError,
    TreeDepthError,
    TypeMismatchError,
    TypeNode,
)
from sigtree.parser import SignatureParser, parse
from sigtree.resolvers import HierarchyResolver, ImportResolver, TypeRelationshipResolver

__version__ = "0.1.0"

__all__ = [
    "DescriptorDepthError",
    "FrozenNodeError",
    "Grade",
    "HierarchyResolver",
    "ImportResolver",
    "MalformedDescriptorError",
    "Relation",
    "SignatureClient",
    "SignatureParser",
    "SigtreeError",
    "TreeComparator",
    "TreeDepthError",
    "TypeMismatchError",
    "TypeNode",
    "TypeRelationshipResolver",
    "parse",
]
