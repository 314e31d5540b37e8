"""Shared pytest fixtures for sigtree tests."""

import pytest
from dotenv import load_dotenv
from hypothesis import settings

from sigtree.comparator import TreeComparator
from sigtree.core.config import reload_config
from sigtree.core.models import Relation
from sigtree.resolvers import HierarchyResolver, TypeRelationshipResolver

# Load environment variables from .env file
load_dotenv()

# Configure hypothesis for property-based testing
settings.register_profile("ci", max_examples=100, deadline=None)
settings.register_profile("dev", max_examples=20, deadline=None)
settings.load_profile("dev")

# Integer -> Number -> Object, everything else directly under Object
JAVA_HIERARCHY = {
    "Object": [],
    "Number": ["Object"],
    "Integer": ["Number"],
    "Long": ["Number"],
    "String": ["Object"],
    "Boolean": ["Object"],
    "Character": ["Object"],
}


class RecordingResolver(TypeRelationshipResolver):
    """Resolver answering from a fixed table and recording every query."""

    def __init__(self, facts: dict[tuple[str, str], Relation] | None = None) -> None:
        self.facts = dict(facts or {})
        self.calls: list[tuple[str, str]] = []

    def _relate(self, left: str, right: str) -> Relation:
        self.calls.append((left, right))
        if (left, right) in self.facts:
            return self.facts[(left, right)]
        mirrored = self.facts.get((right, left))
        if mirrored == Relation.LEFT_ANCESTOR_OF_RIGHT:
            return Relation.RIGHT_ANCESTOR_OF_LEFT
        if mirrored == Relation.RIGHT_ANCESTOR_OF_LEFT:
            return Relation.LEFT_ANCESTOR_OF_RIGHT
        return Relation.UNRELATED


@pytest.fixture(autouse=True)
def fresh_config():
    """Make every test see configuration built from the current environment."""
    reload_config()
    yield
    reload_config()


@pytest.fixture
def java_resolver() -> HierarchyResolver:
    """Resolver over a small slice of the java.lang hierarchy."""
    return HierarchyResolver(JAVA_HIERARCHY)


@pytest.fixture
def comparator(java_resolver: HierarchyResolver) -> TreeComparator:
    return TreeComparator(java_resolver)


@pytest.fixture
def recording_resolver() -> RecordingResolver:
    return RecordingResolver(
        {
            ("Object", "Integer"): Relation.LEFT_ANCESTOR_OF_RIGHT,
            ("Object", "String"): Relation.LEFT_ANCESTOR_OF_RIGHT,
            ("Object", "Boolean"): Relation.LEFT_ANCESTOR_OF_RIGHT,
        }
    )
