"""Unit tests for graded and strict tree comparison."""

import pytest

from sigtree.comparator import TreeComparator
from sigtree.core.errors import TreeDepthError, TypeMismatchError
from sigtree.core.models import Grade, Relation, TypeNode
from sigtree.parser import parse
from sigtree.resolvers import ImportResolver

HELLO_WORLD = "HelloWorld<Function<Integer, Boolean>, Comparable<String>>"
HELLO_WORLD_2 = "HelloWorld2<Comparable<String>, Function<Integer, Boolean>>"
HELLO_WORLD_3 = "HelloWorld3<Comparable<Character>, Function<Object, Boolean>>"
HELLO_WORLD_4 = "HelloWorld4<Comparable<Character>, Function<String, Object>>"

COMPARABLE = ".*Comparable.*"
FUNCTION = ".*Function.*"


def sub(descriptor: str, pattern: str) -> TypeNode:
    node = parse(descriptor).first_child_matching(pattern)
    assert node is not None
    return node


class TestGradedCompare:
    """Tests for graded_compare."""

    def test_identical_leaves(self, comparator: TreeComparator) -> None:
        assert comparator.graded_compare(parse("Integer"), parse("Integer")) == 0

    def test_identical_trees(self, comparator: TreeComparator) -> None:
        assert comparator.graded_compare(parse("Map<String, Integer>"), parse("Map<String, Integer>")) == 0

    def test_returns_grade_enum(self, comparator: TreeComparator) -> None:
        grade = comparator.graded_compare(parse("Object"), parse("Integer"))
        assert grade is Grade.LEFT_ANCESTOR

    def test_ancestor_leaf(self, comparator: TreeComparator) -> None:
        assert comparator.graded_compare(parse("Object"), parse("Integer")) == 1
        assert comparator.graded_compare(parse("Integer"), parse("Object")) == 2

    def test_ancestor_single_mismatch(self, comparator: TreeComparator) -> None:
        left = parse("F<Object, Boolean>")
        right = parse("F<Integer, Boolean>")
        assert comparator.graded_compare(left, right) == 1
        assert comparator.graded_compare(right, left) == 2

    def test_conflicting_children(self, comparator: TreeComparator) -> None:
        assert comparator.graded_compare(parse("F<Object, Boolean>"), parse("F<String, Object>")) == 3

    def test_unrelated_short_circuits(self, comparator: TreeComparator) -> None:
        assert comparator.graded_compare(parse("F<String, Boolean>"), parse("F<Character, Boolean>")) == -1
        # -1 wins over an earlier ancestor verdict
        assert comparator.graded_compare(parse("F<Object, String>"), parse("F<Integer, Character>")) == -1

    def test_unknown_names_are_unrelated(self, comparator: TreeComparator) -> None:
        assert comparator.graded_compare(parse("Widget"), parse("Gadget")) == -1

    def test_differing_root_names_skip_children(self, recording_resolver) -> None:
        comparator = TreeComparator(recording_resolver)
        grade = comparator.graded_compare(parse("Object<Boolean>"), parse("Integer<String>"))
        assert grade == 1
        assert recording_resolver.calls == [("Object", "Integer")]

    def test_equal_names_never_consult_resolver(self, recording_resolver) -> None:
        comparator = TreeComparator(recording_resolver)
        assert comparator.graded_compare(parse("A<B<C>, D>"), parse("A<B<C>, D>")) == 0
        assert recording_resolver.calls == []

    def test_short_circuit_stops_querying(self, recording_resolver) -> None:
        comparator = TreeComparator(recording_resolver)
        grade = comparator.graded_compare(parse("F<X, Object>"), parse("F<Y, Integer>"))
        assert grade == -1
        assert recording_resolver.calls == [("X", "Y")]

    def test_aliased_names_still_compare_children(self) -> None:
        comparator = TreeComparator(ImportResolver())
        assert comparator.graded_compare(parse("builtins.list<int>"), parse("list<int>")) == 0
        assert comparator.graded_compare(parse("builtins.list<int>"), parse("list<str>")) == -1
        assert comparator.graded_compare(parse("builtins.list<int>"), parse("list<bool>")) == 1

    def test_aliased_names_still_compare_arity(self, recording_resolver) -> None:
        recording_resolver.facts[("Seq", "Sequence")] = Relation.EQUAL
        comparator = TreeComparator(recording_resolver)
        assert comparator.graded_compare(parse("Seq<Object>"), parse("Sequence<Integer>")) == 1
        assert comparator.graded_compare(parse("Seq<Object>"), parse("Sequence<A, B>")) == 3
        assert recording_resolver.calls[0] == ("Seq", "Sequence")

    def test_transitive_ancestor(self, comparator: TreeComparator) -> None:
        # Object -> Number -> Integer
        assert comparator.graded_compare(parse("List<Object>"), parse("List<Integer>")) == 1

    def test_zeros_alongside_single_direction(self, comparator: TreeComparator) -> None:
        left = parse("F<Boolean, Number, String>")
        right = parse("F<Boolean, Long, String>")
        assert comparator.graded_compare(left, right) == 1

    def test_nested_grades_propagate(self, comparator: TreeComparator) -> None:
        left = parse("Map<String, List<Integer>>")
        right = parse("Map<String, List<Number>>")
        assert comparator.graded_compare(left, right) == 2

    def test_nested_conflict_propagates(self, comparator: TreeComparator) -> None:
        left = parse("Outer<F<Object, Boolean>, Boolean>")
        right = parse("Outer<F<String, Object>, Object>")
        assert comparator.graded_compare(left, right) == 3

    def test_arity_mismatch_is_conflict(self, comparator: TreeComparator) -> None:
        assert comparator.graded_compare(parse("F<Integer>"), parse("F<Integer, Boolean>")) == 3
        assert comparator.graded_compare(parse("List"), parse("List<Integer>")) == 3
        assert comparator.graded_compare(parse("List<Integer>"), parse("List")) == 3

    def test_depth_limit(self, java_resolver) -> None:
        comparator = TreeComparator(java_resolver, max_depth=1)
        with pytest.raises(TreeDepthError):
            comparator.graded_compare(parse("A<B<C>>"), parse("A<B<C>>"))


class TestHelloWorldScenarios:
    """Comparisons between interface-implementing classes."""

    def test_different_roots(self, comparator: TreeComparator) -> None:
        assert comparator.graded_compare(parse(HELLO_WORLD), parse(HELLO_WORLD_2)) == -1

    def test_unrelated_comparables(self, comparator: TreeComparator) -> None:
        grade = comparator.graded_compare(sub(HELLO_WORLD, COMPARABLE), sub(HELLO_WORLD_3, COMPARABLE))
        assert grade == -1

    def test_equal_comparables(self, comparator: TreeComparator) -> None:
        grade = comparator.graded_compare(sub(HELLO_WORLD, COMPARABLE), sub(HELLO_WORLD_2, COMPARABLE))
        assert grade == 0

    def test_directional_functions(self, comparator: TreeComparator) -> None:
        broad = sub(HELLO_WORLD_3, FUNCTION)
        narrow = sub(HELLO_WORLD_2, FUNCTION)
        assert comparator.graded_compare(broad, narrow) == 1
        assert comparator.graded_compare(narrow, broad) == 2

    def test_conflicting_functions(self, comparator: TreeComparator) -> None:
        grade = comparator.graded_compare(sub(HELLO_WORLD_3, FUNCTION), sub(HELLO_WORLD_4, FUNCTION))
        assert grade == 3


class TestStrictCompare:
    """Tests for strict_compare."""

    def test_identical_passes(self, comparator: TreeComparator) -> None:
        assert comparator.strict_compare(parse("Map<String, Integer>"), parse("Map<String, Integer>")) is None

    def test_missing_target(self, comparator: TreeComparator) -> None:
        with pytest.raises(TypeMismatchError) as exc_info:
            comparator.strict_compare(sub(HELLO_WORLD, COMPARABLE), None)
        assert exc_info.value.source == "Comparable"
        assert exc_info.value.target is None
        assert exc_info.value.grade is None

    def test_mismatch_carries_names_and_grade(self, comparator: TreeComparator) -> None:
        with pytest.raises(TypeMismatchError) as exc_info:
            comparator.strict_compare(sub(HELLO_WORLD, COMPARABLE), sub(HELLO_WORLD_3, COMPARABLE))
        error = exc_info.value
        assert error.source == "Comparable"
        assert error.target == "Comparable"
        assert error.grade == -1
        assert error.mismatch == ("String", "Character")
        assert "'String' vs 'Character'" in str(error)

    def test_ancestor_is_not_strict_match(self, comparator: TreeComparator) -> None:
        with pytest.raises(TypeMismatchError) as exc_info:
            comparator.strict_compare(parse("F<Object, Boolean>"), parse("F<Integer, Boolean>"))
        assert exc_info.value.grade == 1
        assert exc_info.value.mismatch == ("Object", "Integer")

    def test_deepest_mismatch_reported(self, comparator: TreeComparator) -> None:
        with pytest.raises(TypeMismatchError) as exc_info:
            comparator.strict_compare(parse("Map<String, List<Set<Integer>>>"), parse("Map<String, List<Set<Long>>>"))
        assert exc_info.value.mismatch == ("Integer", "Long")

    def test_arity_mismatch_reported(self, comparator: TreeComparator) -> None:
        with pytest.raises(TypeMismatchError) as exc_info:
            comparator.strict_compare(parse("F<Integer>"), parse("F<Integer, Boolean>"))
        assert exc_info.value.grade == 3
        assert exc_info.value.mismatch == ("F<Integer>", "F<Integer, Boolean>")

    def test_aliased_names_with_different_children(self) -> None:
        comparator = TreeComparator(ImportResolver())
        comparator.strict_compare(parse("builtins.list<int>"), parse("list<int>"))
        with pytest.raises(TypeMismatchError) as exc_info:
            comparator.strict_compare(parse("builtins.list<int>"), parse("list<str>"))
        assert exc_info.value.grade == -1
        assert exc_info.value.mismatch == ("int", "str")
