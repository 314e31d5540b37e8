"""Exception types raised by sigtree."""

from __future__ import annotations


class SigtreeError(Exception):
    """Base class for all sigtree errors."""


class MalformedDescriptorError(SigtreeError):
    """A descriptor string is not valid signature syntax."""

    def __init__(self, descriptor: str, details: str) -> None:
        super().__init__(f"Malformed descriptor '{descriptor}': {details}")
        self.descriptor = descriptor
        self.details = details


class DescriptorDepthError(MalformedDescriptorError):
    """A descriptor nests type parameters deeper than the configured limit."""

    def __init__(self, descriptor: str, max_depth: int) -> None:
        super().__init__(descriptor, f"nesting exceeds maximum depth of {max_depth}")
        self.max_depth = max_depth


class FrozenNodeError(SigtreeError):
    """Raised when a frozen TypeNode is modified."""

    def __init__(self, name: str) -> None:
        super().__init__(f"TypeNode '{name}' is frozen and cannot accept children")
        self.name = name


class TreeDepthError(SigtreeError):
    """A tree handed to the comparator is deeper than the configured limit."""

    def __init__(self, name: str, max_depth: int) -> None:
        super().__init__(f"Tree at '{name}' exceeds maximum depth of {max_depth}")
        self.name = name
        self.max_depth = max_depth


class UnresolvableNameError(SigtreeError):
    """A resolver could not map a type name to anything it knows.

    Resolvers raise this internally; TypeRelationshipResolver.relate() folds it
    into Relation.UNRELATED so it never reaches the comparator.
    """

    def __init__(self, name: str, reason: str | None = None) -> None:
        message = f"Cannot resolve type name '{name}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.name = name
        self.reason = reason


class TypeMismatchError(SigtreeError):
    """Raised by strict comparison when two trees are not identical.

    Attributes:
        source: Name of the left-hand root.
        target: Name of the right-hand root, or None when no target was given.
        grade: Graded comparison result, or None when no target was given.
        mismatch: (left, right) names of the deepest pair that first diverged.
    """

    def __init__(
        self,
        source: str,
        target: str | None = None,
        *,
        grade: int | None = None,
        mismatch: tuple[str, str] | None = None,
    ) -> None:
        if target is None:
            message = f"Cannot compare '{source}' against a missing type"
        else:
            message = f"Type '{source}' does not match '{target}'"
            if grade is not None:
                message = f"{message} (grade {grade})"
            if mismatch is not None and mismatch != (source, target):
                message = f"{message}: '{mismatch[0]}' vs '{mismatch[1]}'"
        super().__init__(message)
        self.source = source
        self.target = target
        self.grade = grade
        self.mismatch = mismatch


class SerializationError(SigtreeError):
    """Error during serialization or deserialization."""

    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details
