"""TypeNode serialization and deserialization.

This module converts type trees to JSON and back. Parent links are not
stored; they are rebuilt from the nesting when a tree is loaded.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from sigtree.core.errors import SerializationError
from sigtree.core.models import _DELIMITERS, TypeNode


class TypeNodeModel(BaseModel):
    """Wire representation of a TypeNode."""

    name: str = Field(..., min_length=1, description="Type name")
    children: list[TypeNodeModel] = Field(
        default_factory=list, description="Ordered type parameters"
    )

    @field_validator("name")
    @classmethod
    def _reject_delimiters(cls, value: str) -> str:
        if _DELIMITERS.intersection(value):
            raise ValueError("name must not contain '<', '>' or ','")
        return value

    @classmethod
    def from_node(cls, node: TypeNode) -> TypeNodeModel:
        return cls(name=node.name, children=[cls.from_node(c) for c in node.children])

    def to_node(self, parent: TypeNode | None = None) -> TypeNode:
        node = TypeNode(self.name, parent)
        for child in self.children:
            node.add(child.to_node(node))
        return node


TypeNodeModel.model_rebuild()


def _format_validation_error(e: ValidationError) -> str:
    error_details = []
    for err in e.errors():
        loc = ".".join(str(x) for x in err["loc"])
        error_details.append(f"{loc}: {err['msg']}")
    return "; ".join(error_details)


def serialize(node: TypeNode) -> str:
    """Serialize a type tree to a JSON string.

    Args:
        node: Root of the tree to serialize.

    Returns:
        JSON string representation of the tree.

    Raises:
        SerializationError: If serialization fails.
    """
    try:
        data = TypeNodeModel.from_node(node).model_dump(mode="json")
        return json.dumps(data, indent=2, ensure_ascii=False)
    except (ValidationError, TypeError, ValueError) as e:
        raise SerializationError(
            message="Failed to serialize type tree",
            details=str(e),
        ) from e


def deserialize(json_str: str) -> TypeNode:
    """Deserialize a JSON string to a frozen type tree.

    Args:
        json_str: JSON string representation of a tree.

    Returns:
        The root of the deserialized tree.

    Raises:
        SerializationError: If deserialization fails with detailed error info.
    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise SerializationError(
            message="Invalid JSON format",
            details=f"Line {e.lineno}, column {e.colno}: {e.msg}",
        ) from e
    return deserialize_from_dict(data)


def serialize_to_dict(node: TypeNode) -> dict[str, Any]:
    """Serialize a type tree to a dictionary.

    Args:
        node: Root of the tree to serialize.

    Returns:
        Nested dictionary with ``name`` and ``children`` keys.
    """
    return TypeNodeModel.from_node(node).model_dump(mode="json")


def deserialize_from_dict(data: dict[str, Any]) -> TypeNode:
    """Deserialize a dictionary to a frozen type tree.

    Args:
        data: Dictionary representation of a tree.

    Returns:
        The root of the deserialized tree.

    Raises:
        SerializationError: If deserialization fails.
    """
    try:
        model = TypeNodeModel.model_validate(data)
    except ValidationError as e:
        raise SerializationError(
            message="Type tree validation failed",
            details=_format_validation_error(e),
        ) from e
    return model.to_node().freeze()
