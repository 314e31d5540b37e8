"""Core module containing type tree models, errors, configuration, and serializer."""

from sigtree.core.config import SigtreeConfig, get_config, reload_config
from sigtree.core.errors import (
    DescriptorDepthError,
    FrozenNodeError,
    MalformedDescriptorError,
    SerializationError,
    SigtreeError,
    TreeDepthError,
    TypeMismatchError,
    UnresolvableNameError,
)
from sigtree.core.models import Grade, Relation, TypeNode
from sigtree.core.serializer import (
    TypeNodeModel,
    deserialize,
    deserialize_from_dict,
    serialize,
    serialize_to_dict,
)

__all__ = [
    "DescriptorDepthError",
    "FrozenNodeError",
    "Grade",
    "MalformedDescriptorError",
    "Relation",
    "SerializationError",
    "SigtreeConfig",
    "SigtreeError",
    "TreeDepthError",
    "TypeMismatchError",
    "TypeNode",
    "TypeNodeModel",
    "UnresolvableNameError",
    "deserialize",
    "deserialize_from_dict",
    "get_config",
    "reload_config",
    "serialize",
    "serialize_to_dict",
]
