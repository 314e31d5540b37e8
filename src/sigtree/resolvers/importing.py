"""Resolver that relates names by importing them and checking subclassing.

Dotted names such as ``collections.abc.Mapping`` are imported with importlib;
bare names such as ``int`` are looked up in ``builtins``. Anything that does
not resolve to a class is unresolvable.
"""

from __future__ import annotations

import builtins
import importlib
import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from sigtree.core.config import get_config
from sigtree.core.errors import UnresolvableNameError
from sigtree.core.models import Relation
from sigtree.resolvers.base import TypeRelationshipResolver

if TYPE_CHECKING:
    from functools import _CacheInfo

logger = logging.getLogger(__name__)


def load_type(name: str) -> type:
    """Import the class named by ``name``.

    Raises:
        UnresolvableNameError: If the name does not resolve to a class.
    """
    if "." not in name:
        target = getattr(builtins, name, None)
    else:
        target = _import_dotted(name)
    if not isinstance(target, type):
        raise UnresolvableNameError(name, "not a class")
    return target


def _import_dotted(name: str) -> object:
    parts = name.split(".")
    # Longest importable module prefix wins, remaining parts are attributes.
    for split in range(len(parts) - 1, 0, -1):
        module_name = ".".join(parts[:split])
        try:
            target: object = importlib.import_module(module_name)
        except (ImportError, ValueError):
            continue
        except Exception as e:
            # Module exists but raised while executing
            raise UnresolvableNameError(name, f"importing '{module_name}' failed: {e}") from e
        for attribute in parts[split:]:
            try:
                target = getattr(target, attribute)
            except AttributeError as e:
                raise UnresolvableNameError(name, f"no attribute '{attribute}'") from e
        return target
    raise UnresolvableNameError(name, "no importable module")


def _is_subclass(candidate: type, base: type, base_name: str) -> bool:
    """issubclass() that reports bases it cannot check against as unresolvable."""
    try:
        return issubclass(candidate, base)
    except TypeError as e:
        # e.g. protocols with non-method members, TypedDict classes
        raise UnresolvableNameError(base_name, str(e)) from e


class ImportResolver(TypeRelationshipResolver):
    """Relate Python classes by name using ``issubclass``."""

    def __init__(self, cache_size: int | None = None) -> None:
        """Initialize the resolver.

        Args:
            cache_size: Number of memoized name lookups. Defaults to
                SigtreeConfig.resolver_cache_size; 0 disables the cache.
        """
        if cache_size is None:
            cache_size = get_config().resolver_cache_size
        self._load = lru_cache(maxsize=cache_size)(load_type)

    def _relate(self, left: str, right: str) -> Relation:
        left_type = self._load(left)
        right_type = self._load(right)
        if left_type is right_type:
            return Relation.EQUAL
        if _is_subclass(right_type, left_type, left):
            return Relation.LEFT_ANCESTOR_OF_RIGHT
        if _is_subclass(left_type, right_type, right):
            return Relation.RIGHT_ANCESTOR_OF_LEFT
        logger.debug(f"No subclass relation between '{left}' and '{right}'")
        return Relation.UNRELATED

    def cache_info(self) -> _CacheInfo:
        """Hit/miss statistics of the name lookup cache."""
        return self._load.cache_info()
