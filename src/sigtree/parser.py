"""Signature parser turning generics-style descriptors into TypeNode trees.

Grammar::

    TypeDesc   := Identifier ('<' TypeDesc (',' TypeDesc)* '>')?
    Identifier := one or more characters excluding '<', '>', ','

Parsing is purely syntactic: names are never resolved or validated against
real types.
"""

from __future__ import annotations

import logging

from sigtree.core.config import get_config
from sigtree.core.errors import DescriptorDepthError, MalformedDescriptorError
from sigtree.core.models import TypeNode

logger = logging.getLogger(__name__)

OPEN = "<"
CLOSE = ">"
SEPARATOR = ","


class SignatureParser:
    """Recursive-descent parser for type descriptors."""

    def __init__(self, max_depth: int | None = None) -> None:
        """Initialize the parser.

        Args:
            max_depth: Maximum type parameter nesting depth. Defaults to
                SigtreeConfig.max_depth.
        """
        self.max_depth = max_depth if max_depth is not None else get_config().max_depth

    def parse(self, descriptor: str, parent: TypeNode | None = None) -> TypeNode:
        """Parse ``descriptor`` into a frozen TypeNode tree.

        The returned node records ``parent`` as its parent but is not appended
        to it; the caller decides whether to ``parent.add()`` the result.

        Args:
            descriptor: Descriptor text, e.g. ``java.util.Map<String, List<Integer>>``.
            parent: Optional enclosing node for the result.

        Returns:
            Root of the parsed tree.

        Raises:
            MalformedDescriptorError: If the text is not valid descriptor syntax.
            DescriptorDepthError: If nesting exceeds max_depth.
        """
        node = self._parse(descriptor, descriptor, parent, 0)
        return node.freeze()

    def _parse(
        self, source: str, text: str, parent: TypeNode | None, depth: int
    ) -> TypeNode:
        if depth > self.max_depth:
            raise DescriptorDepthError(source, self.max_depth)

        text = text.strip()
        if not text:
            raise MalformedDescriptorError(source, "empty type name")

        open_index = text.find(OPEN)
        if open_index == -1:
            if CLOSE in text:
                raise MalformedDescriptorError(source, f"unbalanced '{CLOSE}' in '{text}'")
            if SEPARATOR in text:
                raise MalformedDescriptorError(source, f"unexpected '{SEPARATOR}' in '{text}'")
            return TypeNode(text, parent)

        name = text[:open_index].strip()
        if not name:
            raise MalformedDescriptorError(source, f"missing type name before '{OPEN}'")
        if CLOSE in name or SEPARATOR in name:
            raise MalformedDescriptorError(source, f"invalid type name '{name}'")

        close_index = _find_matching_close(source, text, open_index)
        trailing = text[close_index + 1 :].strip()
        if trailing:
            raise MalformedDescriptorError(
                source, f"unexpected text '{trailing}' after '{text[: close_index + 1]}'"
            )

        node = TypeNode(name, parent)
        for segment in _split_top_level(source, text[open_index + 1 : close_index]):
            node.add(self._parse(source, segment, node, depth + 1))

        logger.debug(f"Parsed '{name}' with {len(node)} type parameters at depth {depth}")
        return node


def _find_matching_close(source: str, text: str, open_index: int) -> int:
    """Return the index of the bracket closing the one at ``open_index``."""
    depth = 0
    for index in range(open_index, len(text)):
        char = text[index]
        if char == OPEN:
            depth += 1
        elif char == CLOSE:
            depth -= 1
            if depth == 0:
                return index
    raise MalformedDescriptorError(source, f"unbalanced '{OPEN}' in '{text}'")


def _split_top_level(source: str, params: str) -> list[str]:
    """Split a parameter list on commas that are not inside nested brackets."""
    segments: list[str] = []
    depth = 0
    start = 0
    for index, char in enumerate(params):
        if char == OPEN:
            depth += 1
        elif char == CLOSE:
            depth -= 1
            if depth < 0:
                raise MalformedDescriptorError(source, f"unbalanced '{CLOSE}' in '{params}'")
        elif char == SEPARATOR and depth == 0:
            segments.append(params[start:index])
            start = index + 1
    if depth != 0:
        raise MalformedDescriptorError(source, f"unbalanced '{OPEN}' in '{params}'")
    segments.append(params[start:])

    stripped = [segment.strip() for segment in segments]
    if any(not segment for segment in stripped):
        raise MalformedDescriptorError(source, f"empty type parameter in '<{params}>'")
    return stripped


def parse(descriptor: str, parent: TypeNode | None = None) -> TypeNode:
    """Parse a descriptor with a default-configured SignatureParser."""
    return SignatureParser().parse(descriptor, parent)
