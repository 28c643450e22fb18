"""Key-path search over untyped JSON trees.

InnerTube responses nest the same renderers at different depths depending on
content type, locale and experiment cohort. Instead of hard-coding full paths,
parsers name the keys they care about and let these helpers find them.

Search order: at a mapping, its own keys are checked first, then its values
are descended left to right; at a sequence, elements are descended in order.
A path ``("a", "b")`` matches every ``b`` found inside an ``a``.
"""

import logging
from collections.abc import Iterator, Mapping, Sequence
from typing import Any, Final

logger = logging.getLogger(__name__)

# Deeper subtrees are not descended. Real responses stay well below this.
MAX_DEPTH: Final = 256


class _Missing:
    """Type of the MISSING sentinel."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()


def is_missing(value: Any) -> bool:
    """Return True if a traversal found nothing."""
    return value is MISSING


def _children(node: Any) -> Iterator[Any]:
    if isinstance(node, Mapping):
        yield from node.values()
    elif isinstance(node, Sequence) and not isinstance(node, str | bytes):
        yield from node


def _matches(
    node: Any, keys: tuple[str, ...], depth: int, path: set[int]
) -> Iterator[Any]:
    """Yield every value reached by ``keys``, in search order.

    ``path`` holds the ids of the containers on the current descent, so a
    container that (indirectly) contains itself is entered only once.
    """
    if depth > MAX_DEPTH:
        logger.debug("Traversal depth limit reached, skipping subtree")
        return
    if id(node) in path:
        logger.debug("Cycle in tree, skipping subtree")
        return

    path.add(id(node))
    try:
        key, rest = keys[0], keys[1:]
        hit = isinstance(node, Mapping) and key in node
        if hit:
            if rest:
                yield from _matches(node[key], rest, depth + 1, path)
            else:
                yield node[key]

        for child_key, child in (
            node.items() if isinstance(node, Mapping) else enumerate(_children(node))
        ):
            if hit and child_key == key:
                continue
            if isinstance(child, Mapping | list | tuple):
                yield from _matches(child, keys, depth + 1, path)
    finally:
        path.discard(id(node))


def traverse(tree: Any, *keys: str) -> Any:
    """Return the first value reached by the key path, or MISSING.

    Args:
        tree: Parsed JSON (dicts, lists, scalars).
        *keys: Key path; each key is searched at any depth below the previous.

    Returns:
        The first match in search order, or ``MISSING``.

    Example:
        >>> traverse({"a": [{"b": {"c": 1}}]}, "b", "c")
        1
    """
    if not keys:
        return tree
    return next(_matches(tree, keys, 0, set()), MISSING)


def traverse_list(tree: Any, *keys: str) -> list[Any]:
    """Return every value reached by the key path, in document order.

    Matched values are not searched again for the same path, so a renderer
    nested inside another renderer of the same name is not reported twice.
    """
    if not keys:
        return [tree]
    return list(_matches(tree, keys, 0, set()))


def traverse_string(tree: Any, *keys: str) -> str:
    """Concatenate the text fragments found at the end of a key path.

    The container is located with all keys but the last (typically ending in
    ``runs``), then every string stored under the last key (typically
    ``text``) inside it is joined in document order. With a single key, the
    first string found under that key is returned.

    Example:
        >>> title = {"title": {"runs": [{"text": "Never "}, {"text": "Gonna"}]}}
        >>> traverse_string(title, "title", "runs", "text")
        'Never Gonna'

    Returns:
        The joined string, or ``""`` when nothing was found.
    """
    if not keys:
        return tree if isinstance(tree, str) else ""
    *prefix, last = keys
    if not prefix:
        matches = _matches(tree, keys, 0, set())
        return next((v for v in matches if isinstance(v, str)), "")
    container = traverse(tree, *prefix)
    if is_missing(container):
        return ""
    return "".join(v for v in traverse_list(container, last) if isinstance(v, str))
