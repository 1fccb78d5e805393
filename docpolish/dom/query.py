"""Predicate-driven queries over a `Document`.

Selectors are plain callables `(doc, node) -> bool` combined with the helpers
below and evaluated by a depth-first walk in document order.
"""

from __future__ import annotations

from collections.abc import Callable

from .tree import Document

Predicate = Callable[[Document, int], bool]

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")


def tag(*names: str) -> Predicate:
    wanted = {n.lower() for n in names}
    return lambda doc, node: doc.tag(node) in wanted


def has_attr(name: str) -> Predicate:
    return lambda doc, node: doc.is_element(node) and doc.has_attr(node, name)


def attr_equals(name: str, value: str) -> Predicate:
    return lambda doc, node: doc.is_element(node) and doc.get_attr(node, name) == value


def attr_startswith(name: str, prefix: str) -> Predicate:
    def _match(doc: Document, node: int) -> bool:
        if not doc.is_element(node):
            return False
        value = doc.get_attr(node, name)
        return value is not None and value.startswith(prefix)

    return _match


def has_class(token: str) -> Predicate:
    return lambda doc, node: doc.is_element(node) and doc.has_class(node, token)


def has_any_class(*tokens: str) -> Predicate:
    return lambda doc, node: doc.is_element(node) and any(t in tokens for t in doc.classes(node))


def heading(level: int | None = None) -> Predicate:
    """Match `h1`-`h6`, or only `h<level>` when a level is given."""
    if level is None:
        return tag(*HEADING_TAGS)
    return tag(f"h{level}")


def is_empty(doc: Document, node: int) -> bool:
    """Match elements without any child nodes (text included)."""
    return doc.is_element(node) and not doc.children(node)


def all_of(*predicates: Predicate) -> Predicate:
    return lambda doc, node: all(p(doc, node) for p in predicates)


def not_(predicate: Predicate) -> Predicate:
    return lambda doc, node: not predicate(doc, node)


def child_of(predicate: Predicate) -> Predicate:
    def _match(doc: Document, node: int) -> bool:
        parent = doc.parent(node)
        return parent is not None and parent != doc.root and predicate(doc, parent)

    return _match


def descendant_of(predicate: Predicate) -> Predicate:
    def _match(doc: Document, node: int) -> bool:
        return any(predicate(doc, a) for a in doc.ancestors(node) if a != doc.root)

    return _match


def select(doc: Document, predicate: Predicate, root: int | None = None) -> list[int]:
    """Return descendants of `root` (default: document root) matching `predicate`."""
    start = doc.root if root is None else root
    return [node for node in doc.iter_descendants(start) if predicate(doc, node)]


def select_first(doc: Document, predicate: Predicate, root: int | None = None) -> int | None:
    start = doc.root if root is None else root
    for node in doc.iter_descendants(start):
        if predicate(doc, node):
            return node
    return None
