"""Remove attributes injected by the markdown renderer."""

from __future__ import annotations

from ..config import RENDERER_ID_PREFIX
from ..dom import Document
from ..dom.query import all_of, attr_startswith, child_of, heading, not_, select, tag


def strip_renderer_attributes(doc: Document, prefix: str = RENDERER_ID_PREFIX) -> None:
    """Clear prefixed ids (and their classes) and unwrap heading self-links.

    Anchors inside `h3` are kept; header repair relies on them.
    """
    for element in select(doc, attr_startswith("id", prefix)):
        doc.set_attr(element, "class", None)
        doc.set_attr(element, "id", None)

    anchors = select(doc, all_of(tag("a"), child_of(all_of(heading(), not_(heading(3))))))
    for anchor in anchors:
        if _is_sole_child(doc, anchor):
            doc.unwrap(anchor)


def _is_sole_child(doc: Document, node: int) -> bool:
    """True when `node` has no element siblings and no non-blank text siblings."""
    parent = doc.parent(node)
    if parent is None:
        return False
    for sibling in doc.children(parent):
        if sibling == node:
            continue
        if doc.is_element(sibling) or (doc.is_text(sibling) and doc.data(sibling).strip()):
            return False
    return True
