"""Repair broken markup around level-3 headings.

marky-markdown mangles the inline content that follows an `h3` wrapped in an
anchor: a stray paragraph is emitted before the heading, the text after it is
left as loose siblings followed by an empty `<p>`, and `_` inside code spans is
read as emphasis.
"""

from __future__ import annotations

from ..dom import Document
from ..dom.query import all_of, heading, is_empty, select, tag

_BOUNDARY_TAGS = ("h3", "p")


def repair_headers(doc: Document) -> None:
    remove_leading_paragraphs(doc)
    rebuild_trailing_paragraphs(doc)
    flatten_code_emphasis(doc)


def remove_leading_paragraphs(doc: Document) -> None:
    """For `<p>..</p><p></p><h3>`, remove the paragraph before the empty one."""
    doomed: list[int] = []
    for h3 in select(doc, heading(3)):
        p = doc.previous_element_sibling(h3)
        if p is None or not all_of(tag("p"), is_empty)(doc, p):
            continue
        previous = doc.previous_element_sibling(p)
        if previous is not None and doc.tag(previous) == "p" and previous not in doomed:
            doomed.append(previous)

    for node in doomed:
        doc.detach(node)


def rebuild_trailing_paragraphs(doc: Document) -> None:
    """Move loose inline siblings back into the empty `<p>` that follows them.

    Walks backwards from the paragraph. Each visited node hands over the node
    right after it, so the node adjacent to an `h3`/`p` boundary stays in place
    and the moved nodes keep their original order.
    """
    paragraphs: list[int] = []
    for h3 in select(doc, heading(3)):
        sibling = doc.next_element_sibling(h3)
        while sibling is not None:
            if doc.tag(sibling) == "p" and not doc.children(sibling) and sibling not in paragraphs:
                paragraphs.append(sibling)
            sibling = doc.next_element_sibling(sibling)

    for p in paragraphs:
        node = doc.previous_sibling(p)
        if node is None or doc.tag(node) in _BOUNDARY_TAGS:
            continue
        while True:
            node = doc.previous_sibling(node)
            if node is None or doc.tag(node) in _BOUNDARY_TAGS:
                break
            following = doc.next_sibling(node)
            if following is None or following == p or doc.tag(following) in _BOUNDARY_TAGS:
                break
            doc.prepend_child(p, following)


def flatten_code_emphasis(doc: Document) -> None:
    """Turn `<em>` inside `h3` code spans back into literal underscores."""
    ems = select(doc, tag("em"))
    parents: list[int] = []
    for em in ems:
        ancestors = list(doc.ancestors(em))
        code_index = next((i for i, a in enumerate(ancestors) if doc.tag(a) == "code"), None)
        if code_index is None or not any(doc.tag(a) == "h3" for a in ancestors[code_index + 1:]):
            continue
        parent = doc.parent(em)
        if parent is not None and parent not in parents:
            parents.append(parent)

    for parent in parents:
        while True:
            inner = [n for n in doc.iter_descendants(parent) if doc.tag(n) == "em"]
            if not inner:
                break
            em = inner[0]
            doc.replace_with(
                em,
                [doc.create_text("_"), *doc.children(em), doc.create_text("_")],
            )
        doc.normalize(parent)
