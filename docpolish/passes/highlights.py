"""Tidy syntax-highlighted code blocks.

Each `.highlight` container is tagged with its language, stripped down to the
class names the site stylesheet knows about, and flattened: unclassed `<span>`
wrappers are unwrapped, doubly nested `comment`/`string` spans are merged, and
single-line snippets lose their line `<div>`.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..config import COLLAPSIBLE_MARKERS, HIGHLIGHT_CONTAINER_CLASS, HIGHLIGHT_MARKERS, HIGHLIGHTS
from ..dom import Document
from ..dom.query import all_of, has_any_class, has_attr, has_class, not_, select, select_first, tag


class StructuralError(ValueError):
    """Raised when a highlight container lacks the expected marker element."""


_bare_span = all_of(tag("span"), not_(has_attr("class")))


def tidy_highlights(
    doc: Document,
    highlights: dict[str, Iterable[str]] | None = None,
) -> None:
    """Tidy every highlight container in `doc`.

    Raises:
        StructuralError: If a container has no `source`/`text` marker descendant
    """
    rules = HIGHLIGHTS if highlights is None else highlights
    for container in select(doc, has_class(HIGHLIGHT_CONTAINER_CLASS)):
        ext = detect_language(doc, container)
        doc.add_class(container, ext)
        whitelist_classes(doc, container, rules.get(ext, ()))
        unwrap_text_spans(doc, container)
        collapse_spans(doc, container)
        for marker in COLLAPSIBLE_MARKERS:
            collapse_nested_markers(doc, container, marker)
        unwrap_single_line(doc, container)
        doc.normalize(container)


def detect_language(doc: Document, container: int) -> str:
    """Return the last class token of the first `source`/`text` descendant."""
    marker = select_first(doc, has_any_class(*HIGHLIGHT_MARKERS), root=container)
    if marker is None:
        raise StructuralError(
            f"Highlight container <{doc.tag(container)}> (node {container}) "
            f"has no {'/'.join(HIGHLIGHT_MARKERS)} marker"
        )
    return doc.classes(marker)[-1]


def whitelist_classes(doc: Document, container: int, allowed: Iterable[str]) -> None:
    """Keep only allowed class tokens on descendants, dropping empty `class`."""
    allowed = set(allowed)
    for element in select(doc, has_attr("class"), root=container):
        doc.set_classes(element, [t for t in doc.classes(element) if t in allowed])


def unwrap_text_spans(doc: Document, container: int) -> None:
    """Replace unclassed spans without element children by their text."""
    while True:
        spans = [
            s for s in select(doc, _bare_span, root=container) if not doc.element_children(s)
        ]
        if not spans:
            return
        for span in spans:
            doc.replace_with(span, [doc.create_text(doc.text_content(span))])


def collapse_spans(doc: Document, container: int) -> None:
    """Splice the children of unclassed spans into their parents."""
    while True:
        span = select_first(doc, _bare_span, root=container)
        if span is None:
            return
        doc.unwrap(span)


def collapse_nested_markers(doc: Document, container: int, marker: str) -> None:
    """Flatten `<span class=m><span class=m>..</span></span>` to a single level.

    Applies when an element child of a `marker` element carries the same
    marker; the outer element keeps only the combined text.
    """
    is_marker = has_class(marker)
    while True:
        target = None
        for element in select(doc, is_marker, root=container):
            if any(is_marker(doc, c) for c in doc.element_children(element)):
                target = element
                break
        if target is None:
            return
        doc.set_text(target, doc.text_content(target))


def unwrap_single_line(doc: Document, container: int) -> None:
    """Drop the line `<div>` of a `<pre>` that holds exactly one line."""
    for pre in doc.element_children(container):
        if doc.tag(pre) != "pre":
            continue
        lines = [c for c in doc.element_children(pre) if doc.tag(c) == "div"]
        if len(lines) == 1:
            doc.unwrap(lines[0])
