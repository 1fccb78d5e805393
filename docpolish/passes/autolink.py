"""Convert bare method references into documentation links."""

from __future__ import annotations

import re

from ..config import DOC_CONTAINER_CLASS
from ..dom import Document
from ..dom.query import all_of, child_of, descendant_of, has_class, not_, select, tag

# `_.name` and nothing else (ASCII word characters only)
METHOD_REFERENCE = re.compile(r"_\.(\w+)", re.ASCII)


def auto_link(doc: Document) -> None:
    """Wrap `<code>_.name</code>` inside doc containers in `<a href="#name">`.

    Code spans already sitting directly inside an anchor are skipped, so running
    the pass twice leaves the tree unchanged.
    """
    codes = select(
        doc,
        all_of(
            tag("code"),
            descendant_of(has_class(DOC_CONTAINER_CLASS)),
            not_(child_of(tag("a"))),
        ),
    )
    for code in codes:
        if any(doc.is_element(c) for c in doc.children(code)):
            continue
        text = doc.text_content(code)
        match = METHOD_REFERENCE.fullmatch(text)
        if not match:
            continue

        link = doc.create_element("a", {"href": f"#{match.group(1)}"})
        inner = doc.create_element("code")
        doc.append_child(inner, doc.create_text(text))
        doc.append_child(link, inner)
        doc.replace_with(code, [link])
