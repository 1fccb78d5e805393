"""Helpers for the renderer input and output around the passes."""

from __future__ import annotations

import re

from ..dom import Document
from ..dom.query import select_first, tag

# docdown wraps its HTML hints in comments so they stay invisible on GitHub
HINT_COMMENT_PATTERN = re.compile(r"(<)!--\s*|\s*--(>)")


def uncomment_hints(markdown: str) -> str:
    """Strip comment delimiters around embedded HTML hints.

    `<!-- <div class="x"> -->` becomes `<div class="x">`.
    """
    return HINT_COMMENT_PATTERN.sub(r"\1\2", markdown)


def extract_version(doc: Document) -> str | None:
    """Detach the first `h1` and return the version from its first `span`.

    The span holds a marker like `v4.17.4`; the leading character is dropped.

    Returns:
        The version string, or None when no header/marker is present
    """
    header = select_first(doc, tag("h1"))
    if header is None:
        return None
    doc.detach(header)

    span = select_first(doc, tag("span"), root=header)
    if span is None:
        return None
    return doc.text_content(span).strip()[1:] or None
