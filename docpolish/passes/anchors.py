"""Rename the `_` anchor to `lodash`."""

from __future__ import annotations

from ..config import RENAMED_ID, RENAMED_TO
from ..dom import Document
from ..dom.query import attr_equals, select


def rename_anchor(doc: Document, old: str = RENAMED_ID, new: str = RENAMED_TO) -> None:
    """Move elements with id `old` to `new` and retarget `#old` links."""
    for target in select(doc, attr_equals("id", old)):
        doc.set_attr(target, "id", new)

    for link in select(doc, attr_equals("href", f"#{old}")):
        doc.set_attr(link, "href", f"#{new}")
