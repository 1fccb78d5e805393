"""Drop horizontal rules emitted between API entries."""

from __future__ import annotations

from ..dom import Document
from ..dom.query import select, tag


def remove_horizontal_rules(doc: Document) -> None:
    for rule in select(doc, tag("hr")):
        doc.detach(rule)
