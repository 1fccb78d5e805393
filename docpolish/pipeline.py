"""Apply the documentation rewrite passes in order."""

from __future__ import annotations

from collections.abc import Callable

from pydantic import BaseModel

from .dom import Document
from .passes import (
    auto_link,
    remove_horizontal_rules,
    rename_anchor,
    repair_headers,
    strip_renderer_attributes,
    tidy_highlights,
)
from .site.front_matter import render_output

# Order matters: header repair needs the h3 anchors left by attribute stripping.
PASSES: tuple[Callable[[Document], None], ...] = (
    auto_link,
    rename_anchor,
    remove_horizontal_rules,
    strip_renderer_attributes,
    repair_headers,
    tidy_highlights,
)

MISSING_VERSION_WARNING = "No version marker found; front matter uses null"


class PolishResult(BaseModel):
    """Cleaned tree plus the rendered page."""

    model_config = {"arbitrary_types_allowed": True}

    document: Document
    version: str | None
    output: str
    warnings: list[str]


def run_passes(doc: Document) -> Document:
    """Run every pass over `doc` in place and return it."""
    for rewrite in PASSES:
        rewrite(doc)
    return doc


def polish(doc: Document, version: str | None) -> PolishResult:
    """Clean `doc` and render the publishable page.

    Raises:
        StructuralError: If a highlight block is missing its language marker
    """
    warnings: list[str] = []
    if not version:
        warnings.append(MISSING_VERSION_WARNING)

    run_passes(doc)

    return PolishResult(
        document=doc,
        version=version or None,
        output=render_output(doc, version),
        warnings=warnings,
    )
