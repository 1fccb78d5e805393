"""YAML front matter and raw-block wrapping for the published page."""

from __future__ import annotations

from pydantic import BaseModel

from ..config import (
    FRONT_MATTER_ID,
    FRONT_MATTER_LAYOUT,
    FRONT_MATTER_TITLE,
    RAW_CLOSE,
    RAW_OPEN,
)
from ..dom import Document, to_html


class FrontMatter(BaseModel):
    """Fixed-key metadata block consumed by the static site generator."""

    id: str = FRONT_MATTER_ID
    layout: str = FRONT_MATTER_LAYOUT
    title: str = FRONT_MATTER_TITLE
    version: str | None = None

    def lines(self) -> list[str]:
        # A missing version is written as the literal `null`.
        return [
            "---",
            f"id: {self.id}",
            f"layout: {self.layout}",
            f"title: {self.title}",
            f"version: {self.version or 'null'}",
            "---",
        ]


def render_output(doc: Document, version: str | None) -> str:
    """Render front matter plus the serialized tree wrapped in raw tags."""
    return "\n".join(
        [
            *FrontMatter(version=version).lines(),
            "",
            # Keep Liquid from interpreting `{{ }}` in code samples.
            RAW_OPEN,
            to_html(doc).strip(),
            RAW_CLOSE,
            "",
        ]
    )
