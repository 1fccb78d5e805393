"""Build a documentation page from rendered HTML."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

from ..config import DOCS_DIR
from ..dom import parse_html
from ..pipeline import polish
from .source import extract_version


class BuildResult(BaseModel):
    """Result of building a documentation page."""

    model_config = {"arbitrary_types_allowed": True}

    output_path: Path | None
    version: str | None
    output: str
    warnings: list[str]


def render_docs(html: str) -> BuildResult:
    """Parse rendered HTML, pull the version header, and polish the tree."""
    doc = parse_html(html)
    version = extract_version(doc)
    result = polish(doc, version)
    return BuildResult(
        output_path=None,
        version=result.version,
        output=result.output,
        warnings=result.warnings,
    )


def build_docs(html: str, out_dir: Path = DOCS_DIR) -> BuildResult:
    """Render `html` and write it to `<out_dir>/<version>.html`.

    Args:
        html: Markdown source already rendered to HTML
        out_dir: Output directory

    Returns:
        BuildResult with the written path
    """
    result = render_docs(html)

    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / f"{result.version or 'null'}.html"
    path.write_text(result.output, encoding="utf-8")

    return result.model_copy(update={"output_path": path})
