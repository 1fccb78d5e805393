"""Page rendering around the rewrite passes."""

from .front_matter import FrontMatter, render_output
from .source import extract_version, uncomment_hints

__all__ = [
    "FrontMatter",
    "render_output",
    "extract_version",
    "uncomment_hints",
]
