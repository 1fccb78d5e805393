"""Document tree, queries, and HTML parsing/serialization."""

from .html_io import outer_html, parse_html, to_html
from .tree import Document

__all__ = [
    "Document",
    "parse_html",
    "to_html",
    "outer_html",
]
