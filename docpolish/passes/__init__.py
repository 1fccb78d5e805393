"""Tree rewrite passes applied to rendered documentation."""

from .anchors import rename_anchor
from .attributes import strip_renderer_attributes
from .autolink import auto_link
from .headers import repair_headers
from .highlights import StructuralError, tidy_highlights
from .rules import remove_horizontal_rules

__all__ = [
    "auto_link",
    "rename_anchor",
    "remove_horizontal_rules",
    "strip_renderer_attributes",
    "repair_headers",
    "tidy_highlights",
    "StructuralError",
]
