"""Configuration constants for docpolish."""

import os
from pathlib import Path

# Output directory for built documentation pages
# Override via DOCPOLISH_DOCS_DIR environment variable
DOCS_DIR = Path(os.getenv("DOCPOLISH_DOCS_DIR", "doc"))

# marky-markdown prefixes every generated heading/anchor id with this
RENDERER_ID_PREFIX = "user-content-"

# Element class wrapping docdown API entries
DOC_CONTAINER_CLASS = "doc-container"

# Syntax highlighting
HIGHLIGHT_CONTAINER_CLASS = "highlight"
HIGHLIGHT_MARKERS = ("source", "text")
COLLAPSIBLE_MARKERS = ("comment", "string")

# Class tokens kept per highlighted language, everything else is dropped
HIGHLIGHTS: dict[str, tuple[str, ...]] = {
    "html": ("string",),
    "js": (
        "comment",
        "console",
        "delimiter",
        "method",
        "modifier",
        "name",
        "numeric",
        "string",
        "support",
        "type",
    ),
}

# Anchor id rename ("_" -> "lodash")
RENAMED_ID = "_"
RENAMED_TO = "lodash"

# Front matter
FRONT_MATTER_ID = "docs"
FRONT_MATTER_LAYOUT = "docs"
FRONT_MATTER_TITLE = "Lodash Documentation"

# Liquid raw block markers
RAW_OPEN = "{% raw %}"
RAW_CLOSE = "{% endraw %}"
