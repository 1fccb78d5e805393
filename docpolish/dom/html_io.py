"""Parse rendered HTML into a `Document` and serialize it back.

Built on the standard library parser so the passes do not need a full DOM
dependency. Comments and declarations are kept as leaves. Parsing is
forgiving: stray end tags are ignored and unclosed elements are closed at the
end of input.
"""

from __future__ import annotations

from html import escape
from html.parser import HTMLParser

from .tree import Document

# HTML void elements (no end tag in normal HTML)
VOID_TAGS = {
    "area",
    "base",
    "br",
    "col",
    "embed",
    "hr",
    "img",
    "input",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
}

# Elements whose text content is emitted without escaping
RAW_TEXT_TAGS = {"script", "style"}


def parse_html(html: str) -> Document:
    """Parse an HTML fragment into a new `Document`."""
    parser = _TreeBuilder()
    parser.feed(html)
    parser.close()
    return parser.doc


def to_html(doc: Document, node: int | None = None) -> str:
    """Serialize the children of `node` (default: the root) as HTML."""
    start = doc.root if node is None else node
    out: list[str] = []
    for child in doc.children(start):
        _serialize(doc, child, out)
    return "".join(out)


def outer_html(doc: Document, node: int) -> str:
    """Serialize `node` itself, including its own tags."""
    out: list[str] = []
    _serialize(doc, node, out)
    return "".join(out)


def _serialize(doc: Document, node: int, out: list[str]) -> None:
    if doc.kind(node) == "comment":
        out.append(f"<!--{doc.data(node)}-->")
        return
    if doc.kind(node) == "decl":
        out.append(f"<!{doc.data(node)}>")
        return
    if doc.is_text(node):
        parent = doc.parent(node)
        if parent is not None and doc.tag(parent) in RAW_TEXT_TAGS:
            out.append(doc.data(node))
        else:
            out.append(escape(doc.data(node), quote=False))
        return

    tag = doc.tag(node)
    attrs_rendered = "".join(
        f' {name}="{escape(value, quote=True)}"' for name, value in doc.attrs(node).items()
    )
    out.append(f"<{tag}{attrs_rendered}>")
    if tag in VOID_TAGS:
        return
    for child in doc.children(node):
        _serialize(doc, child, out)
    out.append(f"</{tag}>")


class _TreeBuilder(HTMLParser):
    """Streaming parser that appends nodes to a `Document` as tags arrive."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.doc = Document()
        self._stack: list[int] = [self.doc.root]

    def _open(self, tag: str, attrs: list[tuple[str, str | None]]) -> int:
        element = self.doc.create_element(
            tag, {k.lower(): (v if v is not None else "") for k, v in attrs}
        )
        self.doc.append_child(self._stack[-1], element)
        return element

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        element = self._open(tag, attrs)
        if tag.lower() not in VOID_TAGS:
            self._stack.append(element)

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self._open(tag, attrs)

    def handle_endtag(self, tag: str) -> None:
        tag_l = tag.lower()
        if tag_l in VOID_TAGS:
            return
        # Close up to the nearest matching open element; ignore stray end tags.
        for depth in range(len(self._stack) - 1, 0, -1):
            if self.doc.tag(self._stack[depth]) == tag_l:
                del self._stack[depth:]
                return

    def handle_data(self, data: str) -> None:
        if data:
            # Entity conversion can split data across several callbacks.
            self.doc.append_text(self._stack[-1], data)

    def handle_comment(self, data: str) -> None:
        self.doc.append_child(self._stack[-1], self.doc.create_comment(data))

    def handle_decl(self, decl: str) -> None:
        self.doc.append_child(self._stack[-1], self.doc.create_decl(decl))
