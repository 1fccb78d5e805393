"""Index-addressed document tree.

Nodes live in a flat arena owned by a `Document` and are addressed by integer
handles. Parent links are plain handles, so detaching a subtree only makes its
handles unreachable from the root; nothing else has to be cleaned up.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

ROOT_TAG = "#root"


@dataclass
class _Node:
    tag: str | None  # None for leaves
    text: str = ""
    kind: str = "element"  # element, text, comment or decl
    attrs: dict[str, str] = field(default_factory=dict)
    children: list[int] = field(default_factory=list)
    parent: int | None = None


class Document:
    """A mutable element/text tree with a synthetic root element."""

    def __init__(self) -> None:
        self._nodes: list[_Node] = []
        self.root = self.create_element(ROOT_TAG)

    # -- creation ---------------------------------------------------------

    def create_element(self, tag: str, attrs: dict[str, str] | None = None) -> int:
        self._nodes.append(_Node(tag=tag.lower(), attrs=dict(attrs or {})))
        return len(self._nodes) - 1

    def create_text(self, text: str) -> int:
        self._nodes.append(_Node(tag=None, text=text, kind="text"))
        return len(self._nodes) - 1

    def create_comment(self, text: str) -> int:
        self._nodes.append(_Node(tag=None, text=text, kind="comment"))
        return len(self._nodes) - 1

    def create_decl(self, text: str) -> int:
        """Create a markup declaration leaf such as `DOCTYPE html`."""
        self._nodes.append(_Node(tag=None, text=text, kind="decl"))
        return len(self._nodes) - 1

    def _get(self, node: int) -> _Node:
        if not 0 <= node < len(self._nodes):
            raise ValueError(f"Unknown node handle: {node}")
        return self._nodes[node]

    # -- inspection -------------------------------------------------------

    def is_element(self, node: int) -> bool:
        return self._get(node).tag is not None

    def is_text(self, node: int) -> bool:
        return self._get(node).kind == "text"

    def kind(self, node: int) -> str:
        return self._get(node).kind

    def tag(self, node: int) -> str | None:
        return self._get(node).tag

    def data(self, node: int) -> str:
        """Return the raw text of a leaf (empty for elements)."""
        return self._get(node).text

    def attrs(self, node: int) -> dict[str, str]:
        return dict(self._get(node).attrs)

    def get_attr(self, node: int, name: str) -> str | None:
        return self._get(node).attrs.get(name)

    def has_attr(self, node: int, name: str) -> bool:
        return name in self._get(node).attrs

    def classes(self, node: int) -> list[str]:
        """Return the whitespace-separated class tokens, first occurrence wins."""
        tokens: list[str] = []
        for token in (self.get_attr(node, "class") or "").split():
            if token not in tokens:
                tokens.append(token)
        return tokens

    def has_class(self, node: int, token: str) -> bool:
        return token in self.classes(node)

    def parent(self, node: int) -> int | None:
        return self._get(node).parent

    def children(self, node: int) -> list[int]:
        return list(self._get(node).children)

    def element_children(self, node: int) -> list[int]:
        return [c for c in self._get(node).children if self.is_element(c)]

    def index(self, node: int) -> int:
        parent = self.parent(node)
        if parent is None:
            return -1
        return self._nodes[parent].children.index(node)

    def previous_sibling(self, node: int) -> int | None:
        parent = self.parent(node)
        if parent is None:
            return None
        i = self.index(node)
        return self._nodes[parent].children[i - 1] if i > 0 else None

    def next_sibling(self, node: int) -> int | None:
        parent = self.parent(node)
        if parent is None:
            return None
        siblings = self._nodes[parent].children
        i = siblings.index(node)
        return siblings[i + 1] if i + 1 < len(siblings) else None

    def previous_element_sibling(self, node: int) -> int | None:
        sibling = self.previous_sibling(node)
        while sibling is not None and not self.is_element(sibling):
            sibling = self.previous_sibling(sibling)
        return sibling

    def next_element_sibling(self, node: int) -> int | None:
        sibling = self.next_sibling(node)
        while sibling is not None and not self.is_element(sibling):
            sibling = self.next_sibling(sibling)
        return sibling

    def ancestors(self, node: int) -> Iterator[int]:
        parent = self.parent(node)
        while parent is not None:
            yield parent
            parent = self.parent(parent)

    def is_attached(self, node: int) -> bool:
        """Return True when `node` is reachable from the root."""
        return node == self.root or self.root in self.ancestors(node)

    def iter_descendants(self, node: int) -> Iterator[int]:
        """Yield all descendants of `node` depth-first, in document order."""
        stack = list(reversed(self._get(node).children))
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(self._nodes[current].children))

    def text_content(self, node: int) -> str:
        n = self._get(node)
        if n.tag is None:
            return n.text if n.kind == "text" else ""
        return "".join(self._nodes[d].text for d in self.iter_descendants(node) if self.is_text(d))

    # -- mutation ---------------------------------------------------------

    def set_attr(self, node: int, name: str, value: str | None) -> None:
        """Set an attribute; `None` removes it."""
        attrs = self._get(node).attrs
        if value is None:
            attrs.pop(name, None)
        else:
            attrs[name] = value

    def set_classes(self, node: int, tokens: Iterable[str]) -> None:
        tokens = list(tokens)
        self.set_attr(node, "class", " ".join(tokens) if tokens else None)

    def add_class(self, node: int, token: str) -> None:
        tokens = self.classes(node)
        if token not in tokens:
            tokens.append(token)
        self.set_classes(node, tokens)

    def detach(self, node: int) -> None:
        """Remove `node` (and its subtree) from its parent."""
        n = self._get(node)
        if n.parent is not None:
            self._nodes[n.parent].children.remove(node)
            n.parent = None

    def insert_child(self, parent: int, index: int, child: int) -> None:
        if child == parent or child in self.ancestors(parent):
            raise ValueError("Cannot insert a node into its own subtree")
        self.detach(child)
        self._get(parent).children.insert(index, child)
        self._nodes[child].parent = parent

    def append_child(self, parent: int, child: int) -> None:
        self.insert_child(parent, len(self._get(parent).children), child)

    def prepend_child(self, parent: int, child: int) -> None:
        self.insert_child(parent, 0, child)

    def append_text(self, parent: int, text: str) -> None:
        """Append `text` to `parent`, extending a trailing text leaf if there is one."""
        siblings = self._get(parent).children
        if siblings and self._nodes[siblings[-1]].kind == "text":
            self._nodes[siblings[-1]].text += text
        else:
            self.append_child(parent, self.create_text(text))

    def replace_with(self, node: int, new_nodes: Iterable[int]) -> None:
        """Replace `node` in its parent with `new_nodes`, in order."""
        parent = self.parent(node)
        if parent is None:
            raise ValueError("Cannot replace a detached node")
        new_nodes = list(new_nodes)
        for new in new_nodes:
            self.detach(new)
        i = self.index(node)
        self.detach(node)
        for offset, new in enumerate(new_nodes):
            self.insert_child(parent, i + offset, new)

    def unwrap(self, node: int) -> None:
        """Replace `node` with its own children."""
        self.replace_with(node, self.children(node))

    def set_text(self, node: int, text: str) -> None:
        """Replace all children of `node` with a single text leaf."""
        for child in self.children(node):
            self.detach(child)
        if text:
            self.append_child(node, self.create_text(text))

    def normalize(self, node: int) -> None:
        """Merge adjacent text leaves below `node` and drop empty ones."""
        for current in [node, *self.iter_descendants(node)]:
            if not self.is_element(current):
                continue
            merged: list[int] = []
            for child in self._nodes[current].children:
                c = self._nodes[child]
                if c.kind == "text":
                    if not c.text:
                        c.parent = None
                        continue
                    if merged and self._nodes[merged[-1]].kind == "text":
                        self._nodes[merged[-1]].text += c.text
                        c.parent = None
                        continue
                merged.append(child)
            self._nodes[current].children = merged
