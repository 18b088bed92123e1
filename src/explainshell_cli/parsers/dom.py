# parsers/dom.py

"""Minimal markup tree used by the extractor.

The extractor only needs ordered children, attribute lookup and text
flattening, so parsed documents are converted once into plain ``Node``
objects and walked from there.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

HTML_FEATURES = "lxml"


@dataclass
class Node:
    tag: str | None  # None for text nodes
    attrs: dict[str, str] = field(default_factory=dict)
    children: list["Node"] = field(default_factory=list)
    text: str = ""

    @property
    def is_text(self) -> bool:
        return self.tag is None

    def get(self, name: str) -> str | None:
        return self.attrs.get(name)

    def has_class(self, name: str) -> bool:
        return name in self.attrs.get("class", "").split()

    def text_content(self) -> str:
        if self.is_text:
            return self.text
        return "".join(child.text_content() for child in self.children)

    def element_children(self) -> list["Node"]:
        return [child for child in self.children if not child.is_text]

    def iter_descendants(self) -> Iterator["Node"]:
        """Yield descendant elements in document order (pre-order)."""
        for child in self.children:
            if child.is_text:
                continue
            yield child
            yield from child.iter_descendants()

    def find_all(self, predicate: Callable[["Node"], bool]) -> list["Node"]:
        return [node for node in self.iter_descendants() if predicate(node)]

    def find(self, predicate: Callable[["Node"], bool]) -> "Node | None":
        for node in self.iter_descendants():
            if predicate(node):
                return node
        return None


def parse_html(markup: str) -> Node:
    """Parse markup into a ``Node`` tree rooted at a synthetic document node."""
    soup = BeautifulSoup(markup, HTML_FEATURES)
    return Node(tag="#document", children=_convert_children(soup))


def _convert_children(tag: Tag) -> list[Node]:
    nodes: list[Node] = []
    for child in tag.children:
        if isinstance(child, Tag):
            nodes.append(
                Node(
                    tag=child.name,
                    attrs=_convert_attrs(child),
                    children=_convert_children(child),
                )
            )
        elif isinstance(child, NavigableString) and not isinstance(
            child, PreformattedString
        ):
            # Comments, doctypes and processing instructions carry no text
            nodes.append(Node(tag=None, text=str(child)))
    return nodes


def _convert_attrs(tag: Tag) -> dict[str, str]:
    attrs: dict[str, str] = {}
    for name, value in tag.attrs.items():
        # Multi-valued attributes such as class come back as lists
        if isinstance(value, (list, tuple)):
            attrs[name] = " ".join(value)
        else:
            attrs[name] = str(value)
    return attrs
