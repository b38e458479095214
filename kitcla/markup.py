"""A small HTML element tree and its renderer."""

from __future__ import annotations

import html
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Union

VOID_ELEMENTS = frozenset(
    {
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
        "source",
        "track",
        "wbr",
    }
)


@dataclass(frozen=True)
class Raw:
    """Markup inserted verbatim, without escaping."""

    html: str

    def render(self) -> str:
        return self.html


@dataclass
class Element:
    """An HTML element with attributes and child nodes."""

    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)

    def render(self) -> str:
        """Render the element and its children as HTML text."""
        attrs = "".join(
            f' {name}="{html.escape(value, quote=True)}"'
            for name, value in self.attributes.items()
            if name
        )
        opening = f"<{self.tag}{attrs}>"
        if self.tag in VOID_ELEMENTS and not self.children:
            return opening
        inner = "".join(render(child) for child in self.children)
        return f"{opening}{inner}</{self.tag}>"

    def __str__(self) -> str:
        return self.render()


Node = Union[Element, Raw, str]


def _collect(items: Iterable, attributes: dict[str, str], children: list[Node]) -> None:
    for item in items:
        if item is None:
            continue
        if isinstance(item, (str, Element, Raw)):
            children.append(item)
        elif isinstance(item, Mapping):
            attributes.update({str(key): str(value) for key, value in item.items()})
        elif isinstance(item, Iterable) and not isinstance(item, (bytes, bytearray)):
            _collect(item, attributes, children)
        else:
            raise TypeError(f"cannot use {type(item).__name__} in an element")


def element(tag: str, *args) -> Element:
    """Build an element from attribute mappings, text, nodes and nested sequences.

    Mappings add attributes (later ones win), strings become escaped text,
    elements and Raw become children, sequences are flattened and None is skipped.
    """
    attributes: dict[str, str] = {}
    children: list[Node] = []
    _collect(args, attributes, children)
    return Element(tag, attributes, children)


def render(node) -> str:
    """Render a node, a sequence of nodes, or None as HTML text."""
    if node is None:
        return ""
    if isinstance(node, str):
        return html.escape(node, quote=False)
    if isinstance(node, (Element, Raw)):
        return node.render()
    if isinstance(node, Iterable):
        return "".join(render(child) for child in node)
    raise TypeError(f"cannot render {type(node).__name__}")