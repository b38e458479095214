"""Nested bulleted lists rendered from a tree of items."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from .component import Component
from .markup import Element


@dataclass
class TreeItem:
    id: str = ""
    value: str = ""
    text: str = ""
    leaf: bool = False
    children: list[TreeItem] = field(default_factory=list)


TextRenderer = Callable[[Any, TreeItem], Any]


@dataclass
class TreeMod:
    tree_id: str = ""
    root_item: TreeItem | None = None
    text_renderer: TextRenderer | None = None


@dataclass
class Tree:
    """A tree shown as nested lists, with an optional custom text renderer."""

    component: Component = field(default_factory=Component)

    def tree(self, tree_id: str, root_item: TreeItem) -> Element:
        return self.h(TreeMod(tree_id=tree_id, root_item=root_item))

    def tree_with_text_renderer(
        self, tree_id: str, root_item: TreeItem, text_renderer: TextRenderer
    ) -> Element:
        return self.h(TreeMod(tree_id=tree_id, root_item=root_item, text_renderer=text_renderer))

    def h(self, mod: TreeMod) -> Element:
        if mod.root_item is None:
            raise ValueError("a tree needs a root item")
        return self.component.ccs("ul", "list-disc ml-4", self._item(mod, mod.root_item))

    def _item(self, mod: TreeMod, item: TreeItem) -> Element:
        if mod.text_renderer is not None:
            text = mod.text_renderer(mod, item)
        else:
            text = self.component.cv("div", item.text)
        return self.component.cs("li", text, self._children(mod, item))

    def _children(self, mod: TreeMod, item: TreeItem) -> Element | None:
        if not item.children:
            return None
        return self.component.ccs(
            "ul", "list-disc ml-4", *(self._item(mod, child) for child in item.children)
        )