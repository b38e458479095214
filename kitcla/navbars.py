"""A horizontal navigation bar."""

from __future__ import annotations

from dataclasses import dataclass, field

from .aria import Role
from .component import Component
from .markup import Element


@dataclass
class NavbarItem:
    label: str = ""
    selected: bool = False
    link: str = ""


@dataclass
class NavbarMod:
    items: list[NavbarItem] = field(default_factory=list)


@dataclass
class Navbar:
    """Navigation entries, as links when they have a target."""

    component: Component = field(default_factory=Component)

    def h(self, mod: NavbarMod) -> Element:
        return self.component.cas(
            "nav",
            {"class": "flex flex-row space-x-4", "role": Role.NAVIGATION},
            *(self._item(item) for item in mod.items),
        )

    def _item(self, item: NavbarItem) -> Element:
        css = "hover:text-gray-500 rounded px-2 py-1 cursor-pointer"
        if item.selected:
            css += " bg-gray-200"
        if item.link:
            return self.component.cav("a", {"href": item.link, "class": css}, item.label)
        return self.component.dcv(css, item.label)