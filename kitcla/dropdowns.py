"""A toggleable menu attached to a button."""

from __future__ import annotations

from dataclasses import dataclass, field

from .aria import Property, Role
from .component import Component
from .icons import ICON_FAS_ELLIPSIS_VERTICAL, Icon
from .markup import Element, Node


@dataclass
class DropdownMod:
    button: Node | None = None
    items: list[Node] = field(default_factory=list)


@dataclass
class Dropdown:
    """A button that opens a menu of items."""

    icon: Icon = field(default_factory=Icon)
    component: Component = field(default_factory=Component)

    def dropdown(self, button: Node | None, items: list[Node]) -> Element:
        return self.h(DropdownMod(button=button, items=list(items)))

    def ellipsis_dropdown(self, items: list[Node]) -> Element:
        button = self.component.ccs(
            "div",
            "hover:text-scale-10 inline-flex h-6 w-6 items-center justify-center border "
            "border-scale-5 rounded-full cursor-pointer text-scale-7",
            self.icon.icon(ICON_FAS_ELLIPSIS_VERTICAL),
        )
        return self.h(DropdownMod(button=button, items=list(items)))

    def h(self, mod: DropdownMod) -> Element:
        return self.component.cas(
            "div",
            {
                "class": "flex relative w-8 h-8",
                "x-data": "{open:false}",
                "@click.away": "open = false",
            },
            self._button_container(mod),
            self._menu_container(mod),
        )

    def _button_container(self, mod: DropdownMod) -> Element:
        return self.component.cas(
            "div",
            {
                "class": "w-8 h-8 flex items-center justify-center",
                "@click": "open = !open",
                "role": Role.BUTTON,
                Property.HASPOPUP: "menu",
                Property.EXPANDED: "false",
                "x-bind:aria-expanded": "open",
            },
            mod.button,
        )

    def _menu_container(self, mod: DropdownMod) -> Element:
        return self.component.cas(
            "div",
            {
                "class": "absolute z-30 mt-8 px-2 -left-48 -top-8 w-48",
                "x-show": "open",
                "@click": "open = !open",
            },
            self._menu(mod),
        )

    def _menu_item(self, item: Node) -> Element:
        return self.component.cas(
            "div",
            {"class": "bg-scale-0 py-2 px-3 space-y-2 hover:bg-scale-2", "role": Role.MENUITEM},
            item,
        )

    def _menu(self, mod: DropdownMod) -> Element:
        return self.component.cas(
            "div",
            {
                "class": "rounded-lg shadow-lg ring-1 ring-black ring-opacity-5 overflow-hidden",
                "role": Role.MENU,
            },
            *(self._menu_item(item) for item in mod.items),
        )