"""A horizontal row of tab buttons."""

from __future__ import annotations

from dataclasses import dataclass, field

from .component import Component
from .markup import Element

_TAB_CSS = (
    "py-4 px-1 inline-flex items-center gap-x-2 border-b-2 text-sm whitespace-nowrap"
    " hover:text-blue-600 focus:outline-none focus:text-blue-600 disabled:opacity-50"
    " disabled:pointer-events-none"
)


@dataclass
class TabItem:
    text: str = ""
    value: str = ""
    active: bool = False


@dataclass
class TabMod:
    items: list[TabItem] = field(default_factory=list)


@dataclass
class Tab:
    """Tabs with the active one underlined."""

    component: Component = field(default_factory=Component)

    def tab(self, mod: TabMod | None) -> Element:
        return self.h(mod)

    def h(self, mod: TabMod | None) -> Element:
        return self.component.dcs("border-b border-gray-200", self._nav(mod))

    def _nav(self, mod: TabMod | None) -> Element | None:
        if mod is None:
            return None
        return self.component.dcs("flex space-x-1", *(self._button(item) for item in mod.items))

    def _button(self, item: TabItem) -> Element:
        if item.active:
            css = _TAB_CSS + " font-semibold border-blue-600 text-blue-600"
        else:
            css = _TAB_CSS + " border-transparent text-gray-500"
        return self.component.cav("button", {"class": css}, item.text)