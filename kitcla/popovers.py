"""A button that toggles a floating panel."""

from __future__ import annotations

from dataclasses import dataclass, field

from .buttons import ButtonAlp
from .component import Component
from .markup import Element, Node

_TOGGLE = "open = !open"


@dataclass
class PopoverMod:
    button: Node | None = None
    content: Node | None = None
    width: str = ""


@dataclass
class Popover:
    """A panel shown next to its button while open."""

    button_alp: ButtonAlp = field(default_factory=ButtonAlp)
    component: Component = field(default_factory=Component)

    def popover(self, button: Node | None, content: Node | None) -> Element:
        # The given button is not rendered; only the content is used.
        return self.h(PopoverMod(content=content))

    def text_popover(self, text: str, content: Node | None) -> Element:
        return self.h(PopoverMod(content=content, button=self.button_alp.secondary_link(text, _TOGGLE)))

    def icon_popover(self, icon: str, content: Node | None) -> Element:
        return self.h(PopoverMod(content=content, button=self.button_alp.secondary_icon_link(icon, _TOGGLE)))

    def icon_popover_with_fixed_width(self, icon: str, content: Node | None, width: str) -> Element:
        return self.h(
            PopoverMod(
                content=content,
                button=self.button_alp.secondary_icon_link(icon, _TOGGLE),
                width=width,
            )
        )

    def ghostly_icon_popover(self, icon: str, content: Node | None) -> Element:
        return self.h(
            PopoverMod(content=content, button=self.button_alp.quaternary_icon_link(icon, _TOGGLE))
        )

    def h(self, mod: PopoverMod) -> Element:
        return self.component.das(
            {"x-data": "{ open: false }", "class": "relative"},
            mod.button,
            self._outer(mod),
        )

    def _outer(self, mod: PopoverMod) -> Element:
        return self.component.das(
            {
                "x-show": "open",
                "@click.away": "open = false",
                "x-transition:enter": "transition ease-out duration-200",
                "x-transition:enter-start": "opacity-0 transform scale-95",
                "x-transition:enter-end": "opacity-100 transform scale-100",
                "x-transition:leave": "transition ease-in duration-150",
                "x-transition:leave-start": "opacity-100 transform scale-100",
                "x-transition:leave-end": "opacity-0 transform scale-95",
                "class": "absolute top-0 right-0 mt-8 bg-white border border-gray-200 rounded-lg shadow-lg z-10",
            },
            self._inner(mod),
        )

    def _inner(self, mod: PopoverMod) -> Element:
        attributes = {"class": "p-4"}
        if mod.width:
            attributes["style"] = f"width: {mod.width}px;"
        return self.component.das(attributes, mod.content)