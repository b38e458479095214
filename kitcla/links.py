"""Text links, icon links and submit links."""

from __future__ import annotations

from dataclasses import dataclass, field

from .component import Component
from .icons import Icon
from .markup import Element


@dataclass
class LinkMod:
    label: str = ""
    url: str = ""
    icon: str = ""
    hover_css: str = ""
    submit: bool = False


@dataclass
class Link:
    """An anchor, an icon anchor, or a submit button styled as a link."""

    icon: Icon = field(default_factory=Icon)
    component: Component = field(default_factory=Component)

    def link(self, label: str, url: str) -> Element:
        return self.h(LinkMod(label=label, url=url))

    def submit_link(self, label: str) -> Element:
        return self.h(LinkMod(label=label, submit=True))

    def icon_link(self, icon: str, url: str) -> Element:
        return self.h(LinkMod(icon=icon, url=url))

    def h(self, mod: LinkMod) -> Element:
        css = mod.hover_css
        if mod.icon and not mod.label:
            return self.component.cas(
                "a", {"href": mod.url, "class": css}, self.icon.icon(mod.icon)
            )
        if mod.submit:
            return self.component.cav("button", {"type": "submit", "class": css}, mod.label)
        return self.component.cav("a", {"href": mod.url, "class": css}, mod.label)