"""Script and stylesheet includes."""

from __future__ import annotations

from dataclasses import dataclass, field

from .component import Component
from .markup import Element


@dataclass
class ResourceMod:
    js: str = ""
    css: str = ""


@dataclass
class Resource:
    """A div holding a script tag and a stylesheet link."""

    component: Component = field(default_factory=Component)

    def resource_js_css(self, js: str, css: str) -> Element:
        return self.h(ResourceMod(js=js, css=css))

    def h(self, mod: ResourceMod) -> Element:
        deps: list[Element] = []
        # Both includes are emitted only when a script is given.
        if mod.js:
            deps.append(
                self.component.ca("script", {"type": "text/javascript", "src": mod.js})
            )
            deps.append(
                self.component.ca(
                    "link", {"rel": "stylesheet", "type": "text/css", "href": mod.css}
                )
            )
        return self.component.cs("div", *deps)