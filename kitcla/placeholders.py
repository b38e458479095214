"""A stand-in component that renders fixed text."""

from __future__ import annotations

from dataclasses import dataclass, field

from .component import Component
from .markup import Element, Node


@dataclass
class PlaceholderMod:
    label: str = ""
    input: Node | None = None
    hidden: bool = False


@dataclass
class Placeholder:
    """Renders a fixed greeting whatever it is given."""

    component: Component = field(default_factory=Component)

    def placeholder(self, label: str, input: Node | None) -> Element:
        return self.h(PlaceholderMod())

    def h(self, mod: PlaceholderMod) -> Element:
        return self.component.dv("Hello world")