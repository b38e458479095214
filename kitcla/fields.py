"""Labelled form fields."""

from __future__ import annotations

from dataclasses import dataclass, field

from .component import Component
from .markup import Element, Node


@dataclass
class FieldMod:
    label: str = ""
    input: Node | None = None
    hidden: bool = False


@dataclass
class Field:
    """A form input with a bold label above it."""

    component: Component = field(default_factory=Component)

    def field(self, label: str, input: Node | None) -> Node | None:
        return self.h(FieldMod(label=label, input=input))

    def hidden_field(self, label: str, input: Node | None) -> Node | None:
        return self.h(FieldMod(label=label, input=input, hidden=True))

    def h(self, mod: FieldMod) -> Node | None:
        if mod.hidden:
            return mod.input
        return self.component.ccs("div", "flex flex-col", self._label(mod.label), mod.input)

    def _label(self, label: str) -> Element:
        return self.component.ccv("label", "font-bold", label)