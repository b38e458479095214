"""Flash messages coloured by their kind."""

from __future__ import annotations

from dataclasses import dataclass, field

from .component import Component
from .markup import Element

_KIND_CSS = {
    "success": "text-green-700 bg-green-100 border-green-500",
    "warning": "text-yellow-700 bg-yellow-100 border-yellow-500",
    "failure": "text-red-700 bg-red-100 border-red-500",
}


@dataclass
class FlashMessage:
    """A message to show the user: its kind and its title."""

    kind: str = ""
    title: str = ""


@dataclass
class MessageMod:
    message: FlashMessage


@dataclass
class Message:
    """A bordered box showing a flash message."""

    component: Component = field(default_factory=Component)

    def message(self, message: FlashMessage) -> Element:
        return self.h(MessageMod(message=message))

    def h(self, mod: MessageMod) -> Element:
        css = _KIND_CSS.get(mod.message.kind, "")
        return self.component.ccs(
            "div", "flex flex-col font-bold py-4 px-5 border " + css, self._title(mod)
        )

    def _title(self, mod: MessageMod) -> Element:
        return self.component.ccv("div", "text-bold", mod.message.title)