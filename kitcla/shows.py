"""Read-only displays of text values."""

from __future__ import annotations

from dataclasses import dataclass, field

from .component import Component
from .markup import Element, Raw


@dataclass
class TextShowMod:
    name: str = ""
    value: str = ""


@dataclass
class TextShow:
    """Shows plain text, escaped."""

    component: Component = field(default_factory=Component)

    def text_show(self, name: str, value: str) -> Element:
        return self.h(TextShowMod(name=name, value=value))

    def h(self, mod: TextShowMod) -> Element:
        return self.component.cv("div", mod.value)


@dataclass
class RichTextShowMod:
    name: str = ""
    value: str = ""


@dataclass
class RichTextShow:
    """Shows HTML as is; the value must already be sanitized."""

    component: Component = field(default_factory=Component)

    def rich_text_show(self, name: str, value: str) -> Element:
        return self.h(RichTextShowMod(name=name, value=value))

    def h(self, mod: RichTextShowMod) -> Element:
        return self.component.h("div", Raw(mod.value))