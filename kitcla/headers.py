"""Page and section headings."""

from __future__ import annotations

from dataclasses import dataclass, field

from .aria import Property, Role
from .component import Component
from .markup import Element

_LEVEL_CSS = {
    1: "text-xl font-semibold text-gray-800",
    2: "text-lg font-semibold text-gray-800",
    3: "text-base font-semibold text-gray-800",
}


@dataclass
class HeaderMod:
    label: str = ""
    level: int = 1


@dataclass
class Header:
    """Heading elements of levels 1 to 3."""

    component: Component = field(default_factory=Component)

    def h1(self, label: str) -> Element:
        return self.h(HeaderMod(label=label, level=1))

    def h2(self, label: str) -> Element:
        return self.h(HeaderMod(label=label, level=2))

    def _css(self, mod: HeaderMod) -> str:
        try:
            return _LEVEL_CSS[mod.level]
        except KeyError:
            raise ValueError(f"Unknown header level: {mod.level}") from None

    def h(self, mod: HeaderMod) -> Element:
        css = self._css(mod)
        return self.component.cav(
            f"h{mod.level}",
            {"class": css, "role": Role.HEADING, Property.LEVEL: str(mod.level)},
            mod.label,
        )