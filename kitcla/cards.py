"""Card wrappers, headers and two-sided card bodies."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from .component import Component
from .markup import Element, Node


def _merge_css(attributes: Mapping[str, str] | None, css: str) -> dict[str, str]:
    merged = dict(attributes or {})
    existing = merged.get("class", "")
    merged["class"] = f"{existing} {css}" if existing else css
    return merged


@dataclass
class Side:
    """One side of a two-sided card body."""

    ratio: str
    content: Node | None


@dataclass
class DuoCardBodyMod:
    left_side: Side | None = None
    right_side: Side | None = None
    body_attr: dict[str, str] | None = None


@dataclass
class DuoCardBody:
    """A card whose body is split in a left and a right side."""

    component: Component = field(default_factory=Component)

    def side(self, ratio: str, content: Node | None) -> Side:
        return Side(ratio=ratio, content=content)

    def duo_card_body(
        self, left_side: Side | None, right_side: Side | None, mod: DuoCardBodyMod | None = None
    ) -> Element:
        if mod is None:
            mod = DuoCardBodyMod()
        mod.left_side = left_side
        mod.right_side = right_side
        return self.h(mod)

    def h(self, mod: DuoCardBodyMod) -> Element:
        if mod.left_side is None or mod.right_side is None:
            return self.component.cv("div", "Invalid params")
        return self.component.dcs(
            "flex flex-col bg-white border shadow-sm rounded-xl", self._body(mod)
        )

    def _body(self, mod: DuoCardBodyMod) -> Element:
        attributes = _merge_css(mod.body_attr, "flex flex-row divide-x")
        return self.component.das(
            attributes, self._side(mod.left_side), self._side(mod.right_side)
        )

    def _side(self, side: Side) -> Element:
        return self.component.dcs(side.ratio, side.content)


@dataclass
class CardHeaderMod:
    title: Node | None = None
    left_area: Node | None = None


@dataclass
class CardHeader:
    """Header row of a card, with a title and an optional side area."""

    component: Component = field(default_factory=Component)

    def card_header(self, title: Node | None) -> Element:
        return self.h(CardHeaderMod(title=title))

    def card_header_with_left_area(self, title: Node | None, left_area: Node | None) -> Element:
        return self.h(CardHeaderMod(title=title, left_area=left_area))

    def h(self, mod: CardHeaderMod) -> Element:
        return self.component.dcs(
            "border-b p-4 flex flex-row justify-between", mod.title, mod.left_area
        )


@dataclass
class CardWrapperMod:
    header: Node | None = None
    body: Node | None = None
    footer: Node | None = None


@dataclass
class CardWrapper:
    """Card frame holding a header, a body and a footer."""

    component: Component = field(default_factory=Component)

    def card_wrapper(self, body: Node | None) -> Element:
        return self.h(CardWrapperMod(body=body))

    def card_wrapper_with_header(self, header: Node | None, body: Node | None) -> Element:
        return self.h(CardWrapperMod(header=header, body=body))

    def h(self, mod: CardWrapperMod) -> Element:
        return self.component.dcs(
            "flex flex-col bg-white border shadow-sm rounded-xl",
            mod.header,
            mod.body,
            mod.footer,
        )