"""Table cells that display one value each."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .component import Component
from .icons import ICON_FAS_CIRCLE_CHECK, ICON_FAS_CIRCLE_XMARK, Icon
from .markup import Element

TIME_LAYOUT_DMYHM = "%d/%m/%Y %H:%M"
TIME_LAYOUT_DMY = "%d/%m/%Y"


@dataclass
class BooleanCellMod:
    value: bool = False
    true_color: str = ""
    false_color: str = ""


@dataclass
class BooleanCell:
    """A check or a cross icon, coloured by the value."""

    component: Component = field(default_factory=Component)
    icon: Icon = field(default_factory=Icon)

    def boolean_cell(self, value: bool) -> Element:
        return self.h(BooleanCellMod(value=value, true_color="success", false_color="warning"))

    def neutral_false_boolean_cell(self, value: bool) -> Element:
        return self.h(BooleanCellMod(value=value, true_color="success", false_color="scale-6"))

    def h(self, mod: BooleanCellMod) -> Element:
        # Classes spelled out for css pruners: text-success, text-warning, text-scale-6
        if mod.value:
            color = "text-" + mod.true_color
            glyph = self.icon.icon(ICON_FAS_CIRCLE_CHECK)
        else:
            color = "text-" + mod.false_color
            glyph = self.icon.icon(ICON_FAS_CIRCLE_XMARK)
        return self.component.ccs("div", "h-full flex items-center", self.component.w(color, glyph))


@dataclass
class DecimalCellMod:
    value: float = 0.0
    precision: int = 0


@dataclass
class DecimalCell:
    component: Component = field(default_factory=Component)

    def decimal_cell(self, value: float) -> Element:
        return self.h(DecimalCellMod(value=value, precision=2))

    def h(self, mod: DecimalCellMod) -> Element:
        return self.component.cv("span", f"{mod.value:.{mod.precision}f}")


@dataclass
class IntegerCellMod:
    value: int = 0


@dataclass
class IntegerCell:
    component: Component = field(default_factory=Component)

    def integer_cell(self, value: int) -> Element:
        return self.h(IntegerCellMod(value=value))

    def h(self, mod: IntegerCellMod) -> Element:
        return self.component.cv("span", str(mod.value))


def _open_text_link(component: Component, text: str) -> Element:
    # onclick rather than @click: the cell may sit outside any Alpine scope
    return component.cav(
        "a",
        {
            "class": "underline cursor-pointer",
            "data-text": text,
            "onclick": "showTextIntoModal(this)",
        },
        "Open text",
    )


@dataclass
class JsonCellMod:
    value: bytes | str = b""


@dataclass
class JsonCell:
    component: Component = field(default_factory=Component)

    def json_cell(self, value: bytes | str) -> Element:
        return self.h(JsonCellMod(value=value))

    def h(self, mod: JsonCellMod) -> Element:
        value = mod.value
        if isinstance(value, (bytes, bytearray)):
            value = value.decode("utf-8", errors="replace")
        return _open_text_link(self.component, value)


@dataclass
class LongTextCellMod:
    value: str = ""


@dataclass
class LongTextCell:
    component: Component = field(default_factory=Component)

    def long_text_cell(self, value: str) -> Element:
        return self.h(LongTextCellMod(value=value))

    def h(self, mod: LongTextCellMod) -> Element:
        return self.component.cav(
            "a", {"class": "underline", "@click": "showTextIntoModal"}, "Open text"
        )


@dataclass
class PillCellMod:
    value: str = ""
    color: str = ""


@dataclass
class PillCell:
    component: Component = field(default_factory=Component)

    def pill_cell(self, value: str) -> Element | None:
        return self.h(PillCellMod(value=value))

    def h(self, mod: PillCellMod) -> Element | None:
        if not mod.value:
            return None
        return self.component.ccv("span", "py-1 px-3 bg-gray-100 rounded-full", mod.value)


@dataclass
class RelationCellMod:
    value: str = ""
    text: str = ""
    url: str = ""


@dataclass
class RelationCell:
    component: Component = field(default_factory=Component)

    def relation_cell(self, value: str, text: str, url: str) -> Element:
        return self.h(RelationCellMod(value=value, text=text, url=url))

    def h(self, mod: RelationCellMod) -> Element:
        return self.component.cav("a", {"href": mod.url}, mod.text)


@dataclass
class RichTextCellMod:
    value: str = ""


@dataclass
class RichTextCell:
    component: Component = field(default_factory=Component)

    def rich_text_cell(self, value: str) -> Element:
        return self.h(RichTextCellMod(value=value))

    def h(self, mod: RichTextCellMod) -> Element:
        return _open_text_link(self.component, mod.value)


@dataclass
class TextCellMod:
    value: str = ""


@dataclass
class TextCell:
    component: Component = field(default_factory=Component)

    def text_cell(self, value: str) -> Element:
        return self.h(TextCellMod(value=value))

    def h(self, mod: TextCellMod) -> Element:
        return self.component.cv("span", mod.value)


@dataclass
class TimeCellMod:
    value: datetime
    format: str = TIME_LAYOUT_DMYHM


@dataclass
class TimeCell:
    """A date and time in a strftime layout."""

    component: Component = field(default_factory=Component)

    def day_month_year(self, value: datetime) -> Element:
        return self.h(TimeCellMod(value=value, format=TIME_LAYOUT_DMY))

    def time_cell_formatted(self, value: datetime, format: str) -> Element:
        return self.h(TimeCellMod(value=value, format=format))

    def time_cell(self, value: datetime) -> Element:
        return self.h(TimeCellMod(value=value, format=TIME_LAYOUT_DMYHM))

    def h(self, mod: TimeCellMod) -> Element:
        return self.component.cv("span", mod.value.strftime(mod.format))