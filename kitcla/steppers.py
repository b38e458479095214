"""A horizontal list of numbered steps."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from .markup import Element, element


class TextPosition(StrEnum):
    BELOW = "below"
    ASIDE = "aside"


@dataclass
class Step:
    label: str = ""
    key: str = ""
    number: str = ""


@dataclass
class StepperMod:
    steps: list[Step] = field(default_factory=list)
    text_position: str = ""
    width: str = ""

    def add_numbered_step(self, key: str, label: str, number: str) -> None:
        self.steps.append(Step(label=label, key=key, number=number))


@dataclass
class Stepper:
    """Steps joined by bars, each with a label underneath."""

    def static(self, mod: StepperMod) -> Element:
        return element("ul", {"class": "relative flex flex-row gap-x-2 " + mod.width}, *self._items(mod))

    def mod(self) -> StepperMod:
        return StepperMod()

    def h(self, mod: StepperMod) -> Element:
        return element("ul", {"class": "relative flex flex-row gap-x-2"}, *self._items(mod))

    def _items(self, mod: StepperMod) -> list[Element]:
        return [self._list_item(step) for step in mod.steps]

    def _list_item(self, step: Step) -> Element:
        circle = element(
            "span",
            {"class": "size-7 flex justify-center items-center shrink-0 bg-gray-100 font-medium text-gray-800 rounded-full"},
            step.number,
        )
        bar = element("div", {"class": "ms-2 w-full h-px flex-1 bg-gray-200 group-last:hidden"})
        content = element(
            "div",
            {"class": "min-w-7 min-h-7 w-full inline-flex items-center text-xs align-middle"},
            circle,
            bar,
        )
        label = element(
            "div",
            {"class": "mt-3"},
            element("span", {"class": "block text-sm font-medium text-gray-800"}, step.label),
        )
        return element("li", {"class": "shrink basis-0 flex-1 group"}, content, label)