"""A row of buttons where one is marked as selected."""

from __future__ import annotations

from dataclasses import dataclass, field

from .component import Component
from .markup import Element

_BUTTON_CSS = (
    "py-3 px-4 inline-flex items-center gap-x-2 "
    "-ms-px first:rounded-s-lg first:ms-0 last:rounded-e-lg text-sm font-medium focus:z-10 "
    "border border-gray-200 text-gray-800 shadow-sm hover:bg-gray-50 focus:outline-none "
    "focus:bg-gray-50 disabled:opacity-50 disabled:pointer-events-none"
)


@dataclass
class GroupButton:
    key: str
    label: str
    on_click: str


@dataclass
class ButtonsGroupAlpMod:
    selected_key: str = ""
    buttons: list[GroupButton] = field(default_factory=list)

    def add_button(self, key: str, label: str, on_click: str) -> None:
        self.buttons.append(GroupButton(key=key, label=label, on_click=on_click))


@dataclass
class ButtonsGroupAlp:
    """Buttons that track the selected key in Alpine.js state."""

    component: Component = field(default_factory=Component)

    def mod(self, selected_key: str) -> ButtonsGroupAlpMod:
        return ButtonsGroupAlpMod(selected_key=selected_key)

    def h(self, mod: ButtonsGroupAlpMod) -> Element:
        return self.component.das(
            {
                "class": "inline-flex rounded-lg",
                "x-data": "{selectedKey: '" + mod.selected_key + "'}",
            },
            *(self._button(button) for button in mod.buttons),
        )

    def _button(self, button: GroupButton) -> Element:
        bind_class = "selectedKey == '" + button.key + "' ? 'bg-gray-50' : 'bg-white'"
        return self.component.cav(
            "button",
            {
                "@click": "selectedKey = '" + button.key + "' ;" + button.on_click,
                "class": _BUTTON_CSS,
                ":class": bind_class,
            },
            button.label,
        )