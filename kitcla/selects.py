"""Select-like inputs: dropdown selects, an autocomplete select, a radio grid and radio groups."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from .aria import Role
from .component import Component
from .markup import Element

_SELECT_CSS = "border border-scale-3 px-3 py-2 bg-scale-0 rounded-md"
_SELECT_STYLE = "height:42px;"


@dataclass
class Filter:
    """A key/value pair passed to the autocomplete endpoint."""

    key: str
    value: str


@dataclass
class AdvancedSelectInputMod:
    name: str = ""
    value: str = ""
    autocomplete_key: str = ""
    filters: list[Filter] = field(default_factory=list)

    def add_filter(self, key: str, value: str) -> None:
        self.filters.append(Filter(key=key, value=value))


@dataclass
class AdvancedSelectInput:
    """A filterable select whose options are fetched by Alpine.js."""

    component: Component = field(default_factory=Component)

    def mod(self) -> AdvancedSelectInputMod:
        return AdvancedSelectInputMod()

    def advanced_select_input(self, name: str, value: str, key: str) -> Element:
        return self.advanced_select_input2(name, value, key, None)

    def advanced_select_input2(
        self, name: str, value: str, key: str, mod: AdvancedSelectInputMod | None = None
    ) -> Element:
        mod = mod if mod is not None else self.mod()
        mod.name = name
        mod.value = value
        mod.autocomplete_key = key
        return self.h(mod)

    def h(self, mod: AdvancedSelectInputMod) -> Element:
        return self.component.cas(
            "div",
            {"class": "w-full md:w-1/2 flex flex-col items-center"},
            self._select_component(mod),
        )

    def _select_component(self, mod: AdvancedSelectInputMod) -> Element:
        return self.component.cas(
            "div",
            {
                "x-data": "advancedInput('" + mod.value + "')",
                "x-init": "fetchOptions('" + mod.autocomplete_key + "', " + self._filters(mod) + ")",
                "class": "w-full flex flex-col items-center relative",
            },
            self._hidden_input(mod),
            self._control(),
            self._options_panel(),
        )

    def _filters(self, mod: AdvancedSelectInputMod) -> str:
        parts = (
            '{key:"' + f.key + '",value:"' + f.value + '"}' for f in mod.filters
        )
        return "[" + ",".join(parts) + "]"

    def _hidden_input(self, mod: AdvancedSelectInputMod) -> Element:
        return self.component.ca(
            "input", {"name": mod.name, "x-model": "value", "type": "hidden"}
        )

    def _text_input(self) -> Element:
        return self.component.ca(
            "input",
            {
                "x-model": "filter",
                "x-transition:leave": "transition ease-in duration-100",
                "x-transition:leave-start": "opacity-100",
                "x-transition:leave-end": "opacity-0",
                "@mousedown": "open()",
                "@keydown.enter.stop.prevent": "selectOption()",
                "@keydown.arrow-up.prevent": "focusPrevOption()",
                "@keydown.arrow-down.prevent": "focusNextOption()",
                "class": "p-1 px-2 appearance-none outline-none w-full text-gray-800",
            },
        )

    def _arrow(self) -> Element:
        down = self.component.ca(
            "polyline", {"x-show": "!isOpen()", "points": "18 15 12 20 6 15"}
        )
        up = self.component.ca("polyline", {"x-show": "isOpen()", "points": "18 15 12 9 6 15"})
        return self.component.cas(
            "svg",
            {
                "xmlns": "http://www.w3.org/2000/svg",
                "width": "100%",
                "height": "100%",
                "fill": "none",
                "viewBox": "0 0 24 24",
                "stroke": "currentColor",
                "stroke-width": "2",
                "stroke-linecap": "round",
                "stroke-linejoin": "round",
            },
            down,
            up,
        )

    def _control(self) -> Element:
        toggle = self.component.cas(
            "div",
            {
                "@click": "toggle()",
                "class": "cursor-pointer w-6 h-6 text-gray-600 outline-none focus:outline-none",
            },
            self._arrow(),
        )
        toggle_box = self.component.cas(
            "div",
            {"class": "text-gray-300 w-8 py-1 pl-2 pr-1 border-l flex items-center border-gray-200"},
            toggle,
        )
        box = self.component.cas(
            "div",
            {"@click.away": "close()", "class": "my-2 p-1 bg-white flex border border-gray-200 rounded"},
            self._text_input(),
            toggle_box,
        )
        return self.component.cas("div", {"class": "w-full"}, box)

    def _options_panel(self) -> Element:
        text = self.component.ca("span", {"x-text": "option.text"})
        text_box = self.component.cas("div", {"class": "mx-2 -mt-1"}, text)
        row = self.component.cas("div", {"class": "w-full items-center flex"}, text_box)
        padded = self.component.cas(
            "div",
            {
                "class": "flex w-full items-center p-2 pl-2 border-transparent border-l-2 "
                "relative hover:border-teal-100"
            },
            row,
        )
        option = self.component.cas(
            "div",
            {
                "@click": "onOptionClick(index)",
                ":class": "classOption(option.id, index)",
                ":aria-selected": "focusedOptionIndex === index",
            },
            padded,
        )
        loop = self.component.cas(
            "template",
            {"x-for": "(option, index) in filteredOptions()", ":key": "index"},
            option,
        )
        column = self.component.cas("div", {"class": "flex flex-col w-full"}, loop)
        return self.component.cas(
            "div",
            {
                "x-show": "isOpen()",
                "style": "top: 100%;max-height: 300px;",
                "class": "absolute shadow bg-white  z-40 w-full lef-0 rounded overflow-y-auto",
            },
            column,
        )


@dataclass
class SelectOption:
    value: str
    text: str
    data: str = ""


def _option(component: Component, option: SelectOption, value: str) -> Element:
    attributes = {"value": option.value}
    if option.value == value:
        attributes["selected"] = "selected"
    if option.data:
        attributes["data-options"] = option.data
    return component.cav("option", attributes, option.text)


@dataclass
class SelectInputMod:
    name: str = ""
    value: str = ""
    options: list[SelectOption] = field(default_factory=list)
    select_attr: dict[str, str] | None = None

    def add_option(self, value: str, text: str) -> None:
        self.options.append(SelectOption(value=value, text=text))

    def add_option_with_data(self, value: str, text: str, data: str) -> None:
        self.options.append(SelectOption(value=value, text=text, data=data))


@dataclass
class SelectInput:
    """A native select with the current value pre-selected."""

    component: Component = field(default_factory=Component)

    def select_input(self, name: str, value: str, mod: SelectInputMod | None = None) -> Element:
        mod = mod if mod is not None else self.mod()
        mod.name = name
        mod.value = value
        return self.h(mod)

    def mod(self) -> SelectInputMod:
        return SelectInputMod()

    def h(self, mod: SelectInputMod) -> Element:
        attr = dict(mod.select_attr or {})
        attr["name"] = mod.name
        attr["value"] = mod.value
        attr["class"] = _SELECT_CSS
        attr["style"] = _SELECT_STYLE
        attr["role"] = Role.COMBOBOX
        return self.component.cas(
            "select",
            attr,
            *(_option(self.component, option, mod.value) for option in mod.options),
        )


@dataclass
class SelectInputAlpMod:
    x_model: str = ""
    on_change: str = ""
    options: list[SelectOption] = field(default_factory=list)
    select_attr: dict[str, str] | None = None

    def add_option(self, value: str, text: str) -> None:
        self.options.append(SelectOption(value=value, text=text))

    def add_option_with_data(self, value: str, text: str, data: str) -> None:
        self.options.append(SelectOption(value=value, text=text, data=data))


@dataclass
class SelectInputAlp:
    """A native select bound to an Alpine.js model."""

    component: Component = field(default_factory=Component)

    def select_input_alp(self, x_model: str, mod: SelectInputAlpMod | None = None) -> Element:
        mod = mod if mod is not None else self.mod()
        mod.x_model = x_model
        return self.h(mod)

    def select_input_alp_with_on_change(
        self, x_model: str, on_change: str, mod: SelectInputAlpMod | None = None
    ) -> Element:
        mod = mod if mod is not None else self.mod()
        mod.on_change = on_change
        mod.x_model = x_model
        return self.h(mod)

    def mod(self) -> SelectInputAlpMod:
        return SelectInputAlpMod()

    def h(self, mod: SelectInputAlpMod) -> Element:
        attr = dict(mod.select_attr or {})
        attr["x-model"] = mod.x_model
        if mod.on_change:
            attr["@change"] = mod.on_change
        attr["class"] = _SELECT_CSS
        attr["style"] = _SELECT_STYLE
        # Selection is driven by the model, so options are compared with an empty value.
        return self.component.cas(
            "select",
            attr,
            *(_option(self.component, option, "") for option in mod.options),
        )


@dataclass
class GridIdInputOption:
    value: str
    text: str


@dataclass
class GridIdInputMod:
    name: str = ""
    value: str = ""
    options: list[GridIdInputOption] = field(default_factory=list)

    def add_option(self, value: str, text: str) -> None:
        self.options.append(GridIdInputOption(value=value, text=text))


_GRID_CARD_CSS = (
    "flex items-center justify-center h-16 rounded-lg border border-gray-200 bg-gray-50 "
    "text-sm font-medium text-gray-700 peer-checked:bg-blue-600 peer-checked:text-white "
    "peer-checked:border-blue-600 transition"
)


@dataclass
class GridIdInput:
    """Radio choices laid out as a grid of cards."""

    component: Component = field(default_factory=Component)

    def grid_id_input(self, name: str, value: str, mod: GridIdInputMod | None = None) -> Element:
        mod = mod if mod is not None else self.mod()
        mod.name = name
        mod.value = value
        return self.h(mod)

    def mod(self) -> GridIdInputMod:
        return GridIdInputMod()

    def h(self, mod: GridIdInputMod) -> Element:
        return self.component.dcs(
            "grid grid-cols-3 gap-3", *(self._grid_item(option, mod) for option in mod.options)
        )

    def _grid_item(self, option: GridIdInputOption, mod: GridIdInputMod) -> Element:
        attributes = {
            "type": "radio",
            "name": mod.name,
            "value": option.value,
            "class": "peer sr-only",
        }
        if mod.value == option.value:
            attributes["checked"] = "checked"
        return self.component.ccs(
            "label",
            "relative block cursor-pointer",
            self.component.cas("input", attributes),
            self.component.dcv(_GRID_CARD_CSS, option.text),
        )


@dataclass
class RadioItem:
    label: str
    value: str
    name: str


@dataclass
class RadioInputAlpMod:
    x_model: str = ""
    items: list[RadioItem] = field(default_factory=list)
    orientation: str = ""
    on_change: str = ""
    name: str = ""

    def add_radio_item(self, label: str, value: str, name: str) -> None:
        """Add a choice; an empty name gets a random numeric id."""
        if not name:
            name = str(random.getrandbits(63))
        self.items.append(RadioItem(label=label, value=value, name=name))


_RADIO_CSS = (
    "shrink-0 mt-0.5 border-gray-200 rounded-full text-blue-600 focus:ring-blue-500 "
    "disabled:opacity-50 disabled:pointer-events-none"
)


@dataclass
class RadioInputAlp:
    """A group of radio buttons bound to an Alpine.js model."""

    component: Component = field(default_factory=Component)

    def mod(self, x_model: str, name: str) -> RadioInputAlpMod:
        return RadioInputAlpMod(x_model=x_model, name=name)

    def radio_input(self, mod: RadioInputAlpMod | None) -> Element:
        return self.h(mod)

    def h(self, mod: RadioInputAlpMod | None) -> Element:
        css = "flex flex-row space-x-6"
        if mod is not None and mod.orientation == "vertical":
            css = "flex flex-col space-y-6"
        radios = [] if mod is None else [self._radio(mod, item) for item in mod.items]
        return self.component.dcs(css, *radios)

    def _radio(self, mod: RadioInputAlpMod, item: RadioItem) -> Element:
        attributes = {
            "type": "radio",
            "x-model": mod.x_model,
            "class": _RADIO_CSS,
            "id": item.name,
            "value": item.value,
            "name": mod.name,
        }
        if mod.on_change:
            attributes["@change"] = mod.on_change
        label = self.component.cav(
            "label", {"for": item.name, "class": "text-sm text-gray-500 ms-2"}, item.label
        )
        return self.component.dcs("flex", self.component.ca("input", attributes), label)