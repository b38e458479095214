"""Form inputs, plain and bound to Alpine.js models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from .aria import Role
from .component import Component
from .icons import ICON_FAS_MINUS, ICON_FAS_PLUS, Icon
from .markup import Element, Raw
from .resources import Resource

_BORDERED = "border border-scale-3 px-3 py-2 rounded-md"
_CHECKBOX_CSS = "h-4 w-4 rounded border-scale-3 text-selection"
_TOGGLE_INPUT_CSS = (
    "checked:right-0 checked:bg-selection absolute block w-6 h-6 rounded-full bg-white "
    "border-scale-4 border-2 appearance-none cursor-pointer"
)
_TOGGLE_CONTAINER_CSS = (
    "toggle-label block overflow-hidden h-6 rounded-full bg-scale-2 cursor-pointer "
    "border border-scale-3"
)
_TOGGLE_LABEL_CSS = (
    "relative inline-block w-12 mr-2 align-middle select-none transition duration-200 ease-in"
)

TRIX_JS = "https://cdnjs.cloudflare.com/ajax/libs/trix/1.3.1/trix.js"
TRIX_CSS = "https://cdnjs.cloudflare.com/ajax/libs/trix/1.3.1/trix.css"


def _attrs(attributes: Mapping[str, str] | None) -> dict[str, str]:
    return dict(attributes or {})


@dataclass
class BooleanInputMod:
    name: str = ""
    value: bool = False
    attr: dict[str, str] | None = None


@dataclass
class BooleanInput:
    """A checkbox posting ``true`` when checked."""

    component: Component = field(default_factory=Component)

    def boolean_input(self, name: str, value: bool) -> Element:
        return self.h(BooleanInputMod(name=name, value=value, attr={}))

    def boolean_input_with_attr(
        self, name: str, value: bool, attr: Mapping[str, str] | None
    ) -> Element:
        return self.h(BooleanInputMod(name=name, value=value, attr=_attrs(attr)))

    def h(self, mod: BooleanInputMod) -> Element:
        attr = _attrs(mod.attr)
        if mod.value:
            attr["checked"] = "checked"
        attr["type"] = "checkbox"
        attr["value"] = "true"
        attr["name"] = mod.name
        attr["class"] = _CHECKBOX_CSS
        attr["role"] = Role.CHECKBOX
        return self.component.cav("input", attr)


@dataclass
class BooleanInputAlpMod:
    x_model: str = ""
    attr: dict[str, str] | None = None


@dataclass
class BooleanInputAlp:
    """A checkbox bound to an Alpine.js model."""

    component: Component = field(default_factory=Component)

    def boolean_input(self, x_model: str) -> Element:
        return self.h(BooleanInputAlpMod(x_model=x_model, attr={}))

    def boolean_input_with_attr(self, x_model: str, attr: Mapping[str, str] | None) -> Element:
        return self.h(BooleanInputAlpMod(x_model=x_model, attr=_attrs(attr)))

    def h(self, mod: BooleanInputAlpMod) -> Element:
        attr = _attrs(mod.attr)
        attr["type"] = "checkbox"
        attr["x-model"] = mod.x_model
        attr["class"] = _CHECKBOX_CSS
        return self.component.cav("input", attr)


@dataclass
class DatetimeInputMod:
    name: str = ""
    value: str = ""


@dataclass
class DatetimeInput:
    component: Component = field(default_factory=Component)

    def datetime_input(self, name: str, value: str) -> Element:
        return self.h(DatetimeInputMod(name=name, value=value))

    def h(self, mod: DatetimeInputMod) -> Element:
        return self.component.cav(
            "input",
            {"type": "datetime-local", "name": mod.name, "value": mod.value, "class": _BORDERED},
        )


@dataclass
class DecimalInputMod:
    name: str = ""
    value: float = 0.0
    precision: int = 0


@dataclass
class DecimalInput:
    """A number input showing the value with a fixed precision."""

    component: Component = field(default_factory=Component)

    def decimal_input(self, name: str, value: float) -> Element:
        return self.h(DecimalInputMod(name=name, value=value, precision=2))

    def h(self, mod: DecimalInputMod) -> Element:
        return self.component.cav(
            "input",
            {
                "type": "number",
                "step": "any",
                "name": mod.name,
                "value": f"{mod.value:.{mod.precision}f}",
                "class": _BORDERED,
            },
        )


@dataclass
class _FileInputMod:
    name: str = ""


@dataclass
class FileInput:
    """A file upload input named ``file[<name>]``."""

    component: Component = field(default_factory=Component)

    def h(self, mod: _FileInputMod | None = None) -> Element | None:
        """Render the upload input; without a mod there is nothing to show."""
        if mod is None:
            return None
        return self.component.ca("input", {"type": "file", "name": f"file[{mod.name}]"})

    def file_input(self, name: str) -> Element:
        return self.h(_FileInputMod(name=name))


@dataclass
class HiddenInputMod:
    name: str = ""
    value: str = ""


@dataclass
class HiddenInput:
    component: Component = field(default_factory=Component)

    def hidden_input(self, name: str, value: str) -> Element:
        return self.h(HiddenInputMod(name=name, value=value))

    def integer_hidden_input(self, name: str, value: int) -> Element:
        return self.h(HiddenInputMod(name=name, value=str(value)))

    def h(self, mod: HiddenInputMod) -> Element:
        return self.component.cav(
            "input",
            {"type": "hidden", "name": mod.name, "value": mod.value, "hidden": "hidden"},
        )


@dataclass
class IntegerInputMod:
    name: str = ""
    value: int = 0


@dataclass
class IntegerInput:
    component: Component = field(default_factory=Component)

    def integer_input(self, name: str, value: int) -> Element:
        return self.h(IntegerInputMod(name=name, value=value))

    def h(self, mod: IntegerInputMod) -> Element:
        return self.component.cav(
            "input",
            {"type": "number", "name": mod.name, "value": str(mod.value), "class": _BORDERED},
        )


@dataclass
class IntegerInputAlpMod:
    x_model: str = ""
    on_minus_click: str = ""
    on_plus_click: str = ""


_MINI_BUTTON_CSS = (
    "size-6 inline-flex justify-center items-center gap-x-2 text-sm font-medium rounded-md border "
    "border-gray-200 bg-white text-gray-800 shadow-sm hover:bg-gray-50 focus:outline-none "
    "focus:bg-gray-50 disabled:opacity-50 disabled:pointer-events-none"
)
_MINI_INPUT_CSS = (
    "p-0 w-6 bg-transparent border-0 text-gray-800 text-center"
    " focus:ring-0 [&::-webkit-inner-spin-button]:appearance-none"
    " [&::-webkit-outer-spin-button]:appearance-none"
)


@dataclass
class IntegerInputAlp:
    """Number inputs bound to an Alpine.js model."""

    icon: Icon = field(default_factory=Icon)
    component: Component = field(default_factory=Component)

    def integer_input(self, x_model: str) -> Element:
        return self.h(IntegerInputAlpMod(x_model=x_model))

    def h(self, mod: IntegerInputAlpMod) -> Element:
        return self.component.cav(
            "input", {"type": "number", "x-model": mod.x_model, "class": _BORDERED}
        )

    def mini(self, x_model: str) -> Element:
        """A compact counter with minus and plus buttons around the input."""
        mod = IntegerInputAlpMod(x_model=x_model)
        inner = self.component.dcs(
            "flex items-center gap-x-1.5",
            self.component.das(
                {"class": _MINI_BUTTON_CSS}, self.icon.icon_with_size(ICON_FAS_MINUS, "3")
            ),
            self.component.cas(
                "input",
                {
                    "class": _MINI_INPUT_CSS,
                    "style": "-moz-appearance: textfield;",
                    "type": "number",
                    "x-model.number": mod.x_model,
                },
            ),
            self.component.dcs(_MINI_BUTTON_CSS, self.icon.icon_with_size(ICON_FAS_PLUS, "3")),
        )
        return self.component.dcs(
            "py-2 px-3 inline-block bg-white border border-gray-200 rounded-lg", inner
        )


@dataclass
class JsonInputMod:
    name: str = ""
    value: bytes | str = b""


@dataclass
class JsonInput:
    """A text input holding raw JSON."""

    component: Component = field(default_factory=Component)

    def json_input(self, name: str, value: bytes | str) -> Element:
        return self.h(JsonInputMod(name=name, value=value))

    def h(self, mod: JsonInputMod) -> Element:
        value = mod.value
        if isinstance(value, (bytes, bytearray)):
            value = value.decode("utf-8", errors="replace")
        return self.component.cav(
            "input",
            {
                "type": "text",
                "name": mod.name,
                "value": value,
                "class": "border border-scale-3 px-3 py-2",
            },
        )


@dataclass
class RichTextInputMod:
    name: str = ""
    value: str = ""


@dataclass
class RichTextInput:
    """A rich text editor backed by a hidden input."""

    resource: Resource = field(default_factory=Resource)
    component: Component = field(default_factory=Component)

    def rich_text_input(self, name: str, value: str) -> Element:
        return self.h(RichTextInputMod(name=name, value=value))

    def deps(self) -> Element:
        """Script and stylesheet the editor needs."""
        return self.resource.resource_js_css(TRIX_JS, TRIX_CSS)

    def h(self, mod: RichTextInputMod) -> Element:
        field_id = "trix-field-" + mod.name
        hidden = self.component.cav(
            "input", {"id": field_id, "type": "hidden", "name": mod.name, "value": mod.value}
        )
        editor = self.component.cav(
            "trix-editor",
            {"input": field_id, "class": "focus:outline-none focus:border focus:border-blue-500"},
        )
        script = self.component.h(
            "script",
            {"type": "text/javascript"},
            Raw('document.querySelector(".trix-button-group--file-tools").remove();'),
        )
        return self.component.wrap("", hidden, editor, script)


@dataclass
class SwitchInputMod:
    name: str = ""
    value: bool = False
    checkbox: bool = False


@dataclass
class SwitchInput:
    """A checkbox styled as a toggle switch."""

    component: Component = field(default_factory=Component)

    def switch_input(self, name: str, value: bool) -> Element:
        return self.h(SwitchInputMod(name=name, value=value))

    def h(self, mod: SwitchInputMod) -> Element:
        attributes = {"type": "checkbox", "name": mod.name}
        if mod.value:
            attributes["checked"] = "checked"
        attributes["value"] = "true"
        attributes["class"] = _TOGGLE_INPUT_CSS
        return _toggle(self.component, self.component.cav("input", attributes))


@dataclass
class SwitchInputAlpMod:
    x_model: str = ""


@dataclass
class SwitchInputAlp:
    """A toggle switch bound to an Alpine.js model."""

    component: Component = field(default_factory=Component)

    def switch_input(self, x_model: str, mod: SwitchInputAlpMod | None = None) -> Element:
        mod = mod if mod is not None else SwitchInputAlpMod()
        mod.x_model = x_model
        return self.h(mod)

    def h(self, mod: SwitchInputAlpMod) -> Element:
        checkbox = self.component.cav(
            "input", {"type": "checkbox", "x-model": mod.x_model, "class": _TOGGLE_INPUT_CSS}
        )
        return _toggle(self.component, checkbox)


def _toggle(component: Component, checkbox: Element) -> Element:
    container = component.ca("div", {"class": _TOGGLE_CONTAINER_CSS, "for": "toggle"})
    return component.cas("label", {"class": _TOGGLE_LABEL_CSS}, checkbox, container)


@dataclass
class TextAreaInputMod:
    name: str = ""
    value: str = ""
    columns_count: int = 0
    rows_count: int = 15
    placeholder: str = ""


@dataclass
class TextAreaInput:
    component: Component = field(default_factory=Component)

    def text_area_input(
        self, name: str, value: str, mod: TextAreaInputMod | None = None
    ) -> Element:
        mod = mod if mod is not None else self.mod()
        mod.name = name
        mod.value = value
        return self.h(mod)

    def mod(self) -> TextAreaInputMod:
        return TextAreaInputMod()

    def h(self, mod: TextAreaInputMod) -> Element:
        attributes = {"name": mod.name, "class": _BORDERED, "rows": str(mod.rows_count)}
        if mod.placeholder:
            attributes["placeholder"] = mod.placeholder
        return self.component.cav("textarea", attributes, mod.value)


@dataclass
class TextAreaInputAlpMod:
    x_model: str = ""
    attributes: dict[str, str] | None = None


@dataclass
class TextAreaInputAlp:
    component: Component = field(default_factory=Component)

    def text_area_input(self, x_model: str, mod: TextAreaInputAlpMod | None = None) -> Element:
        mod = mod if mod is not None else self.mod()
        mod.x_model = x_model
        return self.h(mod)

    def mod(self) -> TextAreaInputAlpMod:
        return TextAreaInputAlpMod()

    def h(self, mod: TextAreaInputAlpMod) -> Element:
        attr = _attrs(mod.attributes)
        attr["x-model"] = mod.x_model
        attr["class"] = _BORDERED
        return self.component.cav("textarea", attr)


@dataclass
class TextInputMod:
    name: str = ""
    value: str = ""


@dataclass
class TextInput:
    component: Component = field(default_factory=Component)

    def text_input(self, name: str, value: str) -> Element:
        return self.h(TextInputMod(name=name, value=value))

    def h(self, mod: TextInputMod) -> Element:
        return self.component.cav(
            "input",
            {
                "type": "text",
                "name": mod.name,
                "value": mod.value,
                "class": _BORDERED,
                "role": Role.TEXTBOX,
            },
        )


@dataclass
class TextInputAlpMod:
    x_model: str = ""
    attributes: dict[str, str] | None = None


@dataclass
class TextInputAlp:
    component: Component = field(default_factory=Component)

    def text_input(self, x_model: str) -> Element:
        return self.h(TextInputAlpMod(x_model=x_model))

    def h(self, mod: TextInputAlpMod) -> Element:
        attr = _attrs(mod.attributes)
        attr["type"] = "text"
        attr["x-model"] = mod.x_model
        attr["class"] = _BORDERED
        return self.component.cav("input", attr)