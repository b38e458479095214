"""Buttons rendered as links, submit buttons or small POST forms."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from .aria import Property, Role
from .component import Component
from .icons import Icon
from .markup import Element


class ButtonKind(StrEnum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"
    QUATERNARY = "quaternary"
    LINK = "link"


class ButtonSize(StrEnum):
    XS = "24"
    SM = "28"
    BASE = "32"
    LG = "36"
    XL = "40"


class HtmlKind(StrEnum):
    A = "a"
    SUBMIT = "submit"


_SIZE_CSS = {
    ButtonSize.XS: "text-xs h-6 px-2 py-1",
    ButtonSize.SM: "text-sm h-7 px-2 py-1",
    ButtonSize.BASE: "px-2.5 py-1.5 text-sm h-8",
    ButtonSize.LG: "px-3 py-2 text-base h-9",
    ButtonSize.XL: "px-4 py-2.5 text-base h-10",
}


@dataclass
class PostValue:
    """A hidden field sent along with a POST button."""

    name: str
    value: str


@dataclass
class ButtonMod:
    label: str = ""
    kind: str = ""
    link: str = ""
    html_kind: str = ""
    icon: str = ""
    post: bool = False
    posted_values: list[PostValue] = field(default_factory=list)
    size: str = ""
    text_color: str = ""
    disabled: bool = False
    title: str = ""
    remote_form_url: str = ""

    def add_post_value(self, name: str, value: str) -> None:
        self.posted_values.append(PostValue(name=name, value=value))


@dataclass
class Button:
    """Styled buttons of several kinds and sizes."""

    icon: Icon = field(default_factory=Icon)
    component: Component = field(default_factory=Component)

    def mod(self) -> ButtonMod:
        return ButtonMod()

    def _configured(self, mod: ButtonMod | None, **settings) -> Element:
        mod = mod if mod is not None else ButtonMod()
        for name, value in settings.items():
            setattr(mod, name, value)
        return self.h(mod)

    def primary_link(self, label: str, link: str, mod: ButtonMod | None = None) -> Element:
        return self.h(
            ButtonMod(label=label, kind=ButtonKind.PRIMARY, size=ButtonSize.LG,
                      link=link, html_kind=HtmlKind.A)
        )

    def secondary_link(self, label: str, link: str, mod: ButtonMod | None = None) -> Element:
        return self._configured(mod, label=label, kind=ButtonKind.SECONDARY,
                                size=ButtonSize.LG, link=link, html_kind=HtmlKind.A)

    def secondary_icon_link(self, icon: str, link: str, mod: ButtonMod | None = None) -> Element:
        return self._configured(mod, kind=ButtonKind.SECONDARY, size=ButtonSize.LG,
                                link=link, icon=icon, html_kind=HtmlKind.A)

    def secondary_submit(self, label: str, mod: ButtonMod | None = None) -> Element:
        return self._configured(mod, label=label, kind=ButtonKind.SECONDARY,
                                size=ButtonSize.LG, html_kind=HtmlKind.SUBMIT)

    def secondary_icon_submit(self, icon: str, mod: ButtonMod | None = None) -> Element:
        return self._configured(mod, kind=ButtonKind.SECONDARY, size=ButtonSize.LG,
                                icon=icon, html_kind=HtmlKind.SUBMIT)

    def secondary_icon_post(self, icon: str, link: str, mod: ButtonMod | None = None) -> Element:
        return self._configured(mod, link=link, icon=icon, kind=ButtonKind.SECONDARY,
                                size=ButtonSize.LG, html_kind=HtmlKind.SUBMIT, post=True)

    def table_icon_link(self, icon: str, link: str, mod: ButtonMod | None = None) -> Element:
        return self.h(
            ButtonMod(kind=ButtonKind.SECONDARY, size=ButtonSize.BASE, link=link,
                      icon=icon, html_kind=HtmlKind.A)
        )

    def table_link(self, label: str, link: str, mod: ButtonMod | None = None) -> Element:
        return self.h(
            ButtonMod(kind=ButtonKind.SECONDARY, size=ButtonSize.BASE, link=link,
                      label=label, html_kind=HtmlKind.A)
        )

    def tertiary_icon_link(self, icon: str, link: str, mod: ButtonMod | None = None) -> Element:
        return self.h(
            ButtonMod(kind=ButtonKind.TERTIARY, size=ButtonSize.LG, link=link,
                      icon=icon, html_kind=HtmlKind.A)
        )

    def form_submit(self, label: str, mod: ButtonMod | None = None) -> Element:
        return self._configured(mod, label=label, kind=ButtonKind.PRIMARY,
                                size=ButtonSize.XL, html_kind=HtmlKind.SUBMIT)

    def remote_form(self, label: str, remote_form_url: str, mod: ButtonMod | None = None) -> Element:
        return self._configured(mod, label=label, kind=ButtonKind.SECONDARY,
                                size=ButtonSize.LG, html_kind=HtmlKind.A,
                                remote_form_url=remote_form_url)

    def primary_submit(self, label: str, mod: ButtonMod | None = None) -> Element:
        return self.h(
            ButtonMod(label=label, kind=ButtonKind.PRIMARY, size=ButtonSize.LG,
                      html_kind=HtmlKind.SUBMIT)
        )

    def primary_post(self, label: str, link: str, mod: ButtonMod | None = None) -> Element:
        return self._configured(mod, label=label, link=link, kind=ButtonKind.PRIMARY,
                                size=ButtonSize.LG, html_kind=HtmlKind.SUBMIT, post=True)

    def primary_icon_link(self, icon: str, link: str, mod: ButtonMod | None = None) -> Element:
        return self.h(
            ButtonMod(kind=ButtonKind.PRIMARY, size=ButtonSize.LG, link=link,
                      icon=icon, html_kind=HtmlKind.A)
        )

    def primary_icon_submit(self, icon: str, mod: ButtonMod | None = None) -> Element:
        return self.h(
            ButtonMod(kind=ButtonKind.PRIMARY, size=ButtonSize.LG, icon=icon,
                      html_kind=HtmlKind.SUBMIT)
        )

    def primary_icon_post(self, icon: str, link: str, mod: ButtonMod | None = None) -> Element:
        return self._configured(mod, link=link, icon=icon, kind=ButtonKind.PRIMARY,
                                size=ButtonSize.LG, html_kind=HtmlKind.SUBMIT, post=True)

    def secondary_post(self, label: str, link: str, mod: ButtonMod | None = None) -> Element:
        return self._configured(mod, label=label, link=link, kind=ButtonKind.SECONDARY,
                                size=ButtonSize.LG, html_kind=HtmlKind.SUBMIT, post=True)

    def h(self, mod: ButtonMod) -> Element:
        if mod.post:
            return self._post_button(mod)
        if mod.html_kind == HtmlKind.SUBMIT:
            return self._submit_button(mod)
        return self._link_button(mod)

    def _content(self, tag: str, mod: ButtonMod, attributes: dict[str, str]) -> Element:
        if mod.icon:
            return self.component.cas(tag, attributes, self.icon.icon(mod.icon))
        return self.component.cav(tag, attributes, mod.label)

    def _submit_button(self, mod: ButtonMod) -> Element:
        attributes = {"type": "submit", "class": self._base_css(mod), "role": Role.BUTTON}
        if mod.disabled:
            attributes["disabled"] = ""
            attributes[Property.DISABLED] = "true"
        self._add_common_attributes(mod, attributes)
        return self._content("button", mod, attributes)

    def _link_button(self, mod: ButtonMod) -> Element:
        attributes = {"class": self._base_css(mod), "role": Role.BUTTON}
        if mod.link:
            attributes["href"] = mod.link
        if mod.disabled:
            attributes["href"] = "#"
            attributes[Property.DISABLED] = "true"
        self._add_common_attributes(mod, attributes)
        return self._content("a", mod, attributes)

    def _post_button(self, mod: ButtonMod) -> Element:
        return self.component.cas(
            "form",
            {"action": mod.link, "method": "POST", "role": Role.FORM},
            self._post_values(mod),
            self._submit_button(mod),
        )

    def _base_css(self, mod: ButtonMod) -> str:
        return f"{self._css_from_kind(mod)} {self._css_from_size(mod)} {self._css_from_state(mod)}"

    def _css_from_kind(self, mod: ButtonMod) -> str:
        pointer = "cursor-pointer"
        if mod.disabled and mod.html_kind == HtmlKind.A:
            pointer = "cursor-not-allowed"
        base = f"inline-flex items-center font-medium {pointer} "

        match mod.kind:
            case ButtonKind.PRIMARY:
                return base + "border rounded-lg border-transparent bg-blue-600 text-white hover:bg-blue-700"
            case ButtonKind.SECONDARY:
                color = "text-gray-700 " if mod.icon else "text-gray-800 "
                return base + color + "rounded-lg border border-gray-200 bg-white shadow-sm hover:bg-gray-50"
            case ButtonKind.TERTIARY:
                text_color = mod.text_color or " text-blue-600 hover:text-blue-800"
                return base + "rounded-lg border border-transparent hover:bg-blue-100 " + text_color
            case ButtonKind.QUATERNARY:
                return base + "rounded-lg border border-transparent bg-blue-100 text-blue-800 hover:bg-blue-200"
        raise ValueError(f"Unknown kind: {mod.kind!r}")

    def _css_from_size(self, mod: ButtonMod) -> str:
        try:
            return _SIZE_CSS[mod.size]
        except KeyError:
            raise ValueError(f"Unknown size: {mod.size!r}") from None

    def _css_from_state(self, mod: ButtonMod) -> str:
        if mod.disabled and mod.html_kind == HtmlKind.SUBMIT:
            return "disabled:opacity-50 disabled:cursor-not-allowed"
        if mod.disabled and mod.html_kind == HtmlKind.A:
            return "opacity-50"
        return ""

    def _post_values(self, mod: ButtonMod) -> Element | None:
        if not mod.posted_values:
            return None
        inputs = [
            self.component.cas("input", {"type": "hidden", "name": pv.name, "value": pv.value})
            for pv in mod.posted_values
        ]
        return self.component.cs("span", *inputs)

    def _add_common_attributes(self, mod: ButtonMod, attributes: dict[str, str]) -> None:
        if mod.title:
            attributes["title"] = mod.title
        if mod.remote_form_url:
            attributes["onclick"] = f"G_getRemoteForm('{mod.remote_form_url}')"
        if mod.icon and not mod.label and mod.title:
            attributes[Property.LABEL] = mod.title


@dataclass
class ButtonAlpMod:
    label: str = ""
    kind: str = ""
    on_click: str = ""
    html_kind: str = ""
    icon: str = ""
    post: bool = False
    size: str = ""
    text_color: str = ""
    disabled: bool = False


@dataclass
class ButtonAlp:
    """Link buttons whose click runs an Alpine.js expression."""

    icon: Icon = field(default_factory=Icon)
    button: Button = field(default_factory=Button)
    component: Component = field(default_factory=Component)

    def primary_link(self, label: str, on_click: str, mod: ButtonAlpMod | None = None) -> Element:
        return self.h(ButtonAlpMod(label=label, kind=ButtonKind.PRIMARY, size=ButtonSize.LG,
                                   on_click=on_click, html_kind=HtmlKind.A))

    def secondary_link(self, label: str, on_click: str, mod: ButtonAlpMod | None = None) -> Element:
        return self.h(ButtonAlpMod(label=label, kind=ButtonKind.SECONDARY, size=ButtonSize.LG,
                                   on_click=on_click, html_kind=HtmlKind.A))

    def secondary_icon_link(self, icon: str, on_click: str, mod: ButtonAlpMod | None = None) -> Element:
        return self.h(ButtonAlpMod(kind=ButtonKind.SECONDARY, size=ButtonSize.LG,
                                   on_click=on_click, icon=icon, html_kind=HtmlKind.A))

    def tertiary_icon_link(self, icon: str, on_click: str, mod: ButtonAlpMod | None = None) -> Element:
        return self.h(ButtonAlpMod(kind=ButtonKind.TERTIARY, size=ButtonSize.LG,
                                   on_click=on_click, icon=icon, html_kind=HtmlKind.A))

    def quaternary_icon_link(self, icon: str, on_click: str, mod: ButtonAlpMod | None = None) -> Element:
        return self.h(ButtonAlpMod(kind=ButtonKind.QUATERNARY, size=ButtonSize.LG,
                                   on_click=on_click, icon=icon, html_kind=HtmlKind.A,
                                   text_color="text-gray-500 hover:text-gray-700"))

    def h(self, mod: ButtonAlpMod) -> Element:
        css = self.button._base_css(self._convert(mod))
        attributes = {"class": css, "@click": mod.on_click}
        if mod.icon:
            return self.component.cas("a", attributes, self.icon.icon(mod.icon))
        return self.component.cav("a", attributes, mod.label)

    def _convert(self, mod: ButtonAlpMod) -> ButtonMod:
        return ButtonMod(
            label=mod.label,
            kind=mod.kind,
            html_kind=mod.html_kind,
            icon=mod.icon,
            post=mod.post,
            size=mod.size,
            text_color=mod.text_color,
            disabled=mod.disabled,
        )