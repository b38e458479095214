"""Short-hand builders shared by every component."""

from __future__ import annotations

from collections.abc import Mapping

from .markup import Element, Raw, element


class Component:
    """Builds elements from tags, css classes, attributes, text and children."""

    def h(self, tag: str, *args) -> Element:
        """Base builder used by all the short-hands."""
        return element(tag, *args)

    def c(self, tag: str) -> Element:
        """Just the tag."""
        return self.h(tag)

    def cc(self, tag: str, css: str) -> Element:
        """Tag with css classes."""
        return self.h(tag, {"class": css})

    def ccv(self, tag: str, css: str, *args: str) -> Element:
        """Tag with css classes and text values."""
        return self.h(tag, {"class": css}, args)

    def cv(self, tag: str, *args: str) -> Element:
        """Tag with text values."""
        return self.h(tag, args)

    def cs(self, tag: str, *args) -> Element:
        """Tag with child elements."""
        return self.h(tag, args)

    def cav(self, tag: str, attributes: Mapping[str, str], *args: str) -> Element:
        """Tag with attributes and text values."""
        return self.h(tag, attributes, args)

    def ca(self, tag: str, attributes: Mapping[str, str]) -> Element:
        """Tag with attributes."""
        return self.h(tag, attributes)

    def cas(self, tag: str, attributes: Mapping[str, str], *args) -> Element:
        """Tag with attributes and child elements."""
        return self.h(tag, attributes, args)

    def ccs(self, tag: str, css: str, *args) -> Element:
        """Tag with css classes and child elements."""
        return self.h(tag, {"class": css}, args)

    def dcs(self, css: str, *args) -> Element:
        """Div with css classes and child elements."""
        return self.ccs("div", css, *args)

    def ds(self, *args) -> Element:
        """Div with child elements."""
        return self.cs("div", *args)

    def da(self, attributes: Mapping[str, str]) -> Element:
        """Div with attributes."""
        return self.ca("div", attributes)

    def dc(self, css: str) -> Element:
        """Div with css classes."""
        return self.cc("div", css)

    def dv(self, *args: str) -> Element:
        """Div with text values."""
        return self.cv("div", *args)

    def dcv(self, css: str, value: str) -> Element:
        """Div with css classes and a text value."""
        return self.ccv("div", css, value)

    def dav(self, attributes: Mapping[str, str], value: str) -> Element:
        """Div with attributes and a text value."""
        return self.cav("div", attributes, value)

    def das(self, attributes: Mapping[str, str], *args) -> Element:
        """Div with attributes and child elements."""
        return self.cas("div", attributes, *args)

    def wrap(self, css: str, *args) -> Element:
        """Wrap children in a div with css classes."""
        return self.w(css, *args)

    def ti(self, condition: str, component) -> Element:
        """Template rendered when the condition holds."""
        return self.cas("template", {"x-if": condition}, component)

    def tf(self, condition: str, component) -> Element:
        """Template repeated over a loop expression."""
        return self.cas("template", {"x-for": condition}, component)

    def w(self, css: str, *args) -> Element:
        """Wrap children in a div with css classes."""
        return self.ccs("div", css, *args)

    def wa(self, attributes: Mapping[str, str], *args) -> Element:
        """Wrap children in a div with attributes."""
        return self.cas("div", attributes, *args)

    def exp_html(self, html: str) -> Element:
        """Div holding markup inserted as is."""
        return self.h("div", Raw(html))

    def or_nil(self, element: Element, is_nil: bool) -> list[Element]:
        """A list holding the element, or an empty list when is_nil is true."""
        return [] if is_nil else [element]