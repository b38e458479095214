from kitcla.component import Component
from kitcla.icons import ICON_EYE
from kitcla.markup import render
from kitcla.popovers import Popover


def _content():
    return Component().cv("p", "Panel body")


def test_popover_ignores_button():
    button = Component().cv("span", "Hidden trigger")
    html = render(Popover().popover(button, _content()))
    assert "Panel body" in html
    assert "Hidden trigger" not in html
    assert "{ open: false }" in html


def test_text_popover_has_toggle_button():
    html = render(Popover().text_popover("Show tips", _content()))
    assert "Show tips" in html
    assert "open = !open" in html
    assert "open = false" in html


def test_icon_popover_without_width_has_no_style():
    html = render(Popover().icon_popover(ICON_EYE, _content()))
    assert "<svg" in html
    assert "width: " not in html


def test_fixed_width():
    html = render(Popover().icon_popover_with_fixed_width(ICON_EYE, _content(), "320"))
    assert "width: 320px;" in html


def test_ghostly_button_colour():
    html = render(Popover().ghostly_icon_popover(ICON_EYE, _content()))
    assert "bg-blue-100 text-blue-800" in html
    assert "Panel body" in html