import pytest

from kitcla.dropdowns import Dropdown
from kitcla.icons import ICON_FAS_ELLIPSIS_VERTICAL, Icon
from kitcla.markup import element, render


def _menu(el):
    return el.children[1].children[0]


def test_dropdown_structure():
    button = element("span", "Open")
    items = [element("a", "One"), element("a", "Two")]
    el = Dropdown().dropdown(button, items)
    assert el.tag == "div"
    assert el.attributes["x-data"] == "{open:false}"
    assert el.attributes["@click.away"] == "open = false"
    assert len(el.children) == 2
    assert el.children[0].children == [button]


def test_button_container_aria():
    el = Dropdown().dropdown(element("span", "Open"), [])
    container = el.children[0]
    assert container.attributes["role"] == "button"
    assert container.attributes["aria-haspopup"] == "menu"
    assert container.attributes["aria-expanded"] == "false"
    assert container.attributes["x-bind:aria-expanded"] == "open"


def test_menu_items_wrapped_in_order():
    items = [element("a", "One"), element("a", "Two"), element("a", "Three")]
    menu = _menu(Dropdown().dropdown(element("span"), items))
    assert menu.attributes["role"] == "menu"
    assert [wrapper.children[0] for wrapper in menu.children] == items
    assert all(wrapper.attributes["role"] == "menuitem" for wrapper in menu.children)


def test_empty_menu():
    menu = _menu(Dropdown().dropdown(element("span"), []))
    assert menu.children == []


def test_ellipsis_dropdown_uses_icon():
    icon = Icon()
    icon.register(ICON_FAS_ELLIPSIS_VERTICAL, '<svg class="dots"></svg>')
    el = Dropdown(icon=icon).ellipsis_dropdown([element("a", "Edit")])
    assert '<svg class="dots"></svg>' in render(el.children[0])
    assert len(_menu(el).children) == 1


def test_ellipsis_dropdown_without_icon_fails():
    with pytest.raises(ValueError):
        Dropdown().ellipsis_dropdown([])