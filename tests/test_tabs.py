import pytest

from kitcla.markup import render
from kitcla.tabs import Tab, TabItem, TabMod


def _tabs(data):
    return Tab().tab(TabMod(items=[TabItem(text=t, value=t, active=a) for t, a in data]))


def test_tab_none():
    assert render(Tab().tab(None)) == '<div class="border-b border-gray-200"></div>'


def test_tab_buttons_count_and_labels():
    h = _tabs([("My Plants", True), ("Care Schedule", False), ("Garden Tools", False)])
    nav = h.children[0]
    assert nav.attributes["class"] == "flex space-x-1"
    assert [b.children for b in nav.children] == [["My Plants"], ["Care Schedule"], ["Garden Tools"]]


@pytest.mark.parametrize(
    "data",
    [
        [("Vegetable Garden", True)],
        [("Vegetables", False), ("Herbs", True), ("Flowers", False)],
        [("Overview", False), ("Plant Care", True), ("Watering Schedule", False), ("Harvest Log", False)],
    ],
)
def test_only_active_tab_is_highlighted(data):
    nav = _tabs(data).children[0]
    for (text, active), button in zip(data, nav.children):
        css = button.attributes["class"]
        assert css.endswith("font-semibold border-blue-600 text-blue-600") == active
        assert css.endswith("border-transparent text-gray-500") == (not active)


def test_tab_empty_mod():
    assert render(Tab().h(TabMod())) == (
        '<div class="border-b border-gray-200"><div class="flex space-x-1"></div></div>'
    )