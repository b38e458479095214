from kitcla.buttons_groups import ButtonsGroupAlp, GroupButton
from kitcla.markup import render


def test_mod_keeps_selected_key():
    mod = ButtonsGroupAlp().mod("week")
    assert mod.selected_key == "week"
    assert mod.buttons == []


def test_add_button_appends_in_order():
    mod = ButtonsGroupAlp().mod("a")
    mod.add_button("a", "First", "first()")
    mod.add_button("b", "Second", "second()")
    assert mod.buttons == [
        GroupButton(key="a", label="First", on_click="first()"),
        GroupButton(key="b", label="Second", on_click="second()"),
    ]


def test_group_wraps_buttons():
    group = ButtonsGroupAlp()
    mod = group.mod("b")
    mod.add_button("a", "First", "first()")
    mod.add_button("b", "Second", "second()")
    el = group.h(mod)
    assert el.tag == "div"
    assert el.attributes["class"] == "inline-flex rounded-lg"
    assert "'b'" in el.attributes["x-data"]
    assert [child.children for child in el.children] == [["First"], ["Second"]]
    assert all(child.tag == "button" for child in el.children)


def test_button_click_sets_key_then_runs_handler():
    group = ButtonsGroupAlp()
    mod = group.mod("a")
    mod.add_button("a", "First", "first()")
    button = group.h(mod).children[0]
    assert button.attributes["@click"].startswith("selectedKey = 'a'")
    assert button.attributes["@click"].endswith("first()")
    assert "'bg-gray-50' : 'bg-white'" in button.attributes[":class"]


def test_empty_group_has_no_children():
    group = ButtonsGroupAlp()
    el = group.h(group.mod(""))
    assert el.children == []
    assert render(el).endswith("></div>")