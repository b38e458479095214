from kitcla.markup import element, render
from kitcla.placeholders import Placeholder, PlaceholderMod


def test_placeholder():
    out = Placeholder().placeholder("Label", element("div"))
    assert render(out) == "<div>Hello world</div>"


def test_placeholder_ignores_mod():
    mod = PlaceholderMod(label="x", input=element("p"), hidden=True)
    assert Placeholder().h(mod) == Placeholder().placeholder("y", None)