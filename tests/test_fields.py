from kitcla.component import Component
from kitcla.fields import Field, FieldMod
from kitcla.markup import element, render


def _input():
    return element("div", "Hello world")


def test_field_wraps_label_and_input():
    inp = _input()
    out = Field().field("Watering Instructions", inp)
    assert out.tag == "div"
    assert out.attributes == {"class": "flex flex-col"}
    label, child = out.children
    assert label.tag == "label"
    assert label.attributes == {"class": "font-bold"}
    assert label.children == ["Watering Instructions"]
    assert child == inp


def test_hidden_field_returns_input_only():
    inp = _input()
    assert Field().hidden_field("plant_species_id", inp) is inp


def test_field_showcase():
    c = Component()
    masked_input = c.ca("input", {"type": "password", "class": "w-full px-3 py-2"})
    hidden = c.ca("input", {"type": "hidden", "value": "garden_123"})
    fields = Field()
    out = render(c.dcs("space-y-6", fields.field("Garden Password", masked_input),
                       fields.hidden_field("Garden ID", hidden)))
    assert "Garden Password" in out
    assert "Garden ID" not in out
    assert 'value="garden_123"' in out


def test_h_with_mod():
    inp = _input()
    assert Field().h(FieldMod(label="x", input=inp, hidden=True)) is inp
    assert Field().h(FieldMod(label="x", input=inp)).children[1] is inp