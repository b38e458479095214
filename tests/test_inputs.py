import pytest

from kitcla.icons import ICON_FAS_MINUS, ICON_FAS_PLUS, Icon
from kitcla.inputs import (
    BooleanInput,
    BooleanInputAlp,
    DatetimeInput,
    DecimalInput,
    DecimalInputMod,
    FileInput,
    HiddenInput,
    IntegerInput,
    IntegerInputAlp,
    JsonInput,
    RichTextInput,
    SwitchInput,
    SwitchInputAlp,
    TextAreaInput,
    TextAreaInputAlp,
    TextAreaInputAlpMod,
    TextAreaInputMod,
    TextInput,
    TextInputAlp,
)
from kitcla.markup import render

BORDERED = "border border-scale-3 px-3 py-2 rounded-md"


def test_boolean_input_checked():
    el = BooleanInput().boolean_input("needs_watering", True)
    assert el.attributes == {
        "checked": "checked",
        "type": "checkbox",
        "value": "true",
        "name": "needs_watering",
        "class": "h-4 w-4 rounded border-scale-3 text-selection",
        "role": "checkbox",
    }


def test_boolean_input_unchecked_has_no_checked():
    el = BooleanInput().boolean_input("needs_watering", False)
    assert "checked" not in el.attributes


def test_boolean_input_with_attr():
    el = BooleanInput().boolean_input_with_attr("organic_certified", True, {"data-test": "x"})
    assert el.attributes["data-test"] == "x"
    assert el.attributes["name"] == "organic_certified"
    assert render(el).startswith('<input data-test="x" checked="checked"')


def test_boolean_input_alp():
    assert render(BooleanInputAlp().boolean_input("is_watered")) == (
        '<input type="checkbox" x-model="is_watered" '
        'class="h-4 w-4 rounded border-scale-3 text-selection">'
    )


def test_boolean_input_alp_with_attr():
    el = BooleanInputAlp().boolean_input_with_attr("requires_fertilizer", {"id": "f"})
    assert el.attributes == {
        "id": "f",
        "type": "checkbox",
        "x-model": "requires_fertilizer",
        "class": "h-4 w-4 rounded border-scale-3 text-selection",
    }


def test_datetime_input():
    assert render(DatetimeInput().datetime_input("watering_schedule", "2024-03-15T08:00")) == (
        '<input type="datetime-local" name="watering_schedule" value="2024-03-15T08:00" '
        f'class="{BORDERED}">'
    )


def test_decimal_input():
    el = DecimalInput().decimal_input("soil_ph_level", 6.5)
    assert el.attributes == {
        "type": "number",
        "step": "any",
        "name": "soil_ph_level",
        "value": "6.50",
        "class": BORDERED,
    }


def test_decimal_input_precision():
    el = DecimalInput().h(DecimalInputMod(name="n", value=1.23456, precision=3))
    assert el.attributes["value"] == "1.235"


def test_file_input():
    assert render(FileInput().file_input("file-input-1")) == (
        '<input type="file" name="file[file-input-1]">'
    )
    assert FileInput().h() is None


def test_hidden_input():
    assert render(HiddenInput().hidden_input("garden_id", "vegetable_plot_1")) == (
        '<input type="hidden" name="garden_id" value="vegetable_plot_1" hidden="hidden">'
    )


def test_hidden_input_showcase_case():
    el = HiddenInput().hidden_input("hidden-value", "hidden-input-1")
    assert el.attributes["name"] == "hidden-value"
    assert el.attributes["value"] == "hidden-input-1"


def test_integer_hidden_input():
    el = HiddenInput().integer_hidden_input("plot_size", 24)
    assert el.attributes["value"] == "24"


def test_integer_input():
    assert render(IntegerInput().integer_input("plant_quantity", 12)) == (
        f'<input type="number" name="plant_quantity" value="12" class="{BORDERED}">'
    )


def test_integer_input_alp():
    assert render(IntegerInputAlp().integer_input("plant_count")) == (
        f'<input type="number" x-model="plant_count" class="{BORDERED}">'
    )


def _counter_icons():
    icon = Icon()
    icon.register(ICON_FAS_MINUS, "<svg>minus</svg>")
    icon.register(ICON_FAS_PLUS, "<svg>plus</svg>")
    return icon


def test_integer_input_alp_mini():
    el = IntegerInputAlp(icon=_counter_icons()).mini("seed_count")
    assert el.attributes["class"] == "py-2 px-3 inline-block bg-white border border-gray-200 rounded-lg"
    inner = el.children[0]
    assert inner.attributes["class"] == "flex items-center gap-x-1.5"
    assert [child.tag for child in inner.children] == ["div", "input", "div"]
    assert inner.children[1].attributes["x-model.number"] == "seed_count"
    html = render(el)
    assert html.index("<svg>minus</svg>") < html.index("<svg>plus</svg>")
    assert 'class="h-3 w-3 inline-flex items-center"' in html


def test_integer_input_alp_mini_without_icons_raises():
    with pytest.raises(ValueError, match="no icon for minus"):
        IntegerInputAlp().mini("seed_count")


def test_json_input():
    el = JsonInput().json_input(
        "plant_care_instructions",
        b'{"watering": "daily", "sunlight": "partial", "fertilizer": "monthly"}',
    )
    assert el.attributes["value"] == (
        '{"watering": "daily", "sunlight": "partial", "fertilizer": "monthly"}'
    )
    assert 'value="{&quot;watering&quot;: &quot;daily&quot;' in render(el)
    assert el.attributes["class"] == "border border-scale-3 px-3 py-2"


def test_rich_text_input_deps():
    el = RichTextInput().deps()
    assert el.children[0].attributes["src"].endswith("trix/1.3.1/trix.js")
    assert el.children[1].attributes["href"].endswith("trix/1.3.1/trix.css")


def test_rich_text_input():
    html = render(
        RichTextInput().rich_text_input(
            "care_notes", "<p>Water twice weekly, partial shade preferred.</p>"
        )
    )
    assert html == (
        '<div class=""><input id="trix-field-care_notes" type="hidden" name="care_notes" '
        'value="&lt;p&gt;Water twice weekly, partial shade preferred.&lt;/p&gt;">'
        '<trix-editor input="trix-field-care_notes" '
        'class="focus:outline-none focus:border focus:border-blue-500"></trix-editor>'
        '<script type="text/javascript">'
        'document.querySelector(".trix-button-group--file-tools").remove();'
        "</script></div>"
    )


def test_switch_input_checked():
    el = SwitchInput().switch_input("auto_watering", True)
    assert el.tag == "label"
    checkbox, container = el.children
    assert checkbox.attributes["checked"] == "checked"
    assert checkbox.attributes["name"] == "auto_watering"
    assert checkbox.attributes["value"] == "true"
    assert container.attributes["for"] == "toggle"


def test_switch_input_unchecked():
    html = render(SwitchInput().switch_input("auto_watering", False))
    assert ' checked="checked"' not in html
    assert 'name="auto_watering"' in html


def test_switch_input_alp():
    el = SwitchInputAlp().switch_input("enabled")
    assert el.children[0].attributes["x-model"] == "enabled"
    assert el.children[0].attributes["type"] == "checkbox"


def test_text_area_input_defaults():
    assert render(TextAreaInput().text_area_input("notes", "a < b")) == (
        f'<textarea name="notes" class="{BORDERED}" rows="15">a &lt; b</textarea>'
    )


def test_text_area_input_with_mod():
    mod = TextAreaInputMod(rows_count=4, placeholder="Write here")
    el = TextAreaInput().text_area_input("notes", "", mod)
    assert el.attributes["rows"] == "4"
    assert el.attributes["placeholder"] == "Write here"


def test_text_area_input_alp():
    el = TextAreaInputAlp().text_area_input(
        "notes", TextAreaInputAlpMod(attributes={"rows": "3"})
    )
    assert el.attributes == {"rows": "3", "x-model": "notes", "class": BORDERED}
    assert TextAreaInputAlp().text_area_input("notes").attributes["x-model"] == "notes"


def test_text_input():
    assert render(TextInput().text_input("plant_name", "Cherry Tomatoes")) == (
        f'<input type="text" name="plant_name" value="Cherry Tomatoes" class="{BORDERED}" '
        'role="textbox">'
    )


def test_text_input_showcase_case():
    el = TextInput().text_input("Sample text", "text-input-1")
    assert el.attributes["name"] == "Sample text"
    assert el.attributes["value"] == "text-input-1"


def test_text_input_alp():
    assert render(TextInputAlp().text_input("garden_notes")) == (
        f'<input type="text" x-model="garden_notes" class="{BORDERED}">'
    )