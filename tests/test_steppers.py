from kitcla.markup import render
from kitcla.steppers import Stepper


def test_add_numbered_step_order():
    mod = Stepper().mod()
    mod.add_numbered_step("sow", "Sow seeds", "1")
    mod.add_numbered_step("water", "Water", "2")
    assert [step.key for step in mod.steps] == ["sow", "water"]
    assert mod.steps[1].label == "Water"


def test_render_lists_every_step():
    stepper = Stepper()
    mod = stepper.mod()
    mod.add_numbered_step("sow", "Sow seeds", "1")
    mod.add_numbered_step("water", "Water", "2")
    mod.add_numbered_step("harvest", "Harvest", "3")
    html = render(stepper.h(mod))
    assert html.count("<li") == 3
    assert html.index("Sow seeds") < html.index("Water") < html.index("Harvest")
    assert "group-last:hidden" in html


def test_empty_stepper_has_no_items():
    html = render(Stepper().h(Stepper().mod()))
    assert "<li" not in html
    assert "relative flex flex-row gap-x-2" in html


def test_static_adds_width():
    stepper = Stepper()
    mod = stepper.mod()
    mod.width = "w-96"
    mod.add_numbered_step("a", "Alpha", "7")
    html = render(stepper.static(mod))
    assert "relative flex flex-row gap-x-2 w-96" in html
    assert "Alpha" in html