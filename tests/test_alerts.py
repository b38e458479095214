import pytest

from kitcla.alerts import Alert, AlertMod
from kitcla.icons import (
    ICON_FAS_CIRCLE_CHECK,
    ICON_FAS_CIRCLE_EXCLAMATION,
    ICON_FAS_CIRCLE_INFO,
    ICON_FAS_CIRCLE_XMARK,
    Icon,
)
from kitcla.markup import render

NAMES = (
    ICON_FAS_CIRCLE_CHECK,
    ICON_FAS_CIRCLE_EXCLAMATION,
    ICON_FAS_CIRCLE_INFO,
    ICON_FAS_CIRCLE_XMARK,
)


@pytest.fixture
def alert():
    icon = Icon()
    for name in NAMES:
        icon.register(name, f'<svg data-name="{name}"></svg>')
    return Alert(icon=icon)


@pytest.mark.parametrize(
    "method, css, icon_name",
    [
        ("success_alert", "bg-teal-100 border-teal-200 text-teal-800", ICON_FAS_CIRCLE_CHECK),
        ("warning_alert", "bg-yellow-50 border-yellow-200 text-yellow-800", ICON_FAS_CIRCLE_EXCLAMATION),
        ("danger_alert", "bg-red-100 border-red-200 text-red-800", ICON_FAS_CIRCLE_XMARK),
        ("info_alert", "bg-blue-100 border-blue-200 text-blue-800", ICON_FAS_CIRCLE_INFO),
    ],
)
def test_kinds(alert, method, css, icon_name):
    html = render(getattr(alert, method)("Watered", "All beds done", None))
    assert css in html
    assert f'data-name="{icon_name}"' in html
    assert "Watered" in html
    assert "All beds done" in html


def test_mod_is_updated_in_place(alert):
    mod = alert.mod_with_description("ignored")
    alert.success_alert("Title", "Final", mod)
    assert mod.description == "Final"
    assert mod.with_icon is True
    assert mod.kind == "success"


def test_without_icon(alert):
    html = render(alert.h(AlertMod(kind="info", title="Note")))
    assert "data-name" not in html
    assert "Note" in html


def test_unknown_kind_raises(alert):
    with pytest.raises(ValueError):
        alert.h(AlertMod(kind="bogus"))


def test_unregistered_icon_raises():
    with pytest.raises(ValueError):
        Alert().success_alert("Title", "Description", None)