from kitcla.component import Component
from kitcla.markup import render
from kitcla.shows import RichTextShow, TextShow


def test_text_show():
    assert render(TextShow().text_show("Plant Status", "Healthy Growth")) == (
        "<div>Healthy Growth</div>"
    )


def test_text_show_escapes_markup():
    out = render(TextShow().text_show("n", "<p>x</p>"))
    assert "<p>" not in out


def test_rich_text_show_keeps_markup():
    value = (
        "<p><strong>Tomato Plant:</strong> A productive variety that thrives in "
        "<em>partial sunlight</em> with regular watering.</p>"
    )
    out = render(RichTextShow().rich_text_show("Plant Description", value))
    assert out == "<div>" + value + "</div>"


def test_shows_showcase():
    c = Component()
    rich = "<p>Welcome to our <strong>comprehensive garden guide</strong>!</p>"
    page = c.dcs(
        "grid grid-cols-1 md:grid-cols-2 gap-6",
        TextShow().text_show("garden_description", "This beautiful garden"),
        RichTextShow().rich_text_show("garden_guide", rich),
    )
    out = render(page)
    assert "This beautiful garden" in out
    assert rich in out
    assert len(page.children) == 2