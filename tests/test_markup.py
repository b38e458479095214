import html
from html.parser import HTMLParser

import pytest

from kitcla.markup import Element, Raw, element, render


class _Collector(HTMLParser):
    def __init__(self):
        super().__init__()
        self.starts = []
        self.data = []

    def handle_starttag(self, tag, attrs):
        self.starts.append((tag, attrs))

    def handle_data(self, data):
        self.data.append(data)


def _parse(text):
    collector = _Collector()
    collector.feed(text)
    collector.close()
    return collector


def test_render_simple_element():
    assert render(element("p", "hello")) == "<p>hello</p>"


def test_text_is_escaped_and_round_trips():
    text = '<b>&"x"</b>'
    out = render(element("span", text))
    assert "<b>" not in out
    assert html.unescape(out[len("<span>"):-len("</span>")]) == text


def test_attribute_values_round_trip():
    value = 'a"b<c&d'
    out = element("a", {"title": value, "href": "/x"}).render()
    parsed = _parse(out)
    assert parsed.starts == [("a", [("title", value), ("href", "/x")])]


def test_raw_is_not_escaped():
    raw = "<em>x</em>"
    out = render(element("div", Raw(raw)))
    assert raw in out
    assert out.startswith("<div>")


def test_void_element_has_no_closing_tag():
    out = render(element("input", {"type": "text"}))
    assert out == '<input type="text">'
    assert "</input>" not in out


def test_nested_sequences_are_flattened_and_none_skipped():
    first = element("li", "a")
    second = element("li", "b")
    ul = element("ul", [first, None, [second]])
    assert ul.children == [first, second]
    tags = [tag for tag, _ in _parse(ul.render()).starts]
    assert tags == ["ul", "li", "li"]


def test_later_attributes_override_earlier():
    div = element("div", {"class": "a"}, {"class": "b"})
    assert div.attributes["class"] == "b"


def test_empty_attribute_name_is_skipped():
    out = element("input", {"": "", "name": "x"}).render()
    assert _parse(out).starts == [("input", [("name", "x")])]


def test_unsupported_argument_raises():
    with pytest.raises(TypeError):
        element("div", 3)


def test_render_none_and_sequences():
    a = element("b", "one")
    b = element("i", "two")
    assert render(None) == ""
    assert render([a, b]) == a.render() + b.render()
    assert str(a) == a.render()


def test_element_equality_is_structural():
    assert element("div", {"id": "k"}, "t") == Element("div", {"id": "k"}, ["t"])