from kitcla.component import Component
from kitcla.markup import Raw, render


def test_ccv_sets_class_and_text():
    c = Component()
    el = c.ccv("h1", "title cls", "Hello")
    assert el.tag == "h1"
    assert el.attributes == {"class": "title cls"}
    assert el.children == ["Hello"]


def test_c_and_cc():
    c = Component()
    assert c.c("span").children == []
    assert c.c("span").attributes == {}
    assert c.cc("span", "x y").attributes == {"class": "x y"}


def test_dcs_wraps_children_in_div():
    c = Component()
    a = c.cv("span", "a")
    b = c.cv("span", "b")
    div = c.dcs("grid", a, b)
    assert div.tag == "div"
    assert div.attributes["class"] == "grid"
    assert div.children == [a, b]


def test_cas_and_das_keep_attributes_and_children():
    c = Component()
    child = c.c("i")
    attrs = {"id": "box", "x-data": "{open:false}"}
    assert c.cas("section", attrs, child).attributes == attrs
    das = c.das(attrs, child)
    assert das.tag == "div"
    assert das.children == [child]


def test_none_children_are_skipped():
    c = Component()
    child = c.c("b")
    assert c.ds(None, child, None).children == [child]


def test_dv_with_several_values():
    c = Component()
    el = c.dv("one", "two")
    assert el.children == ["one", "two"]
    assert render(el) == "<div>onetwo</div>"


def test_ca_da_dc_dcv_dav():
    c = Component()
    attrs = {"name": "n"}
    assert c.ca("input", attrs).children == []
    assert c.da(attrs).attributes == attrs
    assert c.dc("css").attributes == {"class": "css"}
    assert c.dcv("css", "v").children == ["v"]
    assert c.dav(attrs, "v").children == ["v"]


def test_templates():
    c = Component()
    child = c.c("p")
    ti = c.ti("open", child)
    tf = c.tf("item in items", child)
    assert ti.tag == "template" and ti.attributes == {"x-if": "open"}
    assert tf.attributes == {"x-for": "item in items"}
    assert tf.children == [child]


def test_wrap_equals_w_and_wa():
    c = Component()
    child = c.c("p")
    assert c.wrap("css", child) == c.w("css", child)
    assert c.wa({"class": "css"}, child) == c.w("css", child)


def test_exp_html_is_unescaped():
    c = Component()
    markup = "<strong>hi</strong>"
    el = c.exp_html(markup)
    assert el.children == [Raw(markup)]
    assert markup in render(el)


def test_or_nil():
    c = Component()
    el = c.c("p")
    assert c.or_nil(el, True) == []
    assert c.or_nil(el, False) == [el]