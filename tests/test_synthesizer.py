import pytest

from fuzepicker.picker.node import DocumentNode, ElementNode, SelectorResult
from fuzepicker.picker.synthesizer import compute_css_selector, compute_xpath, synthesize


@pytest.fixture(name="page")
def page_fixture():
    document = DocumentNode()
    html = document.append(ElementNode("html"))
    html.append(ElementNode("head"))
    body = html.append(ElementNode("body"))
    return document, body


def test_id_short_circuits_both_locators():
    node = ElementNode("span", element_id="main", classes=["a", "b"])
    ElementNode("section", children=[ElementNode("span"), node])

    assert compute_xpath(node) == '//*[@id="main"]'
    assert compute_css_selector(node) == "#main"


def test_lone_div_without_parent():
    node = ElementNode("div")

    assert compute_css_selector(node) == "div"
    assert compute_xpath(node) == "/div"


def test_third_of_five_list_items(page):
    _, body = page
    ul = body.append(ElementNode("ul"))
    items = [ul.append(ElementNode("li")) for _ in range(5)]

    xpath = compute_xpath(items[2])

    assert "li[3]" in xpath
    assert xpath == "/html/body/ul/li[3]"


def test_first_of_several_gets_predicate(page):
    _, body = page
    first = body.append(ElementNode("p"))
    body.append(ElementNode("p"))

    assert compute_xpath(first) == "/html/body/p[1]"


def test_only_child_of_its_tag_is_bare(page):
    _, body = page
    body.append(ElementNode("div"))
    nav = body.append(ElementNode("nav"))
    body.append(ElementNode("div"))

    assert compute_xpath(nav) == "/html/body/nav"


def test_ancestor_id_does_not_short_circuit_xpath(page):
    _, body = page
    wrapper = body.append(ElementNode("div", element_id="wrapper"))
    link = wrapper.append(ElementNode("a"))

    assert compute_xpath(link) == "/html/body/div/a"


def test_css_with_classes_under_parent_id():
    toolbar = ElementNode("div", element_id="toolbar")
    node = toolbar.append(ElementNode("div", classes=["btn", "primary"]))

    assert compute_css_selector(node) == "#toolbar > div.btn.primary"


def test_css_keeps_duplicate_classes():
    node = ElementNode("span", classes=["x", "x"])

    assert compute_css_selector(node) == "span.x.x"


def test_css_parent_without_id_uses_tag(page):
    _, body = page
    section = body.append(ElementNode("section", classes=["hero"]))
    heading = section.append(ElementNode("H1", classes=["title"]))

    assert compute_css_selector(heading) == "section > h1.title"


def test_css_no_prefix_under_body(page):
    _, body = page
    node = body.append(ElementNode("button", classes=["cta"]))

    assert compute_css_selector(node) == "button.cta"


def test_css_root_element_has_no_prefix(page):
    document, _ = page
    html = document.children[0]

    assert compute_css_selector(html) == "html"
    assert compute_xpath(html) == "/html"


def test_tag_names_are_lowercased():
    node = ElementNode("DIV", classes=["Card"])
    ElementNode("MAIN", children=[node])

    assert compute_xpath(node) == "/main/div"
    assert compute_css_selector(node) == "main > div.Card"


def test_document_node_has_no_xpath():
    assert compute_xpath(DocumentNode()) is None


def test_empty_tag_still_yields_strings():
    node = ElementNode("")

    assert compute_css_selector(node) == ""
    assert compute_xpath(node) == "/"


def test_empty_class_entries_are_ignored():
    node = ElementNode("div", classes=[""])

    assert compute_css_selector(node) == "div"


def test_repeated_calls_are_identical(page):
    _, body = page
    ul = body.append(ElementNode("ul"))
    ul.append(ElementNode("li"))
    node = ul.append(ElementNode("li", classes=["active"]))

    assert synthesize(node) == synthesize(node)
    assert compute_xpath(node) == compute_xpath(node) == "/html/body/ul/li[2]"


def test_synthesize_returns_both_locators():
    parent = ElementNode("form", element_id="login")
    node = parent.append(ElementNode("input", classes=["field"]))

    result = synthesize(node)

    assert result == SelectorResult(xpath="/form/input", css_selector="#login > input.field")


def test_result_reflects_tree_after_mutation(page):
    _, body = page
    first = body.append(ElementNode("p"))
    second = body.append(ElementNode("p"))

    assert compute_xpath(second) == "/html/body/p[2]"

    body.remove(first)

    assert compute_xpath(second) == "/html/body/p"
