import pytest

from fuzepicker.picker.html_tree import parse_document, split_locator
from fuzepicker.picker.synthesizer import compute_css_selector, compute_xpath

PAGE = """
<!DOCTYPE html>
<html>
  <head><title>Shop</title></head>
  <body>
    <!-- navigation -->
    <div id="toolbar">
      <div class="btn primary">Save</div>
      <div class="btn">Cancel</div>
    </div>
    <ul class="menu">
      <li>One</li>
      <li>Two</li>
      <li class="current">Three</li>
      <li>Four</li>
      <li>Five</li>
    </ul>
    <footer><p>Fine print</p></footer>
    <section><span class="tag">a</span></section>
    <section><span class="tag">b</span></section>
  </body>
</html>
"""


@pytest.fixture(name="document")
def document_fixture():
    return parse_document(PAGE)


def test_split_locator():
    assert split_locator("xpath=//a") == ("xpath", "//a")
    assert split_locator("css=div > a") == ("css", "div > a")
    assert split_locator("/html/body") == ("xpath", "/html/body")
    assert split_locator("  ul li ") == ("css", "ul li")


def test_soup_node_reads_tag_id_and_classes(document):
    node = document.find("#toolbar > div.btn.primary")

    assert node.tag_name == "div"
    assert node.element_id is None
    assert node.class_list == ["btn", "primary"]
    assert node.parent.element_id == "toolbar"


def test_text_and_comment_siblings_are_skipped(document):
    toolbar = document.find("#toolbar")

    previous = list(toolbar.previous_siblings())
    following = [sibling.tag_name for sibling in toolbar.next_siblings()]

    assert previous == []
    assert following == ["ul", "footer", "section", "section"]


def test_document_root_is_not_an_element(document):
    html = document.find("html")

    assert html.parent.is_element is False
    assert compute_xpath(html) == "/html"


def test_xpath_for_parsed_list_item(document):
    node = document.find("li.current")

    assert compute_xpath(node) == "/html/body/ul/li[3]"
    assert compute_css_selector(node) == "ul > li.current"


def test_find_by_absolute_xpath(document):
    node = document.find("/html/body/ul/li[3]")

    assert node.class_list == ["current"]


def test_find_by_id_xpath(document):
    node = document.find('//*[@id="toolbar"]')

    assert node.tag_name == "div"
    assert document.count("xpath=//*[@id='toolbar']") == 1


def test_bare_xpath_step_matches_all_children(document):
    assert document.count("/html/body/ul/li") == 5


def test_unknown_locators_resolve_to_nothing(document):
    assert document.find("/html/body/table") is None
    assert document.find("/html/body/ul/li[9]") is None
    assert document.find("//div[contains(@class, 'btn')]") is None
    assert document.find("div[") is None
    assert document.find("") is None
    assert document.count(None) == 0


def test_verify_unique_selectors(document):
    node = document.find("li.current")

    check = document.verify(node)

    assert check.xpath_unique
    assert check.css_unique
    assert check.xpath_matches == 1


def test_verify_reports_shallow_css_collisions(document):
    node = document.find("/html/body/section[2]/span")

    check = document.verify(node)

    assert check.css_selector == "section > span.tag"
    assert check.css_matches == 2
    assert check.css_resolves is False
    assert check.css_unique is False
    assert check.xpath == "/html/body/section[2]/span"
    assert check.xpath_unique


def test_verify_element_with_id(document):
    node = document.find("#toolbar")

    check = document.verify(node)

    assert check.xpath == '//*[@id="toolbar"]'
    assert check.css_selector == "#toolbar"
    assert check.xpath_unique and check.css_unique


def test_fragment_without_html_wrapper():
    document = parse_document("<div><p>a</p><p>b</p></div>")
    node = document.find("/div/p[2]")

    assert node.tag.get_text() == "b"
    assert compute_xpath(node) == "/div/p[2]"
    assert compute_css_selector(node) == "div > p"


def test_whitespace_only_class_attribute():
    document = parse_document('<main><div class="  ">x</div></main>')
    node = document.find("main > div")

    assert node.class_list == []
    assert compute_css_selector(node) == "main > div"


def test_elements_iterates_every_tag(document):
    tags = [node.tag_name for node in document.elements()]

    assert tags[:3] == ["html", "head", "title"]
    assert tags.count("li") == 5
