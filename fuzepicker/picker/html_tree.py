import logging
import re
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from bs4 import BeautifulSoup
from bs4.element import Tag
from soupsieve import SelectorSyntaxError

from fuzepicker.picker.synthesizer import synthesize

logger = logging.getLogger(__name__)

ID_XPATH_PATTERN = re.compile(r'^//\*\[@id=(["\'])(?P<id>.*)\1\]$')
XPATH_STEP_PATTERN = re.compile(r"^(?P<tag>\*|[A-Za-z][\w:-]*)(?:\[(?P<index>\d+)\])?$")


class SoupNode:
    """Node protocol adapter over a BeautifulSoup tag.

    The BeautifulSoup object itself plays the document root and reports
    ``is_element`` as False. Text, comment and doctype siblings are skipped.
    """

    def __init__(self, tag: Tag) -> None:
        self.tag = tag

    @property
    def is_element(self) -> bool:
        return not isinstance(self.tag, BeautifulSoup)

    @property
    def tag_name(self) -> str:
        return self.tag.name or ""

    @property
    def element_id(self) -> Optional[str]:
        value = self.tag.get("id")
        if isinstance(value, list):
            value = " ".join(value)
        return value or None

    @property
    def class_list(self) -> List[str]:
        raw = self.tag.get("class")
        if isinstance(raw, str):
            return raw.split()
        if isinstance(raw, list):
            return [cls for cls in raw if isinstance(cls, str) and cls]
        return []

    @property
    def parent(self) -> Optional["SoupNode"]:
        if self.tag.parent is None:
            return None
        return SoupNode(self.tag.parent)

    def previous_siblings(self) -> Iterator["SoupNode"]:
        for sibling in self.tag.previous_siblings:
            if isinstance(sibling, Tag):
                yield SoupNode(sibling)

    def next_siblings(self) -> Iterator["SoupNode"]:
        for sibling in self.tag.next_siblings:
            if isinstance(sibling, Tag):
                yield SoupNode(sibling)

    def same_node(self, other: Optional["SoupNode"]) -> bool:
        return other is not None and other.tag is self.tag

    def __repr__(self) -> str:
        return f"SoupNode(<{self.tag_name}>)"


@dataclass(frozen=True)
class SelectorCheck:
    xpath: Optional[str]
    css_selector: str
    xpath_matches: int
    css_matches: int
    xpath_resolves: bool
    css_resolves: bool

    @property
    def xpath_unique(self) -> bool:
        return self.xpath_matches == 1 and self.xpath_resolves

    @property
    def css_unique(self) -> bool:
        return self.css_matches == 1 and self.css_resolves


def split_locator(locator: str) -> Tuple[str, str]:
    """Return (kind, value) where kind is "xpath" or "css".

    Playwright style ``xpath=``/``css=`` prefixes are honoured; otherwise a
    leading ``/`` or ``(`` means XPath.
    """
    locator = locator.strip()
    if locator.startswith("xpath="):
        return "xpath", locator[len("xpath="):].strip()
    if locator.startswith("css="):
        return "css", locator[len("css="):].strip()
    if locator.startswith(("/", "(")):
        return "xpath", locator
    return "css", locator


class HtmlDocument:
    def __init__(self, html: str) -> None:
        self.soup = BeautifulSoup(html, "html.parser")

    def elements(self) -> Iterator[SoupNode]:
        for tag in self.soup.find_all(True):
            yield SoupNode(tag)

    def _select_xpath(self, xpath: str) -> List[Tag]:
        match = ID_XPATH_PATTERN.match(xpath)
        if match:
            return self.soup.find_all(attrs={"id": match.group("id")})

        if not xpath.startswith("/") or xpath.startswith("//"):
            logger.debug(f"DEBUG: (_select_xpath) Unsupported XPath: {xpath}")
            return []

        current: List[Tag] = [self.soup]
        for step in xpath[1:].split("/"):
            step_match = XPATH_STEP_PATTERN.match(step)
            if not step_match:
                logger.debug(f"DEBUG: (_select_xpath) Unsupported step '{step}' in {xpath}")
                return []
            tag = step_match.group("tag").lower()
            index = step_match.group("index")

            next_elements: List[Tag] = []
            for element in current:
                children = element.find_all(True if tag == "*" else tag, recursive=False)
                if index is None:
                    next_elements.extend(children)
                elif 0 < int(index) <= len(children):
                    next_elements.append(children[int(index) - 1])
            current = next_elements
            if not current:
                break
        return current

    def _select_css(self, css: str) -> List[Tag]:
        try:
            return self.soup.select(css)
        except (SelectorSyntaxError, NotImplementedError, ValueError) as e:
            logger.debug(f"DEBUG: (_select_css) Invalid selector '{css}': {e}")
            return []

    def select_all(self, locator: str) -> List[SoupNode]:
        if not locator or not locator.strip():
            return []
        kind, value = split_locator(locator)
        tags = self._select_xpath(value) if kind == "xpath" else self._select_css(value)
        return [SoupNode(tag) for tag in tags]

    def find(self, locator: str) -> Optional[SoupNode]:
        matches = self.select_all(locator)
        return matches[0] if matches else None

    def count(self, locator: Optional[str]) -> int:
        if not locator:
            return 0
        return len(self.select_all(locator))

    def verify(self, node: SoupNode) -> SelectorCheck:
        result = synthesize(node)

        xpath_matches = self.select_all(result.xpath) if result.xpath else []
        css_matches = self.select_all(result.css_selector)

        check = SelectorCheck(
            xpath=result.xpath,
            css_selector=result.css_selector,
            xpath_matches=len(xpath_matches),
            css_matches=len(css_matches),
            xpath_resolves=bool(xpath_matches) and node.same_node(xpath_matches[0]),
            css_resolves=bool(css_matches) and node.same_node(css_matches[0]),
        )
        if not check.css_unique:
            logger.debug(
                f"DEBUG: (verify) CSS selector '{check.css_selector}' matched {check.css_matches} element(s)"
            )
        return check


def parse_document(html: str) -> HtmlDocument:
    return HtmlDocument(html)
